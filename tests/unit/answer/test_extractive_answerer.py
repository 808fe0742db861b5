"""Tests for ExtractiveAnswerer."""

import pytest

from semsearch.answer import ExtractiveAnswerer
from semsearch.answer.extractive import NO_RESULTS_MESSAGE
from tests.utils.builders import make_result


@pytest.fixture
def answerer():
    return ExtractiveAnswerer()


class TestAnswer:
    """Tests for building an Answer from ranked results."""

    def test_picks_sentence_matching_query(self, answerer):
        """The sentence containing the query keyword wins."""
        results = [make_result("Cats are mammals. Dogs are loyal companions and popular pets.")]

        answer = answerer.answer("what are dogs", results)

        assert answer.answer == '"Dogs are loyal companions and popular pets."'

    def test_uses_only_top_result(self, answerer):
        results = [
            make_result("The top result talks about the weather today.", score=0.9),
            make_result("The second result mentions dogs and more dogs.", score=0.5),
        ]

        answer = answerer.answer("dogs", results)

        assert answer.answer == '"The top result talks about the weather today."'

    def test_sources_are_all_results(self, answerer):
        results = [
            make_result("First chunk with enough text to quote.", score=0.9),
            make_result("Second chunk with enough text to quote.", score=0.7),
        ]

        answer = answerer.answer("chunk", results)

        assert answer.sources == results

    def test_no_results(self, answerer):
        answer = answerer.answer("anything", [])
        assert answer.answer == NO_RESULTS_MESSAGE
        assert answer.sources == []


class TestExtractBestSentence:
    """Tests for sentence selection and formatting."""

    def test_earliest_sentence_wins_ties(self, answerer):
        content = "This first sentence has no keyword. This second one is also unrelated."
        assert answerer.extract_best_sentence("zebra", content) == (
            '"This first sentence has no keyword."'
        )

    def test_more_keywords_beat_fewer(self, answerer):
        content = (
            "Vector search is a useful technique. "
            "Vector search compares embeddings using cosine similarity."
        )
        result = answerer.extract_best_sentence("vector search embeddings", content)
        assert result == '"Vector search compares embeddings using cosine similarity."'

    def test_short_sentence_bonus(self, answerer):
        """Between equal keyword matches, a sentence under 200 chars is preferred."""
        long_sentence = "Dogs " + "really " * 40 + "enjoy walks."
        short_sentence = "Dogs enjoy long walks in the park."
        content = f"{long_sentence} {short_sentence}"

        assert answerer.extract_best_sentence("dogs", content) == f'"{short_sentence}"'

    def test_unpunctuated_sentence_gets_ellipsis(self, answerer):
        content = "Short. A trailing sentence without any final punctuation"
        assert answerer.extract_best_sentence("trailing", content) == (
            '"A trailing sentence without any final punctuation..."'
        )

    def test_keeps_question_and_exclamation_marks(self, answerer):
        content = "Did you know that dogs can smell fear? Dogs are amazing animals!"
        assert answerer.extract_best_sentence("smell", content) == (
            '"Did you know that dogs can smell fear?"'
        )

    def test_fallback_to_raw_content(self, answerer):
        """Content with no qualifying sentence is returned as is."""
        assert answerer.extract_best_sentence("dogs", "Too short.") == "Too short."

    def test_fallback_truncates_long_content(self):
        answerer = ExtractiveAnswerer(min_sentence_length=1000)
        content = "x" * 500

        result = answerer.extract_best_sentence("anything", content)

        assert result == "x" * 300 + "..."

    def test_deterministic(self, answerer):
        content = "Cats are independent animals. Dogs are loyal companions and popular pets."
        first = answerer.extract_best_sentence("loyal pets", content)
        second = answerer.extract_best_sentence("loyal pets", content)
        assert first == second


class TestKeywords:
    """Tests for query keyword extraction."""

    def test_stopwords_and_short_tokens_removed(self, answerer):
        assert answerer.keywords("What is the capital of France") == ["capital", "france"]

    def test_lowercased_and_deduplicated(self, answerer):
        assert answerer.keywords("Dogs DOGS dogs cats") == ["dogs", "cats"]

    def test_punctuation_stripped(self, answerer):
        assert answerer.keywords("where do dogs sleep?") == ["dogs", "sleep"]

    def test_only_stopwords(self, answerer):
        assert answerer.keywords("what is it") == []


class TestSplitSentences:
    """Tests for sentence splitting."""

    def test_short_fragments_dropped(self, answerer):
        content = "Tiny. This sentence is long enough to keep."
        assert answerer.split_sentences(content) == ["This sentence is long enough to keep."]

    def test_no_sentences(self, answerer):
        assert answerer.split_sentences("") == []

    def test_length_excludes_terminal_punctuation(self, answerer):
        """A 19-character sentence stays too short however it is punctuated."""
        content = "Nineteen chars here. Nineteen chars here!!! Twenty characters ok."
        assert answerer.split_sentences(content) == ["Twenty characters ok."]
