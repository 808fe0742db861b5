"""Extractive question answering over ranked search results.

No text is generated: the answer is a verbatim sentence quoted from the
top-ranked chunk, picked by keyword overlap with the query.
"""

import re
import string
from collections.abc import Sequence

from loguru import logger

from ..entities.search_result import Answer, SearchResult

NO_RESULTS_MESSAGE = "No relevant information found in the uploaded documents."

SENTENCE = re.compile(r"[^.!?]*[.!?]+|[^.!?]+$")
TERMINAL_PUNCTUATION = (".", "!", "?")

# English function words ignored when matching query keywords
STOPWORDS = frozenset({
    "the", "a", "an", "is", "are", "was", "were",
    "what", "how", "why", "when", "where", "which", "who",
    "do", "does", "did", "can", "could", "would", "should", "will",
    "to", "for", "of", "in", "on", "at", "by", "with", "from",
    "and", "or", "but", "not",
    "this", "that", "these", "those", "it", "its",
})


class ExtractiveAnswerer:
    """Selects the best supporting sentence from the top search result.

    Attributes:
        min_sentence_length: Shorter candidate sentences are ignored (terminal
            punctuation not counted)
        focused_sentence_length: Sentences shorter than this get a bonus
        fallback_length: Raw content is cut to this many characters when no
            sentence qualifies
    """

    def __init__(
        self,
        min_sentence_length: int = 20,
        focused_sentence_length: int = 200,
        fallback_length: int = 300,
        stopwords: frozenset[str] = STOPWORDS,
    ):
        self.min_sentence_length = min_sentence_length
        self.focused_sentence_length = focused_sentence_length
        self.fallback_length = fallback_length
        self.stopwords = stopwords

    def answer(self, query: str, ranked_results: Sequence[SearchResult]) -> Answer:
        """Build a quoted answer from the top-ranked result.

        Args:
            query: The user's question
            ranked_results: Search results, best first

        Returns:
            Answer whose sources are the full ranked results
        """
        if not ranked_results:
            return Answer(answer=NO_RESULTS_MESSAGE, sources=[])

        top = ranked_results[0]
        text = self.extract_best_sentence(query, top.content)
        logger.debug(f"Extracted answer from {top.source.document_name} p.{top.source.page}")

        return Answer(answer=text, sources=list(ranked_results))

    def extract_best_sentence(self, query: str, content: str) -> str:
        """Pick and format the sentence of ``content`` that best matches ``query``."""
        sentences = self.split_sentences(content)

        if not sentences:
            content = content.strip()
            if len(content) > self.fallback_length:
                return content[:self.fallback_length] + "..."
            return content

        keywords = self.keywords(query)

        best_sentence = sentences[0]
        best_score = float("-inf")
        for sentence in sentences:
            score = self._score(sentence, keywords)
            # Strict comparison keeps the earliest sentence on ties
            if score > best_score:
                best_score = score
                best_sentence = sentence

        return self._format(best_sentence)

    def split_sentences(self, content: str) -> list[str]:
        """Split content on terminal punctuation, dropping short fragments.

        Length is measured on the sentence text without its terminal
        punctuation, so "!!!" never pushes a fragment over the minimum.
        """
        candidates = (s.strip() for s in SENTENCE.findall(content))
        return [
            s for s in candidates
            if len(s.rstrip("".join(TERMINAL_PUNCTUATION))) >= self.min_sentence_length
        ]

    def keywords(self, query: str) -> list[str]:
        """Distinct lowercase query terms worth matching, in query order."""
        tokens = (token.strip(string.punctuation) for token in query.lower().split())
        return list(dict.fromkeys(
            token for token in tokens
            if len(token) > 2 and token not in self.stopwords
        ))

    def _score(self, sentence: str, keywords: list[str]) -> float:
        sentence_lower = sentence.lower()
        score = float(sum(1 for keyword in keywords if keyword in sentence_lower))

        if len(sentence) < self.focused_sentence_length:
            score += 0.5

        return score

    @staticmethod
    def _format(sentence: str) -> str:
        if sentence.endswith(TERMINAL_PUNCTUATION):
            return f'"{sentence}"'
        return f'"{sentence}..."'
