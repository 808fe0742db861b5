"""Tests for ParagraphChunker."""

import pytest

from semsearch.chunker import ParagraphChunker


class TestParagraphChunkerInit:
    """Tests for constructor validation."""

    def test_defaults(self):
        chunker = ParagraphChunker()
        assert chunker.min_chunk_length == 50
        assert chunker.max_chunk_length == 1000

    def test_non_positive_max_rejected(self):
        with pytest.raises(ValueError, match="max_chunk_length"):
            ParagraphChunker(min_chunk_length=0, max_chunk_length=0)

    def test_min_above_max_rejected(self):
        with pytest.raises(ValueError, match="min_chunk_length"):
            ParagraphChunker(min_chunk_length=200, max_chunk_length=100)

    def test_negative_min_rejected(self):
        with pytest.raises(ValueError, match="min_chunk_length"):
            ParagraphChunker(min_chunk_length=-1, max_chunk_length=100)


class TestParagraphSplitting:
    """Tests for splitting pages on blank lines."""

    def test_intro_and_paragraph(self):
        """A short intro and a longer paragraph become two chunks on page 1, in order."""
        pages = [
            "A short intro.\n\nA longer paragraph about cats and dogs living "
            "together peacefully in harmony for many years."
        ]
        chunker = ParagraphChunker(min_chunk_length=10, max_chunk_length=1000)

        chunks = chunker.chunk(pages, "pets.txt")

        assert [c.content for c in chunks] == [
            "A short intro.",
            "A longer paragraph about cats and dogs living together "
            "peacefully in harmony for many years.",
        ]
        assert all(c.source.page == 1 for c in chunks)
        assert all(c.source.document_name == "pets.txt" for c in chunks)

    def test_whitespace_only_line_separates_paragraphs(self):
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=100)
        chunks = chunker.chunk(["First paragraph.\n   \t\nSecond paragraph."], "doc")
        assert [c.content for c in chunks] == ["First paragraph.", "Second paragraph."]

    def test_windows_line_endings(self):
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=100)
        chunks = chunker.chunk(["First paragraph.\r\n\r\nSecond paragraph."], "doc")
        assert [c.content for c in chunks] == ["First paragraph.", "Second paragraph."]

    def test_single_newline_keeps_paragraph_together(self):
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=100)
        chunks = chunker.chunk(["Line one.\nLine two."], "doc")
        assert [c.content for c in chunks] == ["Line one.\nLine two."]

    def test_short_paragraphs_dropped(self):
        """Chunks below the minimum length are discarded."""
        long_paragraph = "This paragraph is comfortably longer than the fifty character minimum."
        chunker = ParagraphChunker(min_chunk_length=50, max_chunk_length=1000)

        chunks = chunker.chunk([f"Too short.\n\n{long_paragraph}"], "doc")

        assert [c.content for c in chunks] == [long_paragraph]
        assert all(len(c.content) >= 50 for c in chunks)

    def test_all_content_below_minimum(self):
        chunker = ParagraphChunker(min_chunk_length=50, max_chunk_length=1000)
        assert chunker.chunk(["Tiny.\n\nAlso tiny."], "doc") == []

    def test_empty_and_blank_pages(self):
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=100)
        assert chunker.chunk([], "doc") == []
        assert chunker.chunk(["", "   \n\n  "], "doc") == []


class TestPageProvenance:
    """Tests for page numbering."""

    def test_pages_numbered_from_one(self):
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=100)
        chunks = chunker.chunk(["Page one text.", "Page two text."], "doc.pdf")
        assert [(c.content, c.source.page) for c in chunks] == [
            ("Page one text.", 1),
            ("Page two text.", 2),
        ]

    def test_blank_page_keeps_numbering(self):
        """A page with no text still counts toward later page numbers."""
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=100)
        chunks = chunker.chunk(["", "Text on the second page."], "doc.pdf")
        assert len(chunks) == 1
        assert chunks[0].source.page == 2


class TestOversizedParagraphs:
    """Tests for re-splitting paragraphs longer than the maximum."""

    def test_split_on_lines(self):
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=30)
        chunks = chunker.chunk(["Line one is here.\nLine two is here too."], "doc")
        assert [c.content for c in chunks] == ["Line one is here.", "Line two is here too."]

    def test_short_lines_are_packed(self):
        """Lines are joined with a space while the result still fits."""
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=20)
        chunks = chunker.chunk(["alpha\nbeta\ngamma\ndelta epsilon zeta"], "doc")
        assert [c.content for c in chunks] == ["alpha beta gamma", "delta epsilon zeta"]

    def test_split_on_sentences(self):
        """A single long line is split into sentences and greedily repacked."""
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=40)
        chunks = chunker.chunk(
            ["First sentence is here. Second sentence is here. Third one."], "doc"
        )
        assert [c.content for c in chunks] == [
            "First sentence is here.",
            "Second sentence is here. Third one.",
        ]

    def test_chunks_respect_maximum(self):
        paragraph = " ".join(f"Sentence number {i} is short." for i in range(30))
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=100)

        chunks = chunker.chunk([paragraph], "doc")

        assert len(chunks) > 1
        assert all(len(c.content) <= 100 for c in chunks)
        # No text lost or reordered
        assert " ".join(c.content for c in chunks) == paragraph

    def test_oversized_unit_emitted_whole(self):
        """A sentence longer than the maximum is kept intact, not truncated."""
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=10)
        chunks = chunker.chunk(["Supercalifragilistic word"], "doc")
        assert [c.content for c in chunks] == ["Supercalifragilistic word"]

    def test_trailing_text_without_punctuation_kept(self):
        chunker = ParagraphChunker(min_chunk_length=0, max_chunk_length=30)
        chunks = chunker.chunk(["A complete sentence here. and a dangling tail"], "doc")
        assert [c.content for c in chunks] == ["A complete sentence here.", "and a dangling tail"]


class TestDeterminism:
    """Tests for repeatable output."""

    def test_same_input_same_chunks(self, sample_documents_content):
        chunker = ParagraphChunker(min_chunk_length=20, max_chunk_length=60)

        first = chunker.chunk(sample_documents_content, "doc")
        second = chunker.chunk(sample_documents_content, "doc")

        assert [(c.content, c.source) for c in first] == [(c.content, c.source) for c in second]

    def test_rechunking_output_is_stable(self):
        """Chunking the joined chunks again yields the same chunks."""
        long_line = "This opening line is far longer than the limit allows for one chunk " * 2
        page = "\n\n".join([
            "A short paragraph that fits.\nIt keeps its single line break.",
            " ".join(f"Sentence number {i} is short." for i in range(12)),
            f"{long_line.strip()} and then\ncontinues on the next line. A final sentence.",
            "A supercalifragilisticexpialidocious run-on clause that never ends and never stops",
        ])
        chunker = ParagraphChunker(min_chunk_length=20, max_chunk_length=100)

        first = chunker.chunk([page], "doc")
        again = chunker.chunk(["\n\n".join(c.content for c in first)], "doc")

        assert len(first) > 4
        assert [c.content for c in again] == [c.content for c in first]
