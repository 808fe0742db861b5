#!/usr/bin/env python3
"""
SemSearch Demo Application

Demonstrates the ingestion and search flow end to end: a sample text document
is uploaded, split into chunks, embedded and stored, then queried with an
extractive answer.

Usage:
    python main.py                          # built-in sample text
    python main.py report.pdf notes.txt     # your own documents
    EMBEDDER_TYPE=mock python main.py       # no model download
"""

import logging
import sys
from pathlib import Path

# Setup basic logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("main")

from semsearch import (  # noqa: E402
    EmbedderFactory,
    SearchEngine,
    SimilarityRanker,
    configure_logging,
    load_settings,
)


# === Utility Functions ===

def create_sample_document() -> Path:
    """Create a sample document for demonstration."""
    sample_file = Path("sample.txt")
    sample_content = """Semantic search finds passages by meaning rather than by exact keywords.
Each passage is turned into a dense vector by a neural embedding model, and
passages that talk about the same idea end up close together.

Ingestion runs in four steps: the uploaded file is parsed into pages, the pages
are split into paragraph-sized chunks, every chunk is embedded, and the chunks
are stored in memory alongside the name of the document they came from.

At query time the question is embedded with the same model. Every stored chunk
is scored with cosine similarity, chunks below the relevance threshold are
dropped, and the best few are returned in order of decreasing score.

An extractive answer quotes the sentence of the top chunk that shares the most
keywords with the question. Short sentences are preferred when two sentences
match equally well.
"""
    sample_file.write_text(sample_content, encoding="utf-8")
    return sample_file


def main():
    settings = load_settings()
    configure_logging(settings.LOG_LEVEL)

    logger.info(f"Starting SemSearch demo with the '{settings.EMBEDDER_TYPE}' embedder")

    embedder = EmbedderFactory.from_settings(settings)
    if settings.EMBEDDER_TYPE == "mock":
        # Mock vectors carry no meaning, so show every chunk regardless of score
        ranker = SimilarityRanker(default_top_k=3, default_min_score=-1.0)
    else:
        ranker = None

    engine = SearchEngine(embedder, ranker=ranker, settings=settings)

    # 1. Ingestion Phase
    logger.info("--- Phase 1: Ingestion ---")

    paths = [Path(arg) for arg in sys.argv[1:]]
    sample_path = None if paths else create_sample_document()
    try:
        for path in paths or [sample_path]:
            result = engine.ingest_file(path.name, path.read_bytes())
            if result.success:
                logger.info(f"{result.message}: {result.chunk_count} chunks")
            else:
                logger.error(f"Ingestion of {path} failed ({result.reason}): {result.message}")
    finally:
        if sample_path is not None and sample_path.exists():
            sample_path.unlink()

    if not engine.list_documents():
        logger.error("Nothing was ingested")
        sys.exit(1)

    # 2. Search Phase
    logger.info("--- Phase 2: Search ---")

    query = "How are chunks scored at query time?" if sample_path else "What is this document about?"
    logger.info(f"Query: '{query}'")

    response = engine.search(query, include_answer=True, top_k=3)
    if response.message:
        logger.info(response.message)

    logger.info(f"Found {len(response.results)} results:")
    for i, res in enumerate(response.results, 1):
        preview = res.content.replace('\n', ' ')[:100]
        logger.info(f"[{i}] Score: {res.score:.3f} ({res.source.document_name}, page {res.source.page}): {preview}...")

    if response.answer:
        logger.info(f"Answer: {response.answer.answer}")

    logger.info("Demo complete!")


if __name__ == "__main__":
    main()
