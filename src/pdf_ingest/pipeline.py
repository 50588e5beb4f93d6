"""Batch ingestion pipeline.

    load → normalise → chunk → embed + index

Each stage runs to completion before the next one starts.  Any failure is
logged once and re-raised as :class:`~pdf_ingest.errors.IngestionFailedError`.

Usage::

    from pdf_ingest.pipeline import run

    report = run()
    print(report.vectors)
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from pdf_ingest.config import Settings, settings as default_settings
from pdf_ingest.errors import IndexWriteError, IngestionFailedError
from pdf_ingest.ingestion.chunker import ChunkSplitter
from pdf_ingest.ingestion.loader import DocumentLoader
from pdf_ingest.ingestion.normalizer import TextNormalizer
from pdf_ingest.vectorstore.writer import IndexWriter

logger = logging.getLogger(__name__)


class IngestionReport(BaseModel):
    """Counts for a completed run."""

    documents: int = 0
    chunks: int = 0
    vectors: int = 0


def build_writer(settings: Settings) -> IndexWriter:
    """Wire the configured embedding provider and vector store.

    Raises :class:`IndexWriteError` when the store is not reachable.
    """
    from pdf_ingest.ingestion.embedder import get_embedding_function
    from pdf_ingest.vectorstore.writer import get_vector_store

    store = get_vector_store(settings)
    if not store.health_check():
        raise IndexWriteError(f"Vector store {store!r} is not reachable")
    return IndexWriter(store, get_embedding_function(settings))


def run(
    settings: Settings | None = None,
    *,
    loader: DocumentLoader | None = None,
    normalizer: TextNormalizer | None = None,
    splitter: ChunkSplitter | None = None,
    writer: IndexWriter | None = None,
) -> IngestionReport:
    """Ingest every document under ``settings.docs_dir``.

    Collaborators left as *None* are built from *settings*.

    Raises
    ------
    IngestionFailedError
        When any stage fails.  Vectors written before the failure are
        left in the store.
    """
    settings = settings or default_settings
    try:
        if loader is None:
            loader = DocumentLoader(
                settings.docs_dir,
                {ext: DocumentLoader.default_loader(ext) for ext in settings.file_extensions},
            )
        normalizer = normalizer or TextNormalizer(language=settings.nltk_language)
        splitter = splitter or ChunkSplitter(settings.chunk_size, settings.chunk_overlap)

        raw_docs = loader.load()
        normalized = normalizer.normalize_all(raw_docs)
        chunks = splitter.split_all(normalized)
        logger.info("Split %d documents into %d chunks", len(normalized), len(chunks))

        if not chunks:
            logger.warning("No chunks to index")
            vectors = 0
        else:
            if writer is None:
                logger.info("Creating vector store...")
                writer = build_writer(settings)
            vectors = writer.write(chunks)
    except Exception as exc:
        logger.error("error: %s", exc, exc_info=True)
        raise IngestionFailedError() from exc

    return IngestionReport(documents=len(raw_docs), chunks=len(chunks), vectors=vectors)
