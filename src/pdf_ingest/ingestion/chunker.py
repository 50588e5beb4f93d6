"""Text chunking strategies."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from pdf_ingest.ingestion.models import Chunk, NormalizedDocument

logger = logging.getLogger(__name__)

DEFAULT_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", ". ", " ", "")


class ChunkSplitter:
    """Split normalised documents into overlapping chunks for embedding.

    Parameters
    ----------
    chunk_size:
        Maximum number of characters per chunk.
    chunk_overlap:
        Number of overlapping characters between consecutive chunks.
    separators:
        Split boundaries in priority order.  The trailing ``""`` makes the
        splitter fall back to hard character cuts.
    """

    def __init__(
        self,
        chunk_size: int = 2000,
        chunk_overlap: int = 400,
        separators: Sequence[str] = DEFAULT_SEPARATORS,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise ValueError(
                f"chunk_overlap ({chunk_overlap}) must be >= 0 and < chunk_size ({chunk_size})"
            )
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            length_function=len,
            separators=list(separators),
            add_start_index=True,
        )

    def split(self, document: NormalizedDocument) -> list[Chunk]:
        """Return the chunks of a single document, in order."""
        if not document.text:
            return []
        parent = Document(
            page_content=document.text,
            metadata={**document.metadata, "source_path": document.source_path},
        )
        return [
            Chunk(text=piece.page_content, metadata={**piece.metadata, "chunk_index": i})
            for i, piece in enumerate(self._splitter.split_documents([parent]))
        ]

    def split_all(self, documents: Iterable[NormalizedDocument]) -> list[Chunk]:
        chunks: list[Chunk] = []
        count = 0
        for doc in documents:
            chunks.extend(self.split(doc))
            count += 1
        logger.info("Produced %d chunks from %d documents", len(chunks), count)
        return chunks
