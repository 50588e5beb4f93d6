"""
Ingestion — document loading, normalisation, and chunking.

Converts a directory of PDF files into normalised, overlapping text chunks
ready to be embedded and written to the vector store.
"""

from pdf_ingest.ingestion.chunker import ChunkSplitter
from pdf_ingest.ingestion.loader import DocumentLoader
from pdf_ingest.ingestion.models import Chunk, NormalizedDocument, RawDocument
from pdf_ingest.ingestion.normalizer import TextNormalizer

__all__ = [
    "Chunk",
    "ChunkSplitter",
    "DocumentLoader",
    "NormalizedDocument",
    "RawDocument",
    "TextNormalizer",
]
