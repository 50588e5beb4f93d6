"""
Vector store — backends and the embedding + index writer.

Public surface
--------------
- :class:`IndexWriter` — embeds chunks and upserts them one by one.
- :class:`VectorStoreBase` — abstract backend.
- :class:`PineconeVectorStore` — default Pinecone backend.
- :class:`ChromaVectorStore` — Chroma backend.
- :class:`VectorRecord` — record model.
- :func:`get_vector_store` — backend factory driven by settings.
"""

from pdf_ingest.vectorstore.base import VectorStoreBase
from pdf_ingest.vectorstore.models import VectorRecord
from pdf_ingest.vectorstore.writer import IndexWriter, get_vector_store

__all__ = [
    "ChromaVectorStore",
    "IndexWriter",
    "PineconeVectorStore",
    "VectorRecord",
    "VectorStoreBase",
    "get_vector_store",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import client-backed stores to avoid pulling in their SDKs at import time."""
    if name == "PineconeVectorStore":
        from pdf_ingest.vectorstore.pinecone_store import PineconeVectorStore

        return PineconeVectorStore
    if name == "ChromaVectorStore":
        from pdf_ingest.vectorstore.chroma_store import ChromaVectorStore

        return ChromaVectorStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
