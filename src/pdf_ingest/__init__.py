"""
pdf_ingest — batch ingestion of PDF documents into a vector index.

Documents are loaded from a directory, normalised (lowercase, stopwords
removed, stemmed), split into overlapping chunks, embedded and upserted
into a namespaced vector store.  See :func:`pdf_ingest.pipeline.run`.
"""

__version__ = "0.1.0"
