"""Embedding + index writer.

Embeds each chunk and upserts it before moving on to the next one.  A
failure stops the loop immediately; vectors written before it stay in the
index.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from pdf_ingest.config import Settings, settings as default_settings
from pdf_ingest.errors import EmbeddingError, IndexWriteError
from pdf_ingest.vectorstore.base import VectorStoreBase
from pdf_ingest.vectorstore.models import VectorRecord, flatten_metadata

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

    from pdf_ingest.ingestion.models import Chunk

logger = logging.getLogger(__name__)


def get_vector_store(settings: Settings | None = None) -> VectorStoreBase:
    """Build the backend named by ``settings.vector_store_backend``."""
    settings = settings or default_settings
    backend = settings.vector_store_backend.lower()

    if backend == "pinecone":
        from pdf_ingest.vectorstore.pinecone_store import PineconeVectorStore

        return PineconeVectorStore(
            settings.pinecone_index_name,
            settings.index_namespace,
            api_key=settings.pinecone_api_key,
        )
    if backend == "chroma":
        from pdf_ingest.vectorstore.chroma_store import ChromaVectorStore

        return ChromaVectorStore(
            settings.chroma_collection,
            settings.index_namespace,
            host=settings.chroma_host,
            port=settings.chroma_port,
        )
    raise ValueError(
        f"Unsupported vector_store_backend={settings.vector_store_backend!r}. "
        "Expected 'pinecone' or 'chroma'."
    )


class IndexWriter:
    """Embed chunks one at a time and write them to a vector store.

    Parameters
    ----------
    store:
        Destination backend.
    embeddings:
        LangChain embedding function.
    namespace:
        Namespace stamped on each record; defaults to the store's.
    """

    def __init__(
        self,
        store: VectorStoreBase,
        embeddings: Embeddings,
        *,
        namespace: str | None = None,
    ) -> None:
        self.store = store
        self.embeddings = embeddings
        self.namespace = namespace or store.namespace

    def embed(self, chunk: Chunk) -> list[float]:
        try:
            return self.embeddings.embed_documents([chunk.text])[0]
        except Exception as exc:
            raise EmbeddingError(f"Embedding request failed: {exc}") from exc

    def write(self, chunks: Iterable[Chunk]) -> int:
        """Embed and upsert *chunks* in order; return the number written."""
        written = 0
        for chunk in chunks:
            record = VectorRecord(
                embedding=self.embed(chunk),
                text=chunk.text,
                namespace=self.namespace,
                metadata=flatten_metadata(chunk.metadata),
            )
            try:
                self.store.upsert([record])
            except Exception as exc:
                raise IndexWriteError(f"Upsert into {self.store!r} failed: {exc}") from exc
            written += 1
            logger.debug("Wrote vector %d (%s)", written, record.id)

        logger.info("Wrote %d vectors to %r", written, self.store)
        return written
