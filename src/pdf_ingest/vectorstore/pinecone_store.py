"""Pinecone implementation of the vector-store abstraction."""

from __future__ import annotations

import logging

from pinecone import Pinecone

from pdf_ingest.config import settings
from pdf_ingest.vectorstore.base import VectorStoreBase
from pdf_ingest.vectorstore.models import VectorRecord

logger = logging.getLogger(__name__)


class PineconeVectorStore(VectorStoreBase):
    """Pinecone-backed vector store.

    The index is assumed to be provisioned already; this class never
    creates or configures it.

    Parameters
    ----------
    index_name:
        Name of the Pinecone index.
    namespace:
        Namespace records are written to.
    api_key:
        Pinecone API key.
    text_key:
        Metadata key the chunk text is stored under.
    """

    def __init__(
        self,
        index_name: str = settings.pinecone_index_name,
        namespace: str = settings.index_namespace,
        *,
        api_key: str = settings.pinecone_api_key,
        text_key: str = "text",
    ) -> None:
        super().__init__(index_name, namespace)
        self.text_key = text_key
        self._client = Pinecone(api_key=api_key)
        self._index = self._client.Index(index_name)

    def upsert(self, records: list[VectorRecord]) -> None:
        vectors = [
            {
                "id": rec.id,
                "values": rec.embedding,
                "metadata": {**rec.metadata, self.text_key: rec.text},
            }
            for rec in records
        ]
        self._index.upsert(vectors=vectors, namespace=self.namespace)
        logger.debug("Upserted %d vectors into %s/%s", len(vectors), self.index_name, self.namespace)

    def health_check(self) -> bool:
        try:
            self._index.describe_index_stats()
            return True
        except Exception:
            logger.warning("Pinecone health-check failed", exc_info=True)
            return False
