"""Chroma implementation of the vector-store abstraction."""

from __future__ import annotations

import logging

import chromadb

from pdf_ingest.config import settings
from pdf_ingest.vectorstore.base import VectorStoreBase
from pdf_ingest.vectorstore.models import VectorRecord

logger = logging.getLogger(__name__)


class ChromaVectorStore(VectorStoreBase):
    """Chroma-backed vector store.

    Chroma collections have no namespaces, so the namespace is written as
    a ``namespace`` metadata field on every record.  List-valued metadata
    is dropped; Chroma accepts scalar values only.

    Parameters
    ----------
    collection_name:
        Name of the Chroma collection.
    namespace:
        Value stored in each record's ``namespace`` metadata field.
    host:
        Chroma server hostname.
    port:
        Chroma server port.
    client:
        Pre-built Chroma client; overrides *host* / *port*.
    """

    def __init__(
        self,
        collection_name: str = settings.chroma_collection,
        namespace: str = settings.index_namespace,
        *,
        host: str = settings.chroma_host,
        port: int = settings.chroma_port,
        client: chromadb.ClientAPI | None = None,
    ) -> None:
        super().__init__(collection_name, namespace)
        self._client = client or chromadb.HttpClient(host=host, port=port)
        self._collection = self._client.get_or_create_collection(collection_name)

    def upsert(self, records: list[VectorRecord]) -> None:
        self._collection.upsert(
            ids=[rec.id for rec in records],
            embeddings=[rec.embedding for rec in records],
            documents=[rec.text for rec in records],
            metadatas=[
                {
                    **{k: v for k, v in rec.metadata.items() if not isinstance(v, list)},
                    "namespace": rec.namespace,
                }
                for rec in records
            ],
        )
        logger.debug("Upserted %d vectors into collection %s", len(records), self.index_name)

    def health_check(self) -> bool:
        try:
            self._client.heartbeat()
            return True
        except Exception:
            logger.warning("Chroma health-check failed", exc_info=True)
            return False
