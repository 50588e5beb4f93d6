"""Abstract base class for vector-store backends.

Adding a new backend (Weaviate, Qdrant …) only requires subclassing
:class:`VectorStoreBase` and implementing :meth:`upsert` and
:meth:`health_check`.  The writer is backend-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pdf_ingest.vectorstore.models import VectorRecord


class VectorStoreBase(ABC):
    """Backend-agnostic vector-store interface.

    Parameters
    ----------
    index_name:
        Name of the index / collection.  Must already exist for backends
        that do not create it on demand.
    namespace:
        Logical partition inside the index.
    """

    def __init__(self, index_name: str, namespace: str) -> None:
        self.index_name = index_name
        self.namespace = namespace

    @abstractmethod
    def upsert(self, records: list[VectorRecord]) -> None:
        """Insert or overwrite *records* in the index.

        Implementations let the client library's exceptions propagate;
        the writer maps them to :class:`~pdf_ingest.errors.IndexWriteError`.
        """
        ...

    @abstractmethod
    def health_check(self) -> bool:
        """Return ``True`` when the backend is reachable and ready."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index_name={self.index_name!r}, namespace={self.namespace!r})"
