"""Records written to the vector store."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

_SCALAR_TYPES = (str, int, float, bool)


def flatten_metadata(metadata: dict[str, Any]) -> dict[str, Any]:
    """Keep only values vector stores accept as metadata.

    Scalars pass through, lists are kept when every item is a string,
    ``None`` and nested structures are dropped.
    """
    flat: dict[str, Any] = {}
    for key, value in metadata.items():
        if isinstance(value, _SCALAR_TYPES):
            flat[key] = value
        elif isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            flat[key] = list(value)
    return flat


class VectorRecord(BaseModel):
    """One embedded chunk, written once and never mutated.

    Attributes
    ----------
    id:
        Generated identifier; there is no content-derived key, so
        re-ingesting the same file writes new records.
    embedding:
        Vector returned by the embedding provider.
    text:
        The chunk text the vector was computed from.
    namespace:
        Logical partition of the index the record is written to.
    metadata:
        Chunk metadata (already flattened to scalar values).
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    embedding: list[float]
    text: str
    namespace: str
    metadata: dict[str, Any] = Field(default_factory=dict)
