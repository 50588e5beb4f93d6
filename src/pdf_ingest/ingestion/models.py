"""Document and chunk models passed between the ingestion stages."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawDocument(BaseModel):
    """Text extracted from one loader unit (a PDF page with ``PyPDFLoader``).

    Attributes
    ----------
    source_path:
        Path of the file the text was read from.
    content:
        Extracted text, untouched.
    metadata:
        Loader-supplied metadata (``source``, ``page``, …).
    """

    model_config = ConfigDict(frozen=True)

    source_path: str
    content: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class NormalizedDocument(BaseModel):
    """A :class:`RawDocument` after lowercasing, stopword removal and stemming."""

    model_config = ConfigDict(frozen=True)

    source_path: str
    text: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class Chunk(BaseModel):
    """A bounded slice of a normalised document — the unit of embedding.

    ``metadata`` carries the parent's metadata plus ``source_path``,
    ``chunk_index`` and ``start_index`` (character offset into the
    parent's normalised text).
    """

    model_config = ConfigDict(frozen=True)

    text: str
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def start_index(self) -> int | None:
        return self.metadata.get("start_index")
