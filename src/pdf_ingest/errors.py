"""Exception types raised by the ingestion stages.

Every stage raises a subclass of :class:`IngestionError` chained from the
underlying library exception.  :func:`pdf_ingest.pipeline.run` is the only
place these are caught; it logs them and re-raises a single
:class:`IngestionFailedError`.
"""

from __future__ import annotations


class IngestionError(Exception):
    """Base class for stage-level ingestion failures."""


class DocumentIOError(IngestionError, OSError):
    """The input directory could not be read."""


class ParseError(IngestionError):
    """A single document could not be parsed by its loader."""

    def __init__(self, path: str, message: str = "") -> None:
        self.path = path
        super().__init__(f"Failed to parse {path}" + (f": {message}" if message else ""))


class EmbeddingError(IngestionError):
    """The embedding provider call failed."""


class IndexWriteError(IngestionError):
    """The vector-store upsert failed."""


class IngestionFailedError(RuntimeError):
    """Top-level failure reported once per run."""

    def __init__(self, message: str = "Failed to ingest your data") -> None:
        super().__init__(message)
