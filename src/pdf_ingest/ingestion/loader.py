"""Document loader — routes files in a directory to LangChain loaders by extension."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from langchain_community.document_loaders import PyPDFLoader

from pdf_ingest.errors import DocumentIOError, ParseError
from pdf_ingest.ingestion.models import RawDocument

if TYPE_CHECKING:
    from langchain_core.document_loaders import BaseLoader

logger = logging.getLogger(__name__)

LoaderFactory = Callable[[str], "BaseLoader"]

DEFAULT_LOADERS: dict[str, LoaderFactory] = {
    ".pdf": PyPDFLoader,
}


class DocumentLoader:
    """Load every file under *directory* whose extension has a registered loader.

    Parameters
    ----------
    directory:
        Root directory containing source documents.
    loaders:
        Mapping of file extension (``".pdf"``) to a factory that takes the
        file path and returns a LangChain loader.  Extensions are matched
        case-insensitively.
    recursive:
        Whether to descend into sub-directories.
    """

    def __init__(
        self,
        directory: str | Path,
        loaders: Mapping[str, LoaderFactory] | None = None,
        *,
        recursive: bool = True,
    ) -> None:
        self.directory = Path(directory)
        self.loaders = {ext.lower(): factory for ext, factory in (loaders or DEFAULT_LOADERS).items()}
        self.recursive = recursive

    @staticmethod
    def default_loader(extension: str) -> LoaderFactory:
        """Return the built-in loader factory for *extension*."""
        try:
            return DEFAULT_LOADERS[extension.lower()]
        except KeyError:
            raise ValueError(f"No loader registered for extension {extension!r}") from None

    def _discover(self) -> list[Path]:
        if not self.directory.is_dir():
            raise DocumentIOError(f"Input directory is not readable: {self.directory}")
        try:
            with os.scandir(self.directory) as entries:
                next(entries, None)
        except OSError as exc:
            raise DocumentIOError(f"Input directory is not readable: {self.directory}: {exc}") from exc
        pattern = "**/*" if self.recursive else "*"
        try:
            return sorted(
                p for p in self.directory.glob(pattern)
                if p.is_file() and p.suffix.lower() in self.loaders
            )
        except OSError as exc:
            raise DocumentIOError(f"Failed to list {self.directory}: {exc}") from exc

    def lazy_load(self) -> Iterator[RawDocument]:
        """Yield documents file by file; raises on the first failure."""
        files = self._discover()
        if not files:
            logger.warning(
                "No files matching %s found in %s", sorted(self.loaders), self.directory
            )
        for path in files:
            factory = self.loaders[path.suffix.lower()]
            try:
                docs = factory(str(path)).load()
            except Exception as exc:
                raise ParseError(str(path), str(exc)) from exc
            logger.debug("Loaded %d document(s) from %s", len(docs), path)
            for doc in docs:
                yield RawDocument(
                    source_path=str(path),
                    content=doc.page_content,
                    metadata=dict(doc.metadata),
                )

    def load(self) -> list[RawDocument]:
        """Load all matching documents eagerly."""
        documents = list(self.lazy_load())
        logger.info("Loaded %d documents from %s", len(documents), self.directory)
        return documents
