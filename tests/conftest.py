"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from pdf_ingest.ingestion.normalizer import TextNormalizer
from pdf_ingest.vectorstore.base import VectorStoreBase
from pdf_ingest.vectorstore.models import VectorRecord

STOPWORDS = frozenset({"the", "a", "an", "is", "are", "in", "of", "and", "to"})


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


# ── Fakes for external collaborators ────────────────────────────────────


class FakeEmbeddings(Embeddings):
    """Deterministic embeddings; optionally fails on the N-th request."""

    def __init__(self, fail_on_call: int | None = None) -> None:
        self.fail_on_call = fail_on_call
        self.calls = 0

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.calls += 1
        if self.fail_on_call is not None and self.calls == self.fail_on_call:
            raise ConnectionError("embedding provider unavailable")
        return [[float(len(t)), 1.0, 0.0] for t in texts]

    def embed_query(self, text: str) -> list[float]:
        return self.embed_documents([text])[0]


class InMemoryVectorStore(VectorStoreBase):
    """Records upserts in a list; optionally fails on the N-th upsert."""

    def __init__(self, namespace: str = "test-ns", fail_on_call: int | None = None) -> None:
        super().__init__("test-index", namespace)
        self.records: list[VectorRecord] = []
        self.fail_on_call = fail_on_call
        self.calls = 0
        self.healthy = True

    def upsert(self, records: list[VectorRecord]) -> None:
        self.calls += 1
        if self.fail_on_call is not None and self.calls == self.fail_on_call:
            raise RuntimeError("index unavailable")
        self.records.extend(records)

    def health_check(self) -> bool:
        return self.healthy


class PlainTextLoader:
    """Stand-in for a LangChain file loader; reads the file as UTF-8 text."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path

    def load(self) -> list[Document]:
        text = Path(self.file_path).read_text(encoding="utf-8")
        return [Document(page_content=text, metadata={"source": self.file_path, "page": 0})]


class BrokenLoader:
    def __init__(self, file_path: str) -> None:
        self.file_path = file_path

    def load(self) -> list[Document]:
        raise ValueError("EOF marker not found")


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture()
def embeddings() -> FakeEmbeddings:
    return FakeEmbeddings()


@pytest.fixture()
def store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture()
def normalizer() -> TextNormalizer:
    return TextNormalizer(stopwords=STOPWORDS)


@pytest.fixture()
def text_loader() -> type[PlainTextLoader]:
    return PlainTextLoader


@pytest.fixture()
def broken_loader() -> type[BrokenLoader]:
    return BrokenLoader
