"""Unit tests for the vector-store layer — models, backends, and IndexWriter."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from pdf_ingest.config import Settings
from pdf_ingest.errors import EmbeddingError, IndexWriteError
from pdf_ingest.ingestion.models import Chunk
from pdf_ingest.vectorstore.models import VectorRecord, flatten_metadata
from pdf_ingest.vectorstore.writer import IndexWriter, get_vector_store


def _chunks(n: int) -> list[Chunk]:
    return [
        Chunk(text=f"chunk text {i}", metadata={"source": "a.pdf", "chunk_index": i, "page": 0})
        for i in range(n)
    ]


# ── VectorRecord / metadata ────────────────────────────────────────────


class TestVectorRecord:
    def test_ids_are_generated_and_unique(self) -> None:
        a = VectorRecord(embedding=[0.1], text="x", namespace="ns")
        b = VectorRecord(embedding=[0.1], text="x", namespace="ns")
        assert a.id and b.id and a.id != b.id

    def test_records_are_immutable(self) -> None:
        rec = VectorRecord(embedding=[0.1], text="x", namespace="ns")
        with pytest.raises(Exception):
            rec.text = "y"  # type: ignore[misc]

    def test_flatten_metadata_keeps_scalars_and_string_lists(self) -> None:
        meta = {
            "source": "a.pdf",
            "page": 2,
            "score": 0.5,
            "ok": True,
            "tags": ["x", "y"],
            "mixed": ["x", 1],
            "nested": {"a": 1},
            "missing": None,
        }
        assert flatten_metadata(meta) == {
            "source": "a.pdf",
            "page": 2,
            "score": 0.5,
            "ok": True,
            "tags": ["x", "y"],
        }


# ── IndexWriter ────────────────────────────────────────────────────────


class TestIndexWriter:
    def test_writes_one_record_per_chunk_in_order(self, store, embeddings) -> None:
        written = IndexWriter(store, embeddings).write(_chunks(3))

        assert written == 3
        assert [r.text for r in store.records] == ["chunk text 0", "chunk text 1", "chunk text 2"]
        assert all(r.namespace == "test-ns" for r in store.records)
        assert store.records[0].embedding == [float(len("chunk text 0")), 1.0, 0.0]
        assert store.records[1].metadata == {"source": "a.pdf", "chunk_index": 1, "page": 0}
        # one embedding request and one upsert per chunk
        assert embeddings.calls == 3
        assert store.calls == 3

    def test_namespace_override(self, store, embeddings) -> None:
        IndexWriter(store, embeddings, namespace="other").write(_chunks(1))
        assert store.records[0].namespace == "other"

    def test_no_chunks_writes_nothing(self, store, embeddings) -> None:
        assert IndexWriter(store, embeddings).write([]) == 0
        assert store.records == []
        assert embeddings.calls == 0

    def test_embedding_failure_on_second_chunk_keeps_first(self, store, embeddings) -> None:
        embeddings.fail_on_call = 2
        writer = IndexWriter(store, embeddings)

        with pytest.raises(EmbeddingError) as exc_info:
            writer.write(_chunks(3))

        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert [r.text for r in store.records] == ["chunk text 0"]

    def test_upsert_failure_raises_index_write_error(self, store, embeddings) -> None:
        store.fail_on_call = 2
        with pytest.raises(IndexWriteError, match="index unavailable"):
            IndexWriter(store, embeddings).write(_chunks(3))
        assert len(store.records) == 1
        assert embeddings.calls == 2


# ── Backends ───────────────────────────────────────────────────────────


class TestPineconeVectorStore:
    def test_upsert_sends_text_in_metadata_and_namespace(self) -> None:
        with patch("pdf_ingest.vectorstore.pinecone_store.Pinecone") as pinecone_cls:
            from pdf_ingest.vectorstore.pinecone_store import PineconeVectorStore

            store = PineconeVectorStore("my-index", "my-ns", api_key="pc-test")
            rec = VectorRecord(
                id="abc", embedding=[0.1, 0.2], text="hello", namespace="my-ns",
                metadata={"source": "a.pdf"},
            )
            store.upsert([rec])

        pinecone_cls.assert_called_once_with(api_key="pc-test")
        pinecone_cls.return_value.Index.assert_called_once_with("my-index")
        index = pinecone_cls.return_value.Index.return_value
        index.upsert.assert_called_once_with(
            vectors=[{"id": "abc", "values": [0.1, 0.2], "metadata": {"source": "a.pdf", "text": "hello"}}],
            namespace="my-ns",
        )

    def test_health_check(self) -> None:
        with patch("pdf_ingest.vectorstore.pinecone_store.Pinecone") as pinecone_cls:
            from pdf_ingest.vectorstore.pinecone_store import PineconeVectorStore

            store = PineconeVectorStore("idx", "ns", api_key="k")
            assert store.health_check() is True
            index = pinecone_cls.return_value.Index.return_value
            index.describe_index_stats.side_effect = RuntimeError("down")
            assert store.health_check() is False


class TestChromaVectorStore:
    def test_upsert_stores_namespace_as_metadata(self) -> None:
        from pdf_ingest.vectorstore.chroma_store import ChromaVectorStore

        client = MagicMock()
        store = ChromaVectorStore("coll", "ns-1", client=client)
        rec = VectorRecord(id="r1", embedding=[1.0], text="hi", namespace="ns-1", metadata={"page": 1})
        store.upsert([rec])

        client.get_or_create_collection.assert_called_once_with("coll")
        client.get_or_create_collection.return_value.upsert.assert_called_once_with(
            ids=["r1"],
            embeddings=[[1.0]],
            documents=["hi"],
            metadatas=[{"page": 1, "namespace": "ns-1"}],
        )

    def test_upsert_drops_list_metadata(self) -> None:
        from pdf_ingest.vectorstore.chroma_store import ChromaVectorStore

        client = MagicMock()
        store = ChromaVectorStore("coll", "ns-1", client=client)
        rec = VectorRecord(
            id="r1", embedding=[1.0], text="hi", namespace="ns-1",
            metadata={"page": 1, "tags": ["x", "y"]},
        )
        store.upsert([rec])

        kwargs = client.get_or_create_collection.return_value.upsert.call_args.kwargs
        assert kwargs["metadatas"] == [{"page": 1, "namespace": "ns-1"}]


class TestGetVectorStore:
    def test_pinecone_backend(self) -> None:
        cfg = Settings(
            vector_store_backend="pinecone",
            pinecone_api_key="k",
            pinecone_index_name="idx",
            index_namespace="ns",
        )
        with patch("pdf_ingest.vectorstore.pinecone_store.Pinecone"):
            store = get_vector_store(cfg)
        assert type(store).__name__ == "PineconeVectorStore"
        assert (store.index_name, store.namespace) == ("idx", "ns")

    def test_chroma_backend(self) -> None:
        cfg = Settings(vector_store_backend="chroma", chroma_collection="c", index_namespace="ns")
        with patch("pdf_ingest.vectorstore.chroma_store.chromadb.HttpClient") as http_client:
            store = get_vector_store(cfg)
        http_client.assert_called_once_with(host=cfg.chroma_host, port=cfg.chroma_port)
        assert (store.index_name, store.namespace) == ("c", "ns")

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unsupported vector_store_backend"):
            get_vector_store(Settings(vector_store_backend="faiss"))
