"""Embedding provider initialisation — single place to swap providers.

Supports two providers:

1. **OpenAI** (default) — set ``OPENAI_API_KEY``.
2. **HuggingFace** — a local sentence-transformer model named by
   ``EMBEDDING_MODEL``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pdf_ingest.config import Settings, settings as default_settings

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)


def get_embedding_function(settings: Settings | None = None) -> Embeddings:
    """Return the configured LangChain embedding function."""
    settings = settings or default_settings
    provider = settings.embedding_provider.lower()

    if provider == "openai":
        from langchain_openai import OpenAIEmbeddings

        kwargs: dict = {"model": settings.embedding_model}
        if settings.openai_api_key:
            kwargs["api_key"] = settings.openai_api_key
        logger.info("Using OpenAI embeddings: %s", settings.embedding_model)
        return OpenAIEmbeddings(**kwargs)

    if provider == "huggingface":
        from langchain_huggingface import HuggingFaceEmbeddings

        logger.info("Using HuggingFace embeddings: %s", settings.embedding_model)
        return HuggingFaceEmbeddings(model_name=settings.embedding_model)

    raise ValueError(f"Unsupported embedding_provider={settings.embedding_provider!r}")
