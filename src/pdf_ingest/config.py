"""Shared configuration loaded from environment / ``.env``."""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # Source documents
    docs_dir: str = Field(default="docs", description="Directory scanned for input documents")
    file_extensions: list[str] = Field(default_factory=lambda: [".pdf"])

    # Chunking
    chunk_size: int = 2000
    chunk_overlap: int = 400

    # Text normalisation
    nltk_language: str = "english"

    # Embedding
    embedding_provider: str = Field(default="openai", description="'openai' or 'huggingface'")
    embedding_model: str = "text-embedding-ada-002"
    openai_api_key: str = Field(default="", description="OpenAI API key")

    # Vector store
    vector_store_backend: str = Field(default="pinecone", description="'pinecone' or 'chroma'")
    pinecone_api_key: str = ""
    pinecone_index_name: str = "pdf-ingest"
    index_namespace: str = "pdf-docs"
    chroma_host: str = "localhost"
    chroma_port: int = 8000
    chroma_collection: str = "pdf_ingest"

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @model_validator(mode="after")
    def _check_chunking(self) -> Settings:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.chunk_overlap < 0 or self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be >= 0 and < chunk_size ({self.chunk_size})"
            )
        return self


# Singleton — import `settings` wherever needed.
settings = Settings()
