"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="oddword-service", description="Service name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Server
    host: str = Field(default="0.0.0.0", description="Listen host")
    port: int = Field(default=8000, ge=1, le=65535, description="Listen port")

    # Embedding provider (see config/embedding/static.json for profiles)
    embedding_profile: str = Field(
        default="active", description="Embedding profile name, strategy name, or 'active'"
    )
    embedding_warmup: bool = Field(default=False, description="Start loading the model at startup")
    embedding_lazy_init: bool = Field(
        default=True, description="Load the model on first embed call when not yet initialized"
    )

    # OpenAI (for embedding strategy)
    openai_api_key: str = Field(default="", description="OpenAI API key for embeddings")

    # AWS Bedrock (for embedding strategy)
    aws_region: str = Field(default="us-east-1", description="AWS region for Bedrock")

    # Analysis
    min_words: int = Field(default=3, ge=3, description="Minimum distinct words per request")
    max_words: int = Field(default=50, ge=3, le=1000, description="Maximum words per request")
    tie_epsilon: float = Field(default=1e-9, ge=0.0, description="Tolerance for equal average similarity")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for app lifetime."""
    return Settings()
