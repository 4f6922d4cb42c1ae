"""Embedding configuration models. Read-only; no business logic."""

from pydantic import BaseModel, Field


class EmbeddingConfig(BaseModel):
    """Embedding strategy and parameters for the word embedding provider."""

    strategy: str = Field(..., description="sentence_transformers|openai|bedrock|mock")
    model: str = Field(..., description="Model identifier")
    normalize: bool = Field(default=True)
    normalization_type: str = Field(default="L2", description="L2|L1|none")
    batch_size: int = Field(default=32, ge=1)
    dimension: int | None = Field(default=None, ge=1, description="Vector size for the mock strategy")
    api_key: str | None = Field(default=None, description="OpenAI API key when strategy is openai")
    region: str | None = Field(default=None, description="AWS region when strategy is bedrock")
