"""Embedding strategy implementations."""

from oddword.services.embedder.base import BaseEmbeddingStrategy
from oddword.services.embedder.strategies.bedrock_strategy import BedrockEmbeddingStrategy
from oddword.services.embedder.strategies.mock_strategy import MockEmbeddingStrategy
from oddword.services.embedder.strategies.openai_strategy import OpenAIEmbeddingStrategy
from oddword.services.embedder.strategies.sentence_transformers_strategy import (
    SentenceTransformersEmbeddingStrategy,
)

STRATEGY_REGISTRY: dict[str, type[BaseEmbeddingStrategy]] = {
    "sentence_transformers": SentenceTransformersEmbeddingStrategy,
    "openai": OpenAIEmbeddingStrategy,
    "bedrock": BedrockEmbeddingStrategy,
    "mock": MockEmbeddingStrategy,
}


def get_embedding_strategy(strategy_name: str) -> BaseEmbeddingStrategy | None:
    """Return an instance of the embedding strategy for the given name, or None."""
    cls = STRATEGY_REGISTRY.get(strategy_name)
    if cls is None:
        return None
    return cls()
