"""Mock embedding strategy for tests and offline runs. Produces deterministic fake vectors."""

import hashlib

from oddword.config.embedding.models import EmbeddingConfig
from oddword.services.embedder.base import BaseEmbeddingStrategy

MOCK_DEFAULT_DIM = 384


def _mock_vector(text: str, dim: int) -> list[float]:
    # Same text -> same vector across processes (hash() is salted, sha256 is not)
    seed = hashlib.sha256(text.encode("utf-8")).digest()
    values: list[float] = []
    counter = 0
    while len(values) < dim:
        block = hashlib.sha256(seed + counter.to_bytes(4, "big")).digest()
        values.extend((b - 127.5) / 127.5 for b in block)
        counter += 1
    return values[:dim]


class MockEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Deterministic fake embeddings derived from a SHA-256 of the text.
    Dimension from config.dimension or default 384. No semantic meaning.
    """

    @property
    def strategy_name(self) -> str:
        return "mock"

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        dim = config.dimension or MOCK_DEFAULT_DIM
        return [_mock_vector(t, dim) for t in texts]
