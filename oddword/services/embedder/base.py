"""Base embedding strategy and provider contracts."""

from abc import ABC, abstractmethod

from oddword.config.embedding.models import EmbeddingConfig


class BaseEmbeddingStrategy(ABC):
    """
    Abstract embedding strategy. Each strategy produces vectors with consistent dimension
    and does not perform normalization (handled by the provider per profile).
    Methods are blocking; the provider runs them off the event loop.
    """

    def load(self, config: EmbeddingConfig) -> None:
        """One-time model or client setup. May raise; called again after a failure."""
        return None

    @abstractmethod
    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        """
        Embed a list of texts. Returns one vector per text in the same order.
        Caller is responsible for preprocessing and normalization.
        """
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'sentence_transformers', 'mock'."""
        ...


class BaseEmbeddingProvider(ABC):
    """
    Narrow async capability the analysis core depends on: one vector per word.
    Implementations own their initialization state.
    """

    @abstractmethod
    async def embed(self, word: str) -> list[float]:
        """Return the embedding vector for a single word. Raises AnalysisError subclasses."""
        ...

    async def initialize(self) -> None:
        """Prepare the provider. Default: nothing to load."""
        return None

    @property
    def is_ready(self) -> bool:
        return True

    async def close(self) -> None:
        return None
