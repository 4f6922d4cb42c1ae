"""OpenAI Embedding API strategy."""

from openai import OpenAI

from oddword.config.embedding.models import EmbeddingConfig
from oddword.config.settings import get_settings
from oddword.services.embedder.base import BaseEmbeddingStrategy


class OpenAIEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    OpenAI Embeddings API. Models: text-embedding-3-small, text-embedding-3-large, etc.
    API key from config.api_key or settings.openai_api_key.
    """

    def __init__(self) -> None:
        self._client: OpenAI | None = None

    @property
    def strategy_name(self) -> str:
        return "openai"

    def load(self, config: EmbeddingConfig) -> None:
        api_key = config.api_key or get_settings().openai_api_key or None
        if not api_key:
            raise ValueError("OpenAI API key is required (set in config or OPENAI_API_KEY)")
        self._client = OpenAI(api_key=api_key)

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        if self._client is None:
            self.load(config)
        batch_size = min(config.batch_size, 2048)  # API limit per request
        all_embeddings: list[list[float]] = []
        for i in range(0, len(texts), batch_size):
            batch = texts[i : i + batch_size]
            response = self._client.embeddings.create(model=config.model, input=batch)
            # Preserve order by index
            by_index = {e.index: e.embedding for e in response.data}
            all_embeddings.extend([by_index[j] for j in range(len(batch))])
        return all_embeddings
