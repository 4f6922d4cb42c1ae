"""Sentence Transformers (local) embedding strategy."""

from sentence_transformers import SentenceTransformer

from oddword.config.embedding.models import EmbeddingConfig
from oddword.services.embedder.base import BaseEmbeddingStrategy


class SentenceTransformersEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Local Sentence Transformers. Default model: sentence-transformers/all-MiniLM-L6-v2
    (mean pooling, 384 dimensions). No API key required.
    """

    def __init__(self) -> None:
        self._model: SentenceTransformer | None = None
        self._model_name: str | None = None

    @property
    def strategy_name(self) -> str:
        return "sentence_transformers"

    def load(self, config: EmbeddingConfig) -> None:
        self._get_model(config.model)

    def _get_model(self, model_name: str) -> SentenceTransformer:
        if self._model is None or self._model_name != model_name:
            self._model = SentenceTransformer(model_name)
            self._model_name = model_name
        return self._model

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        model = self._get_model(config.model)
        vectors = model.encode(
            texts,
            batch_size=config.batch_size,
            show_progress_bar=False,
            convert_to_numpy=True,
        )
        return [v.tolist() for v in vectors]
