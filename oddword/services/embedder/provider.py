"""
Strategy-backed embedding provider. Owns one-time model initialization, shared by every
request that uses the same provider instance; blocking strategy calls run in a worker thread.
"""

import asyncio
import time

from oddword.config.embedding.models import EmbeddingConfig
from oddword.config.logging import get_logger
from oddword.services.analysis.errors import (
    EmbeddingFailed,
    ProviderInitFailed,
    ProviderNotReady,
)
from oddword.services.embedder.base import BaseEmbeddingProvider, BaseEmbeddingStrategy
from oddword.services.embedder.normalization import normalize_vector, resolve_norm_type
from oddword.services.embedder.strategies import get_embedding_strategy

logger = get_logger(__name__)


class StrategyEmbeddingProvider(BaseEmbeddingProvider):
    """
    Adapts a BaseEmbeddingStrategy to the async one-word-at-a-time provider contract.

    initialize() is memoized: concurrent callers await the same in-flight load, and a
    failed load is forgotten so the next call retries. With lazy_init disabled, embed()
    before initialize() raises ProviderNotReady instead of loading.
    """

    def __init__(
        self,
        config: EmbeddingConfig,
        strategy: BaseEmbeddingStrategy | None = None,
        lazy_init: bool = True,
    ) -> None:
        if strategy is None:
            strategy = get_embedding_strategy(config.strategy)
            if strategy is None:
                raise ValueError(f"Unknown embedding strategy: {config.strategy!r}")
        self._config = config
        self._strategy = strategy
        self._lazy_init = lazy_init
        self._norm_type = resolve_norm_type(config.normalize, config.normalization_type)
        self._init_task: asyncio.Task | None = None
        self._ready = False
        self._last_error: str | None = None

    @property
    def config(self) -> EmbeddingConfig:
        return self._config

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def is_initializing(self) -> bool:
        return self._init_task is not None and not self._init_task.done()

    @property
    def last_error(self) -> str | None:
        """Message of the most recent failed initialization, cleared on success."""
        return self._last_error

    async def _load(self) -> None:
        started = time.perf_counter()
        logger.info(
            "Initializing embedding model",
            extra={"strategy": self._strategy.strategy_name, "model": self._config.model},
        )
        await asyncio.to_thread(self._strategy.load, self._config)
        logger.info(
            "Embedding model initialized",
            extra={
                "strategy": self._strategy.strategy_name,
                "model": self._config.model,
                "elapsed_s": round(time.perf_counter() - started, 3),
            },
        )

    async def initialize(self) -> None:
        """Load the model once. Raises ProviderInitFailed; a later call retries."""
        if self._ready:
            return
        task = self._init_task
        if task is None:
            task = asyncio.create_task(self._load())
            self._init_task = task
        try:
            # shield: a cancelled caller must not cancel the load other requests await
            await asyncio.shield(task)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            if self._init_task is task:
                self._init_task = None
            self._last_error = str(e)
            logger.error(
                "Failed to initialize embedding model",
                extra={"model": self._config.model, "error": str(e)},
            )
            raise ProviderInitFailed(f"Embedding model {self._config.model!r} failed to load", cause=e) from e
        self._ready = True
        self._last_error = None

    async def embed(self, word: str) -> list[float]:
        if not self._ready:
            if not self._lazy_init and not self.is_initializing:
                raise ProviderNotReady("Embedding provider is not initialized")
            await self.initialize()
        try:
            vectors = await asyncio.to_thread(self._strategy.embed, [word], self._config)
        except Exception as e:
            logger.warning(
                "Embedding failed",
                extra={"word": word, "error_type": type(e).__name__},
            )
            raise EmbeddingFailed(word, f"Could not embed {word!r}: {e}", cause=e) from e
        if len(vectors) != 1:
            raise EmbeddingFailed(word, f"Strategy returned {len(vectors)} vectors but expected 1")
        return normalize_vector([float(x) for x in vectors[0]], self._norm_type)

    async def close(self) -> None:
        task = self._init_task
        if task is not None and not task.done():
            task.cancel()
        self._init_task = None
        self._ready = False
