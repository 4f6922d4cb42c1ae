"""
Async analysis pipeline: words -> de-dup + count checks -> concurrent embedding fan-out ->
join -> vector validation -> outlier selection -> explanation -> AnalysisResult.
No retries here; every failure propagates to the caller.
"""

import asyncio
from collections.abc import Sequence

from oddword.config.logging import get_logger
from oddword.services.analysis.errors import (
    AnalysisError,
    AnalysisSuperseded,
    EmbeddingFailed,
    InsufficientUniqueWords,
    InsufficientWords,
    InvalidInput,
)
from oddword.services.analysis.explanation import explain
from oddword.services.analysis.models import AnalysisResult
from oddword.services.analysis.outlier import DEFAULT_TIE_EPSILON, MIN_WORDS, select_outlier, validate_vectors
from oddword.services.embedder.base import BaseEmbeddingProvider
from oddword.services.embedder.preprocessing import deduplicate_words

logger = get_logger(__name__)


async def embed_words(provider: BaseEmbeddingProvider, words: Sequence[str]) -> dict[str, list[float]]:
    """
    Embed every word concurrently and wait for all of them. If any call fails, the
    error for the earliest failing word in input order is raised; no partial mapping escapes.
    """
    results = await asyncio.gather(*(provider.embed(w) for w in words), return_exceptions=True)

    vectors: dict[str, list[float]] = {}
    for word, result in zip(words, results):
        if isinstance(result, AnalysisError):
            raise result
        if isinstance(result, BaseException):
            if isinstance(result, asyncio.CancelledError):
                raise result
            raise EmbeddingFailed(word, f"Could not embed {word!r}: {result}", cause=result) from result
        vectors[word] = result
    return vectors


async def run_analysis(
    words: Sequence[str],
    provider: BaseEmbeddingProvider,
    min_words: int = MIN_WORDS,
    tie_epsilon: float = DEFAULT_TIE_EPSILON,
    max_words: int | None = None,
) -> AnalysisResult:
    """
    Find the word least similar to the rest. words must already be trimmed, lower-cased
    and free of empty tokens. Count checks run before any provider call.
    Raises InsufficientWords, InsufficientUniqueWords, InvalidInput, provider errors, MalformedVector.
    """
    min_words = max(min_words, MIN_WORDS)
    if len(words) < min_words:
        raise InsufficientWords(len(words), min_words)
    if max_words is not None and len(words) > max_words:
        raise InvalidInput(f"At most {max_words} words can be analyzed, got {len(words)}")

    unique, removed = deduplicate_words(words)
    if len(unique) < min_words:
        raise InsufficientUniqueWords(len(unique), min_words, removed)
    if removed:
        logger.info("Removed duplicate words", extra={"duplicates": removed})

    vectors = await embed_words(provider, unique)
    try:
        dimension = validate_vectors(unique, vectors)
    except AnalysisError as e:
        logger.error("Provider returned inconsistent vectors", extra={"error": e.message})
        raise

    selection = select_outlier(unique, vectors, epsilon=tie_epsilon)
    other_words = [w for w in unique if w != selection.odd_word]
    explanation = explain(selection.odd_word, other_words, selection.odd_similarity)

    logger.info(
        "Analysis complete",
        extra={
            "word_count": len(unique),
            "dimension": dimension,
            "odd_word": selection.odd_word,
            "odd_similarity": round(selection.odd_similarity, 4),
        },
    )
    logger.debug(
        "Similarity ranking",
        extra={"ranking": [(e.word, round(e.similarity, 4)) for e in selection.similarities]},
    )
    return AnalysisResult(
        odd_word=selection.odd_word,
        explanation=explanation,
        similarities=selection.similarities,
        duplicates_removed=tuple(removed),
    )


class AnalysisSession:
    """
    Sequence of analyses for one caller where only the newest request counts.
    Starting a new analysis supersedes any in-flight one: the older call still lets its
    embedding calls finish but raises AnalysisSuperseded instead of returning a result.
    """

    def __init__(
        self,
        provider: BaseEmbeddingProvider,
        min_words: int = MIN_WORDS,
        tie_epsilon: float = DEFAULT_TIE_EPSILON,
        max_words: int | None = None,
    ) -> None:
        self._provider = provider
        self._min_words = min_words
        self._tie_epsilon = tie_epsilon
        self._max_words = max_words
        self._generation = 0
        self.latest: AnalysisResult | None = None

    @property
    def generation(self) -> int:
        return self._generation

    async def analyze(self, words: Sequence[str]) -> AnalysisResult:
        self._generation += 1
        generation = self._generation
        self.latest = None
        try:
            result = await run_analysis(
                words,
                self._provider,
                min_words=self._min_words,
                tie_epsilon=self._tie_epsilon,
                max_words=self._max_words,
            )
        except AnalysisError as e:
            if generation != self._generation:
                logger.info("Discarding superseded analysis", extra={"generation": generation})
                raise AnalysisSuperseded("A newer analysis replaced this request", cause=e) from e
            raise
        if generation != self._generation:
            logger.info("Discarding superseded analysis", extra={"generation": generation})
            raise AnalysisSuperseded("A newer analysis replaced this request")
        self.latest = result
        return result
