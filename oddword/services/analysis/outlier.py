"""
Outlier selection: average each word's similarity to the rest, pick the globally lowest
(earliest in input order on ties), and rank entries descending for presentation.
"""

import math
from collections.abc import Mapping, Sequence
from functools import cmp_to_key

from oddword.services.analysis.errors import InvalidInput, MalformedVector
from oddword.services.analysis.models import OutlierSelection, SimilarityEntry
from oddword.services.analysis.similarity import EmbeddingVector, similarity_matrix

MIN_WORDS = 3
DEFAULT_TIE_EPSILON = 1e-9


def validate_vectors(words: Sequence[str], vectors: Mapping[str, EmbeddingVector]) -> int:
    """
    Check that every word has a non-empty, finite vector and all vectors share one dimension.
    Returns the shared dimension. Raises InvalidInput or MalformedVector.
    """
    missing = [w for w in words if w not in vectors]
    if missing:
        raise InvalidInput(f"No embedding vector for: {', '.join(missing)}")
    dimension = len(vectors[words[0]])
    if dimension == 0:
        raise MalformedVector(words[0], expected=1, actual=0)
    for word in words[1:]:
        actual = len(vectors[word])
        if actual != dimension:
            raise MalformedVector(word, expected=dimension, actual=actual)
    for word in words:
        if not all(math.isfinite(x) for x in vectors[word]):
            raise MalformedVector(
                word,
                expected=dimension,
                actual=dimension,
                reason=f"Embedding for {word!r} contains NaN or infinite components",
            )
    return dimension


def average_similarities(words: Sequence[str], vectors: Mapping[str, EmbeddingVector]) -> list[float]:
    """Mean similarity of each word to every other word, in input order."""
    matrix = similarity_matrix([vectors[w] for w in words])
    n = len(words)
    averages: list[float] = []
    for i, row in enumerate(matrix):
        total = math.fsum(row[j] for j in range(n) if j != i)
        averages.append(total / (n - 1))
    return averages


def _pick_outlier(averages: Sequence[float], epsilon: float) -> int:
    lowest = min(averages)
    return next(i for i, value in enumerate(averages) if value - lowest <= epsilon)


def _rank_descending(
    words: Sequence[str], averages: Sequence[float], epsilon: float
) -> list[SimilarityEntry]:
    def compare(i: int, j: int) -> int:
        diff = averages[i] - averages[j]
        if abs(diff) <= epsilon:
            return i - j
        return -1 if diff > 0 else 1

    order = sorted(range(len(words)), key=cmp_to_key(compare))
    return [SimilarityEntry(word=words[i], similarity=averages[i]) for i in order]


def select_outlier(
    words: Sequence[str],
    vectors: Mapping[str, EmbeddingVector],
    epsilon: float = DEFAULT_TIE_EPSILON,
) -> OutlierSelection:
    """
    Select the word least similar to the rest of the group.
    words must be distinct and at least MIN_WORDS long; every word needs a vector.
    Averages within epsilon of each other count as equal and resolve by input order.
    """
    if len(words) < MIN_WORDS:
        raise InvalidInput(f"Need at least {MIN_WORDS} words, got {len(words)}")
    if len(set(words)) != len(words):
        raise InvalidInput("Words must be distinct")
    validate_vectors(words, vectors)

    averages = average_similarities(words, vectors)
    odd_index = _pick_outlier(averages, epsilon)
    return OutlierSelection(
        odd_word=words[odd_index],
        odd_similarity=averages[odd_index],
        similarities=tuple(_rank_descending(words, averages, epsilon)),
    )
