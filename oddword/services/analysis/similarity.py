"""Cosine similarity between embedding vectors. Pure and deterministic."""

from __future__ import annotations

import math
from collections.abc import Sequence

EmbeddingVector = Sequence[float]


def _dot(a: EmbeddingVector, b: EmbeddingVector) -> float:
    return math.fsum(x * y for x, y in zip(a, b))


def _magnitude(vec: EmbeddingVector) -> float:
    return math.sqrt(math.fsum(x * x for x in vec))


def cosine_similarity(a: EmbeddingVector, b: EmbeddingVector) -> float:
    """
    Cosine similarity dot(a, b) / (|a| * |b|), clamped to [-1, 1].
    Returns 0.0 when either vector has zero magnitude.
    Raises ValueError for empty vectors or vectors of different length.
    """
    if len(a) != len(b):
        raise ValueError(f"Vector dimensions differ: {len(a)} != {len(b)}")
    if not a:
        raise ValueError("Vectors must have at least one dimension")
    mag_a = _magnitude(a)
    mag_b = _magnitude(b)
    if mag_a == 0.0 or mag_b == 0.0:
        return 0.0
    value = _dot(a, b) / (mag_a * mag_b)
    return max(-1.0, min(1.0, value))


def similarity_matrix(vectors: Sequence[EmbeddingVector]) -> list[list[float]]:
    """
    Pairwise cosine similarity matrix. Upper triangle is computed once and mirrored,
    so matrix[i][j] == matrix[j][i] exactly. Diagonal holds self-similarity.
    """
    n = len(vectors)
    matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = cosine_similarity(vectors[i], vectors[i])
        for j in range(i + 1, n):
            value = cosine_similarity(vectors[i], vectors[j])
            matrix[i][j] = value
            matrix[j][i] = value
    return matrix
