"""Vector normalization (L2, L1, none) applied to provider output."""

from __future__ import annotations

import math
from typing import Literal

NormType = Literal["L2", "L1", "none"]


def _l2_norm(vec: list[float]) -> float:
    return math.sqrt(sum(x * x for x in vec)) or 1.0


def _l1_norm(vec: list[float]) -> float:
    return sum(abs(x) for x in vec) or 1.0


def normalize_vector(vec: list[float], norm_type: NormType) -> list[float]:
    """
    Return a normalized copy of vec. Zero vectors stay zero.
    For 'none' (or an unknown type) returns an unchanged copy.
    """
    if norm_type == "L2":
        n = _l2_norm(vec)
    elif norm_type == "L1":
        n = _l1_norm(vec)
    else:
        return list(vec)
    return [x / n for x in vec]


def resolve_norm_type(normalize: bool, normalization_type: str) -> NormType:
    """Effective norm type for a profile: 'none' when disabled, L2 for unknown types."""
    if not normalize:
        return "none"
    return normalization_type if normalization_type in ("L2", "L1") else "L2"  # type: ignore[return-value]
