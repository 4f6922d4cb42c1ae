"""Analysis result records. Immutable once constructed."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SimilarityEntry:
    """A word and its mean cosine similarity to every other word in the request."""

    word: str
    similarity: float

    def to_dict(self) -> dict[str, Any]:
        return {"word": self.word, "similarity": self.similarity}


@dataclass(frozen=True)
class OutlierSelection:
    """Selector output: the outlier, its score, and entries sorted descending."""

    odd_word: str
    odd_similarity: float
    similarities: tuple[SimilarityEntry, ...]


@dataclass(frozen=True)
class AnalysisResult:
    """Final report for one analysis request."""

    odd_word: str
    explanation: str
    similarities: tuple[SimilarityEntry, ...]
    duplicates_removed: tuple[str, ...] = field(default=())

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the external field names (oddWord, explanation, similarities)."""
        return {
            "oddWord": self.odd_word,
            "explanation": self.explanation,
            "similarities": [entry.to_dict() for entry in self.similarities],
            "duplicatesRemoved": list(self.duplicates_removed),
        }
