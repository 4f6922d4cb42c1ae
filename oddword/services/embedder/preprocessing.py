"""Word cleaning applied before analysis: trim, lower-case, drop empty tokens, de-duplicate."""

from collections.abc import Iterable


def clean_word(word: str) -> str:
    """Trim surrounding whitespace and lower-case a single token."""
    if not word:
        return ""
    return word.strip().lower()


def clean_words(words: Iterable[str]) -> list[str]:
    """Clean each token and drop the ones that end up empty."""
    cleaned = (clean_word(w) for w in words)
    return [w for w in cleaned if w]


def split_words(raw: str, separator: str = ",") -> list[str]:
    """Split a raw comma-separated string into cleaned, non-empty words."""
    if not raw:
        return []
    return clean_words(raw.split(separator))


def deduplicate_words(words: Iterable[str]) -> tuple[list[str], list[str]]:
    """
    Order-preserving de-duplication. Returns (unique, removed) where removed lists
    each repeated occurrence that was dropped, in input order.
    """
    seen: set[str] = set()
    unique: list[str] = []
    removed: list[str] = []
    for word in words:
        if word in seen:
            removed.append(word)
            continue
        seen.add(word)
        unique.append(word)
    return unique, removed
