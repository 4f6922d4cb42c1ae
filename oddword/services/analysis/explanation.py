"""Explanation templates for the selected outlier, tiered by its average similarity."""

from collections.abc import Sequence

VERY_LOW_THRESHOLD = 0.30
MODERATE_THRESHOLD = 0.50

TIER_VERY_LOW = "very_low"
TIER_MODERATE = "moderate"
TIER_SUBTLE = "subtle"


def classify_tier(avg_similarity: float) -> str:
    """Map an average similarity fraction to very_low (< 0.30), moderate ([0.30, 0.50)) or subtle (>= 0.50)."""
    if avg_similarity < VERY_LOW_THRESHOLD:
        return TIER_VERY_LOW
    if avg_similarity < MODERATE_THRESHOLD:
        return TIER_MODERATE
    return TIER_SUBTLE


def join_words(words: Sequence[str]) -> str:
    """'a', 'a and b', 'a, b and c'."""
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    return f"{', '.join(words[:-1])} and {words[-1]}"


def explain(odd_word: str, other_words: Sequence[str], avg_similarity: float) -> str:
    """Render the explanation sentence for the outlier."""
    percent = f"{avg_similarity * 100:.1f}"
    others = join_words(other_words)
    tier = classify_tier(avg_similarity)
    if tier == TIER_VERY_LOW:
        return (
            f'"{odd_word}" has very low semantic similarity ({percent}%) to the other words. '
            f"It belongs to a completely different category than {others}."
        )
    if tier == TIER_MODERATE:
        return (
            f'"{odd_word}" shows moderate semantic distance ({percent}% similarity) from the group. '
            f'While {others} share common semantic features, "{odd_word}" represents a different concept.'
        )
    return (
        f'"{odd_word}" has the lowest average similarity ({percent}%) compared to {others}. '
        "The words are broadly related, but the embedding analysis reveals subtle "
        "yet significant semantic differences."
    )
