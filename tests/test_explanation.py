"""Tests for explanation tiers and templates."""
import pytest

from oddword.services.analysis.explanation import (
    TIER_MODERATE,
    TIER_SUBTLE,
    TIER_VERY_LOW,
    classify_tier,
    explain,
    join_words,
)


class TestClassifyTier:
    """Tier boundaries: < 0.30, [0.30, 0.50), >= 0.50."""

    @pytest.mark.parametrize(
        "value, tier",
        [
            (-0.2, TIER_VERY_LOW),
            (0.0, TIER_VERY_LOW),
            (0.2999, TIER_VERY_LOW),
            (0.30, TIER_MODERATE),
            (0.4999, TIER_MODERATE),
            (0.50, TIER_SUBTLE),
            (0.95, TIER_SUBTLE),
        ],
    )
    def test_boundaries(self, value, tier):
        assert classify_tier(value) == tier

    def test_exact_boundary_texts(self):
        """0.30 renders the moderate template and 0.50 the subtle one."""
        assert "moderate semantic distance" in explain("x", ["a", "b"], 0.30)
        assert "lowest average similarity" in explain("x", ["a", "b"], 0.50)


class TestJoinWords:
    """Test cases for join_words."""

    def test_join(self):
        assert join_words([]) == ""
        assert join_words(["a"]) == "a"
        assert join_words(["a", "b"]) == "a and b"
        assert join_words(["apple", "banana", "orange"]) == "apple, banana and orange"


class TestExplain:
    """Test cases for explain."""

    def test_very_low_tier(self):
        text = explain("car", ["apple", "banana", "orange"], 0.1)
        assert text == (
            '"car" has very low semantic similarity (10.0%) to the other words. '
            "It belongs to a completely different category than apple, banana and orange."
        )

    def test_moderate_tier(self):
        text = explain("pizza", ["dog", "cat", "bird"], 0.42)
        assert text.startswith('"pizza" shows moderate semantic distance (42.0% similarity) from the group.')
        assert "While dog, cat and bird share common semantic features" in text

    def test_subtle_tier(self):
        text = explain("piano", ["football", "tennis"], 0.6123)
        assert text.startswith('"piano" has the lowest average similarity (61.2%) compared to football and tennis.')
        assert "subtle" in text

    def test_deterministic(self):
        assert explain("a", ["b", "c"], 0.25) == explain("a", ["b", "c"], 0.25)
