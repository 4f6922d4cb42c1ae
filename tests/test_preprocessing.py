"""Tests for word cleaning and de-duplication."""
from oddword.services.embedder.preprocessing import clean_word, clean_words, deduplicate_words, split_words


class TestCleaning:
    """Test cases for clean_word, clean_words and split_words."""

    def test_clean_word(self):
        assert clean_word("  Apple ") == "apple"
        assert clean_word("") == ""

    def test_clean_words_drops_empty(self):
        assert clean_words(["Cat", "  ", "", "DOG "]) == ["cat", "dog"]

    def test_split_words(self):
        assert split_words("apple, Banana ,car,, orange ,") == ["apple", "banana", "car", "orange"]

    def test_split_empty(self):
        assert split_words("") == []
        assert split_words(" , , ") == []


class TestDeduplicate:
    """Test cases for deduplicate_words."""

    def test_preserves_first_occurrence_order(self):
        unique, removed = deduplicate_words(["cat", "dog", "cat", "bird"])
        assert unique == ["cat", "dog", "bird"]
        assert removed == ["cat"]

    def test_no_duplicates(self):
        unique, removed = deduplicate_words(["a", "b", "c"])
        assert unique == ["a", "b", "c"]
        assert removed == []

    def test_repeated_duplicates(self):
        unique, removed = deduplicate_words(["a", "a", "a", "b"])
        assert unique == ["a", "b"]
        assert removed == ["a", "a"]
