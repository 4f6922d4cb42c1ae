"""Tests for settings and embedding profile resolution."""
import pytest

from oddword.config.embedding.static import (
    get_active_profile_name,
    load_embedding_profiles,
    resolve_embedding_config,
)
from oddword.config.settings import Settings


class TestEmbeddingProfiles:
    """Test cases for static.json profile resolution."""

    def test_profiles_load(self):
        profiles = load_embedding_profiles()
        assert {"sentence_default", "openai_default", "bedrock_default", "mock_default"} <= set(profiles)

    def test_active_profile(self):
        config = resolve_embedding_config("active")
        assert get_active_profile_name() == "sentence_default"
        assert config.strategy == "sentence_transformers"
        assert config.model == "sentence-transformers/all-MiniLM-L6-v2"

    def test_strategy_shorthand(self):
        config = resolve_embedding_config("mock")
        assert config.strategy == "mock"
        assert config.dimension == 384

    def test_inline_overrides(self):
        config = resolve_embedding_config("mock_default", {"dimension": 8, "normalize": False})
        assert config.dimension == 8
        assert config.normalize is False
        assert config.strategy == "mock"

    def test_unknown_profile(self):
        with pytest.raises(ValueError, match="Unknown embedding profile"):
            resolve_embedding_config("does_not_exist")


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MIN_WORDS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.min_words == 3
        assert settings.tie_epsilon == 1e-9
        assert settings.embedding_profile == "active"
        assert settings.embedding_lazy_init is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("EMBEDDING_PROFILE", "mock")
        monkeypatch.setenv("MAX_WORDS", "12")
        settings = Settings(_env_file=None)
        assert settings.embedding_profile == "mock"
        assert settings.max_words == 12
