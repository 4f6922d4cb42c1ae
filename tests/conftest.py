"""Shared pytest fixtures for testing."""
import asyncio
import math

import pytest

from oddword.services.analysis.errors import EmbeddingFailed
from oddword.services.embedder.base import BaseEmbeddingProvider


class FakeEmbeddingProvider(BaseEmbeddingProvider):
    """In-memory provider returning fixed vectors and recording every call."""

    def __init__(self, vectors, failures=None, delay=0.0):
        self.vectors = dict(vectors)
        self.failures = dict(failures or {})
        self.delay = delay
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def embed(self, word):
        self.calls.append(word)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if word in self.failures:
                raise self.failures[word]
            if word not in self.vectors:
                raise EmbeddingFailed(word, f"No vector for {word!r}")
            return list(self.vectors[word])
        finally:
            self.in_flight -= 1


@pytest.fixture
def fruit_vectors():
    """
    Unit vectors where apple, banana and orange are mutually 0.8 similar
    and car is 0.1 similar to each fruit.
    """
    shared = math.sqrt(0.8)
    own = math.sqrt(0.2)
    car_shared = 0.1 / shared
    return {
        "apple": [shared, own, 0.0, 0.0, 0.0],
        "banana": [shared, 0.0, own, 0.0, 0.0],
        "car": [car_shared, 0.0, 0.0, 0.0, math.sqrt(1 - car_shared ** 2)],
        "orange": [shared, 0.0, 0.0, own, 0.0],
    }


@pytest.fixture
def fruit_words():
    """Input order used by the fruit scenario."""
    return ["apple", "banana", "car", "orange"]


@pytest.fixture
def fake_provider(fruit_vectors):
    """Fake provider backed by the fruit scenario vectors plus a few animals."""
    vectors = dict(fruit_vectors)
    vectors.update({
        "cat": [1.0, 0.1, 0.0],
        "dog": [0.9, 0.2, 0.0],
        "bird": [0.1, 0.1, 1.0],
    })
    return FakeEmbeddingProvider(vectors)


@pytest.fixture
def make_provider():
    """Factory for FakeEmbeddingProvider with custom vectors/failures."""
    return FakeEmbeddingProvider
