"""Tests for cosine similarity."""
import pytest

from oddword.services.analysis.similarity import cosine_similarity, similarity_matrix


class TestCosineSimilarity:
    """Test cases for cosine_similarity."""

    def test_symmetry(self):
        """similarity(a, b) == similarity(b, a)."""
        pairs = [
            ([1.0, 2.0, 3.0], [-0.5, 4.0, 0.25]),
            ([0.3, -0.7], [0.9, 0.1]),
            ([1e-3, 5.0, -2.0, 0.0], [7.0, -1.0, 0.5, 3.0]),
        ]
        for a, b in pairs:
            assert cosine_similarity(a, b) == cosine_similarity(b, a)

    def test_self_similarity_is_one(self):
        """A non-zero vector is fully similar to itself."""
        for vec in ([1.0, 2.0, 3.0], [0.001, -0.002], [-4.0]):
            assert cosine_similarity(vec, vec) == pytest.approx(1.0)

    def test_zero_vector_returns_zero(self):
        """Zero magnitude does not raise and yields 0.0."""
        assert cosine_similarity([1.0, 2.0], [0.0, 0.0]) == 0.0
        assert cosine_similarity([0.0, 0.0], [1.0, 2.0]) == 0.0
        assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0

    def test_orthogonal_and_opposite(self):
        """Orthogonal vectors score 0, opposite vectors score -1."""
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)
        assert cosine_similarity([1.0, 2.0], [-1.0, -2.0]) == pytest.approx(-1.0)

    def test_scale_invariance(self):
        """Magnitude does not change the result."""
        a = [1.0, 2.0, 3.0]
        b = [2.0, 1.0, 0.5]
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity([x * 10 for x in a], b))

    def test_result_within_range(self):
        """Values never leave [-1, 1] even with rounding."""
        vec = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7]
        value = cosine_similarity(vec, [x * 3 for x in vec])
        assert -1.0 <= value <= 1.0

    def test_dimension_mismatch_raises(self):
        """Vectors of different length are rejected."""
        with pytest.raises(ValueError):
            cosine_similarity([1.0, 2.0], [1.0, 2.0, 3.0])

    def test_empty_vectors_raise(self):
        """Vectors need at least one dimension."""
        with pytest.raises(ValueError):
            cosine_similarity([], [])


class TestSimilarityMatrix:
    """Test cases for similarity_matrix."""

    def test_matrix_is_symmetric(self, fruit_vectors):
        """Mirrored upper triangle gives exactly equal entries."""
        matrix = similarity_matrix(list(fruit_vectors.values()))
        n = len(matrix)
        for i in range(n):
            for j in range(n):
                assert matrix[i][j] == matrix[j][i]

    def test_matrix_values(self, fruit_vectors):
        """Fruit pairs are 0.8 similar, car pairs 0.1."""
        words = ["apple", "banana", "car", "orange"]
        matrix = similarity_matrix([fruit_vectors[w] for w in words])
        assert matrix[0][1] == pytest.approx(0.8)
        assert matrix[0][3] == pytest.approx(0.8)
        assert matrix[0][2] == pytest.approx(0.1)
        assert matrix[2][3] == pytest.approx(0.1)
        assert matrix[1][1] == pytest.approx(1.0)
