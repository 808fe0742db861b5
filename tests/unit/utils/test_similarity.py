"""Tests for similarity calculation utilities."""

import pytest

from semsearch.errors import DimensionMismatchError, IntegrationError
from semsearch.utils.similarity import cosine_similarity


class TestCosineSimilarity:
    """Tests for cosine_similarity function."""

    def test_identical_vectors(self):
        """Identical vectors have maximum similarity."""
        vec = [1.0, 0.0, 0.0]
        result = cosine_similarity(vec, vec)
        assert result == 1.0

    def test_opposite_vectors(self):
        """Opposite vectors have minimum similarity."""
        vec1 = [1.0, 0.0, 0.0]
        vec2 = [-1.0, 0.0, 0.0]
        result = cosine_similarity(vec1, vec2)
        assert result == -1.0

    def test_orthogonal_vectors(self):
        """Orthogonal vectors are unrelated."""
        vec1 = [1.0, 0.0, 0.0]
        vec2 = [0.0, 1.0, 0.0]
        result = cosine_similarity(vec1, vec2)
        assert result == 0.0

    def test_magnitude_is_ignored(self):
        """Scaling a vector does not change its similarity."""
        result = cosine_similarity([1.0, 2.0, 3.0], [10.0, 20.0, 30.0])
        assert result == pytest.approx(1.0)

    def test_symmetry(self):
        """sim(a, b) == sim(b, a)."""
        a = [0.3, -0.2, 0.9]
        b = [0.1, 0.4, -0.5]
        assert cosine_similarity(a, b) == cosine_similarity(b, a)

    def test_zero_vector(self):
        """A zero-magnitude vector scores 0 rather than dividing by zero."""
        assert cosine_similarity([0.0, 0.0, 0.0], [1.0, 2.0, 3.0]) == 0.0
        assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0

    def test_dimension_mismatch(self):
        """Raises an integration error for vectors with different dimensions."""
        vec1 = [1.0, 0.0]
        vec2 = [1.0, 0.0, 0.0]
        with pytest.raises(DimensionMismatchError, match="dimension mismatch") as exc_info:
            cosine_similarity(vec1, vec2)

        assert isinstance(exc_info.value, IntegrationError)
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3

    def test_empty_vectors(self):
        """Raises error for empty vectors."""
        with pytest.raises(ValueError, match="cannot be empty"):
            cosine_similarity([], [])

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_values(self, bad):
        """NaN or infinite components raise instead of producing a NaN score."""
        with pytest.raises(IntegrationError, match="non-finite"):
            cosine_similarity([bad, 1.0], [1.0, 0.0])
        with pytest.raises(IntegrationError, match="non-finite"):
            cosine_similarity([1.0, 0.0], [bad, 1.0])

    def test_output_range(self):
        """Output is always in [-1, 1] range."""
        test_cases = [
            ([1.0, 0.0], [1.0, 0.0]),
            ([1.0, 0.0], [-1.0, 0.0]),
            ([1.0, 0.0], [0.0, 1.0]),
            ([0.5, 0.5], [0.5, -0.5]),
            ([0.1, 0.2, 0.3], [0.1, 0.2, 0.3]),
        ]
        for vec1, vec2 in test_cases:
            result = cosine_similarity(vec1, vec2)
            assert -1.0 <= result <= 1.0, f"Result {result} out of range for {vec1}, {vec2}"

    def test_floating_point_precision(self):
        """Handles floating point precision correctly."""
        # Very small vectors
        vec1 = [1e-10, 1e-10]
        vec2 = [1e-10, 1e-10]
        result = cosine_similarity(vec1, vec2)
        assert -1.0 <= result <= 1.0

    def test_high_dimensional_vectors(self):
        """Works with high-dimensional vectors."""
        dim = 384  # all-MiniLM-L6-v2 dimension
        vec1 = [1.0 / dim] * dim
        vec2 = [1.0 / dim] * dim
        result = cosine_similarity(vec1, vec2)
        assert result == pytest.approx(1.0)
