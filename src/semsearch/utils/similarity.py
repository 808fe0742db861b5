"""Vector similarity calculation utilities."""

import math
from collections.abc import Sequence

from ..errors import DimensionMismatchError, EmbeddingError


def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Calculate cosine similarity between two vectors.

    Args:
        vec1: First vector
        vec2: Second vector

    Returns:
        Similarity score in [-1, 1]; 0.0 when either vector has zero magnitude

    Raises:
        DimensionMismatchError: If vectors have different dimensions
        ValueError: If vectors are empty
        EmbeddingError: If either vector holds NaN or infinite values
    """
    if len(vec1) != len(vec2):
        raise DimensionMismatchError(
            f"Vector dimension mismatch: {len(vec1)} != {len(vec2)}",
            expected=len(vec1),
            actual=len(vec2),
        )

    if not vec1:
        raise ValueError("Vectors cannot be empty")

    dot_product = 0.0
    norm1 = 0.0
    norm2 = 0.0
    for a, b in zip(vec1, vec2):
        dot_product += a * b
        norm1 += a * a
        norm2 += b * b

    if not (math.isfinite(norm1) and math.isfinite(norm2)):
        raise EmbeddingError("Vectors contain non-finite values")

    magnitude = math.sqrt(norm1) * math.sqrt(norm2)
    if magnitude == 0:
        return 0.0

    # Clamp to [-1, 1] to handle floating point errors
    return max(-1.0, min(1.0, dot_product / magnitude))
