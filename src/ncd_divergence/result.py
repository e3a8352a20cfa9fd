"""DistanceResult dataclass for divergence computation output.

This module provides the auditable result type returned by compute() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DistanceResult"]


@dataclass(frozen=True, slots=True)
class DistanceResult:
    """Result of a single divergence computation.

    Attributes:
        score: Normalized compression distance in [0.0, max_score].  0.0 is
            near-identical; around 1.0 is maximal divergence.
        compressed_size_a: Compressed byte size of text A alone.
        compressed_size_b: Compressed byte size of text B alone.
        compressed_size_combined: Compressed byte size of A immediately
            followed by B, with no separator.
        raw_size_a: UTF-8 byte length of text A (not its character count).
        raw_size_b: UTF-8 byte length of text B.
    """

    score: float
    compressed_size_a: int
    compressed_size_b: int
    compressed_size_combined: int
    raw_size_a: int
    raw_size_b: int
