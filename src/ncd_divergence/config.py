"""NCDConfig and CompressionAlgorithm for divergence computation.

NCDConfig is a frozen (immutable) dataclass holding the policy constants of
the distance: the compression level shared by all three compressions of one
computation, the upper clamp of the score, and the default compressor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["LEVEL_RANGES", "CompressionAlgorithm", "NCDConfig"]


class CompressionAlgorithm(StrEnum):
    """Which general-purpose compressor backs the default engine.

    - ZSTD: Zstandard via the ``zstandard`` package (levels 1-22).
    - ZLIB: DEFLATE via the standard-library ``zlib`` module (levels 0-9).
    """

    ZSTD = auto()
    ZLIB = auto()


# Inclusive (min, max) compression level accepted by each algorithm.
LEVEL_RANGES: dict[CompressionAlgorithm, tuple[int, int]] = {
    CompressionAlgorithm.ZSTD: (1, 22),
    CompressionAlgorithm.ZLIB: (0, 9),
}


@dataclass(frozen=True, slots=True)
class NCDConfig:
    """Immutable configuration for the divergence engine.

    Attributes:
        compression_level: Level used for every compression within one
            computation.  Defaults to 3, a speed/ratio balance for Zstandard.
        max_score: Upper clamp applied to the raw NCD.  Defaults to 1.5:
            short inputs can overshoot 1.0 because of frame overhead, and the
            clamp keeps that signal while rejecting unbounded values.
        algorithm: Compressor used when the engine is not given an explicit
            backend.
    """

    compression_level: int = 3
    max_score: float = 1.5
    algorithm: CompressionAlgorithm = CompressionAlgorithm.ZSTD

    def __post_init__(self) -> None:
        if isinstance(self.compression_level, bool) or not isinstance(
            self.compression_level, int
        ):
            msg = f"compression_level must be an int, got {self.compression_level!r}"
            raise ValueError(msg)
        try:
            algorithm = CompressionAlgorithm(self.algorithm)
        except ValueError:
            msg = f"unknown compression algorithm: {self.algorithm!r}"
            raise ValueError(msg) from None
        object.__setattr__(self, "algorithm", algorithm)
        low, high = LEVEL_RANGES[algorithm]
        if not low <= self.compression_level <= high:
            msg = (
                f"compression_level must be in [{low}, {high}] for {algorithm}, "
                f"got {self.compression_level}"
            )
            raise ValueError(msg)
        if not self.max_score > 0.0:
            msg = f"max_score must be > 0.0, got {self.max_score}"
            raise ValueError(msg)
