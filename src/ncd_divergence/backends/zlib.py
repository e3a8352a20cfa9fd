"""ZlibBackend: DEFLATE compressed-size backend using the standard library."""

from __future__ import annotations

import zlib

from ncd_divergence.config import LEVEL_RANGES, CompressionAlgorithm

__all__ = ["ZlibBackend"]

_MIN_LEVEL, _MAX_LEVEL = LEVEL_RANGES[CompressionAlgorithm.ZLIB]


class ZlibBackend:
    """DEFLATE backend at a fixed compression level.

    Useful when Zstandard is not wanted or when comparing results against
    other zlib-based NCD tooling.  ``zlib.compress`` keeps no state between
    calls, so one instance is safe to share between threads.

    Args:
        level: zlib compression level in [0, 9].  Defaults to 6.

    Raises:
        ValueError: If ``level`` is not an int or is outside [0, 9].
    """

    def __init__(self, level: int = 6) -> None:
        if isinstance(level, bool) or not isinstance(level, int):
            msg = f"zlib level must be an int, got {level!r}"
            raise ValueError(msg)
        if not _MIN_LEVEL <= level <= _MAX_LEVEL:
            msg = f"zlib level must be in [{_MIN_LEVEL}, {_MAX_LEVEL}], got {level}"
            raise ValueError(msg)
        self._level = level

    @property
    def level(self) -> int:
        """The compression level used for every call."""
        return self._level

    def __repr__(self) -> str:
        return f"ZlibBackend(level={self._level})"

    def compressed_size(self, data: bytes) -> int:
        """Return the length of the zlib stream for ``data``."""
        return len(zlib.compress(data, self._level))
