"""FailSoftCompressor: proxy that never lets a compression failure escape.

Wraps any CompressionBackend-conformant object.  When the wrapped backend
raises, or returns something that is not a non-negative integer, the proxy
reports the input's raw byte length instead, as if the data were
incompressible.  This is the only place the fallback rule lives; backends
themselves are free to raise.

Example::

    from ncd_divergence.fallback import FailSoftCompressor
    from ncd_divergence.backends import ZstdBackend

    compressor = FailSoftCompressor(ZstdBackend(level=3))
    compressor.compressed_size(b"abc")   # always an int, never raises
"""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ncd_divergence.protocols import CompressionBackend

__all__ = ["FailSoftCompressor"]

logger = logging.getLogger(__name__)


class FailSoftCompressor:
    """Fail-soft proxy around any CompressionBackend.

    Satisfies the ``CompressionBackend`` Protocol structurally.  Holds no
    state besides the wrapped backend, so sharing an instance across threads
    is as safe as sharing the backend.

    Args:
        backend: Any object satisfying the ``CompressionBackend`` Protocol.
    """

    def __init__(self, backend: CompressionBackend) -> None:
        self._backend: Any = backend

    @property
    def backend(self) -> CompressionBackend:
        """The wrapped backend."""
        return self._backend  # type: ignore[no-any-return]

    def __repr__(self) -> str:
        return f"FailSoftCompressor({self._backend!r})"

    def compressed_size(self, data: bytes) -> int:
        """Return the compressed size of ``data``, or ``len(data)`` on failure.

        Args:
            data: Bytes to compress.

        Returns:
            The wrapped backend's size when it succeeds with a non-negative
            integer (numpy integer scalars included), as a plain int;
            otherwise the raw byte length of ``data``.
        """
        try:
            size = self._backend.compressed_size(data)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "compression failed in %r on %d bytes, using raw length: %s",
                self._backend,
                len(data),
                exc,
            )
            return len(data)

        checked = _as_size(size)
        if checked is None:
            logger.warning(
                "%r returned invalid size %r on %d bytes, using raw length",
                self._backend,
                size,
                len(data),
            )
            return len(data)
        return checked


def _as_size(value: object) -> int | None:
    """Coerce an integer-like size (``int``, ``numpy.int64``) to ``int``."""
    if isinstance(value, bool):
        return None
    try:
        size = operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        return None
    return size if size >= 0 else None
