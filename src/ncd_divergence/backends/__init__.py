"""Backends subpackage for ncd-divergence.

Two backends ship with the base install:

    ZstdBackend   # Zstandard (default), levels 1-22
    ZlibBackend   # DEFLATE from the standard library, levels 0-9

All backends satisfy the ``CompressionBackend`` Protocol structurally.
``create_backend`` builds the backend an ``NCDConfig`` asks for.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ncd_divergence.backends.zlib import ZlibBackend
from ncd_divergence.backends.zstd import ZstdBackend
from ncd_divergence.config import CompressionAlgorithm, NCDConfig

if TYPE_CHECKING:
    from ncd_divergence.protocols import CompressionBackend

__all__ = ["ZlibBackend", "ZstdBackend", "create_backend"]


def create_backend(config: NCDConfig | None = None) -> CompressionBackend:
    """Return the backend selected by ``config.algorithm`` at ``config.compression_level``.

    Args:
        config: Engine configuration.  Defaults to ``NCDConfig()`` when None.

    Returns:
        A ``ZstdBackend`` or ``ZlibBackend`` instance.
    """
    config = config if config is not None else NCDConfig()
    if config.algorithm == CompressionAlgorithm.ZLIB:
        return ZlibBackend(level=config.compression_level)
    return ZstdBackend(level=config.compression_level)
