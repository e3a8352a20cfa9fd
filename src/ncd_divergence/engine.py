"""DivergenceEngine: Normalized Compression Distance between two texts.

This is the central computation of the package.  It turns two opaque strings
into a bounded, auditable ``DistanceResult`` using three compressions:

    NCD(a, b) = (C(ab) - min(C(a), C(b))) / max(C(a), C(b))

Architecture:
- Texts are encoded to UTF-8 once; raw sizes are byte lengths, not
  character counts.
- The concatenation is A immediately followed by B.  General-purpose
  compressors use earlier bytes as context for later ones, so swapping the
  arguments can change ``compressed_size_combined`` and the score.  That
  asymmetry is a property of the method and is kept as is.
- All three compressions go through the same backend instance, so they
  share one compression level.
- The backend is wrapped in ``FailSoftCompressor``; ``compute`` never raises
  for a compression failure.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ncd_divergence.backends import create_backend
from ncd_divergence.config import NCDConfig
from ncd_divergence.fallback import FailSoftCompressor
from ncd_divergence.result import DistanceResult

if TYPE_CHECKING:
    from ncd_divergence.protocols import CompressionBackend

__all__ = ["DivergenceEngine"]

logger = logging.getLogger(__name__)


def _encode(text: str) -> bytes:
    # surrogatepass keeps lone surrogates from raising; compute stays total.
    return text.encode("utf-8", errors="surrogatepass")


class DivergenceEngine:
    """Compute the normalized compression distance between two texts.

    The engine holds only its (stateless) backend and configuration, so a
    single instance may be shared across threads.

    Example::

        from ncd_divergence.engine import DivergenceEngine

        engine = DivergenceEngine()
        result = engine.compute("Hello", "World")
        print(result.score)        # in [0.0, 1.5]
        print(result.raw_size_a)   # 5
    """

    def __init__(
        self,
        backend: CompressionBackend | None = None,
        config: NCDConfig | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            backend: A CompressionBackend-conformant object.  Defaults to the
                backend ``config.algorithm`` selects, at
                ``config.compression_level``.  An explicit backend keeps its
                own level; ``config.compression_level`` is not applied to it.
            config:  Policy constants.  Defaults to ``NCDConfig()``.
        """
        self._config: NCDConfig = config if config is not None else NCDConfig()
        raw_backend = backend if backend is not None else create_backend(self._config)
        self._compressor = FailSoftCompressor(raw_backend)

    @property
    def config(self) -> NCDConfig:
        """The configuration this engine was built with."""
        return self._config

    @property
    def backend(self) -> CompressionBackend:
        """The underlying (unwrapped) compression backend."""
        return self._compressor.backend

    def compute(self, text_a: str, text_b: str) -> DistanceResult:
        """Compute the divergence of ``text_b`` from ``text_a``.

        Args:
            text_a: First text (e.g. the response to the standard prompt).
            text_b: Second text (e.g. the response to the adversarial prompt).

        Returns:
            A ``DistanceResult`` with the clamped score, the three compressed
            sizes and both raw byte lengths.
        """
        bytes_a = _encode(text_a)
        bytes_b = _encode(text_b)

        size_a = self._compressor.compressed_size(bytes_a)
        size_b = self._compressor.compressed_size(bytes_b)
        size_combined = self._compressor.compressed_size(bytes_a + bytes_b)

        min_c = float(min(size_a, size_b))
        max_c = float(max(size_a, size_b))

        # Both sizes zero only happens for empty input with a backend that
        # reports 0 for b"".
        raw_score = (size_combined - min_c) / max_c if max_c > 0.0 else 0.0
        score = max(0.0, min(raw_score, self._config.max_score))

        logger.debug(
            "ncd=%.4f C(a)=%d C(b)=%d C(ab)=%d |a|=%d |b|=%d",
            score,
            size_a,
            size_b,
            size_combined,
            len(bytes_a),
            len(bytes_b),
        )

        return DistanceResult(
            score=score,
            compressed_size_a=size_a,
            compressed_size_b=size_b,
            compressed_size_combined=size_combined,
            raw_size_a=len(bytes_a),
            raw_size_b=len(bytes_b),
        )

    def score_only(self, text_a: str, text_b: str) -> float:
        """Return just ``compute(text_a, text_b).score``."""
        return self.compute(text_a, text_b).score
