"""CompressionBackend Protocol for the ncd-divergence backend extension point.

Defines the structural interface all compression backends must satisfy.
Users can plug in custom compressors without inheriting from any base class;
any class with a conformant ``compressed_size`` method passes ``isinstance``
checks.

Example::

    import lzma
    from ncd_divergence.protocols import CompressionBackend

    class LzmaBackend:
        def compressed_size(self, data: bytes) -> int:
            return len(lzma.compress(data))

    assert isinstance(LzmaBackend(), CompressionBackend)  # True
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["CompressionBackend"]


@runtime_checkable
class CompressionBackend(Protocol):
    """Structural protocol for compression backends.

    The ``compressed_size`` method must:
    - Accept any byte sequence, including ``b""``.
    - Return the size in bytes of its compressed representation.
    - Be a pure function of its input at the backend's configured level.

    Backends may raise on failure; the engine wraps every backend in
    ``FailSoftCompressor``, which turns failures into the raw byte length.
    """

    def compressed_size(self, data: bytes) -> int: ...
