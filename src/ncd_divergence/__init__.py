"""ncd-divergence - compression-based divergence scoring for text pairs."""

from __future__ import annotations

from ncd_divergence.api import compute_ncd, is_divergent, ncd_score
from ncd_divergence.batch import DispersionScorer, compute_batch, dispersion_score
from ncd_divergence.config import CompressionAlgorithm, NCDConfig
from ncd_divergence.engine import DivergenceEngine
from ncd_divergence.probe import ProbeResult, probe
from ncd_divergence.protocols import CompressionBackend
from ncd_divergence.result import DistanceResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "CompressionAlgorithm",
    "CompressionBackend",
    "DispersionScorer",
    "DistanceResult",
    "DivergenceEngine",
    "NCDConfig",
    "ProbeResult",
    "compute_batch",
    "compute_ncd",
    "dispersion_score",
    "is_divergent",
    "ncd_score",
    "probe",
]
