"""Public API functions for ncd-divergence.

This module provides the user-facing functions: compute_ncd, ncd_score and
is_divergent.  Each call creates a fresh DivergenceEngine to guarantee zero
global state between calls.
"""

from __future__ import annotations

from ncd_divergence.config import NCDConfig
from ncd_divergence.engine import DivergenceEngine
from ncd_divergence.result import DistanceResult

__all__ = ["compute_ncd", "is_divergent", "ncd_score"]


def compute_ncd(
    text_a: str,
    text_b: str,
    config: NCDConfig | None = None,
) -> DistanceResult:
    """Compute the normalized compression distance and return the full audit.

    Args:
        text_a: First text.  Concatenated first for the combined compression.
        text_b: Second text.
        config: Policy constants.  Defaults to ``NCDConfig()`` when None.

    Returns:
        A ``DistanceResult`` with score, compressed sizes and raw byte sizes.
    """
    return DivergenceEngine(config=config).compute(text_a, text_b)


def ncd_score(
    text_a: str,
    text_b: str,
    config: NCDConfig | None = None,
) -> float:
    """Return only the divergence score for two texts.

    Returns:
        A float in [0.0, config.max_score].  Near 0.0 means near-identical;
        around 1.0 means maximally different.
    """
    return compute_ncd(text_a, text_b, config=config).score


def is_divergent(
    text_a: str,
    text_b: str,
    threshold: float = 0.5,
    config: NCDConfig | None = None,
) -> bool:
    """Return True if the two texts diverge at or above ``threshold``.

    The default threshold of 0.5 separates reworded variants of the same
    content from texts with no shared vocabulary or structure.

    Args:
        text_a:    First text.
        text_b:    Second text.
        threshold: Minimum score considered divergent.  Defaults to 0.5.
        config:    Policy constants.  Defaults to ``NCDConfig()`` when None.

    Returns:
        True if ``ncd_score(text_a, text_b, config) >= threshold``.
    """
    return ncd_score(text_a, text_b, config=config) >= threshold
