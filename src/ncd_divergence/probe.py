"""Probe: fetch a standard/adversarial response pair and measure its divergence.

This is the only module that joins the response providers to the divergence
core.  Provider errors propagate unchanged; the engine only runs once both
responses have been obtained.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ncd_divergence.engine import DivergenceEngine
from ncd_divergence.result import DistanceResult

if TYPE_CHECKING:
    from ncd_divergence.providers.base import ResponseProvider

__all__ = ["ProbeResult", "probe"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Prompts, responses and divergence of one probe run.

    Attributes:
        prompt_standard: Control prompt.
        prompt_adversarial: Perturbed prompt.
        response_standard: Response to ``prompt_standard`` (text A).
        response_adversarial: Response to ``prompt_adversarial`` (text B).
        distance: Divergence of B from A.
    """

    prompt_standard: str
    prompt_adversarial: str
    response_standard: str
    response_adversarial: str
    distance: DistanceResult


def probe(
    provider: ResponseProvider,
    prompt_standard: str,
    prompt_adversarial: str,
    engine: DivergenceEngine | None = None,
) -> ProbeResult:
    """Run both prompts through ``provider`` and compute the divergence.

    Args:
        provider:           Any ``ResponseProvider``; its ``fetch_pair`` runs
                            the two generations in sequence.
        prompt_standard:    Control prompt.
        prompt_adversarial: Perturbed prompt.
        engine:             Engine to score with.  Defaults to
                            ``DivergenceEngine()``.

    Returns:
        A ``ProbeResult`` whose ``distance`` compares the standard response
        (first) with the adversarial response (second).

    Raises:
        ProviderError: Whatever the provider raises while fetching.
    """
    engine = engine if engine is not None else DivergenceEngine()
    response_a, response_b = provider.fetch_pair(prompt_standard, prompt_adversarial)
    distance = engine.compute(response_a, response_b)
    logger.debug(
        "probe divergence=%.4f (%d vs %d bytes)",
        distance.score,
        distance.raw_size_a,
        distance.raw_size_b,
    )
    return ProbeResult(
        prompt_standard=prompt_standard,
        prompt_adversarial=prompt_adversarial,
        response_standard=response_a,
        response_adversarial=response_b,
        distance=distance,
    )
