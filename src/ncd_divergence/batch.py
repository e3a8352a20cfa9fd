"""Batch computation and multi-sample dispersion.

``compute_batch`` fans independent text pairs out over a thread pool, one
unit of work per pair.  Compression releases the GIL inside ``zstandard``
and ``zlib``, so threads give real parallelism here.

``DispersionScorer`` measures how erratic a generator is across repeated
samples of the same prompt.

Formula:
    pairwise = [engine.compute(texts[i], texts[j]).score
                for all (i, j) pairs with i < j]
    score = clip(mean(pairwise) + std(pairwise), 0.0, max_score)

This means:
- Identical samples: mean~0.1, std~0.0 -> score~0.1
- Consistently reworded: mean=0.4, std=0.0 -> score=0.4
- Erratic (one outlier): mean=0.4, std=0.3 -> score=0.7
"""

from __future__ import annotations

import itertools
import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from ncd_divergence.config import NCDConfig
from ncd_divergence.engine import DivergenceEngine
from ncd_divergence.result import DistanceResult

__all__ = ["DispersionScorer", "compute_batch", "dispersion_score"]


def _normalize_workers(total: int, limit: int | None) -> int:
    cpu = os.cpu_count() or 1
    if limit is None or limit <= 0:
        return max(min(total, cpu), 1)
    return max(min(limit, total), 1)


def compute_batch(
    pairs: Sequence[tuple[str, str]],
    config: NCDConfig | None = None,
    max_workers: int | None = None,
) -> list[DistanceResult]:
    """Compute one ``DistanceResult`` per text pair on a worker pool.

    Args:
        pairs:       ``(text_a, text_b)`` tuples.  Each pair keeps its own
                     order; A is always concatenated first.
        config:      Policy constants shared by every pair.  Defaults to
                     ``NCDConfig()`` when None.
        max_workers: Upper bound on worker threads.  None or <= 0 means one
                     worker per pair, capped at ``os.cpu_count()``.

    Returns:
        A list where item ``i`` is the result for ``pairs[i]``.  Returns
        ``[]`` for empty input without starting a pool.
    """
    if not pairs:
        return []
    engine = DivergenceEngine(config=config)
    workers = _normalize_workers(len(pairs), max_workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(engine.compute, a, b) for a, b in pairs]
        return [future.result() for future in futures]


class DispersionScorer:
    """Measures generator instability across multiple text samples.

    Creates a single ``DivergenceEngine`` reused across all pairwise
    comparisons.  The formula ``mean + std`` penalizes erratic generators
    even when their average divergence looks acceptable.

    Example::

        from ncd_divergence.batch import DispersionScorer

        scorer = DispersionScorer()
        same = ["The cat sleeps."] * 3
        print(scorer.compute(same))   # small

        mixed = ["The cat sleeps.", "Quantum singularities transcend.", "The cat sleeps."]
        print(scorer.compute(mixed))  # larger
    """

    def __init__(self, config: NCDConfig | None = None) -> None:
        """Initialise the scorer with a single reusable engine.

        Args:
            config: Policy constants forwarded to ``DivergenceEngine``.
                Defaults to ``NCDConfig()`` when None.
        """
        self._engine = DivergenceEngine(config=config)

    def compute(self, texts: Sequence[str]) -> float:
        """Compute the dispersion score for a list of texts.

        Args:
            texts: Samples to compare.  All C(N, 2) pairs ``(i, j)`` with
                ``i < j`` are evaluated, each with ``texts[i]`` first.

        Returns:
            A float in [0.0, max_score].  Returns 0.0 for fewer than two
            texts (nothing to compare).
        """
        n = len(texts)
        if n <= 1:
            return 0.0

        pairwise_scores = [
            self._engine.score_only(texts[i], texts[j])
            for i, j in itertools.combinations(range(n), 2)
        ]

        scores = np.array(pairwise_scores, dtype=float)
        mean = float(np.mean(scores))
        std = float(np.std(scores))  # population std (ddof=0)
        return float(np.clip(mean + std, 0.0, self._engine.config.max_score))


def dispersion_score(
    texts: Sequence[str],
    config: NCDConfig | None = None,
) -> float:
    """Return the dispersion score of ``texts``; see ``DispersionScorer``."""
    return DispersionScorer(config=config).compute(texts)
