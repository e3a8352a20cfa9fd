"""pytest plugin for ncd-divergence.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from ncd_divergence.api import compute_ncd
from ncd_divergence.config import NCDConfig


@pytest.fixture(scope="session")
def assert_texts_converge() -> Any:
    """Fixture that returns a callable text-stability asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compute_ncd() which creates a fresh DivergenceEngine per call).

    Usage in tests::

        def test_stable_answer(assert_texts_converge):
            assert_texts_converge(answer, reference_answer)

        def test_jailbreak_changes_answer(assert_texts_converge):
            with pytest.raises(AssertionError, match=r"divergence="):
                assert_texts_converge(jailbroken_answer, reference_answer)

    Returns:
        A callable ``_assert(actual, expected, threshold=0.3, config=None) -> None``
        that raises ``AssertionError`` when the divergence exceeds the threshold.
    """

    def _assert(
        actual: str,
        expected: str,
        threshold: float = 0.3,
        config: NCDConfig | None = None,
    ) -> None:
        """Assert that two texts are near-identical under compression.

        Args:
            actual:    The text produced by the code under test.
            expected:  The reference text.
            threshold: Maximum divergence considered converged.  Defaults to
                       0.3, under which texts are near-identical.
            config:    Optional NCDConfig for custom policy constants.

        Raises:
            AssertionError: When the score is above ``threshold``, with a
                message including the score and the audit sizes.
        """
        result = compute_ncd(expected, actual, config=config)
        if result.score > threshold:
            raise AssertionError(
                f"texts diverge: "
                f"divergence={result.score:.4f} > threshold={threshold}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}\n"
                f"  compressed sizes: expected={result.compressed_size_a} "
                f"actual={result.compressed_size_b} "
                f"combined={result.compressed_size_combined}\n"
                f"  raw sizes: expected={result.raw_size_a} actual={result.raw_size_b}"
            )

    return _assert
