"""Integration tests for the ncd-divergence pytest plugin.

These tests verify that the assert_texts_converge fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require ncd-divergence to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from ncd_divergence import NCDConfig

CAT = "Le chat dort paisiblement sur le canapé rouge."
QUANTUM = "La singularité quantique transcende les paradigmes ontologiques."


def test_fixture_passes_identical_texts(assert_texts_converge: Any) -> None:
    assert_texts_converge(CAT, CAT)


def test_fixture_fails_unrelated_texts(assert_texts_converge: Any) -> None:
    with pytest.raises(AssertionError, match=r"divergence="):
        assert_texts_converge(QUANTUM, CAT)


def test_fixture_custom_threshold(assert_texts_converge: Any) -> None:
    # threshold at the default max_score means any score passes
    assert_texts_converge(QUANTUM, CAT, threshold=1.5)

    with pytest.raises(AssertionError, match=r"divergence="):
        assert_texts_converge(CAT, CAT, threshold=-0.1)


def test_fixture_custom_config(assert_texts_converge: Any) -> None:
    """A tight max_score clamps the divergence under the threshold."""
    assert_texts_converge(QUANTUM, CAT, config=NCDConfig(max_score=0.2))


def test_fixture_error_message_contents(assert_texts_converge: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_texts_converge(QUANTUM, CAT)

    error_message = str(exc_info.value)
    assert "divergence=" in error_message
    assert "threshold=" in error_message
    assert "compressed sizes" in error_message
    assert "raw sizes" in error_message


def test_fixture_returns_callable(assert_texts_converge: Any) -> None:
    assert callable(assert_texts_converge)


def test_plugin_discovery() -> None:
    """Verify assert_texts_converge appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q", "-p", "no:cacheprovider"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_texts_converge" in result.stdout, (
        f"assert_texts_converge not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
