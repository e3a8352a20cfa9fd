"""Unit tests for the public API functions: compute_ncd, ncd_score, is_divergent."""

from __future__ import annotations

import pytest

from ncd_divergence import (
    CompressionAlgorithm,
    DistanceResult,
    DivergenceEngine,
    NCDConfig,
    compute_ncd,
    is_divergent,
    ncd_score,
)

CAT = "Le chat dort paisiblement sur le canapé rouge."
QUANTUM = "La singularité quantique transcende les paradigmes ontologiques."


class TestComputeNcd:
    """Tests for the compute_ncd() function."""

    def test_returns_distance_result(self) -> None:
        result = compute_ncd("Hello", "World")
        assert isinstance(result, DistanceResult)

    def test_matches_engine(self) -> None:
        assert compute_ncd(CAT, QUANTUM) == DivergenceEngine().compute(CAT, QUANTUM)

    def test_config_passthrough_max_score(self) -> None:
        result = compute_ncd("a", "zz", config=NCDConfig(max_score=0.01))
        assert result.score <= 0.01

    def test_config_passthrough_algorithm(self) -> None:
        config = NCDConfig(algorithm=CompressionAlgorithm.ZLIB, compression_level=9)
        assert compute_ncd(CAT, QUANTUM, config=config) == (
            DivergenceEngine(config=config).compute(CAT, QUANTUM)
        )

    def test_no_global_state_between_calls(self) -> None:
        r1 = compute_ncd(CAT, QUANTUM)
        compute_ncd("something else", "entirely", config=NCDConfig(compression_level=19))
        r2 = compute_ncd(CAT, QUANTUM)
        assert r1 == r2


class TestNcdScore:
    """Tests for the ncd_score() function."""

    def test_returns_float(self) -> None:
        assert isinstance(ncd_score(CAT, QUANTUM), float)

    def test_equals_compute_score(self) -> None:
        assert ncd_score(CAT, QUANTUM) == compute_ncd(CAT, QUANTUM).score

    def test_empty_pair_is_zero(self) -> None:
        assert ncd_score("", "") == pytest.approx(0.0)


class TestIsDivergent:
    """Tests for the is_divergent() function."""

    def test_unrelated_texts_are_divergent(self) -> None:
        assert is_divergent(CAT, QUANTUM) is True

    def test_identical_texts_are_not_divergent(self) -> None:
        assert is_divergent(CAT, CAT) is False

    def test_threshold_zero_always_divergent(self) -> None:
        assert is_divergent(CAT, CAT, threshold=0.0) is True

    def test_threshold_above_max_never_divergent(self) -> None:
        assert is_divergent(CAT, QUANTUM, threshold=1.6) is False

    def test_returns_bool_type(self) -> None:
        assert isinstance(is_divergent("a", "b"), bool)
