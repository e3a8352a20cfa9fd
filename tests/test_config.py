"""Tests for NCDConfig and CompressionAlgorithm."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from ncd_divergence.config import LEVEL_RANGES, CompressionAlgorithm, NCDConfig


class TestDefaults:
    def test_default_level_is_3(self) -> None:
        assert NCDConfig().compression_level == 3

    def test_default_max_score_is_1_5(self) -> None:
        assert NCDConfig().max_score == pytest.approx(1.5)

    def test_default_algorithm_is_zstd(self) -> None:
        assert NCDConfig().algorithm is CompressionAlgorithm.ZSTD

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            NCDConfig().compression_level = 5  # type: ignore[misc]

    def test_equal_configs_are_equal(self) -> None:
        assert NCDConfig(compression_level=7) == NCDConfig(compression_level=7)


class TestCompressionAlgorithm:
    def test_values_are_lowercase_names(self) -> None:
        assert CompressionAlgorithm.ZSTD == "zstd"
        assert CompressionAlgorithm.ZLIB == "zlib"

    def test_string_algorithm_is_normalized(self) -> None:
        config = NCDConfig(algorithm="zlib", compression_level=6)  # type: ignore[arg-type]
        assert config.algorithm is CompressionAlgorithm.ZLIB

    def test_unknown_algorithm_raises(self) -> None:
        with pytest.raises(ValueError, match="unknown compression algorithm"):
            NCDConfig(algorithm="brotli")  # type: ignore[arg-type]

    def test_level_ranges_cover_every_algorithm(self) -> None:
        assert set(LEVEL_RANGES) == set(CompressionAlgorithm)


class TestLevelValidation:
    @pytest.mark.parametrize("level", [1, 3, 19, 22])
    def test_valid_zstd_levels(self, level: int) -> None:
        assert NCDConfig(compression_level=level).compression_level == level

    @pytest.mark.parametrize("level", [0, -1, 23])
    def test_invalid_zstd_levels(self, level: int) -> None:
        with pytest.raises(ValueError, match="compression_level"):
            NCDConfig(compression_level=level)

    @pytest.mark.parametrize("level", [0, 6, 9])
    def test_valid_zlib_levels(self, level: int) -> None:
        config = NCDConfig(algorithm=CompressionAlgorithm.ZLIB, compression_level=level)
        assert config.compression_level == level

    def test_zlib_rejects_zstd_only_level(self) -> None:
        with pytest.raises(ValueError, match=r"\[0, 9\]"):
            NCDConfig(algorithm=CompressionAlgorithm.ZLIB, compression_level=12)

    def test_non_int_level_raises(self) -> None:
        with pytest.raises(ValueError, match="must be an int"):
            NCDConfig(compression_level=3.5)  # type: ignore[arg-type]

    def test_bool_level_raises(self) -> None:
        with pytest.raises(ValueError, match="must be an int"):
            NCDConfig(compression_level=True)


class TestMaxScoreValidation:
    def test_custom_max_score(self) -> None:
        assert NCDConfig(max_score=1.0).max_score == pytest.approx(1.0)

    @pytest.mark.parametrize("value", [0.0, -0.5])
    def test_non_positive_max_score_raises(self, value: float) -> None:
        with pytest.raises(ValueError, match="max_score"):
            NCDConfig(max_score=value)
