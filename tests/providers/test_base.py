"""Tests for LLMConfig, ResponseProvider conformance and create_provider."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from ncd_divergence.providers import (
    AnthropicProvider,
    ApiType,
    BaseProvider,
    LLMConfig,
    OllamaProvider,
    ResponseProvider,
    create_provider,
)


class TestLLMConfigDefaults:
    def test_defaults(self) -> None:
        config = LLMConfig()
        assert config.base_url == "http://localhost:11434"
        assert config.model == "llama3"
        assert config.api_type is ApiType.OLLAMA
        assert config.timeout_secs == pytest.approx(120.0)
        assert config.temperature == pytest.approx(0.7)
        assert config.max_tokens == 2048

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            LLMConfig().model = "gpt-4"  # type: ignore[misc]

    def test_has_no_api_key_field(self) -> None:
        assert not hasattr(LLMConfig(), "api_key")

    def test_root_url_strips_trailing_slash(self) -> None:
        assert LLMConfig(base_url="http://host:1/").root_url == "http://host:1"


class TestLLMConfigValidation:
    def test_non_positive_timeout_raises(self) -> None:
        with pytest.raises(ValueError, match="timeout_secs"):
            LLMConfig(timeout_secs=0)

    def test_zero_max_tokens_raises(self) -> None:
        with pytest.raises(ValueError, match="max_tokens"):
            LLMConfig(max_tokens=0)

    def test_negative_temperature_raises(self) -> None:
        with pytest.raises(ValueError, match="temperature"):
            LLMConfig(temperature=-0.1)


class TestLLMConfigFromEnv:
    def test_unset_environment_gives_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "NCD_LLM_BASE_URL",
            "NCD_LLM_MODEL",
            "NCD_LLM_API_TYPE",
            "NCD_LLM_TIMEOUT",
            "NCD_LLM_TEMPERATURE",
            "NCD_LLM_MAX_TOKENS",
        ):
            monkeypatch.delenv(name, raising=False)
        assert LLMConfig.from_env() == LLMConfig()

    def test_reads_every_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NCD_LLM_BASE_URL", "https://api.openai.example")
        monkeypatch.setenv("NCD_LLM_MODEL", "gpt-4")
        monkeypatch.setenv("NCD_LLM_API_TYPE", "OpenAI")
        monkeypatch.setenv("NCD_LLM_TIMEOUT", "30")
        monkeypatch.setenv("NCD_LLM_TEMPERATURE", "0")
        monkeypatch.setenv("NCD_LLM_MAX_TOKENS", "512")
        assert LLMConfig.from_env() == LLMConfig(
            base_url="https://api.openai.example",
            model="gpt-4",
            api_type=ApiType.OPENAI,
            timeout_secs=30.0,
            temperature=0.0,
            max_tokens=512,
        )

    def test_unknown_api_type_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NCD_LLM_API_TYPE", "carrier-pigeon")
        with pytest.raises(ValueError):
            LLMConfig.from_env()

    def test_bad_number_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NCD_LLM_MAX_TOKENS", "lots")
        with pytest.raises(ValueError):
            LLMConfig.from_env()


class TestProtocol:
    def test_plain_class_conforms(self) -> None:
        class _Canned:
            def generate(self, prompt: str) -> str:
                return "x"

            def fetch_pair(self, a: str, b: str) -> tuple[str, str]:
                return "x", "y"

        assert isinstance(_Canned(), ResponseProvider)

    def test_generate_only_does_not_conform(self) -> None:
        class _Half:
            def generate(self, prompt: str) -> str:
                return "x"

        assert not isinstance(_Half(), ResponseProvider)

    def test_base_provider_generate_is_abstract(self) -> None:
        with pytest.raises(NotImplementedError):
            BaseProvider().generate("hi")


class TestCreateProvider:
    def test_default_is_ollama(self) -> None:
        provider = create_provider()
        try:
            assert isinstance(provider, OllamaProvider)
        finally:
            provider.close()  # type: ignore[attr-defined]

    def test_anthropic(self) -> None:
        provider = create_provider(LLMConfig(api_type=ApiType.ANTHROPIC))
        try:
            assert isinstance(provider, AnthropicProvider)
        finally:
            provider.close()  # type: ignore[attr-defined]

    def test_openai(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pytest.importorskip("openai", reason="openai extra not installed")
        pytest.importorskip("tenacity", reason="openai extra not installed")
        from ncd_divergence.providers import OpenAIProvider

        monkeypatch.setenv("OPENAI_API_KEY", "sk-test-fake-key")
        provider = create_provider(LLMConfig(api_type=ApiType.OPENAI))
        assert isinstance(provider, OpenAIProvider)
