"""Response providers: the collaborators that fetch the two texts to compare.

This subpackage sits outside the divergence core; nothing in the core
imports it.  The base install provides ``OllamaProvider`` and
``AnthropicProvider`` (plain ``httpx``).  ``OpenAIProvider`` needs the
``openai`` extra:

    pip install ncd-divergence[openai]

``OpenAIProvider`` is always importable; its optional dependencies are only
imported when it is instantiated.
"""

from __future__ import annotations

from ncd_divergence.providers.base import (
    ApiType,
    BaseProvider,
    LLMConfig,
    ResponseProvider,
)
from ncd_divergence.providers.errors import (
    ProviderAPIError,
    ProviderError,
    ProviderNetworkError,
    ProviderParseError,
    ProviderTimeout,
)
from ncd_divergence.providers.http import AnthropicProvider, OllamaProvider
from ncd_divergence.providers.openai import OpenAIProvider

__all__ = [
    "AnthropicProvider",
    "ApiType",
    "BaseProvider",
    "LLMConfig",
    "OllamaProvider",
    "OpenAIProvider",
    "ProviderAPIError",
    "ProviderError",
    "ProviderNetworkError",
    "ProviderParseError",
    "ProviderTimeout",
    "ResponseProvider",
    "create_provider",
]


def create_provider(config: LLMConfig | None = None) -> BaseProvider:
    """Return the provider matching ``config.api_type``.

    Args:
        config: Endpoint configuration.  Defaults to ``LLMConfig()`` (Ollama
            on localhost).

    Raises:
        ImportError: For ``ApiType.OPENAI`` when the openai extra is missing.
    """
    config = config if config is not None else LLMConfig()
    if config.api_type == ApiType.OPENAI:
        return OpenAIProvider(config)
    if config.api_type == ApiType.ANTHROPIC:
        return AnthropicProvider(config)
    return OllamaProvider(config)
