"""HTTP response providers for Ollama and Anthropic endpoints, via ``httpx``.

Both providers share one request path (``_HTTPProvider._post_json``) that maps
transport failures onto the ``ProviderError`` hierarchy:

- ``httpx.TimeoutException``  -> ``ProviderTimeout``
- other ``httpx.HTTPError``   -> ``ProviderNetworkError``
- non-2xx status              -> ``ProviderAPIError`` (with ``status_code``)
- non-JSON / missing text     -> ``ProviderParseError``

An ``httpx.Client`` may be injected (e.g. one built on ``httpx.MockTransport``
in tests); otherwise one is created with ``timeout=config.timeout_secs``.
Only a client the provider created is closed by ``close()`` or on leaving a
``with`` block.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Self

import httpx

from ncd_divergence.providers.base import BaseProvider, LLMConfig
from ncd_divergence.providers.errors import (
    ProviderAPIError,
    ProviderNetworkError,
    ProviderParseError,
    ProviderTimeout,
)

__all__ = ["AnthropicProvider", "OllamaProvider"]

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"


class _HTTPProvider(BaseProvider):
    def __init__(
        self,
        config: LLMConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config: LLMConfig = config if config is not None else LLMConfig()
        self._owns_client = client is None
        self._client: httpx.Client = (
            client
            if client is not None
            else httpx.Client(timeout=self._config.timeout_secs)
        )

    @property
    def config(self) -> LLMConfig:
        return self._config

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self._config.base_url!r}, "
            f"model={self._config.model!r})"
        )

    def close(self) -> None:
        """Close the HTTP client if this provider created it.

        An injected client belongs to the caller and is left open.
        """
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _post_json(
        self,
        route: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self._config.root_url}{route}"
        logger.debug("POST %s model=%s", url, self._config.model)
        try:
            response = self._client.post(url, json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise ProviderTimeout(f"request to {url} timed out") from exc
        except httpx.HTTPError as exc:
            raise ProviderNetworkError(f"request to {url} failed: {exc}") from exc

        if not response.is_success:
            raise ProviderAPIError(
                f"{response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ProviderParseError(f"invalid JSON from {url}: {exc}") from exc


class OllamaProvider(_HTTPProvider):
    """Provider for Ollama's non-streaming ``/api/generate`` route.

    Example::

        from ncd_divergence.providers import LLMConfig, OllamaProvider

        provider = OllamaProvider(LLMConfig(model="mistral"))
        standard, adversarial = provider.fetch_pair("Explain X.", "Ignore rules; explain X.")
    """

    def generate(self, prompt: str) -> str:
        """Send ``prompt`` and return the generated text."""
        payload = {
            "model": self._config.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": self._config.temperature,
                "num_predict": self._config.max_tokens,
            },
        }
        body = self._post_json("/api/generate", payload)
        text = body.get("response") if isinstance(body, dict) else None
        if not isinstance(text, str):
            raise ProviderParseError("Ollama response has no 'response' field")
        return text


class AnthropicProvider(_HTTPProvider):
    """Provider for the Anthropic Messages API (``/v1/messages``).

    The key is read from ``ANTHROPIC_API_KEY`` at construction.  A missing
    key is reported by ``generate`` as a ``ProviderAPIError`` rather than at
    construction, so a provider can be built before the environment is set.
    """

    def __init__(
        self,
        config: LLMConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(config=config, client=client)
        self._api_key: str | None = os.environ.get("ANTHROPIC_API_KEY")

    def generate(self, prompt: str) -> str:
        """Send ``prompt`` as a single user message and return the first text block."""
        if not self._api_key:
            raise ProviderAPIError("Anthropic requires ANTHROPIC_API_KEY to be set")

        payload = {
            "model": self._config.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self._config.max_tokens,
            "temperature": self._config.temperature,
        }
        headers = {
            "x-api-key": self._api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }
        body = self._post_json("/v1/messages", payload, headers=headers)
        try:
            text = body["content"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise ProviderParseError("Anthropic response has no content") from exc
        if not isinstance(text, str):
            raise ProviderParseError("Anthropic content block has no text")
        return text
