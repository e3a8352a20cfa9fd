"""OpenAIProvider: chat-completions provider via the ``openai`` SDK.

Wraps ``openai.OpenAI`` with a lazy import so that the base install
(no openai/tenacity installed) never triggers an ``ImportError`` at module
level.  The ``openai`` and ``tenacity`` packages are only required when
``OpenAIProvider`` is *instantiated*.

Any OpenAI-compatible server works: requests go to
``{config.base_url}/v1/chat/completions``.  The API key is read exclusively
from the ``OPENAI_API_KEY`` environment variable and never appears in
``repr()`` or log output.

Rate-limited requests (HTTP 429) are retried with jittered exponential
backoff via ``tenacity``.  The underlying client is created with
``max_retries=0`` to prevent double-retry.

Install the optional dependency with::

    pip install ncd-divergence[openai]
"""

from __future__ import annotations

import logging
import os
from typing import Any

from ncd_divergence.providers.base import BaseProvider, LLMConfig
from ncd_divergence.providers.errors import (
    ProviderAPIError,
    ProviderNetworkError,
    ProviderParseError,
    ProviderTimeout,
)

__all__ = ["OpenAIProvider"]

logger = logging.getLogger(__name__)

# Sent when OPENAI_API_KEY is unset; local OpenAI-compatible servers ignore it
# but the SDK refuses to build a client without one.
_NO_KEY = "not-set"


class OpenAIProvider(BaseProvider):
    """Provider for OpenAI-compatible ``/v1/chat/completions`` endpoints.

    Args:
        config: Endpoint configuration.  Defaults to ``LLMConfig()``.

    Raises:
        ImportError: If ``openai`` or ``tenacity`` is not installed.  The
            message includes the install command.
    """

    def __init__(self, config: LLMConfig | None = None) -> None:
        try:
            from openai import OpenAI, RateLimitError
            from tenacity import (
                retry,
                retry_if_exception_type,
                stop_after_attempt,
                wait_random_exponential,
            )
        except ImportError as exc:
            raise ImportError(
                "openai and tenacity are required for OpenAIProvider. "
                "Install with: pip install ncd-divergence[openai]"
            ) from exc

        self._config: LLMConfig = config if config is not None else LLMConfig()
        # max_retries=0: tenacity is the sole retry controller.
        self._client: Any = OpenAI(
            api_key=os.environ.get("OPENAI_API_KEY") or _NO_KEY,
            base_url=f"{self._config.root_url}/v1",
            timeout=self._config.timeout_secs,
            max_retries=0,
        )

        _retry = retry(
            retry=retry_if_exception_type(RateLimitError),
            wait=wait_random_exponential(min=1, max=60),
            stop=stop_after_attempt(6),
            reraise=True,
        )
        self._call_api = _retry(self._raw_call)

    @property
    def config(self) -> LLMConfig:
        return self._config

    def __repr__(self) -> str:
        """Return a safe repr that never exposes the API key."""
        return (
            f"OpenAIProvider(base_url={self._config.base_url!r}, "
            f"model={self._config.model!r})"
        )

    def generate(self, prompt: str) -> str:
        """Send ``prompt`` as a single user message and return the first choice."""
        import openai

        try:
            response = self._call_api(prompt)
        except openai.APITimeoutError as exc:
            raise ProviderTimeout("chat completion timed out") from exc
        except openai.APIConnectionError as exc:
            raise ProviderNetworkError(f"chat completion failed: {exc}") from exc
        except openai.APIStatusError as exc:
            raise ProviderAPIError(
                f"{exc.status_code}: {exc.message}", status_code=exc.status_code
            ) from exc

        try:
            text = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise ProviderParseError("chat completion has no choices") from exc
        if not isinstance(text, str):
            raise ProviderParseError("chat completion has no text content")
        return text

    def _raw_call(self, prompt: str) -> Any:
        """Make the raw chat-completions call; retried by tenacity via ``_call_api``."""
        logger.debug("chat completion model=%s", self._config.model)
        return self._client.chat.completions.create(
            model=self._config.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )
