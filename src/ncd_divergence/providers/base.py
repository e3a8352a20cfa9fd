"""ResponseProvider Protocol, LLMConfig and the shared pair-fetching logic."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Protocol, runtime_checkable

__all__ = ["ApiType", "BaseProvider", "LLMConfig", "ResponseProvider"]

logger = logging.getLogger(__name__)


class ApiType(StrEnum):
    """Wire protocol spoken by the generation endpoint.

    - OPENAI:    ``POST /v1/chat/completions``
    - OLLAMA:    ``POST /api/generate``
    - ANTHROPIC: ``POST /v1/messages``
    """

    OPENAI = auto()
    OLLAMA = auto()
    ANTHROPIC = auto()


@dataclass(frozen=True, slots=True)
class LLMConfig:
    """Immutable endpoint configuration for a response provider.

    API keys are deliberately absent: providers read them from
    ``OPENAI_API_KEY`` / ``ANTHROPIC_API_KEY`` so they never end up in a
    repr or a log line.

    Attributes:
        base_url: Root URL of the API, without the route.
        model: Model identifier sent with every request.
        api_type: Wire protocol of the endpoint.
        timeout_secs: Per-request timeout in seconds.
        temperature: Sampling temperature (0.0 = deterministic).
        max_tokens: Maximum number of generated tokens.
    """

    base_url: str = "http://localhost:11434"
    model: str = "llama3"
    api_type: ApiType = ApiType.OLLAMA
    timeout_secs: float = 120.0
    temperature: float = 0.7
    max_tokens: int = 2048

    def __post_init__(self) -> None:
        if self.timeout_secs <= 0:
            msg = f"timeout_secs must be > 0, got {self.timeout_secs}"
            raise ValueError(msg)
        if self.max_tokens < 1:
            msg = f"max_tokens must be >= 1, got {self.max_tokens}"
            raise ValueError(msg)
        if self.temperature < 0.0:
            msg = f"temperature must be >= 0.0, got {self.temperature}"
            raise ValueError(msg)

    @property
    def root_url(self) -> str:
        """``base_url`` without a trailing slash."""
        return self.base_url.rstrip("/")

    @classmethod
    def from_env(cls) -> LLMConfig:
        """Build a config from ``NCD_LLM_*`` environment variables.

        Unset variables keep their defaults.  Recognised variables:
        ``NCD_LLM_BASE_URL``, ``NCD_LLM_MODEL``, ``NCD_LLM_API_TYPE``,
        ``NCD_LLM_TIMEOUT``, ``NCD_LLM_TEMPERATURE``, ``NCD_LLM_MAX_TOKENS``.

        Raises:
            ValueError: If a variable cannot be parsed.
        """
        defaults = cls()
        env = os.environ
        return cls(
            base_url=env.get("NCD_LLM_BASE_URL", defaults.base_url),
            model=env.get("NCD_LLM_MODEL", defaults.model),
            api_type=ApiType(env.get("NCD_LLM_API_TYPE", defaults.api_type).lower()),
            timeout_secs=float(env.get("NCD_LLM_TIMEOUT", defaults.timeout_secs)),
            temperature=float(env.get("NCD_LLM_TEMPERATURE", defaults.temperature)),
            max_tokens=int(env.get("NCD_LLM_MAX_TOKENS", defaults.max_tokens)),
        )


@runtime_checkable
class ResponseProvider(Protocol):
    """Structural protocol for anything that can supply the two texts.

    ``fetch_pair`` must run the two generations strictly one after the other,
    never concurrently, so each runs in an independent session.
    """

    def generate(self, prompt: str) -> str: ...

    def fetch_pair(self, prompt_standard: str, prompt_adversarial: str) -> tuple[str, str]: ...


class BaseProvider:
    """Shared ``fetch_pair`` for the bundled providers.

    Subclasses implement ``generate``.
    """

    def generate(self, prompt: str) -> str:
        raise NotImplementedError

    def fetch_pair(self, prompt_standard: str, prompt_adversarial: str) -> tuple[str, str]:
        """Generate the standard response, then the adversarial one.

        Args:
            prompt_standard:    Control prompt.
            prompt_adversarial: Perturbed prompt.

        Returns:
            ``(response_standard, response_adversarial)``.

        Raises:
            ProviderError: From the first generation that fails; the second
                is not attempted when the first fails.
        """
        logger.debug("fetching pair from %r", self)
        response_a = self.generate(prompt_standard)
        response_b = self.generate(prompt_adversarial)
        return response_a, response_b
