"""Endpoint configuration value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ProviderMode = Literal["openai", "ollama"]

PROVIDER_MODES: tuple[str, ...] = ("openai", "ollama")


@dataclass(frozen=True, slots=True)
class EndpointConfig:
    """Everything one endpoint call needs, resolved from settings + secrets."""

    base_url: str
    provider_mode: ProviderMode
    model: str
    auth_token: str | None = None
    temperature: float = 0.7
    max_tokens: int = 2048
    timeout_ms: int = 120000
    custom_endpoint: str | None = None

    def display(self) -> str:
        """Format for user-facing output, e.g. ``'ollama | llama3.1'``."""
        mode = "openai" if self.custom_endpoint else self.provider_mode
        return f"{mode} | {self.model}"
