"""Wire formats for the two supported chat endpoints.

Each format owns one request builder and one response parser, so the
endpoint call itself never branches on provider quirks:

- ``openai``: ``POST <base>/v1/chat/completions``; reply in
  ``choices[0].message.content``.
- ``ollama``: ``POST <base>/api/chat``; reply in ``message.content`` and
  generation options nested under ``options``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from ..domain.chat import ChatMessage
from ..domain.config import EndpointConfig
from ..errors import EmptyResponseError


class WireFormat(Protocol):
    """Request/response contract implemented per provider mode."""

    name: str
    path: str
    error_label: str

    def build_payload(
        self, config: EndpointConfig, messages: Sequence[ChatMessage]
    ) -> dict[str, Any]:
        ...

    def parse_reply(self, data: Any) -> str:
        ...


def format_wire_messages(messages: Sequence[ChatMessage]) -> list[dict[str, str]]:
    """Convert chat messages into plain role/content payloads."""
    return [message.to_dict() for message in messages]


@dataclass(frozen=True, slots=True)
class OpenAIWireFormat:
    """OpenAI-compatible chat completions (LM Studio, vLLM, Ollama /v1, ...)."""

    name: str = "openai"
    path: str = "/v1/chat/completions"
    error_label: str = "LLM"

    def build_payload(
        self, config: EndpointConfig, messages: Sequence[ChatMessage]
    ) -> dict[str, Any]:
        return {
            "model": config.model,
            "messages": format_wire_messages(messages),
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
            "stream": False,
        }

    def parse_reply(self, data: Any) -> str:
        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices:
            raise EmptyResponseError("No response choices returned from LLM")

        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str) or not content.strip():
            raise EmptyResponseError("Empty response from LLM")
        return content.strip()


@dataclass(frozen=True, slots=True)
class OllamaWireFormat:
    """Native Ollama ``/api/chat`` endpoint."""

    name: str = "ollama"
    path: str = "/api/chat"
    error_label: str = "Ollama"

    def build_payload(
        self, config: EndpointConfig, messages: Sequence[ChatMessage]
    ) -> dict[str, Any]:
        return {
            "model": config.model,
            "messages": format_wire_messages(messages),
            "stream": False,
            "options": {
                "temperature": config.temperature,
                "num_predict": config.max_tokens,
            },
        }

    def parse_reply(self, data: Any) -> str:
        message = data.get("message") if isinstance(data, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str) or not content.strip():
            raise EmptyResponseError("Empty response from Ollama")
        return content.strip()


OPENAI_WIRE = OpenAIWireFormat()
OLLAMA_WIRE = OllamaWireFormat()

WIRE_FORMATS: dict[str, WireFormat] = {
    OPENAI_WIRE.name: OPENAI_WIRE,
    OLLAMA_WIRE.name: OLLAMA_WIRE,
}


def get_wire_format(provider_mode: str) -> WireFormat:
    """Return the wire format registered for a provider mode."""
    try:
        return WIRE_FORMATS[provider_mode]
    except KeyError:
        raise ValueError(f"Unknown provider mode: {provider_mode}")
