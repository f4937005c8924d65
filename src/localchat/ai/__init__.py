"""Endpoint adapter for OpenAI-compatible and native Ollama chat APIs."""

from .endpoint import build_headers, invoke, resolve_route, validate_url
from .wire import OLLAMA_WIRE, OPENAI_WIRE, WIRE_FORMATS, WireFormat, get_wire_format

__all__ = [
    "OLLAMA_WIRE",
    "OPENAI_WIRE",
    "WIRE_FORMATS",
    "WireFormat",
    "build_headers",
    "get_wire_format",
    "invoke",
    "resolve_route",
    "validate_url",
]
