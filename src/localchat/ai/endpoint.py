"""Endpoint adapter: one non-streaming chat call against a local LLM server."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Sequence
from urllib.parse import urlparse

import httpx

from ..domain.chat import ChatMessage
from ..domain.config import EndpointConfig
from ..errors import (
    ConfigurationError,
    EmptyResponseError,
    RequestTimeoutError,
    TransportError,
)
from ..logging import extract_http_error_context, log_event, sanitize_error_message
from ..timeouts import build_ai_httpx_timeout, timeout_ms_to_sec, timeout_whole_seconds
from .wire import OPENAI_WIRE, WireFormat, get_wire_format


def validate_url(url: str | None) -> bool:
    """Return True for a non-empty http(s) URL with a usable host and port."""
    if not url or not url.strip():
        return False
    try:
        parsed = urlparse(url.strip())
        # Out-of-range or non-numeric ports raise here.
        parsed.port
    except ValueError:
        return False
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        return False
    return not any(ch.isspace() for ch in parsed.netloc)


def resolve_route(config: EndpointConfig) -> tuple[str, WireFormat]:
    """Resolve the request URL and wire format for one call.

    A configured custom endpoint always wins and always speaks the
    OpenAI-compatible format; otherwise the base URL gets the provider
    mode's path appended.

    Raises:
        ConfigurationError: If the model or URL settings are unusable
    """
    if not config.model or not config.model.strip():
        raise ConfigurationError(
            "Model name is not configured. Please set it in settings."
        )

    if config.custom_endpoint and config.custom_endpoint.strip():
        custom = config.custom_endpoint.strip()
        if not validate_url(custom):
            raise ConfigurationError(f"Invalid custom endpoint URL: {custom}")
        return custom, OPENAI_WIRE

    if not config.base_url or not config.base_url.strip():
        raise ConfigurationError(
            "API URL is not configured. Please set it in settings."
        )
    if not validate_url(config.base_url):
        raise ConfigurationError(f"Invalid API URL: {config.base_url}")

    try:
        wire = get_wire_format(config.provider_mode)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    return config.base_url.strip().rstrip("/") + wire.path, wire


def build_headers(token: str | None) -> dict[str, str]:
    """Build request headers; the bearer token is sent only when non-blank."""
    headers = {"Content-Type": "application/json"}
    if token and token.strip():
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _transport_error(wire: WireFormat, response: httpx.Response) -> TransportError:
    body = response.text
    detail = body or response.reason_phrase or "Unknown error"
    return TransportError(
        f"{wire.error_label} API error ({response.status_code}): {detail}",
        status_code=response.status_code,
        body=body,
    )


def _log_ai_error(
    error: Exception,
    *,
    wire: WireFormat,
    config: EndpointConfig,
    started: float,
    http_status: int | None = None,
    cause: Exception | None = None,
) -> None:
    context = extract_http_error_context(cause) if cause is not None else {}
    context.setdefault("http_status", http_status)
    log_event(
        "ai_error",
        level=logging.ERROR,
        provider=wire.name,
        model=config.model,
        error_type=type(error).__name__,
        error=sanitize_error_message(str(error)),
        latency_ms=round((time.perf_counter() - started) * 1000, 1),
        **context,
    )


async def invoke(
    config: EndpointConfig,
    messages: Sequence[ChatMessage],
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Send the conversation to the endpoint and return the trimmed reply.

    Exactly one attempt is made. ``transport`` lets callers (and tests)
    substitute the httpx transport.

    Raises:
        ConfigurationError: Model name or URL missing/malformed
        TransportError: Network failure or non-success HTTP status
        RequestTimeoutError: No response within ``config.timeout_ms``
        EmptyResponseError: Success status without usable content
    """
    url, wire = resolve_route(config)
    headers = build_headers(config.auth_token)
    payload = wire.build_payload(config, messages)

    log_event(
        "ai_request",
        level=logging.INFO,
        provider=wire.name,
        model=config.model,
        url=url,
        message_count=len(messages),
        input_chars=sum(len(message.content) for message in messages),
        timeout_ms=config.timeout_ms,
    )

    started = time.perf_counter()
    try:
        async with httpx.AsyncClient(
            timeout=build_ai_httpx_timeout(config.timeout_ms),
            transport=transport,
        ) as client:
            # The timer aborts the whole exchange, not just one socket phase.
            response = await asyncio.wait_for(
                client.post(url, json=payload, headers=headers),
                timeout=timeout_ms_to_sec(config.timeout_ms),
            )
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        error = RequestTimeoutError(timeout_whole_seconds(config.timeout_ms))
        _log_ai_error(error, wire=wire, config=config, started=started)
        raise error from e
    except httpx.RequestError as e:
        error = TransportError(f"Failed to reach {wire.error_label} endpoint at {url}: {e}")
        _log_ai_error(error, wire=wire, config=config, started=started, cause=e)
        raise error from e

    if not response.is_success:
        error = _transport_error(wire, response)
        _log_ai_error(
            error,
            wire=wire,
            config=config,
            started=started,
            http_status=response.status_code,
        )
        raise error

    try:
        data = response.json()
    except ValueError as e:
        error = EmptyResponseError(
            f"{wire.error_label} returned a response that is not valid JSON"
        )
        _log_ai_error(
            error,
            wire=wire,
            config=config,
            started=started,
            http_status=response.status_code,
        )
        raise error from e

    try:
        reply = wire.parse_reply(data)
    except EmptyResponseError as e:
        _log_ai_error(
            e,
            wire=wire,
            config=config,
            started=started,
            http_status=response.status_code,
        )
        raise

    log_event(
        "ai_response",
        level=logging.INFO,
        provider=wire.name,
        model=config.model,
        http_status=response.status_code,
        latency_ms=round((time.perf_counter() - started) * 1000, 1),
        output_chars=len(reply),
    )
    return reply
