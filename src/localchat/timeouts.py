"""Centralized timeout policy and helpers."""

from __future__ import annotations

import math

import httpx

# Connection setup and upload buckets; the read bucket follows the
# configured request timeout.
AI_HTTP_CONNECT_TIMEOUT_SEC = 10.0
AI_HTTP_WRITE_TIMEOUT_SEC = 15.0
AI_HTTP_POOL_TIMEOUT_SEC = 5.0


def timeout_ms_to_sec(timeout_ms: int) -> float:
    """Convert a millisecond timeout to seconds."""
    return timeout_ms / 1000


def timeout_whole_seconds(timeout_ms: int) -> int:
    """Whole seconds shown to users; sub-second timeouts round up to 1."""
    return max(1, math.ceil(timeout_ms / 1000))


def build_ai_httpx_timeout(timeout_ms: int) -> httpx.Timeout:
    """Build httpx timeout config for endpoint calls.

    No single bucket may outlast the overall request timeout.
    """
    timeout_sec = timeout_ms_to_sec(timeout_ms)
    return httpx.Timeout(
        connect=min(AI_HTTP_CONNECT_TIMEOUT_SEC, timeout_sec),
        read=timeout_sec,
        write=min(AI_HTTP_WRITE_TIMEOUT_SEC, timeout_sec),
        pool=min(AI_HTTP_POOL_TIMEOUT_SEC, timeout_sec),
    )
