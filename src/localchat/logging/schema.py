"""Preferred field order for structured log blocks."""

DEFAULT_EVENT_KEY_ORDER: tuple[str, ...] = (
    "ts",
    "ts_utc",
    "level",
    "logger",
    "message",
)

EVENT_KEY_ORDER: dict[str, tuple[str, ...]] = {
    "app_start": (
        "ts",
        "level",
        "settings_file",
        "workspace",
        "log_file",
        "provider",
        "model",
        "timeout_ms",
    ),
    "app_stop": ("ts", "level", "reason", "uptime_ms", "error_type", "error"),
    "session_start": (
        "ts",
        "level",
        "settings_file",
        "workspace",
        "log_file",
        "provider",
        "model",
        "timeout_ms",
    ),
    "session_stop": ("ts", "level", "reason", "message_count"),
    "repl_error": ("ts", "level", "error_type", "error"),
    "ai_request": (
        "ts",
        "level",
        "provider",
        "model",
        "url",
        "message_count",
        "input_chars",
        "timeout_ms",
    ),
    "ai_response": (
        "ts",
        "level",
        "provider",
        "model",
        "http_status",
        "latency_ms",
        "output_chars",
    ),
    "ai_error": (
        "ts",
        "level",
        "provider",
        "model",
        "error_type",
        "error",
        "http_status",
        "latency_ms",
    ),
    "command_exec": ("ts", "level", "command", "args_summary", "elapsed_ms"),
    "command_error": ("ts", "level", "command", "args_summary", "error_type", "error"),
    "file_write": ("ts", "level", "path", "outcome", "bytes"),
    "file_write_blocked": ("ts", "level", "path", "error_type", "error"),
    "history_trimmed": ("ts", "level", "before", "after", "max_messages"),
    "conversation_reset": ("ts", "level", "message_count"),
}
