"""Typed exceptions for localchat."""


class LocalChatError(Exception):
    """Base exception for localchat failures."""


class SettingsError(ValueError, LocalChatError):
    """Raised when the settings file is missing or invalid."""


class ConfigurationError(ValueError, LocalChatError):
    """Raised when the model name or endpoint URL is empty or malformed."""


class TransportError(LocalChatError):
    """Raised when the endpoint call fails or returns a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RequestTimeoutError(TimeoutError, LocalChatError):
    """Raised when the endpoint does not answer within the request timeout."""

    def __init__(self, timeout_sec: int) -> None:
        super().__init__(f"Request timed out after {timeout_sec} seconds")
        self.timeout_sec = timeout_sec


class EmptyResponseError(LocalChatError):
    """Raised when a success response carries no usable message content."""


class PathValidationError(ValueError, LocalChatError):
    """Raised when a workspace-relative path is unsafe."""


class ContentTooLargeError(ValueError, LocalChatError):
    """Raised when file content exceeds the configured size limit."""

    def __init__(self, actual_size: str, max_size: str) -> None:
        super().__init__(
            f"Content size ({actual_size}) exceeds maximum allowed size ({max_size})"
        )
        self.actual_size = actual_size
        self.max_size = max_size


class WorkspaceError(LocalChatError):
    """Raised when a workspace read, listing or search fails."""
