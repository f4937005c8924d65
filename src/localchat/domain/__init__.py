"""Typed domain models used at module boundaries."""

from .chat import ChatMessage, Conversation, FileSuggestion, Role
from .config import EndpointConfig, ProviderMode
from .settings import ChatSettings
from .workspace import WorkspaceEntry, WorkspaceMetadata

__all__ = [
    "ChatMessage",
    "ChatSettings",
    "Conversation",
    "EndpointConfig",
    "FileSuggestion",
    "ProviderMode",
    "Role",
    "WorkspaceEntry",
    "WorkspaceMetadata",
]
