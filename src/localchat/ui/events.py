"""Typed events exchanged between the chat session and the display surface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from ..domain.chat import FileSuggestion, Role

# ============================================================================
# Outbound (session → display)
# ============================================================================


@dataclass(slots=True, frozen=True)
class AppendMessage:
    """Show one message; system role is used for command output/notices."""

    role: Role
    content: str


@dataclass(slots=True, frozen=True)
class ReportError:
    """Show an error, visually distinct from assistant replies."""

    message: str


@dataclass(slots=True, frozen=True)
class ClearDisplay:
    """Drop everything currently shown."""


@dataclass(slots=True, frozen=True)
class ProposeFile:
    """Offer a file suggestion for confirmed creation."""

    suggestion: FileSuggestion


@dataclass(slots=True, frozen=True)
class OpenFile:
    """Show a file that has just been written."""

    path: str
    content: str


DisplayEvent: TypeAlias = AppendMessage | ReportError | ClearDisplay | ProposeFile | OpenFile

# ============================================================================
# Inbound (display → session)
# ============================================================================


@dataclass(slots=True, frozen=True)
class SubmitText:
    text: str


@dataclass(slots=True, frozen=True)
class ClearRequest:
    pass


@dataclass(slots=True, frozen=True)
class ConfirmFileWrite:
    suggestion: FileSuggestion


InboundEvent: TypeAlias = SubmitText | ClearRequest | ConfirmFileWrite
