"""Async display and interaction adapters."""

from __future__ import annotations

import asyncio
from typing import Optional, Protocol, Sequence

from prompt_toolkit import prompt as pt_prompt

from ..domain.chat import FileSuggestion
from ..formatting import borderline
from ..suggestions import render_suggestion_preview
from .events import (
    AppendMessage,
    ClearDisplay,
    DisplayEvent,
    OpenFile,
    ProposeFile,
    ReportError,
)

ROLE_LABELS = {
    "system": "System",
    "user": "You",
    "assistant": "Assistant",
}


class DisplayPort(Protocol):
    """Outbound half of the host UI channel."""

    async def post(self, event: DisplayEvent) -> None:
        """Render one display event."""


class UserInteractionPort(Protocol):
    """Blocking prompts the core needs from the host."""

    async def prompt_text(self, prompt: str) -> str:
        """Prompt for free-form text input."""

    async def choose(self, message: str, options: Sequence[str]) -> Optional[str]:
        """Modal choice; returns the chosen option or None when dismissed."""

    async def prompt_secret(self, prompt: str) -> str:
        """Prompt for hidden input."""


def match_option(answer: str, options: Sequence[str]) -> Optional[str]:
    """Return the option matching ``answer`` case-insensitively."""
    normalized = answer.strip().lower()
    if not normalized:
        return None
    for option in options:
        if option.lower() == normalized:
            return option
    return None


class ThreadedConsoleInteraction:
    """Console adapter that runs blocking prompts in worker threads."""

    async def prompt_text(self, prompt: str) -> str:
        return await asyncio.to_thread(pt_prompt, prompt)

    async def choose(self, message: str, options: Sequence[str]) -> Optional[str]:
        answer = await asyncio.to_thread(
            pt_prompt,
            f"{message} [{'/'.join(options)}]: ",
        )
        return match_option(answer, options)

    async def prompt_secret(self, prompt: str) -> str:
        return await asyncio.to_thread(pt_prompt, prompt, is_password=True)


class ConsoleDisplay:
    """Terminal rendering of display events.

    Proposed files are kept as a numbered pending list so the REPL can
    confirm them with ``/write <n>``. Written entries keep their slot as
    None so later numbers stay stable until the next clear.
    """

    def __init__(self) -> None:
        self.pending: list[Optional[FileSuggestion]] = []

    async def post(self, event: DisplayEvent) -> None:
        await asyncio.to_thread(self.render, event)

    def render(self, event: DisplayEvent) -> None:
        if isinstance(event, AppendMessage):
            print()
            print(f"{ROLE_LABELS.get(event.role, event.role)}:")
            print(event.content)
        elif isinstance(event, ReportError):
            print()
            print(f"Error: {event.message}")
        elif isinstance(event, ClearDisplay):
            self.pending.clear()
            print()
            print(borderline())
            print("Conversation cleared.")
            print(borderline())
        elif isinstance(event, ProposeFile):
            self.pending.append(event.suggestion)
            number = len(self.pending)
            print()
            print(f"[{number}] Suggested file: {render_suggestion_preview(event.suggestion)}")
            print(f"    Use /write {number} to create it.")
        elif isinstance(event, OpenFile):
            print()
            print(borderline())
            print(event.path)
            print(borderline())
            print(event.content)
            print(borderline())

    def take_pending(self, number: int) -> FileSuggestion:
        """Return pending suggestion ``number`` (1-based)."""
        if number < 1 or number > len(self.pending):
            raise ValueError(f"No pending file suggestion #{number}")
        suggestion = self.pending[number - 1]
        if suggestion is None:
            raise ValueError(f"File suggestion #{number} was already written")
        return suggestion

    def mark_written(self, suggestion: FileSuggestion) -> None:
        """Retire a pending suggestion once its file has been written."""
        for index, pending in enumerate(self.pending):
            if pending is suggestion:
                self.pending[index] = None
                return
