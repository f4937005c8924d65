"""Command execution context for explicit dependency wiring."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.chat import Conversation
from ..ui.events import AppendMessage
from ..ui.interaction import DisplayPort
from ..workspace import Workspace


@dataclass(slots=True)
class CommandContext:
    """Shared command runtime dependencies."""

    workspace: Workspace
    conversation: Conversation
    display: DisplayPort

    async def notify(self, content: str) -> None:
        """Post command output as a system-role display message."""
        await self.display.post(AppendMessage(role="system", content=content))
