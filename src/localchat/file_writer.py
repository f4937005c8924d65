"""Confirmed creation of suggested files inside the workspace.

All validation (path, then size) runs before the existence check and the
confirmation prompt; nothing touches the disk until the user accepts.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from .domain.settings import ChatSettings
from .errors import ContentTooLargeError
from .formatting import format_bytes
from .logging import log_event, sanitize_error_message
from .path_utils import validate_relative_path
from .ui.events import OpenFile
from .ui.interaction import DisplayPort, UserInteractionPort
from .workspace import Workspace

WriteOutcome = Literal["created", "overwritten", "cancelled"]

CANCEL_OPTION = "Cancel"


def validate_file_content(content: str, max_size: int) -> None:
    """Reject content whose UTF-8 size exceeds ``max_size`` bytes."""
    size = len(content.encode("utf-8"))
    if size > max_size:
        raise ContentTooLargeError(format_bytes(size), format_bytes(max_size))


async def create_file(
    path: str,
    content: str,
    *,
    workspace: Workspace,
    settings: ChatSettings,
    interaction: UserInteractionPort,
    display: Optional[DisplayPort] = None,
) -> WriteOutcome:
    """Write a suggested file after validation and user confirmation.

    Returns:
        ``"created"`` or ``"overwritten"`` when written, ``"cancelled"``
        when the user declined or dismissed the prompt

    Raises:
        PathValidationError: Path is empty, absolute or traverses upward
        ContentTooLargeError: Content exceeds ``settings.max_file_size``
        WorkspaceError: The write itself failed
    """
    try:
        validate_relative_path(path)
        validate_file_content(content, settings.max_file_size)
    except ValueError as e:
        log_event(
            "file_write_blocked",
            level=logging.WARNING,
            path=path,
            error_type=type(e).__name__,
            error=sanitize_error_message(str(e)),
        )
        raise

    existed = await workspace.exists(path)
    action = "Overwrite" if existed else "Create"

    if not settings.allow_write_without_prompt:
        choice = await interaction.choose(
            f'{action} file "{path}" in workspace "{workspace.name}"?',
            [action, CANCEL_OPTION],
        )
        if choice != action:
            log_event("file_write", level=logging.INFO, path=path, outcome="cancelled")
            return "cancelled"

    await workspace.write_file(path, content)
    outcome: WriteOutcome = "overwritten" if existed else "created"
    log_event(
        "file_write",
        level=logging.INFO,
        path=path,
        outcome=outcome,
        bytes=len(content.encode("utf-8")),
    )

    if display is not None:
        await display.post(OpenFile(path=path, content=content))
    return outcome


def describe_outcome(path: str, outcome: WriteOutcome) -> str:
    """User-facing summary of a write outcome."""
    if outcome == "created":
        return f"Created file: {path}"
    if outcome == "overwritten":
        return f"Overwrote file: {path}"
    return f"Cancelled writing {path}"
