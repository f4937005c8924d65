"""Conversation history bounding."""

from __future__ import annotations

from typing import Sequence, TypeVar

from .domain.chat import ChatMessage

M = TypeVar("M", bound=ChatMessage)


def trim_history(messages: Sequence[M], max_messages: int) -> list[M]:
    """Bound a message list to ``max_messages`` entries.

    System messages are always kept, in their original order, ahead of the
    most recent ``max_messages - system_count`` other messages. The result
    is a new list; the input is never modified.

    Raises:
        ValueError: If ``max_messages`` is less than 1
    """
    if max_messages < 1:
        raise ValueError("max_messages must be at least 1")

    if len(messages) <= max_messages:
        return list(messages)

    system_messages = [m for m in messages if m.role == "system"]
    other_messages = [m for m in messages if m.role != "system"]

    keep = max_messages - len(system_messages)
    recent = other_messages[-keep:] if keep > 0 else []

    return system_messages + recent
