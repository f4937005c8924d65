"""Typed chat domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Literal

Role = Literal["system", "user", "assistant"]


@dataclass(slots=True, frozen=True)
class ChatMessage:
    """One role-tagged message in conversation order."""

    role: Role
    content: str

    @classmethod
    def system(cls, content: str) -> ChatMessage:
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> ChatMessage:
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> ChatMessage:
        return cls(role="assistant", content=content)

    def to_dict(self) -> dict[str, str]:
        """Serialize to the wire shape shared by both endpoint formats."""
        return {"role": self.role, "content": self.content}


@dataclass(slots=True)
class Conversation:
    """Ordered message list owned by a single chat session.

    Mutated only by ``append``, ``replace_with`` (used for trimming) and
    ``reset``; messages themselves are immutable.
    """

    messages: list[ChatMessage] = field(default_factory=list)

    @classmethod
    def start(cls, system_prompt: str) -> Conversation:
        """Create a conversation holding one pinned system message."""
        return cls(messages=[ChatMessage.system(system_prompt)])

    def append(self, message: ChatMessage) -> None:
        self.messages.append(message)

    def replace_with(self, messages: list[ChatMessage]) -> None:
        self.messages = list(messages)

    def reset(self, system_prompt: str) -> None:
        """Clear history down to a single fresh system message."""
        self.messages = [ChatMessage.system(system_prompt)]

    def snapshot(self) -> list[ChatMessage]:
        return list(self.messages)

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self.messages)


@dataclass(slots=True, frozen=True)
class FileSuggestion:
    """Candidate file write extracted from an assistant reply."""

    path: str
    content: str
