"""Read-only workspace projections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EntryKind = Literal["file", "directory"]


@dataclass(slots=True, frozen=True)
class WorkspaceEntry:
    """One file or directory returned by a listing call."""

    name: str
    path: str
    kind: EntryKind

    @property
    def is_directory(self) -> bool:
        return self.kind == "directory"


@dataclass(slots=True, frozen=True)
class WorkspaceMetadata:
    """Summary facts about the workspace root."""

    name: str
    path: str
    has_git: bool
    has_package_manifest: bool
