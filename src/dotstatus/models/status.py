"""Tracking status dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dotstatus.models.entry import Entry

TRACKED_FILE = "CHECKED"
UNTRACKED_FILE = "LEFT"
UNTRACKED_DIR = "None"


@dataclass(frozen=True, slots=True)
class EntryStatus:
    """Tracking status of a single top-level entry.

    ``tracked_count`` is None when nothing under the entry is tracked.
    For files it is always 1 when set.
    """

    entry: Entry
    tracked_count: int | None = None

    @property
    def tracked(self) -> bool:
        return self.tracked_count is not None

    @property
    def label(self) -> str:
        if self.entry.is_dir:
            return str(self.tracked_count) if self.tracked else UNTRACKED_DIR
        return TRACKED_FILE if self.tracked else UNTRACKED_FILE

    @property
    def line(self) -> str:
        return self.render(self.label)

    def render(self, label: str) -> str:
        """Return the output line for this entry with *label* as its status."""
        return f"{self.entry.key} - {label}"

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.entry.key,
            "kind": self.entry.kind.value,
            "tracked": self.tracked,
            "count": self.tracked_count or 0,
            "status": self.label,
        }
