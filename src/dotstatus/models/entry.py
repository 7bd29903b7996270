"""Directory entry model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DIR_MARKER = "/"


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class Entry:
    """One immediate child of the scanned directory.

    ``name`` never carries the trailing directory marker; the kind is
    kept separately so a name can't be mistaken for the other shape.
    """

    name: str
    kind: EntryKind

    @classmethod
    def from_listing(cls, raw: str) -> Entry:
        """Build an entry from a listing line (directories end with ``/``)."""
        if not raw or raw == DIR_MARKER:
            raise ValueError(f"Invalid listing entry: {raw!r}")
        if raw.endswith(DIR_MARKER):
            return cls(raw[: -len(DIR_MARKER)], EntryKind.DIRECTORY)
        return cls(raw, EntryKind.FILE)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def key(self) -> str:
        """Key of this entry in a tracking count map."""
        return self.name + DIR_MARKER if self.is_dir else self.name

    def __str__(self) -> str:
        return self.key
