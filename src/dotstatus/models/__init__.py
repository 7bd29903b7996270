"""dotstatus data models."""

from dotstatus.models.entry import Entry, EntryKind
from dotstatus.models.status import EntryStatus

__all__ = [
    "Entry",
    "EntryKind",
    "EntryStatus",
]
