"""Classify directory entries against tracked-file counts."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from dotstatus.core.errors import TrackingInvariantError
from dotstatus.models.entry import Entry
from dotstatus.models.status import EntryStatus

log = logging.getLogger(__name__)


def classify_entry(entry: Entry, tracked_counts: Mapping[str, int]) -> EntryStatus:
    """Return the tracking status of a single entry.

    Raises:
        TrackingInvariantError: If a plain file maps to a count other than 1.
    """
    count = tracked_counts.get(entry.key)
    if entry.is_dir or count is None or count == 1:
        return EntryStatus(entry=entry, tracked_count=count)
    raise TrackingInvariantError(
        f"File '{entry.name}' has a tracked count of {count}, expected 1"
    )


def classify(
    entries: Iterable[str | Entry],
    tracked_counts: Mapping[str, int],
) -> list[EntryStatus]:
    """Classify listed entries in listing order.

    Accepts raw listing names (directories end with ``/``) or
    :class:`Entry` instances. The whole listing is classified before
    anything is returned, so a fault leaves no partial result.
    """
    statuses: list[EntryStatus] = []
    for item in entries:
        entry = item if isinstance(item, Entry) else Entry.from_listing(item)
        statuses.append(classify_entry(entry, tracked_counts))
    log.debug(
        "Classified %d entries, %d tracked",
        len(statuses),
        sum(1 for s in statuses if s.tracked),
    )
    return statuses


def report(entries: Iterable[str | Entry], tracked_counts: Mapping[str, int]) -> list[str]:
    """Return one status line per entry, e.g. ``"b/ - 2"`` or ``"a.txt - CHECKED"``."""
    return [status.line for status in classify(entries, tracked_counts)]
