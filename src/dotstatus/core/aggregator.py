"""Collapse tracked file paths into per-entry counts."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from dotstatus.models.entry import DIR_MARKER


def aggregate(tracked_paths: Iterable[str]) -> dict[str, int]:
    """Count tracked files per top-level entry.

    A path with a directory prefix (``b/x.txt``, ``b/c/y.txt``) counts
    towards ``"b/"``; a bare name (``a.txt``) counts towards ``"a.txt"``.
    Entries with nothing tracked under them are absent from the result.

    Raises:
        ValueError: If a path is empty.
    """
    counts: Counter[str] = Counter()
    for path in tracked_paths:
        counts[top_level_key(path)] += 1
    return dict(counts)


def top_level_key(path: str) -> str:
    """Return the count-map key of the top-level entry containing *path*."""
    if not path:
        raise ValueError("Tracked path must not be empty")
    head, sep, _ = path.partition(DIR_MARKER)
    if sep:
        return head + DIR_MARKER
    return head
