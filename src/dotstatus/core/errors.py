"""Exceptions raised while building a tracking report."""

from __future__ import annotations


class DotstatusError(Exception):
    """Base class for failures that abort a report."""


class LayoutError(DotstatusError):
    """Raised when the working directory cannot be resolved."""


class HomeDirectoryError(LayoutError):
    """Raised when the home directory cannot be determined."""


class ListingError(DotstatusError):
    """Raised when an external listing cannot be produced."""

    def __init__(self, listing: str, reason: str) -> None:
        super().__init__(f"{listing} failed: {reason}")
        self.listing = listing
        self.reason = reason


class TrackingInvariantError(DotstatusError):
    """Raised when a plain file is counted as tracked more than once."""
