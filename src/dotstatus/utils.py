"""Shared utility functions."""

from __future__ import annotations


def split_lines(output: str) -> list[str]:
    """Split newline-separated tool output, dropping empty lines."""
    return [line for line in output.split("\n") if line]
