"""Shared test fixtures."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

import pytest


class FakeRunner:
    """Command runner that returns canned output instead of spawning processes."""

    def __init__(self, stdout: bytes = b"", error: Exception | None = None) -> None:
        self.stdout = stdout
        self.error = error
        self.calls: list[tuple[list[str], Path]] = []

    def __call__(self, args: Sequence[str], cwd: Path) -> bytes:
        self.calls.append((list(args), cwd))
        if self.error is not None:
            raise self.error
        return self.stdout


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture
def called_process_error():
    def _make(cmd: str, returncode: int = 128, stderr: bytes = b"") -> subprocess.CalledProcessError:
        return subprocess.CalledProcessError(returncode, [cmd], output=b"", stderr=stderr)

    return _make
