"""Adapters around the external listing tools.

Both listers run a single command and capture its whole output.  The
command runner is injectable so callers can substitute in-memory
fixtures for real processes.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, Sequence

from dotstatus.core.errors import ListingError
from dotstatus.utils import split_lines

log = logging.getLogger(__name__)

# (argv, cwd) -> raw stdout.  Raises OSError or CalledProcessError on failure.
PathSource = Callable[[Sequence[str], Path], bytes]

DIRECTORY_LISTING = "directory listing"
TRACKED_LISTING = "tracked-path listing"


def run_command(args: Sequence[str], cwd: Path) -> bytes:
    """Run *args* in *cwd* and return its stdout."""
    proc = subprocess.run(list(args), cwd=str(cwd), capture_output=True, check=True)
    return proc.stdout


def list_directory(directory: Path, *, runner: PathSource = run_command) -> list[str]:
    """List the immediate children of *directory*.

    Uses ``ls -p`` so directories come back suffixed with ``/``.
    """
    return _list(DIRECTORY_LISTING, ["ls", "-p"], directory, runner)


def list_tracked_paths(
    directory: Path,
    git_dir: Path,
    work_tree: Path,
    *,
    runner: PathSource = run_command,
) -> list[str]:
    """List files tracked at HEAD under *directory*, recursively.

    Paths are relative to *directory*, which must lie inside *work_tree*.
    Quoting is disabled so non-ASCII names come back verbatim.
    """
    args = [
        "git",
        "-c",
        "core.quotePath=false",
        f"--git-dir={git_dir}",
        f"--work-tree={work_tree}",
        "ls-tree",
        "--name-only",
        "-r",
        "HEAD",
    ]
    return _list(TRACKED_LISTING, args, directory, runner)


def _list(listing: str, args: list[str], cwd: Path, runner: PathSource) -> list[str]:
    log.debug("Running %s in %s: %s", listing, cwd, " ".join(args))
    try:
        raw = runner(args, cwd)
    except FileNotFoundError as exc:
        raise ListingError(listing, f"could not run '{args[0]}' in {cwd}: {exc.strerror or exc}") from exc
    except subprocess.CalledProcessError as exc:
        raise ListingError(listing, _describe_exit(exc)) from exc
    except OSError as exc:
        raise ListingError(listing, str(exc)) from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ListingError(listing, f"output is not valid UTF-8 text ({exc.reason})") from exc

    lines = split_lines(text)
    log.debug("%s returned %d entries", listing, len(lines))
    return lines


def _describe_exit(exc: subprocess.CalledProcessError) -> str:
    stderr = exc.stderr
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    stderr = (stderr or "").strip()
    message = f"'{exc.cmd[0]}' exited with status {exc.returncode}"
    return f"{message}: {stderr}" if stderr else message
