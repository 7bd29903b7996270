"""Resolve the dotfiles repository layout for the current run."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotstatus.core.errors import HomeDirectoryError, LayoutError

log = logging.getLogger(__name__)

GIT_DIR_NAME = "dotfiles"


@dataclass(frozen=True, slots=True)
class DotfilesLayout:
    """Directories involved in a single report.

    The repository metadata always lives at ``<home>/dotfiles`` and the
    work-tree is ``<home>`` itself.
    """

    cwd: Path
    home: Path

    @property
    def git_dir(self) -> Path:
        return self.home / GIT_DIR_NAME

    @property
    def work_tree(self) -> Path:
        return self.home

    @classmethod
    def resolve(cls, cwd: Path | None = None, home: Path | None = None) -> DotfilesLayout:
        """Resolve missing directories from the process environment."""
        if home is None:
            home = _home_dir()
        if cwd is None:
            try:
                cwd = Path(os.getcwd())
            except OSError as exc:
                raise LayoutError(f"Failed to get current directory: {exc}") from exc
        layout = cls(cwd=cwd, home=home)
        log.debug("Resolved layout: cwd=%s git_dir=%s work_tree=%s", cwd, layout.git_dir, layout.work_tree)
        return layout


def _home_dir() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirectoryError(f"Failed to get home dir: {exc}") from exc
