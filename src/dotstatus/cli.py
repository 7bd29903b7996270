"""CLI interface for dotstatus."""

from __future__ import annotations

import json
import logging

import click

from dotstatus import __version__
from dotstatus.core.aggregator import aggregate
from dotstatus.core.errors import DotstatusError
from dotstatus.core.layout import DotfilesLayout
from dotstatus.core.listers import list_directory, list_tracked_paths
from dotstatus.core.reporter import classify
from dotstatus.models.status import EntryStatus

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def build_report(layout: DotfilesLayout) -> list[EntryStatus]:
    """List, aggregate and classify the entries of ``layout.cwd``."""
    entries = list_directory(layout.cwd)
    tracked_paths = list_tracked_paths(layout.cwd, layout.git_dir, layout.work_tree)
    tracked_counts = aggregate(tracked_paths)
    log.info(
        "%d entries in %s, %d tracked paths under it",
        len(entries),
        layout.cwd,
        len(tracked_paths),
    )
    return classify(entries, tracked_counts)


def _format_status(status: EntryStatus, color: bool) -> str:
    if not color:
        return status.line
    return status.render(click.style(status.label, fg="green" if status.tracked else "yellow"))


@click.command()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--color/--no-color", default=True, help="Color status labels on a terminal")
@click.version_option(__version__, prog_name="dotstatus")
def main(verbose: int, as_json: bool, color: bool) -> None:
    """Show which entries of the current directory are tracked in ~/dotfiles."""
    _setup_logging(verbose)

    try:
        layout = DotfilesLayout.resolve()
        log.info("Using git dir %s with work tree %s", layout.git_dir, layout.work_tree)
        statuses = build_report(layout)
    except DotstatusError as exc:
        log.debug("Report aborted", exc_info=True)
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps([s.as_dict() for s in statuses], indent=2))
        return

    for status in statuses:
        click.echo(_format_status(status, color))


if __name__ == "__main__":
    main()
