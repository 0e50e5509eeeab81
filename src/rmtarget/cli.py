"""CLI interface for rmtarget."""

from __future__ import annotations

import json
import logging

import click

from rmtarget.core.engine import SORT_ORDERS, TargetEngine
from rmtarget.core.selection import parse_selection
from rmtarget.errors import RmTargetError
from rmtarget.models.removal import RemovalResult
from rmtarget.models.target import DiscoveredTarget
from rmtarget.settings import DEFAULT_SORT, Settings
from rmtarget.utils import bytes_to_human, format_mtime

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _resolve_sort(sort: str | None, settings: Settings) -> str:
    if sort is not None:
        return sort
    if settings.sort not in SORT_ORDERS:
        log.warning("Unknown default sort '%s' in %s, using '%s'", settings.sort, settings.path, DEFAULT_SORT)
        return DEFAULT_SORT
    return settings.sort


def _print_table(targets: list[DiscoveredTarget]) -> None:
    for i, target in enumerate(targets):
        click.echo(
            f"{i}\t{target.path}\t{bytes_to_human(target.size_bytes)}\t{format_mtime(target.modified_at)}"
        )


def _print_json(targets: list[DiscoveredTarget]) -> None:
    data = [
        {
            "index": i,
            "path": str(t.path),
            "size_bytes": t.size_bytes,
            "modified_at": t.modified_at.isoformat(),
        }
        for i, t in enumerate(targets)
    ]
    click.echo(json.dumps(data, indent=2))


def _read_selection() -> list[int]:
    line = click.prompt("input select", default="", show_default=False, prompt_suffix=": ")
    return parse_selection(line)


@click.command()
@click.option("--path", "-p", default=".", show_default=True, help="Start searching from path")
@click.option("--scan", "-s", "scan_only", is_flag=True, help="Only scan, never remove")
@click.option("--sort", type=click.Choice(list(SORT_ORDERS)), default=None,
              help="Sort result by size (largest first), rsize, time (oldest first) or rtime")
@click.option("--manifest", default=None, help="Manifest file marking a project root [default: Cargo.toml]")
@click.option("--target-dir", default=None, help="Build-output directory name [default: target]")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON (implies --scan)")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(package_name="rmtarget")
def main(
    path: str,
    scan_only: bool,
    sort: str | None,
    manifest: str | None,
    target_dir: str | None,
    as_json: bool,
    verbose: int,
) -> None:
    """Find and remove Rust build target directories."""
    _setup_logging(verbose)
    settings = Settings()
    engine = TargetEngine(
        manifest=manifest or settings.manifest,
        output_dir=target_dir or settings.target_dir,
    )

    try:
        targets = engine.scan(path, sort=_resolve_sort(sort, settings))
    except RmTargetError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        _print_json(targets)
        return

    _print_table(targets)
    if scan_only:
        return

    if not targets:
        click.echo("No target found")
        return

    def on_result(result: RemovalResult) -> None:
        click.echo(f"removed {result.target.path}")

    try:
        selection = _read_selection()
        engine.remove(selection, on_result=on_result)
    except RmTargetError as e:
        raise click.ClickException(str(e)) from e
