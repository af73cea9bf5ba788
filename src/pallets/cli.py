"""Command-line entry points for pallets."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import requests
import typer

from pallets import __version__
from pallets.config import ConfigError, PalletsConfig, load_config
from pallets.dumps.manager import DumpManager
from pallets.dumps.models import DumpKind, DumpOrder
from pallets.io.cache import resolve_cache_directory
from pallets.io.fetcher import build_user_agent
from pallets.util.errors import PalletsError
from pallets.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Download and manage NationStates daily data dumps")


class _State:
    """Config and dump manager, resolved on first use so ``--help`` touches nothing."""

    def __init__(self, config_path: Optional[Path], verbose: bool) -> None:
        self._config_path = config_path
        self._verbose = verbose
        self._config: Optional[PalletsConfig] = None
        self._manager: Optional[DumpManager] = None

    @property
    def config(self) -> PalletsConfig:
        if self._config is None:
            with _reported_errors():
                cfg = load_config(self._config_path)
                configure_logging(
                    log_path=cfg.runtime.log_path,
                    level=logging.INFO if self._verbose else logging.WARNING,
                )
            self._config = cfg
        return self._config

    @property
    def manager(self) -> DumpManager:
        if self._manager is None:
            cfg = self.config
            with _reported_errors():
                directory = resolve_cache_directory(cfg.runtime.dump_dir)
            self._manager = DumpManager(directory, archive=cfg.archive)
        return self._manager


def _parse_date(value: str, date_format: str) -> date:
    try:
        return datetime.strptime(value, date_format).date()
    except ValueError as exc:
        raise typer.BadParameter(f"{value!r} does not match date format {date_format!r}") from exc


@contextmanager
def _reported_errors() -> Iterator[None]:
    """Turn pallets, config, transport and filesystem failures into a message and exit code 1."""

    try:
        yield
    except (PalletsError, ConfigError, requests.RequestException, OSError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _state(ctx: typer.Context) -> _State:
    return ctx.obj


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pallets {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a YAML/TOML/JSON config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Download and manage NationStates daily data dumps."""

    ctx.obj = _State(config, verbose)


@app.command()
def download(
    ctx: typer.Context,
    user: str = typer.Option(..., "--user", "-u", help="A nation name or email address to identify you to NationStates"),
    kind: DumpKind = typer.Option(..., "--type", "-t", case_sensitive=False, help="The type of dump to download"),
    day: str = typer.Option(..., "--date", "-d", help="The date of the dump to download"),
    date_format: Optional[str] = typer.Option(None, "--date-format", "-f", help="strptime format of --date"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing dump"),
) -> None:
    """Download a dump from the NationStates archive."""

    state = _state(ctx)
    parsed = _parse_date(day, date_format or state.config.runtime.date_format)
    user_agent = build_user_agent(user, maintainer=state.config.archive.maintainer)

    with _reported_errors():
        path = state.manager.download_dump(kind, parsed, user_agent=user_agent, force=force)
    typer.echo(str(path))


@app.command()
def delete(
    ctx: typer.Context,
    kind: DumpKind = typer.Option(..., "--type", "-t", case_sensitive=False, help="The type of dump to delete"),
    day: str = typer.Option(..., "--date", "-d", help="The date of the dump to delete"),
    date_format: Optional[str] = typer.Option(None, "--date-format", "-f", help="strptime format of --date"),
) -> None:
    """Delete a cached dump."""

    state = _state(ctx)
    parsed = _parse_date(day, date_format or state.config.runtime.date_format)

    with _reported_errors():
        state.manager.delete_dump(kind, parsed)


@app.command()
def path(
    ctx: typer.Context,
    kind: DumpKind = typer.Option(..., "--type", "-t", case_sensitive=False, help="The type of dump"),
    day: str = typer.Option(..., "--date", "-d", help="The date of the dump"),
    date_format: Optional[str] = typer.Option(None, "--date-format", "-f", help="strptime format of --date"),
) -> None:
    """Print the path of a cached dump."""

    state = _state(ctx)
    parsed = _parse_date(day, date_format or state.config.runtime.date_format)

    with _reported_errors():
        dump_path = state.manager.require_dump(kind, parsed)
    typer.echo(str(dump_path))


@app.command("list")
def list_dumps(
    ctx: typer.Context,
    kind: Optional[DumpKind] = typer.Option(None, "--type", "-t", case_sensitive=False, help="Only list this type"),
    start: Optional[str] = typer.Option(None, "--start", "-s", help="Earliest date to include"),
    end: Optional[str] = typer.Option(None, "--end", "-e", help="Latest date to include"),
    date_format: Optional[str] = typer.Option(None, "--date-format", "-f", help="strptime format of --start/--end"),
    descending: bool = typer.Option(False, "--descending", "-D", help="Newest dumps first"),
) -> None:
    """List cached dumps."""

    state = _state(ctx)
    fmt = date_format or state.config.runtime.date_format
    start_date = _parse_date(start, fmt) if start else None
    end_date = _parse_date(end, fmt) if end else None
    order = DumpOrder.DESCENDING if descending else DumpOrder.ASCENDING

    with _reported_errors():
        records = state.manager.list_dumps(kind=kind, start=start_date, end=end_date, order=order)
    for record in records:
        typer.echo(str(record))


@app.command()
def prefix(ctx: typer.Context) -> None:
    """Print the dump directory."""

    typer.echo(str(_state(ctx).manager.directory))


@app.command()
def link(
    ctx: typer.Context,
    target: Path = typer.Argument(Path("."), help="Where to create the link (default: current directory)"),
) -> None:
    """Symlink the dump directory to TARGET, or TARGET/dumps if TARGET is a directory."""

    with _reported_errors():
        created = _state(ctx).manager.link(target)
    typer.echo(str(created))


def main() -> None:
    app()


__all__ = ["main", "app"]
