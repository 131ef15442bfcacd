from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from record_inspector.config import get_settings
from record_inspector.infrastructure.store import StoreError, open_store
from record_inspector.inspector import inspect as inspect_records
from record_inspector.inspector import overview as overview_store
from record_inspector.reporter import ConsoleReportSink, JsonReportSink, ReportSink
from record_inspector.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Read-only inspection of the article store.")
log = get_logger(__name__)

_DB_OPTION_HELP = "Path to the store file (default from settings)."


def _setup(json_output: bool) -> ReportSink:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    return JsonReportSink() if json_output else ConsoleReportSink()


def _fail(exc: Exception) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    try:
        settings = get_settings()
    except ValueError as exc:
        raise _fail(exc) from exc
    typer.echo(
        f"DB={settings.db_path} | articles={settings.articles_table} "
        f"users={settings.users_table} | limit={settings.inspect_limit} "
        f"env={settings.app_env}"
    )


@app.command()
def inspect(
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Number of most recent articles to show (default from settings).",
    ),
    db: Optional[Path] = typer.Option(None, "--db", help=_DB_OPTION_HELP),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit one JSON object per report line instead of text.",
    ),
) -> None:
    """
    Show the most recent articles with their decoded image URLs.
    """
    # pydantic ValidationError (bad settings) is a ValueError, as is a bad table name.
    try:
        sink = _setup(json_output)
        row_limit = limit or get_settings().inspect_limit
        with open_store(db) as store:
            inspect_records(store, limit=row_limit, sink=sink)
    except (StoreError, ValueError) as exc:
        raise _fail(exc) from exc


@app.command()
def overview(
    db: Optional[Path] = typer.Option(None, "--db", help=_DB_OPTION_HELP),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit one JSON object per report line instead of tables.",
    ),
) -> None:
    """
    List all articles and users in the store.
    """
    try:
        sink = _setup(json_output)
        with open_store(db) as store:
            failures = overview_store(store, sink=sink)
    except (StoreError, ValueError) as exc:
        raise _fail(exc) from exc

    if failures:
        log.warning("Overview finished with failed listings", extra={"failures": failures})
        raise typer.Exit(code=1)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
