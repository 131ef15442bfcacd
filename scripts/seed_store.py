"""
Sample store script for the Record Inspector.

Writes an SQLite file with the article/user schema and deterministic sample
rows, including articles whose image lists are empty, missing or malformed.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path

import typer

from record_inspector.config import get_settings
from record_inspector.infrastructure.sample_data import build_sample_store

app = typer.Typer(help="Generate a sample article store (SQLite).")


@app.command()
def main(
    rows: int = typer.Option(
        20,
        "--rows",
        "-r",
        min=0,
        help="Number of articles to generate.",
    ),
    users: int = typer.Option(
        2,
        "--users",
        "-u",
        min=1,
        help="Number of users to create.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Store file to write (default: the configured store path).",
    ),
) -> None:
    """
    Create the schema and seed sample articles and users.
    """
    db_path = output or get_settings().db_path
    start = time.perf_counter()

    typer.echo(f"Seeding {rows:,} articles and {users} users -> {db_path} (seed={seed})")
    inserted = build_sample_store(db_path, rows=rows, seed=seed, users=users)
    duration = time.perf_counter() - start
    typer.echo(f"Inserted {inserted:,} articles in {duration:.2f}s.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
