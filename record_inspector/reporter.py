"""
Report sinks for the Record Inspector.

The inspector emits `ReportEntry` values; a sink decides how they look.
`ConsoleReportSink` prints human-readable lines (and tables for listings)
through rich, `JsonReportSink` prints one JSON object per entry, and
`CollectingSink` keeps entries in memory.
"""

from __future__ import annotations

import json
from typing import IO, Any, Dict, List, Optional, Protocol, runtime_checkable

from rich import box
from rich.console import Console
from rich.table import Table

from record_inspector.domain.models import ReportEntry


@runtime_checkable
class ReportSink(Protocol):
    """Anything that can receive report entries."""

    def emit(self, entry: ReportEntry) -> None:
        ...

    def flush(self) -> None:
        ...


def _display(value: Any) -> str:
    if value is None:
        return "None"
    return str(value)


def render_line(entry: ReportEntry) -> str:
    """
    Render a non-tabular entry as a single console line.

    Some kinds start with a newline to separate report blocks.
    """
    kind = entry.kind
    if kind == "banner":
        return _display(entry.value)
    if kind == "section":
        return f"\n{entry.value}:"
    if kind == "summary":
        return f"\n{entry.key}: {entry.value}"
    if kind == "count":
        return f"\nFound {entry.value} {entry.key}:"
    if kind == "header":
        return f"\n--- {entry.key} {entry.index} ---"
    if kind == "images":
        return f"{entry.key}: {json.dumps(list(entry.value), ensure_ascii=False)}"
    if kind == "image":
        return f"  {entry.key} {entry.index}: {entry.value}"
    if kind == "notice":
        return f"  {entry.value}"
    # field, error and anything added later
    return f"{entry.key}: {_display(entry.value)}"


class ConsoleReportSink:
    """
    Human-readable rendering to stdout.

    Consecutive `row` entries are gathered into one rich table, printed when
    the next non-row entry arrives or on `flush()`.
    """

    def __init__(self, file: Optional[IO[str]] = None) -> None:
        self.console = Console(file=file, highlight=False)
        self._table_title: Optional[str] = None
        self._rows: List[Dict[str, Any]] = []

    def emit(self, entry: ReportEntry) -> None:
        if entry.kind == "row":
            if self._table_title is None:
                self._table_title = entry.key
            self._rows.append(dict(entry.value))
            return
        self._flush_table()
        self.console.out(render_line(entry))

    def flush(self) -> None:
        self._flush_table()
        self.console.file.flush()

    def _flush_table(self) -> None:
        if not self._rows:
            self._table_title = None
            return

        table = Table(title=self._table_title, box=box.ROUNDED)
        columns = list(self._rows[0].keys())
        for name in columns:
            justify = "right" if name in ("ID", "User ID") else "left"
            table.add_column(name, justify=justify, style="cyan" if name == "ID" else None)
        for row in self._rows:
            table.add_row(*(_display(row.get(name)) for name in columns))

        self.console.print(table)
        self._rows = []
        self._table_title = None


class JsonReportSink:
    """Emit each entry as one JSON object per line."""

    def __init__(self, file: Optional[IO[str]] = None) -> None:
        self.console = Console(file=file, highlight=False)

    def emit(self, entry: ReportEntry) -> None:
        payload = {
            "kind": entry.kind,
            "key": entry.key,
            "value": entry.value,
            "index": entry.index,
        }
        self.console.out(json.dumps(payload, default=str))

    def flush(self) -> None:
        self.console.file.flush()


class CollectingSink:
    """Keep emitted entries in memory, in order."""

    def __init__(self) -> None:
        self.entries: List[ReportEntry] = []

    def emit(self, entry: ReportEntry) -> None:
        self.entries.append(entry)

    def flush(self) -> None:
        pass

    def of_kind(self, kind: str) -> List[ReportEntry]:
        return [entry for entry in self.entries if entry.kind == kind]


__all__ = [
    "CollectingSink",
    "ConsoleReportSink",
    "JsonReportSink",
    "ReportSink",
    "render_line",
]
