"""
Read-only access to the persisted article store.

The store is an SQLite file whose schema is owned by the application that
writes it; this module only reads from it. Connections are opened in SQLite's
read-only URI mode, so a missing file is reported as an error rather than
silently replaced by an empty database.

`open_store` is the only way callers obtain an `ArticleStore`; it releases the
connection on every exit path, including query failures.
"""

from __future__ import annotations

import re
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, List, Optional, Union

from record_inspector.config import get_settings
from record_inspector.domain.models import ArticleSummary, Record, UserSummary
from record_inspector.utils.logging import get_logger

log = get_logger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class StoreError(RuntimeError):
    """Base class for failures talking to the persisted store."""


class StoreOpenError(StoreError):
    """The store file could not be opened."""


class StoreQueryError(StoreError):
    """A query against the store failed (missing table, bad column, I/O error)."""


def _quote_identifier(name: str) -> str:
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid table name {name!r}; expected a plain SQL identifier.")
    return f'"{name}"'


class ArticleStore:
    """
    Handle over an open, read-only store connection.

    Parameters
    ----------
    conn : sqlite3.Connection
        An open connection. The handle does not own it; `open_store` does.
    articles_table : str
        Name of the table holding articles.
    users_table : str
        Name of the table holding users.
    """

    def __init__(
        self,
        conn: sqlite3.Connection,
        articles_table: str = "user_audiobooks",
        users_table: str = "users",
    ) -> None:
        self._conn = conn
        self._articles = _quote_identifier(articles_table)
        self._users = _quote_identifier(users_table)
        self.articles_table = articles_table
        self.users_table = users_table

    def _fetchall(self, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        try:
            cur = self._conn.execute(sql, params)
            try:
                return cur.fetchall()
            finally:
                cur.close()
        except sqlite3.Error as exc:
            raise StoreQueryError(f"Query failed: {exc}") from exc

    def fetch_recent_records(self, limit: int) -> List[Record]:
        """
        Fetch the `limit` most recently created articles, newest first.

        Parameters
        ----------
        limit : int
            Maximum number of rows to return.

        Returns
        -------
        list of Record
            Rows ordered by `created_at` descending.

        Raises
        ------
        StoreQueryError
            If the query cannot be executed.
        """
        sql = (
            f"SELECT id, title, image_urls, created_at FROM {self._articles} "
            "ORDER BY created_at DESC LIMIT ?"
        )
        log.debug("Fetching recent records", extra={"table": self.articles_table, "limit": limit})
        rows = self._fetchall(sql, (limit,))
        return [Record(**dict(row)) for row in rows]

    def fetch_article_index(self) -> List[ArticleSummary]:
        """Fetch every article's id, owner, title and creation time, newest first."""
        sql = f"SELECT id, user_id, title, created_at FROM {self._articles} ORDER BY created_at DESC"
        return [ArticleSummary(**dict(row)) for row in self._fetchall(sql)]

    def fetch_users(self) -> List[UserSummary]:
        """Fetch every user's id, username and email."""
        sql = f"SELECT id, username, email FROM {self._users}"
        return [UserSummary(**dict(row)) for row in self._fetchall(sql)]


def _decode_text(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


def _connect_read_only(path: Path) -> sqlite3.Connection:
    uri = f"{path.resolve().as_uri()}?mode=ro"
    try:
        conn = sqlite3.connect(uri, uri=True)
    except sqlite3.Error as exc:
        raise StoreOpenError(f"Cannot open store at {path}: {exc}") from exc
    conn.row_factory = sqlite3.Row
    # Invalid UTF-8 in stored text is replaced per value instead of failing the fetch.
    conn.text_factory = _decode_text
    return conn


@contextmanager
def open_store(
    db_path: Optional[Union[str, Path]] = None,
    articles_table: Optional[str] = None,
    users_table: Optional[str] = None,
) -> Generator[ArticleStore, None, None]:
    """
    Context manager that opens the store read-only and always closes it.

    Unset arguments fall back to the configured settings.

    Example
    -------
        with open_store() as store:
            records = store.fetch_recent_records(5)

    Raises
    ------
    StoreOpenError
        If the store file is missing or cannot be opened.
    ValueError
        If a table name is not a plain SQL identifier.
    """
    settings = get_settings()
    path = Path(db_path) if db_path is not None else settings.db_path

    conn = _connect_read_only(path)
    log.debug("Store opened", extra={"db_path": str(path)})
    try:
        yield ArticleStore(
            conn,
            articles_table=articles_table or settings.articles_table,
            users_table=users_table or settings.users_table,
        )
    finally:
        conn.close()
        log.debug("Store closed", extra={"db_path": str(path)})


__all__ = [
    "ArticleStore",
    "StoreError",
    "StoreOpenError",
    "StoreQueryError",
    "open_store",
]
