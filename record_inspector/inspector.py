"""
Core inspection operations.

`inspect` prints a bounded, newest-first sample of articles and decodes each
article's `image_urls` field. `overview` lists every article and user. Both
take an open `ArticleStore` and a report sink; neither opens nor closes the
store, which is the caller's `open_store` scope's job.

Usage:
    from record_inspector.infrastructure.store import open_store
    from record_inspector.inspector import inspect
    from record_inspector.reporter import ConsoleReportSink

    with open_store() as store:
        inspect(store, limit=5, sink=ConsoleReportSink())
"""

from __future__ import annotations

from typing import Iterator, Optional

from record_inspector.domain.decoding import decode_image_urls
from record_inspector.domain.models import ImageUrlsDecodeFailed, Record, ReportEntry
from record_inspector.infrastructure.store import ArticleStore, StoreQueryError
from record_inspector.reporter import ConsoleReportSink, ReportSink
from record_inspector.utils.logging import get_logger

log = get_logger(__name__)

BANNER = "Checking recent articles and their image URLs..."
NO_IMAGES = "No images found"


def _validate_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return limit


def record_entries(index: int, record: Record) -> Iterator[ReportEntry]:
    """
    Yield the report lines for one record.

    A decode failure is reported in place of the image list; it never
    propagates.
    """
    yield ReportEntry("header", "Article", index=index)
    yield ReportEntry("field", "ID", record.id, index)
    yield ReportEntry("field", "Title", record.title, index)
    yield ReportEntry("field", "Created", record.created_at, index)
    yield ReportEntry("field", "Image URLs (raw)", record.image_urls, index)

    decoded = decode_image_urls(record.image_urls)
    if isinstance(decoded, ImageUrlsDecodeFailed):
        log.warning(
            "Could not decode image URLs",
            extra={"record_id": record.id, "reason": decoded.reason},
        )
        yield ReportEntry("error", "Error parsing image URLs", decoded.reason, index)
        return

    yield ReportEntry("images", "Parsed Image URLs", list(decoded.urls), index)
    yield ReportEntry("field", "Number of images", len(decoded.urls), index)
    if not decoded.urls:
        yield ReportEntry("notice", "images", NO_IMAGES, index)
        return
    for position, url in enumerate(decoded.urls, start=1):
        yield ReportEntry("image", "Image", url, position)


def inspect(store: ArticleStore, limit: int = 5, sink: Optional[ReportSink] = None) -> None:
    """
    Report the `limit` most recent articles and their decoded image URLs.

    Parameters
    ----------
    store : ArticleStore
        Open store handle, owned by the caller.
    limit : int
        Maximum number of articles to report; must be a positive integer.
    sink : ReportSink, optional
        Destination of the report. Defaults to the console.

    Raises
    ------
    ValueError
        If `limit` is not a positive integer. Nothing is queried or emitted.
    StoreQueryError
        If the query fails. The error is logged; no record lines are emitted.
    """
    _validate_limit(limit)
    sink = sink if sink is not None else ConsoleReportSink()

    sink.emit(ReportEntry("banner", "banner", BANNER))
    try:
        records = store.fetch_recent_records(limit)
    except StoreQueryError as exc:
        log.error("Error querying database: %s", exc, extra={"limit": limit})
        sink.flush()
        raise

    log.info("Fetched recent articles", extra={"rows": len(records), "limit": limit})
    sink.emit(ReportEntry("count", "recent articles", len(records)))
    for index, record in enumerate(records, start=1):
        for entry in record_entries(index, record):
            sink.emit(entry)
    sink.flush()


def overview(store: ArticleStore, sink: Optional[ReportSink] = None) -> int:
    """
    List every article and every user in the store.

    Each listing is queried independently: when one fails, the failure is
    logged and reported, and the next listing still runs.

    Returns
    -------
    int
        Number of listings that failed (0 on full success).
    """
    sink = sink if sink is not None else ConsoleReportSink()
    failures = 0

    sink.emit(ReportEntry("banner", "banner", "Checking database contents..."))

    sink.emit(ReportEntry("section", "articles", "Articles in database"))
    try:
        articles = store.fetch_article_index()
    except StoreQueryError as exc:
        failures += 1
        log.error("Database error: %s", exc, extra={"table": store.articles_table})
        sink.emit(ReportEntry("error", "Database error", str(exc)))
    else:
        sink.emit(ReportEntry("summary", "Total articles", len(articles)))
        for index, article in enumerate(articles, start=1):
            row = {
                "ID": article.id,
                "User ID": article.user_id,
                "Title": article.title,
                "Created": article.created_at,
            }
            sink.emit(ReportEntry("row", "Articles", row, index))

    sink.emit(ReportEntry("section", "users", "Users in database"))
    try:
        users = store.fetch_users()
    except StoreQueryError as exc:
        failures += 1
        log.error("Users database error: %s", exc, extra={"table": store.users_table})
        sink.emit(ReportEntry("error", "Users database error", str(exc)))
    else:
        sink.emit(ReportEntry("summary", "Total users", len(users)))
        for index, user in enumerate(users, start=1):
            row = {"User ID": user.id, "Username": user.username, "Email": user.email}
            sink.emit(ReportEntry("row", "Users", row, index))

    sink.flush()
    return failures


__all__ = ["BANNER", "NO_IMAGES", "inspect", "overview", "record_entries"]
