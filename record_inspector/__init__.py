"""
Record Inspector - read-only reporting over a stored-articles database.

Prints a bounded, newest-first sample of stored articles and decodes each
article's serialized image-URL list on a best-effort basis:

- Malformed image lists are reported per article and never stop the report
- A failing query is logged and ends the run without partial output
- The store is opened read-only and released on every exit path
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from record_inspector.config import Settings, get_settings
from record_inspector.domain.decoding import decode_image_urls
from record_inspector.domain.models import (
    ImageUrlsDecoded,
    ImageUrlsDecodeFailed,
    Record,
    ReportEntry,
)
from record_inspector.infrastructure.store import (
    ArticleStore,
    StoreError,
    StoreOpenError,
    StoreQueryError,
    open_store,
)
from record_inspector.inspector import inspect, overview
from record_inspector.reporter import (
    CollectingSink,
    ConsoleReportSink,
    JsonReportSink,
    ReportSink,
)
from record_inspector.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "ImageUrlsDecoded",
    "ImageUrlsDecodeFailed",
    "Record",
    "ReportEntry",
    "decode_image_urls",
    # Store
    "ArticleStore",
    "StoreError",
    "StoreOpenError",
    "StoreQueryError",
    "open_store",
    # Inspection
    "inspect",
    "overview",
    # Reporting
    "CollectingSink",
    "ConsoleReportSink",
    "JsonReportSink",
    "ReportSink",
    # Logging
    "configure_logging",
    "get_logger",
]
