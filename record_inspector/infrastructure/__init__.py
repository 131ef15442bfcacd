"""
Infrastructure package for the Record Inspector.

Centralizes store access (read-only connections, scoped acquisition) and the
sample-store helpers used in development and tests. Keep this layer focused
on I/O and resource management, decoupled from report logic.
"""

from record_inspector.infrastructure.store import (
    ArticleStore,
    StoreError,
    StoreOpenError,
    StoreQueryError,
    open_store,
)

__all__ = [
    "ArticleStore",
    "StoreError",
    "StoreOpenError",
    "StoreQueryError",
    "open_store",
]
