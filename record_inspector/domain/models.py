"""
Domain models for the Record Inspector.

Defines read-only row schemas for the externally owned article and user
tables, the tagged result of decoding an article's `image_urls` field, and
the `ReportEntry` unit that the inspector emits to report sinks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """
    A single row of the articles table as fetched by the inspector.

    `image_urls` is kept exactly as stored; decoding happens separately so a
    malformed value never prevents the row from being reported.
    """

    id: Any = Field(..., description="Store-assigned identifier.")
    title: Optional[str] = Field(None, description="Article title.")
    image_urls: Any = Field(None, description="Raw JSON array of image URLs, as stored.")
    created_at: Any = Field(None, description="Creation timestamp, used as sort key.")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ArticleSummary(BaseModel):
    """Row of the article listing shown by the overview."""

    id: Any
    user_id: Any = None
    title: Optional[str] = None
    created_at: Any = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class UserSummary(BaseModel):
    """Row of the user listing shown by the overview."""

    id: Any
    username: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


@dataclass(frozen=True)
class ImageUrlsDecoded:
    """Successful decode of an `image_urls` field."""

    urls: Tuple[str, ...]
    ok: Literal[True] = True


@dataclass(frozen=True)
class ImageUrlsDecodeFailed:
    """Failed decode of an `image_urls` field, carrying the reason."""

    reason: str
    ok: Literal[False] = False


DecodeResult = Union[ImageUrlsDecoded, ImageUrlsDecodeFailed]

EntryKind = Literal[
    "banner",
    "summary",
    "count",
    "header",
    "field",
    "images",
    "image",
    "notice",
    "error",
    "section",
    "row",
]


@dataclass(frozen=True)
class ReportEntry:
    """
    One key/value line of an inspection report.

    Attributes
    ----------
    kind : str
        Category of the line; sinks use it to choose a rendering.
    key : str
        Label of the value (e.g. "ID", "Title", "Image").
    value : Any
        Payload of the line. Plain JSON-compatible data.
    index : int or None
        1-based position of the record (or image) the line belongs to.
    """

    kind: EntryKind
    key: str
    value: Any = None
    index: Optional[int] = None


__all__ = [
    "ArticleSummary",
    "DecodeResult",
    "EntryKind",
    "ImageUrlsDecodeFailed",
    "ImageUrlsDecoded",
    "Record",
    "ReportEntry",
    "UserSummary",
]
