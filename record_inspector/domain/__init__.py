"""
Domain package for the Record Inspector.

Exports the row models, decode results and report entries used across the
store layer, the inspector and the report sinks. Keep this package focused on
data definitions and pure transformations.
"""

from record_inspector.domain.decoding import decode_image_urls
from record_inspector.domain.models import (
    ArticleSummary,
    DecodeResult,
    ImageUrlsDecoded,
    ImageUrlsDecodeFailed,
    Record,
    ReportEntry,
    UserSummary,
)

__all__ = [
    "ArticleSummary",
    "DecodeResult",
    "ImageUrlsDecoded",
    "ImageUrlsDecodeFailed",
    "Record",
    "ReportEntry",
    "UserSummary",
    "decode_image_urls",
]
