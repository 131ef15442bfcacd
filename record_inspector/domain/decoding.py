"""
Best-effort decoding of the serialized `image_urls` column.

The column is written by an ingestion pipeline outside this tool and may be
NULL, empty, or not JSON at all. Decoding therefore returns a tagged result
instead of raising, and the caller decides how to report a failure.
"""
from __future__ import annotations

import json
from typing import Any

from record_inspector.domain.models import DecodeResult, ImageUrlsDecoded, ImageUrlsDecodeFailed

_JSON_TYPE_NAMES = {
    dict: "object",
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    type(None): "null",
}


def decode_image_urls(raw: Any) -> DecodeResult:
    """
    Decode a raw `image_urls` value into a sequence of URL strings.

    A missing or empty value is read as ``"[]"``.

    Parameters
    ----------
    raw : str or None
        The column value as stored. Non-text values fail to decode.

    Returns
    -------
    DecodeResult
        `ImageUrlsDecoded` with the URLs in stored order, or
        `ImageUrlsDecodeFailed` with a human-readable reason.
    """
    text = raw or "[]"
    try:
        parsed = json.loads(text)
    except (TypeError, ValueError, RecursionError) as exc:
        # RecursionError: nesting deeper than the JSON decoder can follow.
        return ImageUrlsDecodeFailed(reason=str(exc))

    if not isinstance(parsed, list):
        kind = _JSON_TYPE_NAMES.get(type(parsed), type(parsed).__name__)
        return ImageUrlsDecodeFailed(reason=f"expected a JSON array, got {kind}")

    for position, url in enumerate(parsed, start=1):
        if not isinstance(url, str):
            return ImageUrlsDecodeFailed(
                reason=f"image URL at position {position} is not a string"
            )

    return ImageUrlsDecoded(urls=tuple(parsed))


__all__ = ["decode_image_urls"]
