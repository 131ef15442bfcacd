from __future__ import annotations

import json

import pytest

from record_inspector.domain.decoding import decode_image_urls
from record_inspector.domain.models import ImageUrlsDecoded, ImageUrlsDecodeFailed


def test_valid_array_keeps_urls_in_order() -> None:
    urls = ["https://cdn.example.com/b.png", "a.jpg", "a.jpg"]

    result = decode_image_urls(json.dumps(urls))

    assert isinstance(result, ImageUrlsDecoded)
    assert result.ok is True
    assert result.urls == tuple(urls)


def test_empty_array_decodes_to_no_urls() -> None:
    result = decode_image_urls("[]")

    assert result == ImageUrlsDecoded(urls=())


@pytest.mark.parametrize("raw", [None, ""])
def test_missing_value_is_read_as_empty_array(raw) -> None:
    result = decode_image_urls(raw)

    assert isinstance(result, ImageUrlsDecoded)
    assert result.urls == ()


def test_malformed_json_returns_failure_with_parser_message() -> None:
    result = decode_image_urls("not-json")

    assert isinstance(result, ImageUrlsDecodeFailed)
    assert result.ok is False
    assert "Expecting value" in result.reason


@pytest.mark.parametrize(
    ("raw", "kind"),
    [
        ('{"url": "a.jpg"}', "object"),
        ('"a.jpg"', "string"),
        ("42", "number"),
        ("true", "boolean"),
        ("null", "null"),
    ],
)
def test_non_array_json_is_a_failure(raw: str, kind: str) -> None:
    result = decode_image_urls(raw)

    assert isinstance(result, ImageUrlsDecodeFailed)
    assert result.reason == f"expected a JSON array, got {kind}"


def test_array_with_non_string_item_is_a_failure() -> None:
    result = decode_image_urls('["a.jpg", 7]')

    assert isinstance(result, ImageUrlsDecodeFailed)
    assert result.reason == "image URL at position 2 is not a string"


def test_non_text_value_does_not_raise() -> None:
    result = decode_image_urls(12345)

    assert isinstance(result, ImageUrlsDecodeFailed)
    assert result.reason


@pytest.mark.parametrize("raw", ["[" * 100_000, "[" * 100_000 + "]" * 100_000])
def test_deeply_nested_array_is_a_failure(raw: str) -> None:
    result = decode_image_urls(raw)

    assert isinstance(result, ImageUrlsDecodeFailed)
    assert result.reason
