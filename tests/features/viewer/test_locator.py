"""Tests for page locators."""

from __future__ import annotations

import pytest

from sharaku.features.viewer import PageLocator, format_view_uri, parse_view_uri


def test_format_view_uri() -> None:
    assert format_view_uri(12, 3) == "sharaku://view/12/3"


@pytest.mark.parametrize(
    ("uri", "expected"),
    [
        ("sharaku://view/12/3", PageLocator(work_id=12, page_index=3)),
        ("sharaku://view/-1/0", PageLocator(work_id=-1, page_index=0)),
        ("sharaku://localhost/view/5/7?cache=no", PageLocator(work_id=5, page_index=7)),
        ("view/5/7#top", PageLocator(work_id=5, page_index=7)),
    ],
)
def test_parse_view_uri(uri: str, expected: PageLocator) -> None:
    assert parse_view_uri(uri) == expected


@pytest.mark.parametrize(
    "uri",
    [
        "sharaku://view/",
        "sharaku://view/12",
        "sharaku://view/abc/1",
        "sharaku://view/1/-2",
        "sharaku://view/1/2/3",
        "sharaku://pages/1/2",
        "",
    ],
)
def test_parse_view_uri_rejects_malformed(uri: str) -> None:
    assert parse_view_uri(uri) is None


def test_format_and_parse_agree() -> None:
    assert parse_view_uri(format_view_uri(42, 9)) == PageLocator(work_id=42, page_index=9)
