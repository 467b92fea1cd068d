"""
Pytest configuration and fixtures for the sheet endpoint tests.

The upstream feed is never contacted: requests.get is patched to return
in-memory requests.Response objects.
"""
import io
import json
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests


SHEET_ID = "1MfmSdcF5Y-H-tEiaSIqTVwzHD8wXJvFPbEvrTFnznGE"


def _make_response(body: Any = None, status: int = 200, raw: bytes | None = None) -> requests.Response:
    """Build a requests.Response whose body is `raw` bytes or `body` encoded as JSON."""
    if raw is None:
        raw = json.dumps(body).encode("utf-8")
    resp = requests.Response()
    resp.status_code = status
    resp.reason = "OK" if status < 400 else "Bad Request"
    resp.url = "https://spreadsheets.google.com/feeds/list/test/od6/public/values?alt=json"
    resp.raw = io.BytesIO(raw)
    resp.close = MagicMock(wraps=resp.close)
    return resp


def cell(text):
    return {"$t": text}


def _feed_payload(entries: list | None = None) -> dict:
    """Feed envelope as published by Google, wrapping the given entries."""
    feed = {
        "id": cell(f"https://spreadsheets.google.com/feeds/list/{SHEET_ID}/od6/public/values"),
        "updated": cell("2017-11-28T22:35:19.634Z"),
    }
    if entries is not None:
        feed["entry"] = entries
    return {
        "version": "1.0",
        "encoding": "UTF-8",
        "title": {"type": "text", "$t": "Sheet1"},
        "feed": feed,
    }


@pytest.fixture
def cities_rows():
    return [
        {
            "id": cell(f"https://spreadsheets.google.com/feeds/list/{SHEET_ID}/od6/public/values/cokwr"),
            "updated": cell("2017-11-28T22:35:19.634Z"),
            "gsx$city": cell("Sydney"),
            "gsx$population": cell("5,131,326"),
        },
        {
            "id": cell(f"https://spreadsheets.google.com/feeds/list/{SHEET_ID}/od6/public/values/cpzh4"),
            "updated": cell("2017-11-28T22:35:19.634Z"),
            "gsx$city": cell("Melbourne"),
            "gsx$population": cell("4,725,316"),
        },
    ]


@pytest.fixture
def states_row():
    return {
        "id": cell("https://spreadsheets.google.com/feeds/list/1jNWarfCxUCnjby0fKPViY9j5h2XTB4k0InK9OWdd1-s/od6/public/values/cyevm"),
        "updated": cell("2017-11-28T22:35:19.634Z"),
        "gsx$state": cell("Australian Capital Territory"),
        "gsx$population": cell("398,300.00"),
        "gsx$capital": cell("Canberra"),
    }


@pytest.fixture
def mock_feed():
    """
    Patch the outbound GET.

    Usage:
        def test_x(mock_feed):
            with mock_feed(make_response(feed_payload([...]))) as get:
                ...
    Pass an exception instance to make the GET raise it.
    """
    def _mock(result):
        if isinstance(result, BaseException):
            return patch("api._feed.requests.get", side_effect=result)
        return patch("api._feed.requests.get", return_value=result)
    return _mock


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def feed_payload():
    return _feed_payload
