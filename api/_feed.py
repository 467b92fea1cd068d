import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from api._errors import FetchError

logger = logging.getLogger("api")

# Public list feed for the first worksheet (od6); override the template via env if needed.
SHEET_FEED_URL = os.environ.get(
    'SHEET_FEED_URL',
    'https://spreadsheets.google.com/feeds/list/{sheet_id}/od6/public/values?alt=json'
).strip()


def _timeout_from_env(raw: str) -> Optional[float]:
    raw = (raw or '').strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid SHEET_FETCH_TIMEOUT %r; using no timeout", raw)
        return None


SHEET_FETCH_TIMEOUT = _timeout_from_env(os.environ.get('SHEET_FETCH_TIMEOUT', ''))

RawRow = Dict[str, Any]


class FeedDecodeError(ValueError):
    pass


@dataclass
class SheetText:
    text: str = ''


@dataclass
class SheetTitle:
    type: str = ''
    text: str = ''


@dataclass
class SheetFeed:
    id: SheetText = field(default_factory=SheetText)
    updated: SheetText = field(default_factory=SheetText)
    entries: List[RawRow] = field(default_factory=list)


@dataclass
class SheetDocument:
    version: str = ''
    encoding: str = ''
    title: SheetTitle = field(default_factory=SheetTitle)
    feed: SheetFeed = field(default_factory=SheetFeed)


def feed_url(sheet_id: str) -> str:
    return SHEET_FEED_URL.format(sheet_id=sheet_id)


def _expect(value, kind, name):
    if not isinstance(value, kind):
        raise FeedDecodeError(f"'{name}' has unexpected type {type(value).__name__}")
    return value


def _object(payload: dict, key: str, path: str) -> dict:
    value = payload.get(key)
    if value is None:
        return {}
    return _expect(value, dict, f"{path}{key}")


def _string(payload: dict, key: str, path: str) -> str:
    value = payload.get(key)
    if value is None:
        return ''
    return _expect(value, str, f"{path}{key}")


def _text(payload: dict, key: str, path: str) -> SheetText:
    obj = _object(payload, key, path)
    return SheetText(text=_string(obj, '$t', f"{path}{key}."))


def parse_feed(payload: Any) -> SheetDocument:
    """
    Decode the published feed JSON into a SheetDocument.

    Missing fields fall back to empty values (an absent 'entry' is an empty sheet).
    A field of the wrong JSON type raises FeedDecodeError.
    """
    doc = _expect(payload, dict, 'response')
    title = _object(doc, 'title', '')
    feed = _object(doc, 'feed', '')
    entries = feed.get('entry')
    if entries is None:
        entries = []
    _expect(entries, list, 'feed.entry')
    rows = []
    for idx, row in enumerate(entries):
        # null entries decode as empty rows
        rows.append(_expect(row, dict, f"feed.entry[{idx}]") if row is not None else {})
    return SheetDocument(
        version=_string(doc, 'version', ''),
        encoding=_string(doc, 'encoding', ''),
        title=SheetTitle(type=_string(title, 'type', 'title.'), text=_string(title, '$t', 'title.')),
        feed=SheetFeed(
            id=_text(feed, 'id', 'feed.'),
            updated=_text(feed, 'updated', 'feed.'),
            entries=rows,
        ),
    )


def fetch_feed(sheet_id: str) -> SheetDocument:
    """Fetch and decode the public feed for one sheet. Any failure raises FetchError."""
    url = feed_url(sheet_id)
    try:
        with requests.get(url, timeout=SHEET_FETCH_TIMEOUT) as resp:
            logger.info("[Feed] GET %s status %s", url, resp.status_code)
            resp.raise_for_status()
            payload = json.loads(resp.content)
        return parse_feed(payload)
    except (requests.RequestException, ValueError) as e:
        logger.warning("[Feed] fetch failed for sheet %s: %s", sheet_id, e)
        raise FetchError(str(e)) from e
