import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from api._errors import SerializationError, SheetError, ValidationError, error_body, error_status
from api._feed import fetch_feed
from api._rows import map_rows

logger = logging.getLogger("api")
logger.setLevel(logging.INFO)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
}


def cors_headers(extra_headers: dict | None = None) -> Dict[str, str]:
    headers = dict(CORS_HEADERS)
    if extra_headers:
        headers.update(extra_headers)
    return headers


def to_json(data: Any) -> str:
    # NaN/Infinity are rejected
    try:
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e


def json_response(data: Any, status: int = 200, extra_headers: dict | None = None):
    return (to_json(data), status, cors_headers(extra_headers))


@dataclass
class SheetResponse:
    status: int
    body: str
    headers: Dict[str, str] = field(default_factory=cors_headers)
    # Set when the hosting layer should also see the failure (serialization errors)
    error: Optional[BaseException] = None

    def as_tuple(self):
        return (self.body, self.status, self.headers)


def _error_response(exc: SheetError) -> SheetResponse:
    propagate = exc if isinstance(exc, SerializationError) else None
    return SheetResponse(status=error_status(exc), body=error_body(exc), error=propagate)


def build_sheet_response(sheet_id: str | None) -> SheetResponse:
    """
    Fetch a public sheet and render its rows as a JSON array.

    Steps short-circuit in order: missing id (422), fetch failure (400),
    serialization failure (400, error attached), otherwise 200.
    """
    try:
        if not sheet_id:
            raise ValidationError("sheet")
        document = fetch_feed(sheet_id)
        rows = map_rows(document.feed.entries)
        body = to_json(rows)
    except SheetError as e:
        return _error_response(e)
    return SheetResponse(status=200, body=body)
