"""
Error taxonomy for the sheet endpoint.
ERROR_RESPONSES is the only place an error becomes a status and public message.
"""
import json
from typing import Dict, Tuple, Type


class SheetError(Exception):
    """Base class for failures that end a sheet request."""

    def __init__(self, detail: str = ""):
        super().__init__(detail)
        self.detail = detail


class ValidationError(SheetError):
    pass


class FetchError(SheetError):
    pass


class SerializationError(SheetError):
    pass


ERROR_RESPONSES: Dict[Type[SheetError], Tuple[int, str]] = {
    ValidationError: (422, "Required query parameter 'sheet' is missing"),
    FetchError: (400, "There was an error retrieving data from sheet"),
    SerializationError: (400, "There was an error parsing data from sheet"),
}


def error_response(exc: SheetError) -> Tuple[int, str]:
    for kind in type(exc).__mro__:
        if kind in ERROR_RESPONSES:
            return ERROR_RESPONSES[kind]
    raise KeyError(f"no response mapped for {type(exc).__name__}")


def error_status(exc: SheetError) -> int:
    return error_response(exc)[0]


def error_body(exc: SheetError) -> str:
    """Render the public body for an error; upstream detail is never included."""
    _, message = error_response(exc)
    return json.dumps({"error": {"message": message}}, separators=(",", ":"), ensure_ascii=False)
