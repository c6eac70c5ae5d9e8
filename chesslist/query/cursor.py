import base64
import binascii
import json
from dataclasses import dataclass

from chesslist.core.exceptions import DecodeError


@dataclass(frozen=True)
class Cursor:
    """Position of the last row of a page: its sort column value and its id."""

    value: str
    id: str


def encode_cursor(value: str, id: str) -> str:
    payload = json.dumps({"value": value, "id": id}, separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_cursor(token: str) -> Cursor:
    """
    Decodes a token produced by ``encode_cursor``.
    Raises DecodeError for anything that is not base64 JSON holding exactly
    a string ``value`` and a string ``id``.
    """
    try:
        raw = base64.b64decode(token, validate=True)
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError, RecursionError):
        raise DecodeError()

    if not isinstance(data, dict) or set(data) != {"value", "id"}:
        raise DecodeError()
    if not isinstance(data["value"], str) or not isinstance(data["id"], str):
        raise DecodeError()
    return Cursor(value=data["value"], id=data["id"])
