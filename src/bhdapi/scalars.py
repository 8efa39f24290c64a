"""Wire codecs for the service's two custom scalar shapes.

Flags travel as the bare JSON numbers ``1``/``0`` on output but are accepted
as ``true``/``false``/``1``/``0`` on input. Timestamps are quoted
``YYYY-MM-DD HH:MM:SS`` strings with no timezone; they are kept as naive
datetimes and never converted.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from bhdapi.exceptions import DecodeError

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_TIME_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")
_FLAG_TOKENS = {b"true": True, b"1": True, b"false": False, b"0": False}


def _validate_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValueError(f"invalid bool value {value!r}")


def _validate_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"invalid time value {value!r}")
    return parse_timestamp(value)


Flag = Annotated[
    bool,
    PlainValidator(_validate_flag),
    PlainSerializer(lambda v: 1 if v else 0, return_type=int),
]

# None is only the default for a key the service left out; a JSON null fails.
Timestamp = Annotated[
    datetime | None,
    PlainValidator(_validate_timestamp),
    PlainSerializer(lambda v: None if v is None else format_timestamp(v), return_type=str | None),
]


def parse_timestamp(text: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS`` into a naive datetime.

    Raises:
        ValueError: If *text* does not match the format exactly.
    """
    if not _TIME_RE.fullmatch(text):
        raise ValueError(f"invalid time value {text!r}")
    return datetime.strptime(text, TIME_FORMAT)


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIME_FORMAT)


def encode_flag(value: bool) -> bytes:
    """Return the raw JSON token for a flag: ``b"1"`` or ``b"0"``."""
    return b"1" if value else b"0"


def decode_flag(buf: bytes) -> bool:
    """Decode a raw JSON flag token (case-insensitive ``true|false|1|0``).

    Raises:
        DecodeError: For any other token, including quoted strings.
    """
    try:
        return _FLAG_TOKENS[buf.strip().lower()]
    except KeyError:
        raise DecodeError(f"invalid bool value {buf!r}") from None


def encode_timestamp(value: datetime) -> bytes:
    """Return the raw JSON token for a timestamp, double quotes included."""
    return b'"' + format_timestamp(value).encode("ascii") + b'"'


def decode_timestamp(buf: bytes) -> datetime:
    """Decode a raw, quoted JSON timestamp token.

    Raises:
        DecodeError: If the buffer is too short or the text does not parse.
    """
    if len(buf) < 2:
        raise DecodeError("invalid time value")
    try:
        return parse_timestamp(buf[1:-1].decode("ascii"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise DecodeError(str(exc)) from exc
