"""Scalar and format codecs for the bridge's wire encodings.

The bridge is loosely typed: optional values are sometimes sent as JSON null,
sometimes as the literal string "none", and dates use a fixed format without
timezone offset. The helpers in this module turn raw JSON values into typed
Python values and raise DecodeError naming the offending field otherwise.

Only the exact sentinel string means absence. A date that does not match the
wire format is an error, not an absent value.
"""

from __future__ import annotations

import json
from datetime import datetime, time
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from pyhuebridge.const import DATE_TIME_FORMAT, NONE_SENTINEL, TIME_FORMAT
from pyhuebridge.exceptions import DecodeError


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

__all__ = [
    "field_path",
    "format_date_time",
    "format_time",
    "load_json",
    "optional_bool",
    "optional_float",
    "optional_int",
    "optional_str",
    "optional_uint",
    "parse_coordinates",
    "parse_date_time",
    "parse_enum",
    "parse_optional_date_time",
    "parse_optional_enum",
    "parse_optional_object",
    "parse_optional_string",
    "parse_optional_time",
    "parse_string_list",
    "require",
    "require_bool",
    "require_float",
    "require_int",
    "require_list",
    "require_object",
    "require_str",
    "require_uint",
]


def field_path(parent: str | None, key: str) -> str:
    """Join a parent path and a key into a dotted field path."""
    return f"{parent}.{key}" if parent else key


def load_json(raw: Any) -> Any:
    """Decode raw bytes or text as JSON.

    Values that are already decoded (dicts, lists, scalars) are returned as-is,
    so parsers accept both the raw response body and the output of
    ``aiohttp.ClientResponse.json()``.

    Raises:
        DecodeError: If the text is not valid JSON.
    """
    if isinstance(raw, (bytes, bytearray, str)):
        try:
            return json.loads(raw)
        except ValueError as err:
            msg = f"Invalid JSON: {err}"
            raise DecodeError(msg) from err
    return raw


# -------------------------------------------------------------------------
# Typed Values
# -------------------------------------------------------------------------


def _type_error(expected: str, value: Any, field: str | None) -> DecodeError:
    return DecodeError(f"expected {expected}, got {type(value).__name__}", field=field)


def _check_str(value: Any, field: str | None) -> str:
    if not isinstance(value, str):
        raise _type_error("string", value, field)
    return value


def _check_bool(value: Any, field: str | None) -> bool:
    if not isinstance(value, bool):
        raise _type_error("boolean", value, field)
    return value


def _check_int(value: Any, field: str | None) -> int:
    # bool is a subclass of int but never a valid integer on the wire
    if isinstance(value, bool) or not isinstance(value, int):
        raise _type_error("integer", value, field)
    return value


def _check_uint(value: Any, field: str | None, maximum: int | None) -> int:
    number = _check_int(value, field)
    if number < 0 or (maximum is not None and number > maximum):
        upper = "" if maximum is None else f"..{maximum}"
        msg = f"value {number} out of range 0{upper}"
        raise DecodeError(msg, field=field)
    return number


def _check_float(value: Any, field: str | None) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_error("number", value, field)
    return float(value)


def require(data: Mapping[str, Any], key: str, parent: str | None = None) -> Any:
    """Return a required field, raising DecodeError when it is missing."""
    if key not in data:
        raise DecodeError("missing field", field=field_path(parent, key))
    return data[key]


def require_object(value: Any, field: str | None = None) -> dict[str, Any]:
    """Check that a value is a JSON object."""
    if not isinstance(value, dict):
        raise _type_error("object", value, field)
    return value


def require_list(value: Any, field: str | None = None) -> list[Any]:
    """Check that a value is a JSON array."""
    if not isinstance(value, list):
        raise _type_error("array", value, field)
    return value


def require_str(data: Mapping[str, Any], key: str, parent: str | None = None) -> str:
    """Return a required string field."""
    return _check_str(require(data, key, parent), field_path(parent, key))


def require_bool(data: Mapping[str, Any], key: str, parent: str | None = None) -> bool:
    """Return a required boolean field."""
    return _check_bool(require(data, key, parent), field_path(parent, key))


def require_int(data: Mapping[str, Any], key: str, parent: str | None = None) -> int:
    """Return a required integer field."""
    return _check_int(require(data, key, parent), field_path(parent, key))


def require_uint(
    data: Mapping[str, Any], key: str, parent: str | None = None, maximum: int | None = None
) -> int:
    """Return a required unsigned integer field, optionally bounded by ``maximum``."""
    return _check_uint(require(data, key, parent), field_path(parent, key), maximum)


def require_float(data: Mapping[str, Any], key: str, parent: str | None = None) -> float:
    """Return a required numeric field as float."""
    return _check_float(require(data, key, parent), field_path(parent, key))


def optional_str(data: Mapping[str, Any], key: str, parent: str | None = None) -> str | None:
    """Return an optional string field; missing or null is None."""
    value = data.get(key)
    return None if value is None else _check_str(value, field_path(parent, key))


def optional_bool(data: Mapping[str, Any], key: str, parent: str | None = None) -> bool | None:
    """Return an optional boolean field; missing or null is None."""
    value = data.get(key)
    return None if value is None else _check_bool(value, field_path(parent, key))


def optional_int(data: Mapping[str, Any], key: str, parent: str | None = None) -> int | None:
    """Return an optional integer field; missing or null is None."""
    value = data.get(key)
    return None if value is None else _check_int(value, field_path(parent, key))


def optional_uint(
    data: Mapping[str, Any], key: str, parent: str | None = None, maximum: int | None = None
) -> int | None:
    """Return an optional unsigned integer field; missing or null is None.

    Example:
        >>> optional_uint({"bri": 254}, "bri", "state", maximum=255)
        254
    """
    value = data.get(key)
    return None if value is None else _check_uint(value, field_path(parent, key), maximum)


def optional_float(data: Mapping[str, Any], key: str, parent: str | None = None) -> float | None:
    """Return an optional numeric field; missing or null is None."""
    value = data.get(key)
    return None if value is None else _check_float(value, field_path(parent, key))


def parse_string_list(value: Any, field: str | None = None) -> tuple[str, ...]:
    """Parse a JSON array of strings (light ids, links, ...)."""
    items = require_list(value, field)
    return tuple(_check_str(item, f"{field}[{index}]") for index, item in enumerate(items))


def parse_coordinates(value: Any, field: str | None = None) -> tuple[float, float]:
    """Parse an ``[x, y]`` pair of CIE color space coordinates."""
    items = require_list(value, field)
    if len(items) != 2:  # noqa: PLR2004
        msg = f"expected 2 coordinates, got {len(items)}"
        raise DecodeError(msg, field=field)
    return (_check_float(items[0], field), _check_float(items[1], field))


# -------------------------------------------------------------------------
# Enumerated Tokens
# -------------------------------------------------------------------------


def parse_enum(enum_type: type[E], value: Any, field: str | None = None) -> E:
    """Decode a wire token into a member of a closed enumeration.

    The JSON type must match the type of the enum's values (string tokens
    are never accepted for integer-coded enums and vice versa).

    Raises:
        DecodeError: If the token is of the wrong type or not a known member.
    """
    sample = next(iter(enum_type)).value
    if isinstance(sample, int):
        _check_int(value, field)
    else:
        _check_str(value, field)
    try:
        return enum_type(value)
    except ValueError as err:
        msg = f"unknown {enum_type.__name__} token {value!r}"
        raise DecodeError(msg, field=field) from err


def parse_optional_enum(enum_type: type[E], value: Any, field: str | None = None) -> E | None:
    """Decode an optional enum token; JSON null is None."""
    return None if value is None else parse_enum(enum_type, value, field)


# -------------------------------------------------------------------------
# Sentinel Values and Date/Time Formats
# -------------------------------------------------------------------------


def parse_optional_string(value: Any, field: str | None = None) -> str | None:
    """Decode a sentinel-coded string.

    Example:
        >>> parse_optional_string("none") is None
        True
        >>> parse_optional_string("Europe/Berlin")
        'Europe/Berlin'
    """
    if value is None:
        return None
    text = _check_str(value, field)
    return None if text == NONE_SENTINEL else text


def parse_date_time(value: Any, field: str | None = None) -> datetime:
    """Decode a required ``YYYY-MM-DDTHH:MM:SS`` date-time."""
    text = _check_str(value, field)
    try:
        return datetime.strptime(text, DATE_TIME_FORMAT)  # noqa: DTZ007 - the bridge sends naive times
    except ValueError as err:
        msg = f"invalid date-time {text!r}"
        raise DecodeError(msg, field=field) from err


def parse_optional_date_time(value: Any, field: str | None = None) -> datetime | None:
    """Decode a sentinel-coded date-time; only null or "none" mean absent."""
    if value is None or value == NONE_SENTINEL:
        return None
    return parse_date_time(value, field)


def parse_optional_time(value: Any, field: str | None = None) -> time | None:
    """Decode a sentinel-coded ``THH:MM:SS`` time of day."""
    if value is None or value == NONE_SENTINEL:
        return None
    text = _check_str(value, field)
    try:
        return datetime.strptime(text, TIME_FORMAT).time()  # noqa: DTZ007
    except ValueError as err:
        msg = f"invalid time {text!r}"
        raise DecodeError(msg, field=field) from err


def parse_optional_object(
    value: Any,
    parser: Callable[[dict[str, Any], str | None], T],
    field: str | None = None,
) -> T | None:
    """Decode a sub-object that the bridge may omit entirely.

    JSON null, an empty string, the "none" sentinel and an empty object all
    mean the sub-object is absent.
    """
    if value is None or value in ("", NONE_SENTINEL) or value == {}:
        return None
    return parser(require_object(value, field), field)


def format_date_time(value: datetime) -> str:
    """Encode a date-time in the bridge's wire format."""
    return value.strftime(DATE_TIME_FORMAT)


def format_time(value: time) -> str:
    """Encode a time of day in the bridge's wire format."""
    return value.strftime(TIME_FORMAT)
