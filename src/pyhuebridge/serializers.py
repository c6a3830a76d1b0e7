"""Serialization of request bodies and parsing of response envelopes.

This module provides stateless functions for converting modifiers and
creators into request bodies, and the bridge's response array into typed
outcome records.

Design Philosophy:
    - Stateless functions (no classes, no state)
    - Only slots that were set are emitted
    - Bridge-reported errors are data, not exceptions
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from datetime import datetime, time
from collections.abc import Mapping
from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from types import MappingProxyType
from typing import Any

from pyhuebridge.codecs import (
    format_date_time,
    format_time,
    load_json,
    require_int,
    require_list,
    require_object,
    require_str,
)
from pyhuebridge.exceptions import DecodeError
from pyhuebridge.models import Action, Condition, ErrorResponse, SuccessResponse
from pyhuebridge.modifiers import WIRE_NAME, Creator, Modifier


__all__ = [
    "parse_response",
    "serialize",
    "serialize_action",
    "serialize_condition",
    "to_payload",
]


def serialize_action(action: Action) -> dict[str, Any]:
    """Serialize the action of a schedule or rule.

    Example:
        >>> serialize_action(Action("/groups/0/action", ActionRequestType.PUT, {"on": True}))
        {'address': '/groups/0/action', 'method': 'PUT', 'body': {'on': True}}
    """
    return {
        "address": action.address,
        "method": action.request_type.value,
        "body": _encode(action.body),
    }


def serialize_condition(condition: Condition) -> dict[str, Any]:
    """Serialize the condition of a rule; a missing value is omitted."""
    payload: dict[str, Any] = {
        "address": condition.address,
        "operator": condition.operator.value,
    }
    if condition.value is not None:
        payload["value"] = condition.value
    return payload


def _encode(value: Any) -> Any:
    """Encode a slot value as JSON-compatible data."""
    if isinstance(value, (Modifier, Creator)):
        return to_payload(value)
    if isinstance(value, Action):
        return serialize_action(value)
    if isinstance(value, Condition):
        return serialize_condition(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_date_time(value)
    if isinstance(value, time):
        return format_time(value)
    if isinstance(value, (IPv4Address, IPv6Address)):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _encode(item) for key, item in value.items()}
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _encode(getattr(value, f.name)) for f in fields(value) if getattr(value, f.name) is not None}
    return value


def to_payload(builder: Modifier | Creator) -> dict[str, Any]:
    """Convert a modifier or creator into a request body.

    Slots that were never set are omitted entirely (never sent as null), so a
    fresh modifier produces an empty body.

    Args:
        builder: Modifier or creator to serialize.

    Returns:
        JSON-compatible dict keyed by wire names, in slot declaration order.

    Example:
        >>> to_payload(LightStateModifier().set_brightness(ModifierType.DECREMENT, 10))
        {'bri_inc': -10}
    """
    payload: dict[str, Any] = {}
    for slot in fields(builder):  # type: ignore[arg-type]
        value = getattr(builder, slot.name)
        if value is None:
            continue
        payload[slot.metadata.get(WIRE_NAME) or slot.name] = _encode(value)
    return payload


def serialize(builder: Modifier | Creator) -> bytes:
    """Serialize a modifier or creator into a compact UTF-8 JSON body."""
    return json.dumps(to_payload(builder), separators=(",", ":")).encode()


def _parse_outcome(item: Any, field: str) -> SuccessResponse | ErrorResponse:
    entry = require_object(item, field)
    if len(entry) != 1:
        msg = f"expected exactly one of 'success' or 'error', got {sorted(entry)}"
        raise DecodeError(msg, field=field)

    kind, value = next(iter(entry.items()))
    if kind == "success":
        # DELETE requests report success as a plain message string
        if isinstance(value, str):
            return SuccessResponse(values=MappingProxyType({}), message=value)
        return SuccessResponse(values=MappingProxyType(require_object(value, f"{field}.success")))
    if kind == "error":
        path = f"{field}.error"
        error = require_object(value, path)
        return ErrorResponse(
            type=require_int(error, "type", path),
            address=require_str(error, "address", path),
            description=require_str(error, "description", path),
        )

    msg = f"unknown response kind {kind!r}"
    raise DecodeError(msg, field=field)


def parse_response(raw: Any) -> list[SuccessResponse | ErrorResponse]:
    """Parse the bridge's response envelope.

    Args:
        raw: Response body, a JSON array of ``{"success": {...}}`` and
            ``{"error": {...}}`` objects.

    Returns:
        Outcomes in the order of the array. Error records are returned, not
        raised.

    Raises:
        DecodeError: If the envelope or any entry is malformed.

    Example:
        >>> parse_response(b'[{"success": {"/lights/1/state/bri": 200}}]')
        [SuccessResponse(values=mappingproxy({'/lights/1/state/bri': 200}), message=None)]
    """
    items = require_list(load_json(raw))
    return [_parse_outcome(item, f"[{index}]") for index, item in enumerate(items)]
