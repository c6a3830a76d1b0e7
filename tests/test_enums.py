"""Tests for enumerated wire types."""

from __future__ import annotations

from enum import Enum

import pytest

from pyhuebridge.codecs import parse_enum
from pyhuebridge.enums import (
    ActionRequestType,
    Alert,
    BackupError,
    BackupStatus,
    ColorMode,
    ConditionOperator,
    Effect,
    GroupClass,
    GroupType,
    LightSoftwareUpdateState,
    ModifierType,
    ResourcelinkType,
    RuleStatus,
    SceneType,
    SceneVersion,
    ScheduleStatus,
    ServiceStatus,
    SoftwareUpdateState,
)
from pyhuebridge.exceptions import DecodeError


WIRE_ENUMS: list[type[Enum]] = [
    ActionRequestType,
    Alert,
    BackupError,
    BackupStatus,
    ColorMode,
    ConditionOperator,
    Effect,
    GroupClass,
    GroupType,
    LightSoftwareUpdateState,
    ResourcelinkType,
    RuleStatus,
    SceneType,
    SceneVersion,
    ScheduleStatus,
    ServiceStatus,
    SoftwareUpdateState,
]

ALL_MEMBERS = [member for enum_type in WIRE_ENUMS for member in enum_type]


def _unknown_token(enum_type: type[Enum]) -> str | int:
    return 99 if isinstance(next(iter(enum_type)).value, int) else "no-such-token"


class TestWireTokens:
    """Test that member values are the exact wire tokens."""

    def test_tokens_with_spaces(self) -> None:
        """Test tokens containing spaces."""
        assert ConditionOperator("not in") is ConditionOperator.NOT_IN
        assert GroupClass("Living room") is GroupClass.LIVING_ROOM

    def test_group_zero(self) -> None:
        """Test the special type of group 0."""
        assert GroupType("0") is GroupType.ZERO

    def test_integer_codes(self) -> None:
        """Test integer-coded enums."""
        assert SceneVersion(1) is SceneVersion.PRE

    def test_modifier_types(self) -> None:
        """Test that there are exactly three scalar modifier types."""
        assert list(ModifierType) == [ModifierType.OVERRIDE, ModifierType.INCREMENT, ModifierType.DECREMENT]


class TestTokenRoundTrip:
    """Test decoding and re-encoding every documented token."""

    @pytest.mark.parametrize("member", ALL_MEMBERS, ids=lambda m: f"{type(m).__name__}.{m.name}")
    def test_decode_then_encode(self, member: Enum) -> None:
        """Test that decoding a token and encoding the member yields the token."""
        decoded = parse_enum(type(member), member.value, "field")

        assert decoded is member
        assert decoded.value == member.value

    @pytest.mark.parametrize("enum_type", WIRE_ENUMS, ids=lambda e: e.__name__)
    def test_unknown_token(self, enum_type: type[Enum]) -> None:
        """Test that a token outside the closed set is rejected."""
        with pytest.raises(DecodeError) as exc_info:
            parse_enum(enum_type, _unknown_token(enum_type), "state.token")

        assert exc_info.value.field == "state.token"

    @pytest.mark.parametrize("enum_type", WIRE_ENUMS, ids=lambda e: e.__name__)
    def test_wrong_json_type(self, enum_type: type[Enum]) -> None:
        """Test that a token of the wrong JSON type is rejected."""
        token = next(iter(enum_type)).value
        wrong = str(token) if isinstance(token, int) else 1

        with pytest.raises(DecodeError):
            parse_enum(enum_type, wrong, "state.token")

    def test_tokens_are_case_sensitive(self) -> None:
        """Test that the case of a token matters."""
        with pytest.raises(DecodeError):
            parse_enum(Alert, "Select", "alert")
