"""Tests for request serialization and response envelope parsing."""

from __future__ import annotations

import json
from datetime import datetime

import pytest

from pyhuebridge.enums import (
    ActionRequestType,
    ConditionOperator,
    CoordinateModifierType,
    GroupClass,
    GroupType,
    ModifierType,
    RuleStatus,
    SceneType,
    ScheduleStatus,
)
from pyhuebridge.exceptions import DecodeError
from pyhuebridge.models import Action, AppData, Condition, ErrorResponse, SuccessResponse
from pyhuebridge.modifiers import (
    ConfigModifier,
    GroupAttributeModifier,
    GroupCreator,
    GroupStateModifier,
    LightAttributeModifier,
    LightStateModifier,
    Modifier,
    ResourcelinkCreator,
    ResourcelinkModifier,
    RuleCreator,
    RuleModifier,
    SceneCreator,
    SceneModifier,
    ScheduleCreator,
    ScheduleModifier,
    SensorAttributeModifier,
    SensorConfigModifier,
    SensorStateModifier,
)
from pyhuebridge.serializers import (
    parse_response,
    serialize,
    serialize_action,
    serialize_condition,
    to_payload,
)


class TestToPayload:
    """Test modifier and creator payloads."""

    @pytest.mark.parametrize(
        "modifier_type",
        [
            LightStateModifier,
            GroupStateModifier,
            LightAttributeModifier,
            SensorAttributeModifier,
            SensorStateModifier,
            SensorConfigModifier,
            GroupAttributeModifier,
            ConfigModifier,
            ScheduleModifier,
            RuleModifier,
            SceneModifier,
            ResourcelinkModifier,
        ],
        ids=lambda m: m.__name__,
    )
    def test_empty_modifier(self, modifier_type: type[Modifier]) -> None:
        """Test that a fresh modifier produces an empty body."""
        assert to_payload(modifier_type()) == {}
        assert serialize(modifier_type()) == b"{}"

    @pytest.mark.parametrize(
        ("modifier", "expected"),
        [
            (SensorAttributeModifier().set_name("Hallway"), {"name": "Hallway"}),
            (SensorStateModifier().set_presence(True), {"presence": True}),
            (SensorConfigModifier().set_on(False), {"on": False}),
            (RuleModifier().set_name("Night"), {"name": "Night"}),
            (RuleModifier().set_status(RuleStatus.DISABLED), {"status": "disabled"}),
        ],
        ids=["sensor-name", "sensor-presence", "sensor-on", "rule-name", "rule-status"],
    )
    def test_single_setter(self, modifier: Modifier, expected: dict[str, object]) -> None:
        """Test that one setter call yields exactly the targeted field."""
        assert to_payload(modifier) == expected

    def test_rule_conditions_and_actions(self) -> None:
        """Test that rule lists are emitted as arrays under their own keys."""
        condition = Condition("/sensors/2/state/buttonevent", ConditionOperator.EQUAL, "16")
        action = Action("/groups/0/action", ActionRequestType.PUT, {"scene": "S3"})

        assert set(to_payload(RuleModifier().set_conditions([condition]))) == {"conditions"}
        assert to_payload(RuleModifier().set_actions([action])) == {
            "actions": [{"address": "/groups/0/action", "method": "PUT", "body": {"scene": "S3"}}]
        }

    def test_unset_slots_omitted(self) -> None:
        """Test that only populated slots are emitted, never as null."""
        modifier = (
            LightStateModifier()
            .set_on(True)
            .set_saturation(ModifierType.OVERRIDE, 200)
            .set_brightness(ModifierType.INCREMENT, 40)
        )

        assert to_payload(modifier) == {"on": True, "sat": 200, "bri_inc": 40}

    def test_decrement_is_negative(self) -> None:
        """Test that a decrement is sent as a negative delta."""
        modifier = LightStateModifier().set_color_temperature(ModifierType.DECREMENT, 50)

        assert to_payload(modifier) == {"ct_inc": -50}

    def test_coordinates(self) -> None:
        """Test that coordinate pairs are sent as arrays."""
        modifier = (
            GroupStateModifier()
            .set_color_space_coordinates(CoordinateModifierType.INCREMENT_DECREMENT, (0.1, 0.05))
            .set_transition_time(4)
            .set_scene("AB34EF5")
        )

        assert to_payload(modifier) == {"transitiontime": 4, "xy_inc": [0.1, -0.05], "scene": "AB34EF5"}

    def test_serialize_is_compact_json(self) -> None:
        """Test the raw body produced for a request."""
        modifier = LightStateModifier().set_on(False).set_hue(ModifierType.OVERRIDE, 10)

        assert serialize(modifier) == b'{"on":false,"hue":10}'

    def test_config_modifier(self) -> None:
        """Test wire names and encodings of the configuration modifier."""
        modifier = (
            ConfigModifier()
            .set_ip_address("192.168.1.20")
            .set_proxy_address(None)
            .set_link_button(True)
            .set_current_time(datetime(2020, 5, 1, 8, 0, 0))  # noqa: DTZ001
        )

        assert to_payload(modifier) == {
            "ipaddress": "192.168.1.20",
            "proxyaddress": "none",
            "linkbutton": True,
            "UTC": "2020-05-01T08:00:00",
        }

    def test_schedule_modifier(self) -> None:
        """Test that the command is serialized as an action."""
        command = Action("/api/testuser/lights/1/state", ActionRequestType.PUT, {"on": False})
        modifier = ScheduleModifier().set_command(command).set_status(ScheduleStatus.ENABLED)

        assert to_payload(modifier) == {
            "command": {"address": "/api/testuser/lights/1/state", "method": "PUT", "body": {"on": False}},
            "status": "enabled",
        }

    def test_scene_light_states(self) -> None:
        """Test nested light state modifiers."""
        modifier = SceneModifier().set_light_states(
            {"1": LightStateModifier().set_on(True).set_brightness(ModifierType.OVERRIDE, 100)}
        )

        assert to_payload(modifier) == {"lightstates": {"1": {"on": True, "bri": 100}}}


class TestCreators:
    """Test creation bodies."""

    def test_group_creator(self) -> None:
        """Test creating a room."""
        creator = GroupCreator(name="Kitchen", lights=("1", "2")).set_type(GroupType.ROOM).set_class(GroupClass.KITCHEN)

        assert to_payload(creator) == {"name": "Kitchen", "lights": ["1", "2"], "type": "Room", "class": "Kitchen"}

    def test_schedule_creator(self) -> None:
        """Test that required fields use their wire names."""
        creator = ScheduleCreator(
            command=Action("/api/testuser/groups/0/action", ActionRequestType.PUT, {"on": True}),
            local_time="W124/T06:00:00",
        ).set_name("Wake up")

        payload = to_payload(creator)

        assert payload["localtime"] == "W124/T06:00:00"
        assert payload["name"] == "Wake up"
        assert "status" not in payload

    def test_rule_creator(self) -> None:
        """Test creating a rule with conditions and actions."""
        creator = RuleCreator(
            conditions=(Condition("/sensors/2/state/lastupdated", ConditionOperator.CHANGED, None),),
            actions=(Action("/groups/0/action", ActionRequestType.PUT, {"scene": "S3"}),),
        ).set_status(RuleStatus.DISABLED)

        assert to_payload(creator) == {
            "conditions": [{"address": "/sensors/2/state/lastupdated", "operator": "dx"}],
            "actions": [{"address": "/groups/0/action", "method": "PUT", "body": {"scene": "S3"}}],
            "status": "disabled",
        }

    def test_scene_creator(self) -> None:
        """Test creating a group scene with app data."""
        creator = (
            SceneCreator(name="Relax")
            .set_type(SceneType.GROUP_SCENE)
            .set_group("1")
            .set_app_data(AppData(version=1, data=None))
        )

        assert to_payload(creator) == {"name": "Relax", "group": "1", "type": "GroupScene", "appdata": {"version": 1}}

    def test_resourcelink_creator(self) -> None:
        """Test creating a resourcelink."""
        creator = ResourcelinkCreator(name="Sunrise", class_id=1, links=("/schedules/2",))

        assert json.loads(serialize(creator)) == {"name": "Sunrise", "classid": 1, "links": ["/schedules/2"]}


class TestActionsAndConditions:
    """Test action and condition serialization."""

    def test_serialize_action(self) -> None:
        """Test the wire form of an action."""
        action = Action("/lights/1", ActionRequestType.DELETE)

        assert serialize_action(action) == {"address": "/lights/1", "method": "DELETE", "body": {}}

    def test_serialize_condition(self) -> None:
        """Test conditions with and without a value."""
        assert serialize_condition(Condition("/config/localtime", ConditionOperator.IN, "T20:00:00/T08:00:00")) == {
            "address": "/config/localtime",
            "operator": "in",
            "value": "T20:00:00/T08:00:00",
        }
        assert "value" not in serialize_condition(Condition("/sensors/1/state/flag", ConditionOperator.CHANGED, None))


class TestParseResponse:
    """Test parsing of the response envelope."""

    def test_mixed_outcomes(self) -> None:
        """Test that success and error records keep their order."""
        raw = (
            b'[{"success": {"/lights/1/state/bri": 200}},'
            b' {"error": {"type": 201, "address": "/lights/1/state/hue",'
            b' "description": "parameter, hue, is not modifiable. Device is set to off."}}]'
        )

        assert parse_response(raw) == [
            SuccessResponse(values={"/lights/1/state/bri": 200}),
            ErrorResponse(
                type=201,
                address="/lights/1/state/hue",
                description="parameter, hue, is not modifiable. Device is set to off.",
            ),
        ]

    def test_success_message(self) -> None:
        """Test the plain message sent for deletions."""
        responses = parse_response([{"success": "/lights/1 deleted"}])

        assert responses == [SuccessResponse(values={}, message="/lights/1 deleted")]

    def test_empty_envelope(self) -> None:
        """Test an empty response array."""
        assert parse_response(b"[]") == []

    def test_not_an_array(self) -> None:
        """Test that a non-array body is rejected."""
        with pytest.raises(DecodeError, match="expected array"):
            parse_response({"success": {}})

    def test_unknown_kind(self) -> None:
        """Test that an entry that is neither success nor error is rejected."""
        with pytest.raises(DecodeError) as exc_info:
            parse_response([{"success": {}}, {"warning": {}}])
        assert exc_info.value.field == "[1]"

    def test_incomplete_error(self) -> None:
        """Test that an error record needs all its fields."""
        with pytest.raises(DecodeError) as exc_info:
            parse_response([{"error": {"type": 3, "address": "/lights/9"}}])
        assert exc_info.value.field == "[0].error.description"


class TestResponseRecords:
    """Test that parsed outcome records are immutable values."""

    def test_success_is_hashable_and_read_only(self) -> None:
        """Test hashing and in-place changes of a success record."""
        (success,) = parse_response(b'[{"success": {"/lights/1/name": "Bedroom"}}]')

        assert isinstance(success, SuccessResponse)
        assert hash(success) == hash(parse_response(b'[{"success": {"/lights/1/name": "Bedroom"}}]')[0])
        with pytest.raises(TypeError):
            success.values["/lights/1/name"] = "Kitchen"  # type: ignore[index]
