"""Python client library for the Philips Hue bridge REST API.

This package provides typed models of the bridge's resources (lights, sensors,
configuration, groups, schedules, rules, scenes and resourcelinks), strict
decoders for the bridge's JSON documents and immutable modifier builders that
produce the exact JSON the bridge expects.

The library is organized into three layers:
1. **API Layer** (pyhuebridge.api): Low-level HTTP communication with the bridge
2. **Codec Layer** (pyhuebridge.parsers, pyhuebridge.serializers): JSON <-> models
3. **Client Layer** (pyhuebridge.client): One method per resource operation

Example:
    Basic usage:

    ```python
    from pyhuebridge import HueBridge, LightStateModifier, ModifierType

    async with HueBridge("192.168.1.2", "my-username") as bridge:
        # Read all lights
        for light in await bridge.get_lights():
            print(f"{light.id}: {light.name} on={light.state.on}")

        # Dim light 1 by 40 steps and switch it on
        modifier = LightStateModifier().set_on(True).set_brightness(ModifierType.DECREMENT, 40)
        await bridge.set_light_state("1", modifier)
    ```

    Decoding documents without a bridge:

    ```python
    from pyhuebridge import parse_scan

    scan = parse_scan(b'{"7": {"name": "Hue Lamp 7"}, "lastscan": "active"}')
    print(scan.last_scan.kind, [light.name for light in scan.lights])
    ```
"""

from __future__ import annotations

from pyhuebridge.api import HueAPI
from pyhuebridge.client import HueBridge, register_user
from pyhuebridge.enums import (
    ActionRequestType,
    Alert,
    BackupError,
    BackupStatus,
    ColorMode,
    ConditionOperator,
    CoordinateModifierType,
    Effect,
    GroupClass,
    GroupType,
    LastScanKind,
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
from pyhuebridge.exceptions import (
    BridgeError,
    DecodeError,
    HueConnectionError,
    HueError,
    HueTimeoutError,
    InvalidParameterError,
)
from pyhuebridge.models import (
    Action,
    AppData,
    Condition,
    Config,
    ErrorResponse,
    Group,
    GroupAction,
    GroupState,
    LastScan,
    Light,
    LightState,
    RegisteredUser,
    Resourcelink,
    Rule,
    Scan,
    ScanLight,
    Scene,
    SceneLightState,
    Schedule,
    Sensor,
    SuccessResponse,
    User,
)
from pyhuebridge.modifiers import (
    ConfigModifier,
    GroupAttributeModifier,
    GroupCreator,
    GroupStateModifier,
    LightAttributeModifier,
    LightStateModifier,
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
from pyhuebridge.parsers import (
    parse_collection,
    parse_config,
    parse_group,
    parse_groups,
    parse_light,
    parse_lights,
    parse_registered_user,
    parse_resourcelink,
    parse_resourcelinks,
    parse_rule,
    parse_rules,
    parse_scan,
    parse_scene,
    parse_scenes,
    parse_schedule,
    parse_schedules,
    parse_sensor,
    parse_sensors,
)
from pyhuebridge.serializers import parse_response, serialize, to_payload


__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionRequestType",
    "Alert",
    "AppData",
    "BackupError",
    "BackupStatus",
    "BridgeError",
    "ColorMode",
    "Condition",
    "ConditionOperator",
    "Config",
    "ConfigModifier",
    "CoordinateModifierType",
    "DecodeError",
    "Effect",
    "ErrorResponse",
    "Group",
    "GroupAction",
    "GroupAttributeModifier",
    "GroupClass",
    "GroupCreator",
    "GroupState",
    "GroupStateModifier",
    "GroupType",
    "HueAPI",
    "HueBridge",
    "HueConnectionError",
    "HueError",
    "HueTimeoutError",
    "InvalidParameterError",
    "LastScan",
    "LastScanKind",
    "Light",
    "LightAttributeModifier",
    "LightSoftwareUpdateState",
    "LightState",
    "LightStateModifier",
    "ModifierType",
    "RegisteredUser",
    "Resourcelink",
    "ResourcelinkCreator",
    "ResourcelinkModifier",
    "ResourcelinkType",
    "Rule",
    "RuleCreator",
    "RuleModifier",
    "RuleStatus",
    "Scan",
    "ScanLight",
    "Scene",
    "SceneCreator",
    "SceneLightState",
    "SceneModifier",
    "SceneType",
    "SceneVersion",
    "Schedule",
    "ScheduleCreator",
    "ScheduleModifier",
    "ScheduleStatus",
    "Sensor",
    "SensorAttributeModifier",
    "SensorConfigModifier",
    "SensorStateModifier",
    "ServiceStatus",
    "SoftwareUpdateState",
    "SuccessResponse",
    "User",
    "__version__",
    "parse_collection",
    "parse_config",
    "parse_group",
    "parse_groups",
    "parse_light",
    "parse_lights",
    "parse_registered_user",
    "parse_resourcelink",
    "parse_resourcelinks",
    "parse_response",
    "parse_rule",
    "parse_rules",
    "parse_scan",
    "parse_scene",
    "parse_scenes",
    "parse_schedule",
    "parse_schedules",
    "parse_sensor",
    "parse_sensors",
    "register_user",
    "serialize",
    "to_payload",
]
