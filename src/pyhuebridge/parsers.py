"""Parsing utilities for Hue bridge responses.

This module converts raw bridge payloads into the data models. Every parser
accepts the raw response body (bytes or text) or already decoded JSON, and an
optional ``parent`` path used to name fields in errors.

Entity parsers never set the ``id`` of the entity: the bridge does not send
it inside a resource's payload. The collection parsers attach it from the key
under which each resource is listed.
"""

from __future__ import annotations

import ipaddress
from dataclasses import replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from pyhuebridge.codecs import (
    field_path,
    load_json,
    optional_bool,
    optional_int,
    optional_str,
    optional_uint,
    parse_coordinates,
    parse_date_time,
    parse_enum,
    parse_optional_date_time,
    parse_optional_enum,
    parse_optional_object,
    parse_optional_string,
    parse_optional_time,
    parse_string_list,
    require,
    require_bool,
    require_int,
    require_list,
    require_object,
    require_str,
    require_uint,
)
from pyhuebridge.const import LAST_SCAN_KEY, NONE_SENTINEL, UINT8_MAX, UINT16_MAX
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
    LastScanKind,
    LightSoftwareUpdateState,
    ResourcelinkType,
    RuleStatus,
    SceneType,
    SceneVersion,
    ScheduleStatus,
    ServiceStatus,
    SoftwareUpdateState,
)
from pyhuebridge.exceptions import BridgeError, DecodeError
from pyhuebridge.models import (
    Action,
    AppData,
    Backup,
    ColorTemperatureCapabilities,
    Condition,
    Config,
    ControlCapabilities,
    ErrorResponse,
    Group,
    GroupAction,
    GroupState,
    InternetServices,
    LastScan,
    Light,
    LightCapabilities,
    LightConfig,
    LightSoftwareUpdate,
    LightState,
    PortalState,
    RegisteredUser,
    Resourcelink,
    Rule,
    Scan,
    ScanLight,
    Scene,
    SceneLightState,
    Schedule,
    Sensor,
    SensorConfig,
    SensorState,
    SoftwareUpdate,
    SoftwareUpdateAutoInstall,
    StartupConfig,
    StreamingCapabilities,
    SuccessResponse,
    User,
)
from pyhuebridge.serializers import parse_response


if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

__all__ = [
    "parse_action",
    "parse_collection",
    "parse_config",
    "parse_group",
    "parse_groups",
    "parse_last_scan",
    "parse_light",
    "parse_lights",
    "parse_registered_user",
    "parse_resourcelink",
    "parse_resourcelinks",
    "parse_rule",
    "parse_rules",
    "parse_scan",
    "parse_scene",
    "parse_scenes",
    "parse_schedule",
    "parse_schedules",
    "parse_sensor",
    "parse_sensors",
]


def _load_object(raw: Any, parent: str | None) -> dict[str, Any]:
    return require_object(load_json(raw), parent)


def _optional_coordinates(data: dict[str, Any], key: str, parent: str | None) -> tuple[float, float] | None:
    value = data.get(key)
    return None if value is None else parse_coordinates(value, field_path(parent, key))


def _ip_address(data: dict[str, Any], key: str, parent: str | None) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    text = require_str(data, key, parent)
    try:
        return ipaddress.ip_address(text)
    except ValueError as err:
        msg = f"invalid IP address {text!r}"
        raise DecodeError(msg, field=field_path(parent, key)) from err


# -------------------------------------------------------------------------
# Collections
# -------------------------------------------------------------------------


def parse_collection(raw: Any, parser: Callable[[Any, str | None], T], parent: str | None = None) -> list[T]:
    """Parse a JSON object keyed by resource id into a list of entities.

    Entities are returned in the order their keys appear in the payload, each
    with ``id`` set from its key. A member that fails to decode fails the whole
    collection; the error's field path starts with the member's key.

    Args:
        raw: Raw collection payload, e.g. ``{"1": {...}, "2": {...}}``.
        parser: Entity parser called with each member payload and its path.
        parent: Optional path of the collection inside a larger payload.

    Returns:
        List of entities with their ids attached.

    Example:
        >>> lights = parse_collection(body, parse_light)
        >>> [light.id for light in lights]
        ['1', '2']
    """
    data = _load_object(raw, parent)
    return [replace(parser(value, field_path(parent, key)), id=key) for key, value in data.items()]  # type: ignore[type-var]


def parse_last_scan(value: Any, parent: str | None = None) -> LastScan:
    """Parse the status of the last scan ("active", "none" or a date-time)."""
    if value == LastScanKind.ACTIVE.value:
        return LastScan(kind=LastScanKind.ACTIVE)
    if value == NONE_SENTINEL:
        return LastScan(kind=LastScanKind.NONE)
    return LastScan(kind=LastScanKind.DATE_TIME, date_time=parse_date_time(value, parent))


def parse_scan(raw: Any, parent: str | None = None) -> Scan:
    """Parse the result of a scan for new lights or sensors.

    The payload mixes one reserved key with the ids of discovered devices:
    ``{"lastscan": "active", "7": {"name": "Hue bulb 7"}}``. Keys are visited
    once; the reserved key is matched first, every other key is a device id.

    Raises:
        DecodeError: If "lastscan" is missing or any value is malformed.
    """
    data = _load_object(raw, parent)
    last_scan: LastScan | None = None
    lights: list[ScanLight] = []
    for key, value in data.items():
        path = field_path(parent, key)
        if key == LAST_SCAN_KEY:
            last_scan = parse_last_scan(value, path)
        else:
            lights.append(ScanLight(id=key, name=require_str(require_object(value, path), "name", path)))

    if last_scan is None:
        raise DecodeError("missing field", field=field_path(parent, LAST_SCAN_KEY))

    return Scan(last_scan=last_scan, lights=tuple(lights))


# -------------------------------------------------------------------------
# Lights
# -------------------------------------------------------------------------


def _light_state(data: dict[str, Any], parent: str | None) -> LightState:
    return LightState(
        on=optional_bool(data, "on", parent),
        brightness=optional_uint(data, "bri", parent, UINT8_MAX),
        hue=optional_uint(data, "hue", parent, UINT16_MAX),
        saturation=optional_uint(data, "sat", parent, UINT8_MAX),
        color_space_coordinates=_optional_coordinates(data, "xy", parent),
        color_temperature=optional_uint(data, "ct", parent, UINT16_MAX),
        alert=parse_optional_enum(Alert, data.get("alert"), field_path(parent, "alert")),
        effect=parse_optional_enum(Effect, data.get("effect"), field_path(parent, "effect")),
        color_mode=parse_optional_enum(ColorMode, data.get("colormode"), field_path(parent, "colormode")),
        reachable=require_bool(data, "reachable", parent),
    )


def _startup_config(data: dict[str, Any], parent: str | None) -> StartupConfig:
    return StartupConfig(
        mode=require_str(data, "mode", parent),
        configured=require_bool(data, "configured", parent),
    )


def _light_config(data: dict[str, Any], parent: str | None) -> LightConfig:
    return LightConfig(
        arche_type=require_str(data, "archetype", parent),
        function=require_str(data, "function", parent),
        direction=require_str(data, "direction", parent),
        startup=parse_optional_object(data.get("startup"), _startup_config, field_path(parent, "startup")),
    )


def _color_temperature_capabilities(data: dict[str, Any], parent: str | None) -> ColorTemperatureCapabilities:
    return ColorTemperatureCapabilities(
        min=require_uint(data, "min", parent),
        max=require_uint(data, "max", parent),
    )


def _control_capabilities(data: dict[str, Any], parent: str | None) -> ControlCapabilities:
    gamut_path = field_path(parent, "colorgamut")
    gamut = data.get("colorgamut")
    return ControlCapabilities(
        min_dimlevel=optional_uint(data, "mindimlevel", parent),
        max_lumen=optional_uint(data, "maxlumen", parent),
        color_gamut=(
            None
            if gamut is None
            else tuple(
                parse_coordinates(point, f"{gamut_path}[{i}]") for i, point in enumerate(require_list(gamut, gamut_path))
            )
        ),
        color_gamut_type=optional_str(data, "colorgamuttype", parent),
        color_temperature=parse_optional_object(
            data.get("ct"), _color_temperature_capabilities, field_path(parent, "ct")
        ),
    )


def _light_capabilities(data: dict[str, Any], parent: str | None) -> LightCapabilities:
    control_path = field_path(parent, "control")
    streaming_path = field_path(parent, "streaming")
    streaming = require_object(require(data, "streaming", parent), streaming_path)
    return LightCapabilities(
        certified=require_bool(data, "certified", parent),
        control=_control_capabilities(require_object(require(data, "control", parent), control_path), control_path),
        streaming=StreamingCapabilities(
            renderer=require_bool(streaming, "renderer", streaming_path),
            proxy=require_bool(streaming, "proxy", streaming_path),
        ),
    )


def parse_light(raw: Any, parent: str | None = None) -> Light:
    """Parse a single light.

    Args:
        raw: Light payload as returned by ``GET /lights/<id>``.
        parent: Optional path of the payload inside a larger payload.

    Returns:
        Light with an empty id.

    Raises:
        DecodeError: If a required field is missing or any field is malformed.
    """
    data = _load_object(raw, parent)
    state_path = field_path(parent, "state")
    update_path = field_path(parent, "swupdate")
    config_path = field_path(parent, "config")
    capabilities_path = field_path(parent, "capabilities")
    update = require_object(require(data, "swupdate", parent), update_path)

    return Light(
        name=require_str(data, "name", parent),
        type=require_str(data, "type", parent),
        state=_light_state(require_object(require(data, "state", parent), state_path), state_path),
        model_id=require_str(data, "modelid", parent),
        unique_id=require_str(data, "uniqueid", parent),
        product_id=optional_str(data, "productid", parent),
        product_name=optional_str(data, "productname", parent),
        manufacturer_name=optional_str(data, "manufacturername", parent),
        software_version=require_str(data, "swversion", parent),
        software_update=LightSoftwareUpdate(
            state=parse_enum(LightSoftwareUpdateState, require(update, "state", update_path), f"{update_path}.state"),
            last_install=parse_optional_date_time(update.get("lastinstall"), f"{update_path}.lastinstall"),
        ),
        config=_light_config(require_object(require(data, "config", parent), config_path), config_path),
        capabilities=_light_capabilities(
            require_object(require(data, "capabilities", parent), capabilities_path), capabilities_path
        ),
    )


def parse_lights(raw: Any) -> list[Light]:
    """Parse the response of ``GET /lights``."""
    return parse_collection(raw, parse_light)


# -------------------------------------------------------------------------
# Sensors
# -------------------------------------------------------------------------


def parse_sensor(raw: Any, parent: str | None = None) -> Sensor:
    """Parse a single sensor.

    Only the state and config attributes common to all sensor types are decoded;
    type-specific attributes are ignored.
    """
    data = _load_object(raw, parent)
    state_path = field_path(parent, "state")
    config_path = field_path(parent, "config")
    state = require_object(require(data, "state", parent), state_path)
    config = require_object(require(data, "config", parent), config_path)

    return Sensor(
        name=require_str(data, "name", parent),
        type_name=require_str(data, "type", parent),
        model_id=require_str(data, "modelid", parent),
        unique_id=optional_str(data, "uniqueid", parent),
        manufacturer_name=optional_str(data, "manufacturername", parent),
        software_version=require_str(data, "swversion", parent),
        state=SensorState(
            presence=optional_bool(state, "presence", state_path),
            flag=optional_bool(state, "flag", state_path),
            last_updated=parse_optional_date_time(
                require(state, "lastupdated", state_path), f"{state_path}.lastupdated"
            ),
        ),
        config=SensorConfig(
            on=require_bool(config, "on", config_path),
            reachable=optional_bool(config, "reachable", config_path),
            battery=optional_uint(config, "battery", config_path, UINT8_MAX),
        ),
        recycle=optional_bool(data, "recycle", parent),
    )


def parse_sensors(raw: Any) -> list[Sensor]:
    """Parse the response of ``GET /sensors``."""
    return parse_collection(raw, parse_sensor)


# -------------------------------------------------------------------------
# Bridge Configuration
# -------------------------------------------------------------------------


def _user(raw: Any, parent: str | None) -> User:
    data = require_object(raw, parent)
    return User(
        name=require_str(data, "name", parent),
        last_use_date=parse_date_time(require(data, "last use date", parent), field_path(parent, "last use date")),
        create_date=parse_date_time(require(data, "create date", parent), field_path(parent, "create date")),
    )


def _software_update(data: dict[str, Any], parent: str | None) -> SoftwareUpdate:
    auto_path = field_path(parent, "autoinstall")
    auto_install = require_object(require(data, "autoinstall", parent), auto_path)
    return SoftwareUpdate(
        state=parse_enum(SoftwareUpdateState, require(data, "state", parent), field_path(parent, "state")),
        check=require_bool(data, "checkforupdate", parent),
        auto_install=SoftwareUpdateAutoInstall(
            on=require_bool(auto_install, "on", auto_path),
            update_time=parse_optional_time(auto_install.get("updatetime"), f"{auto_path}.updatetime"),
        ),
        last_change=parse_optional_date_time(data.get("lastchange"), field_path(parent, "lastchange")),
        last_install=parse_optional_date_time(data.get("lastinstall"), field_path(parent, "lastinstall")),
    )


def _service_status(data: dict[str, Any], key: str, parent: str | None) -> ServiceStatus:
    return parse_enum(ServiceStatus, require(data, key, parent), field_path(parent, key))


def parse_config(raw: Any, parent: str | None = None) -> Config:
    """Parse the bridge configuration returned by ``GET /config``.

    The ``localtime`` and ``timezone`` fields use the "none" sentinel instead of
    JSON null. The whitelist arrives as a map keyed by user id and is returned
    as a list of users with their ids attached.
    """
    data = _load_object(raw, parent)
    update_path = field_path(parent, "swupdate2")
    portal_path = field_path(parent, "portalstate")
    internet_path = field_path(parent, "internetservices")
    backup_path = field_path(parent, "backup")
    portal = require_object(require(data, "portalstate", parent), portal_path)
    internet = require_object(require(data, "internetservices", parent), internet_path)
    backup = require_object(require(data, "backup", parent), backup_path)

    return Config(
        name=require_str(data, "name", parent),
        software_update=_software_update(require_object(require(data, "swupdate2", parent), update_path), update_path),
        software_version=require_str(data, "swversion", parent),
        api_version=require_str(data, "apiversion", parent),
        link_button=require_bool(data, "linkbutton", parent),
        ip_address=_ip_address(data, "ipaddress", parent),
        mac_address=require_str(data, "mac", parent),
        netmask=require_str(data, "netmask", parent),
        gateway=_ip_address(data, "gateway", parent),
        dhcp=require_bool(data, "dhcp", parent),
        portal_services=require_bool(data, "portalservices", parent),
        portal_connection=_service_status(data, "portalconnection", parent),
        portal_state=PortalState(
            signedon=require_bool(portal, "signedon", portal_path),
            incoming=require_bool(portal, "incoming", portal_path),
            outgoing=require_bool(portal, "outgoing", portal_path),
            communication=_service_status(portal, "communication", portal_path),
        ),
        internet_services=InternetServices(
            internet=_service_status(internet, "internet", internet_path),
            remote_access=_service_status(internet, "remoteaccess", internet_path),
            time=_service_status(internet, "time", internet_path),
            software_update=_service_status(internet, "swupdate", internet_path),
        ),
        current_time=parse_date_time(require(data, "UTC", parent), field_path(parent, "UTC")),
        local_time=parse_optional_date_time(require(data, "localtime", parent), field_path(parent, "localtime")),
        timezone=parse_optional_string(require(data, "timezone", parent), field_path(parent, "timezone")),
        zigbee_channel=require_uint(data, "zigbeechannel", parent, UINT8_MAX),
        model_id=require_str(data, "modelid", parent),
        bridge_id=require_str(data, "bridgeid", parent),
        factory_new=require_bool(data, "factorynew", parent),
        replaces_bridge_id=optional_str(data, "replacesbridgeid", parent),
        datastore_version=require_str(data, "datastoreversion", parent),
        starterkit_id=require_str(data, "starterkitid", parent),
        backup=Backup(
            status=parse_enum(BackupStatus, require(backup, "status", backup_path), f"{backup_path}.status"),
            error=parse_enum(BackupError, require(backup, "errorcode", backup_path), f"{backup_path}.errorcode"),
        ),
        whitelist=tuple(parse_collection(require(data, "whitelist", parent), _user, field_path(parent, "whitelist"))),
    )


# -------------------------------------------------------------------------
# Groups
# -------------------------------------------------------------------------


def _group_state(data: dict[str, Any], parent: str | None) -> GroupState:
    return GroupState(
        any_on=require_bool(data, "any_on", parent),
        all_on=require_bool(data, "all_on", parent),
    )


def _group_action(data: dict[str, Any], parent: str | None) -> GroupAction:
    return GroupAction(
        on=optional_bool(data, "on", parent),
        brightness=optional_uint(data, "bri", parent, UINT8_MAX),
        hue=optional_uint(data, "hue", parent, UINT16_MAX),
        saturation=optional_uint(data, "sat", parent, UINT8_MAX),
        color_space_coordinates=_optional_coordinates(data, "xy", parent),
        color_temperature=optional_uint(data, "ct", parent, UINT16_MAX),
        alert=parse_optional_enum(Alert, data.get("alert"), field_path(parent, "alert")),
        effect=parse_optional_enum(Effect, data.get("effect"), field_path(parent, "effect")),
        color_mode=parse_optional_enum(ColorMode, data.get("colormode"), field_path(parent, "colormode")),
    )


def parse_group(raw: Any, parent: str | None = None) -> Group:
    """Parse a single group.

    Groups created by older firmware carry no "sensors" list; it decodes as empty.
    """
    data = _load_object(raw, parent)
    return Group(
        name=require_str(data, "name", parent),
        lights=parse_string_list(require(data, "lights", parent), field_path(parent, "lights")),
        sensors=parse_string_list(data.get("sensors", []), field_path(parent, "sensors")),
        type=parse_enum(GroupType, require(data, "type", parent), field_path(parent, "type")),
        class_=parse_optional_enum(GroupClass, data.get("class"), field_path(parent, "class")),
        state=parse_optional_object(data.get("state"), _group_state, field_path(parent, "state")),
        model_id=optional_str(data, "modelid", parent),
        unique_id=optional_str(data, "uniqueid", parent),
        recycle=optional_bool(data, "recycle", parent),
        action=parse_optional_object(data.get("action"), _group_action, field_path(parent, "action")),
    )


def parse_groups(raw: Any) -> list[Group]:
    """Parse the response of ``GET /groups``."""
    return parse_collection(raw, parse_group)


# -------------------------------------------------------------------------
# Schedules and Rules
# -------------------------------------------------------------------------


def parse_action(raw: Any, parent: str | None = None) -> Action:
    """Parse the action of a schedule or rule."""
    data = require_object(raw, parent)
    return Action(
        address=require_str(data, "address", parent),
        request_type=parse_enum(ActionRequestType, require(data, "method", parent), field_path(parent, "method")),
        body=MappingProxyType(require_object(require(data, "body", parent), field_path(parent, "body"))),
    )


def parse_schedule(raw: Any, parent: str | None = None) -> Schedule:
    """Parse a single schedule."""
    data = _load_object(raw, parent)
    return Schedule(
        name=require_str(data, "name", parent),
        description=require_str(data, "description", parent),
        command=parse_action(require(data, "command", parent), field_path(parent, "command")),
        local_time=require_str(data, "localtime", parent),
        start_time=parse_optional_date_time(data.get("starttime"), field_path(parent, "starttime")),
        created=parse_optional_date_time(data.get("created"), field_path(parent, "created")),
        status=parse_enum(ScheduleStatus, require(data, "status", parent), field_path(parent, "status")),
        auto_delete=optional_bool(data, "autodelete", parent),
        recycle=optional_bool(data, "recycle", parent),
    )


def parse_schedules(raw: Any) -> list[Schedule]:
    """Parse the response of ``GET /schedules``."""
    return parse_collection(raw, parse_schedule)


def _condition(raw: Any, parent: str | None) -> Condition:
    data = require_object(raw, parent)
    return Condition(
        address=require_str(data, "address", parent),
        operator=parse_enum(ConditionOperator, require(data, "operator", parent), field_path(parent, "operator")),
        value=optional_str(data, "value", parent),
    )


def parse_rule(raw: Any, parent: str | None = None) -> Rule:
    """Parse a single rule.

    ``lasttriggered`` is "none" until the rule fires for the first time.
    """
    data = _load_object(raw, parent)
    conditions_path = field_path(parent, "conditions")
    actions_path = field_path(parent, "actions")
    return Rule(
        name=require_str(data, "name", parent),
        owner=require_str(data, "owner", parent),
        created=parse_optional_date_time(data.get("created"), field_path(parent, "created")),
        last_triggered=parse_optional_date_time(data.get("lasttriggered"), field_path(parent, "lasttriggered")),
        times_triggered=require_int(data, "timestriggered", parent),
        status=parse_enum(RuleStatus, require(data, "status", parent), field_path(parent, "status")),
        recycle=optional_bool(data, "recycle", parent),
        conditions=tuple(
            _condition(item, f"{conditions_path}[{i}]")
            for i, item in enumerate(require_list(require(data, "conditions", parent), conditions_path))
        ),
        actions=tuple(
            parse_action(item, f"{actions_path}[{i}]")
            for i, item in enumerate(require_list(require(data, "actions", parent), actions_path))
        ),
    )


def parse_rules(raw: Any) -> list[Rule]:
    """Parse the response of ``GET /rules``."""
    return parse_collection(raw, parse_rule)


# -------------------------------------------------------------------------
# Scenes
# -------------------------------------------------------------------------


def _app_data(data: dict[str, Any], parent: str | None) -> AppData:
    return AppData(
        version=optional_int(data, "version", parent),
        data=optional_str(data, "data", parent),
    )


def _scene_light_state(raw: Any, parent: str | None) -> SceneLightState:
    data = require_object(raw, parent)
    return SceneLightState(
        on=optional_bool(data, "on", parent),
        brightness=optional_uint(data, "bri", parent, UINT8_MAX),
        hue=optional_uint(data, "hue", parent, UINT16_MAX),
        saturation=optional_uint(data, "sat", parent, UINT8_MAX),
        color_space_coordinates=_optional_coordinates(data, "xy", parent),
        color_temperature=optional_uint(data, "ct", parent, UINT16_MAX),
        effect=parse_optional_enum(Effect, data.get("effect"), field_path(parent, "effect")),
        transition_time=optional_uint(data, "transitiontime", parent, UINT16_MAX),
    )


def parse_scene(raw: Any, parent: str | None = None) -> Scene:
    """Parse a single scene.

    Light states are only included by the bridge when a scene is requested on
    its own; in collections ``light_states`` is None.
    """
    data = _load_object(raw, parent)
    light_states: MappingProxyType[str, SceneLightState] | None = None
    if "lightstates" in data:
        states_path = field_path(parent, "lightstates")
        light_states = MappingProxyType(
            {
                light_id: _scene_light_state(state, field_path(states_path, light_id))
                for light_id, state in require_object(data["lightstates"], states_path).items()
            }
        )

    return Scene(
        name=require_str(data, "name", parent),
        type=parse_enum(SceneType, require(data, "type", parent), field_path(parent, "type")),
        group=optional_str(data, "group", parent),
        lights=parse_string_list(require(data, "lights", parent), field_path(parent, "lights")),
        owner=require_str(data, "owner", parent),
        recycle=require_bool(data, "recycle", parent),
        locked=require_bool(data, "locked", parent),
        app_data=parse_optional_object(data.get("appdata"), _app_data, field_path(parent, "appdata")),
        picture=optional_str(data, "picture", parent),
        last_updated=parse_optional_date_time(data.get("lastupdated"), field_path(parent, "lastupdated")),
        version=parse_enum(SceneVersion, require(data, "version", parent), field_path(parent, "version")),
        light_states=light_states,
    )


def parse_scenes(raw: Any) -> list[Scene]:
    """Parse the response of ``GET /scenes``."""
    return parse_collection(raw, parse_scene)


# -------------------------------------------------------------------------
# Resourcelinks
# -------------------------------------------------------------------------


def parse_resourcelink(raw: Any, parent: str | None = None) -> Resourcelink:
    """Parse a single resourcelink."""
    data = _load_object(raw, parent)
    return Resourcelink(
        name=require_str(data, "name", parent),
        description=require_str(data, "description", parent),
        type=parse_enum(ResourcelinkType, require(data, "type", parent), field_path(parent, "type")),
        class_id=require_int(data, "classid", parent),
        owner=require_str(data, "owner", parent),
        recycle=require_bool(data, "recycle", parent),
        links=parse_string_list(require(data, "links", parent), field_path(parent, "links")),
    )


def parse_resourcelinks(raw: Any) -> list[Resourcelink]:
    """Parse the response of ``GET /resourcelinks``."""
    return parse_collection(raw, parse_resourcelink)


# -------------------------------------------------------------------------
# Users
# -------------------------------------------------------------------------


def parse_registered_user(raw: Any) -> RegisteredUser:
    """Parse the response envelope of a user registration (``POST /api``).

    Args:
        raw: Response body, e.g. ``[{"success": {"username": "83b7780291a6ceffbe0bd049104df"}}]``.

    Returns:
        The registered user, with its client key when one was requested.

    Raises:
        BridgeError: If the bridge refused the registration, e.g. because the
            link button was not pressed (error type 101).
        DecodeError: If the envelope is malformed or names no user.
    """
    responses = parse_response(raw)
    for index, response in enumerate(responses):
        if isinstance(response, SuccessResponse):
            path = f"[{index}].success"
            return RegisteredUser(
                name=require_str(response.values, "username", path),
                client_key=optional_str(response.values, "clientkey", path),
            )

    errors = [response for response in responses if isinstance(response, ErrorResponse)]
    if errors:
        msg = f"Registration refused: {errors[0].description}"
        raise BridgeError(msg, errors=errors)
    raise DecodeError("missing field", field="[0].success")
