"""Data models for Hue bridge resources and responses.

Resource entities are immutable and hashable: sequences are stored as
tuples and maps as read-only views that do not take part in hashing. Their ``id`` is never part of the payload
of a single resource; it is the key under which the bridge lists the
resource and is attached by the collection parsers. Entities decoded on
their own carry an empty id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime, time
    from ipaddress import IPv4Address, IPv6Address

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


__all__ = [
    "Action",
    "AppData",
    "Backup",
    "ColorTemperatureCapabilities",
    "Condition",
    "Config",
    "ControlCapabilities",
    "ErrorResponse",
    "Group",
    "GroupAction",
    "GroupState",
    "InternetServices",
    "LastScan",
    "Light",
    "LightCapabilities",
    "LightConfig",
    "LightSoftwareUpdate",
    "LightState",
    "PortalState",
    "RegisteredUser",
    "Resourcelink",
    "Rule",
    "Scan",
    "ScanLight",
    "Scene",
    "SceneLightState",
    "Schedule",
    "Sensor",
    "SensorConfig",
    "SensorState",
    "SoftwareUpdate",
    "SoftwareUpdateAutoInstall",
    "StartupConfig",
    "StreamingCapabilities",
    "SuccessResponse",
    "User",
]


# -------------------------------------------------------------------------
# Shared
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class Action:
    """Request executed by a schedule or rule.

    Attributes:
        address: Address where the action is executed (e.g. "/groups/0/action").
        request_type: HTTP method used to send the body (wire name "method").
        body: Body of the request, loosely typed.
    """

    address: str
    request_type: ActionRequestType
    body: Mapping[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class SuccessResponse:
    """Successful outcome of a request.

    Attributes:
        values: Mapping of bridge-internal paths (e.g. "/lights/1/state/on")
            to their new values, exactly as sent by the bridge.
        message: Plain success message, sent instead of a mapping by deletions
            (e.g. "/lights/1 deleted").
    """

    values: Mapping[str, Any] = field(hash=False)
    message: str | None = None


@dataclass(frozen=True)
class ErrorResponse:
    """Error outcome of a request as reported by the bridge.

    Attributes:
        type: Numeric error type (e.g. 3 for "resource not available").
        address: Address of the resource or attribute the error refers to.
        description: Human-readable description.
    """

    type: int
    address: str
    description: str


@dataclass(frozen=True)
class RegisteredUser:
    """User created by registering with the bridge.

    Attributes:
        name: Username used in the API path.
        client_key: Entertainment client key, only when it was requested.
    """

    name: str
    client_key: str | None = None


# -------------------------------------------------------------------------
# Lights
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class LightState:
    """State of a light.

    Every attribute except ``reachable`` is optional because the bridge omits
    attributes the device does not support.

    Attributes:
        on: Whether the light is on.
        brightness: Brightness (1-254, wire name "bri").
        hue: Hue (0-65535, both ends are red).
        saturation: Saturation (0-254, wire name "sat").
        color_space_coordinates: CIE x and y coordinates (wire name "xy").
        color_temperature: Mired color temperature (wire name "ct").
        alert: Alert effect.
        effect: Dynamic effect.
        color_mode: Color mode (wire name "colormode").
        reachable: Whether the bridge can reach the light.
    """

    on: bool | None
    brightness: int | None
    hue: int | None
    saturation: int | None
    color_space_coordinates: tuple[float, float] | None
    color_temperature: int | None
    alert: Alert | None
    effect: Effect | None
    color_mode: ColorMode | None
    reachable: bool


@dataclass(frozen=True)
class LightSoftwareUpdate:
    """Information about software updates of a light."""

    state: LightSoftwareUpdateState
    last_install: datetime | None


@dataclass(frozen=True)
class StartupConfig:
    """Startup configuration of a light."""

    mode: str
    configured: bool


@dataclass(frozen=True)
class LightConfig:
    """Configuration of a light."""

    arche_type: str
    function: str
    direction: str
    startup: StartupConfig | None


@dataclass(frozen=True)
class ColorTemperatureCapabilities:
    """Minimal and maximal color temperature of a light."""

    min: int
    max: int


@dataclass(frozen=True)
class ControlCapabilities:
    """Control capabilities of a light."""

    min_dimlevel: int | None
    max_lumen: int | None
    color_gamut: tuple[tuple[float, float], ...] | None
    color_gamut_type: str | None
    color_temperature: ColorTemperatureCapabilities | None


@dataclass(frozen=True)
class StreamingCapabilities:
    """Streaming capabilities of a light."""

    renderer: bool
    proxy: bool


@dataclass(frozen=True)
class LightCapabilities:
    """Capabilities of a light."""

    certified: bool
    control: ControlCapabilities
    streaming: StreamingCapabilities


@dataclass(frozen=True)
class Light:
    """A light.

    Attributes:
        name: Name of the light.
        type: Type of the light (e.g. "Extended color light").
        state: Current state.
        model_id: Hardware model (wire name "modelid").
        unique_id: Unique id (wire name "uniqueid").
        product_id: Product id, if reported.
        product_name: Product name, if reported.
        manufacturer_name: Manufacturer name, if reported.
        software_version: Software version running on the light.
        software_update: Software update information (wire name "swupdate").
        config: Configuration.
        capabilities: Capabilities.
        id: Identifier assigned from the enclosing collection.
    """

    name: str
    type: str
    state: LightState
    model_id: str
    unique_id: str
    product_id: str | None
    product_name: str | None
    manufacturer_name: str | None
    software_version: str
    software_update: LightSoftwareUpdate
    config: LightConfig
    capabilities: LightCapabilities
    id: str = ""


@dataclass(frozen=True)
class LastScan:
    """Status of the last scan for new devices.

    Attributes:
        kind: Whether a scan is active, never happened, or finished at a date.
        date_time: When the last scan finished, only for ``LastScanKind.DATE_TIME``.
    """

    kind: LastScanKind
    date_time: datetime | None = None


@dataclass(frozen=True)
class ScanLight:
    """Device discovered by a scan."""

    id: str
    name: str


@dataclass(frozen=True)
class Scan:
    """Result of a scan for new lights or sensors.

    Attributes:
        last_scan: Status of the last scan.
        lights: Devices discovered by the scan.
    """

    last_scan: LastScan
    lights: tuple[ScanLight, ...] = ()


# -------------------------------------------------------------------------
# Sensors
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class SensorState:
    """Current state of a sensor."""

    presence: bool | None
    flag: bool | None
    last_updated: datetime | None


@dataclass(frozen=True)
class SensorConfig:
    """Configuration of a sensor.

    Attributes:
        on: Whether the sensor is on.
        reachable: Whether the bridge can reach the sensor.
        battery: Battery level in percent, only for battery powered devices.
    """

    on: bool
    reachable: bool | None
    battery: int | None


@dataclass(frozen=True)
class Sensor:
    """A sensor."""

    name: str
    type_name: str
    model_id: str
    unique_id: str | None
    manufacturer_name: str | None
    software_version: str
    state: SensorState
    config: SensorConfig
    recycle: bool | None
    id: str = ""


# -------------------------------------------------------------------------
# Bridge Configuration
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class SoftwareUpdateAutoInstall:
    """Configuration for automatic updates.

    Attributes:
        on: Whether automatic updates are activated.
        update_time: Time of day updates are installed (wire name "updatetime").
    """

    on: bool
    update_time: time | None


@dataclass(frozen=True)
class SoftwareUpdate:
    """Software update information of the bridge (wire name "swupdate2")."""

    state: SoftwareUpdateState
    check: bool
    auto_install: SoftwareUpdateAutoInstall
    last_change: datetime | None
    last_install: datetime | None


@dataclass(frozen=True)
class PortalState:
    """Portal state of the bridge."""

    signedon: bool
    incoming: bool
    outgoing: bool
    communication: ServiceStatus


@dataclass(frozen=True)
class InternetServices:
    """Internet services of the bridge."""

    internet: ServiceStatus
    remote_access: ServiceStatus
    time: ServiceStatus
    software_update: ServiceStatus


@dataclass(frozen=True)
class Backup:
    """Backup information of the bridge."""

    status: BackupStatus
    error: BackupError


@dataclass(frozen=True)
class User:
    """Whitelisted user of the bridge."""

    name: str
    last_use_date: datetime
    create_date: datetime
    id: str = ""


@dataclass(frozen=True)
class Config:
    """Configuration of the bridge.

    Attributes:
        current_time: Current UTC time stored on the bridge (wire name "UTC").
        local_time: Local time, absent when the bridge sends "none".
        timezone: Olson timezone id, absent when the bridge sends "none".
        replaces_bridge_id: Bridge whose backup was restored, if any.
        whitelist: Whitelisted users, decoded from a map keyed by user id.
    """

    name: str
    software_update: SoftwareUpdate
    software_version: str
    api_version: str
    link_button: bool
    ip_address: IPv4Address | IPv6Address
    mac_address: str
    netmask: str
    gateway: IPv4Address | IPv6Address
    dhcp: bool
    portal_services: bool
    portal_connection: ServiceStatus
    portal_state: PortalState
    internet_services: InternetServices
    current_time: datetime
    local_time: datetime | None
    timezone: str | None
    zigbee_channel: int
    model_id: str
    bridge_id: str
    factory_new: bool
    replaces_bridge_id: str | None
    datastore_version: str
    starterkit_id: str
    backup: Backup
    whitelist: tuple[User, ...]


# -------------------------------------------------------------------------
# Groups
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class GroupState:
    """Aggregated on-state of the lights of a group."""

    any_on: bool
    all_on: bool


@dataclass(frozen=True)
class GroupAction:
    """Last state sent to all lights of a group."""

    on: bool | None
    brightness: int | None
    hue: int | None
    saturation: int | None
    color_space_coordinates: tuple[float, float] | None
    color_temperature: int | None
    alert: Alert | None
    effect: Effect | None
    color_mode: ColorMode | None


@dataclass(frozen=True)
class Group:
    """A group of lights.

    Attributes:
        class_: Class of a room or zone (wire name "class").
        state: Aggregated state, absent for some group types.
        action: Last action sent to the group.
    """

    name: str
    lights: tuple[str, ...]
    sensors: tuple[str, ...]
    type: GroupType
    class_: GroupClass | None
    state: GroupState | None
    model_id: str | None
    unique_id: str | None
    recycle: bool | None
    action: GroupAction | None
    id: str = ""


# -------------------------------------------------------------------------
# Schedules and Rules
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class Schedule:
    """A schedule.

    Attributes:
        local_time: Time pattern in local time (wire name "localtime"), kept
            as the bridge's time pattern string.
        start_time: When a timer was started, absent for other schedules.
    """

    name: str
    description: str
    command: Action
    local_time: str
    start_time: datetime | None
    created: datetime | None
    status: ScheduleStatus
    auto_delete: bool | None
    recycle: bool | None
    id: str = ""


@dataclass(frozen=True)
class Condition:
    """Condition of a rule."""

    address: str
    operator: ConditionOperator
    value: str | None


@dataclass(frozen=True)
class Rule:
    """A rule."""

    name: str
    owner: str
    created: datetime | None
    last_triggered: datetime | None
    times_triggered: int
    status: RuleStatus
    recycle: bool | None
    conditions: tuple[Condition, ...]
    actions: tuple[Action, ...]
    id: str = ""


# -------------------------------------------------------------------------
# Scenes
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class AppData:
    """Application data attached to a scene."""

    version: int | None
    data: str | None


@dataclass(frozen=True)
class SceneLightState:
    """State a scene applies to one light."""

    on: bool | None
    brightness: int | None
    hue: int | None
    saturation: int | None
    color_space_coordinates: tuple[float, float] | None
    color_temperature: int | None
    effect: Effect | None
    transition_time: int | None


@dataclass(frozen=True)
class Scene:
    """A scene.

    Attributes:
        group: Group of a ``GroupScene``.
        light_states: Light states keyed by light id, only present when the
            scene is requested on its own.
    """

    name: str
    type: SceneType
    group: str | None
    lights: tuple[str, ...]
    owner: str
    recycle: bool
    locked: bool
    app_data: AppData | None
    picture: str | None
    last_updated: datetime | None
    version: SceneVersion
    light_states: Mapping[str, SceneLightState] | None = field(hash=False)
    id: str = ""


# -------------------------------------------------------------------------
# Resourcelinks
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class Resourcelink:
    """A resourcelink grouping resources that belong together."""

    name: str
    description: str
    type: ResourcelinkType
    class_id: int
    owner: str
    recycle: bool
    links: tuple[str, ...]
    id: str = ""
