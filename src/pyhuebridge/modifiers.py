"""Builders for request bodies that modify or create bridge resources.

A modifier is an immutable value holding a sparse set of attributes to
change. Every ``set_*`` method returns a copy with its slot populated and
leaves all other slots untouched; unset slots are never serialized, because
the bridge treats every attribute present in a body as a change request.

Attributes that support relative changes have two slots: the base slot for
``ModifierType.OVERRIDE`` and a companion ``_inc`` slot for increments and
decrements. A single call only writes one of them. Delta slots are signed:
a decrement by ``n`` is stored as ``-n``.

Example:
    ```python
    from pyhuebridge import LightStateModifier, ModifierType

    modifier = (
        LightStateModifier()
        .set_on(True)
        .set_brightness(ModifierType.INCREMENT, 40)
        .set_saturation(ModifierType.OVERRIDE, 200)
    )
    # serialize(modifier) == b'{"on":true,"sat":200,"bri_inc":40}'
    ```
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Self

from pyhuebridge.const import INCREMENT_SUFFIX, NONE_SENTINEL, UINT8_MAX, UINT16_MAX
from pyhuebridge.enums import CoordinateModifierType, ModifierType
from pyhuebridge.exceptions import InvalidParameterError


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from datetime import datetime

    from pyhuebridge.enums import (
        Alert,
        Effect,
        GroupClass,
        GroupType,
        ResourcelinkType,
        RuleStatus,
        SceneType,
        ScheduleStatus,
    )
    from pyhuebridge.models import Action, AppData, Condition


__all__ = [
    "ConfigModifier",
    "Creator",
    "GroupAttributeModifier",
    "GroupCreator",
    "GroupStateModifier",
    "LightAttributeModifier",
    "LightStateModifier",
    "Modifier",
    "ResourcelinkCreator",
    "ResourcelinkModifier",
    "RuleCreator",
    "RuleModifier",
    "SceneCreator",
    "SceneModifier",
    "ScheduleCreator",
    "ScheduleModifier",
    "SensorAttributeModifier",
    "SensorConfigModifier",
    "SensorStateModifier",
]

WIRE_NAME = "wire_name"


def slot(wire_name: str | None = None, *, hashed: bool = True) -> Any:
    """Declare an optional builder slot, serialized under ``wire_name``.

    Map-valued slots pass ``hashed=False``: they still take part in equality
    but not in the hash of the builder.
    """
    return field(default=None, hash=None if hashed else False, metadata={WIRE_NAME: wire_name})


def _check_uint(name: str, value: int, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= maximum:
        msg = f"{name} must be an integer 0-{maximum}, got {value!r}"
        raise InvalidParameterError(msg, parameter_name=name, value=value)
    return value


def _check_modifier_type(modifier_type: Any, expected: type) -> None:
    if not isinstance(modifier_type, expected):
        msg = f"expected a {expected.__name__}, got {modifier_type!r}"
        raise InvalidParameterError(msg, parameter_name="modifier_type", value=modifier_type)


def _ip_address(name: str, value: Any) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    try:
        return ipaddress.ip_address(value)
    except ValueError as err:
        msg = f"{name} must be an IP address, got {value!r}"
        raise InvalidParameterError(msg, parameter_name=name, value=value) from err


class Modifier:
    """Base class for modifiers.

    Subclasses are frozen dataclasses whose slots all default to None.
    """

    def is_empty(self) -> bool:
        """Whether the modifier would not change anything.

        A modifier is empty iff it equals a freshly constructed one.
        """
        return self == type(self)()


class Creator:
    """Base class for builders of resource creation bodies."""


# -------------------------------------------------------------------------
# Light State
# -------------------------------------------------------------------------


class _StateSetters:
    """Setters shared by the light and group state modifiers."""

    def _with(self, **changes: Any) -> Self:
        return replace(self, **changes)  # type: ignore[type-var]

    def _apply(self, modifier_type: ModifierType, value: int, base: str) -> Self:
        _check_modifier_type(modifier_type, ModifierType)
        if modifier_type is ModifierType.OVERRIDE:
            return self._with(**{base: value})
        delta = value if modifier_type is ModifierType.INCREMENT else -value
        return self._with(**{f"{base}_increment": delta})

    def set_on(self, value: bool) -> Self:  # noqa: FBT001
        """Turn the lights on or off."""
        return self._with(on=value)

    def set_brightness(self, modifier_type: ModifierType, value: int) -> Self:
        """Set the brightness (0-255; the bridge clamps to 1-254)."""
        return self._apply(modifier_type, _check_uint("brightness", value, UINT8_MAX), "brightness")

    def set_hue(self, modifier_type: ModifierType, value: int) -> Self:
        """Set the hue (0-65535)."""
        return self._apply(modifier_type, _check_uint("hue", value, UINT16_MAX), "hue")

    def set_saturation(self, modifier_type: ModifierType, value: int) -> Self:
        """Set the saturation (0-255; the bridge clamps to 0-254)."""
        return self._apply(modifier_type, _check_uint("saturation", value, UINT8_MAX), "saturation")

    def set_color_space_coordinates(
        self,
        modifier_type: CoordinateModifierType,
        value: tuple[float, float],
    ) -> Self:
        """Set the x and y coordinates of the color in CIE color space.

        Overrides take values between 0 and 1, relative changes values between
        0 and 0.5. The mixed modifier types choose the sign of each axis:
        ``INCREMENT_DECREMENT`` sends ``(+x, -y)``, ``DECREMENT_INCREMENT``
        sends ``(-x, +y)``.
        """
        _check_modifier_type(modifier_type, CoordinateModifierType)
        x, y = float(value[0]), float(value[1])
        if modifier_type is CoordinateModifierType.OVERRIDE:
            return self._with(color_space_coordinates=(x, y))
        delta = {
            CoordinateModifierType.INCREMENT: (x, y),
            CoordinateModifierType.DECREMENT: (-x, -y),
            CoordinateModifierType.INCREMENT_DECREMENT: (x, -y),
            CoordinateModifierType.DECREMENT_INCREMENT: (-x, y),
        }[modifier_type]
        return self._with(color_space_coordinates_increment=delta)

    def set_color_temperature(self, modifier_type: ModifierType, value: int) -> Self:
        """Set the mired color temperature."""
        return self._apply(modifier_type, _check_uint("color_temperature", value, UINT16_MAX), "color_temperature")

    def set_alert(self, value: Alert) -> Self:
        """Set the alert effect."""
        return self._with(alert=value)

    def set_effect(self, value: Effect) -> Self:
        """Set the dynamic effect."""
        return self._with(effect=value)

    def set_transition_time(self, value: int) -> Self:
        """Set the duration of the state change as a multiple of 100ms."""
        return self._with(transition_time=_check_uint("transition_time", value, UINT16_MAX))


@dataclass(frozen=True)
class LightStateModifier(_StateSetters, Modifier):
    """Modifier for the state of a light (``PUT /lights/<id>/state``)."""

    on: bool | None = slot()
    brightness: int | None = slot("bri")
    hue: int | None = slot()
    saturation: int | None = slot("sat")
    color_space_coordinates: tuple[float, float] | None = slot("xy")
    color_temperature: int | None = slot("ct")
    alert: Alert | None = slot()
    effect: Effect | None = slot()
    transition_time: int | None = slot("transitiontime")
    brightness_increment: int | None = slot(f"bri{INCREMENT_SUFFIX}")
    hue_increment: int | None = slot(f"hue{INCREMENT_SUFFIX}")
    saturation_increment: int | None = slot(f"sat{INCREMENT_SUFFIX}")
    color_space_coordinates_increment: tuple[float, float] | None = slot(f"xy{INCREMENT_SUFFIX}")
    color_temperature_increment: int | None = slot(f"ct{INCREMENT_SUFFIX}")


@dataclass(frozen=True)
class GroupStateModifier(_StateSetters, Modifier):
    """Modifier for the state of all lights in a group (``PUT /groups/<id>/action``)."""

    on: bool | None = slot()
    brightness: int | None = slot("bri")
    hue: int | None = slot()
    saturation: int | None = slot("sat")
    color_space_coordinates: tuple[float, float] | None = slot("xy")
    color_temperature: int | None = slot("ct")
    alert: Alert | None = slot()
    effect: Effect | None = slot()
    transition_time: int | None = slot("transitiontime")
    brightness_increment: int | None = slot(f"bri{INCREMENT_SUFFIX}")
    hue_increment: int | None = slot(f"hue{INCREMENT_SUFFIX}")
    saturation_increment: int | None = slot(f"sat{INCREMENT_SUFFIX}")
    color_space_coordinates_increment: tuple[float, float] | None = slot(f"xy{INCREMENT_SUFFIX}")
    color_temperature_increment: int | None = slot(f"ct{INCREMENT_SUFFIX}")
    scene: str | None = slot()

    def set_scene(self, value: str) -> GroupStateModifier:
        """Recall a scene on the group."""
        return replace(self, scene=value)


# -------------------------------------------------------------------------
# Attributes
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class LightAttributeModifier(Modifier):
    """Modifier for the attributes of a light."""

    name: str | None = slot()

    def set_name(self, value: str) -> LightAttributeModifier:
        """Rename the light."""
        return replace(self, name=value)


@dataclass(frozen=True)
class SensorAttributeModifier(Modifier):
    """Modifier for the attributes of a sensor."""

    name: str | None = slot()

    def set_name(self, value: str) -> SensorAttributeModifier:
        """Rename the sensor."""
        return replace(self, name=value)


@dataclass(frozen=True)
class SensorStateModifier(Modifier):
    """Modifier for the state of a sensor."""

    presence: bool | None = slot()

    def set_presence(self, value: bool) -> SensorStateModifier:  # noqa: FBT001
        """Set the presence of the sensor."""
        return replace(self, presence=value)


@dataclass(frozen=True)
class SensorConfigModifier(Modifier):
    """Modifier for the configuration of a sensor."""

    on: bool | None = slot()

    def set_on(self, value: bool) -> SensorConfigModifier:  # noqa: FBT001
        """Turn the sensor on or off."""
        return replace(self, on=value)


@dataclass(frozen=True)
class GroupAttributeModifier(Modifier):
    """Modifier for the attributes of a group."""

    name: str | None = slot()
    lights: tuple[str, ...] | None = slot()
    class_: GroupClass | None = slot("class")

    def set_name(self, value: str) -> GroupAttributeModifier:
        """Rename the group."""
        return replace(self, name=value)

    def set_lights(self, value: Iterable[str]) -> GroupAttributeModifier:
        """Replace the lights of the group."""
        return replace(self, lights=tuple(value))

    def set_class(self, value: GroupClass) -> GroupAttributeModifier:
        """Change the class of a room or zone."""
        return replace(self, class_=value)


# -------------------------------------------------------------------------
# Bridge Configuration
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class ConfigModifier(Modifier):
    """Modifier for the bridge configuration (``PUT /config``)."""

    name: str | None = slot()
    ip_address: ipaddress.IPv4Address | ipaddress.IPv6Address | None = slot("ipaddress")
    netmask: str | None = slot()
    gateway: ipaddress.IPv4Address | ipaddress.IPv6Address | None = slot()
    dhcp: bool | None = slot()
    proxy_port: int | None = slot("proxyport")
    proxy_address: str | None = slot("proxyaddress")
    link_button: bool | None = slot("linkbutton")
    touchlink: bool | None = slot()
    zigbee_channel: int | None = slot("zigbeechannel")
    current_time: datetime | None = slot("UTC")
    timezone: str | None = slot()

    def set_name(self, value: str) -> ConfigModifier:
        """Rename the bridge."""
        return replace(self, name=value)

    def set_ip_address(self, value: str | ipaddress.IPv4Address | ipaddress.IPv6Address) -> ConfigModifier:
        """Set the IP address of the bridge."""
        return replace(self, ip_address=_ip_address("ip_address", value))

    def set_netmask(self, value: str) -> ConfigModifier:
        """Set the network mask of the bridge."""
        return replace(self, netmask=value)

    def set_gateway(self, value: str | ipaddress.IPv4Address | ipaddress.IPv6Address) -> ConfigModifier:
        """Set the gateway IP address of the bridge."""
        return replace(self, gateway=_ip_address("gateway", value))

    def set_dhcp(self, value: bool) -> ConfigModifier:  # noqa: FBT001
        """Set whether the IP address is obtained with DHCP."""
        return replace(self, dhcp=value)

    def set_proxy_port(self, value: int) -> ConfigModifier:
        """Set the proxy port; 0 means no proxy."""
        return replace(self, proxy_port=_check_uint("proxy_port", value, UINT16_MAX))

    def set_proxy_address(
        self,
        value: str | ipaddress.IPv4Address | ipaddress.IPv6Address | None,
    ) -> ConfigModifier:
        """Set the proxy address; None disables the proxy ("none" on the wire)."""
        address = NONE_SENTINEL if value is None else str(_ip_address("proxy_address", value))
        return replace(self, proxy_address=address)

    def set_link_button(self, value: bool) -> ConfigModifier:  # noqa: FBT001
        """Set the link button state (only allowed for portal access)."""
        return replace(self, link_button=value)

    def set_touchlink(self) -> ConfigModifier:
        """Start a touchlink adding the closest lamp to the ZigBee network."""
        return replace(self, touchlink=True)

    def set_zigbee_channel(self, value: int) -> ConfigModifier:
        """Set the wireless channel (11, 15, 20 or 25)."""
        return replace(self, zigbee_channel=_check_uint("zigbee_channel", value, UINT8_MAX))

    def set_current_time(self, value: datetime) -> ConfigModifier:
        """Set the current UTC time of the bridge."""
        return replace(self, current_time=value)

    def set_timezone(self, value: str) -> ConfigModifier:
        """Set the Olson timezone of the bridge."""
        return replace(self, timezone=value)


# -------------------------------------------------------------------------
# Schedules and Rules
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class ScheduleModifier(Modifier):
    """Modifier for a schedule."""

    name: str | None = slot()
    description: str | None = slot()
    command: Action | None = slot()
    local_time: str | None = slot("localtime")
    status: ScheduleStatus | None = slot()
    auto_delete: bool | None = slot("autodelete")

    def set_name(self, value: str) -> ScheduleModifier:
        """Rename the schedule."""
        return replace(self, name=value)

    def set_description(self, value: str) -> ScheduleModifier:
        """Change the description."""
        return replace(self, description=value)

    def set_command(self, value: Action) -> ScheduleModifier:
        """Change the action executed by the schedule."""
        return replace(self, command=value)

    def set_local_time(self, value: str) -> ScheduleModifier:
        """Change the time pattern (e.g. "W124/T06:00:00")."""
        return replace(self, local_time=value)

    def set_status(self, value: ScheduleStatus) -> ScheduleModifier:
        """Enable or disable the schedule."""
        return replace(self, status=value)

    def set_auto_delete(self, value: bool) -> ScheduleModifier:  # noqa: FBT001
        """Set whether the schedule is deleted after it expired."""
        return replace(self, auto_delete=value)


@dataclass(frozen=True)
class ScheduleCreator(Creator):
    """Body of ``POST /schedules``."""

    command: Action
    local_time: str = field(metadata={WIRE_NAME: "localtime"})
    name: str | None = slot()
    description: str | None = slot()
    status: ScheduleStatus | None = slot()
    auto_delete: bool | None = slot("autodelete")
    recycle: bool | None = slot()

    def set_name(self, value: str) -> ScheduleCreator:
        """Name the schedule."""
        return replace(self, name=value)

    def set_description(self, value: str) -> ScheduleCreator:
        """Describe the schedule."""
        return replace(self, description=value)

    def set_status(self, value: ScheduleStatus) -> ScheduleCreator:
        """Create the schedule enabled or disabled."""
        return replace(self, status=value)

    def set_auto_delete(self, value: bool) -> ScheduleCreator:  # noqa: FBT001
        """Set whether the schedule is deleted after it expired."""
        return replace(self, auto_delete=value)

    def set_recycle(self, value: bool) -> ScheduleCreator:  # noqa: FBT001
        """Set whether the bridge may delete the schedule when unreferenced."""
        return replace(self, recycle=value)


@dataclass(frozen=True)
class RuleModifier(Modifier):
    """Modifier for a rule."""

    name: str | None = slot()
    status: RuleStatus | None = slot()
    conditions: tuple[Condition, ...] | None = slot()
    actions: tuple[Action, ...] | None = slot()

    def set_name(self, value: str) -> RuleModifier:
        """Rename the rule."""
        return replace(self, name=value)

    def set_status(self, value: RuleStatus) -> RuleModifier:
        """Enable or disable the rule."""
        return replace(self, status=value)

    def set_conditions(self, value: Iterable[Condition]) -> RuleModifier:
        """Replace the conditions of the rule."""
        return replace(self, conditions=tuple(value))

    def set_actions(self, value: Iterable[Action]) -> RuleModifier:
        """Replace the actions of the rule."""
        return replace(self, actions=tuple(value))


@dataclass(frozen=True)
class RuleCreator(Creator):
    """Body of ``POST /rules``."""

    conditions: tuple[Condition, ...]
    actions: tuple[Action, ...]
    name: str | None = slot()
    status: RuleStatus | None = slot()
    recycle: bool | None = slot()

    def set_name(self, value: str) -> RuleCreator:
        """Name the rule."""
        return replace(self, name=value)

    def set_status(self, value: RuleStatus) -> RuleCreator:
        """Create the rule enabled or disabled."""
        return replace(self, status=value)

    def set_recycle(self, value: bool) -> RuleCreator:  # noqa: FBT001
        """Set whether the bridge may delete the rule when unreferenced."""
        return replace(self, recycle=value)


# -------------------------------------------------------------------------
# Groups, Scenes and Resourcelinks
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class GroupCreator(Creator):
    """Body of ``POST /groups``."""

    name: str
    lights: tuple[str, ...]
    type: GroupType | None = slot()
    class_: GroupClass | None = slot("class")
    sensors: tuple[str, ...] | None = slot()
    recycle: bool | None = slot()

    def set_type(self, value: GroupType) -> GroupCreator:
        """Set the group type (defaults to LightGroup on the bridge)."""
        return replace(self, type=value)

    def set_class(self, value: GroupClass) -> GroupCreator:
        """Set the class of a room or zone."""
        return replace(self, class_=value)

    def set_sensors(self, value: Iterable[str]) -> GroupCreator:
        """Add sensors to the group."""
        return replace(self, sensors=tuple(value))

    def set_recycle(self, value: bool) -> GroupCreator:  # noqa: FBT001
        """Set whether the bridge may delete the group when unreferenced."""
        return replace(self, recycle=value)


@dataclass(frozen=True)
class SceneModifier(Modifier):
    """Modifier for a scene."""

    name: str | None = slot()
    lights: tuple[str, ...] | None = slot()
    store_light_state: bool | None = slot("storelightstate")
    light_states: Mapping[str, LightStateModifier] | None = slot("lightstates", hashed=False)

    def set_name(self, value: str) -> SceneModifier:
        """Rename the scene."""
        return replace(self, name=value)

    def set_lights(self, value: Iterable[str]) -> SceneModifier:
        """Replace the lights of the scene."""
        return replace(self, lights=tuple(value))

    def set_store_light_state(self, value: bool) -> SceneModifier:  # noqa: FBT001
        """Store the current state of the scene's lights in the scene."""
        return replace(self, store_light_state=value)

    def set_light_states(self, value: Mapping[str, LightStateModifier]) -> SceneModifier:
        """Replace the stored light states, keyed by light id."""
        return replace(self, light_states=MappingProxyType(dict(value)))


@dataclass(frozen=True)
class SceneCreator(Creator):
    """Body of ``POST /scenes``.

    A ``LightScene`` lists its lights, a ``GroupScene`` names its group.
    """

    name: str
    lights: tuple[str, ...] | None = slot()
    group: str | None = slot()
    type: SceneType | None = slot()
    recycle: bool | None = slot()
    app_data: AppData | None = slot("appdata")
    picture: str | None = slot()
    light_states: Mapping[str, LightStateModifier] | None = slot("lightstates", hashed=False)

    def set_lights(self, value: Iterable[str]) -> SceneCreator:
        """Set the lights of a light scene."""
        return replace(self, lights=tuple(value))

    def set_group(self, value: str) -> SceneCreator:
        """Set the group of a group scene."""
        return replace(self, group=value)

    def set_type(self, value: SceneType) -> SceneCreator:
        """Set the scene type."""
        return replace(self, type=value)

    def set_recycle(self, value: bool) -> SceneCreator:  # noqa: FBT001
        """Set whether the bridge may delete the scene when unreferenced."""
        return replace(self, recycle=value)

    def set_app_data(self, value: AppData) -> SceneCreator:
        """Attach application data."""
        return replace(self, app_data=value)

    def set_picture(self, value: str) -> SceneCreator:
        """Attach a picture id."""
        return replace(self, picture=value)

    def set_light_states(self, value: Mapping[str, LightStateModifier]) -> SceneCreator:
        """Set the light states of the scene, keyed by light id."""
        return replace(self, light_states=MappingProxyType(dict(value)))


@dataclass(frozen=True)
class ResourcelinkModifier(Modifier):
    """Modifier for a resourcelink."""

    name: str | None = slot()
    description: str | None = slot()
    class_id: int | None = slot("classid")
    links: tuple[str, ...] | None = slot()

    def set_name(self, value: str) -> ResourcelinkModifier:
        """Rename the resourcelink."""
        return replace(self, name=value)

    def set_description(self, value: str) -> ResourcelinkModifier:
        """Change the description."""
        return replace(self, description=value)

    def set_class_id(self, value: int) -> ResourcelinkModifier:
        """Change the class id."""
        return replace(self, class_id=_check_uint("class_id", value, UINT16_MAX))

    def set_links(self, value: Iterable[str]) -> ResourcelinkModifier:
        """Replace the linked resource addresses."""
        return replace(self, links=tuple(value))


@dataclass(frozen=True)
class ResourcelinkCreator(Creator):
    """Body of ``POST /resourcelinks``."""

    name: str
    class_id: int = field(metadata={WIRE_NAME: "classid"})
    links: tuple[str, ...] = ()
    description: str | None = slot()
    type: ResourcelinkType | None = slot()
    recycle: bool | None = slot()

    def set_description(self, value: str) -> ResourcelinkCreator:
        """Describe the resourcelink."""
        return replace(self, description=value)

    def set_type(self, value: ResourcelinkType) -> ResourcelinkCreator:
        """Set the resourcelink type."""
        return replace(self, type=value)

    def set_recycle(self, value: bool) -> ResourcelinkCreator:  # noqa: FBT001
        """Set whether the bridge may delete the resourcelink when unreferenced."""
        return replace(self, recycle=value)
