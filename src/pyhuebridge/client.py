"""High-level facade for a Hue bridge.

This module sequences "send request -> decode response" for every resource
kind, coordinating the low-level HueAPI with the parsers and serializers.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from aiohttp import ClientSession  # noqa: TC002 - Used at runtime by HueAPI

from pyhuebridge.api import HueAPI
from pyhuebridge.const import DEFAULT_DEVICE_TYPE, DEFAULT_TIMEOUT
from pyhuebridge.exceptions import BridgeError
from pyhuebridge.models import (
    Config,
    ErrorResponse,
    Group,
    Light,
    RegisteredUser,
    Resourcelink,
    Rule,
    Scan,
    Scene,
    Schedule,
    Sensor,
    SuccessResponse,
)
from pyhuebridge.parsers import (
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
from pyhuebridge.serializers import parse_response, serialize


if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import TracebackType

    from pyhuebridge.modifiers import (
        ConfigModifier,
        Creator,
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

_LOGGER = logging.getLogger(__name__)

Response = SuccessResponse | ErrorResponse


def _errors(responses: list[Response]) -> list[ErrorResponse]:
    return [response for response in responses if isinstance(response, ErrorResponse)]


def _log_errors(method: str, path: str, responses: list[Response]) -> None:
    for error in _errors(responses):
        _LOGGER.warning(
            "Bridge error %d for %s %s at %s: %s",
            error.type,
            method,
            path,
            error.address,
            error.description,
        )


async def register_user(
    host: str,
    device_type: str = DEFAULT_DEVICE_TYPE,
    *,
    generate_client_key: bool = False,
    session: ClientSession | None = None,
    use_https: bool = False,
) -> RegisteredUser:
    """Register a new user with the bridge.

    The link button of the bridge must have been pressed within the last 30
    seconds, otherwise the bridge answers with error 101.

    Args:
        host: Host name or IP address of the bridge.
        device_type: Name of the application and device (``"<app>#<device>"``).
        generate_client_key: Whether to also request an entertainment client key.
        session: Optional aiohttp ClientSession.
        use_https: Whether to talk to the bridge over HTTPS.

    Returns:
        The registered user.

    Raises:
        BridgeError: If the bridge refused the registration.
        DecodeError: If the response is malformed.
    """
    body: dict[str, Any] = {"devicetype": device_type}
    if generate_client_key:
        body["generateclientkey"] = True

    async with HueAPI(host, session=session, use_https=use_https) as api:
        user = parse_registered_user(await api.request("POST", json_data=body))

    _LOGGER.info("Registered %s on bridge %s", device_type, host)
    return user


class HueBridge:
    """Facade for all resources of a Hue bridge.

    Every method performs exactly one request. Modifications return the
    bridge's outcome list; error records in it are logged at warning level and
    returned to the caller, never raised. Empty modifiers are sent as-is; use
    ``Modifier.is_empty()`` to skip no-op requests.

    Example:
        ```python
        from pyhuebridge import HueBridge, LightStateModifier, ModifierType

        async with HueBridge("192.168.1.2", "my-username") as bridge:
            for light in await bridge.get_lights():
                print(light.id, light.name, light.state.on)

            modifier = LightStateModifier().set_brightness(ModifierType.INCREMENT, 40)
            for outcome in await bridge.set_light_state("1", modifier):
                print(outcome)
        ```

    Attributes:
        api: Low-level HueAPI instance for HTTP communication.
    """

    def __init__(
        self,
        host: str,
        username: str,
        *,
        session: ClientSession | None = None,
        use_https: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        api: HueAPI | None = None,
    ) -> None:
        """Initialize the bridge facade.

        Args:
            host: Host name or IP address of the bridge.
            username: Registered username.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.
            use_https: Whether to talk to the bridge over HTTPS.
            timeout: Total timeout of a request in seconds.
            api: Optional pre-configured HueAPI; overrides the other arguments.
        """
        self._api = api or HueAPI(host, username, session=session, use_https=use_https, timeout=timeout)

    async def __aenter__(self) -> HueBridge:
        """Enter the context manager."""
        await self._api.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager."""
        await self._api.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def api(self) -> HueAPI:
        """Get the low-level API client."""
        return self._api

    # -------------------------------------------------------------------------
    # Request Helpers
    # -------------------------------------------------------------------------

    async def _get(self, path: str) -> Any:
        """GET a resource, raising BridgeError if the bridge answers with errors."""
        data = await self._api.request("GET", path)
        if isinstance(data, list):
            errors = _errors(parse_response(data))
            description = errors[0].description if errors else "unexpected response"
            msg = f"Failed to get {path}: {description}"
            raise BridgeError(msg, errors=errors)
        return data

    async def _send(
        self,
        method: str,
        path: str,
        builder: Modifier | Creator | None = None,
        json_data: Any = None,
    ) -> list[Response]:
        body = serialize(builder) if builder is not None else None
        responses = parse_response(await self._api.request(method, path, json_data=json_data, body=body))
        _log_errors(method, path, responses)
        return responses

    async def _create(self, path: str, creator: Creator) -> str:
        """POST a creator and return the id of the new resource."""
        responses = await self._send("POST", path, creator)
        for response in responses:
            if isinstance(response, SuccessResponse) and "id" in response.values:
                return str(response.values["id"])
        msg = f"Failed to create resource at {path}"
        raise BridgeError(msg, errors=_errors(responses))

    # -------------------------------------------------------------------------
    # Lights
    # -------------------------------------------------------------------------

    async def get_light(self, light_id: str) -> Light:
        """Get a light by id."""
        return replace(parse_light(await self._get(f"/lights/{light_id}")), id=light_id)

    async def get_lights(self) -> list[Light]:
        """Get all lights."""
        return parse_lights(await self._get("/lights"))

    async def get_new_lights(self) -> Scan:
        """Get the lights discovered by the last scan."""
        return parse_scan(await self._get("/lights/new"))

    async def search_new_lights(self, device_ids: Iterable[str] | None = None) -> list[Response]:
        """Start a scan for new lights, optionally for specific serial numbers."""
        json_data = {"deviceid": list(device_ids)} if device_ids is not None else None
        return await self._send("POST", "/lights", json_data=json_data)

    async def set_light_attributes(self, light_id: str, modifier: LightAttributeModifier) -> list[Response]:
        """Modify the attributes of a light."""
        return await self._send("PUT", f"/lights/{light_id}", modifier)

    async def set_light_state(self, light_id: str, modifier: LightStateModifier) -> list[Response]:
        """Modify the state of a light."""
        return await self._send("PUT", f"/lights/{light_id}/state", modifier)

    async def delete_light(self, light_id: str) -> list[Response]:
        """Delete a light from the bridge."""
        return await self._send("DELETE", f"/lights/{light_id}")

    # -------------------------------------------------------------------------
    # Sensors
    # -------------------------------------------------------------------------

    async def get_sensor(self, sensor_id: str) -> Sensor:
        """Get a sensor by id."""
        return replace(parse_sensor(await self._get(f"/sensors/{sensor_id}")), id=sensor_id)

    async def get_sensors(self) -> list[Sensor]:
        """Get all sensors."""
        return parse_sensors(await self._get("/sensors"))

    async def get_new_sensors(self) -> Scan:
        """Get the sensors discovered by the last scan."""
        return parse_scan(await self._get("/sensors/new"))

    async def search_new_sensors(self) -> list[Response]:
        """Start a scan for new sensors."""
        return await self._send("POST", "/sensors")

    async def set_sensor_attributes(self, sensor_id: str, modifier: SensorAttributeModifier) -> list[Response]:
        """Modify the attributes of a sensor."""
        return await self._send("PUT", f"/sensors/{sensor_id}", modifier)

    async def set_sensor_state(self, sensor_id: str, modifier: SensorStateModifier) -> list[Response]:
        """Modify the state of a sensor."""
        return await self._send("PUT", f"/sensors/{sensor_id}/state", modifier)

    async def set_sensor_config(self, sensor_id: str, modifier: SensorConfigModifier) -> list[Response]:
        """Modify the configuration of a sensor."""
        return await self._send("PUT", f"/sensors/{sensor_id}/config", modifier)

    async def delete_sensor(self, sensor_id: str) -> list[Response]:
        """Delete a sensor."""
        return await self._send("DELETE", f"/sensors/{sensor_id}")

    # -------------------------------------------------------------------------
    # Bridge Configuration
    # -------------------------------------------------------------------------

    async def get_config(self) -> Config:
        """Get the configuration of the bridge."""
        return parse_config(await self._get("/config"))

    async def set_config(self, modifier: ConfigModifier) -> list[Response]:
        """Modify the configuration of the bridge."""
        return await self._send("PUT", "/config", modifier)

    # -------------------------------------------------------------------------
    # Groups
    # -------------------------------------------------------------------------

    async def create_group(self, creator: GroupCreator) -> str:
        """Create a group and return its id."""
        return await self._create("/groups", creator)

    async def get_group(self, group_id: str) -> Group:
        """Get a group by id."""
        return replace(parse_group(await self._get(f"/groups/{group_id}")), id=group_id)

    async def get_groups(self) -> list[Group]:
        """Get all groups."""
        return parse_groups(await self._get("/groups"))

    async def set_group_attributes(self, group_id: str, modifier: GroupAttributeModifier) -> list[Response]:
        """Modify the attributes of a group."""
        return await self._send("PUT", f"/groups/{group_id}", modifier)

    async def set_group_state(self, group_id: str, modifier: GroupStateModifier) -> list[Response]:
        """Modify the state of all lights in a group."""
        return await self._send("PUT", f"/groups/{group_id}/action", modifier)

    async def delete_group(self, group_id: str) -> list[Response]:
        """Delete a group."""
        return await self._send("DELETE", f"/groups/{group_id}")

    # -------------------------------------------------------------------------
    # Schedules
    # -------------------------------------------------------------------------

    async def create_schedule(self, creator: ScheduleCreator) -> str:
        """Create a schedule and return its id."""
        return await self._create("/schedules", creator)

    async def get_schedule(self, schedule_id: str) -> Schedule:
        """Get a schedule by id."""
        return replace(parse_schedule(await self._get(f"/schedules/{schedule_id}")), id=schedule_id)

    async def get_schedules(self) -> list[Schedule]:
        """Get all schedules."""
        return parse_schedules(await self._get("/schedules"))

    async def set_schedule(self, schedule_id: str, modifier: ScheduleModifier) -> list[Response]:
        """Modify a schedule."""
        return await self._send("PUT", f"/schedules/{schedule_id}", modifier)

    async def delete_schedule(self, schedule_id: str) -> list[Response]:
        """Delete a schedule."""
        return await self._send("DELETE", f"/schedules/{schedule_id}")

    # -------------------------------------------------------------------------
    # Rules
    # -------------------------------------------------------------------------

    async def create_rule(self, creator: RuleCreator) -> str:
        """Create a rule and return its id."""
        return await self._create("/rules", creator)

    async def get_rule(self, rule_id: str) -> Rule:
        """Get a rule by id."""
        return replace(parse_rule(await self._get(f"/rules/{rule_id}")), id=rule_id)

    async def get_rules(self) -> list[Rule]:
        """Get all rules."""
        return parse_rules(await self._get("/rules"))

    async def set_rule(self, rule_id: str, modifier: RuleModifier) -> list[Response]:
        """Modify a rule."""
        return await self._send("PUT", f"/rules/{rule_id}", modifier)

    async def delete_rule(self, rule_id: str) -> list[Response]:
        """Delete a rule."""
        return await self._send("DELETE", f"/rules/{rule_id}")

    # -------------------------------------------------------------------------
    # Scenes
    # -------------------------------------------------------------------------

    async def create_scene(self, creator: SceneCreator) -> str:
        """Create a scene and return its id."""
        return await self._create("/scenes", creator)

    async def get_scene(self, scene_id: str) -> Scene:
        """Get a scene by id, including its light states."""
        return replace(parse_scene(await self._get(f"/scenes/{scene_id}")), id=scene_id)

    async def get_scenes(self) -> list[Scene]:
        """Get all scenes (without light states)."""
        return parse_scenes(await self._get("/scenes"))

    async def set_scene(self, scene_id: str, modifier: SceneModifier) -> list[Response]:
        """Modify a scene."""
        return await self._send("PUT", f"/scenes/{scene_id}", modifier)

    async def delete_scene(self, scene_id: str) -> list[Response]:
        """Delete a scene."""
        return await self._send("DELETE", f"/scenes/{scene_id}")

    # -------------------------------------------------------------------------
    # Resourcelinks
    # -------------------------------------------------------------------------

    async def create_resourcelink(self, creator: ResourcelinkCreator) -> str:
        """Create a resourcelink and return its id."""
        return await self._create("/resourcelinks", creator)

    async def get_resourcelink(self, resourcelink_id: str) -> Resourcelink:
        """Get a resourcelink by id."""
        return replace(parse_resourcelink(await self._get(f"/resourcelinks/{resourcelink_id}")), id=resourcelink_id)

    async def get_resourcelinks(self) -> list[Resourcelink]:
        """Get all resourcelinks."""
        return parse_resourcelinks(await self._get("/resourcelinks"))

    async def set_resourcelink(self, resourcelink_id: str, modifier: ResourcelinkModifier) -> list[Response]:
        """Modify a resourcelink."""
        return await self._send("PUT", f"/resourcelinks/{resourcelink_id}", modifier)

    async def delete_resourcelink(self, resourcelink_id: str) -> list[Response]:
        """Delete a resourcelink."""
        return await self._send("DELETE", f"/resourcelinks/{resourcelink_id}")
