"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def sample_light() -> dict[str, Any]:
    """Build a realistic ``GET /lights/<id>`` payload of an extended color light."""
    return {
        "state": {
            "on": True,
            "bri": 144,
            "hue": 13088,
            "sat": 212,
            "effect": "none",
            "xy": [0.5128, 0.4147],
            "ct": 467,
            "alert": "none",
            "colormode": "xy",
            "mode": "homeautomation",
            "reachable": True,
        },
        "swupdate": {"state": "noupdates", "lastinstall": "2018-01-02T19:24:20"},
        "type": "Extended color light",
        "name": "Hue color lamp 7",
        "modelid": "LCT007",
        "manufacturername": "Philips",
        "productname": "Hue color lamp",
        "capabilities": {
            "certified": True,
            "control": {
                "mindimlevel": 5000,
                "maxlumen": 600,
                "colorgamuttype": "B",
                "colorgamut": [[0.675, 0.322], [0.409, 0.518], [0.167, 0.04]],
                "ct": {"min": 153, "max": 500},
            },
            "streaming": {"renderer": True, "proxy": False},
        },
        "config": {
            "archetype": "sultanbulb",
            "function": "mixed",
            "direction": "omnidirectional",
        },
        "uniqueid": "00:17:88:01:00:bd:c7:b9-0b",
        "swversion": "5.105.0.21169",
    }


@pytest.fixture
def sample_sensor() -> dict[str, Any]:
    """Build a realistic ``GET /sensors/<id>`` payload of a daylight sensor."""
    return {
        "state": {"daylight": False, "lastupdated": "2014-06-27T07:38:51"},
        "config": {"on": True, "long": "none", "lat": "none", "sunriseoffset": 50, "sunsetoffset": 50},
        "name": "Daylight",
        "type": "Daylight",
        "modelid": "PHDL00",
        "manufacturername": "Philips",
        "swversion": "1.0",
    }


@pytest.fixture
def sample_config() -> dict[str, Any]:
    """Build a realistic ``GET /config`` payload."""
    return {
        "name": "Philips hue",
        "zigbeechannel": 15,
        "mac": "00:17:88:00:00:00",
        "dhcp": True,
        "ipaddress": "192.168.1.7",
        "netmask": "255.255.255.0",
        "gateway": "192.168.1.1",
        "proxyaddress": "none",
        "proxyport": 0,
        "UTC": "2014-07-17T09:27:35",
        "localtime": "none",
        "timezone": "none",
        "whitelist": {
            "ffffffffe0341b1b376a2389376a2389": {
                "last use date": "2014-07-17T07:21:38",
                "create date": "2014-04-08T08:55:10",
                "name": "PhilipsHueAndroidApp#TCT ALCATEL ONE TOU",
            },
            "pAtwdCV8NZId25Gk": {
                "last use date": "2014-05-07T18:28:29",
                "create date": "2014-04-09T17:29:16",
                "name": "MyApplication",
            },
        },
        "swversion": "1941132080",
        "apiversion": "1.41.0",
        "swupdate2": {
            "checkforupdate": False,
            "lastchange": "2018-06-09T10:11:08",
            "bridge": {"state": "noupdates", "lastinstall": "2018-06-08T19:09:45"},
            "state": "noupdates",
            "autoinstall": {"updatetime": "T14:00:00", "on": False},
        },
        "linkbutton": False,
        "portalservices": False,
        "portalconnection": "disconnected",
        "portalstate": {
            "signedon": False,
            "incoming": False,
            "outgoing": False,
            "communication": "disconnected",
        },
        "internetservices": {
            "internet": "connected",
            "remoteaccess": "connected",
            "time": "connected",
            "swupdate": "connected",
        },
        "factorynew": False,
        "replacesbridgeid": None,
        "backup": {"status": "idle", "errorcode": 0},
        "starterkitid": "",
        "datastoreversion": "70",
        "modelid": "BSB002",
        "bridgeid": "001788FFFE000000",
    }


@pytest.fixture
def sample_group() -> dict[str, Any]:
    """Build a realistic ``GET /groups/<id>`` payload of a room."""
    return {
        "name": "Living room",
        "lights": ["3", "4"],
        "sensors": [],
        "type": "Room",
        "state": {"all_on": False, "any_on": True},
        "recycle": False,
        "class": "Living room",
        "action": {
            "on": True,
            "bri": 254,
            "hue": 8417,
            "sat": 140,
            "effect": "none",
            "xy": [0.4573, 0.41],
            "ct": 366,
            "alert": "select",
            "colormode": "ct",
        },
    }


@pytest.fixture
def sample_schedule() -> dict[str, Any]:
    """Build a realistic ``GET /schedules/<id>`` payload of a wake up schedule."""
    return {
        "name": "Wake up",
        "description": "My wake up alarm",
        "command": {
            "address": "/api/testuser/groups/1/action",
            "method": "PUT",
            "body": {"on": True},
        },
        "localtime": "W124/T06:00:00",
        "time": "W124/T05:00:00",
        "created": "2014-06-23T13:39:16",
        "status": "disabled",
        "autodelete": False,
        "starttime": "2014-06-23T13:39:16",
    }


@pytest.fixture
def sample_rule() -> dict[str, Any]:
    """Build a realistic ``GET /rules/<id>`` payload."""
    return {
        "name": "Wall Switch Rule",
        "owner": "testuser",
        "created": "2014-07-23T15:02:56",
        "lasttriggered": "none",
        "timestriggered": 0,
        "status": "enabled",
        "conditions": [
            {"address": "/sensors/2/state/buttonevent", "operator": "eq", "value": "16"},
            {"address": "/sensors/2/state/lastupdated", "operator": "dx"},
        ],
        "actions": [
            {"address": "/groups/0/action", "method": "PUT", "body": {"scene": "S3"}},
        ],
    }


@pytest.fixture
def sample_scene() -> dict[str, Any]:
    """Build a realistic ``GET /scenes/<id>`` payload including light states."""
    return {
        "name": "Cozy dinner",
        "type": "LightScene",
        "lights": ["1", "2"],
        "owner": "testuser",
        "recycle": True,
        "locked": False,
        "appdata": {"version": 1, "data": "myAppData"},
        "picture": "",
        "lastupdated": "2015-12-03T10:09:22",
        "version": 2,
        "lightstates": {
            "1": {"on": True, "bri": 254, "ct": 250},
            "2": {"on": True, "bri": 254, "xy": [0.4, 0.4], "transitiontime": 10},
        },
    }


@pytest.fixture
def sample_resourcelink() -> dict[str, Any]:
    """Build a realistic ``GET /resourcelinks/<id>`` payload."""
    return {
        "name": "Sunrise",
        "description": "Carla's wakeup experience",
        "type": "Link",
        "classid": 1,
        "owner": "testuser",
        "recycle": True,
        "links": ["/schedules/2", "/schedules/3", "/scenes/ABC"],
    }

