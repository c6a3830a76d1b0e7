"""Enumerated wire types of the Hue bridge API.

Every member's value is the exact token the bridge sends and expects. The
sets are closed: decoding a token that is not listed here is an error.
"""

from __future__ import annotations

from enum import Enum


__all__ = [
    "ActionRequestType",
    "Alert",
    "BackupError",
    "BackupStatus",
    "ColorMode",
    "ConditionOperator",
    "CoordinateModifierType",
    "Effect",
    "GroupClass",
    "GroupType",
    "LastScanKind",
    "LightSoftwareUpdateState",
    "ModifierType",
    "ResourcelinkType",
    "RuleStatus",
    "SceneType",
    "SceneVersion",
    "ScheduleStatus",
    "ServiceStatus",
    "SoftwareUpdateState",
]


class Alert(Enum):
    """Alert effect of a light."""

    SELECT = "select"  # One breathe cycle
    LSELECT = "lselect"  # Breathe cycles for 15 seconds
    NONE = "none"


class Effect(Enum):
    """Dynamic effect of a light."""

    COLORLOOP = "colorloop"
    NONE = "none"


class ColorMode(Enum):
    """Color mode of a light."""

    COLOR_TEMPERATURE = "ct"
    HUE_AND_SATURATION = "hs"
    COLOR_SPACE_COORDINATES = "xy"


class ActionRequestType(Enum):
    """HTTP method used by a schedule or rule action."""

    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class LightSoftwareUpdateState(Enum):
    """State of software updates of a light."""

    NO_UPDATES = "noupdates"
    NOT_UPDATABLE = "notupdatable"
    READY_TO_INSTALL = "readytoinstall"
    TRANSFERRING = "transferring"
    INSTALLING = "installing"


class SoftwareUpdateState(Enum):
    """State of software updates of the bridge."""

    UNKNOWN = "unknown"
    NO_UPDATES = "noupdates"
    TRANSFERRING = "transferring"
    ANY_READY_TO_INSTALL = "anyreadytoinstall"
    ALL_READY_TO_INSTALL = "allreadytoinstall"
    INSTALLING = "installing"


class ServiceStatus(Enum):
    """Status of a bridge service."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class BackupStatus(Enum):
    """Status of backup/restore."""

    IDLE = "idle"
    START_MIGRATION = "startmigration"
    FILEREADY_DISABLED = "fileready_disabled"
    PREPARE_RESTORE = "prepare_restore"
    RESTORING = "restoring"


class BackupError(Enum):
    """Last error source of a backup, sent as an integer code."""

    NONE = 0
    EXPORT_FAILED = 1
    IMPORT_FAILED = 2


class GroupType(Enum):
    """Type of a group."""

    ZERO = "0"  # Group 0, contains all lights
    LUMINAIRE = "Luminaire"
    LIGHTSOURCE = "Lightsource"
    LIGHT_GROUP = "LightGroup"
    ROOM = "Room"
    ENTERTAINMENT = "Entertainment"
    ZONE = "Zone"


class GroupClass(Enum):
    """Class of a room or zone."""

    LIVING_ROOM = "Living room"
    KITCHEN = "Kitchen"
    DINING = "Dining"
    BEDROOM = "Bedroom"
    KIDS_BEDROOM = "Kids bedroom"
    BATHROOM = "Bathroom"
    NURSERY = "Nursery"
    RECREATION = "Recreation"
    OFFICE = "Office"
    GYM = "Gym"
    HALLWAY = "Hallway"
    TOILET = "Toilet"
    FRONT_DOOR = "Front door"
    GARAGE = "Garage"
    TERRACE = "Terrace"
    GARDEN = "Garden"
    DRIVEWAY = "Driveway"
    CARPORT = "Carport"
    HOME = "Home"
    DOWNSTAIRS = "Downstairs"
    UPSTAIRS = "Upstairs"
    TOP_FLOOR = "Top floor"
    ATTIC = "Attic"
    GUEST_ROOM = "Guest room"
    STAIRCASE = "Staircase"
    LOUNGE = "Lounge"
    MAN_CAVE = "Man cave"
    COMPUTER = "Computer"
    STUDIO = "Studio"
    MUSIC = "Music"
    TV = "TV"
    READING = "Reading"
    CLOSET = "Closet"
    STORAGE = "Storage"
    LAUNDRY_ROOM = "Laundry room"
    BALCONY = "Balcony"
    PORCH = "Porch"
    BARBECUE = "Barbecue"
    POOL = "Pool"
    FREE = "Free"
    OTHER = "Other"


class ScheduleStatus(Enum):
    """Status of a schedule."""

    ENABLED = "enabled"
    DISABLED = "disabled"


class RuleStatus(Enum):
    """Status of a rule."""

    ENABLED = "enabled"
    DISABLED = "disabled"
    RESOURCE_DELETED = "resourcedeleted"


class ConditionOperator(Enum):
    """Operator of a rule condition."""

    EQUAL = "eq"
    GREATER_THAN = "gt"
    LESS_THAN = "lt"
    CHANGED = "dx"
    CHANGED_DELAYED = "ddx"
    STABLE = "stable"
    NOT_STABLE = "not stable"
    IN = "in"
    NOT_IN = "not in"


class SceneType(Enum):
    """Type of a scene."""

    LIGHT_SCENE = "LightScene"
    GROUP_SCENE = "GroupScene"


class SceneVersion(Enum):
    """Version of a scene, sent as an integer code."""

    PRE = 1  # Light states are not stored on the bridge
    POST = 2


class ResourcelinkType(Enum):
    """Type of a resourcelink."""

    LINK = "Link"


class LastScanKind(Enum):
    """Status of the last scan for new lights or sensors."""

    ACTIVE = "active"
    NONE = "none"
    DATE_TIME = "date_time"  # Never sent as a token, the bridge sends the date itself


class ModifierType(Enum):
    """How a modifier applies a value to the current one."""

    OVERRIDE = "override"
    INCREMENT = "increment"
    DECREMENT = "decrement"


class CoordinateModifierType(Enum):
    """How a modifier applies a coordinate pair to the current one.

    The two mixed variants control the sign of each axis independently.
    """

    OVERRIDE = "override"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    INCREMENT_DECREMENT = "increment_decrement"
    DECREMENT_INCREMENT = "decrement_increment"
