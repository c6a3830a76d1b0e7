"""Constants for pyhuebridge library."""

from __future__ import annotations


# API Configuration
API_PATH = "/api"
DEFAULT_TIMEOUT = 10  # seconds
DEFAULT_DEVICE_TYPE = "pyhuebridge#client"

# Wire Format
NONE_SENTINEL = "none"
DATE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
TIME_FORMAT = "T%H:%M:%S"
INCREMENT_SUFFIX = "_inc"
LAST_SCAN_KEY = "lastscan"

# Integer Widths
UINT8_MAX = 255
UINT16_MAX = 65535
