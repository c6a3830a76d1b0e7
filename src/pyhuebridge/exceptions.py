"""Custom exceptions for pyhuebridge library."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from pyhuebridge.models import ErrorResponse


class HueError(Exception):
    """Base exception for all pyhuebridge errors."""


class DecodeError(HueError):
    """Exception raised when a bridge payload cannot be decoded.

    Covers malformed JSON, missing required fields, values of the wrong type,
    unknown enum tokens and date/time strings that do not match the wire format.

    Attributes:
        field: Optional dotted path of the offending field (e.g. "state.alert").
    """

    def __init__(self, message: str = "", field: str | None = None) -> None:
        """Initialize DecodeError.

        Args:
            message: Error message.
            field: Optional dotted path of the offending field.
        """
        super().__init__(f"{field}: {message}" if field else message)
        self.field = field


class InvalidParameterError(HueError):
    """Exception raised for invalid modifier parameter values.

    Attributes:
        parameter_name: Optional name of the invalid parameter.
        value: Optional value that was invalid.
    """

    def __init__(
        self,
        message: str = "",
        parameter_name: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize InvalidParameterError.

        Args:
            message: Error message.
            parameter_name: Optional name of the invalid parameter.
            value: Optional value that was invalid.
        """
        super().__init__(message)
        self.parameter_name = parameter_name
        self.value = value


class HueConnectionError(HueError):
    """Exception raised for connection failures."""


class HueTimeoutError(HueError):
    """Exception raised when bridge requests timeout."""


class BridgeError(HueError):
    """Exception raised when the bridge answers a request with error records.

    Attributes:
        errors: Error records reported by the bridge.
    """

    def __init__(self, message: str = "", errors: list[ErrorResponse] | None = None) -> None:
        """Initialize BridgeError.

        Args:
            message: Error message.
            errors: Error records reported by the bridge.
        """
        super().__init__(message)
        self.errors = errors or []
