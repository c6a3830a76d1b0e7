"""Tests for pyhuebridge exceptions."""

from __future__ import annotations

import pytest

from pyhuebridge.exceptions import (
    BridgeError,
    DecodeError,
    HueConnectionError,
    HueError,
    HueTimeoutError,
    InvalidParameterError,
)
from pyhuebridge.models import ErrorResponse


class TestHueError:
    """Test HueError base exception."""

    def test_base_exception_inherits_from_exception(self) -> None:
        """Test that HueError inherits from Exception."""
        assert issubclass(HueError, Exception)

    def test_base_exception_message(self) -> None:
        """Test that HueError can be created with a message."""
        assert str(HueError("Test error message")) == "Test error message"

    @pytest.mark.parametrize(
        "error_type",
        [BridgeError, DecodeError, HueConnectionError, HueTimeoutError, InvalidParameterError],
    )
    def test_subclasses(self, error_type: type[HueError]) -> None:
        """Test that every library error derives from HueError."""
        assert issubclass(error_type, HueError)


class TestDecodeError:
    """Test DecodeError exception."""

    def test_field_prefixes_message(self) -> None:
        """Test that the field path prefixes the message."""
        error = DecodeError("missing field", field="state.reachable")

        assert str(error) == "state.reachable: missing field"
        assert error.field == "state.reachable"

    def test_without_field(self) -> None:
        """Test DecodeError without a field."""
        error = DecodeError("Invalid JSON")

        assert str(error) == "Invalid JSON"
        assert error.field is None


class TestInvalidParameterError:
    """Test InvalidParameterError exception."""

    def test_error_with_parameter_details(self) -> None:
        """Test InvalidParameterError with parameter name and value."""
        error = InvalidParameterError("Invalid brightness", parameter_name="brightness", value=300)

        assert str(error) == "Invalid brightness"
        assert error.parameter_name == "brightness"
        assert error.value == 300


class TestBridgeError:
    """Test BridgeError exception."""

    def test_carries_error_records(self) -> None:
        """Test that the bridge's error records are kept."""
        record = ErrorResponse(type=3, address="/lights/9", description="resource, /lights/9, not available")
        error = BridgeError("Failed to get /lights/9", errors=[record])

        assert error.errors == [record]

    def test_default_errors(self) -> None:
        """Test that errors default to an empty list."""
        assert BridgeError("failed").errors == []
