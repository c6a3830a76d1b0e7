"""Pytest configuration and fixtures for integration tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from pyhuebridge import HueBridge


# Load .env file from project root
env_path = Path(__file__).parents[2] / ".env"
load_dotenv(env_path)


@pytest.fixture(scope="session")
def integration_config() -> dict[str, str]:
    """Load integration test configuration from environment.

    Returns:
        Dictionary with the bridge host and username.

    Skips the test when the bridge is not configured.
    """
    host = os.getenv("HUE_BRIDGE_HOST")
    username = os.getenv("HUE_USERNAME")

    if not host or not username:
        pytest.skip("Create a .env file with HUE_BRIDGE_HOST and HUE_USERNAME to run integration tests")

    return {"host": host, "username": username}


@pytest.fixture
async def bridge(integration_config: dict[str, str]) -> AsyncGenerator[HueBridge]:
    """Create a bridge client with its own session."""
    from pyhuebridge import HueBridge

    async with HueBridge(integration_config["host"], integration_config["username"]) as bridge:
        yield bridge
