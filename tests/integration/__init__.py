"""Integration tests for pyhuebridge library.

These tests talk to a real Hue bridge on the local network. They are marked
with @pytest.mark.integration and deselected by default.

To run integration tests:
    pytest tests/integration -v -m integration

Environment variables required in .env:
    HUE_BRIDGE_HOST: Host name or IP address of the bridge
    HUE_USERNAME: Registered username (see pyhuebridge.register_user)
"""
