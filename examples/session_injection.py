"""Example showing session injection for Home Assistant integration."""

import asyncio

from aiohttp import ClientSession

from pyhuebridge import HueBridge


async def main() -> None:
    """Demonstrate session injection pattern for HA integration."""
    # This pattern is useful for Home Assistant integrations where
    # the session is managed by the application

    async with ClientSession() as session:
        print("Using application-managed aiohttp session")

        # Bridge will use the provided session instead of creating its own
        bridge = HueBridge("192.168.1.2", "your-username", session=session)

        async with bridge:
            sensors = await bridge.get_sensors()
            print(f"Found {len(sensors)} sensor(s) using injected session")

            for sensor in sensors:
                print(f"  - {sensor.name} ({sensor.type_name}), last updated {sensor.state.last_updated}")

        # Session remains open after the bridge exits
        print("\nBridge closed, but session still available for other requests")


if __name__ == "__main__":
    asyncio.run(main())
