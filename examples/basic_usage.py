"""Basic usage example for pyhuebridge library."""

import asyncio

from pyhuebridge import HueBridge


async def main() -> None:
    """Demonstrate reading the resources of a bridge."""
    async with HueBridge("192.168.1.2", "your-username") as bridge:
        config = await bridge.get_config()
        print(f"Connected to {config.name} ({config.model_id}, API {config.api_version})")
        print(f"  Timezone: {config.timezone or 'not set'}")

        lights = await bridge.get_lights()
        print(f"\nFound {len(lights)} light(s)")
        for light in lights:
            print(f"\nLight {light.id}: {light.name}")
            print(f"  Type: {light.type}")
            print(f"  Model: {light.model_id}")
            print(f"  Reachable: {light.state.reachable}")
            print(f"  On: {light.state.on}")
            if light.state.brightness is not None:
                print(f"  Brightness: {light.state.brightness}")

        groups = await bridge.get_groups()
        print(f"\nFound {len(groups)} group(s)")
        for group in groups:
            room_class = group.class_.value if group.class_ else "-"
            print(f"  {group.id}: {group.name} [{group.type.value}, {room_class}] lights={group.lights}")

        scan = await bridge.get_new_lights()
        print(f"\nLast scan: {scan.last_scan.kind.value}")
        for found in scan.lights:
            print(f"  New light {found.id}: {found.name}")


if __name__ == "__main__":
    asyncio.run(main())
