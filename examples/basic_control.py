"""Basic light control example for pyhuebridge.

This example demonstrates:
- Registering a user (press the link button first)
- Switching a light on
- Relative brightness and color changes
- Handling error records reported by the bridge
"""

import asyncio
import logging

from pyhuebridge import (
    BridgeError,
    CoordinateModifierType,
    ErrorResponse,
    HueBridge,
    LightStateModifier,
    ModifierType,
    register_user,
)


# Configure logging to see what's happening
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


async def main() -> None:
    """Main example function."""
    host = "192.168.1.2"

    print("Press the link button on the bridge, registering in 10 seconds...")
    await asyncio.sleep(10)
    try:
        user = await register_user(host, "pyhuebridge#example")
    except BridgeError as err:
        print(f"  ✗ Registration failed: {err}")
        return
    print(f"  ✓ Registered as {user.name}")

    async with HueBridge(host, user.name) as bridge:
        lights = await bridge.get_lights()
        if not lights:
            print("No lights found.")
            return

        light = lights[0]
        print(f"\nControlling {light.name} (id {light.id})")

        # Switch on at full brightness
        modifier = LightStateModifier().set_on(True).set_brightness(ModifierType.OVERRIDE, 254)
        await bridge.set_light_state(light.id, modifier)

        await asyncio.sleep(2)

        # Dim by 100 steps and shift the color towards green
        modifier = (
            LightStateModifier()
            .set_brightness(ModifierType.DECREMENT, 100)
            .set_color_space_coordinates(CoordinateModifierType.DECREMENT_INCREMENT, (0.1, 0.1))
            .set_transition_time(20)  # 2 seconds
        )
        for outcome in await bridge.set_light_state(light.id, modifier):
            if isinstance(outcome, ErrorResponse):
                print(f"  ✗ {outcome.address}: {outcome.description}")
            else:
                print(f"  ✓ {dict(outcome.values)}")

        await asyncio.sleep(2)
        light = await bridge.get_light(light.id)
        print(f"\nBrightness is now {light.state.brightness}, xy={light.state.color_space_coordinates}")


if __name__ == "__main__":
    asyncio.run(main())
