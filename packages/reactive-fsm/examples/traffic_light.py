"""Traffic light -- a reactive state machine driven by events.

Demonstrates:
- Static targets and handler functions in the state table
- _enter / _exit hooks
- Subscribing to state changes
- Debouncing a pedestrian button so repeated presses count once

Run: python -m examples.traffic_light
"""

import asyncio
import logging

from reactive_fsm import fsm, machine_of


def build_light():
    presses = []

    def press(who: str):
        presses.append(who)
        # Already red: record the request, no transition.
        return None

    light = fsm("green", {
        "green": {
            "timer": "yellow",
            "button": lambda who: "yellow",
            "_exit": lambda: print("  (green ends)"),
        },
        "yellow": {"timer": "red"},
        "red": {
            "timer": "green",
            "button": press,
            "_enter": lambda: print("  (walk signal on)"),
            "_exit": lambda: print("  (walk signal off)"),
        },
    })
    return light, presses


async def main() -> None:
    print("=== Traffic Light ===\n")

    light, presses = build_light()
    unsubscribe = light.subscribe(lambda state: print(f"light is {state}"))

    light.timer()
    light.timer()

    # Five quick presses while red: only the last one is delivered.
    for who in ["ann", "bob", "cy", "dee", "eve"]:
        light.button.debounce(50, who)
        await asyncio.sleep(0.01)
    await asyncio.sleep(0.1)
    print(f"presses delivered: {presses}")

    light.timer()
    unsubscribe()
    light.timer()
    print(f"\nDone. Light left in state {machine_of(light).state!r}.")
    machine_of(light).close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
