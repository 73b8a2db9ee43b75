"""Fire one simulated death from the command line.

Usage:
    python -m death_shock
"""

import asyncio
import sys

from death_shock.adapters.console import ConsolePause, ConsolePopup, ManualTrigger
from death_shock.adapters.http import OpenShockClient
from death_shock.app import DeathShockMod
from death_shock.config import AppConfig


async def run_once() -> int:
    config = AppConfig.from_env()
    print(f"Config directory: {config.config_dir}", file=sys.stderr)

    popup = ConsolePopup()
    mod = DeathShockMod(
        config.config_dir,
        popup=popup,
        pause=ConsolePause(),
        dispatcher=OpenShockClient(),
    )
    trigger = ManualTrigger()
    mod.install(trigger)

    tasks = [t for t in trigger.fire() if t is not None]
    if not tasks:
        return 1
    await asyncio.gather(*tasks)
    return 0


def main() -> None:
    sys.exit(asyncio.run(run_once()))


if __name__ == "__main__":
    main()
