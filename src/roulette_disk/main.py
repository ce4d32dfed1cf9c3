"""
Main entry point for the roulette disk.

Loads configuration, builds the disk and opens the window.
"""

import asyncio
import logging
import sys

from roulette_disk.config.settings import Settings, get_settings
from roulette_disk.core.events import EventBus


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_simulator(settings: Settings) -> None:
    """Run the disk in a pygame window."""
    from roulette_disk.disk import RouletteDisk
    from roulette_disk.graphics.wheel import load_disk_artwork
    from roulette_disk.simulator.window import SimulatorWindow
    from roulette_disk.wheel.geometry import DiskGeometry

    board = settings.board
    artwork = load_disk_artwork(board.disk_image, board.disk_diameter)
    geometry = DiskGeometry(
        board_size=board.size,
        disk_width=artwork.get_width(),
        disk_height=artwork.get_height(),
    )

    event_bus = EventBus()
    disk = RouletteDisk(
        event_bus,
        geometry=geometry,
        dead_zone_radius=board.dead_zone_radius,
        policy=settings.spin.policy,
    )

    window = SimulatorWindow(disk, artwork, settings, event_bus=event_bus)
    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("Roulette starting...")

    try:
        asyncio.run(run_simulator(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Roulette stopped")


if __name__ == "__main__":
    main()
