"""
Main window using pygame.

Owns the fixed-rate redraw loop: every tick it drains pygame input, turns it
into bus events, and repaints the board from the disk's latest frame. Spin
tasks run on the same asyncio loop, so the loop never blocks between ticks.
"""

import asyncio
import logging

import pygame

from roulette_disk.config.settings import Settings
from roulette_disk.core.events import (
    Event,
    EventBus,
    EventType,
    key_press_event,
    pointer_press_event,
    pointer_release_event,
    tick_event,
)
from roulette_disk.disk import RouletteDisk
from roulette_disk.graphics.renderer import DiskRenderer
from roulette_disk.input.keys import Key

logger = logging.getLogger(__name__)

# Physical mouse buttons; 4 and up are wheel notches
POINTER_BUTTONS = (1, 2, 3)

KEY_MAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


class SimulatorWindow:
    """
    Desktop window showing the roulette disk.

    Controls:
        MOUSE DRAG: Spin the disk (start the drag on the disk)
        LEFT ARROW: Nudge counterclockwise
        RIGHT ARROW: Nudge clockwise
        D: Toggle debug overlay
        ESC / Q: Exit
    """

    def __init__(
        self,
        disk: RouletteDisk,
        artwork: pygame.Surface,
        settings: Settings,
        event_bus: EventBus | None = None,
    ) -> None:
        self.disk = disk
        self.settings = settings
        self.event_bus = event_bus or disk.event_bus
        self._artwork = artwork

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._renderer: DiskRenderer | None = None
        self._debug_font: pygame.font.Font | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = settings.debug

        logger.info("SimulatorWindow created")

    @property
    def is_running(self) -> bool:
        return self._running

    def _init_pygame(self) -> None:
        """Initialize pygame and create the window."""
        pygame.init()
        pygame.display.set_caption(self.settings.display.title)

        size = self.settings.board.size
        self._screen = pygame.display.set_mode((size, size), pygame.DOUBLEBUF)
        self._clock = pygame.time.Clock()

        self._renderer = DiskRenderer(
            self._screen,
            self._artwork,
            self.disk.geometry,
            self.settings.display,
        )
        self._debug_font = pygame.font.Font(None, 18)

        logger.info(f"Pygame initialized: {size}x{size}, tick {self.settings.display.tick_ms} ms")

    def _handle_events(self) -> None:
        """Process pending pygame events."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Translate one pygame event into bus events."""
        if event.type == pygame.QUIT:
            self._running = False

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button in POINTER_BUTTONS:
                self.event_bus.emit(pointer_press_event(*event.pos))

        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button in POINTER_BUTTONS:
                self.event_bus.emit(pointer_release_event(*event.pos))

        elif event.type == pygame.KEYDOWN:
            self._handle_keydown(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        key = event.key

        if key == pygame.K_ESCAPE or key == pygame.K_q:
            self._running = False
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key in KEY_MAP:
            self.event_bus.emit(key_press_event(KEY_MAP[key]))

    def _render(self) -> None:
        """Render one frame."""
        if not self._screen or not self._renderer:
            return

        self._renderer.render(self.disk.frame())
        if self._show_debug:
            self._render_debug()

        pygame.display.flip()

    def _render_debug(self) -> None:
        if not self._debug_font:
            return

        frame = self.disk.frame()
        fps = self._clock.get_fps() if self._clock else 0.0
        lines = [
            f"FPS: {fps:.1f}",
            f"Frame: {self._frame_count}",
            f"Angle: {frame.angle:.0f}",
            f"Spinning: {self.disk.animator.is_spinning}",
        ]

        y = 8
        for line in lines:
            text_surface = self._debug_font.render(line, True, (120, 200, 120))
            self._screen.blit(text_surface, (8, y))
            y += 16

    async def run(self) -> None:
        """Main loop: one redraw every tick until the window closes."""
        self._init_pygame()
        self._running = True
        loop = asyncio.get_running_loop()
        interval = self.settings.display.tick_ms / 1000.0

        logger.info("Window loop started")

        try:
            while self._running:
                started = loop.time()

                self._handle_events()

                delta = self._clock.get_time() / 1000.0 if self._clock else interval
                self.event_bus.emit(tick_event(delta, self._frame_count))

                self._render()

                if self._clock:
                    self._clock.tick()
                self._frame_count += 1

                # Sleep out the rest of the tick so spin tasks keep running
                elapsed = loop.time() - started
                await asyncio.sleep(max(0.0, interval - elapsed))
        finally:
            self.event_bus.emit(Event(EventType.SHUTDOWN, source="window"))
            await self.disk.close()
            self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Window stopped")

    def stop(self) -> None:
        """Stop the window loop."""
        self._running = False
