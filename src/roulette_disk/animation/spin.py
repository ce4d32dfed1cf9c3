"""Spin animation: drives the disk angle one degree at a time with ease-out pauses."""

from enum import Enum
from typing import Awaitable, Callable, Optional
import asyncio
import logging

from roulette_disk.animation.easing import step_delay, step_total
from roulette_disk.core.events import Event, EventBus, EventType
from roulette_disk.core.state import AngleState
from roulette_disk.input.gesture import SpinRequest

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class SpinPolicy(str, Enum):
    """What happens when a spin is requested while another is running."""

    REPLACE = "replace"  # cancel the running spin, then start the new one
    QUEUE = "queue"      # run spins one after another in request order


class SpinAnimator:
    """Runs spin requests as background asyncio tasks.

    Only one spin ever writes to the angle at a time. Under REPLACE a new
    request cancels every pending spin and waits until they have all stopped
    before taking its first step; under QUEUE it waits for the previous
    request to finish.
    """

    def __init__(
        self,
        angle_state: AngleState,
        policy: SpinPolicy = SpinPolicy.REPLACE,
        event_bus: Optional[EventBus] = None,
        sleep: SleepFunc = asyncio.sleep,
    ):
        self._angle_state = angle_state
        self._policy = SpinPolicy(policy)
        self._event_bus = event_bus
        self._sleep = sleep
        self._tasks: list[asyncio.Task[None]] = []
        self._spin_counter = 0

    @property
    def policy(self) -> SpinPolicy:
        return self._policy

    @property
    def is_spinning(self) -> bool:
        return any(not task.done() for task in self._tasks)

    def start(self, request: SpinRequest) -> asyncio.Task[None]:
        """Schedule a spin without blocking the caller.

        Must be called from inside a running event loop.

        Returns:
            The task running this spin
        """
        pending = [task for task in self._tasks if not task.done()]

        if self._policy is SpinPolicy.REPLACE:
            for task in pending:
                task.cancel()
            wait_for = pending
        else:
            wait_for = pending[-1:]

        self._spin_counter += 1
        spin_id = self._spin_counter
        task = asyncio.get_running_loop().create_task(
            self._run(spin_id, request, wait_for),
            name=f"spin-{spin_id}",
        )
        task.add_done_callback(self._on_task_done)
        self._tasks.append(task)

        logger.debug(
            f"Spin {spin_id} scheduled: {request.direction.value}, "
            f"{request.step_count:.1f} steps, waiting on {len(wait_for)}"
        )
        return task

    def cancel(self) -> int:
        """Cancel every pending spin.

        Returns:
            Number of tasks that were asked to stop
        """
        pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.cancel()
        return len(pending)

    async def wait(self) -> None:
        """Wait until no spin is running (cancelled spins included)."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def _run(
        self,
        spin_id: int,
        request: SpinRequest,
        wait_for: list[asyncio.Task[None]],
    ) -> None:
        """Step the angle once per iteration, pausing between steps."""
        if wait_for:
            await asyncio.wait(wait_for)

        total = step_total(request.step_count)
        done = 0
        self._emit(EventType.SPIN_STARTED, spin_id, request, total, done)
        logger.info(f"Spin {spin_id} started: {request.direction.value} x{total}")

        try:
            for i in range(total):
                self._angle_state.step(request.direction)
                done += 1
                await self._sleep(step_delay(i, request.step_count) / 1000)
        except asyncio.CancelledError:
            logger.info(f"Spin {spin_id} cancelled after {done}/{total} steps")
            self._emit(EventType.SPIN_CANCELLED, spin_id, request, total, done)
            raise

        logger.info(f"Spin {spin_id} finished at {self._angle_state.angle}")
        self._emit(EventType.SPIN_FINISHED, spin_id, request, total, done)

    def _emit(
        self,
        event_type: EventType,
        spin_id: int,
        request: SpinRequest,
        total: int,
        done: int,
    ) -> None:
        if self._event_bus is None:
            return
        self._event_bus.emit(Event(
            event_type,
            data={
                "spin_id": spin_id,
                "direction": request.direction.value,
                "steps": total,
                "steps_done": done,
                "angle": self._angle_state.angle,
            },
            source="spin_animator",
        ))

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        if task in self._tasks:
            self._tasks.remove(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Spin task {task.get_name()} failed: {task.exception()}")
