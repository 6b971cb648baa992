"""Cooperative render/poll/sample loop for the battery dashboard."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Collection
from enum import Enum
from typing import Final

from batterytop.display.protocols import InputSource, Renderer
from batterytop.state import AppState
from batterytop.types.power import PowerSourceProvider

logger: Final = logging.getLogger(__name__)

DEFAULT_QUIT_KEYS: Final = ("q",)


class LoopState(Enum):
    """Lifecycle of the dashboard loop."""

    RUNNING = "running"
    CANCELLED = "cancelled"


def compute_timeout(interval: float, elapsed: float) -> float:
    """Seconds left until the next sample is due, never negative."""
    return max(0.0, interval - elapsed)


class Scheduler:
    """Drives rendering, key polling and sampling on a single thread.

    Each iteration draws the current state, waits for input until the next
    sample is due, then samples if the interval has passed. The wait is the
    only point where a quit key is noticed, so cancellation never interrupts
    a draw or a sample.

    After a sample the reference point is reset to "now" rather than
    advanced by one interval, so slow draws or samples make the cadence lag
    behind wall-clock multiples of the interval.
    """

    def __init__(
        self,
        state: AppState,
        provider: PowerSourceProvider,
        renderer: Renderer,
        input_source: InputSource,
        clock: Callable[[], float] = time.monotonic,
        quit_keys: Collection[str] = DEFAULT_QUIT_KEYS,
    ) -> None:
        self.state = state
        self.provider = provider
        self.renderer = renderer
        self.input_source = input_source
        self.clock = clock
        self.quit_keys = quit_keys
        self.loop_state = LoopState.RUNNING
        self.ticks = 0

    @property
    def interval(self) -> float:
        return self.state.settings.sample_interval_seconds

    def run(self) -> None:
        """Run until a quit key is pressed.

        Errors from the renderer, the input source or the provider are not
        caught; they end the loop and reach the caller.
        """
        interval = self.interval
        last_tick = self.clock()
        logger.info("Dashboard loop started (interval %.3fs)", interval)

        while self.loop_state is LoopState.RUNNING:
            self.renderer.draw(self.state)

            timeout = compute_timeout(interval, self.clock() - last_tick)
            key = self.input_source.poll(timeout)
            if key is not None and key in self.quit_keys:
                self.cancel()
                return

            if self.clock() - last_tick >= interval:
                self.state.on_tick(self.provider)
                self.ticks += 1
                last_tick = self.clock()

    def cancel(self) -> None:
        """Stop the loop; it will not sample or draw again."""
        if self.loop_state is LoopState.RUNNING:
            logger.info("Quit requested after %d sample(s)", self.ticks)
        self.loop_state = LoopState.CANCELLED
