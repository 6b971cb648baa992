# src/batterytop/display/protocols.py
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from batterytop.state import AppState


@runtime_checkable
class Renderer(Protocol):
    """Protocol defining the interface for dashboard renderers.

    A renderer receives the application state once per loop iteration and
    must treat it as read-only.
    """

    def draw(self, state: AppState) -> None:
        """Draw one frame.

        Args:
            state: Current application state
        """
        ...


@runtime_checkable
class InputSource(Protocol):
    """Protocol defining the interface for keyboard input.

    ``poll`` is the only place the dashboard loop blocks.
    """

    def poll(self, timeout: float) -> str | None:
        """Wait up to ``timeout`` seconds for a key press.

        Args:
            timeout: Maximum wait in seconds (0 means do not block)

        Returns:
            The pressed key as a string, or None if the wait timed out
        """
        ...


class MockRenderer:
    """Mock implementation of Renderer for testing."""

    def __init__(self) -> None:
        self.draw_calls: list[dict[str, object]] = []

    def draw(self, state: AppState) -> None:
        """Record what the frame would have shown."""
        self.draw_calls.append(
            {
                "snapshot": state.snapshot,
                "history": state.history.values(),
            }
        )

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.draw_calls = []


class ErrorSimulatingRenderer(MockRenderer):
    """Renderer mock that fails after a number of successful frames."""

    def __init__(self, fail_after: int = 0) -> None:
        super().__init__()
        self.fail_after = fail_after

    def draw(self, state: AppState) -> None:
        """Either record the frame or raise, based on configuration."""
        if len(self.draw_calls) >= self.fail_after:
            raise RuntimeError("Simulated terminal failure")
        super().draw(state)


class ScriptedInput:
    """InputSource that replays a fixed script of waits and key presses.

    Each script entry is ``(after, key)``: the key arrives ``after`` seconds
    into the wait, or the wait times out when ``key`` is None or ``after``
    exceeds the timeout. Time is reported through ``advance`` so tests can
    drive a manual clock. Once the script runs out every poll returns
    ``exhausted_key`` (``"q"`` by default) so loops always terminate.
    """

    def __init__(
        self,
        script: Iterable[tuple[float, str | None]],
        advance: Callable[[float], None] | None = None,
        exhausted_key: str | None = "q",
    ) -> None:
        self._script = list(script)
        self._advance = advance
        self.exhausted_key = exhausted_key
        self.poll_calls: list[float] = []

    def poll(self, timeout: float) -> str | None:
        """Replay the next scripted event."""
        self.poll_calls.append(timeout)
        if not self._script:
            return self.exhausted_key

        after, key = self._script.pop(0)
        if key is None or after > timeout:
            self._tick(timeout)
            return None
        self._tick(after)
        return key

    def _tick(self, seconds: float) -> None:
        if self._advance is not None:
            self._advance(seconds)


def create_mock_renderer() -> MockRenderer:
    """Create and return a mock renderer for testing."""
    return MockRenderer()


def create_error_simulating_renderer(fail_after: int = 0) -> ErrorSimulatingRenderer:
    """Create a renderer that fails after ``fail_after`` frames."""
    return ErrorSimulatingRenderer(fail_after)
