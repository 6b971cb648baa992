"""Curses front-end: renders AppState and reads the quit key."""

from __future__ import annotations

import curses
import logging
from typing import Any, Final

from batterytop.display.utils.formatting import (
    chart_bounds,
    chart_labels,
    format_percentage,
    percentage_bar,
    plot_cells,
    status_lines,
)
from batterytop.state import AppState

logger: Final = logging.getLogger(__name__)

TITLE: Final = "Battery info. Press 'q' to quit"

# Panel heights including borders
INFO_HEIGHT: Final = 15
GAUGE_HEIGHT: Final = 3
Y_LABEL_WIDTH: Final = 9

# Colour pair ids
PAIR_TITLE: Final = 1
PAIR_CHART: Final = 2
PAIR_AXIS: Final = 3
PAIR_HEADER: Final = 4


def setup_screen(stdscr: Any) -> None:
    """Prepare a curses window for the dashboard."""
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor")
    stdscr.keypad(True)
    if curses.has_colors():
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(PAIR_TITLE, curses.COLOR_WHITE, -1)
        curses.init_pair(PAIR_CHART, curses.COLOR_GREEN, -1)
        curses.init_pair(PAIR_AXIS, curses.COLOR_BLACK, -1)
        curses.init_pair(PAIR_HEADER, curses.COLOR_CYAN, -1)


def _color(pair: int) -> int:
    return curses.color_pair(pair) if curses.has_colors() else 0


class CursesRenderer:
    """Draws the dashboard into a curses window."""

    def __init__(self, stdscr: Any) -> None:
        self.stdscr = stdscr

    # ── primitives ───────────────────────────────────────────────────────────
    def _put(self, row: int, col: int, text: str, attr: int = 0) -> None:
        """Write text clipped to the window."""
        height, width = self.stdscr.getmaxyx()
        if row < 0 or row >= height or col < 0 or col >= width:
            return
        text = text[: width - col]
        if not text:
            return
        try:
            self.stdscr.addstr(row, col, text, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen
            pass

    def _box(self, top: int, left: int, height: int, width: int, title: str = "") -> None:
        if height < 2 or width < 2:
            return
        inner = width - 2
        self._put(top, left, "┌" + "─" * inner + "┐")
        for row in range(top + 1, top + height - 1):
            self._put(row, left, "│")
            self._put(row, left + width - 1, "│")
        self._put(top + height - 1, left, "└" + "─" * inner + "┘")
        if title:
            header = _color(PAIR_HEADER) | curses.A_BOLD
            self._put(top, left + 2, title[: max(inner - 2, 0)], header)

    # ── frame ────────────────────────────────────────────────────────────────
    def draw(self, state: AppState) -> None:
        """Draw one frame of the dashboard."""
        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()

        self._box(0, 0, height, width)
        inner_width = width - 2
        row = 1

        title_col = 1 + max((inner_width - len(TITLE)) // 2, 0)
        self._put(row, title_col, TITLE, _color(PAIR_AXIS) | curses.A_BOLD)
        row += 1

        row = self._draw_info(state, row, inner_width)
        row = self._draw_gauge(state, row, inner_width)
        if state.chart_enabled:
            self._draw_chart(state, row, inner_width, height - 1 - row)

        self.stdscr.refresh()

    def _draw_info(self, state: AppState, top: int, width: int) -> int:
        snapshot = state.snapshot
        self._box(top, 1, INFO_HEIGHT, width, f"Battery - {snapshot.vendor}")
        for offset, line in enumerate(status_lines(snapshot)):
            self._put(top + 1 + offset, 3, line[: max(width - 4, 0)])
        return top + INFO_HEIGHT

    def _draw_gauge(self, state: AppState, top: int, width: int) -> int:
        ratio = state.snapshot.percentage
        self._box(top, 1, GAUGE_HEIGHT, width, "Percentage")
        label = f" {format_percentage(ratio)}"
        bar = percentage_bar(ratio, max(width - 4 - len(label), 0))
        self._put(top + 1, 3, bar, _color(PAIR_TITLE))
        self._put(top + 1, 3 + len(bar), label, curses.A_BOLD)
        return top + GAUGE_HEIGHT

    def _draw_chart(self, state: AppState, top: int, width: int, height: int) -> None:
        if height < 5 or width < Y_LABEL_WIDTH + 4:
            return
        self._box(top, 1, height, width, "Power")

        settings = state.settings
        history = state.history
        lower, upper, median = chart_bounds(history, settings.graph_clearance)

        plot_top = top + 1
        plot_left = 2 + Y_LABEL_WIDTH
        plot_width = width - Y_LABEL_WIDTH - 3
        plot_height = height - 3

        # Y axis labels: upper / median / lower
        axis = _color(PAIR_AXIS)
        self._put(plot_top, 2, f"{upper:>{Y_LABEL_WIDTH - 1}.2f}", axis)
        self._put(plot_top + plot_height // 2, 2, f"{median:>{Y_LABEL_WIDTH - 1}.2f}", axis)
        self._put(plot_top + plot_height - 1, 2, f"{lower:>{Y_LABEL_WIDTH - 1}.2f}", axis)

        # Zero baseline across the full x range
        baseline = [(float(x), 0.0) for x in range(settings.buf_capacity)]
        for row, col in plot_cells(
            baseline, settings.buf_capacity, (lower, upper), plot_width, plot_height
        ):
            self._put(plot_top + row, plot_left + col, "·", axis)

        for row, col in plot_cells(
            state.power_grid(), settings.buf_capacity, (lower, upper), plot_width, plot_height
        ):
            self._put(plot_top + row, plot_left + col, "•", _color(PAIR_CHART) | curses.A_BOLD)

        # X axis labels: oldest / average / current
        left, mid, right = chart_labels(history)
        label_row = plot_top + plot_height
        self._put(label_row, plot_left, left, curses.A_BOLD)
        self._put(label_row, plot_left + max((plot_width - len(mid)) // 2, 0), mid)
        self._put(label_row, plot_left + max(plot_width - len(right), 0), right, curses.A_BOLD)


class CursesInput:
    """Reads key presses from a curses window with a bounded wait."""

    def __init__(self, stdscr: Any) -> None:
        self.stdscr = stdscr

    def poll(self, timeout: float) -> str | None:
        """Wait up to ``timeout`` seconds for a key press."""
        self.stdscr.timeout(max(int(timeout * 1000), 0))
        ch = self.stdscr.getch()
        if ch == -1 or ch == curses.KEY_RESIZE:
            return None
        if 0 <= ch < 256:
            return chr(ch)
        return curses.keyname(ch).decode("ascii", errors="replace")
