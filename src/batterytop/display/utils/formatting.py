"""Display-specific formatting utilities."""

from __future__ import annotations

import math
from collections.abc import Iterable

from batterytop.models.history import PowerHistory
from batterytop.models.snapshot import BatterySnapshot


def format_hours(hours: float) -> str:
    """Format a duration in hours as ``"1.50h(90.00m)"``."""
    return f"{hours:.2f}h({hours * 60.0:.2f}m)"


def format_temperature(temp: float | None) -> str:
    """Format temperature in Celsius, or ``"Unknown"`` when unavailable."""
    if temp is None:
        return "Unknown"
    return f"{temp:.1f} °C"


def format_percentage(value: float) -> str:
    """Format a 0-1 ratio as a percentage with two decimals."""
    return f"{value * 100.0:.2f}%"


def status_lines(snapshot: BatterySnapshot) -> list[str]:
    """Lines shown in the battery info panel."""
    return [
        f"Model - {snapshot.model}",
        f"Serial - {snapshot.serial_number}",
        f"Technology - {snapshot.technology}",
        f"State - {snapshot.state}",
        f"Health - {format_percentage(snapshot.state_of_health)}",
        f"Cycles - {snapshot.cycle_count}",
        "",
        f"Voltage - {snapshot.voltage:.3f} Volts",
        f"Power - {snapshot.power:.2f} W",
        f"Energy - {snapshot.energy:.2f} Wh",
        f"Time to empty - {format_hours(snapshot.time_to_empty)}",
        f"Time to full - {format_hours(snapshot.time_to_full)}",
        f"Temperature - {format_temperature(snapshot.temperature)}",
    ]


def percentage_bar(ratio: float, width: int, fill: str = "█", empty: str = "░") -> str:
    """Render a 0-1 ratio as a fixed-width text gauge."""
    if width <= 0:
        return ""
    ratio = min(max(ratio, 0.0), 1.0)
    filled = int(round(ratio * width))
    return fill * filled + empty * (width - filled)


def chart_bounds(history: PowerHistory, clearance: float) -> tuple[float, float, float]:
    """Vertical chart range as ``(lower, upper, median)``.

    The top sits ``clearance`` above the largest sample. The bottom is pinned
    to zero while every sample is positive, otherwise it sits ``clearance``
    below the smallest one.
    """
    upper = history.max_value + clearance
    if history.min_value > 0.0:
        lower = 0.0
    else:
        lower = history.min_value - clearance
    median = (upper + lower) / 2.0
    return lower, upper, median


def chart_labels(history: PowerHistory) -> tuple[str, str, str]:
    """X-axis labels: oldest sample, average and current sample."""
    return (
        f"{history.front:.2f}",
        f"AVG:{history.average:.2f}",
        f"CUR:{history.back:.2f}",
    )


def plot_cells(
    points: Iterable[tuple[float, float]],
    x_max: float,
    bounds: tuple[float, float],
    width: int,
    height: int,
) -> list[tuple[int, int]]:
    """Map chart points onto ``(row, col)`` character cells.

    Args:
        points: ``(x, y)`` pairs with x in ``[0, x_max]``
        x_max: Right edge of the x axis
        bounds: ``(lower, upper)`` of the y axis
        width: Plot area width in cells
        height: Plot area height in cells

    Returns:
        Cells inside the plot area; row 0 is the top. Nothing is plotted
        while either bound is non-finite.
    """
    if width <= 0 or height <= 0 or not all(map(math.isfinite, bounds)):
        return []
    lower, upper = bounds
    y_span = upper - lower
    if y_span <= 0.0:
        y_span = 1.0
    x_span = x_max if x_max > 0 else 1.0

    cells: list[tuple[int, int]] = []
    for x, y in points:
        if not math.isfinite(y):
            continue
        col = int(round(x / x_span * (width - 1)))
        row = height - 1 - int(round((y - lower) / y_span * (height - 1)))
        if 0 <= row < height and 0 <= col < width:
            cells.append((row, col))
    return cells
