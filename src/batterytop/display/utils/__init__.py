"""Display utilities."""

from batterytop.display.utils.formatting import (
    chart_bounds,
    chart_labels,
    format_hours,
    format_temperature,
    percentage_bar,
    plot_cells,
    status_lines,
)

__all__ = [
    "chart_bounds",
    "chart_labels",
    "format_hours",
    "format_temperature",
    "percentage_bar",
    "plot_cells",
    "status_lines",
]
