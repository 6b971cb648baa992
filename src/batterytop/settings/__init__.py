"""Dashboard settings management.

This package provides:
- DashboardSettings: run parameters loaded from YAML and CLI flags
"""

from batterytop.settings.user import (
    DEFAULT_BUF_CAPACITY,
    DEFAULT_GRAPH_CLEARANCE,
    DEFAULT_TICK_RATE_MS,
    DashboardSettings,
)

__all__ = [
    "DEFAULT_BUF_CAPACITY",
    "DEFAULT_GRAPH_CLEARANCE",
    "DEFAULT_TICK_RATE_MS",
    "DashboardSettings",
]
