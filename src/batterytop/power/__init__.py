"""Power-source providers and their error types."""

from batterytop.power.errors import NoPowerSourceError, PowerSourceError
from batterytop.power.sysfs import SysfsBattery, SysfsPowerProvider

__all__ = [
    "NoPowerSourceError",
    "PowerSourceError",
    "SysfsBattery",
    "SysfsPowerProvider",
]
