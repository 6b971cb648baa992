"""Data models for batterytop.

This package provides the per-tick BatterySnapshot and the bounded
PowerHistory used to draw the rolling power chart.
"""

from batterytop.models.history import PowerHistory
from batterytop.models.snapshot import BatterySnapshot, signed_power

__all__ = [
    "BatterySnapshot",
    "PowerHistory",
    "signed_power",
]
