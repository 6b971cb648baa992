"""Type definitions for batterytop."""

from .power import PowerSourceLike, PowerSourceProvider

__all__ = [
    "PowerSourceLike",
    "PowerSourceProvider",
]
