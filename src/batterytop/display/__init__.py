"""Terminal display for the battery dashboard."""

from batterytop.display.protocols import InputSource, Renderer

__all__ = [
    "InputSource",
    "Renderer",
]
