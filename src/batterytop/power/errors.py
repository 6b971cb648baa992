"""Exception classes for power-source enumeration.

Failures to reach the host's power sources are fatal for the dashboard:
there is nothing meaningful to show without a battery.
"""

from __future__ import annotations

from typing import Optional


class PowerSourceError(Exception):
    """Error while enumerating or opening the host's power sources.

    Raised when the provider backend is unavailable (missing sysfs tree,
    permission problems). Includes the underlying exception when one
    triggered the failure.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.message: str = message
        self.original_error: Optional[Exception] = original_error


class NoPowerSourceError(PowerSourceError):
    """Raised when the provider enumerates zero power sources."""

    def __init__(self, message: str = "No power source found") -> None:
        super().__init__(message)
