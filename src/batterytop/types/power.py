"""Type definitions for power-source providers."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from batterytop.common.enums import BatteryState, BatteryTechnology


@runtime_checkable
class PowerSourceLike(Protocol):
    """Protocol for a single power-source handle.

    Every accessor may return None when the backend cannot report the
    attribute; normalization into a snapshot supplies the defaults.
    Units: ratios in 0..1, watts, watt-hours, hours, volts, degrees Celsius.
    """

    def state_of_charge(self) -> float | None: ...
    def vendor(self) -> str | None: ...
    def energy_rate(self) -> float | None: ...
    def energy(self) -> float | None: ...
    def time_to_empty(self) -> float | None: ...
    def time_to_full(self) -> float | None: ...
    def temperature(self) -> float | None: ...
    def voltage(self) -> float | None: ...
    def cycle_count(self) -> int | None: ...
    def model(self) -> str | None: ...
    def serial_number(self) -> str | None: ...
    def state(self) -> BatteryState | None: ...
    def state_of_health(self) -> float | None: ...
    def technology(self) -> BatteryTechnology | None: ...


@runtime_checkable
class PowerSourceProvider(Protocol):
    """Protocol for objects that enumerate the host's power sources."""

    def list_sources(self) -> Sequence[PowerSourceLike]:
        """Return the available power sources.

        Raises:
            PowerSourceError: If the backend cannot be queried
        """
        ...
