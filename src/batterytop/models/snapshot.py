"""Normalized battery readings."""

from __future__ import annotations

import math
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from batterytop.common.enums import BatteryState, BatteryTechnology
from batterytop.types.power import PowerSourceLike

T = TypeVar("T")

UNKNOWN_SERIAL = "Unknown"


def _or(value: T | None, default: T) -> T:
    return default if value is None else value


def _finite(value: float | None, default: float) -> float:
    if value is None or not math.isfinite(value):
        return default
    return value


class BatterySnapshot(BaseModel):
    """One normalized reading of a power source.

    A snapshot is replaced wholesale on every tick and never mutated.
    Attributes the provider could not report carry documented defaults
    (empty strings, zero, ``"Unknown"``) so that consumers never deal with
    missing values; only ``temperature`` stays optional. Non-finite ratios,
    energies, times and voltages fall back to the same defaults, while
    ``power`` keeps whatever magnitude the provider reported (NaN included)
    so the history records it as sampled.
    """

    model_config = ConfigDict(frozen=True)

    percentage: float = Field(0.0, ge=0.0, le=1.0, description="State of charge (0-1)")
    vendor: str = ""
    power: float = Field(0.0, description="Instantaneous power transfer magnitude (W)")
    energy: float = Field(0.0, ge=0.0, description="Energy remaining (Wh)")
    time_to_empty: float = Field(0.0, ge=0.0, description="Hours until empty")
    time_to_full: float = Field(0.0, ge=0.0, description="Hours until full")
    temperature: float | None = Field(None, description="Battery temperature (°C)")
    voltage: float = Field(0.0, description="Voltage (V)")
    cycle_count: int = Field(0, ge=0)
    model: str = ""
    serial_number: str = ""
    state: BatteryState = BatteryState.UNKNOWN
    state_of_health: float = Field(0.0, ge=0.0, le=1.0, description="Health ratio (0-1)")
    technology: BatteryTechnology = BatteryTechnology.UNKNOWN

    @classmethod
    def empty(cls) -> BatterySnapshot:
        """Snapshot shown before the first sample is taken."""
        return cls()

    @classmethod
    def from_source(cls, source: PowerSourceLike) -> BatterySnapshot:
        """Read every attribute of ``source`` and normalize it.

        Args:
            source: Power-source handle from a provider

        Returns:
            A fully populated snapshot
        """
        return cls(
            percentage=_clamp_ratio(_finite(source.state_of_charge(), 0.0)),
            vendor=_or(source.vendor(), ""),
            power=abs(_or(source.energy_rate(), 0.0)),
            energy=max(_finite(source.energy(), 0.0), 0.0),
            time_to_empty=max(_finite(source.time_to_empty(), 0.0), 0.0),
            time_to_full=max(_finite(source.time_to_full(), 0.0), 0.0),
            temperature=_temperature(source.temperature()),
            voltage=_finite(source.voltage(), 0.0),
            cycle_count=max(_or(source.cycle_count(), 0), 0),
            model=_or(source.model(), ""),
            serial_number=_or(source.serial_number(), UNKNOWN_SERIAL),
            state=_or(source.state(), BatteryState.UNKNOWN),
            state_of_health=_clamp_ratio(_finite(source.state_of_health(), 1.0)),
            technology=_or(source.technology(), BatteryTechnology.UNKNOWN),
        )

    @property
    def signed_power(self) -> float:
        """Power with its flow direction, see :func:`signed_power`."""
        return signed_power(self)


def _temperature(value: float | None) -> float | None:
    if value is None or not math.isfinite(value):
        return None
    return value


def _clamp_ratio(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def signed_power(snapshot: BatterySnapshot) -> float:
    """Return power draw signed by energy flow direction.

    Charging (energy flowing into the battery) is negative; every other
    state reports the magnitude unchanged.
    """
    if snapshot.state is BatteryState.CHARGING:
        return -snapshot.power
    return snapshot.power
