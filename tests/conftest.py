from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

from batterytop.common.enums import BatteryState, BatteryTechnology
from batterytop.power.errors import PowerSourceError
from batterytop.settings import DashboardSettings


@dataclass
class FakeBattery:
    """PowerSourceLike with fixed attribute values."""

    soc: float | None = 0.5
    vendor_name: str | None = "ACME"
    rate: float | None = 5.0
    energy_wh: float | None = 30.0
    tte: float | None = 6.0
    ttf: float | None = None
    temp: float | None = 31.5
    volts: float | None = 12.1
    cycles: int | None = 42
    model_name: str | None = "AC-1"
    serial: str | None = "SN123"
    battery_state: BatteryState | None = BatteryState.DISCHARGING
    health: float | None = 0.9
    tech: BatteryTechnology | None = BatteryTechnology.LITHIUM_ION

    def state_of_charge(self) -> float | None:
        return self.soc

    def vendor(self) -> str | None:
        return self.vendor_name

    def energy_rate(self) -> float | None:
        return self.rate

    def energy(self) -> float | None:
        return self.energy_wh

    def time_to_empty(self) -> float | None:
        return self.tte

    def time_to_full(self) -> float | None:
        return self.ttf

    def temperature(self) -> float | None:
        return self.temp

    def voltage(self) -> float | None:
        return self.volts

    def cycle_count(self) -> int | None:
        return self.cycles

    def model(self) -> str | None:
        return self.model_name

    def serial_number(self) -> str | None:
        return self.serial

    def state(self) -> BatteryState | None:
        return self.battery_state

    def state_of_health(self) -> float | None:
        return self.health

    def technology(self) -> BatteryTechnology | None:
        return self.tech


class FakeProvider:
    """PowerSourceProvider returning a fixed list, or failing."""

    def __init__(self, sources: list[FakeBattery] | None = None, error: Exception | None = None):
        self.sources = sources if sources is not None else [FakeBattery()]
        self.error = error
        self.calls = 0

    def list_sources(self) -> list[FakeBattery]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.sources


class SequenceProvider:
    """Provider whose single battery reports the next power value on each call."""

    def __init__(self, powers: list[float], state: BatteryState = BatteryState.DISCHARGING):
        self._powers = list(powers)
        self._state = state
        self.calls = 0

    def list_sources(self) -> list[FakeBattery]:
        self.calls += 1
        return [FakeBattery(rate=self._powers.pop(0), battery_state=self._state)]


class ManualClock:
    """Monotonic clock advanced explicitly by tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def settings() -> DashboardSettings:
    return DashboardSettings(tick_rate_ms=1000, buf_capacity=5, graph=True, graph_clearance=1.0)


@pytest.fixture
def fake_battery() -> FakeBattery:
    return FakeBattery()


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def empty_provider() -> FakeProvider:
    return FakeProvider(sources=[])


@pytest.fixture
def failing_provider() -> FakeProvider:
    return FakeProvider(error=PowerSourceError("backend unavailable"))


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


SysfsTree = Callable[..., Path]


@pytest.fixture
def sysfs_root(tmp_path: Path) -> Path:
    root = tmp_path / "power_supply"
    root.mkdir()
    return root


@pytest.fixture
def make_supply(sysfs_root: Path) -> SysfsTree:
    """Create ``<root>/<name>/<attr>`` files from keyword arguments."""

    def _make(name: str, **attrs: object) -> Path:
        supply = sysfs_root / name
        supply.mkdir()
        for attr, value in attrs.items():
            (supply / attr).write_text(f"{value}\n", encoding="utf-8")
        return supply

    return _make
