"""Linux power-supply class backend (``/sys/class/power_supply``)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from batterytop.common.enums import BatteryState, BatteryTechnology
from batterytop.power.errors import PowerSourceError

logger: Final = logging.getLogger(__name__)

DEFAULT_SYSFS_ROOT: Final = Path("/sys/class/power_supply")

# sysfs reports micro-units (µV, µA, µW, µWh, µAh)
_MICRO: Final = 1e-6


class SysfsBattery:
    """One battery exposed by the kernel power-supply class.

    Attribute files are read on every accessor call so that a handle always
    reflects the current kernel view. Missing or unparsable files yield None.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    @property
    def name(self) -> str:
        return self.path.name

    def __repr__(self) -> str:
        return f"SysfsBattery({str(self.path)!r})"

    # ── raw readers ──────────────────────────────────────────────────────────
    def read_attr(self, attr: str) -> str | None:
        try:
            value = (self.path / attr).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError):
            return None
        return value or None

    def _read_int(self, attr: str) -> int | None:
        raw = self.read_attr(attr)
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            logger.debug("Ignoring non-integer %s/%s: %r", self.name, attr, raw)
            return None

    def _read_micro(self, attr: str) -> float | None:
        value = self._read_int(attr)
        return None if value is None else value * _MICRO

    def _design_voltage(self) -> float | None:
        return self._read_micro("voltage_min_design") or self._read_micro("voltage_now")

    def _energy_attr(self, suffix: str) -> float | None:
        """Return ``energy_<suffix>`` in Wh, converting from charge if needed."""
        energy = self._read_micro(f"energy_{suffix}")
        if energy is not None:
            return energy
        charge = self._read_micro(f"charge_{suffix}")
        voltage = self._design_voltage()
        if charge is None or voltage is None:
            return None
        return charge * voltage

    def energy_full(self) -> float | None:
        return self._energy_attr("full")

    def energy_full_design(self) -> float | None:
        return self._energy_attr("full_design")

    # ── PowerSourceLike ──────────────────────────────────────────────────────
    def state_of_charge(self) -> float | None:
        energy = self.energy()
        full = self.energy_full()
        if energy is not None and full:
            return min(max(energy / full, 0.0), 1.0)
        capacity = self._read_int("capacity")
        if capacity is None:
            return None
        return min(max(capacity / 100.0, 0.0), 1.0)

    def vendor(self) -> str | None:
        return self.read_attr("manufacturer")

    def energy_rate(self) -> float | None:
        power = self._read_micro("power_now")
        if power is not None:
            return abs(power)
        current = self._read_micro("current_now")
        voltage = self._read_micro("voltage_now")
        if current is None or voltage is None:
            return None
        return abs(current * voltage)

    def energy(self) -> float | None:
        return self._energy_attr("now")

    def time_to_empty(self) -> float | None:
        if self.state() is not BatteryState.DISCHARGING:
            return None
        rate = self.energy_rate()
        energy = self.energy()
        if not rate or energy is None:
            return None
        return energy / rate

    def time_to_full(self) -> float | None:
        if self.state() is not BatteryState.CHARGING:
            return None
        rate = self.energy_rate()
        energy = self.energy()
        full = self.energy_full()
        if not rate or energy is None or full is None:
            return None
        return max(full - energy, 0.0) / rate

    def temperature(self) -> float | None:
        # tenths of a degree Celsius
        value = self._read_int("temp")
        return None if value is None else value / 10.0

    def voltage(self) -> float | None:
        return self._read_micro("voltage_now")

    def cycle_count(self) -> int | None:
        return self._read_int("cycle_count")

    def model(self) -> str | None:
        return self.read_attr("model_name")

    def serial_number(self) -> str | None:
        return self.read_attr("serial_number")

    def state(self) -> BatteryState | None:
        raw = self.read_attr("status")
        return None if raw is None else BatteryState.from_sysfs(raw)

    def state_of_health(self) -> float | None:
        full = self.energy_full()
        design = self.energy_full_design()
        if full is None or not design:
            return None
        return min(max(full / design, 0.0), 1.0)

    def technology(self) -> BatteryTechnology | None:
        raw = self.read_attr("technology")
        return None if raw is None else BatteryTechnology.from_sysfs(raw)


class SysfsPowerProvider:
    """Enumerate system batteries from the kernel power-supply class."""

    def __init__(self, root: Path = DEFAULT_SYSFS_ROOT) -> None:
        """Initialize with the power-supply class directory.

        Args:
            root: Directory holding one sub-directory per power supply
        """
        self.root = root

    def list_sources(self) -> list[SysfsBattery]:
        """Return system batteries sorted by name.

        Mains adapters, USB supplies and peripheral (``scope=Device``)
        batteries are skipped.

        Raises:
            PowerSourceError: If the power-supply class cannot be read
        """
        try:
            entries = sorted(self.root.iterdir())
        except OSError as exc:
            raise PowerSourceError(
                f"Unable to read power supplies from {self.root}: {exc}", exc
            ) from exc

        batteries: list[SysfsBattery] = []
        for entry in entries:
            battery = SysfsBattery(entry)
            if battery.read_attr("type") != "Battery":
                continue
            if battery.read_attr("scope") == "Device":
                continue
            batteries.append(battery)

        logger.debug("Found %d batter(y/ies) under %s", len(batteries), self.root)
        return batteries
