from pathlib import Path

import pytest

from batterytop.common.enums import BatteryState, BatteryTechnology
from batterytop.models.snapshot import BatterySnapshot
from batterytop.power import PowerSourceError, SysfsBattery, SysfsPowerProvider
from batterytop.types.power import PowerSourceLike, PowerSourceProvider

from conftest import SysfsTree

ENERGY_BATTERY = {
    "type": "Battery",
    "status": "Discharging",
    "manufacturer": "ACME",
    "model_name": "X1",
    "serial_number": "SN1",
    "technology": "Li-ion",
    "cycle_count": 42,
    "energy_now": 30_000_000,
    "energy_full": 60_000_000,
    "energy_full_design": 75_000_000,
    "power_now": 10_000_000,
    "voltage_now": 12_100_000,
    "temp": 315,
}

CHARGE_BATTERY = {
    "type": "Battery",
    "status": "Charging",
    "technology": "LiP",
    "charge_now": 2_000_000,
    "charge_full": 4_000_000,
    "charge_full_design": 5_000_000,
    "current_now": 1_000_000,
    "voltage_now": 12_000_000,
    "voltage_min_design": 11_000_000,
}


def test_lists_system_batteries_only(sysfs_root: Path, make_supply: SysfsTree) -> None:
    make_supply("AC", type="Mains", online=1)
    make_supply("BAT1", **CHARGE_BATTERY)
    make_supply("BAT0", **ENERGY_BATTERY)
    make_supply("hid-mouse-battery", type="Battery", scope="Device", capacity=80)

    sources = SysfsPowerProvider(sysfs_root).list_sources()

    assert [source.name for source in sources] == ["BAT0", "BAT1"]


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(PowerSourceError) as excinfo:
        SysfsPowerProvider(tmp_path / "nope").list_sources()
    assert isinstance(excinfo.value.original_error, OSError)


def test_empty_root_lists_nothing(sysfs_root: Path) -> None:
    assert SysfsPowerProvider(sysfs_root).list_sources() == []


def test_energy_based_battery(make_supply: SysfsTree) -> None:
    battery = SysfsBattery(make_supply("BAT0", **ENERGY_BATTERY))

    assert battery.state_of_charge() == pytest.approx(0.5)
    assert battery.state_of_health() == pytest.approx(0.8)
    assert battery.energy() == pytest.approx(30.0)
    assert battery.energy_rate() == pytest.approx(10.0)
    assert battery.time_to_empty() == pytest.approx(3.0)
    assert battery.time_to_full() is None
    assert battery.voltage() == pytest.approx(12.1)
    assert battery.temperature() == pytest.approx(31.5)
    assert battery.cycle_count() == 42
    assert battery.vendor() == "ACME"
    assert battery.model() == "X1"
    assert battery.serial_number() == "SN1"
    assert battery.state() is BatteryState.DISCHARGING
    assert battery.technology() is BatteryTechnology.LITHIUM_ION


def test_charge_based_battery_converts_to_energy(make_supply: SysfsTree) -> None:
    battery = SysfsBattery(make_supply("BAT1", **CHARGE_BATTERY))

    assert battery.energy() == pytest.approx(22.0)
    assert battery.energy_full() == pytest.approx(44.0)
    assert battery.state_of_charge() == pytest.approx(0.5)
    assert battery.state_of_health() == pytest.approx(0.8)
    # no power_now: current x voltage
    assert battery.energy_rate() == pytest.approx(12.0)
    assert battery.time_to_full() == pytest.approx(22.0 / 12.0)
    assert battery.time_to_empty() is None
    assert battery.technology() is BatteryTechnology.LITHIUM_POLYMER


def test_capacity_fallback_and_missing_attributes(make_supply: SysfsTree) -> None:
    battery = SysfsBattery(make_supply("BAT2", type="Battery", capacity=73, cycle_count="n/a"))

    assert battery.state_of_charge() == pytest.approx(0.73)
    assert battery.cycle_count() is None
    assert battery.energy_rate() is None
    assert battery.temperature() is None
    assert battery.state() is None
    assert battery.state_of_health() is None
    assert battery.serial_number() is None


def test_snapshot_from_sysfs_battery(make_supply: SysfsTree) -> None:
    battery = SysfsBattery(make_supply("BAT0", **ENERGY_BATTERY))
    snap = BatterySnapshot.from_source(battery)

    assert snap.percentage == pytest.approx(0.5)
    assert snap.power == pytest.approx(10.0)
    assert snap.signed_power == pytest.approx(10.0)
    assert snap.serial_number == "SN1"


def test_sysfs_types_satisfy_protocols(sysfs_root: Path) -> None:
    assert isinstance(SysfsPowerProvider(sysfs_root), PowerSourceProvider)
    assert isinstance(SysfsBattery(sysfs_root / "BAT0"), PowerSourceLike)
