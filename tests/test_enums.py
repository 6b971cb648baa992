import pytest

from batterytop.common.enums import BatteryState, BatteryTechnology


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Charging", BatteryState.CHARGING),
        ("discharging\n", BatteryState.DISCHARGING),
        ("Full", BatteryState.FULL),
        ("Not charging", BatteryState.FULL),
        ("Empty", BatteryState.EMPTY),
        ("Unknown", BatteryState.UNKNOWN),
        ("bogus", BatteryState.UNKNOWN),
        ("", BatteryState.UNKNOWN),
        (None, BatteryState.UNKNOWN),
    ],
)
def test_state_from_sysfs(raw: str | None, expected: BatteryState) -> None:
    assert BatteryState.from_sysfs(raw) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Li-ion", BatteryTechnology.LITHIUM_ION),
        ("Li-poly", BatteryTechnology.LITHIUM_POLYMER),
        ("NiMH", BatteryTechnology.NICKEL_METAL_HYDRIDE),
        ("NiCd", BatteryTechnology.NICKEL_CADMIUM),
        ("LiFe", BatteryTechnology.LITHIUM_IRON_PHOSPHATE),
        ("Unknown", BatteryTechnology.UNKNOWN),
        (None, BatteryTechnology.UNKNOWN),
    ],
)
def test_technology_from_sysfs(raw: str | None, expected: BatteryTechnology) -> None:
    assert BatteryTechnology.from_sysfs(raw) is expected


def test_str_is_label() -> None:
    assert str(BatteryState.DISCHARGING) == "Discharging"
    assert str(BatteryTechnology.LITHIUM_ION) == "Lithium-ion"
