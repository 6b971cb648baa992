from __future__ import annotations

from enum import Enum


class BatteryState(Enum):
    """Charge state reported by a power source.

    Values mirror the strings the kernel writes to
    ``/sys/class/power_supply/*/status``.
    """

    UNKNOWN = "Unknown"
    CHARGING = "Charging"
    DISCHARGING = "Discharging"
    EMPTY = "Empty"
    FULL = "Full"

    @classmethod
    def from_sysfs(cls, raw: str | None) -> BatteryState:
        """Parse a sysfs ``status`` value, falling back to UNKNOWN."""
        if not raw:
            return cls.UNKNOWN
        text = raw.strip().lower()
        # "Not charging" is what most firmwares report when held at a threshold
        if text == "not charging":
            return cls.FULL
        for member in cls:
            if member.value.lower() == text:
                return member
        return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value


class BatteryTechnology(Enum):
    """Battery chemistries known to the kernel power-supply class."""

    UNKNOWN = "Unknown"
    LITHIUM_ION = "Lithium-ion"
    LEAD_ACID = "Lead-acid"
    LITHIUM_POLYMER = "Lithium-polymer"
    NICKEL_METAL_HYDRIDE = "Nickel-metal-hydride"
    NICKEL_CADMIUM = "Nickel-cadmium"
    NICKEL_ZINC = "Nickel-zinc"
    LITHIUM_IRON_PHOSPHATE = "Lithium-iron-phosphate"
    RECHARGEABLE_ALKALINE_MANGANESE = "Rechargeable-alkaline-manganese"

    @classmethod
    def from_sysfs(cls, raw: str | None) -> BatteryTechnology:
        """Parse a sysfs ``technology`` value.

        The kernel uses short codes (``Li-ion``, ``NiMH``, ``LiFe``...);
        anything unrecognised becomes UNKNOWN.
        """
        if not raw:
            return cls.UNKNOWN
        return _SYSFS_TECHNOLOGY.get(raw.strip().lower(), cls.UNKNOWN)

    def __str__(self) -> str:
        return self.value


_SYSFS_TECHNOLOGY: dict[str, BatteryTechnology] = {
    "li-ion": BatteryTechnology.LITHIUM_ION,
    "lion": BatteryTechnology.LITHIUM_ION,
    "pb": BatteryTechnology.LEAD_ACID,
    "pbac": BatteryTechnology.LEAD_ACID,
    "lead-acid": BatteryTechnology.LEAD_ACID,
    "li-poly": BatteryTechnology.LITHIUM_POLYMER,
    "lip": BatteryTechnology.LITHIUM_POLYMER,
    "lipo": BatteryTechnology.LITHIUM_POLYMER,
    "nimh": BatteryTechnology.NICKEL_METAL_HYDRIDE,
    "nicd": BatteryTechnology.NICKEL_CADMIUM,
    "nizn": BatteryTechnology.NICKEL_ZINC,
    "life": BatteryTechnology.LITHIUM_IRON_PHOSPHATE,
    "lifepo4": BatteryTechnology.LITHIUM_IRON_PHOSPHATE,
    "ram": BatteryTechnology.RECHARGEABLE_ALKALINE_MANGANESE,
}
