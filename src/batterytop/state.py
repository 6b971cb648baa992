"""Application state driven by the scheduler."""

from __future__ import annotations

import logging
from typing import Final

from batterytop.models.history import PowerHistory
from batterytop.models.snapshot import BatterySnapshot
from batterytop.power.errors import NoPowerSourceError, PowerSourceError
from batterytop.settings.user import DashboardSettings
from batterytop.types.power import PowerSourceProvider

logger: Final = logging.getLogger(__name__)


class AppState:
    """Everything the dashboard shows.

    Owns the settings, the latest BatterySnapshot (replaced every tick) and
    the PowerHistory (mutated in place, never replaced). Only ``on_tick``
    changes the state; renderers read it.
    """

    def __init__(self, settings: DashboardSettings) -> None:
        self.settings = settings
        self.snapshot = BatterySnapshot.empty()
        self.history = PowerHistory(settings.buf_capacity)

    @property
    def chart_enabled(self) -> bool:
        return self.settings.graph

    def on_tick(self, provider: PowerSourceProvider) -> BatterySnapshot:
        """Sample the first power source and record its signed power.

        Args:
            provider: Source of power-source handles

        Returns:
            The new snapshot

        Raises:
            PowerSourceError: If the provider cannot enumerate sources
            NoPowerSourceError: If it enumerates none; the state is left untouched
        """
        try:
            sources = provider.list_sources()
        except PowerSourceError:
            raise
        except OSError as exc:
            raise PowerSourceError(f"Unable to enumerate power sources: {exc}", exc) from exc

        if not sources:
            raise NoPowerSourceError()

        snapshot = BatterySnapshot.from_source(sources[0])
        self.snapshot = snapshot
        self.history.push(snapshot.signed_power)

        logger.debug(
            "Sampled %s: %.2f%% %s %.3f W",
            snapshot.model or "battery",
            snapshot.percentage * 100.0,
            snapshot.state,
            snapshot.signed_power,
        )
        return snapshot

    def power_grid(self) -> list[tuple[float, float]]:
        """Chart points for the power history, newest first."""
        return self.history.project_to_grid()
