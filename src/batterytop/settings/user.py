"""User-configurable dashboard settings.

Settings come from an optional YAML file and are overridden by command-line
flags. Once constructed they never change for the lifetime of the process.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, ClassVar

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Load environment variables from .env file(s)
load_dotenv()

DEFAULT_TICK_RATE_MS = 1500
DEFAULT_BUF_CAPACITY = 100
DEFAULT_GRAPH_CLEARANCE = 1.0


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class DashboardSettings(BaseModel):
    """Run parameters for the battery dashboard.

    Attributes:
        tick_rate_ms: Sampling interval in milliseconds
        buf_capacity: Number of power samples kept for the chart
        graph: Whether the power chart is drawn
        graph_clearance: Vertical margin (W) added around the plotted extrema
    """

    model_config = ConfigDict(frozen=True)

    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("batterytop.yaml"),
        Path("~/.config/batterytop/config.yaml").expanduser(),
        Path("/etc/batterytop/config.yaml"),
    ]

    tick_rate_ms: int = Field(
        DEFAULT_TICK_RATE_MS, gt=0, description="Sampling interval (milliseconds)"
    )
    buf_capacity: int = Field(
        DEFAULT_BUF_CAPACITY, ge=1, description="Number of power samples retained"
    )
    graph: bool = Field(False, description="Draw the rolling power chart")
    graph_clearance: float = Field(
        DEFAULT_GRAPH_CLEARANCE,
        ge=0.0,
        description="Vertical margin added around chart extrema (W)",
    )

    @property
    def sample_interval_seconds(self) -> float:
        """Sampling interval in seconds."""
        return self.tick_rate_ms / 1000.0

    @classmethod
    def find_config(cls) -> Path | None:
        """Locate a config file from BATTERYTOP_CONFIG or the default paths.

        Raises:
            FileNotFoundError: If BATTERYTOP_CONFIG points to a missing file
        """
        env_path = os.environ.get("BATTERYTOP_CONFIG")
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(f"Config file from BATTERYTOP_CONFIG not found: {path}")
            return path
        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        return None

    @classmethod
    def read_file(cls, path: Path) -> dict[str, Any]:
        """Read raw settings values from a YAML file.

        Raises:
            RuntimeError: If the file cannot be read or is not a mapping
        """
        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text(encoding="utf-8"))
            data = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise RuntimeError(f"Config file {path} must contain a mapping")
        return data

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> DashboardSettings:
        """Load settings from YAML, applying command-line overrides on top.

        A config file is optional: when ``path`` is None and no default
        location exists, defaults plus ``overrides`` are used.

        Args:
            path: Path to config file (optional, searches default locations if None)
            overrides: Values that take precedence over the file (None values ignored)

        Returns:
            Validated DashboardSettings object

        Raises:
            FileNotFoundError: If BATTERYTOP_CONFIG names a missing file
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            path = cls.find_config()

        data: dict[str, Any] = cls.read_file(path) if path is not None else {}
        data.update({k: v for k, v in (overrides or {}).items() if v is not None})

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
