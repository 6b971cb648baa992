"""Battery dashboard CLI application.

This module provides the command-line interface for batterytop: it builds
the settings from flags and an optional YAML file, checks that a battery is
present, then hands the terminal to the curses dashboard loop.
"""

from __future__ import annotations

import curses
import locale
import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer

from batterytop.display.terminal import CursesInput, CursesRenderer, setup_screen
from batterytop.power import NoPowerSourceError, PowerSourceError, SysfsPowerProvider
from batterytop.scheduler import Scheduler
from batterytop.settings import DashboardSettings
from batterytop.state import AppState
from batterytop.types.power import PowerSourceProvider

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Live battery telemetry in the terminal", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "batterytop.cli"

LOG_FORMAT: Final = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Options for the main command
TICK_RATE_OPTION = typer.Option(
    None, "--tick-rate", "-t", help="Sampling interval in milliseconds [default: 1500]"
)
BUF_CAPACITY_OPTION = typer.Option(
    None, "--buf-capacity", "-b", help="Number of samples kept for the chart [default: 100]"
)
GRAPH_OPTION = typer.Option(False, "--graph", "-g", help="Draw the power chart")
CLEARANCE_OPTION = typer.Option(
    None, "--clearance", help="Vertical margin around chart extrema in W [default: 1.0]"
)
CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
LOG_FILE_OPTION = typer.Option(
    None, "--log-file", dir_okay=False, help="Write logs here while the dashboard runs"
)


def configure_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Configure root logging for a curses session.

    Without a log file only warnings reach stderr, since anything printed
    while curses owns the screen garbles the display.
    """
    if log_file is None:
        level = logging.DEBUG if debug else logging.WARNING
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        level = logging.DEBUG if debug else logging.INFO
        logging.basicConfig(level=level, format=LOG_FORMAT, filename=str(log_file))


def create_provider() -> PowerSourceProvider:
    """Return the power-source backend for this host."""
    return SysfsPowerProvider()


def check_power_source(provider: PowerSourceProvider) -> None:
    """Fail fast when the provider has nothing to report.

    Raises:
        PowerSourceError: If enumeration fails
        NoPowerSourceError: If no power source is present
    """
    if not provider.list_sources():
        raise NoPowerSourceError()


def _dashboard(stdscr: Any, settings: DashboardSettings, provider: PowerSourceProvider) -> int:
    setup_screen(stdscr)
    scheduler = Scheduler(
        AppState(settings),
        provider,
        CursesRenderer(stdscr),
        CursesInput(stdscr),
    )
    scheduler.run()
    return scheduler.ticks


def _fail(message: str) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


@app.command()
def run(
    tick_rate: int | None = TICK_RATE_OPTION,
    buf_capacity: int | None = BUF_CAPACITY_OPTION,
    graph: bool = GRAPH_OPTION,
    clearance: float | None = CLEARANCE_OPTION,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
    log_file: Path | None = LOG_FILE_OPTION,
) -> None:
    """Show the battery dashboard until 'q' is pressed."""
    configure_logging(debug, log_file)

    overrides: dict[str, Any] = {
        "tick_rate_ms": tick_rate,
        "buf_capacity": buf_capacity,
        "graph": graph or None,
        "graph_clearance": clearance,
    }
    try:
        settings = DashboardSettings.load(config, overrides)
    except (FileNotFoundError, RuntimeError) as exc:
        raise _fail(str(exc)) from exc

    provider = create_provider()
    try:
        check_power_source(provider)
    except PowerSourceError as exc:
        raise _fail(f"Battery unavailable: {exc.message}") from exc

    logger.debug("Starting dashboard with %s", settings)
    locale.setlocale(locale.LC_ALL, "")
    try:
        ticks = curses.wrapper(_dashboard, settings, provider)
    except PowerSourceError as exc:
        raise _fail(f"Battery unavailable: {exc.message}") from exc
    logger.info("Dashboard closed after %d sample(s)", ticks)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        DashboardSettings.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("show")
def show_config(config: Path | None = CONFIG_OPTION):
    """Print the effective settings as YAML."""
    import yaml

    try:
        settings = DashboardSettings.load(config)
    except (FileNotFoundError, RuntimeError) as exc:
        raise _fail(str(exc)) from exc
    typer.echo(yaml.safe_dump(settings.model_dump(), sort_keys=False).rstrip())


# ───────────────────────── module entrypoint ────────────────────────────────
def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
