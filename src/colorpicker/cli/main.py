"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from colorpicker import __version__

from .commands import config, convert, pick, random_color

logger = logging.getLogger(__name__)

LOG_DIR = Path.home() / ".colorpicker" / "logs"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where the TUI writes its log file."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "colorpicker-debug.log"
    return LOG_DIR / "colorpicker.log"


def resolve_log_level(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> int:
    """
    Pick the log level from the command-line flags.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, force DEBUG
        log_file: Custom log file path; when set, ``log_level`` applies
        log_level: Log level name for file logging
    """
    if log_file:
        return getattr(logging, log_level.upper())
    if debug or verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(level: int, log_path: Optional[Path]) -> None:
    """
    Configure the root logger.

    The TUI owns the terminal, so it logs to a rotating file. One-shot
    commands log to stderr instead (pass ``log_path=None``).
    """
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        # Keeps last 5 files, max 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=10 * 1024 * 1024, backupCount=5
        )
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, target={log_path or 'stderr'}")


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="colorpicker")
@click.option(
    "--color",
    "-c",
    type=str,
    default=None,
    help="Start with this color (#rrggbb) instead of the configured one",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v: INFO, -vv: DEBUG)")
@click.option("--debug", is_flag=True, help="Enable debug mode (DEBUG level, logs to ./colorpicker-debug.log)")
@click.option("--log-file", type=click.Path(path_type=Path), default=None, help="Custom log file path")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Log level for file logging (default: INFO)",
)
def cli(
    ctx: click.Context,
    color: Optional[str],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
):
    """
    Color Picker - pick colors and keep hex, RGB, HSL and HSV in sync.

    Run without a command to open the interactive picker (spectrum, sliders,
    text input, history palette and system eye-dropper).

    \b
    Examples:
      # Open the picker
      colorpicker

      # Open the picker on a given color
      colorpicker --color '#ef4444'

      # Convert between notations
      colorpicker convert 'hsl(217, 91%, 60%)'

      # Random color as JSON
      colorpicker random --json

      # Grab the color under the mouse cursor
      colorpicker pick --delay 3
    """
    level = resolve_log_level(verbose, debug, log_file, log_level)

    if ctx.invoked_subcommand is not None:
        if verbose or debug:
            setup_logging(level, None)
        return

    from colorpicker.conversions import is_valid_hex
    from colorpicker.exceptions import format_error_for_display
    from colorpicker.models import AppConfig

    if color is not None and not is_valid_hex(color):
        raise click.BadParameter(f"'{color}' is not a #rrggbb color", param_hint="--color")

    log_path = resolve_log_path(debug, log_file)
    setup_logging(level, log_path)
    logger.info("Starting Color Picker")

    try:
        config_obj = AppConfig.load_or_default()
        if color is not None:
            config_obj = config_obj.model_copy(update={"initial_color": color.lower()})

        # Lazy import keeps textual out of one-shot commands
        from colorpicker.core import ColorPickerController
        from colorpicker.tui import ColorPickerApp

        controller = ColorPickerController(config=config_obj)
        ColorPickerApp(controller).run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except Exception as e:
        logger.exception("Error running application")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "=" * 70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("=" * 70, err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        sys.exit(1)


cli.add_command(convert)
cli.add_command(random_color)
cli.add_command(pick)
cli.add_command(config)

if __name__ == "__main__":
    cli()
