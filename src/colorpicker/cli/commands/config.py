"""
Config command group.

Commands:
    - config show                # Display configuration
    - config set KEY VALUE       # Update one setting and save
    - config reset               # Restore defaults
"""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from colorpicker.exceptions import ConfigurationError, wrap_pydantic_error
from colorpicker.models import AppConfig
from colorpicker.models.config import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)

path_option = click.option(
    "--path",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {DEFAULT_CONFIG_PATH})",
)


def _load(config_path: Path | None) -> AppConfig:
    try:
        return AppConfig.load_or_default(config_path)
    except ConfigurationError as e:
        raise click.ClickException(e.get_full_message()) from e


@click.group()
def config():
    """View and change colorpicker settings."""


@config.command()
@path_option
def show(config_path: Path | None):
    """Show the current configuration."""
    cfg = _load(config_path)
    click.echo(f"Config file: {config_path or DEFAULT_CONFIG_PATH}\n")
    for key, value in cfg.model_dump().items():
        if isinstance(value, list):
            value = ", ".join(value)
        click.echo(f"  {key:<22} {value}")


@config.command(name="set")
@click.argument("key")
@click.argument("value")
@path_option
def set_value(key: str, value: str, config_path: Path | None):
    """
    Set KEY to VALUE and save.

    \b
    List settings take comma-separated values:
      colorpicker config set history_seed '#ff0000,#00ff00'
    """
    cfg = _load(config_path)
    data = cfg.model_dump()
    if key not in data:
        raise click.BadParameter(
            f"Unknown setting '{key}'. Available: {', '.join(data)}", param_hint="KEY"
        )

    data[key] = [part.strip() for part in value.split(",") if part.strip()] if isinstance(data[key], list) else value

    try:
        updated = AppConfig.model_validate(data)
    except ValidationError as e:
        error = wrap_pydantic_error(e, str(config_path or DEFAULT_CONFIG_PATH))
        raise click.ClickException(error.get_full_message()) from e

    updated.save(config_path)
    logger.info(f"Config updated: {key}={value}")
    click.echo(f"Set {key} = {getattr(updated, key)}")


@config.command()
@path_option
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
def reset(config_path: Path | None, yes: bool):
    """Restore all settings to their defaults."""
    if not yes:
        click.confirm("Reset all settings to defaults?", abort=True)

    AppConfig().save(config_path)
    logger.info("Config reset to defaults")
    click.echo("Configuration reset to defaults")
