"""Pick a color from the screen with the system eye-dropper."""

import asyncio
import logging
from typing import Optional

import click

from colorpicker.cli.output import echo_color
from colorpicker.core import ColorPickerController, Picked, ScreenEyeDropper, Unavailable
from colorpicker.exceptions import ConfigurationError
from colorpicker.models import AppConfig

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--delay",
    "-d",
    type=click.FloatRange(min=0.0),
    default=None,
    help="Seconds to wait before grabbing the pixel under the cursor (default: from config)",
)
@click.option("--json", "as_json", is_flag=True, help="Print machine-readable JSON")
@click.pass_context
def pick(ctx: click.Context, delay: Optional[float], as_json: bool):
    """
    Grab the color under the mouse cursor.

    Move the pointer over the target during the delay. Press Ctrl+C to cancel.
    """
    try:
        config = AppConfig.load_or_default()
    except ConfigurationError as e:
        raise click.ClickException(e.get_full_message()) from e

    wait = config.eyedropper_delay if delay is None else delay

    controller = ColorPickerController(config=config, eyedropper=ScreenEyeDropper(delay=wait))

    if not as_json:
        click.echo(f"Picking in {wait:g}s... move the cursor over a color (Ctrl+C to cancel)", err=True)

    try:
        result = asyncio.run(controller.pick_from_screen())
    except KeyboardInterrupt:
        logger.info("Eye-dropper cancelled from keyboard")
        click.echo("Cancelled", err=True)
        return

    if isinstance(result, Picked):
        echo_color(controller.color, as_json=as_json)
    elif isinstance(result, Unavailable):
        click.echo(f"Eye-dropper not supported: {result.reason}", err=True)
        click.echo("Install screen capture support with: pip install 'colorpicker[eyedropper]'", err=True)
        ctx.exit(1)
    else:
        click.echo("Cancelled", err=True)
