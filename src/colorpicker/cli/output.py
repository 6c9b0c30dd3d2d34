"""Printing color snapshots from CLI commands."""

import json

import click

from colorpicker.models import Color
from colorpicker.ui_shared import format_all


def echo_color(color: Color, as_json: bool = False) -> None:
    """Print all four representations, either aligned text or JSON."""
    if as_json:
        payload = color.model_dump()
        payload["formatted"] = format_all(color)
        click.echo(json.dumps(payload, indent=2))
        return

    r, g, b = color.rgb.to_tuple()
    swatch = click.style("      ", bg=(r, g, b))
    click.echo(f"{swatch}  {color.hex}")
    for label, text in format_all(color).items():
        click.echo(f"  {label:<4} {text}")
