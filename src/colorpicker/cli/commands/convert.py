"""Convert a color between hex, RGB, HSL and HSV."""

import click

from colorpicker.cli.output import echo_color
from colorpicker.cli.parsing import parse_color_value
from colorpicker.exceptions import ColorParseError


@click.command()
@click.argument("value", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print machine-readable JSON")
def convert(value: tuple[str, ...], as_json: bool):
    """
    Show a color in every representation.

    \b
    Examples:
      colorpicker convert '#3b82f6'
      colorpicker convert 59 130 246
      colorpicker convert 'rgb(59, 130, 246)'
      colorpicker convert 'hsl(217, 91%, 60%)' --json
    """
    text = " ".join(value)
    try:
        color = parse_color_value(text)
    except ColorParseError as e:
        raise click.BadParameter(e.get_full_message(), param_hint="VALUE") from e

    echo_color(color, as_json=as_json)
