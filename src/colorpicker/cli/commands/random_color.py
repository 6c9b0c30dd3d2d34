"""Generate a random color."""

import random
from typing import Optional

import click

from colorpicker.cli.output import echo_color
from colorpicker.conversions import normalize


@click.command(name="random")
@click.option("--seed", type=int, default=None, help="Seed for reproducible output")
@click.option("--json", "as_json", is_flag=True, help="Print machine-readable JSON")
def random_color(seed: Optional[int], as_json: bool):
    """Print a uniformly random color."""
    rng = random.Random(seed)
    color = normalize(rng.randrange(256), rng.randrange(256), rng.randrange(256))
    echo_color(color, as_json=as_json)
