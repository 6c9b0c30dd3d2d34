"""CLI commands for colorpicker."""

from .config import config
from .convert import convert
from .pick import pick
from .random_color import random_color

__all__ = ["config", "convert", "pick", "random_color"]
