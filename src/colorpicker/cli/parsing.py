"""Parsing of color values typed on the command line.

The conversion core is lenient (bad hex becomes black). On the
command line that would silently hide typos, so arguments are matched against
the supported notations first and rejected with ColorParseError otherwise.
"""

import re

from colorpicker.conversions import HEX_PATTERN, hex_to_rgb, hsl_to_rgb, normalize
from colorpicker.exceptions import ColorParseError
from colorpicker.models import Color

_NUMBER = r"\s*(-?\d+(?:\.\d+)?)\s*"
RGB_FUNC_PATTERN = re.compile(rf"^rgb\({_NUMBER},{_NUMBER},{_NUMBER}\)$", re.IGNORECASE)
HSL_FUNC_PATTERN = re.compile(rf"^hsl\({_NUMBER},{_NUMBER}%?\s*,{_NUMBER}%?\s*\)$", re.IGNORECASE)
TRIPLE_PATTERN = re.compile(rf"^{_NUMBER}[,\s]{_NUMBER}[,\s]{_NUMBER}$")


def parse_color_value(text: str) -> Color:
    """
    Parse a color written in any supported notation.

    Supported:
        - ``#3b82f6`` or ``3b82f6`` (any case)
        - ``rgb(59, 130, 246)`` or ``59,130,246`` / ``59 130 246``
        - ``hsl(217, 91%, 60%)``

    Numeric values outside their ranges are clamped, as everywhere else.

    Raises:
        ColorParseError: If no notation matches
    """
    value = text.strip()

    if HEX_PATTERN.fullmatch(value):
        return normalize(*hex_to_rgb(value).to_tuple())

    match = RGB_FUNC_PATTERN.match(value) or TRIPLE_PATTERN.match(value)
    if match:
        r, g, b = (float(part) for part in match.groups())
        return normalize(r, g, b)

    match = HSL_FUNC_PATTERN.match(value)
    if match:
        h, s, l = (float(part) for part in match.groups())  # noqa: E741
        return normalize(*hsl_to_rgb(h, s, l).to_tuple())

    raise ColorParseError(text)
