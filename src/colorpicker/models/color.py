"""Color value models.

RGB is the pivot representation: every ``Color`` snapshot is derived from a
single RGB triple, so the hex, HSL and HSV fields can never disagree.
"""

from pydantic import BaseModel, ConfigDict, Field


class RGB(BaseModel):
    """Standard 8-bit RGB triple (0-255 per channel)."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def black(cls) -> "RGB":
        """Create black, the fallback for unparseable hex input."""
        return cls(r=0, g=0, b=0)

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to an (r, g, b) tuple."""
        return (self.r, self.g, self.b)


class HSL(BaseModel):
    """Hue in degrees, saturation and lightness in percent."""

    model_config = ConfigDict(frozen=True)

    h: int = Field(ge=0, lt=360, description="Hue (0-359 degrees)")
    s: int = Field(ge=0, le=100, description="Saturation (0-100%)")
    l: int = Field(ge=0, le=100, description="Lightness (0-100%)")  # noqa: E741

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to an (h, s, l) tuple."""
        return (self.h, self.s, self.l)


class HSV(BaseModel):
    """Hue in degrees, saturation and value in percent."""

    model_config = ConfigDict(frozen=True)

    h: int = Field(ge=0, lt=360, description="Hue (0-359 degrees)")
    s: int = Field(ge=0, le=100, description="Saturation (0-100%)")
    v: int = Field(ge=0, le=100, description="Value/brightness (0-100%)")

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to an (h, s, v) tuple."""
        return (self.h, self.s, self.v)


class Color(BaseModel):
    """Immutable snapshot of one color in all four representations.

    Build instances with ``normalize()`` (or the ``from_rgb``/``from_hex``
    shortcuts, which delegate to it) rather than by hand. The model is
    frozen so snapshots are hashable and can be shared between observers.

    Example:
        >>> Color.from_rgb(59, 130, 246).hex
        '#3b82f6'
    """

    model_config = ConfigDict(frozen=True)

    hex: str = Field(pattern=r"^#[0-9a-f]{6}$", description="Canonical lowercase #rrggbb")
    rgb: RGB
    hsl: HSL
    hsv: HSV

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "Color":
        """Create a snapshot from (possibly out-of-range) RGB channels."""
        from colorpicker.conversions import normalize

        return normalize(r, g, b)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a snapshot from a hex string (lenient, bad input gives black)."""
        from colorpicker.conversions import hex_to_rgb, normalize

        return normalize(*hex_to_rgb(value).to_tuple())
