"""Conversion between ``#rrggbb`` strings and HSB (hue, saturation, brightness).

Hue is expressed in degrees ``[0, 360)``, saturation and brightness in
``[0, 1]``. HSB is the same model as HSV.
"""

from __future__ import annotations

import colorsys
import random
import re

PASTEL_BASE = 127
PASTEL_SPREAD = 128

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


def to_hex(hue: float, saturation: float, brightness: float) -> str:
    """Convert an HSB triple to a lowercase ``#rrggbb`` string."""
    h = (hue / 360.0) % 1.0
    r, g, b = colorsys.hsv_to_rgb(h, saturation, brightness)
    return "#{:02x}{:02x}{:02x}".format(
        _to_channel(r),
        _to_channel(g),
        _to_channel(b),
    )


def to_rgb(color: str) -> tuple[int, int, int]:
    """Decode a ``#rrggbb`` string into its channels.

    Raises
    ------
    ValueError
        If the string is not a six-digit hex color.
    """
    if _HEX_COLOR.fullmatch(color) is None:
        msg = f"Invalid color '{color}': expected #rrggbb"
        raise ValueError(msg)
    rgb = int(color[1:], 16)
    return (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF


def to_hsb(color: str) -> tuple[float, float, float]:
    """Convert a ``#rrggbb`` string to ``(hue_degrees, saturation, brightness)``."""
    r, g, b = to_rgb(color)
    h, s, v = colorsys.rgb_to_hsv(r / 255.0, g / 255.0, b / 255.0)
    return h * 360.0, s, v


def random_pastel_color(rng: random.Random) -> str:
    """Return a light color with every channel in ``[127, 255)``."""
    red = PASTEL_BASE + rng.randrange(PASTEL_SPREAD)
    green = PASTEL_BASE + rng.randrange(PASTEL_SPREAD)
    blue = PASTEL_BASE + rng.randrange(PASTEL_SPREAD)
    return "#{:06x}".format((red << 16) | (green << 8) | blue)


def _to_channel(component: float) -> int:
    return int(component * 255.0 + 0.5)
