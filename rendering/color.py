"""
CSS-style HSL (hue in degrees) to cairo RGB.
"""

import colorsys
from typing import Tuple


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Tuple[float, float, float]:
    h = (hue % 360.0) / 360.0
    s = min(max(saturation, 0.0), 1.0)
    l = min(max(lightness, 0.0), 1.0)
    return colorsys.hls_to_rgb(h, l, s)
