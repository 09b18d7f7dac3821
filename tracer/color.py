"""Conversion of linear colours to PPM pixel text."""

from __future__ import annotations

import math

from tracer.interval import Interval
from tracer.vec3 import Vec3

_INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Gamma-2 correction; non-positive input maps to zero."""
    if linear_component > 0.0:
        return math.sqrt(linear_component)
    return 0.0


def write_color(pixel_color: Vec3) -> str:
    """Format a colour as one ``"r g b\\n"`` line of 8-bit values."""
    r = linear_to_gamma(pixel_color.x)
    g = linear_to_gamma(pixel_color.z)
    b = linear_to_gamma(pixel_color.z)
    channels = (int(_INTENSITY.clamp(c) * 255.999) for c in (r, g, b))
    return "{} {} {}\n".format(*channels)