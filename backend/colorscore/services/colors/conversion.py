"""
RGB → HSV conversion for scoring.

Hue is reported in degrees [0, 360), saturation and value in percent
[0, 100]. Achromatic colors (R == G == B, black included) get hue 0 and
saturation 0 so gray centroids score deterministically.
"""

import colorsys
from typing import NamedTuple, Sequence


class HSVColor(NamedTuple):
    """Hue/saturation/value view of an RGB centroid."""
    h: float  # Hue [0, 360)
    s: float  # Saturation [0, 100]
    v: float  # Value [0, 100]


def rgb_to_hsv(r: float, g: float, b: float) -> HSVColor:
    """
    Convert one RGB triple to HSV.

    Args:
        r: Red channel [0, 255], may be fractional
        g: Green channel [0, 255], may be fractional
        b: Blue channel [0, 255], may be fractional

    Returns:
        HSVColor with h ∈ [0,360), s ∈ [0,100], v ∈ [0,100]
    """
    # colorsys returns h = 0 and s = 0 when max == min, including black
    h, s, v = colorsys.rgb_to_hsv(r / 255.0, g / 255.0, b / 255.0)

    hue = h * 360.0
    # (h / 6) % 1.0 can round up to exactly 1.0 for tiny negative inputs
    if hue >= 360.0:
        hue -= 360.0

    return HSVColor(h=hue, s=s * 100.0, v=v * 100.0)


def centroids_to_hsv(centroids: Sequence[Sequence[float]]) -> list:
    """Convert a sequence of RGB centroids to HSV colors, preserving order."""
    return [rgb_to_hsv(float(c[0]), float(c[1]), float(c[2])) for c in centroids]
