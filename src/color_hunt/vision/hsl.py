"""
RGB to HSL conversion.

Hue is reported in degrees [0, 360), saturation and lightness in percent
[0, 100]. The scalar function is the reference; the array version runs the
same formula over whole regions of interest with numpy.
"""
import numpy as np
from typing import NamedTuple

class HSL(NamedTuple):
    """A single color in hue/saturation/lightness space."""
    hue: float
    saturation: float
    lightness: float

def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """
    Convert one 8-bit RGB sample to HSL.

    Args:
        r, g, b: Channel intensities in [0, 255]

    Returns:
        HSL with hue in degrees and saturation/lightness in percent
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    vmax, vmin = max(r, g, b), min(r, g, b)
    lightness = (vmax + vmin) / 2

    if vmax == vmin:
        return HSL(0.0, 0.0, lightness * 100)

    delta = vmax - vmin
    if lightness > 0.5:
        saturation = delta / (2 - vmax - vmin)
    else:
        saturation = delta / (vmax + vmin)

    # Channel priority on ties: red, then green, then blue
    if vmax == r:
        hue = ((g - b) / delta) % 6
    elif vmax == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return HSL(hue * 60.0, saturation * 100, lightness * 100)

def rgb_array_to_hsl(samples: np.ndarray) -> np.ndarray:
    """
    Convert an array of RGB samples to HSL.

    Runs the same float64 operations as rgb_to_hsl, in the same order, so every
    sample converts to exactly the value the scalar function gives. Pixels that
    sit on a catalog boundary must land on the same side in both.

    Args:
        samples: uint8 array of shape (..., 3) in RGB order

    Returns:
        float64 array of shape (N, 3) holding (hue, saturation, lightness)
    """
    rgb = np.asarray(samples).reshape(-1, 3).astype(np.float64) / 255.0
    if rgb.shape[0] == 0:
        return np.zeros((0, 3), dtype=np.float64)

    r, g, b = rgb[:, 0], rgb[:, 1], rgb[:, 2]
    vmax = rgb.max(axis=1)
    vmin = rgb.min(axis=1)
    lightness = (vmax + vmin) / 2

    delta = vmax - vmin
    chromatic = delta > 0
    # Placeholder divisors for achromatic samples, whose results are discarded
    safe_delta = np.where(chromatic, delta, 1.0)
    light_div = np.where(chromatic, 2 - vmax - vmin, 1.0)
    dark_div = np.where(chromatic, vmax + vmin, 1.0)

    saturation = np.where(lightness > 0.5, delta / light_div, delta / dark_div)

    # Channel priority on ties: red, then green, then blue
    hue = np.select(
        [vmax == r, vmax == g],
        [np.mod((g - b) / safe_delta, 6), (b - r) / safe_delta + 2],
        (r - g) / safe_delta + 4,
    )

    hsl = np.empty_like(rgb)
    hsl[:, 0] = np.where(chromatic, hue * 60.0, 0.0)
    hsl[:, 1] = np.where(chromatic, saturation * 100, 0.0)
    hsl[:, 2] = lightness * 100
    return hsl
