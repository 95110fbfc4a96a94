"""
Color catalog and matching rules.

A named color owns one or more rectangular ranges in HSL space and matches a
sample when any of its ranges does. Chromatic colors are judged by hue after
rejecting washed-out and badly exposed pixels; achromatic colors (white,
black) ignore hue and are judged by saturation and lightness alone.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

import numpy as np

from color_hunt.vision.hsl import HSL

logger = logging.getLogger(__name__)

# Chromatic guards, applied before any hue test
MIN_SATURATION = 20
MIN_LIGHTNESS = 15
MAX_LIGHTNESS = 85

FULL_HUE = (0.0, 360.0)
FULL_PERCENT = (0.0, 100.0)

Bounds = Tuple[float, float]

class UnknownColorError(KeyError):
    """Raised when a color identifier is not in the catalog."""

@dataclass(frozen=True)
class ColorRange:
    """
    Admissible region in (hue, saturation, lightness) space.

    A hue pair with lo > hi wraps past 360 degrees (e.g. red: (345, 15)).
    """
    hue: Bounds = FULL_HUE
    saturation: Bounds = FULL_PERCENT
    lightness: Bounds = FULL_PERCENT

    @property
    def is_achromatic(self) -> bool:
        return tuple(self.hue) == FULL_HUE

    @property
    def wraps(self) -> bool:
        return self.hue[0] > self.hue[1]

    def contains_hue(self, hue: float) -> bool:
        lo, hi = self.hue
        if self.wraps:
            return hue >= lo or hue <= hi
        return lo <= hue <= hi

    def contains_tone(self, saturation: float, lightness: float) -> bool:
        return (self.saturation[0] <= saturation <= self.saturation[1]
                and self.lightness[0] <= lightness <= self.lightness[1])

    def validate(self) -> None:
        lo, hi = self.hue
        if not (0 <= lo <= 360 and 0 <= hi <= 360):
            raise ValueError(f"Hue bounds {self.hue} outside [0, 360]")
        for name, (lo, hi) in (("saturation", self.saturation), ("lightness", self.lightness)):
            if not (0 <= lo <= hi <= 100):
                raise ValueError(f"Invalid {name} bounds {(lo, hi)}")

@dataclass(frozen=True)
class ColorDefinition:
    """A named color the player can be asked to find."""
    color_id: str
    ranges: Tuple[ColorRange, ...]
    label: str
    swatch: str

    @property
    def is_achromatic(self) -> bool:
        return all(r.is_achromatic for r in self.ranges)

    def validate(self) -> None:
        if not self.color_id:
            raise ValueError("Color definition needs a non-empty id")
        if not self.ranges:
            raise ValueError(f"Color '{self.color_id}' has no ranges")
        for color_range in self.ranges:
            color_range.validate()

class ColorCatalog:
    """
    Read-only registry of color definitions keyed by identifier.

    Definitions are validated once on construction; an invalid definition or a
    duplicated id raises ValueError before the game ever starts.
    """

    def __init__(self, definitions: Iterable[ColorDefinition]):
        self._colors: Dict[str, ColorDefinition] = {}
        for definition in definitions:
            definition.validate()
            if definition.color_id in self._colors:
                raise ValueError(f"Duplicate color id '{definition.color_id}'")
            self._colors[definition.color_id] = definition
        if not self._colors:
            raise ValueError("Color catalog is empty")
        logger.debug(f"Color catalog loaded: {', '.join(self._colors)}")

    def __contains__(self, color_id: object) -> bool:
        return color_id in self._colors

    def __iter__(self) -> Iterator[ColorDefinition]:
        return iter(self._colors.values())

    def __len__(self) -> int:
        return len(self._colors)

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(self._colors)

    def get(self, color_id: Optional[str]) -> Optional[ColorDefinition]:
        return self._colors.get(color_id)

    def require(self, color_id: str) -> ColorDefinition:
        """Look up a color, raising UnknownColorError when it is missing."""
        try:
            return self._colors[color_id]
        except KeyError:
            raise UnknownColorError(color_id) from None

def _chromatic(color_id, hue, label, swatch):
    return ColorDefinition(
        color_id=color_id,
        ranges=(ColorRange(hue=hue, saturation=(MIN_SATURATION, 100),
                           lightness=(MIN_LIGHTNESS, MAX_LIGHTNESS)),),
        label=label,
        swatch=swatch,
    )

DEFAULT_COLORS = (
    _chromatic("red", (345, 15), "czerwony", "#ff4757"),
    _chromatic("orange", (16, 44), "pomarańczowy", "#ffa502"),
    _chromatic("yellow", (45, 70), "żółty", "#f1c40f"),
    _chromatic("green", (75, 150), "zielony", "#2ecc71"),
    _chromatic("blue", (190, 250), "niebieski", "#3742fa"),
    _chromatic("purple", (260, 300), "fioletowy", "#8e44ad"),
    _chromatic("pink", (301, 344), "różowy", "#ff6b81"),
    ColorDefinition("white", (ColorRange(saturation=(0, 20), lightness=(80, 100)),),
                    "biały", "#ffffff"),
    ColorDefinition("black", (ColorRange(saturation=(0, 100), lightness=(0, 15)),),
                    "czarny", "#2f3542"),
)

def default_catalog() -> ColorCatalog:
    return ColorCatalog(DEFAULT_COLORS)

def color_matches(hsl: HSL, definition: Optional[ColorDefinition]) -> bool:
    """
    Decide whether one HSL sample belongs to a color.

    Args:
        hsl: Converted sample
        definition: Target color, or None for an unknown target

    Returns:
        True when the sample satisfies any of the color's ranges. Unknown
        targets never match.
    """
    if definition is None:
        return False

    hue, saturation, lightness = hsl
    if definition.is_achromatic:
        return any(r.contains_tone(saturation, lightness) for r in definition.ranges)

    if saturation < MIN_SATURATION or lightness < MIN_LIGHTNESS or lightness > MAX_LIGHTNESS:
        return False

    return any(r.contains_hue(hue) for r in definition.ranges)

def match_mask(hsl: np.ndarray, definition: Optional[ColorDefinition]) -> np.ndarray:
    """
    Vectorized color_matches over an (N, 3) HSL array.

    Returns:
        Boolean array of length N
    """
    hsl = np.asarray(hsl).reshape(-1, 3)
    if definition is None:
        return np.zeros(len(hsl), dtype=bool)

    hue, saturation, lightness = hsl[:, 0], hsl[:, 1], hsl[:, 2]
    mask = np.zeros(len(hsl), dtype=bool)

    if definition.is_achromatic:
        for r in definition.ranges:
            mask |= ((saturation >= r.saturation[0]) & (saturation <= r.saturation[1])
                     & (lightness >= r.lightness[0]) & (lightness <= r.lightness[1]))
        return mask

    for r in definition.ranges:
        lo, hi = r.hue
        if r.wraps:
            mask |= (hue >= lo) | (hue <= hi)
        else:
            mask |= (hue >= lo) & (hue <= hi)

    valid = (saturation >= MIN_SATURATION) & (lightness >= MIN_LIGHTNESS) & (lightness <= MAX_LIGHTNESS)
    return mask & valid
