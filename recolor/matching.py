"""
Nearest-palette-color strategies and the batch mapping driver.

v1  RGB Euclidean distance.
v2  CIE76 Delta E in Lab (perceptual).
v3  Hue priority in LCH: light pastels map to their saturated hue family
    instead of collapsing onto white or gray.

Every strategy scans the palette in order and keeps a strictly smaller
distance, so the first palette entry wins ties.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel

from .colors import Lab, Lch, delta_e76, hex_to_lab, hex_to_rgb, lab_to_lch, rgb_distance
from .errors import EmptyPaletteError, UnknownStrategyError

log = logging.getLogger(__name__)

STRATEGIES = ("v1", "v2", "v3")

# Hue-priority policy thresholds
GRAYSCALE_THRESHOLD_IN = 3    # input chroma below this is neutral (keeps faint pastels chromatic)
GRAYSCALE_THRESHOLD_PAL = 2   # palette chroma below this is neutral
LIGHT_INPUT_L = 60
WHITE_CANDIDATE_L = 50
DARK_CANDIDATE_L = 40
LIGHTNESS_WEIGHT = 0.1
LIGHT_TO_DARK_PENALTY = 100
BANNED = 100000


class MatchResult(BaseModel):
    color: str
    distance: float
    # False when the target was passed through unmatched
    matched: bool = True


class ColorMapping(BaseModel):
    mapping: Dict[str, str]
    distances: Optional[Dict[str, float]] = None
    detected_colors: List[str]


def _unmatched(target: str) -> MatchResult:
    log.debug("no palette match for %r, passing through", target)
    return MatchResult(color=target, distance=0, matched=False)

# V1 --------------------------------------------------------------

def find_nearest_v1(target: str, palette: Sequence[str]) -> str:
    """Nearest palette color by RGB Euclidean distance.

    Degenerate cases echo the target: an empty palette, or a target that is
    not a '#rrggbb' hex. Unparsable palette entries are skipped.
    """
    if len(palette) == 0:
        return target

    target_rgb = hex_to_rgb(target)
    if target_rgb is None:
        return target

    nearest = palette[0]
    min_distance = math.inf
    for color in palette:
        rgb = hex_to_rgb(color)
        if rgb is None:
            continue
        d = rgb_distance(target_rgb, rgb)
        if d < min_distance:
            min_distance = d
            nearest = color
    return nearest

# V2 --------------------------------------------------------------

def find_nearest_v2(target: str, palette: Sequence[str]) -> MatchResult:
    """Nearest palette color by CIE76 Delta E."""
    target_lab = hex_to_lab(target)
    if target_lab is None:
        return _unmatched(target)

    best: Optional[MatchResult] = None
    for color in palette:
        lab = hex_to_lab(color)
        if lab is None:
            continue
        d = delta_e76(target_lab, lab)
        if best is None or d < best.distance:
            best = MatchResult(color=color, distance=d)
    return best or _unmatched(target)

# V3 --------------------------------------------------------------

def hue_delta(h1: float, h2: float) -> float:
    """Circular difference between two hue angles, in [0, 180]."""
    d = abs(h1 - h2)
    if d > 180:
        d = 360 - d
    return d

def hue_priority_distance(target: Lab, target_lch: Lch, candidate: Lab, is_light: bool) -> float:
    """Weighted hue-first distance from a chromatic target to one palette candidate."""
    c = lab_to_lch(candidate)

    if c.c < GRAYSCALE_THRESHOLD_PAL:
        # A light chromatic color never collapses to a neutral.
        # Dark ones may go to black but never to white.
        if is_light or candidate.l > WHITE_CANDIDATE_L:
            return BANNED
        return delta_e76(target, candidate)

    d = hue_delta(target_lch.h, c.h) + abs(target.l - candidate.l) * LIGHTNESS_WEIGHT
    if is_light and candidate.l < DARK_CANDIDATE_L:
        d += LIGHT_TO_DARK_PENALTY
    return d

def find_nearest_v3(target: str, palette: Sequence[str]) -> MatchResult:
    """Nearest palette color by hue priority (LCH)."""
    target_lab = hex_to_lab(target)
    if target_lab is None:
        return _unmatched(target)

    target_lch = lab_to_lch(target_lab)
    # Hue is meaningless near neutral
    is_grayscale = target_lch.c < GRAYSCALE_THRESHOLD_IN
    is_light = target_lab.l > LIGHT_INPUT_L

    best: Optional[MatchResult] = None
    for color in palette:
        lab = hex_to_lab(color)
        if lab is None:
            continue
        if is_grayscale:
            d = delta_e76(target_lab, lab)
        else:
            d = hue_priority_distance(target_lab, target_lch, lab, is_light)
        if best is None or d < best.distance:
            best = MatchResult(color=color, distance=d)
    return best or _unmatched(target)

# Dispatch / batch ------------------------------------------------

def find_nearest(target: str, palette: Sequence[str], strategy: str = "v2") -> MatchResult:
    """Run one strategy and return a MatchResult for any of them."""
    if strategy == "v1":
        a = hex_to_rgb(target)
        if not palette or a is None:
            return _unmatched(target)
        color = find_nearest_v1(target, palette)
        b = hex_to_rgb(color)
        if b is None:
            # No convertible entry: v1 falls back to palette[0]
            return MatchResult(color=color, distance=0, matched=False)
        return MatchResult(color=color, distance=rgb_distance(a, b))
    elif strategy == "v2":
        return find_nearest_v2(target, palette)
    elif strategy == "v3":
        return find_nearest_v3(target, palette)
    else:
        raise UnknownStrategyError(strategy)

def build_color_mapping(colors: Iterable[str], palette: Sequence[str], strategy: str = "v1") -> ColorMapping:
    """Map every detected color onto the palette with the chosen strategy.

    Keys are lowercased detected colors. Distances are recorded for the
    perceptual strategies (v2, v3) only. An empty palette is a configuration
    error and is rejected before any matching happens.
    """
    if not palette:
        raise EmptyPaletteError()
    if strategy not in STRATEGIES:
        raise UnknownStrategyError(strategy)

    detected = list(colors)
    mapping: Dict[str, str] = {}
    distances: Dict[str, float] = {}
    for color in detected:
        key = color.lower()
        if key in mapping:
            continue
        result = find_nearest(color, palette, strategy)
        mapping[key] = result.color
        distances[key] = result.distance

    log.debug("mapped %d colors onto %d palette entries (%s)", len(mapping), len(palette), strategy)
    return ColorMapping(
        mapping=mapping,
        distances=distances if strategy != "v1" else None,
        detected_colors=detected,
    )
