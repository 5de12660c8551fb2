from .colors import (
    NAMED,
    RGB,
    XYZ,
    Lab,
    Lch,
    delta_e76,
    hex_to_lab,
    hex_to_rgb,
    lab_to_lch,
    normalize_color,
    rgb_distance,
    rgb_to_xyz,
    xyz_to_lab,
)
from .errors import EmptyPaletteError, RecolorError, UnknownStrategyError
from .matching import (
    STRATEGIES,
    ColorMapping,
    MatchResult,
    build_color_mapping,
    find_nearest,
    find_nearest_v1,
    find_nearest_v2,
    find_nearest_v3,
)
from .styles import gather_colors, recolor_attributes, recolor_style, set_or_update_style_prop

__version__ = "1.0.0"

__all__ = [
    "NAMED", "RGB", "XYZ", "Lab", "Lch",
    "normalize_color", "hex_to_rgb", "rgb_to_xyz", "xyz_to_lab", "hex_to_lab", "lab_to_lch",
    "rgb_distance", "delta_e76",
    "RecolorError", "EmptyPaletteError", "UnknownStrategyError",
    "STRATEGIES", "MatchResult", "ColorMapping",
    "find_nearest_v1", "find_nearest_v2", "find_nearest_v3", "find_nearest", "build_color_mapping",
    "set_or_update_style_prop", "gather_colors", "recolor_style", "recolor_attributes",
]
