"""
Color token normalization and colorimetric conversions.
Pipeline: token -> canonical hex -> RGB -> XYZ (D65) -> CIE Lab -> LCH.
Malformed input never raises; conversions return None instead.
"""

import math
import re
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, Field

# Type definitions
class RGB(BaseModel):
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

class XYZ(BaseModel):
    x: float
    y: float
    z: float

class Lab(BaseModel):
    l: float
    a: float
    b: float

class Lch(BaseModel):
    l: float
    c: float
    h: float = Field(ge=0.0, lt=360.0)

# Tokens that denote "no paint"
NO_PAINT = ("none", "transparent")

# CSS/SVG extended named colors
NAMED: Mapping[str, str] = MappingProxyType({
    "black": "#000000", "white": "#ffffff", "red": "#ff0000",
    "green": "#008000", "blue": "#0000ff", "yellow": "#ffff00",
    "cyan": "#00ffff", "magenta": "#ff00ff", "gray": "#808080",
    "grey": "#808080", "silver": "#c0c0c0", "maroon": "#800000",
    "olive": "#808000", "lime": "#00ff00", "aqua": "#00ffff",
    "teal": "#008080", "navy": "#000080", "fuchsia": "#ff00ff",
    "purple": "#800080", "orange": "#ffa500",
    "aliceblue": "#f0f8ff", "antiquewhite": "#faebd7", "aquamarine": "#7fffd4",
    "azure": "#f0ffff", "beige": "#f5f5dc", "bisque": "#ffe4c4",
    "blanchedalmond": "#ffebcd", "blueviolet": "#8a2be2", "brown": "#a52a2a",
    "burlywood": "#deb887", "cadetblue": "#5f9ea0", "chartreuse": "#7fff00",
    "chocolate": "#d2691e", "coral": "#ff7f50", "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc", "crimson": "#dc143c", "darkblue": "#00008b",
    "darkcyan": "#008b8b", "darkgoldenrod": "#b8860b", "darkgray": "#a9a9a9",
    "darkgreen": "#006400", "darkgrey": "#a9a9a9", "darkkhaki": "#bdb76b",
    "darkmagenta": "#8b008b", "darkolivegreen": "#556b2f", "darkorange": "#ff8c00",
    "darkorchid": "#9932cc", "darkred": "#8b0000", "darksalmon": "#e9967a",
    "darkseagreen": "#8fbc8f", "darkslateblue": "#483d8b", "darkslategray": "#2f4f4f",
    "darkslategrey": "#2f4f4f", "darkturquoise": "#00ced1", "darkviolet": "#9400d3",
    "deeppink": "#ff1493", "deepskyblue": "#00bfff", "dimgray": "#696969",
    "dimgrey": "#696969", "dodgerblue": "#1e90ff", "firebrick": "#b22222",
    "floralwhite": "#fffaf0", "forestgreen": "#228b22", "gainsboro": "#dcdcdc",
    "ghostwhite": "#f8f8ff", "gold": "#ffd700", "goldenrod": "#daa520",
    "greenyellow": "#adff2f", "honeydew": "#f0fff0", "hotpink": "#ff69b4",
    "indianred": "#cd5c5c", "indigo": "#4b0082", "ivory": "#fffff0",
    "khaki": "#f0e68c", "lavender": "#e6e6fa", "lavenderblush": "#fff0f5",
    "lawngreen": "#7cfc00", "lemonchiffon": "#fffacd", "lightblue": "#add8e6",
    "lightcoral": "#f08080", "lightcyan": "#e0ffff", "lightgoldenrodyellow": "#fafad2",
    "lightgray": "#d3d3d3", "lightgreen": "#90ee90", "lightgrey": "#d3d3d3",
    "lightpink": "#ffb6c1", "lightsalmon": "#ffa07a", "lightseagreen": "#20b2aa",
    "lightskyblue": "#87cefa", "lightslategray": "#778899", "lightslategrey": "#778899",
    "lightsteelblue": "#b0c4de", "lightyellow": "#ffffe0", "limegreen": "#32cd32",
    "linen": "#faf0e6", "mediumaquamarine": "#66cdaa", "mediumblue": "#0000cd",
    "mediumorchid": "#ba55d3", "mediumpurple": "#9370db", "mediumseagreen": "#3cb371",
    "mediumslateblue": "#7b68ee", "mediumspringgreen": "#00fa9a", "mediumturquoise": "#48d1cc",
    "mediumvioletred": "#c71585", "midnightblue": "#191970", "mintcream": "#f5fffa",
    "mistyrose": "#ffe4e1", "moccasin": "#ffe4b5", "navajowhite": "#ffdead",
    "oldlace": "#fdf5e6", "olivedrab": "#6b8e23", "orangered": "#ff4500",
    "orchid": "#da70d6", "palegoldenrod": "#eee8aa", "palegreen": "#98fb98",
    "paleturquoise": "#afeeee", "palevioletred": "#db7093", "papayawhip": "#ffefd5",
    "peachpuff": "#ffdab9", "peru": "#cd853f", "pink": "#ffc0cb",
    "plum": "#dda0dd", "powderblue": "#b0e0e6", "rosybrown": "#bc8f8f",
    "royalblue": "#4169e1", "saddlebrown": "#8b4513", "salmon": "#fa8072",
    "sandybrown": "#f4a460", "seagreen": "#2e8b57", "seashell": "#fff5ee",
    "sienna": "#a0522d", "skyblue": "#87ceeb", "slateblue": "#6a5acd",
    "slategray": "#708090", "slategrey": "#708090", "snow": "#fffafa",
    "springgreen": "#00ff7f", "steelblue": "#4682b4", "tan": "#d2b48c",
    "thistle": "#d8bfd8", "tomato": "#ff6347", "turquoise": "#40e0d0",
    "violet": "#ee82ee", "wheat": "#f5deb3", "whitesmoke": "#f5f5f5",
    "yellowgreen": "#9acd32",
})

# Loose rgb()/rgba() match; only the first three integers are read, alpha is ignored
RGB_FUNC_RE = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)", re.ASCII)

HEX6_RE = re.compile(r"#[0-9a-fA-F]{6}")

# NORMALIZE -------------------------------------------------------

def normalize_color(color: object) -> Optional[str]:
    """Normalize a paint token to '#rrggbb', or None when it denotes no color.

    Unrecognized tokens come back lowercased and trimmed rather than raising,
    so one bad value cannot abort a batch. Numbers inside rgb() are not
    clamped: rgb(999,0,0) gives '#3e70000'.
    """
    if not color or not isinstance(color, str):
        return None

    s = color.strip()
    if not s or s in NO_PAINT:
        return None

    if s.startswith("#"):
        if len(s) == 7:
            return s.lower()
        if len(s) == 4:
            r, g, b = s[1], s[2], s[3]
            return f"#{r}{r}{g}{g}{b}{b}".lower()

    named = NAMED.get(s.lower())
    if named:
        return named

    m = RGB_FUNC_RE.search(s)
    if m:
        r, g, b = (int(v) for v in m.groups())
        return f"#{r:02x}{g:02x}{b:02x}"

    return s.lower()

# RGB -------------------------------------------------------------

def hex_to_rgb(hex_str: object) -> Optional[RGB]:
    """Parse '#rrggbb' (either case) into RGB. Anything else gives None."""
    if not isinstance(hex_str, str) or not HEX6_RE.fullmatch(hex_str):
        return None
    return RGB(
        r=int(hex_str[1:3], 16),
        g=int(hex_str[3:5], 16),
        b=int(hex_str[5:7], 16),
    )

# XYZ / LAB -------------------------------------------------------

# D65 reference white
XN, YN, ZN = 95.047, 100.000, 108.883

def s_to_lin(c: float) -> float:
    """sRGB inverse companding of a [0, 1] channel."""
    return ((c + 0.055) / 1.055) ** 2.4 if c > 0.04045 else c / 12.92

def rgb_to_xyz(r: int, g: int, b: int) -> XYZ:
    """sRGB (0-255) to XYZ scaled to Y=100."""
    R = s_to_lin(r / 255) * 100
    G = s_to_lin(g / 255) * 100
    B = s_to_lin(b / 255) * 100
    x = R * 0.4124 + G * 0.3576 + B * 0.1805
    y = R * 0.2126 + G * 0.7152 + B * 0.0722
    z = R * 0.0193 + G * 0.1192 + B * 0.9505
    return XYZ(x=x, y=y, z=z)

def f_lab(t: float) -> float:
    """LAB forward transform."""
    return t ** (1 / 3) if t > 0.008856 else (7.787 * t + 16 / 116)

def xyz_to_lab(x: float, y: float, z: float) -> Lab:
    """XYZ (D65, Y=100) to CIE L*a*b*."""
    fx = f_lab(x / XN)
    fy = f_lab(y / YN)
    fz = f_lab(z / ZN)
    return Lab(l=(116 * fy) - 16, a=500 * (fx - fy), b=200 * (fy - fz))

def hex_to_lab(hex_str: object) -> Optional[Lab]:
    """Convert '#rrggbb' to Lab, None if the hex does not parse."""
    rgb = hex_to_rgb(hex_str)
    if rgb is None:
        return None
    xyz = rgb_to_xyz(rgb.r, rgb.g, rgb.b)
    return xyz_to_lab(xyz.x, xyz.y, xyz.z)

def lab_to_lch(lab: Lab) -> Lch:
    """Polar view of the a/b plane; hue in [0, 360)."""
    c = math.sqrt(lab.a * lab.a + lab.b * lab.b)
    h = (math.atan2(lab.b, lab.a) * 180 / math.pi + 360) % 360
    return Lch(l=lab.l, c=c, h=h)

# DISTANCES -------------------------------------------------------

def rgb_distance(c1: RGB, c2: RGB) -> float:
    """Euclidean distance over integer RGB channels."""
    return math.sqrt((c1.r - c2.r) ** 2 + (c1.g - c2.g) ** 2 + (c1.b - c2.b) ** 2)

def delta_e76(lab1: Optional[Lab], lab2: Optional[Lab]) -> float:
    """CIE76 Delta E. A missing operand is infinitely far away."""
    if lab1 is None or lab2 is None:
        return math.inf
    dl = lab1.l - lab2.l
    da = lab1.a - lab2.a
    db = lab1.b - lab2.b
    return math.sqrt(dl * dl + da * da + db * db)
