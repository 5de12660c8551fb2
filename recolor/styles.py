"""
Inline style editing and paint gathering/rewriting over attribute mappings.

The markup layer hands us one attribute mapping per element (name -> value);
nothing here parses or serializes documents.
"""

import re
from typing import Dict, Iterable, List, Mapping, Optional

from .colors import NO_PAINT, normalize_color

PAINT_PROPS = ("fill", "stroke", "stop-color")

DECL_RE = re.compile(r"^([a-z-]+)\s*:\s*(.+)$", re.IGNORECASE)

# First occurrence, case-sensitive, used when gathering
_GATHER_RES = {prop: re.compile(rf"{re.escape(prop)}\s*:\s*([^;]+)") for prop in PAINT_PROPS}
# Every occurrence, case-insensitive, used when rewriting
_REWRITE_RES = {prop: re.compile(rf"{re.escape(prop)}\s*:\s*([^;]+)", re.IGNORECASE) for prop in PAINT_PROPS}


def set_or_update_style_prop(style: Optional[str], prop: str, value: str) -> str:
    """Set ``prop`` in a ``;``-separated declaration list, or append it.

    Unrelated declarations keep their text and order; segments that are not
    ``name:value`` pass through untouched. Output is joined with ``"; "``.
    """
    decls = [d.strip() for d in style.split(";")] if style else []
    out: List[str] = []
    replaced = False
    for d in decls:
        if not d:
            continue
        m = DECL_RE.match(d)
        if m and m.group(1).lower() == prop.lower():
            replaced = True
            out.append(f"{prop}:{value}")
        else:
            out.append(d)
    if not replaced:
        out.append(f"{prop}:{value}")
    return "; ".join(out)


def style_paint_values(style: Optional[str]) -> Dict[str, str]:
    """Raw value of the first fill/stroke/stop-color declaration in a style."""
    found: Dict[str, str] = {}
    if not style:
        return found
    for prop, rx in _GATHER_RES.items():
        m = rx.search(style)
        if m:
            found[prop] = m.group(1).strip()
    return found


def gather_colors(elements: Iterable[Mapping[str, str]]) -> List[str]:
    """Sorted set of canonical colors used by paint attributes and styles."""
    colors = set()
    for attrs in elements:
        values = [attrs.get(prop) for prop in PAINT_PROPS]
        values.extend(style_paint_values(attrs.get("style")).values())
        for value in values:
            normalized = normalize_color(value)
            if normalized:
                colors.add(normalized)
    return sorted(colors)


def _mapped(value: Optional[str], mapping: Mapping[str, str]) -> Optional[str]:
    if not value or value in NO_PAINT:
        return None
    normalized = normalize_color(value)
    return mapping.get(normalized.lower()) if normalized else None


def recolor_style(style: str, mapping: Mapping[str, str]) -> str:
    """Replace every mapped paint declaration in a style string.

    Matches are taken from the original string, so a property declared
    twice is rewritten once per declaration against the same input.
    """
    new_style = style
    for prop, rx in _REWRITE_RES.items():
        for m in rx.finditer(style):
            new_color = _mapped(m.group(1).strip(), mapping)
            if new_color:
                new_style = set_or_update_style_prop(new_style, prop, new_color)
    return new_style


def recolor_attributes(attrs: Mapping[str, str], mapping: Mapping[str, str]) -> Dict[str, str]:
    """Copy of an element's attributes with paints swapped through ``mapping``."""
    out = dict(attrs)
    for prop in PAINT_PROPS:
        new_color = _mapped(out.get(prop), mapping)
        if new_color:
            out[prop] = new_color
    style = out.get("style")
    if style:
        out["style"] = recolor_style(style, mapping)
    return out
