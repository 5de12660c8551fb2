"""
Palette recoloring API.
Maps the colors used by a graphic's paint attributes onto a fixed palette.
Strategies: v1 (RGB distance), v2 (LAB Delta E), v3 (hue priority, LCH).
The caller extracts attribute maps from its markup; no documents are parsed here.
"""

import logging
import re
from typing import List

from fastapi import APIRouter, HTTPException

from recolor import (
    RecolorError,
    build_color_mapping,
    gather_colors,
    normalize_color,
    recolor_attributes,
)
from schemas.requests import MatchRequest, NormalizeColorRequest, RecolorRequest
from schemas.responses import MatchResponse, RecolorResponse, SuccessResponse

log = logging.getLogger(__name__)

PALETTE_HEX_RE = re.compile(r"^#[0-9a-f]{6}$", re.IGNORECASE)

def validate_palette(palette: List[str]) -> None:
    """Reject empty palettes and entries that are not #rrggbb."""
    if not palette:
        raise HTTPException(status_code=400, detail="Palette array is required and must not be empty")
    invalid = [c for c in palette if not PALETTE_HEX_RE.fullmatch(c)]
    if invalid:
        raise HTTPException(status_code=400, detail=f"Invalid hex colors: {', '.join(invalid)}")

router = APIRouter()

@router.post("/normalize_color", response_model=SuccessResponse, operation_id="normalize_color", description="Normalize a paint token to a lowercase #rrggbb hex")
async def normalize(request: NormalizeColorRequest):
    """Normalize a paint token."""
    hex_val = normalize_color(request.code)
    if hex_val is None:
        raise HTTPException(status_code=400, detail="Token does not denote a color")
    return SuccessResponse(success=True, message=hex_val)

@router.post("/api/match", response_model=MatchResponse, operation_id="match_palette_colors", description="Map a list of colors onto the nearest palette colors")
async def match_colors(request: MatchRequest):
    """Build a color -> palette color mapping."""
    validate_palette(request.palette)
    colors = sorted({c for c in (normalize_color(c) for c in request.colors) if c})
    try:
        result = build_color_mapping(colors, request.palette, request.strategy)
    except RecolorError as e:
        raise HTTPException(status_code=400, detail=str(e))
    log.info("matched %d colors against %d palette entries (%s)", len(result.mapping), len(request.palette), request.strategy)
    return MatchResponse(**result.model_dump())

@router.post("/api/recolor/{strategy}", response_model=RecolorResponse, operation_id="recolor_elements", description="Recolor element paint attributes and inline styles onto a palette")
async def recolor(strategy: str, request: RecolorRequest):
    """Gather colors from the elements, map them, and rewrite every paint."""
    validate_palette(request.palette)
    try:
        detected = gather_colors(request.elements)
        result = build_color_mapping(detected, request.palette, strategy)
        elements = [recolor_attributes(attrs, result.mapping) for attrs in request.elements]
    except RecolorError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        log.exception("recoloring failed")
        raise HTTPException(status_code=500, detail="Recoloring failed")

    log.info("recolored %d elements, %d colors (%s)", len(elements), len(detected), strategy)
    return RecolorResponse(
        elements=elements,
        mapping=result.mapping,
        distances=result.distances,
        detected_colors=result.detected_colors,
    )
