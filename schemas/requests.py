from pydantic import BaseModel, Field
from typing import Dict, List, Literal

class NormalizeColorRequest(BaseModel):
    code: str = Field(..., description="The paint token to normalize (hex, named color, rgb()/rgba())")

class MatchRequest(BaseModel):
    colors: List[str] = Field(..., description="Detected colors to map onto the palette")
    palette: List[str] = Field(..., description="Palette of #rrggbb colors; order decides ties")
    strategy: Literal["v1", "v2", "v3"] = Field("v2", description="v1 RGB distance, v2 LAB Delta E, v3 hue priority")

class RecolorRequest(BaseModel):
    elements: List[Dict[str, str]] = Field(..., description="Attribute maps (fill, stroke, stop-color, style) of each element")
    palette: List[str] = Field(..., description="Palette of #rrggbb colors; order decides ties")
