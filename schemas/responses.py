from pydantic import BaseModel, Field
from typing import Dict, List, Optional

class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None

class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str

class MatchResponse(BaseModel):
    mapping: Dict[str, str] = Field(..., description="Detected color -> chosen palette color")
    distances: Optional[Dict[str, float]] = Field(None, description="Match distance per color (v2 and v3 only)")
    detected_colors: List[str]

class RecolorResponse(MatchResponse):
    elements: List[Dict[str, str]] = Field(..., description="Elements with paints rewritten through the mapping")
