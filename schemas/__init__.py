from .requests import MatchRequest, NormalizeColorRequest, RecolorRequest
from .responses import ErrorResponse, MatchResponse, RecolorResponse, SuccessResponse

__all__ = [
    "NormalizeColorRequest",
    "MatchRequest",
    "RecolorRequest",
    "SuccessResponse",
    "ErrorResponse",
    "MatchResponse",
    "RecolorResponse",
]
