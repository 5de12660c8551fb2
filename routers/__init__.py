from .recolorTools import router as recolorTools_router

__all__ = ["recolorTools_router"]
