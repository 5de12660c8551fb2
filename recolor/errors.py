"""Errors raised by the palette-matching batch driver."""


class RecolorError(ValueError):
    """Base class for recoloring configuration errors."""


class EmptyPaletteError(RecolorError):
    def __init__(self) -> None:
        super().__init__("Palette is empty")


class UnknownStrategyError(RecolorError):
    def __init__(self, strategy: str) -> None:
        super().__init__(f"Unknown matching strategy: {strategy!r}")
        self.strategy = strategy
