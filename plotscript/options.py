from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from plotscript.encoding import format_float
from plotscript.errors import ErrorKind, PlotArgumentError


class DashType(Enum):
    SOLID = "solid"
    SMALL_DOT = "small-dot"
    DOT = "dot"
    DASH = "dash"
    DOT_DASH = "dot-dash"
    DOT_DOT_DASH = "dot-dot-dash"

    def to_int(self) -> int:
        return _DASH_INDEX[self]


_DASH_INDEX = {
    DashType.SOLID: 1,
    DashType.SMALL_DOT: 0,
    DashType.DASH: 2,
    DashType.DOT: 3,
    DashType.DOT_DASH: 4,
    DashType.DOT_DOT_DASH: 5,
}


class AlignType(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class FillRegionType(Enum):
    ABOVE = "above"
    BELOW = "below"
    BETWEEN = "closed"


# plot options


@dataclass(frozen=True)
class PlotOption:
    pass


@dataclass(frozen=True)
class PointSymbol(PlotOption):
    symbol: str


@dataclass(frozen=True)
class PointSize(PlotOption):
    size: float


@dataclass(frozen=True)
class Caption(PlotOption):
    text: str


@dataclass(frozen=True)
class LineWidth(PlotOption):
    width: float


@dataclass(frozen=True)
class LineStyle(PlotOption):
    dash: DashType


@dataclass(frozen=True)
class Color(PlotOption):
    color: str


@dataclass(frozen=True)
class FillAlpha(PlotOption):
    alpha: float


@dataclass(frozen=True)
class FillRegion(PlotOption):
    region: FillRegionType


@dataclass(frozen=True)
class BorderColor(PlotOption):
    color: str


# label options


@dataclass(frozen=True)
class LabelOption:
    pass


@dataclass(frozen=True)
class TextOffset(LabelOption):
    x: float
    y: float


@dataclass(frozen=True)
class TextColor(LabelOption):
    color: str


@dataclass(frozen=True)
class Font(LabelOption):
    name: str
    size: float


@dataclass(frozen=True)
class Rotate(LabelOption):
    angle: float


@dataclass(frozen=True)
class TextAlign(LabelOption):
    align: AlignType


@dataclass(frozen=True)
class MarkerSymbol(LabelOption):
    symbol: str


@dataclass(frozen=True)
class MarkerColor(LabelOption):
    color: str


@dataclass(frozen=True)
class MarkerSize(LabelOption):
    size: float


# tick options


@dataclass(frozen=True)
class TickOption:
    pass


@dataclass(frozen=True)
class OnAxis(TickOption):
    on_axis: bool


@dataclass(frozen=True)
class Mirror(TickOption):
    mirror: bool


@dataclass(frozen=True)
class Inward(TickOption):
    inward: bool


@dataclass(frozen=True)
class MinorScale(TickOption):
    scale: float


@dataclass(frozen=True)
class MajorScale(TickOption):
    scale: float


# ticks


@dataclass(frozen=True)
class Major:
    """Major tick at ``position``.

    ``label`` may contain one printf-style float placeholder which the
    renderer replaces with the tick position.
    """

    position: Any
    label: str | None = None


@dataclass(frozen=True)
class Minor:
    position: Any


Tick = Major | Minor


# coordinates


@dataclass(frozen=True)
class Graph:
    value: float

    def __str__(self) -> str:
        return f"graph {format_float(self.value)}"


@dataclass(frozen=True)
class Axis:
    value: float

    def __str__(self) -> str:
        return f"first {format_float(self.value)}"


Coordinate = Graph | Axis


# palettes


@dataclass(frozen=True)
class Gray:
    gamma: float


@dataclass(frozen=True)
class Formula:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class CubeHelix:
    start: float
    cycles: float
    saturation: float
    gamma: float


PaletteType = Gray | Formula | CubeHelix


T = TypeVar("T")


def first_option(options: Iterable[Any] | None, kind: type[T]) -> T | None:
    """Return the first entry of ``options`` that is a ``kind``, or ``None``.

    Later entries of the same kind are ignored. A renderer that looks up
    several kinds must hold ``options`` in a re-iterable collection.
    """
    if not options:
        return None
    for opt in options:
        if isinstance(opt, kind):
            return opt
    return None


_SYMBOLS = ".+x*sSoOtTdDrR"


def char_to_symbol(symbol: str) -> int:
    if not isinstance(symbol, str) or len(symbol) != 1 or symbol not in _SYMBOLS:
        raise PlotArgumentError(ErrorKind.INVALID_SYMBOL, f"invalid symbol {symbol!r}")
    return _SYMBOLS.index(symbol)
