from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from plotscript.adapters import iter_scalars
from plotscript.encoding import PlotWriter, encode_float64, format_float, format_plain
from plotscript.options import (
    BorderColor,
    Caption,
    Color,
    FillAlpha,
    FillRegion,
    FillRegionType,
    LineStyle,
    LineWidth,
    PlotOption,
    PointSize,
    PointSymbol,
    char_to_symbol,
    first_option,
)


LOGGER = logging.getLogger(__name__)


class PlotType(Enum):
    LINES = "lines"
    POINTS = "points"
    LINES_POINTS = "linespoints"
    X_ERROR_LINES = "xerrorlines"
    Y_ERROR_LINES = "yerrorlines"
    FILL_BETWEEN = "filledcurves"
    BOXES = "boxes"
    PM3D = "pm3d"
    IMAGE = "image"

    @property
    def is_line(self) -> bool:
        return self in _LINE_TYPES

    @property
    def is_points(self) -> bool:
        return self in _POINT_TYPES

    @property
    def is_fill(self) -> bool:
        return self in _FILL_TYPES


_LINE_TYPES = frozenset(
    {PlotType.LINES, PlotType.LINES_POINTS, PlotType.X_ERROR_LINES, PlotType.Y_ERROR_LINES, PlotType.BOXES}
)
_POINT_TYPES = frozenset({PlotType.POINTS, PlotType.LINES_POINTS, PlotType.X_ERROR_LINES, PlotType.Y_ERROR_LINES})
_FILL_TYPES = frozenset({PlotType.BOXES, PlotType.FILL_BETWEEN})


@dataclass(frozen=True)
class PlotElement:
    args: str
    data: bytes


@dataclass(frozen=True)
class RecordSource:
    pass


@dataclass(frozen=True)
class ArraySource:
    pass


@dataclass(frozen=True)
class SizedArraySource:
    x1: float
    y1: float
    x2: float
    y2: float


DataSourceType = RecordSource | ArraySource | SizedArraySource


def build_record_element(
    plot_type: PlotType,
    columns: Sequence[Any],
    options: Iterable[PlotOption] | None = None,
    *,
    default_color: str | None = None,
) -> PlotElement:
    # the shortest column bounds the row count
    iterators = [iter_scalars(col, label=f"column {i + 1}") for i, col in enumerate(columns)]
    rows = list(zip(*iterators))
    num_cols = len(columns)
    payload = encode_float64(np.asarray(rows, dtype=np.float64).reshape(len(rows), num_cols))
    args = write_common_commands(
        num_rows=len(rows),
        num_cols=num_cols,
        plot_type=plot_type,
        source_type=RecordSource(),
        is_3d=False,
        options=options,
        default_color=default_color,
    )
    LOGGER.debug("built %s record element: rows=%d cols=%d", plot_type.value, len(rows), num_cols)
    return PlotElement(args=args, data=payload)


def build_matrix_element(
    plot_type: PlotType,
    is_3d: bool,
    mat: Any,
    num_rows: int,
    num_cols: int,
    dimensions: tuple[float, float, float, float] | None = None,
    options: Iterable[PlotOption] | None = None,
    *,
    default_color: str | None = None,
) -> PlotElement:
    """Encode up to ``num_rows * num_cols`` values of ``mat`` in row-major order.

    Short input is padded with NaN. ``dimensions`` is ``(x1, y1, x2, y2)``, the
    bounding box used to derive cell spacing.
    """
    if num_rows < 0 or num_cols < 0:
        raise ValueError("num_rows and num_cols must be >= 0")
    cells = num_rows * num_cols
    values = np.fromiter(itertools.islice(iter_scalars(mat, label="mat"), cells), dtype=np.float64)
    if values.size < cells:
        LOGGER.warning("matrix input has %d of %d cells; padding with NaN", values.size, cells)
        values = np.concatenate([values, np.full(cells - values.size, np.nan, dtype=np.float64)])

    if dimensions is None:
        source_type: DataSourceType = ArraySource()
    else:
        x1, y1, x2, y2 = (float(v) for v in dimensions)
        source_type = SizedArraySource(x1, y1, x2, y2)

    args = write_common_commands(
        num_rows=num_rows,
        num_cols=num_cols,
        plot_type=plot_type,
        source_type=source_type,
        is_3d=is_3d,
        options=options,
        default_color=default_color,
    )
    LOGGER.debug("built %s matrix element: %dx%d", plot_type.value, num_rows, num_cols)
    return PlotElement(args=args, data=encode_float64(values))


def write_common_commands(
    *,
    num_rows: int,
    num_cols: int,
    plot_type: PlotType,
    source_type: DataSourceType,
    is_3d: bool,
    options: Iterable[PlotOption] | None,
    default_color: str | None = None,
) -> str:
    options = tuple(options or ())
    args = PlotWriter()
    if isinstance(source_type, RecordSource):
        using = ":".join(str(i) for i in range(1, num_cols + 1))
        args.write_str(f' "-" binary endian=little record={num_rows} format="%float64" using {using}')
    else:
        args.write_str(f' "-" binary endian=little array=({num_cols},{num_rows}) format="%float64" ')
        if isinstance(source_type, SizedArraySource):
            _write_sized_array_geometry(args, source_type, num_rows, num_cols, is_3d)

    args.write_str(f" with {plot_type.value}")

    if plot_type.is_fill:
        if plot_type is PlotType.FILL_BETWEEN:
            region = first_option(options, FillRegion)
            args.write_str(f" {(region.region if region is not None else FillRegionType.BETWEEN).value}")

        args.write_str(" fill transparent solid ")
        alpha = first_option(options, FillAlpha)
        if alpha is not None:
            args.write_str(format_float(alpha.alpha))

        if plot_type.is_line:
            args.write_str(" border")
            border = first_option(options, BorderColor)
            if border is not None:
                args.write_str(f' rgb "{border.color}"')
        else:
            args.write_str(" noborder")

    if plot_type.is_line:
        write_line_options(args, options)

    if plot_type.is_points:
        symbol = first_option(options, PointSymbol)
        if symbol is not None:
            args.write_str(f" pt {char_to_symbol(symbol.symbol)}")
        size = first_option(options, PointSize)
        if size is not None:
            args.write_str(f" ps {format_plain(size.size)}")

    write_color_options(args, options, default_color)

    caption = first_option(options, Caption)
    args.write_str(f' t "{caption.text if caption is not None else ""}"')
    return args.text()


def _write_sized_array_geometry(
    args: PlotWriter,
    source: SizedArraySource,
    num_rows: int,
    num_cols: int,
    is_3d: bool,
) -> None:
    x1, x2 = sorted((source.x1, source.x2))
    y1, y2 = sorted((source.y1, source.y2))
    args.write_str(f"origin=({format_float(x1)},{format_float(y1)}")
    if is_3d:
        args.write_str(",0")
    args.write_str(") ")
    if num_cols > 1:
        args.write_str(f"dx={format_float((x2 - x1) / (num_cols - 1.0))} ")
    else:
        args.write_str("dx=1 ")
    if num_rows > 1:
        args.write_str(f"dy={format_float((y2 - y1) / (num_rows - 1.0))} ")
    else:
        args.write_str("dy=1 ")


def write_line_options(args: PlotWriter, options: Sequence[PlotOption] | None) -> None:
    width = first_option(options, LineWidth)
    args.write_str(f" lw {format_float(width.width) if width is not None else '1'}")
    style = first_option(options, LineStyle)
    args.write_str(f" lt {style.dash.to_int() if style is not None else 1}")


def write_color_options(args: PlotWriter, options: Sequence[PlotOption] | None, default: str | None = None) -> None:
    color = first_option(options, Color)
    resolved = color.color if color is not None else default
    if resolved is not None:
        args.write_str(f' lc rgb "{resolved}"')
