from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Self

from plotscript.adapters import coerce_scalar
from plotscript.axis import AxisData, LabelType, PositionedLabel, TickAxis, write_out_label_options
from plotscript.elements import PlotElement, PlotType, build_matrix_element, build_record_element
from plotscript.encoding import PlotWriter, format_float
from plotscript.errors import ErrorKind, PlotArgumentError
from plotscript.options import (
    Coordinate,
    CubeHelix,
    Formula,
    Gray,
    LabelOption,
    PaletteType,
    PlotOption,
    Tick,
    TickOption,
)


FORMULA_LIMIT = 36


@dataclass(frozen=True)
class GridPosition:
    nrow: int
    ncol: int
    pos: int

    def origin(self) -> tuple[float, float]:
        width, height = self.size()
        x = (self.pos % self.ncol) * width
        y = 1.0 - (1.0 + self.pos // self.ncol) * height
        return (x, y)

    def size(self) -> tuple[float, float]:
        return (1.0 / self.ncol, 1.0 / self.nrow)


@dataclass(frozen=True)
class AbsolutePosition:
    x: float
    y: float


@dataclass
class AxesCommonData:
    elems: list[PlotElement] = field(default_factory=list)
    x_axis: AxisData = field(default_factory=lambda: AxisData(TickAxis.X))
    y_axis: AxisData = field(default_factory=lambda: AxisData(TickAxis.Y))
    cb_axis: AxisData = field(default_factory=lambda: AxisData(TickAxis.CB))
    position: GridPosition | AbsolutePosition | None = None
    _directives: dict[str, str] = field(default_factory=dict)
    _labels: list[str] = field(default_factory=list)

    @property
    def grid_rows(self) -> int:
        return self.position.nrow if isinstance(self.position, GridPosition) else 0

    @property
    def grid_cols(self) -> int:
        return self.position.ncol if isinstance(self.position, GridPosition) else 0

    @property
    def grid_pos(self) -> int | None:
        return self.position.pos if isinstance(self.position, GridPosition) else None

    def set_directive(self, key: str, line: str) -> None:
        self._directives[key] = line

    def add_label_directive(self, line: str) -> None:
        self._labels.append(line)

    def push(self, elem: PlotElement) -> None:
        self.elems.append(elem)

    def commands(self) -> str:
        c = PlotWriter()
        if isinstance(self.position, GridPosition):
            x, y = self.position.origin()
            w, h = self.position.size()
            c.write_str(f"set origin {format_float(x)},{format_float(y)}\n")
            c.write_str(f"set size {format_float(w)},{format_float(h)}\n")
        elif isinstance(self.position, AbsolutePosition):
            c.write_str(f"set origin {format_float(self.position.x)},{format_float(self.position.y)}\n")
        for line in self._directives.values():
            c.write_str(line)
        for line in self._labels:
            c.write_str(line)
        return c.text()

    def write_out_commands(self, writer: PlotWriter) -> None:
        writer.write_str(self.commands())
        self.x_axis.write_out_commands(writer)
        self.y_axis.write_out_commands(writer)
        self.cb_axis.write_out_commands(writer)

    def write_out_elements(self, cmd: str, writer: PlotWriter) -> None:
        # the renderer pairs the Nth directive with the Nth binary block
        writer.write_str(cmd + ",".join(e.args for e in self.elems) + "\n")
        for e in self.elems:
            writer.write_bytes(e.data)

    def set_label_common(
        self,
        label_type: LabelType | PositionedLabel,
        text: str,
        options: Iterable[LabelOption] | None = None,
    ) -> None:
        if isinstance(label_type, PositionedLabel):
            kind = "label"
        elif label_type is LabelType.AXES_TICKS or not isinstance(label_type, LabelType):
            raise PlotArgumentError(ErrorKind.INVALID_LABEL_TYPE, f"invalid label type: {label_type!r}")
        else:
            kind = label_type.value

        line = PlotWriter()
        line.write_str(f'set {kind} "{text}"')
        write_out_label_options(label_type, options, line)
        line.write_str("\n")

        rendered = line.text()
        if isinstance(label_type, PositionedLabel):
            self.add_label_directive(rendered)
        else:
            self.set_directive(kind, rendered)

    def plot2(
        self,
        plot_type: PlotType,
        x1: Any,
        x2: Any,
        options: Iterable[PlotOption] | None = None,
        *,
        default_color: str | None = None,
    ) -> None:
        self.push(build_record_element(plot_type, [x1, x2], options, default_color=default_color))

    def plot3(
        self,
        plot_type: PlotType,
        x1: Any,
        x2: Any,
        x3: Any,
        options: Iterable[PlotOption] | None = None,
        *,
        default_color: str | None = None,
    ) -> None:
        self.push(build_record_element(plot_type, [x1, x2, x3], options, default_color=default_color))

    def plot_matrix(
        self,
        plot_type: PlotType,
        is_3d: bool,
        mat: Any,
        num_rows: int,
        num_cols: int,
        dimensions: tuple[float, float, float, float] | None = None,
        options: Iterable[PlotOption] | None = None,
        *,
        default_color: str | None = None,
    ) -> None:
        self.push(
            build_matrix_element(
                plot_type, is_3d, mat, num_rows, num_cols, dimensions, options, default_color=default_color
            )
        )


class AxesCommon:
    common: AxesCommonData

    def set_pos_grid(self, nrow: int, ncol: int, pos: int) -> Self:
        """Place the axes in cell ``pos`` of an ``nrow`` x ``ncol`` grid.

        Cells count from the top-left corner, left to right then down,
        starting at 0.
        """
        if not nrow > 0:
            raise PlotArgumentError(ErrorKind.INVALID_RANGE, f"nrow must be > 0, got {nrow}")
        if not ncol > 0:
            raise PlotArgumentError(ErrorKind.INVALID_RANGE, f"ncol must be > 0, got {ncol}")
        if not 0 <= pos < nrow * ncol:
            raise PlotArgumentError(ErrorKind.INVALID_RANGE, f"pos must be in [0, {nrow * ncol}), got {pos}")
        self.common.position = GridPosition(int(nrow), int(ncol), int(pos))
        return self

    def set_pos(self, x: float, y: float) -> Self:
        self.common.position = AbsolutePosition(float(x), float(y))
        return self

    def set_size(self, w: float, h: float) -> Self:
        self.common.set_directive("size", f"set size {format_float(w)},{format_float(h)}\n")
        return self

    def set_aspect_ratio(self, ratio: float | None) -> Self:
        if ratio is None:
            line = "set size noratio\n"
        else:
            line = f"set size ratio {format_float(ratio)}\n"
        self.common.set_directive("size ratio", line)
        return self

    def set_x_label(self, text: str, options: Iterable[LabelOption] | None = None) -> Self:
        self.common.set_label_common(LabelType.X_LABEL, text, options)
        return self

    def set_y_label(self, text: str, options: Iterable[LabelOption] | None = None) -> Self:
        self.common.set_label_common(LabelType.Y_LABEL, text, options)
        return self

    def set_cb_label(self, text: str, options: Iterable[LabelOption] | None = None) -> Self:
        self.common.set_label_common(LabelType.CB_LABEL, text, options)
        return self

    def set_title(self, text: str, options: Iterable[LabelOption] | None = None) -> Self:
        self.common.set_label_common(LabelType.TITLE, text, options)
        return self

    def label(self, text: str, x: Coordinate, y: Coordinate, options: Iterable[LabelOption] | None = None) -> Self:
        self.common.set_label_common(PositionedLabel(x, y), text, options)
        return self

    def set_x_ticks(
        self,
        tick_placement: tuple[float | None, int] | None,
        tick_options: Iterable[TickOption] | None = None,
        label_options: Iterable[LabelOption] | None = None,
    ) -> Self:
        """Configure the X axis ticks.

        Pass ``None`` to hide them. Otherwise ``(increment, minor_count)``:
        the major tick spacing in axis units (``None`` for automatic) and the
        number of minor ticks between majors.
        """
        self.common.x_axis.set_ticks(tick_placement, tick_options, label_options)
        return self

    def set_y_ticks(
        self,
        tick_placement: tuple[float | None, int] | None,
        tick_options: Iterable[TickOption] | None = None,
        label_options: Iterable[LabelOption] | None = None,
    ) -> Self:
        self.common.y_axis.set_ticks(tick_placement, tick_options, label_options)
        return self

    def set_cb_ticks(
        self,
        tick_placement: tuple[float | None, int] | None,
        tick_options: Iterable[TickOption] | None = None,
        label_options: Iterable[LabelOption] | None = None,
    ) -> Self:
        self.common.cb_axis.set_ticks(tick_placement, tick_options, label_options)
        return self

    def set_x_ticks_custom(
        self,
        ticks: Iterable[Tick],
        tick_options: Iterable[TickOption] | None = None,
        label_options: Iterable[LabelOption] | None = None,
    ) -> Self:
        self.common.x_axis.set_ticks_custom(ticks, tick_options, label_options)
        return self

    def set_y_ticks_custom(
        self,
        ticks: Iterable[Tick],
        tick_options: Iterable[TickOption] | None = None,
        label_options: Iterable[LabelOption] | None = None,
    ) -> Self:
        self.common.y_axis.set_ticks_custom(ticks, tick_options, label_options)
        return self

    def set_cb_ticks_custom(
        self,
        ticks: Iterable[Tick],
        tick_options: Iterable[TickOption] | None = None,
        label_options: Iterable[LabelOption] | None = None,
    ) -> Self:
        self.common.cb_axis.set_ticks_custom(ticks, tick_options, label_options)
        return self

    def set_x_range(self, min: float | None = None, max: float | None = None) -> Self:
        self.common.x_axis.set_range(min, max)
        return self

    def set_y_range(self, min: float | None = None, max: float | None = None) -> Self:
        self.common.y_axis.set_range(min, max)
        return self

    def set_cb_range(self, min: float | None = None, max: float | None = None) -> Self:
        self.common.cb_axis.set_range(min, max)
        return self

    def set_x_log(self, base: float | None) -> Self:
        self.common.x_axis.set_log(base)
        return self

    def set_y_log(self, base: float | None) -> Self:
        self.common.y_axis.set_log(base)
        return self

    def set_cb_log(self, base: float | None) -> Self:
        self.common.cb_axis.set_log(base)
        return self

    def set_palette(self, palette: PaletteType) -> Self:
        if isinstance(palette, Gray):
            if not palette.gamma > 0.0:
                raise PlotArgumentError(ErrorKind.INVALID_PALETTE_PARAMETER, "gamma must be positive")
            line = f"set palette gray gamma {format_float(palette.gamma)}\n"
        elif isinstance(palette, Formula):
            for name, value in (("r", palette.r), ("g", palette.g), ("b", palette.b)):
                if not float(value).is_integer() or not -FORMULA_LIMIT <= value <= FORMULA_LIMIT:
                    raise PlotArgumentError(
                        ErrorKind.INVALID_PALETTE_PARAMETER,
                        f"invalid {name} formula {value}; must be an integer in [-{FORMULA_LIMIT}, {FORMULA_LIMIT}]",
                    )
            line = f"set palette rgbformulae {int(palette.r)},{int(palette.g)},{int(palette.b)}\n"
        elif isinstance(palette, CubeHelix):
            if not palette.saturation >= 0.0:
                raise PlotArgumentError(ErrorKind.INVALID_PALETTE_PARAMETER, "saturation must be non-negative")
            if not palette.gamma > 0.0:
                raise PlotArgumentError(ErrorKind.INVALID_PALETTE_PARAMETER, "gamma must be positive")
            line = (
                f"set palette cubehelix start {format_float(palette.start)}"
                f" cycles {format_float(palette.cycles)}"
                f" saturation {format_float(palette.saturation)}"
                f" gamma {format_float(palette.gamma)}\n"
            )
        else:
            raise TypeError(f"unsupported palette: {palette!r}")
        self.common.set_directive("palette", line)
        return self

    def set_custom_palette(self, palette_generator: Iterable[tuple[Any, Any, Any, Any]]) -> Self:
        """Set a palette from ``(gray, r, g, b)`` control points.

        At least one point is required, gray levels must be non-decreasing and
        all values range from 0 to 1.
        """
        entries: list[str] = []
        old_x: float | None = None
        for i, point in enumerate(palette_generator):
            x, r, g, b = (coerce_scalar(v) for v in point)
            if old_x is not None and not x >= old_x:
                raise PlotArgumentError(
                    ErrorKind.NON_MONOTONIC_SEQUENCE,
                    f"gray levels must be non-decreasing: point {i} has {x} after {old_x}",
                )
            old_x = x
            entries.append(" ".join(format_float(v) for v in (x, r, g, b)))
        if not entries:
            raise PlotArgumentError(ErrorKind.EMPTY_GENERATOR, "need at least 1 element in the palette generator")
        self.common.set_directive("palette", f"set palette defined ({','.join(entries)})\n")
        return self
