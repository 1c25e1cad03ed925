from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from plotscript.adapters import coerce_scalar
from plotscript.encoding import PlotWriter, format_float, format_plain
from plotscript.errors import ErrorKind, PlotArgumentError
from plotscript.options import (
    AlignType,
    Coordinate,
    Font,
    Inward,
    LabelOption,
    Major,
    MajorScale,
    MarkerColor,
    MarkerSize,
    MarkerSymbol,
    Minor,
    MinorScale,
    Mirror,
    OnAxis,
    Rotate,
    TextAlign,
    TextColor,
    TextOffset,
    Tick,
    TickOption,
    char_to_symbol,
    first_option,
)


DEFAULT_TICK_SCALE = 0.5


class TickAxis(Enum):
    X = "x"
    Y = "y"
    Z = "z"
    CB = "cb"

    @property
    def axis_str(self) -> str:
        return self.value

    @property
    def tick_str(self) -> str:
        return f"{self.value}tics"

    @property
    def range_str(self) -> str:
        return f"{self.value}range"


class LabelType(Enum):
    X_LABEL = "xlabel"
    Y_LABEL = "ylabel"
    Z_LABEL = "zlabel"
    CB_LABEL = "cblabel"
    TITLE = "title"
    AXES_TICKS = "tics"


@dataclass(frozen=True)
class PositionedLabel:
    x: Coordinate
    y: Coordinate


def write_out_label_options(
    label_type: LabelType | PositionedLabel,
    options: Iterable[LabelOption] | None,
    writer: PlotWriter,
) -> None:
    options = tuple(options or ())
    is_label = isinstance(label_type, PositionedLabel)
    if is_label:
        writer.write_str(f" at {label_type.x},{label_type.y} front")

    offset = first_option(options, TextOffset)
    if offset is not None:
        writer.write_str(f" offset character {format_float(offset.x)},{format_float(offset.y)}")

    color = first_option(options, TextColor)
    if color is not None:
        writer.write_str(f' tc rgb "{color.color}"')

    font = first_option(options, Font)
    if font is not None:
        writer.write_str(f' font "{font.name},{format_plain(font.size)}"')

    rotate = first_option(options, Rotate)
    if rotate is not None:
        writer.write_str(f" rotate by {format_float(rotate.angle)}")

    if not is_label:
        return

    marker = first_option(options, MarkerSymbol)
    if marker is not None:
        writer.write_str(f" point pt {char_to_symbol(marker.symbol)}")
        marker_color = first_option(options, MarkerColor)
        if marker_color is not None:
            writer.write_str(f' lc rgb "{marker_color.color}"')
        marker_size = first_option(options, MarkerSize)
        if marker_size is not None:
            writer.write_str(f" ps {format_float(marker_size.size)}")

    align = first_option(options, TextAlign)
    if align is not None:
        if align.align is AlignType.LEFT:
            writer.write_str(" left")
        elif align.align is AlignType.RIGHT:
            writer.write_str(" right")
        else:
            writer.write_str(" center")


@dataclass
class AxisData:
    axis: TickAxis
    ticks_buf: PlotWriter = field(default_factory=PlotWriter)
    log_base: float | None = None
    mticks: int = 0
    min: float | None = None
    max: float | None = None

    def write_out_commands(self, writer: PlotWriter) -> None:
        name = self.axis.axis_str
        if self.log_base is not None:
            writer.write_str(f"set logscale {name} {format_float(self.log_base)}\n")
        else:
            writer.write_str(f"unset logscale {name}\n")

        tick_str = self.axis.tick_str
        if self.mticks > 0:
            # log axes place minor ticks per decade on their own
            count = "default" if self.log_base is not None else str(self.mticks + 1)
            writer.write_str(f"set m{tick_str} {count}\n")
        else:
            writer.write_str(f"unset m{tick_str}\n")

        lo = "*" if self.min is None else format_float(self.min)
        hi = "*" if self.max is None else format_float(self.max)
        writer.write_str(f"set {self.axis.range_str} [{lo}:{hi}]\n")

        writer.write_str(self.ticks_buf.text())

    def set_ticks(
        self,
        tick_placement: tuple[float | None, int] | None,
        tick_options: Iterable[TickOption] | None = None,
        label_options: Iterable[LabelOption] | None = None,
    ) -> None:
        if tick_placement is None:
            self.ticks_buf.clear()
            self.ticks_buf.write_str(f"unset {self.axis.tick_str}\n")
            self.mticks = 0
            return

        incr, mticks = tick_placement
        if incr is not None and not float(incr) > 0.0:
            raise PlotArgumentError(ErrorKind.INVALID_RANGE, f"'incr' must be positive, but is actually {incr}")
        if int(mticks) < 0:
            raise PlotArgumentError(ErrorKind.INVALID_RANGE, f"minor tick count must be >= 0, got {mticks}")

        buf = self.ticks_buf
        buf.clear()
        buf.write_str(f"set {self.axis.tick_str}")
        if incr is None:
            buf.write_str(" autofreq")
        else:
            buf.write_str(f" {format_float(incr)}")
        self._write_ticks_options(tick_options, label_options)
        buf.write_str("\n")
        self.mticks = int(mticks)

    def set_ticks_custom(
        self,
        ticks: Iterable[Tick],
        tick_options: Iterable[TickOption] | None = None,
        label_options: Iterable[LabelOption] | None = None,
    ) -> None:
        entries: list[str] = []
        for tick in ticks:
            if isinstance(tick, Minor):
                label, level = None, 1
            elif isinstance(tick, Major):
                label, level = tick.label, 0
            else:
                raise TypeError(f"expected Major or Minor tick, got {type(tick)!r}")
            prefix = f'"{label}" ' if label is not None else ""
            entries.append(f"{prefix}{format_float(coerce_scalar(tick.position))} {level}")

        # custom ticks replace the automatic minor ticks
        self.mticks = 0
        buf = self.ticks_buf
        buf.clear()
        buf.write_str(f"set {self.axis.tick_str} ({','.join(entries)})")
        self._write_ticks_options(tick_options, label_options)
        buf.write_str("\n")

    def _write_ticks_options(
        self,
        tick_options: Iterable[TickOption] | None,
        label_options: Iterable[LabelOption] | None,
    ) -> None:
        tick_options = tuple(tick_options or ())
        buf = self.ticks_buf
        write_out_label_options(LabelType.AXES_TICKS, label_options, buf)

        on_axis = first_option(tick_options, OnAxis)
        if on_axis is not None:
            buf.write_str(" axis" if on_axis.on_axis else " border")

        mirror = first_option(tick_options, Mirror)
        if mirror is not None:
            buf.write_str(" mirror" if mirror.mirror else " nomirror")

        inward = first_option(tick_options, Inward)
        if inward is not None:
            buf.write_str(" in" if inward.inward else " out")

        minor = first_option(tick_options, MinorScale)
        major = first_option(tick_options, MajorScale)
        minor_scale = DEFAULT_TICK_SCALE if minor is None else minor.scale
        major_scale = DEFAULT_TICK_SCALE if major is None else major.scale
        buf.write_str(f" scale {format_float(minor_scale)},{format_float(major_scale)}")

    def set_range(self, min: float | None = None, max: float | None = None) -> None:
        self.min = None if min is None else float(min)
        self.max = None if max is None else float(max)

    def set_log(self, base: float | None) -> None:
        self.log_base = None if base is None else float(base)
