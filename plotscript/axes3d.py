from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Self

from plotscript.axes_common import AxesCommon, AxesCommonData
from plotscript.axis import AxisData, LabelType, TickAxis
from plotscript.elements import PlotType
from plotscript.encoding import PlotWriter, format_float
from plotscript.options import LabelOption, PlotOption, Tick, TickOption


@dataclass
class Axes3D(AxesCommon):
    common: AxesCommonData = field(default_factory=AxesCommonData)
    z_axis: AxisData = field(default_factory=lambda: AxisData(TickAxis.Z))

    def surface(
        self,
        mat: Any,
        num_rows: int,
        num_cols: int,
        dimensions: tuple[float, float, float, float] | None = None,
        options: Iterable[PlotOption] | None = None,
    ) -> Self:
        self.common.plot_matrix(PlotType.PM3D, True, mat, num_rows, num_cols, dimensions, options)
        return self

    def points(self, x: Any, y: Any, z: Any, options: Iterable[PlotOption] | None = None) -> Self:
        self.common.plot3(PlotType.POINTS, x, y, z, options)
        return self

    def lines(self, x: Any, y: Any, z: Any, options: Iterable[PlotOption] | None = None) -> Self:
        self.common.plot3(PlotType.LINES, x, y, z, options)
        return self

    def lines_points(self, x: Any, y: Any, z: Any, options: Iterable[PlotOption] | None = None) -> Self:
        self.common.plot3(PlotType.LINES_POINTS, x, y, z, options)
        return self

    def set_view(self, pitch: float, yaw: float) -> Self:
        """Rotate the view; both angles in degrees."""
        self.common.set_directive("view", f"set view {format_float(pitch)},{format_float(yaw)}\n")
        return self

    def set_view_map(self) -> Self:
        self.common.set_directive("view", "set view map\n")
        return self

    def set_z_label(self, text: str, options: Iterable[LabelOption] | None = None) -> Self:
        self.common.set_label_common(LabelType.Z_LABEL, text, options)
        return self

    def set_z_ticks(
        self,
        tick_placement: tuple[float | None, int] | None,
        tick_options: Iterable[TickOption] | None = None,
        label_options: Iterable[LabelOption] | None = None,
    ) -> Self:
        self.z_axis.set_ticks(tick_placement, tick_options, label_options)
        return self

    def set_z_ticks_custom(
        self,
        ticks: Iterable[Tick],
        tick_options: Iterable[TickOption] | None = None,
        label_options: Iterable[LabelOption] | None = None,
    ) -> Self:
        self.z_axis.set_ticks_custom(ticks, tick_options, label_options)
        return self

    def set_z_range(self, min: float | None = None, max: float | None = None) -> Self:
        self.z_axis.set_range(min, max)
        return self

    def set_z_log(self, base: float | None) -> Self:
        self.z_axis.set_log(base)
        return self

    def write_out(self, writer: PlotWriter) -> None:
        if not self.common.elems:
            return
        self.common.write_out_commands(writer)
        self.z_axis.write_out_commands(writer)
        self.common.write_out_elements("splot", writer)
