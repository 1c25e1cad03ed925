from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Self

from plotscript.axes_common import AxesCommon, AxesCommonData
from plotscript.elements import PlotType
from plotscript.encoding import PlotWriter
from plotscript.options import PlotOption


@dataclass
class Axes2D(AxesCommon):
    common: AxesCommonData = field(default_factory=AxesCommonData)

    def lines(self, x: Any, y: Any, options: Iterable[PlotOption] | None = None) -> Self:
        self.common.plot2(PlotType.LINES, x, y, options)
        return self

    def points(self, x: Any, y: Any, options: Iterable[PlotOption] | None = None) -> Self:
        self.common.plot2(PlotType.POINTS, x, y, options)
        return self

    def lines_points(self, x: Any, y: Any, options: Iterable[PlotOption] | None = None) -> Self:
        self.common.plot2(PlotType.LINES_POINTS, x, y, options)
        return self

    def x_error_lines(self, x: Any, y: Any, x_error: Any, options: Iterable[PlotOption] | None = None) -> Self:
        self.common.plot3(PlotType.X_ERROR_LINES, x, y, x_error, options)
        return self

    def y_error_lines(self, x: Any, y: Any, y_error: Any, options: Iterable[PlotOption] | None = None) -> Self:
        self.common.plot3(PlotType.Y_ERROR_LINES, x, y, y_error, options)
        return self

    def fill_between(self, x: Any, y_lo: Any, y_hi: Any, options: Iterable[PlotOption] | None = None) -> Self:
        self.common.plot3(PlotType.FILL_BETWEEN, x, y_lo, y_hi, options)
        return self

    def boxes(self, x: Any, y: Any, options: Iterable[PlotOption] | None = None) -> Self:
        self.common.plot2(PlotType.BOXES, x, y, options)
        return self

    def image(
        self,
        mat: Any,
        num_rows: int,
        num_cols: int,
        dimensions: tuple[float, float, float, float] | None = None,
        options: Iterable[PlotOption] | None = None,
    ) -> Self:
        """Plot a row-major matrix as an image.

        ``dimensions`` is ``(x1, y1, x2, y2)``, the coordinates of the first
        and last cell centers; without it cells are unit spaced from 0.
        """
        self.common.plot_matrix(PlotType.IMAGE, False, mat, num_rows, num_cols, dimensions, options)
        return self

    def write_out(self, writer: PlotWriter) -> None:
        if not self.common.elems:
            return
        self.common.write_out_commands(writer)
        self.common.write_out_elements("plot", writer)
