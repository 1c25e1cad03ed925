from __future__ import annotations

import itertools
import math
import unittest

import numpy as np

from plotscript.elements import PlotType, build_matrix_element, build_record_element
from plotscript.errors import PlotArgumentError
from plotscript.options import (
    BorderColor,
    Caption,
    Color,
    DashType,
    FillAlpha,
    FillRegion,
    FillRegionType,
    LineStyle,
    LineWidth,
    PointSize,
    PointSymbol,
)


RECORD = ' "-" binary endian=little record={rows} format="%float64" using {using}'
ARRAY = ' "-" binary endian=little array=({cols},{rows}) format="%float64" '


def _args(elem) -> str:
    return elem.args


class ShapeClassificationTests(unittest.TestCase):
    def test_classification_table(self) -> None:
        self.assertEqual(
            {t for t in PlotType if t.is_line},
            {PlotType.LINES, PlotType.LINES_POINTS, PlotType.X_ERROR_LINES, PlotType.Y_ERROR_LINES, PlotType.BOXES},
        )
        self.assertEqual(
            {t for t in PlotType if t.is_points},
            {PlotType.POINTS, PlotType.LINES_POINTS, PlotType.X_ERROR_LINES, PlotType.Y_ERROR_LINES},
        )
        self.assertEqual({t for t in PlotType if t.is_fill}, {PlotType.BOXES, PlotType.FILL_BETWEEN})


class RecordElementTests(unittest.TestCase):
    def test_lines_defaults(self) -> None:
        elem = build_record_element(PlotType.LINES, [[1, 2, 3], [4, 5, 6]])
        self.assertEqual(_args(elem), RECORD.format(rows=3, using="1:2") + ' with lines lw 1 lt 1 t ""')
        self.assertEqual(np.frombuffer(elem.data, dtype="<f8").tolist(), [1.0, 4.0, 2.0, 5.0, 3.0, 6.0])

    def test_shortest_sequence_bounds_rows(self) -> None:
        elem = build_record_element(PlotType.POINTS, [itertools.count(), [1.0, 2.0], (v for v in [7, 8, 9])])
        self.assertTrue(_args(elem).startswith(RECORD.format(rows=2, using="1:2:3")))
        self.assertEqual(np.frombuffer(elem.data, dtype="<f8").tolist(), [0.0, 1.0, 7.0, 1.0, 2.0, 8.0])

    def test_empty_series(self) -> None:
        elem = build_record_element(PlotType.LINES, [[], []])
        self.assertEqual(elem.data, b"")
        self.assertIn("record=0 ", _args(elem))

    def test_point_and_line_decorations(self) -> None:
        options = [
            PointSymbol("o"),
            PointSize(1.5),
            LineWidth(2.0),
            LineStyle(DashType.DASH),
            Color("red"),
            Caption("series"),
            Color("blue"),
        ]
        elem = build_record_element(PlotType.LINES_POINTS, [[1], [2]], options)
        self.assertEqual(
            _args(elem),
            RECORD.format(rows=1, using="1:2")
            + ' with linespoints lw 2.000000000000e0 lt 2 pt 6 ps 1.5 lc rgb "red" t "series"',
        )

    def test_points_skip_line_options_and_omit_unset_marker(self) -> None:
        elem = build_record_element(PlotType.POINTS, [[1], [2]], [LineWidth(3.0)])
        self.assertEqual(_args(elem), RECORD.format(rows=1, using="1:2") + ' with points t ""')

    def test_default_color_applies_only_without_color_option(self) -> None:
        plain = build_record_element(PlotType.LINES, [[1], [2]], default_color="black")
        self.assertIn(' lc rgb "black"', _args(plain))
        explicit = build_record_element(PlotType.LINES, [[1], [2]], [Color("#ff0000")], default_color="black")
        self.assertIn(' lc rgb "#ff0000"', _args(explicit))
        self.assertNotIn("black", _args(explicit))

    def test_one_shot_options_resolve_every_kind(self) -> None:
        options = (o for o in [Color("red"), Caption("c"), LineWidth(2.0)])
        elem = build_record_element(PlotType.LINES, [[1], [2]], options)
        self.assertEqual(
            _args(elem),
            RECORD.format(rows=1, using="1:2") + ' with lines lw 2.000000000000e0 lt 1 lc rgb "red" t "c"',
        )

    def test_invalid_point_symbol_fails(self) -> None:
        with self.assertRaises(PlotArgumentError):
            build_record_element(PlotType.POINTS, [[1], [2]], [PointSymbol("Q")])

    def test_fill_between_defaults_to_closed(self) -> None:
        elem = build_record_element(PlotType.FILL_BETWEEN, [[1], [2], [3]])
        self.assertEqual(
            _args(elem),
            RECORD.format(rows=1, using="1:2:3") + ' with filledcurves closed fill transparent solid  noborder t ""',
        )

    def test_fill_between_region_and_alpha(self) -> None:
        options = [FillRegion(FillRegionType.ABOVE), FillAlpha(0.25), FillRegion(FillRegionType.BELOW)]
        elem = build_record_element(PlotType.FILL_BETWEEN, [[1], [2], [3]], options)
        self.assertIn(" with filledcurves above fill transparent solid 2.500000000000e-1 noborder", _args(elem))

    def test_boxes_have_border_and_line_options(self) -> None:
        elem = build_record_element(PlotType.BOXES, [[1], [2]], [BorderColor("black"), FillRegion(FillRegionType.ABOVE)])
        self.assertEqual(
            _args(elem),
            RECORD.format(rows=1, using="1:2")
            + ' with boxes fill transparent solid  border rgb "black" lw 1 lt 1 t ""',
        )


class MatrixElementTests(unittest.TestCase):
    def test_short_input_is_nan_padded(self) -> None:
        elem = build_matrix_element(PlotType.IMAGE, False, [1.0, 2.0, 3.0], 2, 2)
        decoded = np.frombuffer(elem.data, dtype="<f8")
        self.assertEqual(decoded.size, 4)
        self.assertEqual(decoded[:3].tolist(), [1.0, 2.0, 3.0])
        self.assertTrue(math.isnan(decoded[3]))
        self.assertEqual(_args(elem), ARRAY.format(cols=2, rows=2) + ' with image t ""')

    def test_long_input_is_limited_to_cell_count(self) -> None:
        elem = build_matrix_element(PlotType.IMAGE, False, itertools.count(), 2, 3)
        self.assertEqual(np.frombuffer(elem.data, dtype="<f8").tolist(), [0.0, 1.0, 2.0, 3.0, 4.0, 5.0])

    def test_numpy_matrix_is_row_major(self) -> None:
        mat = np.arange(6, dtype=np.float64).reshape(2, 3)
        elem = build_matrix_element(PlotType.IMAGE, False, mat, 2, 3)
        self.assertEqual(np.frombuffer(elem.data, dtype="<f8").tolist(), mat.ravel().tolist())
        self.assertIn("array=(3,2)", _args(elem))

    def test_sized_array_spacing(self) -> None:
        elem = build_matrix_element(PlotType.IMAGE, False, range(6), 2, 3, (4.0, 10.0, 0.0, 0.0))
        self.assertEqual(
            _args(elem),
            ARRAY.format(cols=3, rows=2)
            + "origin=(0.000000000000e0,0.000000000000e0) dx=2.000000000000e0 dy=1.000000000000e1 "
            + ' with image t ""',
        )

    def test_single_row_or_column_uses_unit_spacing(self) -> None:
        one_row = build_matrix_element(PlotType.IMAGE, False, range(3), 1, 3, (0.0, 0.0, 4.0, 10.0))
        self.assertIn("dx=2.000000000000e0 dy=1 ", _args(one_row))
        one_col = build_matrix_element(PlotType.IMAGE, False, range(3), 3, 1, (0.0, 0.0, 4.0, 10.0))
        self.assertIn("dx=1 dy=5.000000000000e0 ", _args(one_col))

    def test_3d_origin_has_z_coordinate(self) -> None:
        elem = build_matrix_element(PlotType.PM3D, True, range(4), 2, 2, (0.0, 0.0, 1.0, 1.0), [Caption("s")])
        self.assertIn("origin=(0.000000000000e0,0.000000000000e0,0) ", _args(elem))
        self.assertTrue(_args(elem).endswith(' with pm3d t "s"'))


if __name__ == "__main__":
    unittest.main()
