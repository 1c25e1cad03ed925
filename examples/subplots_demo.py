from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from plotscript import figure
from plotscript.options import (
    AlignType,
    Caption,
    Color,
    CubeHelix,
    FillAlpha,
    Graph,
    LineWidth,
    Major,
    MarkerSymbol,
    Minor,
    Mirror,
    PointSymbol,
    TextAlign,
)


def build_script(terminal: str, output: str) -> bytes:
    fig = figure(terminal, output, title="plotscript demo")

    x = np.linspace(0.0, 2.0 * np.pi, 121, dtype=np.float64)
    y = np.sin(x)
    left = fig.axes2d().set_pos_grid(1, 2, 0).set_title("Sine").set_x_label("phase").set_y_label("value")
    left.fill_between(x, y - 0.2, y + 0.2, [FillAlpha(0.3), Color("#6eaaff"), Caption("band")])
    left.lines(x, y, [LineWidth(2.0), Color("#ffa500"), Caption("sin(x)")])
    left.points(x[::10], y[::10], [PointSymbol("O"), Caption("samples")])
    left.set_x_ticks_custom(
        [Major(0.0, "0"), Minor(np.pi / 2), Major(np.pi, "π"), Minor(1.5 * np.pi), Major(2.0 * np.pi, "2π")],
        [Mirror(False)],
    )
    left.label("peak", Graph(0.25), Graph(0.9), [MarkerSymbol("x"), TextAlign(AlignType.LEFT)])

    grid = np.linspace(-1.0, 1.0, 32, dtype=np.float64)
    xx, yy = np.meshgrid(grid, grid)
    zz = np.exp(-(xx**2 + yy**2) * 3.0)
    right = fig.axes3d().set_pos_grid(1, 2, 1).set_title("Gaussian")
    right.surface(zz, 32, 32, (-1.0, -1.0, 1.0, 1.0), [Caption("")])
    right.set_palette(CubeHelix(0.5, -1.5, 1.0, 1.0)).set_view(60.0, 30.0).set_z_range(0.0, None)

    return fig.to_script()


def main() -> None:
    parser = argparse.ArgumentParser(description="Write a two-panel demo plot script.")
    parser.add_argument("script", type=Path, help="Where to write the script.")
    parser.add_argument("--terminal", default="pngcairo size 1280,480")
    parser.add_argument("--output", default="demo.png")
    args = parser.parse_args()
    args.script.write_bytes(build_script(args.terminal, args.output))
    print(f"wrote {args.script}; render with: gnuplot {args.script}")


if __name__ == "__main__":
    main()
