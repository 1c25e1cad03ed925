from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from plotscript.axes2d import Axes2D
from plotscript.axes3d import Axes3D
from plotscript.config import ScriptConfig, script_codec
from plotscript.encoding import PlotWriter


LOGGER = logging.getLogger(__name__)


@dataclass
class Figure:
    config: ScriptConfig = field(default_factory=ScriptConfig)
    title: str | None = None
    terminal: str | None = None
    output_file: str | None = None
    enhanced_text: bool | None = None
    _axes: list[Axes2D | Axes3D] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.terminal is None:
            self.terminal = self.config.terminal
        if self.enhanced_text is None:
            self.enhanced_text = self.config.enhanced_text

    def axes2d(self) -> Axes2D:
        ax = Axes2D()
        self._axes.append(ax)
        return ax

    def axes3d(self) -> Axes3D:
        ax = Axes3D()
        self._axes.append(ax)
        return ax

    def set_terminal(self, terminal: str, output_file: str | None = None) -> "Figure":
        if not terminal.strip():
            raise ValueError("terminal must be a non-empty string")
        self.terminal = terminal
        self.output_file = output_file
        return self

    def set_title(self, title: str | None) -> "Figure":
        self.title = title
        return self

    def set_enhanced_text(self, enhanced: bool) -> "Figure":
        self.enhanced_text = bool(enhanced)
        return self

    def clear_axes(self) -> "Figure":
        self._axes.clear()
        return self

    @property
    def axes(self) -> tuple[Axes2D | Axes3D, ...]:
        return tuple(self._axes)

    def write_script(self, writer: PlotWriter) -> None:
        if script_codec(writer.encoding) != self.config.codec:
            raise ValueError(
                f"writer encodes text as {writer.encoding!r} but the script declares {self.config.encoding!r}"
            )
        writer.write_str(f"set encoding {self.config.encoding}\n")
        if self.terminal is not None:
            writer.write_str(f"set terminal {self.terminal}\n")
        if self.output_file is not None:
            writer.write_str(f'set output "{self.output_file}"\n')
        writer.write_str("set termoption enhanced\n" if self.enhanced_text else "set termoption noenhanced\n")

        if self.title is not None:
            writer.write_str(f'set multiplot title "{self.title}"\n')
        else:
            writer.write_str("set multiplot\n")

        for ax in self._axes:
            writer.write_str("reset\n")
            ax.write_out(writer)

        writer.write_str("unset multiplot\n")

    def to_script(self) -> bytes:
        writer = PlotWriter(self.config.codec)
        self.write_script(writer)
        LOGGER.debug("assembled script for %d axes (%d bytes)", len(self._axes), len(writer))
        return writer.getvalue()

    def save_script(self, path: str | Path) -> Path:
        out = Path(path)
        out.write_bytes(self.to_script())
        LOGGER.info("wrote plot script to %s", out)
        return out
