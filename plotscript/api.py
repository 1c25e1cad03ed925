from __future__ import annotations

from plotscript.config import ScriptConfig
from plotscript.figure import Figure


def figure(
    terminal: str | None = None,
    output_file: str | None = None,
    *,
    title: str | None = None,
    config: ScriptConfig | None = None,
) -> Figure:
    if output_file is not None and terminal is None:
        raise ValueError("output_file requires an explicit terminal")
    cfg = ScriptConfig.from_env() if config is None else config
    fig = Figure(config=cfg, title=title)
    if terminal is not None:
        fig.set_terminal(terminal, output_file)
    return fig
