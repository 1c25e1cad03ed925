from plotscript.api import figure
from plotscript.axes2d import Axes2D
from plotscript.axes3d import Axes3D
from plotscript.config import ScriptConfig
from plotscript.encoding import PlotWriter, format_float
from plotscript.errors import ErrorKind, PlotArgumentError, PlotDataError
from plotscript.figure import Figure
from plotscript.options import char_to_symbol, first_option

__all__ = [
    "Axes2D",
    "Axes3D",
    "ErrorKind",
    "Figure",
    "PlotArgumentError",
    "PlotDataError",
    "PlotWriter",
    "ScriptConfig",
    "char_to_symbol",
    "figure",
    "first_option",
    "format_float",
]
