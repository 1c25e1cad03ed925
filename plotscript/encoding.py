from __future__ import annotations

import math
from typing import Any

import numpy as np

from plotscript.adapters import coerce_scalar


LE_FLOAT64 = np.dtype("<f8")


def format_float(value: float) -> str:
    v = float(value)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "inf" if v > 0 else "-inf"
    mantissa, exponent = f"{v:.12e}".split("e")
    return f"{mantissa}e{int(exponent)}"


def format_plain(value: float) -> str:
    v = float(value)
    if math.isfinite(v) and v.is_integer() and abs(v) < 1e16:
        return str(int(v))
    return repr(v)


def encode_float64(values: Any) -> bytes:
    return np.asarray(values, dtype=np.float64).astype(LE_FLOAT64, copy=False).tobytes()


class PlotWriter:
    """Append-only byte buffer for directives and inline data.

    Text is encoded with ``encoding``; the script header has to announce the
    same encoding to the renderer.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self._buf = bytearray()

    def write_str(self, text: str) -> "PlotWriter":
        self._buf += text.encode(self.encoding)
        return self

    def write_bytes(self, data: bytes | bytearray) -> "PlotWriter":
        self._buf += data
        return self

    def write_data(self, value: Any) -> "PlotWriter":
        self._buf += encode_float64(coerce_scalar(value))
        return self

    def clear(self) -> None:
        del self._buf[:]

    def getvalue(self) -> bytes:
        return bytes(self._buf)

    def text(self) -> str:
        return self._buf.decode(self.encoding)

    def __len__(self) -> int:
        return len(self._buf)

    def __bool__(self) -> bool:
        return len(self._buf) > 0
