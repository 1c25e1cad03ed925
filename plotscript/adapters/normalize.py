from __future__ import annotations

from collections.abc import Iterable, Iterator
from decimal import Decimal
from typing import Any

import numpy as np

from plotscript.errors import PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def coerce_scalar(value: Any) -> float:
    # missing samples render as gaps
    if value is None:
        return float("nan")
    if isinstance(value, float):
        return value
    if torch is not None and isinstance(value, torch.Tensor):
        if value.numel() != 1:
            raise PlotDataError(f"expected a scalar tensor, got shape {tuple(value.shape)}")
        return float(value.detach().cpu().to(torch.float64).item())
    if isinstance(value, np.ndarray):
        if value.size != 1:
            raise PlotDataError(f"expected a scalar array, got shape {value.shape}")
        return float(value.reshape(-1)[0])
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (str, bytes, bytearray)):
        raise PlotDataError(f"non-numeric value: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise PlotDataError(f"non-numeric value: {value!r}") from exc


def iter_scalars(values: Any, *, label: str = "values") -> Iterator[float]:
    """Lazily yield floats from a caller-supplied sequence.

    Arrays and tensors of any rank are flattened in row-major order.
    """
    if torch is not None and isinstance(values, torch.Tensor):
        tensor = values.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return iter(tensor.to(torch.float64).reshape(-1).numpy().tolist())

    if pd is not None and isinstance(values, (pd.Series, pd.DataFrame)):
        return iter(_coerce_ndarray(values.to_numpy(), label=label).tolist())

    if isinstance(values, np.ndarray):
        return iter(_coerce_ndarray(values, label=label).tolist())

    if isinstance(values, (str, bytes, bytearray)) or not isinstance(values, Iterable):
        raise PlotDataError(f"unsupported {label} input type: {type(values)!r}")

    return (coerce_scalar(v) for v in values)


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    flat = np.ravel(arr, order="C")
    if flat.dtype.kind in {"i", "u", "f", "b"}:
        return flat.astype(np.float64, copy=False)

    out = np.empty(flat.shape[0], dtype=np.float64)
    for i, raw in enumerate(flat.tolist()):
        try:
            out[i] = coerce_scalar(raw)
        except PlotDataError as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
