from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_RANGE = "invalid-range"
    INVALID_PALETTE_PARAMETER = "invalid-palette-parameter"
    INVALID_SYMBOL = "invalid-symbol"
    EMPTY_GENERATOR = "empty-generator"
    NON_MONOTONIC_SEQUENCE = "non-monotonic-sequence"
    INVALID_LABEL_TYPE = "invalid-label-type"


class PlotDataError(ValueError):
    pass


class PlotArgumentError(ValueError):
    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
