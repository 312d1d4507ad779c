from __future__ import annotations
import os
from typing import Any

import numpy as np

from interner.errors import InternerConfigError
from interner.types.efficiency import EfficiencyMode


# Defaults
_DEFAULT_MODE = EfficiencyMode.TIME
_DEFAULT_WIDTH = 'uint32'


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def resolve_width(width: Any) -> np.dtype:
    """Normalize a numpy dtype-like (np.uint8, 'uint16', np.dtype(...)) to a dtype.

    Only integer dtypes can back raw symbol ids.
    """
    try:
        dtype = np.dtype(width)
    except TypeError as e:
        raise InternerConfigError(f"Invalid symbol width {width!r}: {e}") from e
    if dtype.kind not in ('u', 'i'):
        raise InternerConfigError(f"Symbol width must be an integer dtype, got {dtype.name}")
    return dtype


def get_default_mode() -> EfficiencyMode:
    return EfficiencyMode.parse(value_from_env('INTERNER_EFFICIENCY', _DEFAULT_MODE.value))


def get_default_width() -> np.dtype:
    return resolve_width(value_from_env('INTERNER_SYMBOL_WIDTH', _DEFAULT_WIDTH))
