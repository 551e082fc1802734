"""
Central precision switch for the number modules.
The REPL (or tests) may call set_dps(value) / set_tolerance(value); all
other modules should only *read* the current values through the getters.

dps       – mpmath working precision used for accumulations (Stats) and
            for evaluating constants before they are rounded to float.
tolerance – default absolute/relative tolerance of ``Complex.is_close``.
"""
from typing import List
from mpmath import mp

_PRESETS: List[int] = [15, 30, 50, 100]   # default + 3 bigger ones
_CURRENT = 50
_TOLERANCE = 1e-9

mp.dps = _CURRENT


def get_dps() -> int:
    """Return the active decimal-places setting."""
    return _CURRENT


def set_dps(value: int) -> None:
    """Set global precision if value is one of the approved presets."""
    global _CURRENT
    if value not in _PRESETS:
        raise ValueError(f"dps {value} not allowed; choose one of {_PRESETS}")
    _CURRENT = value
    mp.dps = value


def presets() -> List[int]:
    return _PRESETS.copy()


def get_tolerance() -> float:
    return _TOLERANCE


def set_tolerance(value: float) -> None:
    """Set the default comparison tolerance (must be in (0, 1))."""
    global _TOLERANCE
    value = float(value)
    if not 0 < value < 1:
        raise ValueError(f"tolerance {value} must lie strictly between 0 and 1")
    _TOLERANCE = value
