"""
Shared type definitions for the number modules.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Literal, NamedTuple, TypedDict, Union

if TYPE_CHECKING:
    from complex_numbers import Complex
    from real_numbers import Real

# Plain inputs accepted by every function
MathValue = Union[str, int, float]

RealValue = Union[MathValue, "Real"]
ComplexValue = Union[MathValue, complex, "Real", "Complex"]

NumberType = Literal['odd', 'even']


class ParsedComplex(NamedTuple):
    """Result of ``parse_complex``: real and imaginary parts."""
    re: float
    im: float


class NumberObject(TypedDict):
    """Snapshot returned by ``to_json()``."""
    real: float
    imaginary: float
    is_negative: bool
    is_imaginary: bool
    is_float: bool
