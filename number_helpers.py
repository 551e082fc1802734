"""
number_helpers
==============

Coercion and parsing helpers shared by the number types and the
free-function layer. Everything numeric is normalised here once, at the
boundary, before any arithmetic runs.

Complex grammar (whitespace is ignored, ``i`` is case-insensitive)::

    [+-]?digits(.digits)?              real term        (optional)
    [+-]?(digits(.digits)?)?i          imaginary term   (optional)

A single term ending in ``i`` is always the imaginary term, so ``"5i"``
parses as ``0+5i``.
"""
from __future__ import annotations

import math
import numbers
import re
from typing import Any, Mapping, Optional, Sequence

from number_errors import FormatError, MissingOperandError
from number_types import MathValue, NumberType, ParsedComplex

_WHITESPACE = re.compile(r'\s+')

_IMAGINARY_TERM = r'[+-]?(?:\d+(?:\.\d+)?)?i'
_PURE_IMAGINARY = re.compile(rf'(?P<im>{_IMAGINARY_TERM})', re.IGNORECASE)
_COMPLEX = re.compile(
    rf'(?P<re>[+-]?\d+(?:\.\d+)?)?(?P<im>{_IMAGINARY_TERM})?',
    re.IGNORECASE,
)

_NUMERIC_LITERAL = r'[+-]?(?:Infinity|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)'
_FLOAT_PREFIX = re.compile(rf'\s*({_NUMERIC_LITERAL})')
_FLOAT_FULL = re.compile(_NUMERIC_LITERAL)


# ----------------------------------------------------------------------
#  presence checks
# ----------------------------------------------------------------------
def is_not_nil(value: Any) -> bool:
    return value is not None


def requires(values: Sequence[Any], minimum: int = 1) -> None:
    """Raise MissingOperandError unless the first *minimum* values exist."""
    if len(values) < minimum or any(v is None for v in values[:minimum]):
        if minimum >= 2:
            raise MissingOperandError("Required two or more numbers")
        raise MissingOperandError("Required at least one number")


# ----------------------------------------------------------------------
#  text <-> number
# ----------------------------------------------------------------------
def _format_float(x: float) -> str:
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))        # 3.0 -> "3", -0.0 -> "0"
    return repr(x)


def to_string(value: Any) -> str:
    """
    Canonical text of a value.

    >>> to_string(3)
    '3'
    >>> to_string(2.5)
    '2.5'
    >>> to_string("23")
    '23'
    """
    if value is None:
        raise MissingOperandError("Required a number or a string")
    if isinstance(value, str):
        return value
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return _format_float(float(value))
    return str(value)


def parse_num(value: Any) -> float:
    """
    Parse the leading number of *value*; NaN when nothing parses.

    >>> parse_num('23.4abc')
    23.4
    >>> parse_num(None)
    0.0
    """
    from real_numbers import Real

    if value is None:
        return 0.0
    if isinstance(value, Real):
        return value.value
    if isinstance(value, numbers.Real):
        return float(value)
    match = _FLOAT_PREFIX.match(to_string(value))
    if not match:
        return math.nan
    return float(match.group(1).replace('Infinity', 'inf'))


def is_number(value: MathValue) -> bool:
    if isinstance(value, numbers.Real):
        return not math.isnan(value)
    text = to_string(value).strip()
    return not text or _FLOAT_FULL.fullmatch(text) is not None


def is_float(value: Any) -> bool:
    """True for text containing a '.', or numbers with a fractional part."""
    if isinstance(value, str):
        return '.' in value
    x = parse_num(value)
    return math.isfinite(x) and not x.is_integer()


def is_integer(value: Any) -> bool:
    return not is_float(value)


def is_negative(value: Any) -> bool:
    return parse_num(value) < 0


def type_of_number(value: Any) -> NumberType:
    return 'even' if parse_num(value) % 2 == 0 else 'odd'


def exacts_to(a: Any, b: Any) -> bool:
    """Exact equality of the canonical texts of *a* and *b*."""
    return to_string(a) == to_string(b)


# ----------------------------------------------------------------------
#  complex grammar
# ----------------------------------------------------------------------
def _imaginary_part(term: str) -> float:
    magnitude = term[:-1]          # drop the trailing i / I
    if magnitude in ('', '+'):
        return 1.0
    if magnitude == '-':
        return -1.0
    return float(magnitude)


def parse_complex(value: Any) -> ParsedComplex:
    """
    Convert *value* into a ``ParsedComplex(re, im)`` pair.

    Complex, builtin complex, Real and plain numbers are read directly;
    anything else goes through the textual grammar.

    Raises
    ------
    FormatError          text is empty or does not match the grammar.
    MissingOperandError  value is None.
    """
    from complex_numbers import Complex
    from real_numbers import Real

    if isinstance(value, Complex):
        return ParsedComplex(value.real, value.imaginary)
    if isinstance(value, complex):
        return ParsedComplex(value.real, value.imag)
    if isinstance(value, Real):
        return ParsedComplex(value.value, 0.0)
    if isinstance(value, numbers.Real):
        return ParsedComplex(float(value), 0.0)

    text = _WHITESPACE.sub('', to_string(value))
    if not text:
        raise FormatError(text)

    pure = _PURE_IMAGINARY.fullmatch(text)
    if pure:
        return ParsedComplex(0.0, _imaginary_part(pure.group('im')))

    match = _COMPLEX.fullmatch(text)
    if not match:
        raise FormatError(text)

    real_term, imaginary_term = match.group('re'), match.group('im')
    return ParsedComplex(
        float(real_term) if real_term else 0.0,
        _imaginary_part(imaginary_term) if imaginary_term else 0.0,
    )


def create_number(obj: Optional[Mapping[str, Any]], immutable: bool = False):
    """
    Build a Real or a Complex from a mapping with optional ``real`` and
    ``imaginary`` keys: Complex when the imaginary part is not exactly 0.
    """
    # Late import to avoid circular dependency
    from complex_numbers import Complex
    from real_numbers import Real

    requires([obj])
    real = obj.get('real')
    imaginary = obj.get('imaginary')
    if imaginary is None:
        imaginary = 0
    if real is None:
        real = 0

    if not exacts_to(imaginary, 0):
        return Complex(real, imaginary, immutable)
    return Real(real, immutable)
