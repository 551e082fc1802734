"""
Complex numbers ``real + imaginary*i`` with an opt-in mutation discipline.

Every arithmetic method
    1. computes the result pair from the current state and the operand,
    2. writes the pair back into the receiver when it is mutable,
    3. returns a brand-new (mutable) Complex holding the pair.

Immutable instances are never touched, and a failing operation (divide by
zero, bad operand text) leaves any receiver exactly as it was.

    >>> z = Complex(3, 4)
    >>> str(z.sqr_root())
    '2+1i'
    >>> str(Complex("2+1i").pow(3))
    '2+11i'

Not thread-safe: share a mutable instance across threads only behind
your own lock.
"""
from __future__ import annotations

import math
from types import MappingProxyType
from typing import Callable, List, Mapping, Tuple

from number_errors import DivisionByZeroError, MissingOperandError, UnsupportedOperationError
from number_helpers import (
    exacts_to,
    is_float,
    is_negative,
    parse_complex,
    parse_num,
    to_string,
)
from number_types import ComplexValue, MathValue, NumberObject
from real_numbers import Real
from utils.precision_manager import get_tolerance
from utils.trace_helpers import add_traceback

MAX_SAFE_INTEGER = 2 ** 53 - 1

Pair = Tuple[float, float]


# ---------------------------------------------------------------------- #
# pure pair arithmetic
# ---------------------------------------------------------------------- #
def _sum_pair(a: Pair, b: Pair) -> Pair:
    return a[0] + b[0], a[1] + b[1]


def _minus_pair(a: Pair, b: Pair) -> Pair:
    return a[0] - b[0], a[1] - b[1]


def _multiply_pair(a: Pair, b: Pair) -> Pair:
    # (a+bi)(c+di) = (ac-bd) + (ad+bc)i
    return a[0] * b[0] - a[1] * b[1], a[0] * b[1] + a[1] * b[0]


def _divide_pair(a: Pair, b: Pair) -> Pair:
    # (a+bi)/(c+di) = [(ac+bd) + (bc-ad)i] / (c²+d²)
    c, d = b
    real = c * a[0] + d * a[1]
    imaginary = a[1] * c - a[0] * d
    denominator = c ** 2 + d ** 2
    if denominator == 0:
        raise DivisionByZeroError()
    return real / denominator, imaginary / denominator


class Complex:
    """
    Complex number with real and imaginary parts.

    Parameters
    ----------
    real       : number, Real, Complex or the full text form
                 ("3+4i", "-2.5i", "7").
    imaginary  : overrides the imaginary part parsed out of *real*.
    immutable  : fixed for the life of the instance; immutable numbers
                 never change, mutable ones take every result in place.
    """

    __slots__ = ('_real', '_imaginary', '_immutable', '_traceback_info')

    def __init__(self, real: ComplexValue = None, imaginary: MathValue = None,
                 immutable: bool = False):
        if real is None:
            raise MissingOperandError("Required at least one parameter")

        parsed = parse_complex(real)
        self._real = parsed.re
        self._imaginary = parse_num(imaginary) if imaginary is not None else parsed.im
        self._immutable = bool(immutable)
        self._traceback_info: List[dict] = []

    # -------------------------------------------------------------- #
    # state
    # -------------------------------------------------------------- #
    @property
    def real(self) -> float:
        return self._real

    @real.setter
    def real(self, value: float) -> None:
        self._check_assignable()
        self._real = float(value)

    @property
    def imaginary(self) -> float:
        return self._imaginary

    @imaginary.setter
    def imaginary(self, value: float) -> None:
        self._check_assignable()
        self._imaginary = float(value)

    @property
    def is_immutable(self) -> bool:
        return self._immutable

    @property
    def traceback_info(self) -> List[dict]:
        """Trace events; always empty on an immutable instance."""
        return self._traceback_info

    @traceback_info.setter
    def traceback_info(self, events: List[dict]) -> None:
        self._check_assignable()
        self._traceback_info = list(events)

    def _check_assignable(self):
        if self._immutable:
            raise AttributeError("cannot assign to an immutable Complex")

    def _pair(self) -> Pair:
        return self._real, self._imaginary

    def _add_traceback(self, step: str, info: str):
        if not self._immutable:
            add_traceback(self, step, info)

    def _spawn(self, result: Pair) -> "Complex":
        """New mutable Complex carrying a copy of this instance's trace."""
        new_complex = Complex(result[0], result[1])
        new_complex._traceback_info = self._traceback_info.copy()
        return new_complex

    def _apply(self, step: str, operand: ComplexValue,
               core: Callable[[Pair, Pair], Pair]) -> "Complex":
        """Run *core* on (self, operand), write back if mutable, return result."""
        other = parse_complex(operand)
        result = core(self._pair(), (other.re, other.im))
        return self._settle(step, f'{self} {step} {to_string(operand)}', result)

    def _settle(self, step: str, info: str, result: Pair) -> "Complex":
        # an immutable receiver's step is recorded on the result only
        if not self._immutable:
            self._add_traceback(step, info)
            self._real, self._imaginary = result
        new_complex = self._spawn(result)
        if self._immutable:
            new_complex._add_traceback(step, info)
        new_complex._add_traceback('result', f'{step} result: {new_complex}')
        return new_complex

    # -------------------------------------------------------------- #
    # arithmetic
    # -------------------------------------------------------------- #
    def sum(self, operand: ComplexValue) -> "Complex":
        """Component-wise addition."""
        return self._apply('sum', operand, _sum_pair)

    def minus(self, operand: ComplexValue) -> "Complex":
        """Receiver minus operand, component-wise."""
        return self._apply('minus', operand, _minus_pair)

    def multiply(self, operand: ComplexValue) -> "Complex":
        return self._apply('multiply', operand, _multiply_pair)

    def divide(self, operand: ComplexValue) -> "Complex":
        """
        Receiver divided by operand.

        Raises DivisionByZeroError when the operand is 0+0i; the receiver
        keeps its value in that case.
        """
        return self._apply('divide', operand, _divide_pair)

    def pow(self, exponent: MathValue = 2) -> "Complex":
        """
        Integer power by repeated multiplication.

        The exponent is clamped into [0, 2**53 - 1] and truncated, so
        pow(0) and pow(1) both give the current value back and pow(2.7)
        behaves like pow(2). Only integer exponents are meaningful; there
        are no fractional or negative powers here.

        Known limitation: the loop runs n - 1 times, so a huge exponent
        (pow(float('inf')) clamps to 2**53 - 1) effectively never returns.
        """
        n = parse_num(exponent)
        if math.isnan(n):
            raise UnsupportedOperationError(f"Exponent {exponent!r} is not a number")
        n = int(min(max(n, 0), MAX_SAFE_INTEGER))

        base = self._pair()
        result = base
        for _ in range(n - 1):
            result = _multiply_pair(result, base)
        return self._settle('pow', f'Raising {self} to power {n}', result)

    def abs(self) -> Real:
        """Modulus sqrt(real² + imaginary²) as an immutable Real."""
        return Real(math.hypot(self._real, self._imaginary), immutable=True)

    def sqr_root(self) -> "Complex":
        """
        Principal square root:
            sqrt((|z| + a) / 2) + sign(b) * sqrt(|(|z| - a) / 2|) i
        with sign(b) = -1 for b < 0, else 1. Never mutates.
        """
        modulus = self.abs().value
        sign = -1 if self._imaginary < 0 else 1
        real = math.sqrt(max((modulus + self._real) / 2, 0.0))
        magnitude = (modulus - self._real) / 2
        imaginary = sign * math.sqrt(abs(magnitude))

        root = self._spawn((real, imaginary))
        root._add_traceback('sqr_root', f'sqrt({self}) = {to_string(real)}, {to_string(imaginary)}')
        return root

    # -------------------------------------------------------------- #
    # derived properties
    # -------------------------------------------------------------- #
    @property
    def is_negative(self) -> bool:
        """Imaginary part is negative."""
        return is_negative(self._imaginary)

    @property
    def is_imaginary(self) -> bool:
        """Imaginary part is not exactly zero."""
        return not exacts_to(self._imaginary, 0)

    @property
    def is_float(self) -> bool:
        """Imaginary part has a fractional component."""
        return is_float(self._imaginary)

    @property
    def is_pure(self) -> bool:
        """Non-zero imaginary part and a real part of exactly zero."""
        return self.is_imaginary and self._real == 0

    # -------------------------------------------------------------- #
    # text / snapshots
    # -------------------------------------------------------------- #
    def to_string(self) -> str:
        """
        "a+bi", "a-bi", "bi" (pure imaginary) or "a" (no imaginary part).
        """
        if self.is_pure:
            return f'{to_string(self._imaginary)}i'
        if self.is_imaginary:
            sign = '-' if self.is_negative else '+'
            return f'{to_string(self._real)}{sign}{to_string(abs(self._imaginary))}i'
        return to_string(self._real)

    def to_json(self) -> Mapping[str, object]:
        """Read-only snapshot of the current state."""
        snapshot: NumberObject = {
            'real': self._real,
            'imaginary': self._imaginary,
            'is_float': self.is_float,
            'is_imaginary': self.is_imaginary,
            'is_negative': self.is_negative,
        }
        return MappingProxyType(snapshot)

    # -------------------------------------------------------------- #
    # copies
    # -------------------------------------------------------------- #
    @property
    def immutable(self) -> "Complex":
        """This instance when already immutable, else an immutable clone."""
        if self._immutable:
            return self
        return Complex(self._real, self._imaginary, True)

    def clone(self, immutable: bool = False) -> "Complex":
        return Complex(self._real, self._imaginary, immutable)

    # -------------------------------------------------------------- #
    # comparisons / conversions
    # -------------------------------------------------------------- #
    def is_close(self, other: ComplexValue, tolerance: float = None) -> bool:
        """Component-wise math.isclose using the configured tolerance."""
        tol = get_tolerance() if tolerance is None else tolerance
        o = parse_complex(other)
        return (math.isclose(self._real, o.re, rel_tol=tol, abs_tol=tol)
                and math.isclose(self._imaginary, o.im, rel_tol=tol, abs_tol=tol))

    def __eq__(self, other):
        if isinstance(other, (Complex, Real, complex, int, float)):
            o = parse_complex(other)
            return self._real == o.re and self._imaginary == o.im
        return NotImplemented

    __hash__ = None

    def __complex__(self):
        return complex(self._real, self._imaginary)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        mode = 'immutable' if self._immutable else 'mutable'
        return f"Complex({self.to_string()}, {mode})"
