"""
Real number wrapper with the same mutability discipline as Complex:
a mutable instance takes every result in place, an immutable one never
changes, and both always hand back a fresh (mutable) Real.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import List, Mapping

from arithmetic import add, divide, minus as subtract, multiply as product, power
from number_errors import MissingOperandError
from number_helpers import is_float, is_negative, parse_num, to_string
from number_types import MathValue, RealValue
from utils.trace_helpers import add_traceback


class Real:
    """
    A real number with arithmetic helpers.

        >>> num = Real(42)
        >>> str(num.sum(8).multiply(2))
        '100'
        >>> num.value        # mutable: the calls above also updated num
        50.0
    """

    is_imaginary = False

    def __init__(self, num: RealValue = None, immutable: bool = False):
        if num is None:
            raise MissingOperandError("A number is required!")
        self._value = parse_num(num)
        self._immutable = bool(immutable)
        self._traceback_info: List[dict] = []

    # -------------------------------------------------------------- #
    # state
    # -------------------------------------------------------------- #
    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, new_value: float) -> None:
        if self._immutable:
            raise AttributeError("cannot assign to an immutable Real")
        self._value = float(new_value)

    @property
    def is_immutable(self) -> bool:
        return self._immutable

    @property
    def traceback_info(self) -> List[dict]:
        return self._traceback_info

    @traceback_info.setter
    def traceback_info(self, events: List[dict]) -> None:
        if self._immutable:
            raise AttributeError("cannot assign to an immutable Real")
        self._traceback_info = list(events)

    def _add_traceback(self, step: str, info: str):
        if not self._immutable:
            add_traceback(self, step, info)

    def _settle(self, step: str, info: str, result: float) -> "Real":
        """Write *result* back when mutable; return it as a new Real."""
        if not self._immutable:
            self._add_traceback(step, info)
            self._value = result
        new_real = Real(result)
        new_real._traceback_info = self._traceback_info.copy()
        if self._immutable:
            new_real._add_traceback(step, info)
        return new_real

    # -------------------------------------------------------------- #
    # arithmetic
    # -------------------------------------------------------------- #
    def round(self, decimals: MathValue = 2) -> "Real":
        """Round half away from zero to *decimals* places (never mutates)."""
        d = int(parse_num(decimals))
        if not math.isfinite(self._value):
            return Real(self._value)
        with localcontext() as ctx:
            ctx.prec = 400 + abs(d)
            rounded = Decimal(self._value).quantize(Decimal(1).scaleb(-d), rounding=ROUND_HALF_UP)
        return Real(float(rounded))

    def pow(self, exponent: RealValue = 2) -> "Real":
        exp = parse_num(exponent)
        return self._settle('pow', f'Raising {self} to power {to_string(exp)}',
                            power(self._value, exp))

    def sum(self, *numbers: RealValue) -> "Real":
        arr = [parse_num(x) for x in numbers]
        return self._settle('sum', f'Adding {arr} to {self}', add(*arr, self._value))

    def minus(self, *numbers: RealValue) -> "Real":
        arr = [parse_num(x) for x in numbers]
        return self._settle('minus', f'Subtracting {arr} from {self}',
                            subtract(self._value, *arr))

    def multiply(self, *numbers: RealValue) -> "Real":
        arr = [parse_num(x) for x in numbers]
        return self._settle('multiply', f'Multiplying {self} by {arr}',
                            product(*arr, self._value))

    def divide(self, divisor: RealValue) -> "Real":
        return self._settle('divide', f'Dividing {self} by {divisor}',
                            divide(self._value, divisor))

    # -------------------------------------------------------------- #
    # comparisons
    # -------------------------------------------------------------- #
    def equals(self, other: RealValue) -> bool:
        return parse_num(other) == self._value

    def less_than(self, other: RealValue) -> bool:
        return self._value < parse_num(other)

    def higher_than(self, other: RealValue) -> bool:
        return self._value > parse_num(other)

    @property
    def is_negative(self) -> bool:
        return is_negative(self._value)

    @property
    def is_float(self) -> bool:
        return is_float(self._value)

    # -------------------------------------------------------------- #
    # conversion / copies
    # -------------------------------------------------------------- #
    def to_string(self) -> str:
        return to_string(self._value)

    def to_json(self) -> Mapping[str, object]:
        return MappingProxyType({
            'real': self._value,
            'imaginary': 0.0,
            'is_imaginary': False,
            'is_negative': self.is_negative,
            'is_float': self.is_float,
        })

    @property
    def immutable(self) -> "Real":
        """A fresh immutable clone (even when this one is immutable)."""
        return self.clone(True)

    def clone(self, immutable: bool = False) -> "Real":
        return Real(self._value, immutable)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        mode = 'immutable' if self._immutable else 'mutable'
        return f"Real({self.to_string()}, {mode})"

    def __float__(self):
        return self._value

    def __eq__(self, other):
        if isinstance(other, Real):
            return self._value == other._value
        if isinstance(other, (int, float)):
            return self._value == other
        return NotImplemented

    __hash__ = None
