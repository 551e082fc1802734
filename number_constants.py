"""
Mathematical constants as immutable numbers.

PI and E are evaluated by mpmath at the working precision and then
rounded to the nearest float.
"""
import sys
from types import MappingProxyType

from mpmath import mp

from complex_numbers import Complex
from real_numbers import Real
from utils.precision_manager import get_dps

with mp.workdps(get_dps()):
    _PI = float(mp.pi)
    _E = float(mp.e)

#: The imaginary unit ``i``
I = Complex('i', immutable=True)

#: Ratio of a circle's circumference to its diameter
PI = Real(_PI, immutable=True)

#: Euler's number
E = Real(_E, immutable=True)

#: Smallest x with 1.0 + x != 1.0
EPSILON = Real(sys.float_info.epsilon, immutable=True)

#: Complex constants by name
C = MappingProxyType({'i': I})
