#!/usr/bin/env python3
"""
Tests for the Real wrapper.
"""

import sys
import os
import unittest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from number_errors import DivisionByZeroError, MissingOperandError, UnsupportedOperationError
from real_numbers import Real


class RealTests(unittest.TestCase):
    def test_construction(self):
        self.assertEqual(Real(42).value, 42.0)
        self.assertEqual(Real("2.5").value, 2.5)
        self.assertEqual(Real(Real(3)).value, 3.0)
        self.assertFalse(Real(1).is_imaginary)
        with self.assertRaises(MissingOperandError):
            Real()

    def test_chained_arithmetic(self):
        num = Real(42)
        result = num.sum(8).multiply(2)
        self.assertEqual(result.to_string(), "100")
        self.assertEqual(num.value, 50.0)

    def test_variadic_operations(self):
        self.assertEqual(Real(10).sum(1, '2', Real(3)).value, 16.0)
        self.assertEqual(Real(10).minus(1, 2).value, 7.0)
        self.assertEqual(Real(2).multiply(3, 4).value, 24.0)
        with self.assertRaises(MissingOperandError):
            Real(1).sum()

    def test_divide(self):
        self.assertEqual(Real(9).divide(2).value, 4.5)
        num = Real(9)
        with self.assertRaises(DivisionByZeroError):
            num.divide(0)
        self.assertEqual(num.value, 9.0)

    def test_pow(self):
        self.assertEqual(Real(3).pow().value, 9.0)
        self.assertEqual(Real(2).pow(Real(10)).value, 1024.0)
        with self.assertRaises(UnsupportedOperationError):
            Real(-4).pow(0.5)

    def test_immutable_is_untouched(self):
        num = Real(5, immutable=True)
        result = num.sum(5)
        self.assertEqual(num.value, 5.0)
        self.assertEqual(result.value, 10.0)
        self.assertFalse(result.is_immutable)
        with self.assertRaises(AttributeError):
            num.value = 1

    def test_immutable_keeps_empty_trace(self):
        num = Real(5, immutable=True)
        result = num.sum(5)
        num.pow(3)
        self.assertEqual(num.traceback_info, [])
        self.assertEqual([t['step'] for t in result.traceback_info], ['sum'])
        with self.assertRaises(AttributeError):
            num.traceback_info = [{'step': 'x'}]

    def test_pow_overflow(self):
        self.assertEqual(Real(10).pow(400).value, float('inf'))

    def test_round(self):
        self.assertEqual(Real(3.14159).round().value, 3.14)
        self.assertEqual(Real(3.14159).round(3).value, 3.142)
        self.assertEqual(Real(2.5).round(0).value, 3.0)
        self.assertEqual(Real(-2.5).round(0).value, -3.0)
        self.assertEqual(Real(1.005).round(2).value, 1.0)

    def test_round_never_mutates(self):
        num = Real(3.14159)
        num.round()
        self.assertEqual(num.value, 3.14159)

    def test_comparisons(self):
        self.assertTrue(Real(3).equals("3"))
        self.assertTrue(Real(3).less_than(4))
        self.assertTrue(Real(3).higher_than(Real(2)))
        self.assertEqual(Real(3), 3)
        self.assertEqual(Real(3), Real(3.0))

    def test_flags(self):
        self.assertTrue(Real(-1).is_negative)
        self.assertTrue(Real(1.5).is_float)
        self.assertFalse(Real(2).is_float)

    def test_to_json(self):
        self.assertEqual(dict(Real(-1.5).to_json()), {
            'real': -1.5,
            'imaginary': 0.0,
            'is_imaginary': False,
            'is_negative': True,
            'is_float': True,
        })

    def test_clone_and_immutable(self):
        num = Real(7)
        self.assertFalse(num.clone().is_immutable)
        self.assertTrue(num.clone(True).is_immutable)
        frozen = num.immutable
        self.assertTrue(frozen.is_immutable)
        self.assertIsNot(frozen.immutable, frozen)

    def test_text(self):
        self.assertEqual(str(Real(3.0)), "3")
        self.assertEqual(repr(Real(2.5, True)), "Real(2.5, immutable)")
        self.assertEqual(float(Real(2.5)), 2.5)


if __name__ == "__main__":
    unittest.main()
