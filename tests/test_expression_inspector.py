#!/usr/bin/env python3
"""
Tests for ExpressionInspector and the REPL line handler.
"""

import json
import sys
import os
import unittest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from complex_numbers import Complex
from expression_inspector import ExpressionInspector, compute, to_sympy_text
from number_errors import FormatError, UnsupportedOperationError
from repl import ReplSession
from utils.precision_manager import get_dps, get_tolerance, set_dps, set_tolerance


class ExpressionInspectorTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.inspector = ExpressionInspector()

    def test_imaginary_literal_rewrite(self):
        self.assertEqual(to_sympy_text("3+4i"), "3+(4*I)")
        self.assertEqual(to_sympy_text("-i"), "-I")
        self.assertEqual(to_sympy_text("sin(pi)"), "sin(pi)")

    def test_literal(self):
        self.assertEqual(self.inspector.evaluate("3+4i"), Complex(3, 4))
        self.assertEqual(self.inspector.evaluate("2.5"), Complex(2.5, 0))

    def test_power(self):
        self.assertEqual(self.inspector.evaluate("(2+i)**3"), Complex(2, 11))
        self.assertEqual(self.inspector.evaluate("(2+i)^2"), Complex(3, 4))

    def test_product_and_quotient(self):
        self.assertEqual(self.inspector.evaluate("(2+3i)*(4+5i)"), Complex(-7, 22))
        self.assertTrue(self.inspector.evaluate("(4+2i)/(1+i)").is_close(Complex(3, -1)))

    def test_subtraction(self):
        self.assertEqual(self.inspector.evaluate("(5+7i)-(2+3i)"), Complex(3, 4))

    def test_square_root_and_abs(self):
        self.assertTrue(self.inspector.evaluate("sqrt(-4)").is_close(Complex(0, 2)))
        self.assertTrue(self.inspector.evaluate("sqrt(3+4i)").is_close(Complex(2, 1)))
        self.assertEqual(self.inspector.evaluate("abs(3+4i)"), Complex(5, 0))

    def test_compute_wrapper(self):
        self.assertEqual(compute("2i*2i"), "-4")

    def test_unsupported_parts(self):
        for expr in ("x+1", "sin(1)", "(1+i)**(1/3)"):
            with self.subTest(expr=expr):
                with self.assertRaises(UnsupportedOperationError):
                    self.inspector.evaluate(expr)

    def test_unparsable_text(self):
        with self.assertRaises(FormatError):
            self.inspector.evaluate("3+")

    def test_bad_function_call_is_a_format_error(self):
        with self.assertRaises(FormatError):
            self.inspector.evaluate("abs()")

    def test_trace_is_recorded(self):
        inspector = ExpressionInspector()
        inspector.evaluate("1+i")
        steps = [t['step'] for t in inspector.traceback_info]
        self.assertEqual(steps[0], 'evaluate_start')
        self.assertEqual(steps[-1], 'result')


class ReplSessionTests(unittest.TestCase):
    def setUp(self):
        self.session = ReplSession()

    def tearDown(self):
        set_dps(50)
        set_tolerance(1e-9)

    def test_expression(self):
        self.assertEqual(self.session.handle("(2+i)**2"), "Result: 3+4i")

    def test_blank_line(self):
        self.assertIsNone(self.session.handle("   "))

    def test_trace_toggle(self):
        self.assertEqual(self.session.handle("trace"), "Traceback display: ON")
        output = self.session.handle("1+i")
        self.assertTrue(output.startswith("Result: 1+1i"))
        self.assertIn("Tracebacks:", output)
        self.assertEqual(self.session.handle("trace"), "Traceback display: OFF")

    def test_json(self):
        data = json.loads(self.session.handle("json 3-4i"))
        self.assertEqual(data['real'], 3.0)
        self.assertEqual(data['imaginary'], -4.0)
        self.assertTrue(data['is_negative'])

    def test_precision(self):
        self.assertIn("50 dps", self.session.handle("precision"))
        self.assertEqual(self.session.handle("precision 30"), "Precision set to 30 dps")
        self.assertEqual(get_dps(), 30)
        self.assertTrue(self.session.handle("precision 7").startswith("Error:"))

    def test_tolerance(self):
        self.assertEqual(self.session.handle("tolerance 1e-6"), "Tolerance set to 1e-06")
        self.assertEqual(get_tolerance(), 1e-6)
        self.assertTrue(self.session.handle("tolerance 2").startswith("Error:"))

    def test_bad_call_is_reported(self):
        for line in ("abs()", "abs(1, 2)", "(1+i"):
            with self.subTest(line=line):
                self.assertTrue(self.session.handle(line).startswith("Error:"))

    def test_errors_are_reported(self):
        self.assertTrue(self.session.handle("x+1").startswith("Error:"))
        self.assertTrue(self.session.handle("(1+i)/0").startswith("Error:"))


if __name__ == "__main__":
    unittest.main()
