"""
Expression inspector: evaluate text such as ``"(3+4i)*(1-2i) + sqrt(-4)"``.

Usage
-----
    inspector = ExpressionInspector()
    z = inspector.evaluate("(2+i)**3")      # Complex(2+11i)

The text is parsed by SymPy without evaluation, then every node is
mapped onto a Complex operation:

    number / i          -> Complex
    a + b               -> sum
    a * b               -> multiply
    a ** n  (n >= 0)    -> pow
    a ** -n             -> 1 / a**n  (divide)
    sqrt(a) / a**(1/2)  -> sqr_root
    abs(a)              -> abs
"""
import re
from functools import reduce
from tokenize import TokenError
from typing import List

import sympy as sp

from complex_numbers import Complex
from number_errors import FormatError, UnsupportedOperationError
from utils.trace_helpers import add_traceback

_IMAGINARY_LITERAL = re.compile(r'(\d+(?:\.\d+)?)\s*[iI](?![A-Za-z_0-9])')
_IMAGINARY_UNIT = re.compile(r'(?<![A-Za-z_0-9.])[iI](?![A-Za-z_0-9])')


def to_sympy_text(text: str) -> str:
    """Rewrite ``4i`` / ``i`` literals into SymPy's ``I``."""
    text = _IMAGINARY_LITERAL.sub(r'(\1*I)', text)
    return _IMAGINARY_UNIT.sub('I', text)


class ExpressionInspector:
    def __init__(self):
        self.traceback_info: List[dict] = []

    def _add_traceback(self, step: str, info: str):
        add_traceback(self, step, info)

    def evaluate(self, expr_txt: str) -> Complex:
        """
        Master entry: return the Complex value of *expr_txt*.

        Raises FormatError when the text does not parse and
        UnsupportedOperationError for symbols, functions or exponents
        outside the supported set.
        """
        self._add_traceback('evaluate_start', f'Expr: {expr_txt}')
        try:
            tree = sp.sympify(to_sympy_text(expr_txt), evaluate=False)
        except (sp.SympifyError, SyntaxError, TokenError, TypeError):
            raise FormatError(expr_txt) from None

        result = self._resolve_tree(tree)
        self._add_traceback('result', f'{expr_txt} = {result}')
        return result

    # ──────────────────────────────────────────────────────────────
    # internal helpers
    # ──────────────────────────────────────────────────────────────
    def _resolve_tree(self, node) -> Complex:
        """Recursively turn a SymPy node into a Complex."""
        if node is sp.I:
            return Complex(0, 1)

        if node.is_Rational or node.is_Float:
            return Complex(float(node))

        if isinstance(node, sp.Add):
            operands = [self._resolve_tree(arg) for arg in node.args]
            self._add_traceback('add', f'{len(operands)} terms')
            return reduce(lambda acc, term: acc.sum(term), operands)

        if isinstance(node, sp.Mul):
            operands = [self._resolve_tree(arg) for arg in node.args]
            self._add_traceback('mul', f'{len(operands)} factors')
            return reduce(lambda acc, factor: acc.multiply(factor), operands)

        if isinstance(node, sp.Pow):
            return self._resolve_pow(node)

        if isinstance(node, sp.Abs):
            return Complex(self._resolve_tree(node.args[0]).abs())

        raise UnsupportedOperationError(f"Unsupported expression part: {node}")

    def _resolve_pow(self, node) -> Complex:
        base = self._resolve_tree(node.base)
        exponent = node.exp.doit()
        self._add_traceback('pow', f'({base}) ** {exponent}')

        if exponent.is_Integer:
            n = int(exponent)
            if n >= 0:
                return base.pow(n)
            return Complex(1).divide(base.pow(-n))
        if exponent == sp.Rational(1, 2):
            return base.sqr_root()

        raise UnsupportedOperationError(f"Unsupported exponent: {exponent}")


def compute(expr: str) -> str:
    """Convenience wrapper: evaluate *expr* and return its canonical text."""
    return ExpressionInspector().evaluate(expr).to_string()
