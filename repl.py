#!/usr/bin/env python3
"""
Interactive REPL for the number library.
Type expressions like '3+4i', '(2+i)**3', 'sqrt(-4)' or '(4+2i)/(1+i)'.
Type 'quit' to exit.
"""
import json
from typing import Optional

from expression_inspector import ExpressionInspector
from number_errors import NumeraError
from utils.precision_manager import get_dps, get_tolerance, presets, set_dps, set_tolerance

HELP_TEXT = """Commands:
  <expr>            - evaluate a complex expression, e.g. (3+4i)*(1-2i)
  json <expr>       - show the JSON snapshot of the result
  trace             - toggle traceback display
  precision [N]     - show / set mpmath working precision
  tolerance [X]     - show / set the comparison tolerance
  help              - this text
  quit              - exit"""


class ReplSession:
    """State of one REPL run."""

    def __init__(self):
        self.inspector = ExpressionInspector()
        self.show_trace = False

    def handle(self, user_input: str) -> Optional[str]:
        """Process one input line and return the text to print (or None)."""
        user_input = user_input.strip()
        if not user_input:
            return None
        command, _, rest = user_input.partition(' ')
        command = command.lower()

        try:
            if command == 'help':
                return HELP_TEXT
            if command == 'trace':
                self.show_trace = not self.show_trace
                return f"Traceback display: {'ON' if self.show_trace else 'OFF'}"
            if command in ('precision', 'p'):
                return self._precision(rest.strip())
            if command == 'tolerance':
                return self._tolerance(rest.strip())
            if command == 'json':
                result = self.inspector.evaluate(rest)
                return json.dumps(dict(result.to_json()))
            return self._evaluate(user_input)
        except (NumeraError, ValueError) as e:
            return f"Error: {e}"

    def _evaluate(self, expression: str) -> str:
        self.inspector.traceback_info.clear()
        result = self.inspector.evaluate(expression)
        lines = [f"Result: {result}"]
        if self.show_trace:
            lines.append("Tracebacks:")
            for trace in self.inspector.traceback_info:
                lines.append(f"  {trace['step']}: {trace['info']}")
        return "\n".join(lines)

    @staticmethod
    def _precision(arg: str) -> str:
        if not arg:
            return f"Current precision: {get_dps()} dps (presets: {presets()})"
        set_dps(int(arg))
        return f"Precision set to {get_dps()} dps"

    @staticmethod
    def _tolerance(arg: str) -> str:
        if not arg:
            return f"Current tolerance: {get_tolerance()}"
        set_tolerance(float(arg))
        return f"Tolerance set to {get_tolerance()}"


def main():
    """Run the interactive REPL."""
    print("=" * 60)
    print("Complex number REPL")
    print("Type 'help' for commands, 'quit' to exit")
    print("=" * 60)

    session = ReplSession()
    while True:
        try:
            user_input = input("numera> ")
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            break
        if user_input.strip().lower() in ('quit', 'exit'):
            print("Goodbye!")
            break
        output = session.handle(user_input)
        if output is not None:
            print(output)


if __name__ == '__main__':
    main()
