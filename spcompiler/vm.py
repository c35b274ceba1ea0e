"""Interpreter for the textual intermediate code written by the compiler."""

from __future__ import annotations

import sys
from typing import IO, Dict, Iterable, List, Optional

MAX_VARS = 100
_MAX_NAME = 63
_SPACES = " \t\n\r\f\v"
_DIGITS = "0123456789"
_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


class VMError(Exception):
    """Raised when an instruction cannot be evaluated."""


def is_number(text: str) -> bool:
    """True if text is an optional sign followed only by digits (possibly none)."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return all(ch in _DIGITS for ch in body)


def _c_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _c_mod(left: int, right: int) -> int:
    return left - _c_div(left, right) * right


class _ExprParser:
    """Recursive-descent evaluator for integer expressions over variables."""

    def __init__(self, text: str, vm: "VirtualMachine") -> None:
        self._text = text
        self._pos = 0
        self._vm = vm

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _skip_spaces(self) -> None:
        while self._peek() and self._peek() in _SPACES:
            self._pos += 1

    def parse(self) -> int:
        value = self._expr()
        self._skip_spaces()
        if self._pos < len(self._text):
            raise VMError("unexpected characters at end of expression")
        return value

    def _factor(self) -> int:
        self._skip_spaces()
        if self._peek() == "(":
            self._pos += 1
            value = self._expr()
            self._skip_spaces()
            if self._peek() != ")":
                raise VMError("missing closing parenthesis")
            self._pos += 1
            return value

        sign = 1
        if self._peek() == "-":
            sign = -1
            self._pos += 1
            self._skip_spaces()

        ch = self._peek()
        if ch and ch in _DIGITS:
            start = self._pos
            while self._peek() and self._peek() in _DIGITS:
                self._pos += 1
            return int(self._text[start:self._pos]) * sign

        if ch and (ch in _LETTERS or ch == "_"):
            start = self._pos
            while self._peek() and (
                self._peek() in _LETTERS or self._peek() in _DIGITS or self._peek() == "_"
            ):
                self._pos += 1
            name = self._text[start:self._pos][:_MAX_NAME]
            return sign * self._vm.get(name)

        raise VMError(f"unexpected character {ch!r}")

    def _term(self) -> int:
        value = self._factor()
        while True:
            self._skip_spaces()
            ch = self._peek()
            if ch == "*":
                self._pos += 1
                value *= self._factor()
            elif ch == "/":
                self._pos += 1
                divisor = self._factor()
                if divisor == 0:
                    raise VMError("division by zero")
                value = _c_div(value, divisor)
            elif ch == "%":
                self._pos += 1
                divisor = self._factor()
                if divisor == 0:
                    raise VMError("modulo by zero")
                value = _c_mod(value, divisor)
            else:
                return value

    def _expr(self) -> int:
        value = self._term()
        while True:
            self._skip_spaces()
            ch = self._peek()
            if ch == "+":
                self._pos += 1
                value += self._term()
            elif ch == "-":
                self._pos += 1
                value -= self._term()
            else:
                return value


class VirtualMachine:
    """Executes intermediate-code lines, holding integer variables."""

    def __init__(self, output: Optional[IO[str]] = None) -> None:
        self._out = output if output is not None else sys.stdout
        self._vars: Dict[str, int] = {}
        self._in_function = False

    @property
    def variables(self) -> Dict[str, int]:
        return dict(self._vars)

    def get(self, name: str) -> int:
        """Value of a variable; unknown names read as 0."""
        return self._vars.get(name, 0)

    def set(self, name: str, value: int) -> None:
        """Assign a variable; new names beyond the limit are silently dropped."""
        if name in self._vars or len(self._vars) < MAX_VARS:
            self._vars[name] = value

    def eval_expr(self, expr: str) -> int:
        return _ExprParser(expr, self).parse()

    def _emit(self, text: str) -> None:
        self._out.write(text + "\n")

    def handle_print(self, arg: str) -> None:
        text = arg.lstrip(" ").rstrip("\n ")
        if text.startswith('"') and text.endswith('"'):
            self._emit(text[1:-1])
        elif any(op in text for op in "+-*/%"):
            self._emit(str(self.eval_expr(text)))
        elif is_number(text):
            self._emit(str(int(text) if any(c in _DIGITS for c in text) else 0))
        else:
            self._emit(str(self.get(text)))

    def execute(self, line: str) -> None:
        """Execute one line of intermediate code."""
        for end in ("\r", "\n"):
            line = line.split(end, 1)[0]
        if not line:
            return

        if line.startswith("function "):
            self._in_function = True
            return
        if line.startswith("endfunction"):
            self._in_function = False
            return
        if self._in_function:
            return

        if line.startswith("print "):
            self.handle_print(line[6:])
            return

        if "=" in line:
            name, expr = line.split("=", 1)
            name = name.strip(" ")
            expr = expr.strip(" ")
            self.set(name, self.eval_expr(expr))
            return

        if line.startswith("call "):
            self._emit(f"Function call: {line[5:]}")
            return

        self._emit(f"Unknown instruction: {line}")

    def run(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.execute(line)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: vm <icg_file>")
        return 1
    try:
        handle = open(args[0], "r", encoding="utf-8")
    except OSError as err:
        print(f"Cannot open file: {err.strerror}", file=sys.stderr)
        return 1
    vm = VirtualMachine()
    with handle:
        try:
            vm.run(handle)
        except VMError as err:
            print(f"Error: {err}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())