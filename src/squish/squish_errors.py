"""
Exception hierarchy for the squish toolchain.

Every failure is terminal: the parser stops at the first malformed construct
and the animator at the first failing operator, and neither returns partial
results. Only the CLI and REPL catch these.

    SquishError
    ├── ParseError (also a SyntaxError)
    │   ├── UnexpectedToken
    │   ├── UnexpectedEnd
    │   ├── InvalidExpression
    │   └── NestingTooDeep
    └── EvalError
        ├── TypeMismatch
        ├── DivisionByZero
        ├── ArithmeticOverflow
        ├── UnsupportedConstruct
        └── EvaluationTooDeep
"""

from typing import Any


class SquishError(Exception):
    """Base class for every error raised by the squish toolchain."""


class ParseError(SquishError, SyntaxError):
    """Raised when the token stream does not form a valid expression."""


def _where(token: Any) -> str:
    return f" at line {token.line}, col {token.col}" if token is not None else ""


class UnexpectedToken(ParseError):
    """A specific token was required but a different one was found.

    Attributes:
        expected (str): Description or token type of what was required.
        found (Token): The token actually present.
    """

    def __init__(self, expected: str, found: Any):
        super().__init__(f"Expected {expected}, got {found!r}{_where(found)}")
        self.expected = expected
        self.found = found


class UnexpectedEnd(ParseError):
    """The token stream ran out in the middle of a construct."""

    def __init__(self, expected: str = "expression"):
        super().__init__(f"Unexpected end of input, expected {expected}")
        self.expected = expected


class InvalidExpression(ParseError):
    """No term production matches the token at the current position."""

    def __init__(self, found: Any):
        super().__init__(f"Invalid expression near {found!r}{_where(found)}")
        self.found = found


class EvalError(SquishError):
    """Raised when a well-formed expression cannot be evaluated."""


class TypeMismatch(EvalError):
    """An operator was applied to operand types it does not support.

    Attributes:
        op (str): Operator token type.
        left (Value): Left operand.
        right (Value): Right operand.
    """

    def __init__(self, op: str, left: Any, right: Any):
        super().__init__(
            f"Cannot apply {op} to {left.kind} {left} and {right.kind} {right}"
        )
        self.op = op
        self.left = left
        self.right = right


class DivisionByZero(EvalError):
    def __init__(self, left: Any):
        super().__init__(f"Division by zero: {left} / 0")
        self.left = left


class ArithmeticOverflow(EvalError):
    """A 16-bit number operation left the range 0..65535."""

    def __init__(self, op: str, left: Any, right: Any):
        super().__init__(f"Arithmetic overflow: {left} {op} {right} is out of range")
        self.op = op
        self.left = left
        self.right = right


class UnsupportedConstruct(EvalError):
    def __init__(self, kind: str):
        super().__init__(f"Evaluation of '{kind}' expressions is not supported")
        self.kind = kind


class NestingTooDeep(ParseError):
    """The expression nests deeper than the interpreter's recursion limit allows."""

    def __init__(self) -> None:
        super().__init__("Expression is nested too deeply to parse")


class EvaluationTooDeep(EvalError):
    def __init__(self) -> None:
        super().__init__("Expression is nested too deeply to evaluate")
