"""
Runtime values produced by evaluating squish expressions.

A `Value` is a tagged union of a 16-bit unsigned number, a string or a
boolean. Equality is structural and never holds across kinds, so
`Value.number(1) != Value.boolean(True)` even though `1 == True` in Python.

Display text (`str(value)`) is what animation frames draw:
    number → decimal digits, string → double-quoted content, bool → true/false.
"""

from typing import Any

from squish.squish_constants import U16_MAX

VALUE_KINDS = ("number", "string", "bool")


class Value:
    """A computed squish value.

    Attributes:
        kind (str): One of "number", "string", "bool".
        payload (int | str | bool): The underlying Python value.
    """

    def __init__(self, kind: str, payload: int | str | bool):
        if kind not in VALUE_KINDS:
            raise ValueError(f"Unknown value kind: {kind}")
        if kind == "number" and not 0 <= int(payload) <= U16_MAX:
            raise ValueError(f"Number out of 16-bit range: {payload}")
        self.kind = kind
        self.payload = payload

    @classmethod
    def number(cls, n: int) -> "Value":
        return cls("number", n)

    @classmethod
    def string(cls, s: str) -> "Value":
        return cls("string", s)

    @classmethod
    def boolean(cls, b: bool) -> "Value":
        return cls("bool", b)

    def __str__(self) -> str:
        if self.kind == "string":
            return f'"{self.payload}"'
        if self.kind == "bool":
            return "true" if self.payload else "false"
        return str(self.payload)

    def __repr__(self) -> str:
        return f"Value({self.kind}, {self.payload!r})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Value)
            and self.kind == other.kind
            and self.payload == other.payload
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.payload))
