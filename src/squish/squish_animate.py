"""
Evaluates squish expressions while building their collapse animation.

For every AST node `animate_eval` returns three things at once: the node's
value, the list of frames showing its text shrinking into that value, and
the padded final line (`last`) that a parent uses to keep drawing the
collapsed result without re-deriving its padding.

Frame construction for `left OP right`:
    1. merge: play both operand animations side by side; the shorter one
       stays frozen on its final line.
    2. collapse: shrink the gaps around the operator over at most
       `MAX_TRANSITION_STEPS` frames on an ease-in curve.
    3. result: draw the computed value with one space of margin each side.
    4. center every frame to the widest one.

Groups run the same collapse on the gaps inside their parentheses.

Raises:
    EvalError: `TypeMismatch`, `DivisionByZero`, `ArithmeticOverflow`,
    `UnsupportedConstruct`, or `EvaluationTooDeep` for trees deeper than the
    recursion limit. No frames are returned on failure.
"""

from __future__ import annotations

from typing import Any

from squish.squish_ast import ASTNode
from squish.squish_constants import MAX_TRANSITION_STEPS, OPERATOR_GLYPHS, U16_MAX
from squish.squish_errors import (
    ArithmeticOverflow,
    DivisionByZero,
    EvaluationTooDeep,
    TypeMismatch,
    UnsupportedConstruct,
)
from squish.squish_value import Value


class AnimateResult:
    """Outcome of evaluating one AST node.

    Attributes:
        value (Value): The computed value.
        frames (list[str]): Equal-width animation frames, oldest first.
        last (tuple[int, str, int]): Left padding, display text and right
            padding of the settled result line.
    """

    def __init__(self, value: Value, frames: list[str], last: tuple[int, str, int]):
        self.value = value
        self.frames = frames
        self.last = last

    def __repr__(self) -> str:
        return f"AnimateResult(value={self.value!r}, frames={len(self.frames)}, last={self.last!r})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, AnimateResult)
            and self.value == other.value
            and self.frames == other.frames
            and self.last == other.last
        )


def ease_in(t: float) -> float:
    return t * t


def transition_steps(left_gap: int, right_gap: int) -> list[tuple[int, int]]:
    """Shrinking (left, right) gap widths for one collapse transition."""
    n = min(max(left_gap, right_gap) + 1, MAX_TRANSITION_STEPS)
    steps = []
    for i in range(n):
        p = 1.0 - ease_in(i / n)
        steps.append((int(left_gap * p), int(right_gap * p)))
    return steps


def center(frames: list[str]) -> tuple[int, int]:
    """Pad every frame in place to a common width.

    The target width is the first frame's, or the widest frame's if a later
    one is wider. Returns the (left, right) padding applied to the last frame.
    """
    if not frames:
        return 0, 0
    width = max(len(f) for f in frames)
    left = right = 0
    for i, frame in enumerate(frames):
        left = right = 0
        diff = width - len(frame)
        if diff > 0:
            left = diff // 2
            right = diff - left
            frames[i] = " " * left + frame + " " * right
    return left, right


def _number_op(op: str, a: int, b: int, left: Value, right: Value) -> Value:
    if op == "PLUS":
        result = a + b
    elif op == "SUB":
        result = a - b
    elif op == "MULT":
        result = a * b
    else:
        if b == 0:
            raise DivisionByZero(left)
        result = a // b
    if not 0 <= result <= U16_MAX:
        raise ArithmeticOverflow(OPERATOR_GLYPHS[op], left, right)
    return Value.number(result)


def apply_operator(left: Value, op: str, right: Value) -> Value:
    """Apply binary operator token type `op` to two already evaluated operands.

    Raises:
        TypeMismatch: For operand kinds the operator does not accept.
        DivisionByZero: For a number divided by zero.
        ArithmeticOverflow: When a number result leaves 0..65535.
    """
    if op in ("EQ", "NEQ"):
        return Value.boolean((left == right) == (op == "EQ"))

    kinds = (left.kind, right.kind)
    if kinds == ("number", "number"):
        a, b = int(left.payload), int(right.payload)
        if op in ("PLUS", "SUB", "MULT", "DIV"):
            return _number_op(op, a, b, left, right)
        if op == "GT":
            return Value.boolean(a > b)
        if op == "LT":
            return Value.boolean(a < b)
    elif kinds == ("string", "string") and op == "PLUS":
        return Value.string(str(left.payload) + str(right.payload))
    elif kinds == ("bool", "bool"):
        # both sides are already evaluated, nothing short-circuits
        if op == "AND":
            return Value.boolean(bool(left.payload) and bool(right.payload))
        if op == "OR":
            return Value.boolean(bool(left.payload) or bool(right.payload))

    raise TypeMismatch(op, left, right)


def _literal(node: ASTNode) -> AnimateResult:
    if node.kind == "number":
        value = Value.number(node.value)
    elif node.kind == "string":
        value = Value.string(node.value)
    else:
        value = Value.boolean(node.value)
    return AnimateResult(value, [], (0, str(value), 0))


def _animate_binary(node: ASTNode) -> AnimateResult:
    lhs, rhs = node.children
    left_gap, right_gap = node.gaps

    r1 = _animate(lhs)
    r2 = _animate(rhs)
    pre1, text1, post1 = r1.last
    pre2, text2, post2 = r2.last

    result = apply_operator(r1.value, node.value, r2.value)
    glyph = OPERATOR_GLYPHS[node.value]

    frozen1 = " " * pre1 + text1 + " " * post1
    frozen2 = " " * pre2 + text2 + " " * post2
    frames = []
    for i in range(max(len(r1.frames), len(r2.frames))):
        frame1 = r1.frames[i] if i < len(r1.frames) else frozen1
        frame2 = r2.frames[i] if i < len(r2.frames) else frozen2
        frames.append(frame1 + " " * left_gap + glyph + " " * right_gap + frame2)

    # the operands' own centering padding becomes part of the gap
    left_gap += post1
    right_gap += pre2

    for l, r in transition_steps(left_gap, right_gap):
        frames.append(
            " " * pre1 + text1 + " " * l + glyph + " " * r + text2 + " " * post2
        )

    text = str(result)
    frames.append(" " * (pre1 + 1) + text + " " * (post2 + 1))

    left, right = center(frames)
    return AnimateResult(result, frames, (left + pre1 + 1, text, right + post2 + 1))


def _animate_group(node: ASTNode) -> AnimateResult:
    (inner,) = node.children
    left_gap, right_gap = node.gaps

    inner_result = _animate(inner)
    pre, text, post = inner_result.last

    frames = [f"({' ' * left_gap}{f}{' ' * right_gap})" for f in inner_result.frames]

    left_gap += pre
    right_gap += post

    for l, r in transition_steps(left_gap, right_gap):
        frames.append(f"({' ' * l}{text}{' ' * r})")

    left, right = center(frames)
    return AnimateResult(inner_result.value, frames, (left + 1, text, right + 1))


def _animate(node: ASTNode) -> AnimateResult:
    if node.kind in ("number", "string", "bool"):
        return _literal(node)
    if node.kind == "binary":
        return _animate_binary(node)
    if node.kind == "group":
        return _animate_group(node)
    raise UnsupportedConstruct(node.kind)


def animate_eval(node: ASTNode) -> AnimateResult:
    """Evaluate `node`, returning its value, frames and settled final line.

    Raises:
        EvaluationTooDeep: If the tree is too deep for the recursion limit.
    """
    try:
        return _animate(node)
    except RecursionError:
        raise EvaluationTooDeep() from None
