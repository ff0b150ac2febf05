"""
Defines the abstract syntax tree (AST) node structure for the squish language.

Classes:
    ASTNode:
        Represents a node in the syntax tree produced by the parser and consumed
        by the animator. Besides the usual kind/value/children, composite nodes
        carry the whitespace widths ("gaps") written around their tokens.

    ASTDict:
        TypedDict representation for serializing ASTNode instances to plain Python dictionaries,
        suitable for JSON output or debugging.

Node kinds:
    number (value: int), string (value: str), bool (value: bool):
        Leaves. No children, no gaps.
    binary (value: operator token type):
        children == [left, right]; gaps == (before operator, after operator).
    group:
        children == [inner]; gaps == (after "(", before ")").
    if:
        children == [cond, then, else]; gaps == (after "if", before "then",
        after "then", before "else", after "else"). Five gaps rather than four:
        every whitespace position of the form is kept, including the one after
        "then", so `if c then a else b` parses with ordinary spacing.

Gaps never influence the computed value; they are the only input to the
animation geometry.

Example:
    node = ASTNode("binary", "PLUS", [ASTNode("number", 1), ASTNode("number", 2)], gaps=(1, 1))
"""

from typing import Any, TypedDict


class ASTDict(TypedDict, total=False):
    """
    TypedDict representation of an ASTNode used for serialization.

    Fields:
        kind (str): The type of AST node (e.g., "binary", "group", "number").
        value (Any): The literal value or operator token type.
        line (int): Line number in the source code where the node originates.
        col (int): Column number in the source code where the node originates.
        gaps (list[int]): Whitespace widths recorded around the node's tokens.
        children (List[ASTDict]): Child nodes in the AST hierarchy.
    """

    kind: str
    value: Any
    line: int
    col: int
    gaps: list[int]
    children: list["ASTDict"]


class ASTNode:
    """
    Represents a node in the abstract syntax tree (AST) for the squish language.

    Args:
        kind (str): The type of node ("number", "string", "bool", "binary", "group", "if").
        value (Any, optional): Literal value for leaves, operator token type for "binary".
        children (list[ASTNode], optional): Child nodes, exclusively owned by this node.
        gaps (tuple[int, ...], optional): Whitespace widths captured around this node's tokens.
        line (int): Source line number (default is 0).
        col (int): Source column number (default is 0).
    """

    def __init__(
        self,
        kind: str,
        value: Any = None,
        children: list["ASTNode"] | None = None,
        gaps: tuple[int, ...] = (),
        line: int = 0,
        col: int = 0,
    ):
        if any(gap < 0 for gap in gaps):
            raise ValueError(f"Gaps must be non-negative, got {gaps}")
        self.kind = kind
        self.value = value
        self.children: list["ASTNode"] = children or []
        self.gaps = tuple(gaps)
        self.line = line
        self.col = col

    def __repr__(self) -> str:
        parts = [f"{self.kind}"]
        if self.value is not None:
            parts.append(f"value={repr(self.value)}")
        if self.gaps:
            parts.append(f"gaps={self.gaps}")
        if self.children:
            preview = ", ".join(repr(c) for c in self.children)
            parts.append(f"children=[{preview}]")
        return f"ASTNode({', '.join(parts)})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ASTNode):
            return False
        return (
            self.kind == other.kind
            and type(self.value) is type(other.value)
            and self.value == other.value
            and self.gaps == other.gaps
            and self.line == other.line
            and self.col == other.col
            and self.children == other.children
        )

    def to_dict(self) -> ASTDict:
        return {
            "kind": self.kind,
            "value": self.value,
            "line": self.line,
            "col": self.col,
            "gaps": list(self.gaps),
            "children": [c.to_dict() for c in self.children],
        }
