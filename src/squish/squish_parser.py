"""
squish Language Parser

Parses a squish token list into an abstract syntax tree while keeping the
exact whitespace written between tokens.

Grammar
-------
    Expr   := Tier0
    Tier0  := Tier1 ( Gap (| & = ! > <) Gap Tier0 )?
    Tier1  := Tier2 ( Gap (+ -) Gap Tier1 )?
    Tier2  := Term  ( Gap (* /) Gap Tier2 )?
    Term   := NUMBER | STRING | true | false
            | "(" Gap Expr Gap ")"
            | "if" Gap Expr Gap "then" Gap Expr Gap "else" Gap Expr

Every tier parses its right operand at the same tier, so operators of equal
precedence group to the right: `10 - 4 - 3` is `10 - (4 - 3)`.

Parser Behavior
---------------
- Whitespace tokens are never skipped silently: each one is consumed at a
  known position and stored as a gap on the node being built.
- Fails fast on the first malformed construct; there is no recovery.

Entry Points
------------
- `parse(tokens)`: Parse a full token list into `(leading_gap, root, trailing_gap)`.
- `Parser.parse_expr()`: Parse one expression starting at the current position.

Raises
------
ParseError
    `UnexpectedToken`, `UnexpectedEnd`, `InvalidExpression`, or
    `NestingTooDeep` when nesting exhausts the recursion limit.
"""

from __future__ import annotations

from squish.squish_ast import ASTNode
from squish.squish_constants import TIER_OPERATORS
from squish.squish_errors import (
    InvalidExpression,
    NestingTooDeep,
    UnexpectedEnd,
    UnexpectedToken,
)
from squish.squish_lexer import Token

MAX_TIER = len(TIER_OPERATORS) - 1


class Parser:
    """
    Cursor over a token list.

    Attributes
    ----------
    tokens : list[Token]
        The input token stream to be parsed.
    position : int
        Index of the next unread token.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens: list[Token] = tokens
        self.position: int = 0

    def peek(self) -> Token | None:
        if 0 <= self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def next(self) -> Token | None:
        tok = self.peek()
        if tok is not None:
            self.position += 1
        return tok

    def peek_nonspace(self) -> Token | None:
        """Returns the first non-`SPACE` token ahead without consuming anything."""
        index = self.position
        while index < len(self.tokens) and self.tokens[index].type == "SPACE":
            index += 1
        return self.tokens[index] if index < len(self.tokens) else None

    def space(self) -> int:
        """Consumes a `SPACE` token if one is next and returns its width (0 otherwise)."""
        tok = self.peek()
        if tok is not None and tok.type == "SPACE":
            self.position += 1
            return tok.width
        return 0

    def expect(self, type_: str) -> Token:
        tok = self.next()
        if tok is None:
            raise UnexpectedEnd(type_)
        if tok.type != type_:
            raise UnexpectedToken(type_, tok)
        return tok

    def parse_expr(self) -> ASTNode:
        return self.parse_op(0)

    def parse_op(self, tier: int) -> ASTNode:
        """Parse a chain of operators belonging to precedence `tier` (0 is loosest)."""
        if tier < MAX_TIER:
            left = self.parse_op(tier + 1)
        else:
            left = self.parse_term()

        op = self.peek_nonspace()
        if op is None or op.type not in TIER_OPERATORS[tier]:
            return left

        left_gap = self.space()
        self.next()
        right_gap = self.space()
        right = self.parse_op(tier)
        return ASTNode(
            "binary",
            op.type,
            [left, right],
            gaps=(left_gap, right_gap),
            line=left.line,
            col=left.col,
        )

    def parse_term(self) -> ASTNode:
        tok = self.next()
        if tok is None:
            raise UnexpectedEnd()

        if tok.type == "NUMBER":
            return ASTNode("number", int(tok.value), line=tok.line, col=tok.col)
        if tok.type == "STRING":
            return ASTNode("string", tok.value, line=tok.line, col=tok.col)
        if tok.type in ("TRUE", "FALSE"):
            return ASTNode("bool", tok.type == "TRUE", line=tok.line, col=tok.col)
        if tok.type == "LPAREN":
            return self.parse_group(tok)
        if tok.type == "IF":
            return self.parse_if(tok)

        raise InvalidExpression(tok)

    def parse_group(self, open_tok: Token) -> ASTNode:
        left_gap = self.space()
        inner = self.parse_expr()
        right_gap = self.space()
        self.expect("RPAREN")
        return ASTNode(
            "group",
            children=[inner],
            gaps=(left_gap, right_gap),
            line=open_tok.line,
            col=open_tok.col,
        )

    def parse_if(self, if_tok: Token) -> ASTNode:
        after_if = self.space()
        cond = self.parse_expr()
        before_then = self.space()
        self.expect("THEN")
        after_then = self.space()
        then = self.parse_expr()
        before_else = self.space()
        self.expect("ELSE")
        after_else = self.space()
        else_ = self.parse_expr()
        return ASTNode(
            "if",
            children=[cond, then, else_],
            gaps=(after_if, before_then, after_then, before_else, after_else),
            line=if_tok.line,
            col=if_tok.col,
        )

    def parse(self) -> tuple[int, ASTNode, int]:
        leading = self.space()
        try:
            root = self.parse_expr()
        except RecursionError:
            raise NestingTooDeep() from None
        trailing = self.space()

        while True:
            tok = self.next()
            if tok is None:
                break
            if tok.type not in ("NEWLINE", "SPACE"):
                raise UnexpectedToken("end of input", tok)

        return leading, root, trailing


def parse(tokens: list[Token]) -> tuple[int, ASTNode, int]:
    """Parse a complete token list.

    Returns:
        tuple[int, ASTNode, int]: Leading whitespace width, the root node and
        trailing whitespace width.
    """
    return Parser(tokens).parse()
