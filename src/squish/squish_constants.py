"""
Shared constants for the squish expression language.

Exports:
    token_hashmap: Maps literal source symbols and keywords to canonical token types.
    OPERATOR_GLYPHS: One-character glyph drawn for each operator in animation frames.
    TIER_OPERATORS: Operator token types accepted at each precedence tier (loosest first).
"""

TAB_WIDTH = 4
U16_MAX = 65535

# Animation geometry
MAX_TRANSITION_STEPS = 10

# Renderer defaults
ERASE_TAIL = 55
DEFAULT_DELAY = 0.1
DEFAULT_PAUSE = 1.0
REPL_DELAY = 0.05

token_hashmap: dict[str, str] = {
    "+": "PLUS",
    "-": "SUB",
    "*": "MULT",
    "/": "DIV",
    "&": "AND",
    "|": "OR",
    "=": "EQ",
    "!": "NEQ",
    ">": "GT",
    "<": "LT",
    "(": "LPAREN",
    ")": "RPAREN",
    "true": "TRUE",
    "false": "FALSE",
    "if": "IF",
    "then": "THEN",
    "else": "ELSE",
}

OPERATOR_GLYPHS: dict[str, str] = {
    "PLUS": "+",
    "SUB": "-",
    "MULT": "*",
    "DIV": "/",
    "AND": "&",
    "OR": "|",
    "EQ": "=",
    "NEQ": "!",
    "GT": ">",
    "LT": "<",
}

TIER_OPERATORS: list[set[str]] = [
    {"OR", "AND", "EQ", "NEQ", "GT", "LT"},
    {"PLUS", "SUB"},
    {"MULT", "DIV"},
]
