"""
Lexical analyzer for the squish expression language.

This module turns raw source text into an ordered token list. Unlike most
lexers, whitespace is not discarded: every run of spaces becomes a `SPACE`
token so the parser can record the exact gaps the animation is drawn from.

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: Represents a single token with type, value, and source location.
    Lexer: Converts a CharacterStream into a sequence of tokens.

Features:
    - Tabs are expanded to four spaces and carriage returns dropped before scanning
    - Runs of spaces become a single `SPACE` token whose width is `len(value)`
    - Recognizes:
        * Unsigned 16-bit integers
        * Strings in single or double quotes (escapes kept verbatim)
        * Keywords `true`, `false`, `if`, `then`, `else`
        * Single-character operators and parentheses

The lexer never raises: anything it cannot make sense of becomes an `ERROR`
token and is reported by the parser.

Example:
    >>> lex("1 + 2")
    [Token(NUMBER, 1), Token(SPACE, ' '), Token(PLUS, +), Token(SPACE, ' '), Token(NUMBER, 2)]

Exports:
    - CharacterStream
    - Token
    - Lexer
    - lex
    - token_hashmap
"""

from collections.abc import Callable
from typing import Any

from squish.squish_constants import TAB_WIDTH, U16_MAX, token_hashmap

DIGITS = "0123456789"


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    The lexer reads one character at a time through this stream so every token
    can be stamped with the position it started at.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        """
        Initializes the character stream.

        Args:
            source (str): The (already normalized) source text.
            position (int, optional): Starting position index. Defaults to 0.
            line (int, optional): Starting line number. Defaults to 1.
            column (int, optional): Starting column number. Defaults to 1.
        """
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Returns:
            str: The next character.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise EOFError(
                f"CharacterStreamError: Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """
        Returns the character at the given offset from the current position without advancing.

        Args:
            offset (int, optional): Number of characters to look ahead. Defaults to 0.

        Returns:
            str: The character at the offset, or an empty string if out of bounds.
        """
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        """Checks if the stream has reached the end of the source input.

        Returns:
            bool: True if the stream has consumed all characters, False otherwise.
        """
        return self.position >= len(self.source)


class Token:
    """Represents a single lexical token in the squish language.

    Attributes:
        type (str): The canonical token type (e.g. 'NUMBER', 'SPACE', 'PLUS').
        value (str): The raw text of the token. For `SPACE` this is the run of
            spaces itself, so its width is `len(value)`.
        line (int): The 1-based line number where the token appears.
        col (int): The 1-based column number where the token starts.
    """

    def __init__(self, type_: str, value: str, line: int = 0, col: int = 0):
        """Initializes a new Token instance.

        Args:
            type_ (str): The token's type.
            value (str): The raw text of the token.
            line (int, optional): The line number (default is 0).
            col (int, optional): The column number (default is 0).
        """
        self.type = type_
        self.value = value
        self.line = line
        self.col = col

    @property
    def width(self) -> int:
        """Number of source characters the token covers (the gap size for `SPACE`)."""
        return len(self.value)

    def __repr__(self) -> str:
        """Returns a string representation of the token.

        `SPACE` values are quoted so their width stays visible.

        Returns:
            str: A concise summary of the token's type and value.
        """
        if self.type == "SPACE":
            return f"Token(SPACE, {self.value!r})"
        return f"Token({self.type}, {self.value})"

    def __eq__(self, other: Any) -> bool:
        """Compares two Token instances for equality.

        Args:
            other (Any): The object to compare against.

        Returns:
            bool: True if type, value, line and column all match.
        """
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.type, self.value, self.line, self.col))


class Lexer:
    """Lexical analyzer for the squish language.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def peek(self) -> str:
        """Returns the next character in the stream without consuming it.

        Returns:
            str: The upcoming character, or an empty string if EOF.
        """
        return self.stream.peek()

    def advance(self) -> str:
        """Consumes and returns the next character from the stream."""
        return self.stream.next()

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """Consumes characters while `predicate` holds.

        Args:
            predicate (Callable[[str], bool]): Test applied to each upcoming character.

        Returns:
            str: The consumed run (possibly empty).
        """
        start = self.stream.position
        while not self.stream.end_of_file() and predicate(self.peek()):
            self.advance()
        return self.stream.source[start : self.stream.position]

    def read_string(self, line: int, col: int) -> Token:
        """Reads a quoted string, keeping backslash escapes verbatim.

        Args:
            line (int): Line of the opening quote.
            col (int): Column of the opening quote.

        Returns:
            Token: A `STRING` token without its quotes, or an `ERROR` token
            holding the remaining input when the closing quote is missing.
        """
        quote = self.advance()
        start = self.stream.position
        while not self.stream.end_of_file():
            if self.peek() == "\\":
                self.advance()
                if not self.stream.end_of_file():
                    self.advance()
            elif self.peek() == quote:
                break
            else:
                self.advance()
        val = self.stream.source[start : self.stream.position]
        if self.peek() == quote:
            self.advance()
            return Token("STRING", val, line, col)
        return Token("ERROR", quote + val, line, col)

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token: The next token, or an `EOF` token once the input is exhausted.
        """
        if self.stream.end_of_file():
            return Token("EOF", "EOF", self.stream.line, self.stream.column)

        ch = self.peek()
        line, col = self.stream.line, self.stream.column

        # 1. Whitespace runs are kept
        if ch == " ":
            return Token("SPACE", self.read_while(lambda c: c == " "), line, col)

        if ch == "\n":
            self.advance()
            return Token("NEWLINE", "\n", line, col)

        # 2. Number
        if ch in DIGITS:
            num = self.read_while(lambda c: c in DIGITS)
            if int(num) > U16_MAX:
                return Token("ERROR", num, line, col)
            return Token("NUMBER", num, line, col)

        # 3. String
        if ch in ('"', "'"):
            return self.read_string(line, col)

        # 4. Keyword
        if ch.isalpha():
            word = self.read_while(lambda c: c.isalnum() or c == "_")
            if word in token_hashmap:
                return Token(token_hashmap[word], word, line, col)
            return Token("ERROR", word, line, col)

        # 5. Operator or paren
        if ch in token_hashmap:
            self.advance()
            return Token(token_hashmap[ch], ch, line, col)

        # 6. Unknown character
        return Token("ERROR", self.advance(), line, col)


def lex(source: str) -> list[Token]:
    """Tokenizes `source` into a list of tokens, excluding the final `EOF`.

    Tabs are replaced by four spaces and carriage returns are removed first,
    so reported columns refer to the normalized text.
    """
    source = source.replace("\t", " " * TAB_WIDTH).replace("\r", "")
    lexer = Lexer(CharacterStream(source))
    tokens: list[Token] = []
    while True:
        tok = lexer.next_token()
        if tok.type == "EOF":
            break
        tokens.append(tok)
    return tokens


__all__ = ["CharacterStream", "Lexer", "Token", "lex", "token_hashmap"]
