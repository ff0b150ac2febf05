import pytest
from hypothesis import given
from hypothesis import strategies as st

from squish.squish_lexer import CharacterStream, Lexer, Token, lex


def types(source: str) -> list[str]:
    return [tok.type for tok in lex(source)]


def test_single_char_tokens() -> None:
    code = "+-*/&|=!><()"
    expected = [
        "PLUS",
        "SUB",
        "MULT",
        "DIV",
        "AND",
        "OR",
        "EQ",
        "NEQ",
        "GT",
        "LT",
        "LPAREN",
        "RPAREN",
    ]
    assert types(code) == expected


def test_whitespace_is_kept_as_space_tokens() -> None:
    tokens = lex("1   + 2")
    assert [t.type for t in tokens] == ["NUMBER", "SPACE", "PLUS", "SPACE", "NUMBER"]
    assert tokens[1].width == 3
    assert tokens[3].width == 1


def test_tabs_become_four_spaces() -> None:
    tokens = lex("1\t+ \t2")
    assert tokens[1] == Token("SPACE", "    ", 1, 2)
    assert tokens[3].width == 5


def test_carriage_returns_are_dropped() -> None:
    assert types("1\r\n") == ["NUMBER", "NEWLINE"]


def test_number_token() -> None:
    tok = lex("123")[0]
    assert tok.type == "NUMBER"
    assert tok.value == "123"


@pytest.mark.parametrize(
    "source,expected",
    [("65535", "NUMBER"), ("65536", "ERROR"), ("0", "NUMBER"), ("99999999", "ERROR")],
)  # type: ignore[misc]
def test_number_range(source: str, expected: str) -> None:
    assert types(source) == [expected]


def test_string_tokens() -> None:
    assert lex('"hello world"')[0] == Token("STRING", "hello world", 1, 1)
    assert lex("'single'")[0].value == "single"


def test_string_escapes_kept_verbatim() -> None:
    tok = lex(r'"a\"b"')[0]
    assert tok.type == "STRING"
    assert tok.value == r"a\"b"


def test_unterminated_string_is_error_token() -> None:
    assert lex('"abc') == [Token("ERROR", '"abc', 1, 1)]


def test_keywords() -> None:
    assert types("true false if then else") == [
        "TRUE",
        "SPACE",
        "FALSE",
        "SPACE",
        "IF",
        "SPACE",
        "THEN",
        "SPACE",
        "ELSE",
    ]


def test_unknown_word_is_error() -> None:
    assert lex("foo") == [Token("ERROR", "foo", 1, 1)]
    assert types("trueish") == ["ERROR"]


def test_invalid_char_returns_error_token() -> None:
    assert any(tok.type == "ERROR" and tok.value == "@" for tok in lex("1 @ 2"))


def test_line_and_column_tracking() -> None:
    tokens = lex("1  +\n 22")
    assert tokens[2].col == 4
    assert tokens[3].type == "NEWLINE"
    assert (tokens[5].line, tokens[5].col) == (2, 2)


def test_empty_source() -> None:
    assert lex("") == []


def test_token_eof() -> None:
    lexer = Lexer(CharacterStream(""))
    assert lexer.next_token().type == "EOF"


def test_stream_read_past_end() -> None:
    stream = CharacterStream("a")
    stream.next()
    assert stream.peek() == ""
    with pytest.raises(EOFError):
        stream.next()


def test_token_repr_and_hash() -> None:
    assert repr(Token("SPACE", "  ")) == "Token(SPACE, '  ')"
    assert repr(Token("PLUS", "+")) == "Token(PLUS, +)"
    assert len({Token("PLUS", "+", 1, 1), Token("PLUS", "+", 1, 1)}) == 1


@given(st.integers(min_value=0, max_value=65535), st.integers(min_value=1, max_value=20))  # type: ignore[misc]
def test_number_followed_by_space_run(n: int, width: int) -> None:
    tokens = lex(f"{n}{' ' * width}")
    assert tokens[0].value == str(n)
    assert tokens[1].width == width
    assert len(tokens) == 2


def test_long_runs_are_read_whole() -> None:
    tokens = lex("1" + " " * 5000 + "+ '" + "x" * 5000 + "'")
    assert tokens[1].width == 5000
    assert tokens[4].value == "x" * 5000


def test_read_while_stops_at_predicate() -> None:
    lexer = Lexer(CharacterStream("aab"))
    assert lexer.read_while(lambda c: c == "a") == "aa"
    assert lexer.peek() == "b"
