import io
import sys
from pathlib import Path
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from squish import squish_cli
from squish.squish_errors import DivisionByZero, UnexpectedEnd
from squish.squish_value import Value


def test_run_squish_string_frames() -> None:
    buf = io.StringIO()
    result = squish_cli.run_squish("1+2", is_string=True, frames=True, stream=buf)
    assert result.value == Value.number(3)
    assert buf.getvalue().splitlines() == ["1+2", " 3 ", " 3 "]


def test_run_squish_file_input(tmp_path: Path) -> None:
    file_path = tmp_path / "expr.sq"
    file_path.write_text('"ab" + "cd"\n', encoding="utf-8")
    result = squish_cli.run_squish(str(file_path), frames=True, stream=io.StringIO())
    assert result.value == Value.string("abcd")


def test_run_squish_animates(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[Any] = []
    monkeypatch.setattr(
        squish_cli, "render", lambda result, stream, delay, pause: calls.append((delay, pause))
    )
    squish_cli.run_squish("1 + 1", is_string=True, delay=0.5, pause=0.0)
    assert calls == [(0.5, 0.0)]


def test_run_squish_propagates_errors() -> None:
    with pytest.raises(DivisionByZero):
        squish_cli.run_squish("5 / 0", is_string=True, frames=True, stream=io.StringIO())
    with pytest.raises(UnexpectedEnd):
        squish_cli.run_squish("", is_string=True, frames=True, stream=io.StringIO())


def test_run_squish_logs_pipeline(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("DEBUG", logger="squish"):
        squish_cli.run_squish("2*3", is_string=True, frames=True, stream=io.StringIO())
    assert "lexed 3 tokens" in caplog.text
    assert "built 2 frames for 6" in caplog.text


def test_main_frames_mode(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["squish", "-s", "12 + 7", "--frames"])
    squish_cli.main()
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == "  19  "


def test_main_reports_errors(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["squish", "-s", "5 / 0", "-f"])
    with pytest.raises(SystemExit) as exc:
        squish_cli.main()
    assert exc.value.code == 1
    assert "error: Division by zero" in capsys.readouterr().err


def test_main_missing_file(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    monkeypatch.setattr(sys, "argv", ["squish", str(tmp_path / "nope.sq")])
    with pytest.raises(SystemExit):
        squish_cli.main()
    assert capsys.readouterr().err.startswith("error:")


def test_main_no_args_starts_repl(monkeypatch: pytest.MonkeyPatch) -> None:
    called: list[Any] = []
    monkeypatch.setattr(sys, "argv", ["squish"])
    monkeypatch.setattr("squish.squish_repl.start_repl", lambda **kw: called.append(kw))
    squish_cli.main()
    assert called == [{}]


def test_main_repl_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    called: list[Any] = []
    monkeypatch.setattr(sys, "argv", ["squish", "--repl", "--verbose"])
    monkeypatch.setattr("squish.squish_repl.start_repl", lambda **kw: called.append(kw))
    squish_cli.main()
    assert called == [{"verbose": True}]


@given(st.integers(min_value=0, max_value=65535))  # type: ignore[misc]
def test_number_literal_settles_on_itself(n: int) -> None:
    buf = io.StringIO()
    result = squish_cli.run_squish(str(n), is_string=True, frames=True, stream=buf)
    assert buf.getvalue() == f"{n}\n"
    assert result.frames == []


def test_main_deep_nesting_reports_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["squish", "-s", "(" * 300 + "1" + ")" * 300])
    with pytest.raises(SystemExit) as exc:
        squish_cli.main()
    assert exc.value.code == 1
    assert "error: Expression is nested too deeply" in capsys.readouterr().err


def test_main_invalid_utf8_file(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    file_path = tmp_path / "bad.sq"
    file_path.write_bytes(b"1 + \xff")
    monkeypatch.setattr(sys, "argv", ["squish", str(file_path)])
    with pytest.raises(SystemExit) as exc:
        squish_cli.main()
    assert exc.value.code == 1
    assert "error:" in capsys.readouterr().err
