import io
import json
import traceback

from squish.squish_animate import animate_eval
from squish.squish_constants import REPL_DELAY
from squish.squish_errors import SquishError
from squish.squish_lexer import lex
from squish.squish_parser import parse
from squish.squish_render import render


def print_traceback() -> None:
    buf = io.StringIO()
    traceback.print_exc(file=buf)
    print("[error] >>>")
    print(buf.getvalue())


def evaluate_line(src: str, delay: float = REPL_DELAY, verbose: bool = False) -> None:
    tokens = lex(src)
    if verbose:
        print(f"[tokens] >>> {tokens}")
    _, ast, _ = parse(tokens)
    if verbose:
        print("[ast] >>>")
        print(json.dumps(ast.to_dict(), indent=2))
    result = animate_eval(ast)
    render(result, delay=delay, pause=0.0)


def start_repl(delay: float = REPL_DELAY, verbose: bool = False) -> None:
    print("squish REPL. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            line = input(">>> ")
        except (EOFError, KeyboardInterrupt):
            print("\nExiting squish REPL.")
            return

        src = line.rstrip()
        if src.strip() in ("exit", "quit"):
            print("Exiting squish REPL.")
            return
        if not src.strip() or src.strip().startswith("#"):
            continue
        if src.strip().lower() == "verbose-mode":
            verbose = not verbose
            print(f"[mode] >>> Verbose mode {'ON' if verbose else 'OFF'}")
            continue

        try:
            evaluate_line(src, delay=delay, verbose=verbose)
        except SquishError as e:
            print(f"[error] >>> {e}")
        except Exception:
            print_traceback()
