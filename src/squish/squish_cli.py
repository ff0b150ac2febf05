"""
squish CLI Entrypoint.

This module provides the command-line interface for animating squish
expressions. It reads an expression from a file or an inline string,
evaluates it and plays the collapse animation on the terminal.

Example usage:
    squish expr.sq
    squish -s "(1 + 2)   *   3"
    squish -s '"ab" + "cd"' --frames
    squish --repl

Functions:
    run_squish(source: str, is_string: bool = False, ...) -> AnimateResult:
        Executes the full pipeline (lex → parse → evaluate → render).

    main() -> None:
        Parses CLI arguments and invokes the appropriate action (REPL or animation).
"""

import argparse
import logging
import sys
from typing import TextIO

from squish.squish_animate import AnimateResult, animate_eval
from squish.squish_constants import DEFAULT_DELAY, DEFAULT_PAUSE
from squish.squish_errors import SquishError
from squish.squish_lexer import lex
from squish.squish_parser import parse
from squish.squish_render import print_frames, render

logger = logging.getLogger("squish")


def run_squish(
    source: str,
    is_string: bool = False,
    delay: float = DEFAULT_DELAY,
    pause: float = DEFAULT_PAUSE,
    frames: bool = False,
    stream: TextIO | None = None,
) -> AnimateResult:
    """
    Run the squish pipeline: lex, parse, evaluate and display.

    Args:
        source (str): Expression source, or a path to a file containing one.
        is_string (bool): If True, treats `source` as raw code instead of a file path.
        delay (float): Seconds between animation frames.
        pause (float): Seconds to hold the first frame.
        frames (bool): If True, print frames line by line instead of animating.
        stream (TextIO | None): Output stream. Defaults to stdout.

    Returns:
        AnimateResult: The evaluated value with its frames.

    Raises:
        SquishError: On any parse or evaluation failure.
        OSError: If the source file cannot be read.
        UnicodeDecodeError: If the source file is not valid UTF-8.
    """
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    tokens = lex(source)
    logger.debug("lexed %d tokens", len(tokens))

    _, ast, _ = parse(tokens)
    logger.debug("parsed %s expression", ast.kind)

    result = animate_eval(ast)
    logger.debug("built %d frames for %s", len(result.frames), result.value)

    if frames:
        print_frames(result, stream)
    else:
        render(result, stream, delay=delay, pause=pause)
    return result


def main() -> None:
    """
    Entry point for the squish CLI.

    Launches the REPL if no arguments are passed or `--repl` is specified,
    otherwise animates the given expression. Errors are reported on stderr
    with exit status 1.
    """
    if len(sys.argv) == 1:
        from squish.squish_repl import start_repl

        start_repl()
        return
    parser = argparse.ArgumentParser(prog="squish")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help=f"Seconds between frames (default: {DEFAULT_DELAY})",
    )
    parser.add_argument(
        "--pause",
        type=float,
        default=DEFAULT_PAUSE,
        help=f"Seconds to hold the first frame (default: {DEFAULT_PAUSE})",
    )
    parser.add_argument(
        "-f",
        "--frames",
        action="store_true",
        help="Print every frame on its own line instead of animating",
    )
    parser.add_argument(
        "--repl", action="store_true", help="Launch interactive REPL"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Verbose REPL mode (if --repl)"
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.repl or args.source is None:
        from squish.squish_repl import start_repl

        start_repl(verbose=args.verbose)
        return

    try:
        run_squish(
            source=args.source,
            is_string=args.string,
            delay=args.delay,
            pause=args.pause,
            frames=args.frames,
        )
    except (SquishError, OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
