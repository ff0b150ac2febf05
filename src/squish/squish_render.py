"""
Terminal playback of squish animations.

`render` redraws frames in place with a carriage return, pausing on the
first frame and stepping through the rest at a fixed delay, then settles on
the padded result line. `print_frames` writes the same content one line per
frame with no pacing, which is what pipes and tests want.

Pacing never changes frame contents; `sleep` and `stream` are injectable.
"""

import sys
import time
from collections.abc import Callable
from typing import TextIO

from squish.squish_animate import AnimateResult
from squish.squish_constants import DEFAULT_DELAY, DEFAULT_PAUSE, ERASE_TAIL


def final_line(result: AnimateResult) -> str:
    left, text, right = result.last
    return " " * left + text + " " * right


def render(
    result: AnimateResult,
    stream: TextIO | None = None,
    delay: float = DEFAULT_DELAY,
    pause: float = DEFAULT_PAUSE,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Play `result` on a terminal.

    Args:
        result (AnimateResult): Evaluation outcome to display.
        stream (TextIO | None): Output stream. Defaults to `sys.stdout`.
        delay (float): Seconds between frames.
        pause (float): Seconds to hold the first frame before animating.
        sleep (Callable[[float], None]): Sleep function, replaced in tests.
    """
    out = stream if stream is not None else sys.stdout
    tail = " " * ERASE_TAIL
    out.write("\n\n\n\n")
    if result.frames:
        out.write(result.frames[0] + tail)
        out.flush()
        sleep(pause)
    for frame in result.frames:
        out.write("\r" + frame + tail)
        out.flush()
        sleep(delay)
    out.write("\r" + final_line(result) + "\n")
    out.flush()


def print_frames(result: AnimateResult, stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    for frame in result.frames:
        out.write(frame + "\n")
    out.write(final_line(result) + "\n")
