"""Command-line entry point: read the fractal parameters and report them."""

from __future__ import annotations

import re
import sys
from typing import Callable, List, Optional, Sequence

from morphosis.controls import Viewer
from morphosis.coords import hash_mean_matrix
from morphosis.matrix import mean_matrix, read_matrix_file
from morphosis.quaternion import Quat
from morphosis.settings import (
    ASK_ITER,
    ASK_SIZE,
    ErrorKind,
    FractalSettings,
    MorphosisError,
    check_step_size,
)

Prompt = Callable[[str], str]

_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_MIN_ARG_STEP = 0.00001
_MAX_ARG_STEP = 1.0


def _to_float(text: str) -> float:
    """Parse the leading number of ``text``, or 0 when there is none."""
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _to_int(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _checked_step(size: float, prompt: Prompt) -> float:
    if size < _MIN_ARG_STEP or size > _MAX_ARG_STEP:
        size = check_step_size(
            size,
            lambda text: _to_float(prompt(text)),
            lambda text: _to_int(prompt(text)),
        )
    return size


def _apply(settings: FractalSettings, q: Quat, step: float, iterations: int) -> None:
    settings.step_size = step
    settings.julia.c = q
    settings.julia.max_iter = iterations


def parse_args(argv: Sequence[str], prompt: Prompt) -> FractalSettings:
    """Build the fractal settings from the arguments after the program name.

    ``prompt`` shows a question and returns the user's answer; it is used
    for the step size and iteration count where those are not given.
    """
    args: List[str] = list(argv)
    if not args:
        raise MorphosisError(ErrorKind.NO_ARG)
    if len(args) != 5:
        if args == ["-d"]:
            return FractalSettings()
        if len(args) == 2 and args[0] == "-m":
            q = hash_mean_matrix(mean_matrix(read_matrix_file(args[1])))
            for name, value in zip("xyzw", q):
                print(f"{name}: {value:f}")
            step = _checked_step(_to_float(prompt(ASK_SIZE)), prompt)
            iterations = _to_int(prompt(ASK_ITER))
            print("Matrix processed")
            settings = FractalSettings()
            _apply(settings, q, step, iterations)
            return settings
        if len(args) == 2 and args[0] == "-p":
            raise MorphosisError(ErrorKind.ARGS, "poem input is not supported")
        raise MorphosisError(ErrorKind.ARGS)

    step = _checked_step(_to_float(args[0]), prompt)
    iterations = _to_int(prompt(ASK_ITER))
    q = Quat(*(_to_float(value) for value in args[1:5]))
    settings = FractalSettings()
    _apply(settings, q, step, iterations)
    return settings


def _ask(text: str) -> str:
    return input(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_args(argv, _ask)
    except MorphosisError as exc:
        print(str(exc), end="")
        return exc.exit_code
    except EOFError:
        print("\nERROR: Unexpected end of input\n", end="")
        return 1
    viewer = Viewer(settings=settings)
    print(viewer.parameter_info())
    return 0


if __name__ == "__main__":
    sys.exit(main())