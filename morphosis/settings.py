"""Error kinds, user messages and the fractal generation settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Tuple

from morphosis.sampling import JuliaParams

MIN_STEP_SIZE = 0.00001
MAX_STEP_SIZE = 0.5
SMALL_STEP_SIZE = 0.02

MALLOC_FAIL = "\nERROR: Could not allocate memory\n"
OPEN_FILE = "\nERROR: Could not open the file\n"
GRID = "\nERROR: Invalid step size\n min: 0.00001 | max: 0.5\n"
SMALL_S_SIZE = (
    "\nWARNING: Small step size —-- model display may lag considerably\n"
    "Enter 0 to proceed    |     1 to enter new value       |        2 to exit: "
)
ASK_SIZE = "Please enter step size: "
ASK_ITER = "Please enter number of iterations: "
ARGS = "\nERROR: Invalid program arguments\n"
USAGE = (
    "\nUSAGE: \n"
    "./morphosis *step_size* *q.x* *q.y* *q.z* *q.w*\n"
    "./morphosis -d\t\t\t\t\t\t| to use default values\n"
    "./morphosis -m *file_name.mat*\t\t\t\t| to read data from matrix\n"
    "./morphosis -p *file_name*\t\t\t\t| to read data from poem\n\n"
)
NO_ARG = (
    "\nThis program calculates, displays and saves a 4d Julia set as an OBJ "
    "file in the current directory\n"
    "When fractal is displayed, press ESC to exit or S to save and export the mesh\n"
)
BAD_FILE = "\nERROR: Invalid data in the file\n\n"


class ErrorKind(enum.IntEnum):
    """Kinds of fatal error the program reports."""

    MALLOC_FAIL = 1
    OPEN_FILE = 2
    ARGS = 3
    GRID = 4
    NO_ARG = 5
    BAD_FILE = 6


_MESSAGES = {
    ErrorKind.MALLOC_FAIL: MALLOC_FAIL,
    ErrorKind.OPEN_FILE: OPEN_FILE,
    ErrorKind.ARGS: ARGS + USAGE,
    ErrorKind.GRID: GRID,
    ErrorKind.NO_ARG: NO_ARG + USAGE,
    ErrorKind.BAD_FILE: BAD_FILE,
}


def error_message(kind: ErrorKind) -> str:
    """Return the text shown to the user for an error kind."""
    return _MESSAGES[ErrorKind(kind)]


class MorphosisError(Exception):
    """A fatal error; the command reports its message and exits with status 1."""

    exit_code = 1

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        self.kind = ErrorKind(kind)
        self.detail = detail
        super().__init__(error_message(self.kind) + (detail and f"{detail}\n"))


def check_step_size(
    size: float,
    ask_size: Callable[[str], float],
    ask_choice: Callable[[str], int],
) -> float:
    """Validate a step size, asking the user again until it is accepted.

    ``ask_size`` and ``ask_choice`` are called with the prompt to show and
    return the user's answer. Sizes outside the allowed range trigger a new
    size; small sizes ask whether to proceed (0), enter a new size (1) or
    exit (2), the last raising ``SystemExit(0)``.
    """
    while True:
        if size < MIN_STEP_SIZE or size > MAX_STEP_SIZE:
            size = ask_size(GRID + ASK_SIZE)
        elif size < SMALL_STEP_SIZE:
            choice = ask_choice(SMALL_S_SIZE)
            if choice == 0:
                return size
            if choice == 1:
                size = ask_size(ASK_SIZE)
            elif choice == 2:
                raise SystemExit(0)
        else:
            return size


Point3 = Tuple[float, float, float]


@dataclass
class FractalSettings:
    """Bounds, grid and sampling settings for one fractal generation."""

    p0: Point3 = (-1.5, -1.5, -1.5)
    p1: Point3 = (1.5, 1.5, 1.5)
    grid_length: float = 3.0
    grid_size: float = 0.0
    step_size: float = 0.05
    julia: JuliaParams = field(default_factory=JuliaParams)

    param_step_size: float = 0.01
    show_info: bool = True

    zoom_level: float = 1.0
    adaptive_grid: bool = False
    max_grid_depth: int = 3
    detail_threshold: float = 0.1
    use_double_precision: bool = False

    fractal_type: int = 0
    quaternion_formula: int = 0

    supersampling: int = 1
    adaptive_sampling: bool = False
    progressive_refinement: bool = False