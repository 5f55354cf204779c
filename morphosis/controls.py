"""Keyboard handling and parameter display for the interactive viewer."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Collection, List, Set

from morphosis.camera import Camera, RenderMode
from morphosis.sampling import Formula
from morphosis.settings import FractalSettings

KEY_DELAY = 0.1
CAMERA_DELAY = 0.05
MAX_ITERATIONS = 50
MIN_ITERATIONS = 1
MAX_PARAM_STEP = 0.1
MIN_PARAM_STEP = 0.0001
PARAM_STEP_FACTOR = 1.5
MAX_SUPERSAMPLING = 3
MAX_ZOOM_LEVEL = 1000000.0
MIN_ZOOM_LEVEL = 1.0
DEEP_ZOOM_WARNING = 1000.0
THRESHOLD_STEP = 0.05
MAX_THRESHOLD = 0.5


class Key(enum.Enum):
    """Keys the viewer reacts to."""

    ESCAPE = "escape"
    S = "s"
    R = "r"
    SPACE = "space"
    I = "i"  # noqa: E741
    EQUAL = "equal"
    KP_ADD = "kp_add"
    MINUS = "minus"
    KP_SUBTRACT = "kp_subtract"
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    Q = "q"
    A = "a"
    Z = "z"
    X = "x"
    F = "f"
    T = "t"
    M = "m"
    P = "p"
    O = "o"  # noqa: E741
    G = "g"
    H = "h"
    J = "j"
    K = "k"


class FractalType(enum.IntEnum):
    """Kinds of fractal the sampler can produce."""

    JULIA = 0
    MANDELBROT = 1
    HYBRID = 2

    @property
    def label(self) -> str:
        return _FRACTAL_LABELS[self]


_FRACTAL_LABELS = {
    FractalType.JULIA: "Julia Set",
    FractalType.MANDELBROT: "Mandelbrot Set",
    FractalType.HYBRID: "Hybrid",
}

_CONTROLS_HELP = (
    "Controls:",
    "  Arrow Keys: Adjust Julia C.x/C.y",
    "  +/-: Adjust iterations",
    "  Q/A: Adjust parameter step size",
    "  Z/X: Zoom in/out",
    "  R: Toggle render mode",
    "  SPACE: Toggle auto-rotation",
    "  I: Toggle this info display",
    "  F: Force regeneration",
    "  T: Toggle fractal type",
    "  M: Toggle quaternion formula",
    "  P: Toggle double precision",
    "  O: Toggle supersampling",
    "  G/H: Deep zoom in/out",
    "  J: Toggle adaptive grid",
    "  K: Adjust detail threshold",
    "  ESC: Exit, S: Save",
)


def _on_off(flag: bool) -> str:
    return "ON" if flag else "OFF"


@dataclass
class Viewer:
    """State of the interactive viewer driven by key presses."""

    settings: FractalSettings = field(default_factory=FractalSettings)
    camera: Camera = field(default_factory=Camera)
    render_mode: RenderMode = RenderMode.WIREFRAME
    auto_rotate: bool = True
    needs_regeneration: bool = False
    export: bool = False
    should_close: bool = False
    num_tris: int = 0
    _held: Set[Key] = field(default_factory=set, repr=False)
    _last_key_time: float = field(default=0.0, repr=False)
    _last_camera_time: float = field(default=0.0, repr=False)

    def _edge(self, key: Key, pressed: Collection[Key]) -> bool:
        """True only when ``key`` has just gone down."""
        if key not in pressed:
            self._held.discard(key)
            return False
        if key in self._held:
            return False
        self._held.add(key)
        return True

    def _set_c(self, **changes: float) -> None:
        julia = self.settings.julia
        julia.c = dataclasses.replace(julia.c, **changes)

    def process_input(self, pressed: Collection[Key], now: float) -> List[str]:
        """Apply the keys held down at time ``now``; return the messages produced.

        Input is ignored within a tenth of a second of the last handled key.
        Toggle keys act once per press; adjustment keys repeat while held.
        """
        if now - self._last_key_time < KEY_DELAY:
            return []
        messages: List[str] = []
        settings = self.settings
        julia = settings.julia

        if Key.ESCAPE in pressed:
            self.should_close = True
        if Key.S in pressed:
            self.export = True
            self.should_close = True

        if self._edge(Key.R, pressed):
            self.render_mode = RenderMode(self.render_mode).next()
            messages.append(f"Render mode: {self.render_mode.label}")
            self._last_key_time = now

        if self._edge(Key.SPACE, pressed):
            self.auto_rotate = not self.auto_rotate
            messages.append(f"Auto-rotation: {_on_off(self.auto_rotate)}")
            self._last_key_time = now

        if self._edge(Key.I, pressed):
            settings.show_info = not settings.show_info
            messages.append(f"Info display: {_on_off(settings.show_info)}")
            if settings.show_info:
                messages.append(self.parameter_info())
            self._last_key_time = now

        if Key.EQUAL in pressed or Key.KP_ADD in pressed:
            julia.max_iter = min(julia.max_iter + 1, MAX_ITERATIONS)
            self.needs_regeneration = True
            messages.append(f"Iterations: {julia.max_iter}")
            self._last_key_time = now

        if Key.MINUS in pressed or Key.KP_SUBTRACT in pressed:
            julia.max_iter = max(julia.max_iter - 1, MIN_ITERATIONS)
            self.needs_regeneration = True
            messages.append(f"Iterations: {julia.max_iter}")
            self._last_key_time = now

        step = settings.param_step_size
        for key, axis, sign in (
            (Key.RIGHT, "x", 1),
            (Key.LEFT, "x", -1),
            (Key.UP, "y", 1),
            (Key.DOWN, "y", -1),
        ):
            if key in pressed:
                self._set_c(**{axis: getattr(julia.c, axis) + sign * step})
                self.needs_regeneration = True
                messages.append(f"Julia C.{axis}: {getattr(julia.c, axis):.3f}")
                self._last_key_time = now

        if Key.Q in pressed:
            settings.param_step_size = min(
                settings.param_step_size * PARAM_STEP_FACTOR, MAX_PARAM_STEP
            )
            messages.append(f"Step size: {settings.param_step_size:.4f}")
            self._last_key_time = now

        if Key.A in pressed:
            settings.param_step_size = max(
                settings.param_step_size / PARAM_STEP_FACTOR, MIN_PARAM_STEP
            )
            messages.append(f"Step size: {settings.param_step_size:.4f}")
            self._last_key_time = now

        messages.extend(self._camera_keys(pressed, now))

        if self._edge(Key.F, pressed):
            self.needs_regeneration = True
            messages.append("Force regeneration requested")
            self._last_key_time = now

        if self._edge(Key.T, pressed):
            settings.fractal_type = (settings.fractal_type + 1) % len(FractalType)
            messages.append(
                f"Fractal Type: {FractalType(settings.fractal_type).label}"
            )
            self.needs_regeneration = True
            self._last_key_time = now

        if self._edge(Key.M, pressed):
            settings.quaternion_formula = (settings.quaternion_formula + 1) % len(
                Formula
            )
            messages.append(
                f"Quaternion Formula: {Formula(settings.quaternion_formula).label}"
            )
            self.needs_regeneration = True
            self._last_key_time = now

        if self._edge(Key.P, pressed):
            settings.use_double_precision = not settings.use_double_precision
            messages.append(
                f"Double Precision: {_on_off(settings.use_double_precision)}"
            )
            self.needs_regeneration = True
            self._last_key_time = now

        if self._edge(Key.O, pressed):
            settings.supersampling += 1
            if settings.supersampling > MAX_SUPERSAMPLING:
                settings.supersampling = 1
            messages.append(f"Supersampling: {settings.supersampling}x")
            if settings.supersampling > 1:
                messages.append("Warning: Supersampling will slow regeneration")
            self.needs_regeneration = True
            self._last_key_time = now

        if self._edge(Key.G, pressed):
            settings.zoom_level = min(settings.zoom_level * 2.0, MAX_ZOOM_LEVEL)
            messages.append(f"Zoom Level: {settings.zoom_level:.1f}x")
            if settings.zoom_level > DEEP_ZOOM_WARNING:
                messages.append(
                    "Deep zoom active - consider enabling double precision (P)"
                )
            self.needs_regeneration = True
            self._last_key_time = now

        if self._edge(Key.H, pressed):
            settings.zoom_level = max(settings.zoom_level / 2.0, MIN_ZOOM_LEVEL)
            messages.append(f"Zoom Level: {settings.zoom_level:.1f}x")
            self.needs_regeneration = True
            self._last_key_time = now

        if self._edge(Key.J, pressed):
            settings.adaptive_grid = not settings.adaptive_grid
            messages.append(f"Adaptive Grid: {_on_off(settings.adaptive_grid)}")
            if settings.adaptive_grid:
                messages.append(
                    "Note: Adaptive grid is experimental and may slow generation"
                )
            self.needs_regeneration = True
            self._last_key_time = now

        if self._edge(Key.K, pressed):
            settings.detail_threshold += THRESHOLD_STEP
            if settings.detail_threshold > MAX_THRESHOLD:
                settings.detail_threshold = THRESHOLD_STEP
            messages.append(f"Detail Threshold: {settings.detail_threshold:.2f}")
            if settings.adaptive_grid:
                self.needs_regeneration = True
            self._last_key_time = now

        return messages

    def _camera_keys(self, pressed: Collection[Key], now: float) -> List[str]:
        if now - self._last_camera_time < CAMERA_DELAY:
            return []
        messages = []
        if Key.Z in pressed:
            messages.append(f"Zoom: {self.camera.zoom_in():.2f}x")
            self._last_camera_time = now
        if Key.X in pressed:
            messages.append(f"Zoom: {self.camera.zoom_out():.2f}x")
            self._last_camera_time = now
        return messages

    def parameter_info(self) -> str:
        """Describe the current fractal parameters, render settings and controls."""
        s = self.settings
        julia = s.julia
        c = julia.c
        lines = [
            "========== MORPHOSIS PARAMETERS ==========",
            "Julia Set Parameters:",
            f"  C = ({c.x:.3f}, {c.y:.3f}, {c.z:.3f}, {c.w:.3f})",
            f"  Max Iterations: {julia.max_iter}",
            f"  Step Size: {s.step_size:.6f}",
            f"  Parameter Step: {s.param_step_size:.4f}",
            "Rendering Settings:",
            f"  Render Mode: {RenderMode(self.render_mode).label}",
            f"  Auto Rotation: {_on_off(self.auto_rotate)}",
            f"  Zoom Factor: {self.camera.zoom_factor:.2f}x",
            f"  Triangles: {self.num_tris}",
            "Mathematical Enhancements:",
            f"  Fractal Type: {FractalType(s.fractal_type).label}",
            f"  Quaternion Formula: {Formula(s.quaternion_formula).label}",
            f"  Deep Zoom Level: {s.zoom_level:.1f}x",
            f"  Double Precision: {_on_off(s.use_double_precision)}",
            f"  Supersampling: {s.supersampling}x",
            f"  Adaptive Grid: {_on_off(s.adaptive_grid)}",
        ]
        if s.adaptive_grid:
            lines.append(f"  Detail Threshold: {s.detail_threshold:.2f}")
        lines.extend(_CONTROLS_HELP)
        lines.append("==========================================")
        return "\n".join(lines)