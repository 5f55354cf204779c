"""Orbiting camera and render modes for the fractal viewer."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import List

MAX_ZOOM = 5.0
MIN_ZOOM = 0.1
ZOOM_STEP = 1.1
SCROLL_SPEED = 0.1
MOUSE_SENSITIVITY = 0.005
MAX_PITCH = 1.5
BASE_RADIUS = 3.0


class RenderMode(enum.IntEnum):
    """How the mesh is drawn."""

    WIREFRAME = 0
    SOLID = 1
    COLORED = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def next(self) -> "RenderMode":
        """The mode that follows this one, wrapping around."""
        return RenderMode((self + 1) % len(RenderMode))


@dataclass
class Camera:
    """Camera looking at the origin, orbiting on a sphere."""

    eye: List[float] = field(default_factory=lambda: [1.5, 1.5, 0.0])
    center: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    up: List[float] = field(default_factory=lambda: [0.8, 0.3, 0.7])
    zoom_factor: float = 1.0
    rotation_x: float = 0.0
    rotation_y: float = 0.0
    last_mouse_x: float = 0.0
    last_mouse_y: float = 0.0
    dragging: bool = False

    def update_position(self) -> None:
        """Place the eye from the rotation angles and zoom, looking at the origin."""
        radius = BASE_RADIUS / self.zoom_factor
        pitch, yaw = self.rotation_x, self.rotation_y
        self.eye = [
            radius * math.cos(pitch) * math.cos(yaw),
            radius * math.sin(pitch),
            radius * math.cos(pitch) * math.sin(yaw),
        ]
        self.center = [0.0, 0.0, 0.0]
        self.up = [0.0, 1.0, 0.0]

    def zoom_in(self) -> float:
        """Zoom in one step, up to the maximum; return the new zoom factor."""
        self.zoom_factor = min(self.zoom_factor * ZOOM_STEP, MAX_ZOOM)
        self.update_position()
        return self.zoom_factor

    def zoom_out(self) -> float:
        """Zoom out one step, down to the minimum; return the new zoom factor."""
        self.zoom_factor = max(self.zoom_factor / ZOOM_STEP, MIN_ZOOM)
        self.update_position()
        return self.zoom_factor

    def scroll(self, yoffset: float) -> None:
        """Zoom from a scroll wheel offset: positive zooms in, negative out."""
        if yoffset > 0:
            self.zoom_factor = min(self.zoom_factor * (1.0 + SCROLL_SPEED), MAX_ZOOM)
        elif yoffset < 0:
            self.zoom_factor = max(self.zoom_factor * (1.0 - SCROLL_SPEED), MIN_ZOOM)
        self.update_position()

    def press(self, x: float, y: float) -> None:
        """Start dragging from the given cursor position."""
        self.dragging = True
        self.last_mouse_x = x
        self.last_mouse_y = y

    def release(self) -> None:
        """Stop dragging."""
        self.dragging = False

    def drag(self, x: float, y: float) -> None:
        """Rotate the camera by the cursor movement while dragging."""
        if not self.dragging:
            return
        dx = (x - self.last_mouse_x) * MOUSE_SENSITIVITY
        dy = (self.last_mouse_y - y) * MOUSE_SENSITIVITY
        self.last_mouse_x = x
        self.last_mouse_y = y
        self.rotation_y += dx
        self.rotation_x = max(-MAX_PITCH, min(MAX_PITCH, self.rotation_x + dy))
        self.update_position()