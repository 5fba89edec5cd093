"""Interactive scene state for the mesh viewer: input handling and model loading."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from .stl import STLVertex, TriangleSoup, Vec, read_stl
from .viewport import Viewport

log = logging.getLogger(__name__)

MOVE_STEP = 0.2
COLOR_STEP = 0.05
PAN_SCALE = 0.01
ZOOM_SCALE = 0.5


class RenderMode(enum.Enum):
    TRIANGLES = enum.auto()
    EDGES = enum.auto()
    VERTICES = enum.auto()


class Modifier(enum.IntFlag):
    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8


class Action(enum.IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class ButtonCode(enum.IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class KeyCode(enum.IntEnum):
    UNKNOWN = -1
    UP = 265
    DOWN = 264
    LEFT = 263
    RIGHT = 262
    W = 87
    A = 65
    S = 83
    D = 68
    SPACE = 32
    ESC = 256
    R = 82
    T = 84
    G = 71
    H = 72
    B = 66
    N = 78
    NUM_1 = 49
    NUM_2 = 50
    NUM_3 = 51
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297


def looks_like_path(text: str) -> bool:
    """True when ``text`` contains a path separator."""
    return "/" in text or "\\" in text


def default_model() -> TriangleSoup:
    """A square pyramid used when no model can be loaded."""
    s = 0.707
    faces = [
        ((-1, 0, -1), (1, 0, -1), (1, 0, 1), (0, -1, 0)),
        ((1, 0, 1), (-1, 0, 1), (-1, 0, -1), (0, -1, 0)),
        ((-1, 0, -1), (1, 0, -1), (0, 1.5, 0), (0, s, -s)),
        ((1, 0, -1), (1, 0, 1), (0, 1.5, 0), (s, s, 0)),
        ((1, 0, 1), (-1, 0, 1), (0, 1.5, 0), (0, s, s)),
        ((-1, 0, 1), (-1, 0, -1), (0, 1.5, 0), (-s, s, 0)),
    ]
    soup: TriangleSoup = []
    for a, b, c, normal in faces:
        n = Vec(*normal)
        soup.extend(STLVertex(Vec(*p), n) for p in (a, b, c))
    return soup


def load_model(
    argument: Optional[str] = None, assets_dir: str | Path = "../../Assets"
) -> TriangleSoup:
    """Load the STL named by ``argument``, falling back to the default model.

    A bare file name is looked up in ``assets_dir``; anything with a path
    separator is used as given.
    """
    soup: TriangleSoup = []
    if argument:
        path = Path(argument) if looks_like_path(argument) else Path(assets_dir) / argument
        log.info("Attempting to load: %s", path)
        try:
            soup = read_stl(path)
        except OSError:
            soup = []
        if not soup:
            log.warning("Failed to load model: %s; using default model instead", path)
    else:
        log.info("No filename provided; using default model")
    return soup or default_model()


@dataclass(eq=False)
class SceneController:
    """Viewer state driven by keyboard and mouse events."""

    viewport: Viewport = field(default_factory=Viewport)
    model: TriangleSoup = field(default_factory=list)
    render_mode: RenderMode = RenderMode.TRIANGLES
    model_position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    mat_color: np.ndarray = field(default_factory=lambda: np.zeros(3))
    left_pressed: bool = False
    right_pressed: bool = False
    last_x: float = 0.0
    last_y: float = 0.0

    def move_camera(self, offset: Sequence[float]) -> None:
        """Move the camera by ``offset`` given in its right/up/forward frame."""
        cam = self.viewport.camera
        forward = cam.forward()
        right = np.cross(forward, cam.up)
        right /= np.linalg.norm(right)
        up = np.cross(right, forward)
        up /= np.linalg.norm(up)
        world = offset[0] * right + offset[1] * up + offset[2] * forward
        cam.set_eye_target_up(cam.eye + world, cam.target + world, up)

    def on_key(self, key: int, action: int) -> None:
        """Handle a key event: model movement, colour, render mode and views."""
        if action not in (Action.PRESS, Action.REPEAT):
            return
        moves = {
            KeyCode.UP: (0.0, MOVE_STEP, 0.0),
            KeyCode.DOWN: (0.0, -MOVE_STEP, 0.0),
            KeyCode.LEFT: (-MOVE_STEP, 0.0, 0.0),
            KeyCode.RIGHT: (MOVE_STEP, 0.0, 0.0),
        }
        if key in moves:
            self.model_position = self.model_position + np.array(moves[key])

        colors = {
            KeyCode.R: (0, COLOR_STEP), KeyCode.T: (0, -COLOR_STEP),
            KeyCode.G: (1, COLOR_STEP), KeyCode.H: (1, -COLOR_STEP),
            KeyCode.B: (2, COLOR_STEP), KeyCode.N: (2, -COLOR_STEP),
        }
        if key in colors:
            channel, step = colors[key]
            self.mat_color[channel] += step
        self.mat_color = np.clip(self.mat_color, 0.0, 1.0)

        modes = {
            KeyCode.NUM_1: RenderMode.TRIANGLES,
            KeyCode.NUM_2: RenderMode.EDGES,
            KeyCode.NUM_3: RenderMode.VERTICES,
        }
        if key in modes:
            self.render_mode = modes[key]

        cam = self.viewport.camera
        views = {
            KeyCode.F1: cam.set_front_view,
            KeyCode.F2: cam.set_top_view,
            KeyCode.F3: cam.set_rear_view,
            KeyCode.F4: cam.set_right_view,
            KeyCode.F5: cam.set_left_view,
            KeyCode.F6: cam.set_bottom_view,
            KeyCode.F7: cam.set_iso_view,
        }
        if key in views:
            views[key]()
        elif key == KeyCode.F8:
            self.viewport.parallel_projection = not self.viewport.parallel_projection

    def on_mouse_button(self, button: int, action: int) -> None:
        if button == ButtonCode.LEFT:
            self.left_pressed = action == Action.PRESS
        if button == ButtonCode.RIGHT:
            self.right_pressed = action == Action.PRESS

    def on_mouse_move(self, x: float, y: float) -> None:
        """Orbit with the left button held, pan with the right one."""
        dx = x - self.last_x
        dy = y - self.last_y
        cam = self.viewport.camera
        if self.left_pressed:
            cam.orbit((self.last_x, self.last_y, 0.0), (x, y, 0.0))
        elif self.right_pressed:
            cam.pan(-dx * PAN_SCALE, dy * PAN_SCALE)
        self.last_x = x
        self.last_y = y

    def on_scroll(self, xoffset: float, yoffset: float) -> None:
        self.viewport.camera.zoom(yoffset * ZOOM_SCALE)