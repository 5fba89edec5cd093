"""Projection settings and cursor picking rays for a camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .camera import Camera


def perspective(fov_radians: float, aspect: float, z_near: float, z_far: float) -> np.ndarray:
    """Right-handed perspective projection with depth mapped to [-1, 1]."""
    tan_half = math.tan(fov_radians / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(z_far + z_near) / (z_far - z_near)
    m[2, 3] = -(2.0 * z_far * z_near) / (z_far - z_near)
    m[3, 2] = -1.0
    return m


def ortho(
    left: float, right: float, bottom: float, top: float, z_near: float, z_far: float
) -> np.ndarray:
    """Right-handed orthographic projection with depth mapped to [-1, 1]."""
    m = np.eye(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (z_far - z_near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(z_far + z_near) / (z_far - z_near)
    return m


def unproject(
    window_point: Sequence[float],
    view: np.ndarray,
    projection: np.ndarray,
    viewport: Sequence[float],
) -> np.ndarray:
    """Map a window-space point back to world space."""
    inverse = np.linalg.inv(np.asarray(projection, dtype=float) @ np.asarray(view, dtype=float))
    x, y, z = (float(c) for c in window_point)
    tmp = np.array(
        [
            (x - viewport[0]) / viewport[2],
            (y - viewport[1]) / viewport[3],
            z,
            1.0,
        ]
    )
    tmp = tmp * 2.0 - 1.0
    obj = inverse @ tmp
    return obj[:3] / obj[3]


@dataclass(eq=False)
class Ray:
    """A ray with an origin and a unit direction."""

    orig: np.ndarray = field(default_factory=lambda: np.zeros(3))
    dir: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))


@dataclass(eq=False)
class Viewport:
    """A camera together with the projection used to display it."""

    fov: float = 60.0
    z_near: float = 0.01
    z_far: float = 500.0
    width: float = 1.0
    height: float = 1.0
    parallel_projection: bool = False
    camera: Camera = field(default_factory=Camera)

    def projection_matrix(self) -> np.ndarray:
        """Orthographic or perspective projection matrix for the current settings."""
        if self.parallel_projection:
            w = self.target_plane_width() / 2.0
            h = self.target_plane_height() / 2.0
            return ortho(-w, w, -h, h, self.z_near, self.z_far)
        return perspective(math.radians(self.fov), self.aspect_ratio(), self.z_near, self.z_far)

    def set_size(self, width: int, height: int) -> None:
        self.width = float(width)
        self.height = float(height)

    def aspect_ratio(self) -> float:
        return self.width / self.height

    def target_plane_height(self) -> float:
        """Height of the visible area in the plane through the target."""
        return 2.0 * self.camera.distance_to_target() * math.tan(math.radians(self.fov / 2.0))

    def target_plane_width(self) -> float:
        """Width of the visible area in the plane through the target."""
        return self.target_plane_height() * self.aspect_ratio()

    def cursor_ray(self, x: float, y: float) -> Ray:
        """World-space ray under the cursor at window position (x, y), y pointing down."""
        view = self.camera.view_matrix()
        proj = self.projection_matrix()
        rect = (0.0, 0.0, self.width, self.height)
        y_inv = self.height - y
        a = unproject((x, y_inv, -1.0), view, proj, rect)
        b = unproject((x, y_inv, 1.0), view, proj, rect)
        direction = b - a
        return Ray(a, direction / np.linalg.norm(direction))