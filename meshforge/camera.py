"""A look-at camera with orbit, pan and zoom controls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

ORBIT_SENSITIVITY = 0.005
VIEW_DISTANCE = 10.0


def _vec3(values: Sequence[float]) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def look_at(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``target``."""
    eye_v = _vec3(eye)
    f = _normalize(_vec3(target) - eye_v)
    s = _normalize(np.cross(f, _vec3(up)))
    u = np.cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -np.dot(s, eye_v)],
            [u[0], u[1], u[2], -np.dot(u, eye_v)],
            [-f[0], -f[1], -f[2], np.dot(f, eye_v)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_matrix(angle: float, axis: Sequence[float]) -> np.ndarray:
    """4x4 matrix rotating by ``angle`` radians counterclockwise about ``axis``."""
    a = _normalize(_vec3(axis))
    c, s = np.cos(angle), np.sin(angle)
    cross = np.array(
        [
            [0.0, -a[2], a[1]],
            [a[2], 0.0, -a[0]],
            [-a[1], a[0], 0.0],
        ]
    )
    matrix = np.eye(4)
    matrix[:3, :3] = c * np.eye(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return matrix


def translation_matrix(delta: Sequence[float]) -> np.ndarray:
    """4x4 matrix translating points by ``delta``."""
    matrix = np.eye(4)
    matrix[:3, 3] = _vec3(delta)
    return matrix


@dataclass(eq=False)
class Camera:
    """Camera defined by an eye position, a target point and an up vector."""

    eye: np.ndarray = field(default_factory=lambda: _vec3((0.0, 0.0, 1.0)))
    target: np.ndarray = field(default_factory=lambda: _vec3((0.0, 0.0, 0.0)))
    up: np.ndarray = field(default_factory=lambda: _vec3((0.0, 1.0, 0.0)))

    def __post_init__(self) -> None:
        self.eye = _vec3(self.eye)
        self.target = _vec3(self.target)
        self.up = _vec3(self.up)

    def view_matrix(self) -> np.ndarray:
        """The view matrix of this camera."""
        return look_at(self.eye, self.target, self.up)

    def forward(self) -> np.ndarray:
        """Unit vector from the eye towards the target."""
        return _normalize(self.target - self.eye)

    def right(self) -> np.ndarray:
        """Unit vector to the right of the viewing direction."""
        return _normalize(np.cross(self.forward(), self.up))

    def distance_to_target(self) -> float:
        """Distance between the eye and the target."""
        return float(np.linalg.norm(self.target - self.eye))

    def _place(self, offset: Sequence[float], up: Sequence[float]) -> None:
        self.eye = self.target + _vec3(offset)
        self.up = _vec3(up)

    def set_front_view(self) -> None:
        self._place((0, 0, VIEW_DISTANCE), (0, 1, 0))

    def set_top_view(self) -> None:
        self._place((0, VIEW_DISTANCE, 0), (0, 0, -1))

    def set_rear_view(self) -> None:
        self._place((0, 0, -VIEW_DISTANCE), (0, 1, 0))

    def set_right_view(self) -> None:
        self._place((VIEW_DISTANCE, 0, 0), (0, 1, 0))

    def set_left_view(self) -> None:
        self._place((-VIEW_DISTANCE, 0, 0), (0, 1, 0))

    def set_bottom_view(self) -> None:
        self._place((0, -VIEW_DISTANCE, 0), (0, 0, 1))

    def set_iso_view(self) -> None:
        self.eye = VIEW_DISTANCE + self.target + _normalize(_vec3((1, 1, 1)))
        self.up = _vec3((0, 1, 0))

    def orbit(self, a: Sequence[float], b: Sequence[float]) -> None:
        """Orbit around the target following a drag from ``a`` to ``b``."""
        dx = b[0] - a[0]
        dy = b[1] - a[1]
        self.rotate(self.target.copy(), self.up.copy(), -dx * ORBIT_SENSITIVITY)
        self.rotate(self.target.copy(), self.right(), -dy * ORBIT_SENSITIVITY)

    def pan(self, u: float, v: float) -> None:
        """Shift eye and target by ``u`` along the right vector and ``v`` along up."""
        delta = u * self.right() + v * self.up
        self.transform(translation_matrix(delta))

    def zoom(self, factor: float) -> None:
        """Move the eye ``factor`` units along the viewing direction."""
        self.eye = self.eye + self.forward() * factor

    def translate(self, delta: Sequence[float]) -> None:
        """Move eye and target together by ``delta``."""
        offset = _vec3(delta)
        self.eye = self.eye + offset
        self.target = self.target + offset

    def set_distance_to_target(self, distance: float) -> None:
        """Move the eye along its current line so it is ``distance`` from the target."""
        direction = _normalize(self.eye - self.target)
        self.eye = self.target + direction * distance

    def transform(self, matrix: np.ndarray) -> None:
        """Apply a 4x4 transform to the eye, target and up vector."""
        m = np.asarray(matrix, dtype=float)
        self.eye = (m @ np.append(self.eye, 1.0))[:3]
        self.target = (m @ np.append(self.target, 1.0))[:3]
        self.up = _normalize((m @ np.append(self.up, 0.0))[:3])

    def rotate(self, point: Sequence[float], axis: Sequence[float], angle: float) -> None:
        """Rotate the eye around ``point`` and the up vector by ``angle`` about ``axis``."""
        rot = rotation_matrix(angle, axis)
        pivot = _vec3(point)
        direction = (rot @ np.append(self.eye - pivot, 0.0))[:3]
        self.eye = pivot + direction
        self.up = _normalize((rot @ np.append(self.up, 0.0))[:3])

    def set_eye_target_up(
        self, eye: Sequence[float], target: Sequence[float], up: Sequence[float]
    ) -> None:
        """Set all three defining vectors; ``up`` is normalised."""
        self.eye = _vec3(eye)
        self.target = _vec3(target)
        self.up = _normalize(_vec3(up))