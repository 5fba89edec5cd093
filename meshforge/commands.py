"""Mesh-generating commands: cube and sphere."""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Mapping

from .stl import STLVertex, TriangleSoup, Vec, calculate_normal, write_stl

LATITUDE_DIVS = 20
LONGITUDE_DIVS = 20

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_CHAR = re.compile(r"\s*\S")

_CORNER_SIGNS = (
    (-1, -1, -1), (1, -1, -1), (1, 1, -1), (-1, 1, -1),
    (-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1),
)
_CUBE_FACES = (
    (0, 1, 2, 3), (4, 5, 6, 7),
    (0, 1, 5, 4), (2, 3, 7, 6),
    (0, 3, 7, 4), (1, 2, 6, 5),
)


class CommandError(Exception):
    """A command failed; ``code`` is the exit status to report."""

    def __init__(self, message: str, code: int = 1) -> None:
        super().__init__(message)
        self.code = code


class Command(ABC):
    """A named action run with ``key -> value`` arguments."""

    name: ClassVar[str] = ""

    @abstractmethod
    def execute(self, args: Mapping[str, str]) -> str:
        """Run the command and return a message for the user."""


def _skip_char(text: str, pos: int) -> int:
    match = _CHAR.match(text, pos)
    if match is None:
        raise ValueError(f"malformed vector: {text!r}")
    return match.end()


def parse_vec(text: str) -> Vec:
    """Parse a vector written as three numbers wrapped in separators, e.g. ``(1,2,3)``."""
    pos = _skip_char(text, 0)
    values = []
    for _ in range(3):
        match = _NUMBER.match(text, pos)
        if match is None:
            raise ValueError(f"malformed vector: {text!r}")
        values.append(float(match.group(1)))
        pos = _skip_char(text, match.end())
    return Vec(*values)


def _parse_number(text: str, what: str) -> float:
    match = _NUMBER.match(text)
    if match is None:
        raise CommandError(f"Invalid {what}.", 3)
    return float(match.group(1))


def _require(args: Mapping[str, str], *keys: str) -> None:
    if any(key not in args for key in keys):
        raise CommandError("Missing one or more arguments.", 3)


def _save(soup: TriangleSoup, filepath: str, directory: str | Path) -> None:
    if not filepath:
        raise CommandError("Invalid file path.", 2)
    try:
        write_stl(soup, filepath, directory)
    except OSError as exc:
        raise CommandError(f"Cannot write to file {filepath}", 2) from exc


def _origin(args: Mapping[str, str]) -> Vec:
    try:
        return parse_vec(args["origin"])
    except ValueError as exc:
        raise CommandError("Invalid origin format.", 3) from exc


def generate_cube(length: float, origin: Vec) -> TriangleSoup:
    """Triangulate an axis-aligned cube of side ``length`` centred on ``origin``."""
    half = length / 2.0
    corners = [
        Vec(origin.x + sx * half, origin.y + sy * half, origin.z + sz * half)
        for sx, sy, sz in _CORNER_SIGNS
    ]
    soup: TriangleSoup = []
    for a, b, c, d in _CUBE_FACES:
        normal = calculate_normal(corners[a], corners[b], corners[c])
        soup.extend(
            STLVertex(corners[i], normal) for i in (a, b, c, c, d, a)
        )
    return soup


def generate_sphere(radius: float, origin: Vec) -> TriangleSoup:
    """Triangulate a UV sphere of ``radius`` centred on ``origin``."""
    rows = []
    for i in range(LATITUDE_DIVS + 1):
        theta = math.pi * i / LATITUDE_DIVS
        row = []
        for j in range(LONGITUDE_DIVS + 1):
            phi = 2 * math.pi * j / LONGITUDE_DIVS
            row.append(
                Vec(
                    radius * math.sin(theta) * math.cos(phi) + origin.x,
                    radius * math.sin(theta) * math.sin(phi) + origin.y,
                    radius * math.cos(theta) + origin.z,
                )
            )
        rows.append(row)

    soup: TriangleSoup = []
    for upper, lower in zip(rows, rows[1:]):
        for v1, v3, v2, v4 in zip(upper, upper[1:], lower, lower[1:]):
            normal1 = calculate_normal(v1, v2, v3)
            soup.extend(STLVertex(v, normal1) for v in (v1, v2, v3))
            normal2 = calculate_normal(v3, v2, v4)
            soup.extend(STLVertex(v, normal2) for v in (v3, v2, v4))
    return soup


@dataclass
class Cube(Command):
    """Write a cube: arguments ``L``, ``origin`` and ``filepath``."""

    output_dir: str | Path = "Assets"
    name: ClassVar[str] = "cube"

    def execute(self, args: Mapping[str, str]) -> str:
        _require(args, "L", "origin", "filepath")
        length = _parse_number(args["L"], "cube side length")
        if length <= 0:
            raise CommandError("Cube side length must be positive.", 1)
        origin = _origin(args)
        filepath = args["filepath"]
        if not filepath:
            raise CommandError("Invalid file path.", 2)
        _save(generate_cube(length, origin), filepath, self.output_dir)
        return f"Cube successfully saved to {filepath}"


@dataclass
class Sphere(Command):
    """Write a sphere: arguments ``R``, ``origin`` and ``filepath``."""

    output_dir: str | Path = "Assets"
    name: ClassVar[str] = "sphere"

    def execute(self, args: Mapping[str, str]) -> str:
        _require(args, "R", "origin", "filepath")
        radius = _parse_number(args["R"], "sphere radius")
        if radius <= 0:
            raise CommandError("Sphere radius must be positive.", 1)
        origin = _origin(args)
        filepath = args["filepath"]
        if not filepath:
            raise CommandError("Invalid file path.", 2)
        _save(generate_sphere(radius, origin), filepath, self.output_dir)
        return f"Sphere successfully saved to {filepath}"