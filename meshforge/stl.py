"""Triangle soups and the ASCII STL format."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence


@dataclass(frozen=True)
class Vec:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec:
        return Vec(self.x * scalar, self.y * scalar, self.z * scalar)


@dataclass(frozen=True)
class STLVertex:
    """A vertex of a triangle soup: a position and the normal of its facet."""

    pos: Vec
    normal: Vec = Vec()


TriangleSoup = List[STLVertex]


def calculate_normal(v1: Vec, v2: Vec, v3: Vec) -> Vec:
    """Unit normal of the triangle (v1, v2, v3); zero for a degenerate one."""
    u = v2 - v1
    v = v3 - v1
    normal = Vec(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )
    length = math.sqrt(normal.x ** 2 + normal.y ** 2 + normal.z ** 2)
    if length > 0.0:
        normal = Vec(normal.x / length, normal.y / length, normal.z / length)
    return normal


def _parse_triple(tokens: Sequence[str]) -> Vec:
    values: list[float] = []
    for token in tokens[:3]:
        try:
            values.append(float(token))
        except ValueError:
            break
    values.extend([0.0] * (3 - len(values)))
    return Vec(*values)


def read_stl(path: str | Path) -> TriangleSoup:
    """Read an ASCII STL file into a flat list of vertices, three per facet.

    Raises OSError when the file cannot be opened.
    """
    soup: TriangleSoup = []
    normal = Vec()
    with open(path, encoding="utf-8", errors="replace") as stream:
        for line in stream:
            tokens = line.split()
            if not tokens:
                continue
            head, rest = tokens[0], tokens[1:]
            if head == "facet":
                normal = _parse_triple(rest[1:])
            elif head == "vertex":
                soup.append(STLVertex(_parse_triple(rest), normal))
    return soup


def _fmt(value: float) -> str:
    return f"{value:g}"


def write_stl(
    soup: Iterable[STLVertex],
    filename: str | Path,
    directory: str | Path = "Assets",
) -> Path:
    """Write a triangle soup as ASCII STL into ``directory`` and return the path.

    Facet normals are recomputed from the vertex positions.
    """
    vertices = list(soup)
    if len(vertices) % 3:
        raise ValueError("triangle soup length must be a multiple of three")
    path = Path(directory) / filename
    lines = ["solid STLModel"]
    for a, b, c in zip(*[iter(vertices)] * 3):
        normal = calculate_normal(a.pos, b.pos, c.pos)
        lines.append(
            f"  facet normal {_fmt(normal.x)} {_fmt(normal.y)} {_fmt(normal.z)}"
        )
        lines.append("    outer loop")
        for vertex in (a, b, c):
            pos = vertex.pos
            lines.append(f"      vertex {_fmt(pos.x)} {_fmt(pos.y)} {_fmt(pos.z)}")
        lines.append("    endloop")
        lines.append("  endfacet")
    lines.append("endsolid STLModel")
    with open(path, "w", encoding="utf-8") as stream:
        stream.write("\n".join(lines) + "\n")
    return path