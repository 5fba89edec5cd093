"""Cutting a triangle soup in two with a plane."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Mapping, Tuple

from .commands import Command, CommandError, parse_vec
from .stl import STLVertex, TriangleSoup, Vec, read_stl, write_stl


def _dot(a: Vec, b: Vec) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def is_above_plane(point: Vec, origin: Vec, normal: Vec) -> bool:
    """True when ``point`` lies strictly on the side ``normal`` points to."""
    return _dot(point - origin, normal) > 0.0


def intersect_edge_with_plane(
    v1: STLVertex, v2: STLVertex, plane_origin: Vec, plane_normal: Vec
) -> STLVertex:
    """Where the edge v1-v2 meets the plane; v1 when the edge is parallel to it."""
    edge = v2.pos - v1.pos
    denom = _dot(plane_normal, edge)
    if abs(denom) < 1e-10:
        return v1
    fac = -_dot(plane_normal, v1.pos - plane_origin) / denom
    return STLVertex(
        v1.pos + edge * fac,
        v1.normal + (v2.normal - v1.normal) * fac,
    )


def split_mesh(
    mesh: TriangleSoup, origin: Vec, normal: Vec
) -> Tuple[TriangleSoup, TriangleSoup]:
    """Split a soup by a plane and return ``(above, below)``."""
    if len(mesh) % 3:
        raise ValueError("triangle soup length must be a multiple of three")
    above: TriangleSoup = []
    below: TriangleSoup = []
    for triangle in zip(*[iter(mesh)] * 3):
        sides = [is_above_plane(v.pos, origin, normal) for v in triangle]
        if all(sides):
            above.extend(triangle)
            continue
        if not any(sides):
            below.extend(triangle)
            continue
        ups = [v for v, side in zip(triangle, sides) if side]
        downs = [v for v, side in zip(triangle, sides) if not side]
        if len(ups) == 1:
            lone, lone_side, pair_side = ups[0], above, below
            b, c = downs
        else:
            lone, lone_side, pair_side = downs[0], below, above
            b, c = ups
        i1 = intersect_edge_with_plane(lone, b, origin, normal)
        i2 = intersect_edge_with_plane(lone, c, origin, normal)
        lone_side.extend((lone, i1, i2))
        pair_side.extend((b, c, i1, c, i2, i1))
    return above, below


@dataclass
class Split(Command):
    """Split an STL file: ``input``, ``origin``, ``direction``, ``output1``, ``output2``."""

    output_dir: str | Path = "Assets"
    name: ClassVar[str] = "Split"

    def execute(self, args: Mapping[str, str]) -> str:
        required = ("input", "origin", "direction", "output1", "output2")
        if any(key not in args for key in required):
            raise CommandError("Missing one or more arguments.", 3)

        try:
            mesh = read_stl(args["input"])
        except OSError:
            mesh = []
        if not mesh or len(mesh) % 3:
            raise CommandError("Unable to read input STL file.", 2)

        try:
            origin = parse_vec(args["origin"])
            direction = parse_vec(args["direction"])
        except ValueError as exc:
            raise CommandError("Invalid origin or direction format.", 3) from exc

        length = math.sqrt(_dot(direction, direction))
        if length <= 0.0:
            raise CommandError("Normal vector length must be greater than zero.", 1)
        direction = direction * (1.0 / length)

        above, below = split_mesh(mesh, origin, direction)
        if not above or not below:
            raise CommandError("The plane does not split the mesh.", 4)

        for soup, key in ((above, "output1"), (below, "output2")):
            try:
                write_stl(soup, args[key], self.output_dir)
            except OSError as exc:
                raise CommandError(f"Cannot write to file {args[key]}", 2) from exc
        return "Mesh successfully split and saved."