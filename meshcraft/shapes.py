"""Tessellation of a cube, cylinder, cone and sphere into triangles on a canvas."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from meshcraft.canvas import Canvas
from meshcraft.vertex import Point3D

_PI = 3.1415926

_CUBE_C2 = Point3D(-0.5, -0.5, 0.5)
_CUBE_C3 = Point3D(-0.5, -0.5, -0.5)
_CUBE_C4 = Point3D(0.5, -0.5, -0.5)
_CUBE_C6 = Point3D(0.5, -0.5, 0.5)
_CUBE_C8 = Point3D(-0.5, 0.5, -0.5)

_SPHERE_SLICES = 3
_SPHERE_MIN_STACKS = 5


def _offset(p: Point3D, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Point3D:
    return Point3D(p.x + dx, p.y + dy, p.z + dz)


def _edge(start: Point3D, step: tuple[float, float, float], count: int) -> list[Point3D]:
    """Return count + 1 evenly spaced points starting at start."""
    sx, sy, sz = step
    return [_offset(start, sx * i, sy * i, sz * i) for i in range(count + 1)]


def _midpoint(a: Point3D, b: Point3D) -> Point3D:
    return Point3D((a.x + b.x) / 2, (a.y + b.y) / 2, (a.z + b.z) / 2)


def _closed_ring(radius: float, count: int, z: float) -> list[Point3D]:
    """Points around a circle at height z, with the start point repeated at the end."""
    step = 2 * _PI / count
    ring = [
        Point3D(radius * math.cos(step * i), radius * math.sin(step * i), z)
        for i in range(count)
    ]
    ring.append(Point3D(radius, 0, z))
    return ring


def make_cube(canvas: Canvas, subdivisions: int) -> None:
    """Tessellate a unit cube centred at the origin.

    The step between subdivision points is the whole-number quotient of one
    by the subdivision count.
    """
    subdivisions = max(subdivisions, 1)
    d = float(1 // subdivisions)

    x_step = (d, 0.0, 0.0)
    y_step = (0.0, d, 0.0)
    edge34 = _edge(_CUBE_C3, x_step, subdivisions)
    edge26 = _edge(_CUBE_C2, x_step, subdivisions)
    edge45 = _edge(_CUBE_C4, y_step, subdivisions)
    edge67 = _edge(_CUBE_C6, y_step, subdivisions)
    edge85 = _edge(_CUBE_C8, x_step, subdivisions)

    # (edge, apex built from the second point?, apex offset, apex listed first?)
    faces: Sequence[tuple[list[Point3D], bool, tuple[float, float, float], bool]] = (
        (edge34, True, (0.0, 0.0, d), False),
        (edge26, False, (0.0, 0.0, -d), True),
        (edge45, False, (0.0, 0.0, d), False),
        (edge67, True, (0.0, 0.0, -d), True),
        (edge34, True, (0.0, d, 0.0), True),
        (edge85, False, (0.0, -d, 0.0), False),
    )

    for edge, from_second, offset, apex_first in faces:
        for _ in range(subdivisions):
            for a, b in zip(edge, edge[1:]):
                apex = _offset(b if from_second else a, *offset)
                if apex_first:
                    canvas.add_triangle(apex, a, b)
                else:
                    canvas.add_triangle(b, a, apex)


def make_cylinder(
    canvas: Canvas, radius: float, radial_divisions: int, height_divisions: int
) -> None:
    """Tessellate a cylinder: a capping fan followed by the side wall, layer by layer."""
    radial_divisions = max(radial_divisions, 3)
    height_divisions = max(height_divisions, 1)

    d = float(1 // height_divisions)
    centre = Point3D(0, 0, -radius)
    ring = _closed_ring(radius, radial_divisions, -radius)

    for a, b in zip(ring, ring[1:]):
        canvas.add_triangle(centre, a, b)

    for i in range(height_divisions):
        low = d * i
        high = d * (i + 1)
        for a, b in zip(ring, ring[1:]):
            c1 = _offset(a, dz=low)
            canvas.add_triangle(c1, _offset(b, dz=high), _offset(b, dz=low))
            canvas.add_triangle(c1, _offset(a, dz=high), _offset(b, dz=high))


def make_cone(
    canvas: Canvas, radius: float, radial_divisions: int, height_divisions: int
) -> None:
    """Tessellate a cone with its apex at z = -radius and its base at z = radius."""
    radial_divisions = max(radial_divisions, 3)
    height_divisions = max(height_divisions, 1)

    base_centre = Point3D(0, 0, radius)
    apex = Point3D(0, 0, -radius)
    ring = _closed_ring(radius, radial_divisions, radius)

    def layer(level: int) -> list[Point3D]:
        points = []
        for p in ring[:radial_divisions]:
            x = p.x - apex.x
            y = p.y - apex.y
            z = p.z - apex.z
            points.append(
                Point3D(
                    apex.x + x / height_divisions * level,
                    apex.y + y / height_divisions * level,
                    apex.z + z / height_divisions * level,
                )
            )
        points.append(points[0])
        return points

    for i in range(height_divisions):
        upper = layer(i)
        lower = layer(i + 1)
        if i == 0:
            for a, b in zip(lower, lower[1:]):
                canvas.add_triangle(apex, a, b)
        else:
            for k in range(radial_divisions):
                canvas.add_triangle(upper[k], lower[k], lower[k + 1])
                canvas.add_triangle(upper[k], lower[k + 1], upper[k + 1])

    for a, b in zip(ring, ring[1:]):
        canvas.add_triangle(base_centre, a, b)


def _hemisphere(
    canvas: Canvas,
    radius: float,
    slices: int,
    stacks: int,
    polar: Callable[[int], float],
) -> None:
    """Tessellate one half of a sphere, doubling the ring size at each stack."""

    def ring(count: int, level: int) -> list[Point3D]:
        phi = polar(level)
        step = 2 * _PI / count
        return [
            Point3D(
                radius * math.cos(step * j) * math.sin(phi),
                radius * math.sin(step * j) * math.sin(phi),
                radius * math.cos(phi),
            )
            for j in range(count)
        ]

    current = ring(slices, 1)
    canvas.add_triangle(current[0], current[1], current[2])

    for i in range(1, stacks):
        following = ring(slices * 2**i, i + 1)
        size = len(current)
        for j, point in enumerate(current):
            canvas.add_triangle(point, following[2 * j], following[2 * j + 1])
            last = j == size - 1
            mid = _midpoint(point, current[0] if last else current[j + 1])
            canvas.add_triangle(
                mid, following[2 * j + 1], following[0] if last else following[2 * j + 2]
            )
        current = following


def make_sphere(canvas: Canvas, radius: float, slices: int, stacks: int) -> None:
    """Tessellate a sphere as two hemispheres of rings that double in size.

    The slice count is always three and the stack count at least five.
    """
    slices = _SPHERE_SLICES
    stacks = max(stacks, _SPHERE_MIN_STACKS)
    d = _PI / (stacks * 2)

    _hemisphere(canvas, radius, slices, stacks, lambda k: d * k)
    _hemisphere(canvas, radius, slices, stacks, lambda k: _PI - d * k)