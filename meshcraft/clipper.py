"""Clipping of polygons against an axis-aligned rectangle."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from meshcraft.vertex import Point2D

_ALWAYS_SKIP_CORNER_AT_OR_BELOW = 4
_FULL_REGION_COUNT = 9
_LOWER_RIGHT_COUNT = 7


def _div(a: float, b: float) -> float:
    """Divide the way IEEE floats do, giving inf or nan instead of raising."""
    a = float(a)
    b = float(b)
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _edge_bounds(first: Point2D, second: Point2D) -> tuple[Point2D, Point2D]:
    """Return the lower-left and upper-right corners of an edge's bounding box."""
    return (
        Point2D(min(first.x, second.x), min(first.y, second.y)),
        Point2D(max(first.x, second.x), max(first.y, second.y)),
    )


def _crossings(
    first: Point2D, second: Point2D, ll: Point2D, ur: Point2D
) -> Iterator[Point2D]:
    """Yield the points where the edge's line meets the region's edge lines.

    Only points lying on the edge itself and inside the region are yielded,
    in the order: left, right, bottom, top.
    """
    low, high = _edge_bounds(first, second)
    m = _div(first.y - second.y, first.x - second.x)
    b = first.y - m * first.x
    candidates = (
        Point2D(ll.x, m * ll.x + b),
        Point2D(ur.x, m * ur.x + b),
        Point2D(_div(ll.y - b, m), ll.y),
        Point2D(_div(ur.y - b, m), ur.y),
    )
    for point in candidates:
        if is_inside(point, low, high) and is_inside(point, ll, ur):
            yield point


def is_inside(v: Point2D, ll: Point2D, ur: Point2D) -> bool:
    """Tell whether v lies in the rectangle ll..ur, borders included."""
    return ll.x <= v.x <= ur.x and ll.y <= v.y <= ur.y


def find_junction(
    first: Point2D, second: Point2D, ll: Point2D, ur: Point2D
) -> Point2D:
    """Return where the edge first..second crosses the region's border.

    Raises ValueError when no such crossing can be found.
    """
    junction = next(_crossings(first, second, ll, ur), None)
    if junction is None:
        raise ValueError(
            f"edge {first} -> {second} does not cross the region {ll}..{ur}"
        )
    return junction


def outside_clip(first: Point2D, second: Point2D, ll: Point2D, ur: Point2D) -> bool:
    """Tell whether the edge first..second stays clear of the region."""
    return not any(True for _ in _crossings(first, second, ll, ur))


def which_corner(
    first: Point2D, second: Point2D, ll: Point2D, ur: Point2D, n: int
) -> Point2D:
    """Pick the region corner used for an edge that passes outside the region.

    The choice depends only on the polygon's vertex count n: seven-sided
    polygons use the lower-right corner, all others the lower-left one.
    """
    if n == _LOWER_RIGHT_COUNT:
        return Point2D(ur.x, ll.y)
    return ll


def clip_polygon(
    vertices: Iterable[Point2D], ll: Point2D, ur: Point2D
) -> list[Point2D]:
    """Clip a polygon against the rectangle with corners ll and ur.

    Returns the vertices of the clipped polygon; an empty list means
    nothing of the polygon is left.
    """
    polygon = list(vertices)
    count = len(polygon)
    result: list[Point2D] = []

    def add(point: Point2D) -> None:
        if point not in result:
            result.append(point)

    for first, second in zip(polygon, polygon[1:] + polygon[:1]):
        first_in = is_inside(first, ll, ur)
        second_in = is_inside(second, ll, ur)
        if first_in and second_in:
            add(first)
            add(second)
        elif first_in:
            add(first)
            add(find_junction(first, second, ll, ur))
        elif second_in:
            add(find_junction(first, second, ll, ur))
            add(second)
        elif outside_clip(first, second, ll, ur):
            corner = which_corner(first, second, ll, ur, count)
            if (
                corner not in result
                and count > _ALWAYS_SKIP_CORNER_AT_OR_BELOW
                and count != _FULL_REGION_COUNT
            ):
                result.append(corner)

    if count == _FULL_REGION_COUNT:
        result.extend((ll, Point2D(ll.x, ur.y), Point2D(ur.x, ll.y), ur))

    return result