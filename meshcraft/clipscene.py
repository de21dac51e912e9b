"""The polygon-clipping scene: clip regions, test polygons and their clipped fills."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, NamedTuple

from meshcraft.buffers import BufferSet
from meshcraft.canvas import Canvas
from meshcraft.clipper import clip_polygon
from meshcraft.vertex import Point2D

WINDOW_WIDTH = 300
WINDOW_HEIGHT = 300

WHITE = (1.0, 1.0, 1.0)


class ClipRegion(NamedTuple):
    """A rectangular clipping region given by its lower-left and upper-right corners."""

    ll: Point2D
    ur: Point2D


class ScenePolygon(NamedTuple):
    """A polygon of the scene, its drawing color and the region it is clipped against."""

    name: str
    color: tuple[float, float, float]
    vertices: tuple[Point2D, ...]
    region: ClipRegion


def _points(*coords: tuple[float, float]) -> tuple[Point2D, ...]:
    return tuple(Point2D(x, y) for x, y in coords)


CLIP1 = ClipRegion(Point2D(10, 110), Point2D(50, 150))
CLIP2 = ClipRegion(Point2D(30, 10), Point2D(70, 80))
CLIP3 = ClipRegion(Point2D(90, 34), Point2D(120, 60))
CLIP4 = ClipRegion(Point2D(90, 80), Point2D(130, 110))
CLIP5 = ClipRegion(Point2D(198, 198), Point2D(276, 258))
CLIP6 = ClipRegion(Point2D(221, 80), Point2D(251, 101))

CLIP_REGIONS: tuple[ClipRegion, ...] = (CLIP1, CLIP2, CLIP3, CLIP4, CLIP5, CLIP6)

POLYGONS: tuple[ScenePolygon, ...] = (
    # entirely within its region
    ScenePolygon(
        "quad1", (1.0, 0.0, 0.0),
        _points((20, 120), (20, 140), (40, 140), (40, 120)), CLIP1,
    ),
    # entirely outside its region
    ScenePolygon(
        "quad2", (0.0, 1.0, 0.0),
        _points((80, 160), (80, 200), (60, 200), (60, 160)), CLIP1,
    ),
    # halfway outside on the left
    ScenePolygon(
        "quad3", (0.0, 0.0, 1.0),
        _points((20, 60), (50, 60), (50, 50), (20, 50)), CLIP2,
    ),
    # partly outside on the right
    ScenePolygon(
        "quad4", (1.0, 0.0, 1.0),
        _points((44, 122), (60, 122), (60, 146), (44, 146)), CLIP1,
    ),
    # outside on the left and bottom
    ScenePolygon(
        "pent1", (1.0, 0.5, 1.0),
        _points((80, 20), (90, 10), (110, 20), (100, 50), (80, 40)), CLIP3,
    ),
    # outside on the top, right and bottom
    ScenePolygon(
        "hept1", (0.7, 0.7, 0.7),
        _points(
            (120, 70), (140, 70), (160, 80), (160, 100),
            (140, 110), (120, 100), (110, 90),
        ),
        CLIP4,
    ),
    # surrounds its region
    ScenePolygon(
        "nona1", (0.871, 0.722, 0.529),
        _points(
            (190, 56), (230, 68), (247, 56), (269, 71), (284, 104),
            (251, 122), (233, 110), (212, 119), (203, 95),
        ),
        CLIP6,
    ),
    # outside on all four edges
    ScenePolygon(
        "deca1", (1.0, 0.64705, 0.0),
        _points(
            (177, 156), (222, 188), (267, 156), (250, 207), (294, 240),
            (240, 240), (222, 294), (204, 240), (150, 240), (194, 207),
        ),
        CLIP5,
    ),
)


def _ranges(counts: Iterable[int]) -> list[tuple[int, int]]:
    """Turn vertex counts into (first, count) draw ranges, skipping empty ones."""
    ranges = []
    start = 0
    for count in counts:
        if count:
            ranges.append((start, count))
            start += count
    return ranges


@dataclass
class ClipImage:
    """The three buffer sets that make up the scene and the clipped vertex counts."""

    clip_buffers: BufferSet = field(default_factory=BufferSet)
    outline_buffers: BufferSet = field(default_factory=BufferSet)
    clipped_buffers: BufferSet = field(default_factory=BufferSet)
    counts: list[int] = field(default_factory=list)

    def clip_ranges(self) -> list[tuple[int, int]]:
        """Draw ranges of the clip-region line loops."""
        return _ranges(4 for _ in CLIP_REGIONS)

    def outline_ranges(self) -> list[tuple[int, int]]:
        """Draw ranges of the original polygon outlines."""
        return _ranges(len(polygon.vertices) for polygon in POLYGONS)

    def fill_ranges(self) -> list[tuple[int, int]]:
        """Draw ranges of the clipped polygons; empty results are left out."""
        return _ranges(self.counts)


def draw_clip_region(ll: Point2D, ur: Point2D, canvas: Canvas) -> None:
    """Add a region's corners in line-loop order: LL, LR, UR, UL."""
    canvas.set_pixel(ll.x, ll.y)
    canvas.set_pixel(ur.x, ll.y)
    canvas.set_pixel(ur.x, ur.y)
    canvas.set_pixel(ll.x, ur.y)


def make_clip_outlines(canvas: Canvas) -> None:
    """Add the outlines of every clip region, in the current color."""
    for region in CLIP_REGIONS:
        draw_clip_region(region.ll, region.ur, canvas)


def draw_polygon(vertices: Iterable[Point2D], canvas: Canvas) -> None:
    """Add a polygon's vertices to the canvas, in order."""
    for v in vertices:
        canvas.set_pixel(v.x, v.y)


def make_polygon_outlines(canvas: Canvas) -> None:
    """Add the outlines of the original polygons, each in its own color."""
    for polygon in POLYGONS:
        canvas.set_color(*polygon.color)
        draw_polygon(polygon.vertices, canvas)


def make_polygons(canvas: Canvas) -> list[int]:
    """Clip each polygon against its region and add what is left.

    Returns the number of vertices drawn for each polygon, zero where
    nothing remained after clipping.
    """
    counts = []
    for polygon in POLYGONS:
        canvas.set_color(*polygon.color)
        clipped = clip_polygon(polygon.vertices, polygon.region.ll, polygon.region.ur)
        draw_polygon(clipped, canvas)
        counts.append(len(clipped))
    return counts


def create_image(canvas: Canvas) -> ClipImage:
    """Build the buffers for the clip regions, the outlines and the clipped fills."""
    image = ClipImage()

    canvas.clear()
    canvas.set_color(*WHITE)
    make_clip_outlines(canvas)
    image.clip_buffers.create_buffers(canvas)

    canvas.clear()
    make_polygon_outlines(canvas)
    image.outline_buffers.create_buffers(canvas)

    canvas.clear()
    image.counts = make_polygons(canvas)
    image.clipped_buffers.create_buffers(canvas)

    return image