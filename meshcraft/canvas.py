"""A canvas that collects vertex and color data for a drawing."""

from __future__ import annotations

from meshcraft.vertex import Point3D

_PIXEL_DEPTH = -1.0
_W = 1.0
_ALPHA = 1.0


class Canvas:
    """Accumulates points (x, y, z, w) and RGBA colors for rendering."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._points: list[float] = []
        self._colors: list[float] = []
        self._count = 0
        self._current_color: tuple[float, float, float] = (0.0, 0.0, 0.0)

    @property
    def current_color(self) -> tuple[float, float, float]:
        """The RGB color used by the next pixel."""
        return self._current_color

    def clear(self) -> None:
        """Drop all points and colors and reset the drawing color to black."""
        self._points.clear()
        self._colors.clear()
        self._count = 0
        self._current_color = (0.0, 0.0, 0.0)

    def set_color(self, r: float, g: float, b: float) -> None:
        """Set the current drawing color; components lie between 0 and 1."""
        self._current_color = (float(r), float(g), float(b))

    def set_pixel(self, x: float, y: float) -> None:
        """Add a pixel at integer coordinates in the current color."""
        self._points.extend((float(int(x)), float(int(y)), _PIXEL_DEPTH, _W))
        self._colors.extend((*self._current_color, _ALPHA))
        self._count += 1

    def add_triangle(self, p0: Point3D, p1: Point3D, p2: Point3D) -> None:
        """Add a triangle's three vertices; triangles carry no color data."""
        for p in (p0, p1, p2):
            self._points.extend((float(p.x), float(p.y), float(p.z), _W))
        self._count += 3

    def vertices(self) -> list[float]:
        """Return a copy of the flat vertex data, four floats per vertex."""
        return list(self._points)

    def elements(self) -> list[int]:
        """Return sequential element indices, one per stored vertex float."""
        return list(range(len(self._points)))

    def colors(self) -> list[float]:
        """Return a copy of the flat color data, four floats per pixel."""
        return list(self._colors)

    def num_vertices(self) -> int:
        """Return the number of vertices in the current shape."""
        return self._count