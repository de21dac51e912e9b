"""Polygon clipping against rectangles and tessellation of basic shapes into triangle meshes."""

__version__ = "0.1.0"