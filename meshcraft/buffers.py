"""Packed vertex and element buffers built from a canvas."""

from __future__ import annotations

from array import array

from meshcraft.canvas import Canvas

_COMPONENTS = 4


class BufferSet:
    """Vertex data (positions then colors) and element indices for a shape."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Return the buffer set to its empty state."""
        self.vertex_buffer: array = array("f")
        self.element_buffer: array = array("I")
        self.num_elements = 0
        self.vertex_bytes = 0
        self.element_bytes = 0
        self.texture_bytes = 0
        self.color_bytes = 0
        self.initialized = False

    @property
    def color_offset(self) -> int:
        """Byte offset of the color data within the vertex buffer."""
        return self.vertex_bytes

    @property
    def positions(self) -> list[float]:
        """The position part of the vertex buffer."""
        return list(self.vertex_buffer[: self.num_elements * _COMPONENTS])

    @property
    def colors(self) -> list[float]:
        """The color part of the vertex buffer; empty if there is none."""
        return list(self.vertex_buffer[self.num_elements * _COMPONENTS :])

    def create_buffers(self, canvas: Canvas) -> None:
        """Build the buffers for the shape currently held in canvas."""
        self.reset()

        count = canvas.num_vertices()
        self.num_elements = count
        if count < 1:
            return

        span = count * _COMPONENTS
        vertex_data = array("f", canvas.vertices()[:span])
        self.vertex_bytes = span * vertex_data.itemsize

        colors = canvas.colors()
        if colors:
            color_data = array("f", colors[:span])
            color_data.extend([0.0] * (span - len(color_data)))
            self.color_bytes = span * color_data.itemsize
            vertex_data.extend(color_data)

        self.element_buffer = array("I", canvas.elements()[:count])
        self.element_bytes = count * self.element_buffer.itemsize

        self.vertex_buffer = vertex_data
        self.initialized = True