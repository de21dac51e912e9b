"""State and controls of the interactive tessellation viewer."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from meshcraft.buffers import BufferSet
from meshcraft.canvas import Canvas
from meshcraft.shapes import make_cone, make_cube, make_cylinder, make_sphere

WINDOW_WIDTH = 512
WINDOW_HEIGHT = 512

SHAPE_RADIUS = 0.5
ANGLES_RESET = (30.0, 30.0, 0.0)
ANGLE_INCREMENT = 5.0

_ESCAPE = 0o33
_ANIMATION_PHASE = 150
_ANIMATION_LENGTH = 3 * _ANIMATION_PHASE


class Shape(IntEnum):
    """The basic objects the viewer can tessellate."""

    CUBE = 0
    CYLINDER = 1
    CONE = 2
    SPHERE = 3


_SHAPE_KEYS = {
    "1": Shape.CUBE,
    "c": Shape.CUBE,
    "2": Shape.CYLINDER,
    "C": Shape.CYLINDER,
    "3": Shape.CONE,
    "n": Shape.CONE,
    "4": Shape.SPHERE,
    "s": Shape.SPHERE,
}

# key -> (axis, direction)
_ROTATION_KEYS = {
    "x": (0, -1.0),
    "y": (1, -1.0),
    "z": (2, -1.0),
    "X": (0, 1.0),
    "Y": (1, 1.0),
    "Z": (2, 1.0),
}


class TessellationState:
    """The current shape, its tessellation factors, rotation and buffers."""

    def __init__(self) -> None:
        self.canvas = Canvas(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.buffers = BufferSet()
        self.current_shape = Shape.CUBE
        self.division1 = 1
        self.division2 = 1
        self.angles = list(ANGLES_RESET)
        self.angle_increment = ANGLE_INCREMENT
        self.animating = False
        self.update_display = True
        self.should_close = False
        self._level = 0
        self.create_new_shape()

    def create_new_shape(self) -> None:
        """Tessellate the current shape afresh and rebuild its buffers."""
        self.canvas.clear()
        shape = self.current_shape
        if shape is Shape.CUBE:
            make_cube(self.canvas, self.division1)
        elif shape is Shape.CYLINDER:
            make_cylinder(self.canvas, SHAPE_RADIUS, self.division1, self.division2)
        elif shape is Shape.CONE:
            make_cone(self.canvas, SHAPE_RADIUS, self.division1, self.division2)
        elif shape is Shape.SPHERE:
            make_sphere(self.canvas, SHAPE_RADIUS, self.division1, self.division2)
        self.buffers.create_buffers(self.canvas)

    def _select(self, shape: Shape) -> None:
        self.current_shape = shape
        self.create_new_shape()

    def handle_char(self, codepoint: Union[int, str]) -> None:
        """React to a typed character, given as a code point or a one-letter string."""
        code = ord(codepoint) if isinstance(codepoint, str) else int(codepoint)
        code &= 0x7F
        key = chr(code)

        if code == _ESCAPE or key in "qQ":
            # quitting also starts the animation, exactly as the key handler does
            self.should_close = True
            self.animating = True
        elif key in "aA":
            self.animating = True
        elif key in _ROTATION_KEYS:
            axis, sign = _ROTATION_KEYS[key]
            self.angles[axis] += sign * self.angle_increment
        elif key in _SHAPE_KEYS:
            self._select(_SHAPE_KEYS[key])
        elif key == "+":
            self.division1 += 1
            self.create_new_shape()
        elif key == "=":
            self.division2 += 1
            self.create_new_shape()
        elif key == "-":
            if self.division1 > 1:
                self.division1 -= 1
                self.create_new_shape()
        elif key == "_":
            if self.division2 > 1:
                self.division2 -= 1
                if self.current_shape is not Shape.CUBE:
                    self.create_new_shape()
        elif key in "rR":
            self.angles = list(ANGLES_RESET)

        self.update_display = True

    def animate(self) -> None:
        """Advance the automatic rotation by one step, if it is running."""
        if self._level >= _ANIMATION_LENGTH:
            self._level = 0
            self.animating = False

        if not self.animating:
            return

        if self._level < _ANIMATION_PHASE:
            axis = 0
        elif self._level < 2 * _ANIMATION_PHASE:
            axis = 1
        else:
            axis = 2
        self.angles[axis] -= self.angle_increment / 3

        self._level += 1
        self.update_display = True