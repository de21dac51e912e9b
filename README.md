# meshcraft

This package builds geometry and checks it without a window or a GPU.
It has two parts:

- **clipping**: clips a polygon against an axis-aligned rectangle and
  assembles a fixed demonstration scene.
- **tessellation**: builds triangle meshes for a cube, a cylinder, a cone
  and a sphere.

All results are collected in a `Canvas`. A canvas stores positions,
colours and element indices as flat lists, in the layout used by vertex
and element buffers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building blocks

- `meshcraft.vertex`: `Point2D` and `Point3D` are frozen dataclasses.
  They can be unpacked like tuples.
- `meshcraft.canvas`: `Canvas(width, height)` collects points and
  colours.
  - `set_color(r, g, b)` sets the colour for the pixels that follow. The
    current colour is available as `current_color`.
  - `set_pixel(x, y)` adds a point at integer coordinates with depth
    -1.0, together with its RGBA colour (alpha 1.0).
  - `add_triangle(p0, p1, p2)` adds three `Point3D` corners. Triangles
    carry no colour.
  - `vertices()` returns four floats per vertex (x, y, z, w).
    `colors()` returns four floats per pixel. `elements()` returns
    sequential indices.
  - `num_vertices()` returns how many vertices the canvas holds.
  - `clear()` empties the canvas and resets the colour to black.
- `meshcraft.buffers`: `BufferSet.create_buffers(canvas)` packs the
  canvas data.
  - `vertex_buffer` holds the positions first, then the colours if there
    are any. `element_buffer` holds the element indices.
  - The byte sizes are `vertex_bytes`, `color_bytes` and
    `element_bytes`.
  - `positions`, `colors` and `color_offset` give access to the parts of
    the vertex buffer.
  - `reset()` returns the set to its empty state.
- `meshcraft.shaders`: reads shader source and describes shader errors.
  - `read_text_file(name)` returns the whole text of a file. It raises
    `ValueError` when no name is given or the file is empty, and
    `OSError` when the file cannot be opened.
  - `error_string(code)` turns a `ShaderError` code into a message. For
    a code it does not know, the message is "Unknown error code N".

## Clipping

```python
from meshcraft.vertex import Point2D
from meshcraft.clipper import clip_polygon

square = [Point2D(20, 120), Point2D(20, 140), Point2D(40, 140), Point2D(40, 120)]
clipped = clip_polygon(square, Point2D(10, 110), Point2D(50, 150))
```

`clip_polygon(vertices, ll, ur)` walks the polygon's edges.

- It keeps the vertices that lie inside the rectangle, borders included.
- It adds the point where an edge crosses the border.
- It never adds the same point twice.
- It returns the resulting vertices. An empty list means nothing of the
  polygon is left.

Some handling depends on the number of vertices:

- **An edge that lies wholly outside the rectangle:** a corner of the
  rectangle is added only for polygons with more than four vertices that
  do not have exactly nine. Seven-sided polygons get the lower-right
  corner and all others the lower-left corner.
- **A nine-sided polygon:** the four corners of the rectangle are always
  appended.

The helper functions are:

- `is_inside`
- `find_junction`, which raises `ValueError` when the edge does not
  cross the region
- `outside_clip`
- `which_corner`

`meshcraft.clipscene` holds the demonstration scene: the six clip
regions (`CLIP_REGIONS`) and the eight test polygons (`POLYGONS`), each
with its own colour. `create_image(canvas)` returns a `ClipImage` with
three buffer sets:

- the white region outlines
- the original polygon outlines
- the clipped fills

`ClipImage` also holds the vertex count of each clipped polygon. Its
`clip_ranges()`, `outline_ranges()` and `fill_ranges()` give the
`(first, count)` ranges for drawing. The smaller steps are also
available: `draw_clip_region`, `make_clip_outlines`, `draw_polygon`,
`make_polygon_outlines` and `make_polygons`.

## Tessellation

```python
from meshcraft.canvas import Canvas
from meshcraft.shapes import make_cone

canvas = Canvas(512, 512)
make_cone(canvas, 0.5, 8, 2)
print(canvas.num_vertices())
```

The shape functions and their limits on subdivisions:

| Function | Subdivision limits |
| --- | --- |
| `make_cube(canvas, subdivisions)` | `subdivisions` is at least 1 |
| `make_cylinder(canvas, radius, radial_divisions, height_divisions)` | `radial_divisions` at least 3, `height_divisions` at least 1 |
| `make_cone(canvas, radius, radial_divisions, height_divisions)` | `radial_divisions` at least 3, `height_divisions` at least 1 |
| `make_sphere(canvas, radius, slices, stacks)` | `slices` is always 3, `stacks` at least 5 |

`make_sphere` builds the sphere as two hemispheres whose rings double in
size at each stack.

`meshcraft.tessellation.TessellationState` holds the viewer's state:

- the current `Shape`
- `division1` and `division2`
- the rotation `angles`
- the canvas and its `buffers`

`create_new_shape()` tessellates the current shape again, with radius
0.5.

`handle_char(codepoint)` takes a code point or a one-letter string:

| Keys | Effect |
| --- | --- |
| `1`/`c` | cube |
| `2`/`C` | cylinder |
| `3`/`n` | cone |
| `4`/`s` | sphere |
| `+` | raise `division1` |
| `-` | lower `division1`, but not below 1 |
| `=` | raise `division2` |
| `_` | lower `division2`, but not below 1; the shape is not rebuilt while the cube is shown |
| `x y z` | rotate by -5 degrees about an axis |
| `X Y Z` | rotate by +5 degrees about an axis |
| `a`/`A` | start the animation |
| `r`/`R` | reset the angles |
| Escape, `q`, `Q` | set `should_close`, and also start the animation |

`animate()` advances the automatic rotation by one step. The rotation
runs for 450 steps: about x, then y, then z.

## What this package does not do

Nothing here opens a window, draws on screen, or compiles or links
shaders. The package has no command-line program.

It gives you:

- the geometry
- the packed buffer data with its byte sizes and draw ranges
- the viewer state
- shader source reading and error codes

A renderer has to take these and display them.