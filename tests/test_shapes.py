import math

import pytest

from meshcraft.canvas import Canvas
from meshcraft.shapes import make_cone, make_cube, make_cylinder, make_sphere


def _canvas():
    return Canvas(512, 512)


def _points(canvas):
    data = canvas.vertices()
    return [tuple(data[i : i + 4]) for i in range(0, len(data), 4)]


def _build(maker, *args):
    canvas = _canvas()
    maker(canvas, *args)
    return canvas


def test_cube_single_subdivision_vertex_count():
    canvas = _build(make_cube, 1)
    assert canvas.num_vertices() == 18
    assert len(canvas.vertices()) == canvas.num_vertices() * 4


def test_cube_vertices_lie_on_corners():
    canvas = _build(make_cube, 1)
    for x, y, z, w in _points(canvas):
        assert {x, y, z} <= {-0.5, 0.5}
        assert w == 1.0


def test_cube_first_triangle_from_corner_constants():
    canvas = _build(make_cube, 1)
    first = _points(canvas)[:3]
    assert first[0][:3] == (0.5, -0.5, -0.5)
    assert first[1][:3] == (-0.5, -0.5, -0.5)
    assert first[2][:3] == (0.5, -0.5, 0.5)


@pytest.mark.parametrize("subdivisions", [0, -3])
def test_cube_subdivisions_clamped(subdivisions):
    low = _build(make_cube, subdivisions)
    one = _build(make_cube, 1)
    assert low.vertices() == one.vertices()


def test_cube_more_subdivisions_scale_quadratically():
    one = _build(make_cube, 1)
    two = _build(make_cube, 2)
    assert two.num_vertices() == 4 * one.num_vertices()
    for x, y, z, _ in _points(two):
        assert abs(x) <= 0.5 and abs(y) <= 0.5 and abs(z) <= 0.5


def test_shapes_add_no_colors():
    canvas = _build(make_cone, 0.5, 5, 2)
    assert canvas.colors() == []
    assert canvas.num_vertices() % 3 == 0


def test_cylinder_divisions_clamped():
    clamped = _build(make_cylinder, 0.5, 1, 0)
    minimum = _build(make_cylinder, 0.5, 3, 1)
    assert clamped.vertices() == minimum.vertices()


def test_cylinder_vertices_on_axis_or_rim():
    radius = 0.5
    canvas = _build(make_cylinder, radius, 8, 1)
    for x, y, z, _ in _points(canvas):
        r = math.hypot(x, y)
        assert r == pytest.approx(0.0, abs=1e-9) or r == pytest.approx(radius, rel=1e-6)
        assert -radius - 1e-9 <= z <= -radius + 1.0 + 1e-9


def test_cylinder_cap_starts_at_centre():
    radius = 0.5
    canvas = _build(make_cylinder, radius, 6, 1)
    first = _points(canvas)[:2]
    assert first[0][:3] == (0, 0, -radius)
    assert first[1][0] == pytest.approx(radius)
    assert first[1][1] == pytest.approx(0.0, abs=1e-9)


def test_cylinder_more_height_divisions_adds_triangles():
    one = _build(make_cylinder, 0.5, 6, 1)
    three = _build(make_cylinder, 0.5, 6, 3)
    assert three.num_vertices() > one.num_vertices()


def test_cone_apex_and_extent():
    radius = 0.5
    canvas = _build(make_cone, radius, 6, 3)
    points = _points(canvas)
    assert points[0][:3] == (0, 0, -radius)
    for x, y, z, _ in points:
        assert math.hypot(x, y) <= radius + 1e-9
        assert -radius - 1e-9 <= z <= radius + 1e-9


def test_cone_divisions_clamped():
    clamped = _build(make_cone, 0.5, 2, -1)
    minimum = _build(make_cone, 0.5, 3, 1)
    assert clamped.vertices() == minimum.vertices()


def test_cone_base_fan_closes_at_base_centre():
    radius = 0.5
    canvas = _build(make_cone, radius, 4, 2)
    last = _points(canvas)[-3:]
    assert last[0][:3] == (0, 0, radius)
    assert last[2][0] == pytest.approx(radius)
    assert last[2][2] == radius


def test_sphere_slices_fixed_and_stacks_clamped():
    odd = _build(make_sphere, 0.5, 10, 1)
    default = _build(make_sphere, 0.5, 3, 5)
    assert odd.vertices() == default.vertices()


def test_sphere_vertices_within_radius():
    radius = 0.5
    canvas = _build(make_sphere, radius, 3, 5)
    for x, y, z, _ in _points(canvas):
        assert math.sqrt(x * x + y * y + z * z) <= radius + 1e-9


def test_sphere_hemispheres_mirror():
    canvas = _build(make_sphere, 0.5, 3, 5)
    points = _points(canvas)
    half = len(points) // 2
    assert len(points) == 2 * half
    for top, bottom in zip(points[:half], points[half:]):
        assert top[0] == pytest.approx(bottom[0], abs=1e-6)
        assert top[1] == pytest.approx(bottom[1], abs=1e-6)
        assert top[2] == pytest.approx(-bottom[2], abs=1e-6)


def test_sphere_more_stacks_more_vertices():
    five = _build(make_sphere, 0.5, 3, 5)
    six = _build(make_sphere, 0.5, 3, 6)
    assert six.num_vertices() > five.num_vertices()
    assert six.num_vertices() % 3 == 0