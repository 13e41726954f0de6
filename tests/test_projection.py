import math

import pytest

from isocube.math_utils import Point3
from isocube.mesh import build_cube
from isocube.projection import (
    ISOMETRIC_ROTATION, TILT_DIMETRIC, TILT_ISOMETRIC,
    project, project_all, resolve_tilt,
)


@pytest.mark.parametrize("p", [
    Point3(0, 0, 0),
    Point3(1, 2, 3),
    Point3(-100, 50, 25.5),
])
def test_zero_rotation_and_tilt_is_identity(p):
    q = project(p, 0.0, 0.0)
    assert q.x == pytest.approx(p.x)
    assert q.y == pytest.approx(p.y)
    assert q.depth == pytest.approx(p.z)


def test_rotation_turns_x_axis_toward_viewer():
    q = project(Point3(1, 0, 0), math.pi / 2, 0.0)
    assert q.x == pytest.approx(0.0, abs=1e-12)
    assert q.y == pytest.approx(0.0)
    assert q.depth == pytest.approx(1.0)


def test_tilt_mixes_y_and_depth():
    t = TILT_DIMETRIC
    q = project(Point3(0, 1, 0), 0.0, t)
    assert q.y == pytest.approx(math.cos(t))
    assert q.depth == pytest.approx(math.sin(t))


def test_projection_is_pure():
    p = Point3(3, -4, 5)
    first = project(p, 0.7, TILT_ISOMETRIC)
    second = project(p, 0.7, TILT_ISOMETRIC)
    assert first == second
    assert (p.x, p.y, p.z) == (3, -4, 5)


def test_isometric_view_foreshortens_axes_equally():
    lengths = []
    for axis in (Point3(1, 0, 0), Point3(0, 1, 0), Point3(0, 0, 1)):
        q = project(axis, ISOMETRIC_ROTATION, TILT_ISOMETRIC)
        lengths.append(math.hypot(q.x, q.y))
    assert lengths[0] == pytest.approx(lengths[1])
    assert lengths[1] == pytest.approx(lengths[2])
    assert lengths[0] == pytest.approx(math.sqrt(2.0 / 3.0))


def test_dimetric_tilt_is_not_isometric():
    lengths = [math.hypot(*project(axis, ISOMETRIC_ROTATION, TILT_DIMETRIC))
               for axis in (Point3(1, 0, 0), Point3(0, 1, 0))]
    assert lengths[0] != pytest.approx(lengths[1])


def test_project_all_tags_vertex_indices():
    cube = build_cube(1)
    projected = project_all(cube.vertices, 0.3, TILT_ISOMETRIC)
    assert [p.index for p in projected] == list(range(8))
    for p, v in zip(projected, cube.vertices):
        single = project(v, 0.3, TILT_ISOMETRIC)
        assert (p.x, p.y, p.depth) == pytest.approx((single.x, single.y, single.depth))


def test_cube_at_dimetric_tilt_projects_to_distinct_points():
    cube = build_cube(100)
    projected = project_all(cube.vertices, 0.0, math.pi / 4)
    keys = {(round(p.x, 6), round(p.y, 6), round(p.depth, 6)) for p in projected}
    assert len(keys) == 8


def test_top_face_sits_above_bottom_face():
    cube = build_cube(100)
    projected = project_all(cube.vertices, 0.0, math.pi / 4)

    top = [i for i, v in enumerate(cube.vertices) if v.y < 0]
    assert len(top) == 4
    top_face = next(f for f in cube.faces if f.name == '-y')
    assert set(top) == set(top_face.indices)

    for i in top:
        v = cube.vertices[i]
        partner = next(j for j, w in enumerate(cube.vertices)
                       if w.x == v.x and w.z == v.z and w.y > 0)
        assert projected[i].y < projected[partner].y


def test_resolve_tilt():
    assert resolve_tilt('isometric') == TILT_ISOMETRIC
    assert resolve_tilt('Dimetric') == TILT_DIMETRIC
    assert resolve_tilt(0.5) == 0.5
    with pytest.raises(ValueError):
        resolve_tilt('oblique')
