import math
from itertools import product

import pytest

from isocube.mesh import Cube, Edge, build_cube


def test_cube_has_eight_vertices_at_every_sign_combination():
    cube = build_cube(2.5)
    coords = {(v.x, v.y, v.z) for v in cube.vertices}
    assert coords == {(x * 2.5, y * 2.5, z * 2.5) for x, y, z in product((-1, 1), repeat=3)}


def test_vertex_enumeration_order():
    cube = build_cube(1)
    for i, v in enumerate(cube.vertices):
        assert i == 4 * (v.x > 0) + 2 * (v.y > 0) + (v.z > 0)


def test_exactly_twelve_edges_of_unit_distance_two():
    cube = build_cube(1)
    assert len(cube.edges) == 12
    for edge in cube.edges:
        a, b = cube.unit_vertices[edge.a], cube.unit_vertices[edge.b]
        assert sum(abs(p - q) for p, q in zip(a, b)) == 2


def test_edges_are_unique_and_every_vertex_has_degree_three():
    cube = build_cube(1)
    assert len(set(cube.edges)) == 12
    degree = [0] * 8
    for edge in cube.edges:
        degree[edge.a] += 1
        degree[edge.b] += 1
    assert degree == [3] * 8


@pytest.mark.parametrize("size", [0.001, 1, 100, 12345.678])
def test_edge_selection_does_not_depend_on_scale(size):
    assert build_cube(size).edges == build_cube(1).edges


def test_scaled_edges_have_length_two_size():
    cube = build_cube(100)
    for edge in cube.edges:
        a, b = cube.edge_points(edge)
        assert a.manhattan(b) == pytest.approx(200)


def test_faces_are_loops_of_cube_edges():
    cube = build_cube(1)
    edges = set(cube.edges)
    assert [f.name for f in cube.faces] == ['-x', '+x', '-y', '+y', '-z', '+z']
    for face in cube.faces:
        assert len(face.indices) == 4
        for i in range(4):
            assert Edge(face.indices[i], face.indices[(i + 1) % 4]) in edges
        axis = [k for k, c in enumerate(face.normal) if c != 0][0]
        sign = face.normal[axis]
        assert all(cube.unit_vertices[i][axis] == sign for i in face.indices)


def test_face_center_lies_on_the_face():
    cube = build_cube(10)
    face = cube.faces[3]
    center = cube.face_center(face)
    assert (center.x, center.y, center.z) == (0, 10, 0)


@pytest.mark.parametrize("size", [0, -1, math.nan, math.inf])
def test_invalid_size_raises(size):
    with pytest.raises(ValueError):
        build_cube(size)


def test_factory_matches_builder():
    assert Cube.cube(3).vertices == build_cube(3).vertices


def test_edge_normalises_endpoint_order():
    assert Edge(5, 1) == Edge(1, 5)
    assert tuple(Edge(5, 1)) == (1, 5)
    assert Edge(1, 5).touches(5)
    assert not Edge(1, 5).touches(2)
    with pytest.raises(ValueError):
        Edge(3, 3)
