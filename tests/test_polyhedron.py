# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import numpy as np
import pytest

from mesh_canonicalization import Polyhedron, cube, octahedron, tetrahedron, triangular_prism

def test_edges_are_deduplicated_and_sorted():
    poly = cube()
    edges = poly.edges()
    assert len(edges) == 12
    assert len(set(edges)) == 12
    assert all(a < b for a, b in edges)

def test_edge_order_follows_faces():
    poly = Polyhedron([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)], [(0, 1, 2, 3)])
    assert poly.edges() == [(0, 1), (1, 2), (2, 3), (0, 3)]

@pytest.mark.parametrize("factory, counts", [
    (tetrahedron, (4, 6, 4)),
    (cube, (8, 12, 6)),
    (octahedron, (6, 12, 8)),
    (triangular_prism, (6, 9, 5)),
])
def test_solid_counts(factory, counts):
    poly = factory()
    assert (len(poly.verts), len(poly.edges()), len(poly.faces)) == counts

def test_rejects_short_face():
    with pytest.raises(ValueError):
        Polyhedron([(0, 0, 0), (1, 0, 0)], [(0, 1)])

def test_rejects_out_of_range_index():
    with pytest.raises(ValueError):
        Polyhedron([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [(0, 1, 3)])

def test_face_queries():
    poly = cube()
    assert np.allclose(poly.face_centroid(1), (1, 0, 0))
    assert np.allclose(poly.face_normal(1), (8, 0, 0))
    assert np.allclose(poly.centroid(), (0, 0, 0))
    assert poly.max_width() == 2.0
    assert poly.edge_length((0, 1)) == 2.0

def test_transforms_are_in_place():
    poly = cube()
    verts = poly.verts
    poly.scale(0.5)
    poly.translate((1, 0, 0))
    assert poly.verts is verts
    assert np.allclose(poly.bounding_box()[0], (0.5, -0.5, -0.5))
    assert np.allclose(poly.bounding_box()[1], (1.5, 0.5, 0.5))

def test_copy_is_independent():
    poly = cube()
    other = poly.copy()
    other.verts[0] = (9, 9, 9)
    assert tuple(poly.verts[0]) == (-1, -1, -1)

def test_vertex_distance_limits():
    poly = cube()
    poly.verts[7] = (2, 2, 2)
    r_min, r_max = poly.vertex_distance_limits(np.zeros(3))
    assert r_min == pytest.approx(np.sqrt(3))
    assert r_max == pytest.approx(2 * np.sqrt(3))

def test_dual_of_cube():
    poly = cube()
    dual, vertex_indices = poly.make_dual()
    assert len(dual.verts) == 6
    assert len(dual.faces) == 8
    assert list(vertex_indices) == list(range(8))
    assert all(len(face) == 3 for face in dual.faces)
    # faces around the (-1, -1, -1) corner: x = -1, y = -1, z = -1
    assert set(dual.faces[0]) == {0, 2, 4}
    assert np.allclose(dual.verts, poly.face_centroids())

def test_face_cycles_walk_across_shared_edges():
    poly = octahedron()
    for vi, cycle in enumerate(poly.vertex_face_cycles()):
        assert len(cycle) == 4
        for i in range(len(cycle)):
            shared = set(poly.faces[cycle[i-1]]) & set(poly.faces[cycle[i]])
            assert len(shared) == 2
            assert vi in shared

def test_dual_skips_open_boundary_vertices():
    # a single square has no vertex with 3 faces around it
    poly = Polyhedron([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)], [(0, 1, 2, 3)])
    dual, vertex_indices = poly.make_dual()
    assert len(dual.verts) == 1
    assert dual.faces == []
    assert len(vertex_indices) == 0
