# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import math

import numpy as np
import pytest

from mesh_canonicalization import (
    Polyhedron, NormalType, face_normal_by_type, face_normal_triangles, face_normal_quads,
    oriented_unit_normal, radius_range, is_diverging, polygon_density, regular_circumradius,
    cube, octahedron,
)

def square():
    return Polyhedron([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)], [(0, 1, 2, 3)])

def pentagram():
    verts = [(math.cos(2*math.pi*k/5), math.sin(2*math.pi*k/5), 0.0) for k in range(5)]
    return Polyhedron(verts, [(0, 2, 4, 1, 3)])

def test_normal_strategies_on_square():
    poly = square()
    assert np.allclose(face_normal_by_type(poly, 0, NormalType.NEWELL), (0, 0, 2))
    assert np.allclose(face_normal_by_type(poly, 0, NormalType.TRIANGLES), (0, 0, 4))
    assert np.allclose(face_normal_by_type(poly, 0, NormalType.QUADS), (0, 0, 8))

def test_normal_strategies_agree_on_nonplanar_quad():
    verts = np.array([(1, 0, 0.1), (0, 1, -0.1), (-1, 0, 0.1), (0, -1, -0.1)], dtype=float)
    face = [0, 1, 2, 3]
    n_tri = face_normal_triangles(verts, face)
    n_quad = face_normal_quads(verts, face)
    assert np.allclose(n_tri / np.linalg.norm(n_tri), (0, 0, 1))
    assert np.allclose(n_quad / np.linalg.norm(n_quad), (0, 0, 1))

def test_normal_type_codes():
    assert NormalType.from_code('n') is NormalType.NEWELL
    assert NormalType.from_code('t') is NormalType.TRIANGLES
    assert NormalType.from_code('q') is NormalType.QUADS
    assert NormalType.from_code('x') is NormalType.NEWELL
    assert NormalType.from_code(NormalType.QUADS) is NormalType.QUADS

def test_oriented_unit_normal_points_outward():
    normal = oriented_unit_normal(np.array((0.0, 0.0, -2.0)), np.array((0.0, 0.0, 1.0)))
    assert np.allclose(normal, (0, 0, 1))
    normal = oriented_unit_normal(np.array((0.0, 3.0, 0.0)), np.array((0.0, 1.0, 0.0)))
    assert np.allclose(normal, (0, 1, 0))

def test_oriented_unit_normal_of_zero_vector():
    assert np.allclose(oriented_unit_normal(np.zeros(3), np.array((1.0, 0.0, 0.0))), 0)

def test_regular_solid_is_not_diverging():
    assert radius_range(cube()) == pytest.approx(0.0)
    assert not is_diverging(cube(), 0.1)

def test_dragged_corner_is_diverging():
    poly = cube()
    poly.verts[7] = (2, 2, 2)
    assert radius_range(poly) > 0.5
    assert is_diverging(poly, 0.1)
    assert not is_diverging(poly, 1.0)

def test_divergence_check_disabled():
    poly = cube()
    poly.verts[7] = (30, 30, 30)
    assert not is_diverging(poly, None)

def test_collapsed_polyhedron_radius_range():
    poly = cube()
    poly.verts[:] = 0.0
    assert radius_range(poly) == 0.0

def test_density_of_convex_faces():
    assert polygon_density(square(), 0) == 1
    poly = octahedron()
    assert all(polygon_density(poly, f) == 1 for f in range(len(poly.faces)))

def test_density_of_pentagram():
    assert abs(polygon_density(pentagram(), 0)) == 2

def test_density_of_degenerate_face():
    poly = Polyhedron([(0, 0, 0), (1, 0, 0), (2, 0, 0)], [(0, 1, 2)])
    assert polygon_density(poly, 0) == 0

def test_density_of_nearly_degenerate_face():
    # twice the area is 1e-14, below the degenerate-area tolerance
    poly = Polyhedron([(0, 0, 0), (1, 0, 0), (2, 1e-14, 0)], [(0, 1, 2)])
    assert polygon_density(poly, 0) == 0

def test_regular_circumradius():
    assert regular_circumradius(3) == pytest.approx(1 / math.sqrt(3))
    assert regular_circumradius(4) == pytest.approx(math.sqrt(0.5))
    assert regular_circumradius(5, 2) == pytest.approx(0.5 / math.sin(2 * math.pi / 5))
    assert regular_circumradius(6, 0) == pytest.approx(1.0)
