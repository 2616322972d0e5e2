# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import numpy as np
import pytest

from mesh_canonicalization import (
    Polyhedron, cube, unitize_nearpoints_radius, edge_nearpoints,
)

def fit_plane(points):
    # Least-squares plane through the points (normal = smallest singular vector)
    center = np.mean(points, axis=0)
    U, S, Vh = np.linalg.svd(points - center, full_matrices=False)
    return center, Vh[-1]

def max_plane_deviation(poly):
    deviation = 0.0
    for face in poly.faces:
        points = poly.verts[face]
        center, normal = fit_plane(points)
        deviation = max(deviation, float(np.max(np.abs((points - center) @ normal))))
    return deviation

def max_tangency_error(poly):
    distances = np.linalg.norm(edge_nearpoints(poly), axis=1)
    return float(np.max(np.abs(distances - 1.0)))

@pytest.fixture
def plane_deviation():
    return max_plane_deviation

@pytest.fixture
def tangency_error():
    return max_tangency_error

@pytest.fixture
def unit_cube():
    "Canonical cube: edge near-points at distance 1"
    poly = cube()
    unitize_nearpoints_radius(poly)
    return poly

@pytest.fixture
def cuboid():
    "Unit cube stretched along z (planar faces, edges not tangent)"
    poly = cube()
    unitize_nearpoints_radius(poly)
    poly.verts[:, 2] *= 1.2
    return poly

@pytest.fixture
def bent_cube():
    "Unit cube with one corner pushed out (non-planar faces, no symmetry)"
    poly = cube()
    unitize_nearpoints_radius(poly)
    poly.verts[7] *= 1.15
    return poly

@pytest.fixture
def skewed_cube():
    "Cube with one corner dragged far away"
    poly = cube()
    poly.verts[7] = (5.0, 5.0, 5.0)
    return poly
