# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

from collections import namedtuple

import numpy as np

from .utils import *

# A polyhedron is canonical (up to scale) when every edge line touches the
# unit sphere, i.e. when all edge near-points are at distance 1 from the origin

NearpointStats = namedtuple("NearpointStats", ["radius", "min", "max", "center"])

def edge_nearpoint(verts, edge, reference=origin):
    "Foot of the perpendicular from reference to the line through the edge"
    a = verts[edge[0]]
    d = verts[edge[1]] - a
    d_len2 = len2(d)
    if d_len2 == 0.0: return np.array(reference, dtype=np.float64) # degenerate edge
    return a + d * (np.dot(reference - a, d) / d_len2)

def line_nearpoints(starts, directions, reference=origin):
    "Vectorized version of edge_nearpoint for lines start + t*direction"
    d_len2 = np.einsum("ij,ij->i", directions, directions)
    degenerate = (d_len2 == 0.0)

    t = np.einsum("ij,ij->i", reference - starts, directions)
    t[~degenerate] /= d_len2[~degenerate]

    points = starts + directions * t[:, np.newaxis]
    points[degenerate] = reference
    return points

def edge_nearpoints(poly, reference=origin):
    edges = poly.edge_array()
    if len(edges) == 0: return np.zeros((0, 3))
    a = poly.verts[edges[:, 0]]
    return line_nearpoints(a, poly.verts[edges[:, 1]] - a, reference)

def edge_nearpoints_radius(poly):
    """
    Returns the average distance of the edge near-points from the origin,
    along with the observed min and max distances and the near-points centroid
    """

    points = edge_nearpoints(poly)
    if len(points) == 0: return NearpointStats(0.0, 0.0, 0.0, np.zeros(3))

    distances = norm(points, axis=1)
    return NearpointStats(
        float(np.mean(distances)),
        float(np.min(distances)),
        float(np.max(distances)),
        centroid(points),
    )

def edge_nearpoints_centroid(poly, reference=origin):
    return centroid(edge_nearpoints(poly, reference))

def unitize_nearpoints_radius(poly):
    """
    Scales the polyhedron so that the average near-point distance is 1.
    Starting the relaxation from this scale keeps it from overshooting
    (an off-scale model tends to contort and implode).
    """

    radius = edge_nearpoints_radius(poly).radius
    if radius > 0.0: poly.scale(1.0 / radius)
    return radius
