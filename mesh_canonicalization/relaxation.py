# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import logging

import numpy as np

from .utils import *
from .params import RelaxationParams, EdgeOrdering, SILENT
from .normals import NormalType, face_plane
from .nearpoints import edge_nearpoint, line_nearpoints
from .divergence import is_diverging
from .progress import Status, RelaxationResult, make_reporter

logger = logging.getLogger(__name__)

# Based on George W. Hart's canonicalization algorithm
# (http://library.wolfram.com/infocenter/Articles/2012/)
# The model may become non-convex early in the loop, and if it contorts
# too badly it will implode. Starting from a near-point radius of ~1
# (see unitize_nearpoints_radius) minimizes this problem.

def pull_edges(verts, edges, edge_factor, ordering=EdgeOrdering.IMMEDIATE, start=0):
    """
    Moves the endpoints of each edge along its near-point P by
    -edge_factor * (|P| - 1) * P, i.e. towards tangency with the unit
    sphere. Returns the near-points (in the order they were measured).
    """

    edge_count = len(edges)
    if edge_count == 0: return np.zeros((0, 3))

    if ordering is EdgeOrdering.DEFERRED:
        edges = np.array(edges, dtype=np.intp)
        a = verts[edges[:, 0]]
        d = verts[edges[:, 1]] - a
        near_pts = line_nearpoints(a, d)
        lengths = norm(near_pts, axis=1)
        offsets = near_pts * (edge_factor * (lengths - 1.0))[:, np.newaxis]
        np.subtract.at(verts, edges[:, 0], offsets)
        np.subtract.at(verts, edges[:, 1], offsets)
        return near_pts

    if ordering is not EdgeOrdering.REVOLVING: start = 0

    near_pts = np.empty((edge_count, 3))
    for i in range(edge_count):
        vi0, vi1 = edge = edges[(i + start) % edge_count]
        P = edge_nearpoint(verts, edge)
        near_pts[i] = P
        offset = edge_factor * (norm(P) - 1.0) * P
        verts[vi0] -= offset
        verts[vi1] -= offset

    return near_pts

def planarity_offsets(poly, plane_factor, normal_type=NormalType.NEWELL, start=0, offsets=None, skip_triangles=True):
    """
    Accumulates (without applying) the offsets that move each vertex
    towards the planes of its faces:
    plane_factor * dot(normal, face_centroid - vertex) * normal

    Accumulating instead of altering the vertices in place helps when
    a vertex is pushed towards one plane and away from another.
    Face scanning begins at face (start mod face count).
    """

    verts = poly.verts
    faces = poly.faces
    if offsets is None: offsets = np.zeros_like(verts)

    face_count = len(faces)
    for ff in range(start, face_count + start):
        f = ff % face_count
        face = faces[f]
        if skip_triangles and (len(face) == 3): continue # always planar
        face_centroid, normal = face_plane(poly, f, normal_type)
        heights = (face_centroid - verts[face]) @ normal
        np.add.at(offsets, face, (plane_factor * heights)[:, np.newaxis] * normal)

    return offsets

def canonicalize_mm(poly, params=None, reporter=None, **overrides):
    """
    Alternates pulling the edges towards tangency with the unit sphere
    and pushing the vertices towards the planes of their faces, until
    no vertex moves more than params.epsilon in an iteration.

    poly: Polyhedron; its vertices are modified in place
    params: RelaxationParams (defaults are used if not given)
    reporter: ProgressReporter (a default one is created if not given)
    overrides: RelaxationParams fields to replace for this call
    """

    params = (params or RelaxationParams()).updated(**overrides)
    reporter = make_reporter(reporter, params.report_interval)
    reporter.begin("Planarize" if params.planar_only else "Canonicalize")

    verts = poly.verts
    edges = poly.edges()

    logger.debug("Relaxation started: %r, %s", poly, params)

    status = Status.EXHAUSTED
    max_diff = 0.0
    count = 0
    while count < params.max_iterations:
        verts_last = verts.copy()

        if not params.planar_only:
            near_pts = pull_edges(verts, edges, params.edge_factor, params.ordering, count)
            # re-center for drift
            verts -= centroid(near_pts)

        # The scan start advances every iteration, so that no face
        # is systematically the first one (a tie-break policy only)
        offsets = planarity_offsets(poly, params.plane_factor, params.normal_type, count)
        verts += offsets

        max_diff = sqrt(max_len2(verts - verts_last))

        count += 1
        reporter.iteration(count, max_diff)

        if max_diff < params.epsilon:
            status = Status.CONVERGED
            break

        if is_diverging(poly, params.divergence_threshold):
            reporter.diverged()
            logger.warning("%s: radius range exceeded %g after %d iterations",
                           reporter.task_name, params.divergence_threshold, count)
            status = Status.DIVERGED
            break

    reporter.finish(count, max_diff)
    logger.debug("Relaxation finished: %s after %d iterations (max_diff=%g)", status.value, count, max_diff)

    return RelaxationResult(status, count, max_diff)

def canonicalize(poly, max_iterations, report_interval=SILENT, epsilon=1e-12, reporter=None):
    "Canonicalization with the basic settings (edge factor 0.3, plane factor 0.5)"
    params = RelaxationParams(0.3, 0.5, max_iterations, None, report_interval,
                              EdgeOrdering.IMMEDIATE, False, NormalType.NEWELL, epsilon)
    return canonicalize_mm(poly, params, reporter)

def planarize(poly, max_iterations, report_interval=SILENT, epsilon=1e-12, reporter=None):
    "Planarization only (no edge tangency) with the basic settings"
    params = RelaxationParams(0.3, 0.5, max_iterations, None, report_interval,
                              EdgeOrdering.IMMEDIATE, True, NormalType.NEWELL, epsilon)
    return canonicalize_mm(poly, params, reporter)
