# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import logging

import numpy as np

from .utils import *
from .params import ReciprocationParams, ReciprocationMethod, SILENT
from .normals import NormalType, face_plane
from .nearpoints import edge_nearpoint, edge_nearpoints_centroid
from .divergence import is_diverging
from .progress import Status, RelaxationResult, make_reporter

logger = logging.getLogger(__name__)

# Based on George W. Hart's planarization and canonicalization algorithms
# (http://www.georgehart.com/virtual-polyhedra/conway_notation.html)

def reciprocal_normals(poly, normal_type=NormalType.NEWELL):
    """
    For each face, the point reciprocal to the face plane (its normal
    scaled by 1/h, where h is the height of the plane above the origin),
    corrected by the RMS near-point distance of the face edges
    """

    verts = poly.verts
    result = np.zeros((len(poly.faces), 3))

    for f, face in enumerate(poly.faces):
        face_centroid, normal = face_plane(poly, f, normal_type)

        size = len(face)
        edge_dist2 = 0.0
        for i in range(size):
            edge = (face[i], face[(i+1) % size])
            edge_dist2 += len2(edge_nearpoint(verts, edge))
        edge_dist = sqrt(edge_dist2 / size)

        # the point where the normal through the origin meets the face plane
        v = normal * np.dot(face_centroid, normal)

        v_len2 = len2(v)
        if v_len2 > 0.0: v = v / v_len2

        result[f] = v * ((1.0 + edge_dist) * 0.5)

    return result

def reciprocal_centroids_len2(poly):
    centers = poly.face_centroids()
    lengths2 = np.einsum("ij,ij->i", centers, centers)
    valid = (lengths2 > 0.0)
    centers[valid] /= lengths2[valid, np.newaxis]
    return centers

def reciprocal_centroids_len(poly):
    centers = poly.face_centroids()
    lengths = norm(centers, axis=1)
    valid = (lengths > 0.0)
    centers[valid] /= lengths[valid, np.newaxis]
    return centers

def canonicalize_bd(poly, params=None, reporter=None, **overrides):
    """
    Repeatedly replaces the vertices of the dual by reciprocals of the
    faces of the base, then the vertices of the base by reciprocals of
    the faces of the dual, until no base vertex moves more than
    params.epsilon in an iteration.

    poly: Polyhedron; its vertices are modified in place
    params: ReciprocationParams (defaults are used if not given)
    reporter: ProgressReporter (a default one is created if not given)
    overrides: ReciprocationParams fields to replace for this call
    """

    params = (params or ReciprocationParams()).updated(**overrides)
    reporter = make_reporter(reporter, params.report_interval)
    reporter.begin(f"Base/Dual ({params.method.name})")

    method = params.method
    normal_type = params.normal_type

    # Only the structure of the dual matters, its
    # vertex positions are overwritten on each iteration
    dual, dual_faces_verts = poly.make_dual()
    base_verts = poly.verts
    dual_verts = dual.verts

    logger.debug("Base/dual reciprocation started: %r, dual %r, %s", poly, dual, params)

    status = Status.EXHAUSTED
    max_diff = 0.0
    count = 0
    while count < params.max_iterations:
        base_verts_last = base_verts.copy()

        if method is ReciprocationMethod.NORMALS:
            dual_verts[:] = reciprocal_normals(poly, normal_type)
            base_verts[dual_faces_verts] = reciprocal_normals(dual, normal_type)
            if params.centering:
                poly.translate(-0.1 * edge_nearpoints_centroid(poly))
        elif method is ReciprocationMethod.FACE_CENTROIDS:
            dual_verts[:] = poly.face_centroids()
            base_verts[dual_faces_verts] = dual.face_centroids()
        else:
            reciprocate = (reciprocal_centroids_len2 if method is ReciprocationMethod.CENTROIDS_LEN2
                           else reciprocal_centroids_len)
            # move the centroid to the origin for balance
            dual_verts[:] = reciprocate(poly)
            poly.translate(-dual.centroid())
            base_verts[dual_faces_verts] = reciprocate(dual)
            poly.translate(-poly.centroid())

        max_diff = sqrt(max_len2(base_verts - base_verts_last))

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
    logger.debug("Base/dual reciprocation finished: %s after %d iterations (max_diff=%g)", status.value, count, max_diff)

    return RelaxationResult(status, count, max_diff)

def canonicalize_dual(poly, max_iterations, report_interval=SILENT, epsilon=1e-12, reporter=None):
    "Base/dual canonicalization with the basic settings"
    params = ReciprocationParams(ReciprocationMethod.NORMALS, max_iterations, None,
                                 report_interval, False, NormalType.NEWELL, epsilon)
    return canonicalize_bd(poly, params, reporter)

def planarize_dual(poly, max_iterations, report_interval=SILENT, epsilon=1e-12, reporter=None):
    "Base/dual planarization with the basic settings"
    params = ReciprocationParams(ReciprocationMethod.CENTROIDS_LEN2, max_iterations, None,
                                 report_interval, False, NormalType.NEWELL, epsilon)
    return canonicalize_bd(poly, params, reporter)
