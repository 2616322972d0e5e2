# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import logging

import numpy as np

from .utils import *
from .params import MinmaxParams, SILENT
from .normals import NormalType, face_plane
from .polygon import polygon_density, regular_circumradius
from .divergence import is_diverging
from .progress import Status, RelaxationResult, make_reporter

logger = logging.getLogger(__name__)

def unitize_edge_length(poly):
    "Scales the polyhedron so that the average edge length is 1"
    lengths = poly.edge_lengths()
    if len(lengths) == 0: return 0.0
    scale = float(np.mean(lengths))
    if scale > 0.0: poly.scale(1.0 / scale)
    return scale

def target_radii(poly):
    # circumradius of each face as a regular (possibly star) polygon with unit edges
    return [regular_circumradius(len(face), polygon_density(poly, f))
            for f, face in enumerate(poly.faces)]

def minmax_unit_planar(poly, params=None, reporter=None, **overrides):
    """
    Relaxes the polyhedron towards unit edges and planar regular faces.
    For every face, each vertex is offset towards:
    * unit length of the edge that starts at it
    * the plane of the face
    * the circumradius of the face as a regular polygon
    Offsets are accumulated and applied once per iteration. The loop stops
    when the largest offset, relative to the bounding box width, is below
    params.epsilon (this makes the stopping criterion scale-independent).

    poly: Polyhedron; it's rescaled to average edge length 1 first,
        and its vertices are modified in place
    params: MinmaxParams (defaults are used if not given)
    reporter: ProgressReporter (a default one is created if not given)
    overrides: MinmaxParams fields to replace for this call
    """

    params = (params or MinmaxParams()).updated(**overrides)
    reporter = make_reporter(reporter, params.report_interval)
    reporter.begin("Unit Edges")

    shorten_factor = params.shorten_factor
    plane_factor = params.plane_factor
    radius_factor = params.radius_factor

    unitize_edge_length(poly)

    verts = poly.verts
    faces = poly.faces
    face_count = len(faces)
    radii = target_radii(poly)

    logger.debug("Unit edge relaxation started: %r, %s", poly, params)

    status = Status.EXHAUSTED
    max_diff = 0.0
    count = 0
    while count < params.max_iterations:
        offsets = np.zeros_like(verts)

        # Both the starting face and the starting vertex within each face
        # advance every iteration (a tie-break policy only)
        for ff in range(count, face_count + count):
            f = ff % face_count
            face = faces[f]
            size = len(face)
            face_centroid, normal = face_plane(poly, f, params.normal_type)
            radius = radii[f]

            for vv in range(count, size + count):
                v = vv % size
                vi = face[v]
                vi_next = face[(v+1) % size]

                # unit edges
                edge_vec = verts[vi_next] - verts[vi]
                offset = (1.0 - norm(edge_vec)) * shorten_factor * edge_vec
                offsets[vi] -= offset
                offsets[vi_next] += offset

                # planarity
                offsets[vi] += (plane_factor * np.dot(normal, face_centroid - verts[vi])) * normal

                # polygon radius
                rad_vec = verts[vi] - face_centroid
                offsets[vi] += (radius - norm(rad_vec)) * radius_factor * rad_vec

        verts += offsets

        max_diff = sqrt(max_len2(offsets))

        count += 1
        reporter.iteration(count, max_diff)

        width = poly.max_width()
        if (max_diff / width if width > 0.0 else 0.0) < params.epsilon:
            status = Status.CONVERGED
            break

        if is_diverging(poly, params.divergence_threshold):
            reporter.diverged()
            logger.warning("%s: radius range exceeded %g after %d iterations",
                           reporter.task_name, params.divergence_threshold, count)
            status = Status.DIVERGED
            break

    reporter.finish(count, max_diff)
    logger.debug("Unit edge relaxation finished: %s after %d iterations (max_diff=%g)", status.value, count, max_diff)

    return RelaxationResult(status, count, max_diff)

def planarize_unit(poly, max_iterations, report_interval=SILENT, epsilon=1e-12,
                   divergence_threshold=None, normal_type=NormalType.NEWELL, reporter=None):
    "Unit edge relaxation with the basic settings (all factors 1/200)"
    params = MinmaxParams(1.0/200, 1.0/200, 1.0/200, max_iterations, divergence_threshold,
                          report_interval, normal_type, epsilon)
    return minmax_unit_planar(poly, params, reporter)
