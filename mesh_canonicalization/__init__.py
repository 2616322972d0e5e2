# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

# Iterative canonicalization of polyhedra: all faces planar and all edges
# tangent to the unit sphere (or, in the relaxed modes, only planar faces).
# Three independent relaxation engines are provided:
# * canonicalize_mm: edge tangency + face planarity
# * canonicalize_bd: reciprocation between the polyhedron and its dual
# * minmax_unit_planar: unit edges + planarity + regular face radius
# None of them is guaranteed to converge for arbitrary input; each stops
# early if the model starts crumpling (see is_diverging).

from .polyhedron import Polyhedron, tetrahedron, cube, octahedron, triangular_prism
from .nearpoints import (
    NearpointStats, edge_nearpoint, edge_nearpoints, edge_nearpoints_radius,
    edge_nearpoints_centroid, unitize_nearpoints_radius,
)
from .normals import NormalType, face_normal_by_type, face_normal_triangles, face_normal_quads, oriented_unit_normal
from .divergence import radius_range, is_diverging
from .polygon import polygon_density, regular_circumradius
from .params import (
    RelaxationParams, ReciprocationParams, MinmaxParams,
    EdgeOrdering, ReciprocationMethod, SILENT,
)
from .progress import Status, RelaxationResult, ProgressReporter
from .relaxation import canonicalize_mm, canonicalize, planarize
from .reciprocation import (
    canonicalize_bd, canonicalize_dual, planarize_dual,
    reciprocal_normals, reciprocal_centroids_len2, reciprocal_centroids_len,
)
from .minmax import minmax_unit_planar, planarize_unit, unitize_edge_length
from .logging_config import setup_logging
