# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .utils import *
from .normals import NormalType

class EdgeOrdering(Enum):
    """
    Order in which edge-tangency corrections are applied:
    IMMEDIATE: each edge moves its vertices right after its near-point is found
    DEFERRED: all near-points are found first, then all corrections applied
        (sometimes helps an unbalanced model)
    REVOLVING: like IMMEDIATE, but each iteration starts from the next edge
        (experimental; didn't help the imbalance problem in practice)
    """

    IMMEDIATE = 'immediate'
    DEFERRED = 'deferred'
    REVOLVING = 'revolving'

class ReciprocationMethod(Enum):
    """
    NORMALS: polar reciprocal of each face plane, corrected by
        the average near-point distance of the face edges
    CENTROIDS_LEN2: face centroids divided by their squared length
    CENTROIDS_LEN: face centroids divided by their length
    FACE_CENTROIDS: plain face centroids (planarizes, no reciprocation)
    """

    NORMALS = 'b'
    CENTROIDS_LEN2 = 'p'
    CENTROIDS_LEN = 'q'
    FACE_CENTROIDS = 'f'

# report_interval: emit a progress line every N iterations (<= 0 disables
# periodic lines); negative values, such as SILENT, also suppress the final summary
SILENT = -1

def _check_factor(name, value, upper=inf):
    if not (isfinite(value) and (0.0 < value <= upper)):
        raise ValueError(f"{name} must be in the range (0, {upper}], got {value!r}")

def _check_common(params):
    if params.max_iterations < 0:
        raise ValueError(f"max_iterations must be non-negative, got {params.max_iterations!r}")
    if not (params.epsilon >= 0.0):
        raise ValueError(f"epsilon must be non-negative, got {params.epsilon!r}")
    threshold = params.divergence_threshold
    if (threshold is not None) and not (threshold > 0.0):
        raise ValueError(f"divergence_threshold must be positive or None, got {threshold!r}")
    params.normal_type = NormalType.from_code(params.normal_type)

class _Params:
    def updated(self, **overrides):
        "Returns a copy with the given fields replaced"
        return (replace(self, **overrides) if overrides else self)

@dataclass
class RelaxationParams(_Params):
    "Edge-tangency / face-planarity relaxation"
    edge_factor: float = 0.3
    plane_factor: float = 0.5
    max_iterations: int = 1000
    divergence_threshold: Optional[float] = None # None: never check
    report_interval: int = SILENT
    ordering: EdgeOrdering = EdgeOrdering.IMMEDIATE
    planar_only: bool = False
    normal_type: NormalType = NormalType.NEWELL
    epsilon: float = 1e-12

    def __post_init__(self):
        _check_factor("edge_factor", self.edge_factor, 1.0)
        _check_factor("plane_factor", self.plane_factor, 1.0)
        self.ordering = EdgeOrdering(self.ordering)
        _check_common(self)

@dataclass
class ReciprocationParams(_Params):
    "Base/dual reciprocation"
    method: ReciprocationMethod = ReciprocationMethod.NORMALS
    max_iterations: int = 1000
    divergence_threshold: Optional[float] = None # None: never check
    report_interval: int = SILENT
    centering: bool = False
    normal_type: NormalType = NormalType.NEWELL
    epsilon: float = 1e-12

    def __post_init__(self):
        self.method = ReciprocationMethod(self.method)
        _check_common(self)

@dataclass
class MinmaxParams(_Params):
    "Unit edge / planarity / regular polygon relaxation"
    shorten_factor: float = 1.0/200
    plane_factor: float = 1.0/200
    radius_factor: float = 1.0/200
    max_iterations: int = 1000
    divergence_threshold: Optional[float] = None # None: never check
    report_interval: int = SILENT
    normal_type: NormalType = NormalType.NEWELL
    epsilon: float = 1e-12

    def __post_init__(self):
        _check_factor("shorten_factor", self.shorten_factor)
        _check_factor("plane_factor", self.plane_factor)
        _check_factor("radius_factor", self.radius_factor)
        _check_common(self)
