# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

from enum import Enum

import numpy as np

from .utils import *

class NormalType(Enum):
    """
    How a (possibly non-planar) face normal is measured:
    NEWELL: the signed-area weighted normal of the whole polygon
    TRIANGLES: sum of the normals of all perimeter triangles
    QUADS: sum of the diagonal cross products of all perimeter quads
    """

    NEWELL = 'n'
    TRIANGLES = 't'
    QUADS = 'q'

    @classmethod
    def from_code(cls, code):
        # Unrecognized codes fall back to Newell
        if isinstance(code, cls): return code
        for member in cls:
            if member.value == code: return member
        return cls.NEWELL

def face_normal_triangles(verts, face):
    nx = 0.0
    ny = 0.0
    nz = 0.0

    size = len(face)
    for i in range(size):
        x0, y0, z0 = verts[face[i]]
        x1, y1, z1 = verts[face[(i+1) % size]]
        x2, y2, z2 = verts[face[(i+2) % size]]
        tx, ty, tz = cross_product(x0-x1, y0-y1, z0-z1, x1-x2, y1-y2, z1-z2)
        nx = nx + tx
        ny = ny + ty
        nz = nz + tz

    return np.array((nx, ny, nz))

def face_normal_quads(verts, face):
    nx = 0.0
    ny = 0.0
    nz = 0.0

    size = len(face)
    for i in range(size):
        x0, y0, z0 = verts[face[i]]
        x1, y1, z1 = verts[face[(i+1) % size]]
        x2, y2, z2 = verts[face[(i+2) % size]]
        x3, y3, z3 = verts[face[(i+3) % size]]
        tx, ty, tz = cross_product(x0-x2, y0-y2, z0-z2, x1-x3, y1-y3, z1-z3)
        nx = nx + tx
        ny = ny + ty
        nz = nz + tz

    return np.array((nx, ny, nz))

def face_normal_by_type(poly, f, normal_type=NormalType.NEWELL):
    "Un-normalized normal of face f"
    if normal_type is NormalType.TRIANGLES:
        return face_normal_triangles(poly.verts, poly.faces[f])
    if normal_type is NormalType.QUADS:
        return face_normal_quads(poly.verts, poly.faces[f])
    return poly.face_normal(f)

def oriented_unit_normal(normal, face_centroid, reference=origin):
    # Make sure the normal points outward (away from the reference)
    normal = unit(normal)
    if np.dot(normal, face_centroid - reference) < 0: normal = -normal
    return normal

def face_plane(poly, f, normal_type=NormalType.NEWELL):
    "Returns (centroid, outward unit normal) of face f"
    face_centroid = poly.face_centroid(f)
    normal = face_normal_by_type(poly, f, normal_type)
    return face_centroid, oriented_unit_normal(normal, face_centroid)
