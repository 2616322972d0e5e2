# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import numpy as np

from .utils import *

def polygon_density(poly, f, eps=geometric_epsilon):
    """
    Signed number of turns the face boundary makes around its centroid
    (e.g. 1 for a convex pentagon, 2 for a pentagram), measured in the
    plane of the face. Returns 0 for faces without a usable normal.
    """

    face = poly.faces[f]
    points = poly.verts[face]
    center = np.mean(points, axis=0)

    normal = poly.face_normal(f)
    normal_mag = norm(normal)
    if normal_mag <= eps: return 0
    nx, ny, nz = normal / normal_mag

    angle = 0.0
    ax, ay, az = points[-1] - center
    for point in points:
        bx, by, bz = point - center
        # Skip vertices sitting on the centroid, they have no direction
        if (ax*ax + ay*ay + az*az <= eps*eps) or (bx*bx + by*by + bz*bz <= eps*eps):
            ax, ay, az = bx, by, bz
            continue
        cx, cy, cz = cross_product(ax, ay, az, bx, by, bz)
        angle += atan2(dot_product(cx, cy, cz, nx, ny, nz), dot_product(ax, ay, az, bx, by, bz))
        ax, ay, az = bx, by, bz

    return int(round(angle / tau))

def regular_circumradius(sides, density=1):
    "Circumradius of a regular {sides/density} polygon with unit edges"
    density = abs(density) or 1
    return 0.5 / sin(pi * density / sides)
