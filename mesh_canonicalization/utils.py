# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import math

import numpy as np

# below this, a length or area is treated as degenerate
geometric_epsilon = 1e-12
isfinite = math.isfinite
inf = math.inf
pi = math.pi
tau = math.tau
sqrt = math.sqrt
atan2 = math.atan2
sin = math.sin
norm = np.linalg.norm

origin = np.zeros(3)
origin.flags.writeable = False

def dot_product(ax, ay, az, bx, by, bz):
    return ax*bx + ay*by + az*bz

def cross_product(ax, ay, az, bx, by, bz):
    return (ay*bz - az*by, az*bx - ax*bz, ax*by - ay*bx)

def unit(v):
    # Zero vectors stay zero instead of turning into NaNs
    mag = norm(v)
    return (v / mag if mag > 0.0 else np.zeros(3))

def len2(v):
    return float(np.dot(v, v))

def max_len2(vectors):
    if len(vectors) == 0: return 0.0
    return float(np.max(np.einsum("ij,ij->i", vectors, vectors)))

def centroid(points):
    if len(points) == 0: return np.zeros(3)
    return np.mean(points, axis=0)
