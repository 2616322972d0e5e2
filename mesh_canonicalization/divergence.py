# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

def radius_range(poly):
    """
    Spread of the vertex distances from the centroid, relative
    to the mid-range distance: (max - min) / ((max + min) / 2)
    """

    r_min, r_max = poly.vertex_distance_limits(poly.centroid())
    r_mid = (r_min + r_max) * 0.5
    if r_mid == 0.0: return 0.0
    return (r_max - r_min) / r_mid

# Once the vertex distances start to spread apart, the model is
# crumpling, and further iterations would only make it implode
def is_diverging(poly, threshold):
    if threshold is None: return False
    return radius_range(poly) > threshold
