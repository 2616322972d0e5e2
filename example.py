import logging

from mesh_canonicalization import (
    RelaxationParams, ReciprocationParams, MinmaxParams, ReciprocationMethod,
    canonicalize_mm, canonicalize_bd, minmax_unit_planar,
    unitize_nearpoints_radius, edge_nearpoints_radius, setup_logging,
    cube, octahedron, triangular_prism,
)

def make_test_object(name, factory, distortion):
    poly = factory()
    unitize_nearpoints_radius(poly)
    # push a couple of vertices around so there is something to relax
    for vi, (dx, dy, dz) in distortion.items():
        poly.verts[vi] += (dx, dy, dz)
    return name, poly

def describe(name, engine, poly, result):
    stats = edge_nearpoints_radius(poly)
    print(f"{name:<12} {engine:<10} {result.status.value:<10} "
          f"iterations={result.iterations:<6d} max_diff={result.max_diff:.3g} "
          f"near-points: {stats.min:.6f}..{stats.max:.6f}")

setup_logging(logging.INFO)

object_infos = [
    make_test_object("cube", cube, {7: (0.1, 0.05, 0.0)}),
    make_test_object("octahedron", octahedron, {0: (0.0, 0.1, 0.1)}),
    make_test_object("prism", lambda: triangular_prism(1.5), {1: (0.05, 0.0, -0.1)}),
]

relaxation = RelaxationParams(max_iterations=5000, divergence_threshold=10.0, report_interval=500)
reciprocation = ReciprocationParams(ReciprocationMethod.NORMALS, max_iterations=5000, divergence_threshold=10.0)
unit_edges = MinmaxParams(0.05, 0.05, 0.05, max_iterations=5000, divergence_threshold=10.0)

for name, poly in object_infos:
    mm = poly.copy()
    describe(name, "mm", mm, canonicalize_mm(mm, relaxation))

    bd = poly.copy()
    describe(name, "base/dual", bd, canonicalize_bd(bd, reciprocation))

    minmax = poly.copy()
    describe(name, "unit edges", minmax, minmax_unit_planar(minmax, unit_edges))
