# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import math

import numpy as np

from .utils import *

class Polyhedron:
    """
    Vertex positions plus faces (closed polygons of vertex indices).

    verts: (N, 3) float array; the relaxation engines modify it in place,
        so callers that need the original positions should keep a copy
    faces: list of vertex index lists, each with at least 3 entries

    Topology is never modified after construction, so derived edges
    are computed once and cached.
    """

    def __init__(self, verts, faces):
        self.verts = np.array(verts, dtype=np.float64).reshape(-1, 3)
        self.faces = [[int(vi) for vi in face] for face in faces]
        self._edges = None

        vert_count = len(self.verts)
        for f, face in enumerate(self.faces):
            if len(face) < 3:
                raise ValueError(f"Face {f} has {len(face)} vertices, at least 3 are required")
            for vi in face:
                if (vi < 0) or (vi >= vert_count):
                    raise ValueError(f"Face {f} references vertex {vi}, but there are only {vert_count} vertices")

    def __repr__(self):
        return f"Polyhedron(verts={len(self.verts)}, faces={len(self.faces)}, edges={len(self.edges())})"

    def copy(self):
        return Polyhedron(self.verts.copy(), self.faces)

    def edges(self):
        """
        Undirected edges (low index, high index), in the order
        of their first appearance along the face boundaries
        """

        if self._edges is None:
            edges = []
            edge_keys = set()
            for face in self.faces:
                size = len(face)
                for i in range(size):
                    vi0 = face[i]
                    vi1 = face[(i+1) % size]
                    edge = ((vi0, vi1) if vi0 < vi1 else (vi1, vi0))
                    if edge in edge_keys: continue
                    edge_keys.add(edge)
                    edges.append(edge)
            self._edges = edges
        return self._edges

    def edge_array(self):
        return np.array(self.edges(), dtype=np.intp).reshape(-1, 2)

    def edge_vector(self, edge):
        return self.verts[edge[1]] - self.verts[edge[0]]

    def edge_length(self, edge):
        return float(norm(self.edge_vector(edge)))

    def edge_lengths(self):
        edges = self.edge_array()
        return norm(self.verts[edges[:, 1]] - self.verts[edges[:, 0]], axis=1)

    def face_centroid(self, f):
        return np.mean(self.verts[self.faces[f]], axis=0)

    def face_centroids(self):
        return np.array([self.face_centroid(f) for f in range(len(self.faces))]).reshape(-1, 3)

    def face_normal(self, f):
        # Newell's method: robust for non-planar polygons, and
        # its magnitude is twice the (projected) polygon area
        nx = 0.0
        ny = 0.0
        nz = 0.0

        verts = self.verts
        face = self.faces[f]
        x0, y0, z0 = verts[face[-1]]
        for vi in face:
            x1, y1, z1 = verts[vi]
            nx = nx + (y0 - y1) * (z0 + z1)
            ny = ny + (z0 - z1) * (x0 + x1)
            nz = nz + (x0 - x1) * (y0 + y1)
            x0, y0, z0 = x1, y1, z1

        return np.array((nx, ny, nz))

    def centroid(self):
        return centroid(self.verts)

    def scale(self, factor):
        self.verts *= factor

    def translate(self, offset):
        self.verts += offset

    def bounding_box(self):
        if len(self.verts) == 0: return np.zeros(3), np.zeros(3)
        return self.verts.min(axis=0), self.verts.max(axis=0)

    def max_width(self):
        bbox_min, bbox_max = self.bounding_box()
        return float(np.max(bbox_max - bbox_min))

    def vertex_distance_limits(self, center):
        if len(self.verts) == 0: return 0.0, 0.0
        distances = norm(self.verts - center, axis=1)
        return float(distances.min()), float(distances.max())

    def vertex_face_cycles(self):
        """
        For each vertex, the faces around it ordered by walking across
        shared edges. Face orientation doesn't need to be consistent.
        At open boundaries the walk continues in the other direction;
        faces that can't be reached this way (non-manifold vertices)
        are appended in incidence order.
        """

        incidence = [[] for vi in range(len(self.verts))]
        for f, face in enumerate(self.faces):
            size = len(face)
            for i, vi in enumerate(face):
                incidence[vi].append((f, face[i-1], face[(i+1) % size]))

        def take(entries, visited, neighbor):
            for i, (f, prev_vi, next_vi) in enumerate(entries):
                if visited[i]: continue
                if prev_vi == neighbor: return i, next_vi
                if next_vi == neighbor: return i, prev_vi
            return None, None

        def walk(entries, visited, exit_vi):
            chain = []
            while True:
                i, exit_vi = take(entries, visited, exit_vi)
                if i is None: break
                visited[i] = True
                chain.append(entries[i][0])
            return chain

        cycles = []
        for entries in incidence:
            if not entries:
                cycles.append([])
                continue

            visited = [False] * len(entries)
            visited[0] = True
            f_start, prev_vi, next_vi = entries[0]

            forward = walk(entries, visited, next_vi)
            backward = walk(entries, visited, prev_vi)
            backward.reverse()

            cycle = backward + [f_start] + forward
            cycle.extend(entries[i][0] for i in range(len(entries)) if not visited[i])
            cycles.append(cycle)

        return cycles

    def make_dual(self):
        """
        Returns (dual, vertex_indices): dual vertex i corresponds to face i
        of this polyhedron, and dual face j to vertex vertex_indices[j].
        Vertices with fewer than 3 faces around them (on open boundaries)
        have no dual face. Dual vertex positions are set to the face
        centroids, which only serves as a starting point: the reciprocation
        engine overwrites them on every iteration.
        """

        faces = []
        vertex_indices = []
        for vi, cycle in enumerate(self.vertex_face_cycles()):
            if len(cycle) < 3: continue
            faces.append(cycle)
            vertex_indices.append(vi)
        return Polyhedron(self.face_centroids(), faces), np.array(vertex_indices, dtype=np.intp)

def tetrahedron():
    verts = [(1, 1, 1), (1, -1, -1), (-1, 1, -1), (-1, -1, 1)]
    faces = [(0, 1, 2), (0, 3, 1), (0, 2, 3), (1, 3, 2)]
    return Polyhedron(verts, faces)

def cube():
    verts = [(x, y, z) for x in (-1, 1) for y in (-1, 1) for z in (-1, 1)]
    faces = [
        (0, 1, 3, 2), (4, 6, 7, 5), # x = -1, x = 1
        (0, 4, 5, 1), (2, 3, 7, 6), # y = -1, y = 1
        (0, 2, 6, 4), (1, 5, 7, 3), # z = -1, z = 1
    ]
    return Polyhedron(verts, faces)

def octahedron():
    verts = [(1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1)]
    faces = [
        (0, 2, 4), (2, 1, 4), (1, 3, 4), (3, 0, 4),
        (2, 0, 5), (1, 2, 5), (3, 1, 5), (0, 3, 5),
    ]
    return Polyhedron(verts, faces)

def triangular_prism(height=1.0):
    verts = []
    for z in (-0.5*height, 0.5*height):
        for i in range(3):
            angle = tau * i / 3
            verts.append((math.cos(angle), math.sin(angle), z))
    faces = [(0, 2, 1), (3, 4, 5), (0, 1, 4, 3), (1, 2, 5, 4), (2, 0, 3, 5)]
    return Polyhedron(verts, faces)
