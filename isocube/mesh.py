#
# PROJECT: isocube
# MODULE: isocube/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import logging
import math
from itertools import combinations, product

from .math_utils import Point3

logger = logging.getLogger(__name__)

_AXIS_NAMES = ('x', 'y', 'z')


class Edge:
    """Pair of vertex indices (a < b) into a Cube's vertex list."""
    __slots__ = ('a', 'b')

    def __init__(self, a: int, b: int):
        if a == b:
            raise ValueError("Edge endpoints must be distinct")
        self.a, self.b = (a, b) if a < b else (b, a)

    def __repr__(self):
        return f"Edge({self.a}, {self.b})"

    def __iter__(self):
        yield self.a
        yield self.b

    def __eq__(self, other):
        if isinstance(other, Edge):
            return (self.a, self.b) == (other.a, other.b)
        return NotImplemented

    def __hash__(self):
        return hash((self.a, self.b))

    def touches(self, index: int) -> bool:
        return self.a == index or self.b == index


class Face:
    """One of the six outward-facing quads, in loop order."""
    __slots__ = ('name', 'normal', 'indices')

    def __init__(self, name, normal, indices):
        self.name = name
        self.normal = normal        # unit axis direction, Point3
        self.indices = tuple(indices)

    def __repr__(self):
        return f"Face({self.name}, {self.indices})"


class Cube:
    """
    Axis-aligned cube centred on the origin.

    Vertices are every sign combination of (+-size, +-size, +-size),
    enumerated x-major: index = 4*[x>0] + 2*[y>0] + [z>0]. Edges are the
    vertex pairs one unit step apart on the +-1 cube (Manhattan distance
    2); this rejects the face and space diagonals without listing edges by
    hand. Selection happens on integer unit coordinates before scaling.

    Instances are read-only once built.
    """
    __slots__ = ('size', 'unit_vertices', 'vertices', 'edges', 'faces')

    def __init__(self, size: float):
        if not isinstance(size, (int, float)) or not math.isfinite(size) or size <= 0:
            raise ValueError(f"Cube size must be a positive finite number, got {size!r}")

        unit = [Point3(*s) for s in product((-1, 1), repeat=3)]
        edges = [Edge(i, j) for i, j in combinations(range(len(unit)), 2)
                 if unit[i].manhattan(unit[j]) == 2]
        faces = _build_faces(unit)

        self.size = float(size)
        self.unit_vertices = tuple(unit)
        self.vertices = tuple(p * size for p in unit)
        self.edges = tuple(edges)
        self.faces = tuple(faces)
        logger.debug("Built cube size=%s: %d vertices, %d edges, %d faces",
                     size, len(self.vertices), len(self.edges), len(self.faces))

    def __repr__(self):
        return f"Cube(size={self.size})"

    @property
    def half_length(self) -> float:
        """Half of an edge's length (the +-size extent)."""
        return self.size

    def edge_points(self, edge: Edge):
        """Resolve an edge to its two Point3 endpoints."""
        return self.vertices[edge.a], self.vertices[edge.b]

    def face_center(self, face: Face) -> Point3:
        return face.normal * self.size

    @classmethod
    def cube(cls, size: float = 100.0):
        """Factory method mirroring build_cube()."""
        return cls(size)


def _build_faces(unit):
    faces = []
    for axis in range(3):
        u, v = [k for k in range(3) if k != axis]
        for sign in (-1, 1):
            normal = [0, 0, 0]
            normal[axis] = sign
            members = {(p[u], p[v]): i for i, p in enumerate(unit) if p[axis] == sign}
            loop = [members[(-1, -1)], members[(1, -1)], members[(1, 1)], members[(-1, 1)]]
            name = ('-' if sign < 0 else '+') + _AXIS_NAMES[axis]
            faces.append(Face(name, Point3(*normal), loop))
    return faces


def build_cube(size: float) -> Cube:
    """Build the 8-vertex, 12-edge, 6-face cube of half-length `size`."""
    return Cube(size)
