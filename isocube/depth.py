#
# PROJECT: isocube
# MODULE: isocube/depth.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

"""
Visibility and ordering for projected cubes.

Two interchangeable edge-culling policies hide the edges that would cross
the cube's own silhouette:

  VERTEX_EXCLUSION  find the vertex nearest to and farthest from the
                    viewer and drop every edge touching either one.
  DEPTH_CUTOFF      drop an edge whose endpoint-mean depth lies outside
                    [-cutoff, +cutoff], cutoff = half_length / sqrt(2).

Faces are ordered back to front (painter's algorithm), and the filled
outline of the cube is built from the six non-extreme vertices sorted by
angle around the cube centre.

Everything here is O(vertices + edges) per call and keeps no state.
"""

import enum
import math

from .projection import project


class CullPolicy(enum.Enum):
    VERTEX_EXCLUSION = 'vertex'
    DEPTH_CUTOFF = 'cutoff'
    NONE = 'none'

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ', '.join(p.value for p in cls)
            raise ValueError(f"Unknown cull policy '{value}' (expected one of: {names})") from None


def find_extremes(projected):
    """
    Return (nearest, farthest) vertex indices by depth.

    Strict comparisons, so on a tie the first vertex in enumeration order
    keeps the title.
    """
    if not projected:
        raise ValueError("find_extremes needs at least one point")
    nearest = farthest = projected[0]
    for p in projected[1:]:
        if p.depth > nearest.depth:
            nearest = p
        if p.depth < farthest.depth:
            farthest = p
    return _index_of(nearest, projected), _index_of(farthest, projected)


def _index_of(point, projected):
    if point.index is not None:
        return point.index
    # Untagged input: fall back to list position
    for i, p in enumerate(projected):
        if p is point:
            return i
    raise ValueError("point not found in projected list")


def depth_cutoff(half_length: float) -> float:
    return half_length / math.sqrt(2)


def visible_edges(cube, projected, policy=CullPolicy.VERTEX_EXCLUSION, cutoff=None):
    """Edges that survive `policy`, in the cube's enumeration order."""
    policy = CullPolicy.parse(policy)

    if policy is CullPolicy.NONE:
        return list(cube.edges)

    if policy is CullPolicy.VERTEX_EXCLUSION:
        nearest, farthest = find_extremes(projected)
        return [e for e in cube.edges
                if not e.touches(nearest) and not e.touches(farthest)]

    limit = depth_cutoff(cube.half_length) if cutoff is None else cutoff
    kept = []
    for e in cube.edges:
        mid = (projected[e.a].depth + projected[e.b].depth) / 2.0
        if -limit <= mid <= limit:
            kept.append(e)
    return kept


def culled_vertices(cube, projected, policy=CullPolicy.VERTEX_EXCLUSION, cutoff=None):
    """Vertex indices every one of whose incident edges was discarded."""
    kept = visible_edges(cube, projected, policy, cutoff)
    alive = set()
    for e in kept:
        alive.update(e)
    return {i for i in range(len(cube.vertices)) if i not in alive}


def sort_by_depth(items, key=lambda item: item[1]):
    """Stable ascending depth sort; farthest first."""
    return sorted(items, key=key)


def sort_faces(cube, rotation: float, tilt: float):
    """
    Return [(face, depth), ...] back to front.

    A face's depth is the projected depth of its centre. Ties keep the
    cube's face enumeration order, so sorting an already sorted list is
    a no-op.
    """
    keyed = [(face, project(cube.face_center(face), rotation, tilt).depth)
             for face in cube.faces]
    return sort_by_depth(keyed)


def silhouette(projected):
    """
    Outline of the projected cube as an angle-sorted hexagon.

    The nearest and farthest vertices project inside the outline, so they
    are dropped; the six others are sorted by atan2(y, x) ascending.
    """
    nearest, farthest = find_extremes(projected)
    ring = [p for i, p in enumerate(projected)
            if _tag(p, i) != nearest and _tag(p, i) != farthest]
    ring.sort(key=lambda p: p.angle())
    return ring


def _tag(point, position):
    return point.index if point.index is not None else position
