#
# PROJECT: isocube
# MODULE: isocube/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import math


class Point3:
    """Immutable 3-component point in object or world space."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Point3 is immutable")

    def __repr__(self):
        return f"Point3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Point3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Point3):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __mul__(self, scalar):
        return Point3(self.x * scalar, self.y * scalar, self.z * scalar)

    def manhattan(self, other) -> float:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)


class Point2:
    """
    Screen-space position plus a depth scalar.

    `depth` grows toward the viewer and is only used for culling and
    ordering. `index` is the source vertex index (or None for points that
    do not come from the cube's vertex list, e.g. face centres).
    """
    __slots__ = ('x', 'y', 'depth', 'index')

    def __init__(self, x: float, y: float, depth: float, index=None):
        self.x = x
        self.y = y
        self.depth = depth
        self.index = index

    def __repr__(self):
        return f"Point2({self.x:.2f}, {self.y:.2f}, depth={self.depth:.2f}, index={self.index})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if isinstance(other, Point2):
            return ((self.x, self.y, self.depth, self.index) ==
                    (other.x, other.y, other.depth, other.index))
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.depth, self.index))

    def angle(self) -> float:
        """Polar angle of the screen position around the origin."""
        return math.atan2(self.y, self.x)
