#
# PROJECT: isocube
# MODULE: isocube/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

"""
Parallel (axonometric) projection.

A point is first rotated about the vertical axis by `rotation` (the xz
angle), then tilted by `tilt` about the screen's horizontal axis. The
screen position is (x', y' cos t - z' sin t); the third rotated
coordinate becomes the depth, growing toward the viewer.

Two tilts are common:
  TILT_DIMETRIC  = pi/4             simple two-axis look
  TILT_ISOMETRIC = atan(1/sqrt(2))  all axes foreshorten equally, which
                                    also needs rotation = ISOMETRIC_ROTATION
"""

import math

from .math_utils import Point2

TILT_DIMETRIC = math.pi / 4
TILT_ISOMETRIC = math.atan(1 / math.sqrt(2))
ISOMETRIC_ROTATION = math.pi / 4

TILTS = {
    'isometric': TILT_ISOMETRIC,
    'dimetric': TILT_DIMETRIC,
}


def project(p, rotation: float, tilt: float, index=None) -> Point2:
    """Project a single point. Pure, no shared state."""
    cr = math.cos(rotation)
    sr = math.sin(rotation)
    ct = math.cos(tilt)
    st = math.sin(tilt)

    # Rotate about the y axis
    rx = p.x * cr - p.z * sr
    rz = p.x * sr + p.z * cr
    ry = p.y

    # Tilt
    sx = rx
    sy = ry * ct - rz * st
    depth = ry * st + rz * ct
    return Point2(sx, sy, depth, index)


def project_all(points, rotation: float, tilt: float):
    """Project a vertex list, tagging each result with its vertex index."""
    cr = math.cos(rotation)
    sr = math.sin(rotation)
    ct = math.cos(tilt)
    st = math.sin(tilt)

    out = []
    for i, p in enumerate(points):
        rx = p.x * cr - p.z * sr
        rz = p.x * sr + p.z * cr
        out.append(Point2(rx, p.y * ct - rz * st, p.y * st + rz * ct, i))
    return out


def resolve_tilt(value) -> float:
    """Accept a named tilt ('isometric', 'dimetric') or an angle in radians."""
    if isinstance(value, str):
        try:
            return TILTS[value.lower()]
        except KeyError:
            raise ValueError(f"Unknown tilt '{value}' (expected one of {sorted(TILTS)})") from None
    return float(value)
