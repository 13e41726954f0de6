#
# PROJECT: isocube
# MODULE: isocube/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import math

from .canvas import Canvas

FILL_PATTERNS = ('solid', 'stipple', 'clear')


def draw_line_dda(canvas: Canvas, p1, p2, color_idx=0):
    """
    Draws a line using the DDA algorithm.
    p1, p2 are (x, y) pixel coordinates; later draws overwrite earlier ones.
    """
    x1, y1 = int(round(p1[0])), int(round(p1[1]))
    x2, y2 = int(round(p2[0])), int(round(p2[1]))

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1, color_idx)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)

    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(int(step) + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)), color_idx)
        cx += x_inc; cy += y_inc


def _pattern_on(pattern, x, y):
    if pattern == 'solid':
        return True
    if pattern == 'stipple':
        return (x + y) % 2 == 0
    return False


def fill_polygon(canvas: Canvas, rings, color_idx=0, pattern='stipple'):
    """
    Even-odd scanline fill of one or more closed rings of (x, y) points.

    Every covered pixel is written: pattern 'solid' sets it, 'clear'
    erases it, 'stipple' sets every other pixel and erases the rest. Any
    of them hides what was drawn underneath.
    """
    if pattern not in FILL_PATTERNS:
        raise ValueError(f"Unknown fill pattern '{pattern}'")

    edges = []
    y_min = math.inf
    y_max = -math.inf
    for ring in rings:
        n = len(ring)
        if n < 3:
            continue
        for i in range(n):
            xa, ya = ring[i]
            xb, yb = ring[(i + 1) % n]
            if ya == yb:
                continue
            edges.append((xa, ya, xb, yb))
            y_min = min(y_min, ya, yb)
            y_max = max(y_max, ya, yb)

    if not edges:
        return

    w, h = canvas.w, canvas.h
    start_y = max(0, int(math.floor(y_min)))
    end_y = min(h - 1, int(math.ceil(y_max)))

    for y in range(start_y, end_y + 1):
        # Sample at pixel centres
        sy = y + 0.5
        xs = []
        for xa, ya, xb, yb in edges:
            if (ya <= sy < yb) or (yb <= sy < ya):
                xs.append(xa + (sy - ya) * (xb - xa) / (yb - ya))
        xs.sort()
        for i in range(0, len(xs) - 1, 2):
            sx = max(0, int(math.ceil(xs[i] - 0.5)))
            ex = min(w - 1, int(math.floor(xs[i + 1] - 0.5)))
            for x in range(sx, ex + 1):
                canvas.set_pixel(x, y, color_idx, _pattern_on(pattern, x, y))
