#
# PROJECT: isocube
# MODULE: isocube/surface.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

"""
Drawing surfaces.

Surface is the path-based 2D drawing contract the scene renders against
(begin_path / move_to / line_to / close_path / stroke / fill, save /
restore, translate / rotate, and the stroke_style, fill_style, line_cap,
line_join and line_width attributes). Two implementations ship:

  RecordingSurface  keeps a list of every call, for tests and --trace.
  CanvasSurface     rasterizes onto a braille/ASCII Canvas.
"""

import logging
import math
from contextlib import contextmanager

from .canvas import Canvas
from .color import resolve_color
from .rasterizer import draw_line_dda, fill_polygon

logger = logging.getLogger(__name__)

_STYLE_ATTRS = ('stroke_style', 'fill_style', 'line_cap', 'line_join', 'line_width')


class Surface:
    """Base class: style state plus the drawing calls subclasses provide."""

    def __init__(self):
        self.stroke_style = 'black'
        self.fill_style = 'black'
        self.line_cap = 'butt'
        self.line_join = 'miter'
        self.line_width = 1.0

    def _style_state(self):
        return tuple(getattr(self, name) for name in _STYLE_ATTRS)

    def _set_style_state(self, state):
        for name, value in zip(_STYLE_ATTRS, state):
            setattr(self, name, value)

    def begin_path(self):
        raise NotImplementedError

    def move_to(self, x, y):
        raise NotImplementedError

    def line_to(self, x, y):
        raise NotImplementedError

    def close_path(self):
        raise NotImplementedError

    def stroke(self):
        raise NotImplementedError

    def fill(self):
        raise NotImplementedError

    def save(self):
        raise NotImplementedError

    def restore(self):
        raise NotImplementedError

    def translate(self, x, y):
        raise NotImplementedError

    def rotate(self, angle):
        raise NotImplementedError


@contextmanager
def surface_scope(surface, translate=None, rotate=None):
    """
    save(), optional translate/rotate, then restore() on exit no matter
    how the block leaves.
    """
    surface.save()
    try:
        if translate is not None:
            surface.translate(translate[0], translate[1])
        if rotate is not None:
            surface.rotate(rotate)
        yield surface
    finally:
        surface.restore()


class RecordingSurface(Surface):
    """Records calls as tuples: ('move_to', x, y), ('stroke', style), ..."""

    def __init__(self):
        super().__init__()
        self.calls = []
        self.depth = 0
        self.max_depth = 0
        self._stack = []

    def _record(self, *call):
        self.calls.append(call)

    def names(self):
        return [c[0] for c in self.calls]

    def count(self, name) -> int:
        return sum(1 for c in self.calls if c[0] == name)

    def begin_path(self):
        self._record('begin_path')

    def move_to(self, x, y):
        self._record('move_to', x, y)

    def line_to(self, x, y):
        self._record('line_to', x, y)

    def close_path(self):
        self._record('close_path')

    def stroke(self):
        self._record('stroke', self.stroke_style)

    def fill(self):
        self._record('fill', self.fill_style)

    def save(self):
        self._stack.append(self._style_state())
        self.depth += 1
        self.max_depth = max(self.max_depth, self.depth)
        self._record('save')

    def restore(self):
        if not self._stack:
            raise RuntimeError("restore() without matching save()")
        self._set_style_state(self._stack.pop())
        self.depth -= 1
        self._record('restore')

    def translate(self, x, y):
        self._record('translate', x, y)

    def rotate(self, angle):
        self._record('rotate', angle)


class Palette:
    """Assigns small integer indices to style strings, in first-use order."""

    def __init__(self, styles=()):
        self.styles = []
        self._index = {}
        for style in styles:
            self.index(style)

    def __len__(self):
        return len(self.styles)

    def index(self, style) -> int:
        key = str(style).strip().lower()
        idx = self._index.get(key)
        if idx is None:
            idx = len(self.styles)
            self._index[key] = idx
            self.styles.append(key)
        return idx

    def rgb_list(self, default=(255, 255, 255)):
        out = []
        for style in self.styles:
            rgb = resolve_color(style)
            if rgb is None:
                logger.warning("Unrecognised color '%s', using %s", style, default)
                rgb = default
            out.append(rgb)
        return out


class CanvasSurface(Surface):
    """
    Rasterizing surface over a Canvas.

    The current transform is an affine (a, b, c, d, e, f):
        x' = a*x + c*y + e,  y' = b*x + d*y + f
    starting from a base transform that maps scene units to pixels
    (uniform `scale`, then `origin` as the pixel position of (0, 0)).
    """

    def __init__(self, canvas: Canvas, palette=None, scale=1.0, origin=(0.0, 0.0),
                 fill_pattern='stipple'):
        super().__init__()
        self.canvas = canvas
        self.palette = palette if palette is not None else Palette()
        self.fill_pattern = fill_pattern
        self.transform = (scale, 0.0, 0.0, scale, float(origin[0]), float(origin[1]))
        self._stack = []
        self._subpaths = []

    def _apply(self, x, y):
        a, b, c, d, e, f = self.transform
        return (a * x + c * y + e, b * x + d * y + f)

    # ── Path construction ───────────────────────────────────────────────
    def begin_path(self):
        self._subpaths = []

    def move_to(self, x, y):
        self._subpaths.append([[self._apply(x, y)], False])

    def line_to(self, x, y):
        if not self._subpaths or self._subpaths[-1][1]:
            self.move_to(x, y)
            return
        self._subpaths[-1][0].append(self._apply(x, y))

    def close_path(self):
        if not self._subpaths:
            return
        points, _closed = self._subpaths[-1]
        self._subpaths[-1][1] = True
        # Drawing continues from the subpath's first point
        self._subpaths.append([[points[0]], False])

    # ── Painting ────────────────────────────────────────────────────────
    def stroke(self):
        color_idx = self.palette.index(self.stroke_style)
        for points, closed in self._subpaths:
            if len(points) == 1 and not closed:
                continue
            for i in range(len(points) - 1):
                draw_line_dda(self.canvas, points[i], points[i + 1], color_idx)
            if closed and len(points) > 2:
                draw_line_dda(self.canvas, points[-1], points[0], color_idx)

    def fill(self):
        color_idx = self.palette.index(self.fill_style)
        rings = [points for points, _closed in self._subpaths if len(points) >= 3]
        fill_polygon(self.canvas, rings, color_idx, self.fill_pattern)

    # ── State ───────────────────────────────────────────────────────────
    def save(self):
        self._stack.append((self.transform, self._style_state()))

    def restore(self):
        if not self._stack:
            raise RuntimeError("restore() without matching save()")
        self.transform, style = self._stack.pop()
        self._set_style_state(style)

    def translate(self, x, y):
        a, b, c, d, e, f = self.transform
        self.transform = (a, b, c, d, e + a * x + c * y, f + b * x + d * y)

    def rotate(self, angle):
        a, b, c, d, e, f = self.transform
        cs = math.cos(angle)
        sn = math.sin(angle)
        self.transform = (a * cs + c * sn, b * cs + d * sn,
                          c * cs - a * sn, d * cs - b * sn, e, f)
