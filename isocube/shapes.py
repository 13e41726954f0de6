#
# PROJECT: isocube
# MODULE: isocube/shapes.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

"""Shape renderers: how one projected cube instance turns into paths."""

from .depth import find_extremes, silhouette, sort_faces, visible_edges

# Star inner points move from the hexagon's edge midpoints to this
# fraction closer to the centre, which gives a regular hexagram.
STAR_PULL = 1.0 / 3.0


class Frame:
    """Everything a shape needs for one frame; shared by all instances."""
    __slots__ = ('cube', 'projected', 'rotation', 'tilt', 'morph')

    def __init__(self, cube, projected, rotation, tilt, morph=0.0):
        self.cube = cube
        self.projected = projected
        self.rotation = rotation
        self.tilt = tilt
        self.morph = morph


class ShapeRenderer:
    def __init__(self, config):
        self.config = config

    def _apply_style(self, surface):
        config = self.config
        surface.stroke_style = config.stroke_color
        surface.fill_style = config.fill_color
        surface.line_cap = config.line_cap
        surface.line_join = config.line_join
        surface.line_width = config.line_width

    def _polygon(self, surface, points):
        surface.begin_path()
        self._apply_style(surface)
        first, rest = points[0], points[1:]
        surface.move_to(first.x, first.y)
        for p in rest:
            surface.line_to(p.x, p.y)
        surface.close_path()
        surface.fill()
        surface.stroke()

    def draw(self, surface, frame: Frame):
        raise NotImplementedError


class EdgeShape(ShapeRenderer):
    """Wireframe: each edge surviving the cull policy is its own stroked path."""

    def draw(self, surface, frame):
        projected = frame.projected
        for edge in visible_edges(frame.cube, projected, self.config.policy):
            start, end = projected[edge.a], projected[edge.b]
            surface.begin_path()
            self._apply_style(surface)
            surface.move_to(start.x, start.y)
            surface.line_to(end.x, end.y)
            surface.stroke()


class FaceShape(ShapeRenderer):
    """Six quads, back to front so nearer faces overpaint farther ones."""

    def draw(self, surface, frame):
        projected = frame.projected
        for face, _depth in sort_faces(frame.cube, frame.rotation, frame.tilt):
            self._polygon(surface, [projected[i] for i in face.indices])


class SilhouetteShape(ShapeRenderer):
    """
    Filled hexagonal outline. With inner_edges the three edges meeting at
    the nearest vertex are stroked on top, which reads as a solid cube.
    """

    def draw(self, surface, frame):
        projected = frame.projected
        self._polygon(surface, silhouette(projected))

        if not self.config.inner_edges:
            return
        nearest, _farthest = find_extremes(projected)
        hub = projected[nearest]
        for edge in frame.cube.edges:
            if not edge.touches(nearest):
                continue
            other = projected[edge.b if edge.a == nearest else edge.a]
            surface.begin_path()
            self._apply_style(surface)
            surface.move_to(hub.x, hub.y)
            surface.line_to(other.x, other.y)
            surface.stroke()


class StarShape(ShapeRenderer):
    """Outline hexagon that swells into a six-pointed star as morph -> 1."""

    def draw(self, surface, frame):
        self._polygon(surface, star_points(silhouette(frame.projected), frame.morph))


class _Pt:
    __slots__ = ('x', 'y')

    def __init__(self, x, y):
        self.x = x
        self.y = y


def star_points(ring, morph):
    """Interleave the ring's vertices with edge midpoints pulled inward."""
    pull = 1.0 - STAR_PULL * morph
    out = []
    n = len(ring)
    for i in range(n):
        a, b = ring[i], ring[(i + 1) % n]
        out.append(_Pt(a.x, a.y))
        out.append(_Pt((a.x + b.x) / 2.0 * pull, (a.y + b.y) / 2.0 * pull))
    return out


SHAPE_RENDERERS = {
    'edges': EdgeShape,
    'faces': FaceShape,
    'silhouette': SilhouetteShape,
    'star': StarShape,
}


def make_shape(config) -> ShapeRenderer:
    try:
        cls = SHAPE_RENDERERS[config.shape]
    except KeyError:
        raise ValueError(f"Unknown shape '{config.shape}'") from None
    return cls(config)
