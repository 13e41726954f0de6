#
# PROJECT: isocube
# MODULE: isocube/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import logging
import math

from .clock import EASINGS, AnimationState, advance, divide_interval, there_and_back
from .config import SceneConfig
from .mesh import build_cube
from .projection import project_all
from .shapes import Frame, make_shape
from .surface import surface_scope
from .tiling import HexLayout

logger = logging.getLogger(__name__)


class Scene:
    """
    Animation controller for one looping cube scene.

    The host calls update(dt) then render(surface) once per frame, never
    concurrently. The cube, layout and shape renderer are built once from
    the SceneConfig; only the AnimationState changes between frames.
    """

    def __init__(self, config: SceneConfig = None, state: AnimationState = None):
        self.config = config if config is not None else SceneConfig()
        self.cube = build_cube(self.config.cube_size)
        self.layout = HexLayout(self.config.hex_side, self.config.hex_orientation,
                                self.config.sparse)
        self.shape = make_shape(self.config)
        self.state = state if state is not None else AnimationState(0.0, self.config.period)
        self._rendering = False
        logger.info("Scene ready: shape=%s policy=%s period=%ss instances=%d",
                    self.config.shape, self.config.policy.value,
                    self.config.period, len(self.offsets()))

    def update(self, dt: float):
        """Advance the animation by dt seconds."""
        self.state = advance(self.state, dt)

    def rotation(self) -> float:
        config = self.config
        t = divide_interval(self.state.anim_amt, *config.rotation_interval)
        t = EASINGS[config.easing](t)
        return config.base_rotation + config.rotation_sweep * t

    def morph(self) -> float:
        if self.config.morph_interval is None:
            return 0.0
        return there_and_back(self.state.anim_amt, *self.config.morph_interval)

    def frame(self) -> Frame:
        rotation = self.rotation()
        tilt = self.config.tilt
        projected = project_all(self.cube.vertices, rotation, tilt)
        return Frame(self.cube, projected, rotation, tilt, self.morph())

    def offsets(self):
        """World translation of every cube instance, in draw order."""
        config = self.config
        if not config.tiled:
            return [(0.0, 0.0)]
        return [self.layout.grid_offset(row, col)
                for row, col in self.layout.cells(*config.grid_radius)]

    def extent(self) -> float:
        """Radius around the origin that contains every instance."""
        reach = self.cube.size * math.sqrt(3)
        return max(math.hypot(x, y) for x, y in self.offsets()) + reach

    def render(self, surface):
        """Issue one frame's draw calls; each instance is save/restore scoped."""
        if self._rendering:
            raise RuntimeError("Scene.render() is not re-entrant")
        self._rendering = True
        try:
            frame = self.frame()
            for offset in self.offsets():
                with surface_scope(surface, translate=offset):
                    self.shape.draw(surface, frame)
        finally:
            self._rendering = False
