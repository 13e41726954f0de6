#
# PROJECT: isocube
# MODULE: isocube/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import math
import os
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .clock import EASINGS
from .depth import CullPolicy
from .projection import TILT_DIMETRIC, TILT_ISOMETRIC, ISOMETRIC_ROTATION
from .tiling import HexOrientation

SHAPES = ('edges', 'faces', 'silhouette', 'star')

# Circumradius of a cube's outline at the true isometric view, per unit size
ISO_OUTLINE_RADIUS = math.sqrt(8.0 / 3.0)


@dataclass(frozen=True)
class SceneConfig:
    """
    Per-scene constants. Each demo variant is one of these rather than a
    separate controller.
    """
    cube_size: float = 100.0
    period: float = 3.0
    tilt: float = TILT_DIMETRIC
    base_rotation: float = ISOMETRIC_ROTATION
    rotation_sweep: float = math.pi / 2
    rotation_interval: Tuple[float, float] = (0.0, 1.0)
    morph_interval: Optional[Tuple[float, float]] = None
    easing: str = 'smoothstep'
    policy: CullPolicy = CullPolicy.VERTEX_EXCLUSION
    shape: str = 'edges'
    inner_edges: bool = False

    # Tiling; grid_radius None means a single cube at the origin
    grid_radius: Optional[Tuple[int, int]] = None
    hex_side: float = 100.0 * ISO_OUTLINE_RADIUS
    hex_orientation: HexOrientation = HexOrientation.POINTY
    sparse: bool = False

    # Style
    stroke_color: str = 'black'
    fill_color: str = 'white'
    line_cap: str = 'round'
    line_join: str = 'round'
    line_width: float = 1.0

    def __post_init__(self):
        # Normalize enum-ish fields given as strings
        object.__setattr__(self, 'policy', CullPolicy.parse(self.policy))
        object.__setattr__(self, 'hex_orientation', HexOrientation.parse(self.hex_orientation))

        if not math.isfinite(self.cube_size) or self.cube_size <= 0:
            raise ValueError(f"cube_size must be positive, got {self.cube_size!r}")
        if not math.isfinite(self.period) or self.period <= 0:
            raise ValueError(f"period must be positive, got {self.period!r}")
        if not math.isfinite(self.hex_side) or self.hex_side <= 0:
            raise ValueError(f"hex_side must be positive, got {self.hex_side!r}")
        if self.shape not in SHAPES:
            raise ValueError(f"Unknown shape '{self.shape}' (expected one of {', '.join(SHAPES)})")
        if self.easing not in EASINGS:
            raise ValueError(f"Unknown easing '{self.easing}' (expected one of {', '.join(EASINGS)})")
        for name in ('rotation_interval', 'morph_interval'):
            interval = getattr(self, name)
            if interval is None:
                continue
            start, end = interval
            if not 0.0 <= start < end <= 1.0:
                raise ValueError(f"{name} must satisfy 0 <= start < end <= 1, got {interval!r}")
        if self.grid_radius is not None:
            rows, cols = self.grid_radius
            if rows < 0 or cols < 0:
                raise ValueError(f"grid_radius must be non-negative, got {self.grid_radius!r}")

    @property
    def tiled(self) -> bool:
        return self.grid_radius is not None

    def with_overrides(self, **changes) -> 'SceneConfig':
        """Copy with some fields replaced; None values are ignored."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def preset(cls, name: str) -> 'SceneConfig':
        try:
            factory = PRESETS[name]
        except KeyError:
            raise ValueError(f"Unknown scene '{name}' (expected one of {', '.join(sorted(PRESETS))})") from None
        return factory()


def _tile_side(cube_size, gap=1.0):
    return cube_size * ISO_OUTLINE_RADIUS * gap


PRESETS = {
    # Spinning wireframe, hidden edges removed by extremum tracking
    'wire': lambda: SceneConfig(),
    # Same look using the depth threshold, true isometric tilt
    'cutoff': lambda: SceneConfig(tilt=TILT_ISOMETRIC, policy=CullPolicy.DEPTH_CUTOFF),
    # Six painter-sorted faces
    'solid': lambda: SceneConfig(period=4.0, tilt=TILT_ISOMETRIC, shape='faces',
                                 fill_color='#DDDDDD'),
    # Filled outline with the three front edges, on a small honeycomb
    'hex': lambda: SceneConfig(period=4.0, tilt=TILT_ISOMETRIC, shape='silhouette',
                               inner_edges=True, cube_size=40.0,
                               grid_radius=(1, 1), hex_side=_tile_side(40.0, 1.1)),
    # Large sparse field, slow loop
    'tiled': lambda: SceneConfig(period=9.0, tilt=TILT_ISOMETRIC, shape='silhouette',
                                 inner_edges=True, cube_size=30.0,
                                 grid_radius=(3, 3), hex_side=_tile_side(30.0),
                                 sparse=True),
    # Spin for the first half, then swell into a star and back
    'star': lambda: SceneConfig(period=4.0, tilt=TILT_ISOMETRIC, shape='star',
                                rotation_interval=(0.0, 0.5),
                                morph_interval=(0.5, 1.0)),
}


@dataclass
class RenderConfig:
    """Terminal output options for the curses/headless harness."""
    use_color: bool = True
    use_braille: bool = True
    fps: float = 30.0
    bg_color: str = '#0E0E2C'
    margin: float = 0.9     # fraction of the canvas the scene may fill

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Accurate color detection requires curses initialization,
        # so this is a pre-init guess.
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )
