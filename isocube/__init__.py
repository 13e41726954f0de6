#
# PROJECT: isocube
# MODULE: isocube/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from .math_utils import Point3, Point2
from .projection import project, project_all, TILT_DIMETRIC, TILT_ISOMETRIC, ISOMETRIC_ROTATION
from .mesh import Cube, Edge, Face, build_cube
from .clock import AnimationState, advance, ease, ease_in_out, divide_interval
from .depth import CullPolicy, find_extremes, visible_edges, sort_faces, silhouette, depth_cutoff
from .tiling import HexLayout, HexOrientation, grid_offset
from .config import SceneConfig, RenderConfig
from .surface import Surface, RecordingSurface, CanvasSurface, Palette, surface_scope
from .canvas import Canvas
from .scene import Scene
