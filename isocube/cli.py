#
# PROJECT: isocube
# MODULE: isocube/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import argparse
import curses
import logging
import math
import sys

from .canvas import Canvas
from .clock import EASINGS
from .config import PRESETS, SHAPES, RenderConfig, SceneConfig
from .demo import main as demo_main
from .depth import CullPolicy
from .logging_config import setup_logging
from .projection import TILTS, resolve_tilt
from .renderer import fit_surface
from .scene import Scene
from .surface import Palette, RecordingSurface

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                  Spinning wireframe cube
  %(prog)s --scene solid                    Painter-sorted faces
  %(prog)s --scene tiled --period 12        Sparse honeycomb of cubes
  %(prog)s --policy cutoff --tilt dimetric  Depth-threshold culling
  %(prog)s --scene star --headless 30       Print frame 30 as text and exit
  %(prog)s --trace                          Dump one frame's draw calls
"""
    parser = argparse.ArgumentParser(
        prog="isocube",
        description="Looping isometric cube animation",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--scene", default="wire", choices=sorted(PRESETS),
                        help="Scene preset (default: wire)")
    parser.add_argument("--period", type=float,
                        help="Seconds per loop (overrides the preset)")
    parser.add_argument("--tilt",
                        help="'isometric', 'dimetric' or an angle in degrees")
    parser.add_argument("--policy", choices=[p.value for p in CullPolicy],
                        help="Hidden edge policy for the wireframe shape")
    parser.add_argument("--shape", choices=SHAPES,
                        help="How each cube is drawn")
    parser.add_argument("--grid", type=int, metavar="R",
                        help="Tile a (2R+1) x (2R+1) hex grid of cubes")
    parser.add_argument("--sparse", action="store_true",
                        help="Skip every third cell on odd grid rows")
    parser.add_argument("--no-ease", action="store_true",
                        help="Rotate at constant speed")
    parser.add_argument("--easing", choices=sorted(EASINGS),
                        help="Rotation easing curve (default: smoothstep)")
    parser.add_argument("--stroke-color", help="Edge color, name or #RRGGBB")
    parser.add_argument("--fill-color", help="Face color, name or #RRGGBB")
    parser.add_argument("--bg-color", default="#0E0E2C",
                        help="Background color in hex #RRGGBB (default: #0E0E2C)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--fps", type=float, default=30.0,
                        help="Frame cap (default: 30)")
    parser.add_argument("--headless", type=int, metavar="N",
                        help="Render N frames off-screen, print the last one and exit")
    parser.add_argument("--size", default="120x60", metavar="WxH",
                        help="Headless canvas size in pixels (default: 120x60)")
    parser.add_argument("--trace", action="store_true",
                        help="Print the draw calls of the first frame and exit")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", help="Write logs to this file")
    args = parser.parse_args(argv)

    try:
        args.scene_config = build_scene_config(args)
        args.canvas_size = parse_size(args.size)
    except ValueError as e:
        parser.error(str(e))
    return args


def parse_tilt(value) -> float:
    name = value.strip().lower()
    if name in TILTS:
        return resolve_tilt(name)
    try:
        return math.radians(float(name))
    except ValueError:
        raise ValueError(f"--tilt: expected {', '.join(TILTS)} or degrees, got '{value}'") from None


def parse_size(value):
    try:
        w, h = (int(v) for v in value.lower().split('x'))
    except ValueError:
        raise ValueError(f"--size: expected WxH, got '{value}'") from None
    if w <= 0 or h <= 0:
        raise ValueError(f"--size: dimensions must be positive, got '{value}'")
    return w, h


def build_scene_config(args) -> SceneConfig:
    """Preset plus command line overrides."""
    config = SceneConfig.preset(args.scene)
    grid_radius = (args.grid, args.grid) if args.grid is not None else None
    return config.with_overrides(
        period=args.period,
        tilt=parse_tilt(args.tilt) if args.tilt else None,
        policy=args.policy,
        shape=args.shape,
        grid_radius=grid_radius,
        sparse=True if args.sparse else None,
        easing='linear' if args.no_ease else args.easing,
        stroke_color=args.stroke_color,
        fill_color=args.fill_color,
    )


def build_render_config(args) -> RenderConfig:
    config = RenderConfig.detect_terminal()
    if args.no_color:
        config.use_color = False
    if args.ascii:
        config.use_braille = False
    config.fps = args.fps
    config.bg_color = args.bg_color
    return config


def run_headless(scene: Scene, render_config: RenderConfig, frames: int, size):
    """Advance `frames` steps of 1/fps, render the last one, return text lines."""
    dt = 1.0 / render_config.fps if render_config.fps > 0 else 0.0
    for _ in range(max(0, frames)):
        scene.update(dt)
    canvas = Canvas(*size)
    palette = Palette([scene.config.stroke_color, scene.config.fill_color])
    scene.render(fit_surface(canvas, scene, palette, render_config.margin))
    return canvas.to_lines(render_config.use_braille)


def run_trace(scene: Scene):
    surface = RecordingSurface()
    scene.render(surface)
    return [' '.join(str(part) if not isinstance(part, float) else f"{part:.2f}"
                     for part in call)
            for call in surface.calls]


def main(argv=None) -> int:
    args = parse_args(argv)
    interactive = args.headless is None and not args.trace
    setup_logging(getattr(logging, args.log_level), args.log_file,
                  console=not interactive)

    render_config = build_render_config(args)

    if args.trace:
        print('\n'.join(run_trace(Scene(args.scene_config))))
        return 0

    if args.headless is not None:
        lines = run_headless(Scene(args.scene_config), render_config,
                             args.headless, args.canvas_size)
        print('\n'.join(lines))
        return 0

    try:
        curses.wrapper(lambda s: demo_main(s, args.scene_config, render_config, args.scene))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception("Demo crashed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
