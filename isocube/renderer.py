#
# PROJECT: isocube
# MODULE: isocube/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import curses
import logging

from .canvas import Canvas, render_cell_ascii, render_cell_braille
from .color import init_colors, resolve_color
from .config import RenderConfig
from .surface import CanvasSurface

logger = logging.getLogger(__name__)


def fit_surface(canvas: Canvas, scene, palette, margin=0.9, fill_pattern='stipple'):
    """
    CanvasSurface whose base transform centres the scene and scales it so
    every instance fits inside `margin` of the smaller canvas dimension.
    """
    half = min(canvas.w, canvas.h) * 0.5 * margin
    scale = half / scene.extent()
    return CanvasSurface(canvas, palette, scale=scale,
                         origin=(canvas.w * 0.5, canvas.h * 0.5),
                         fill_pattern=fill_pattern)


class Renderer:
    """
    Presents a filled Canvas on a curses screen.

    Pixels are packed 2x4 per terminal cell; the top line is left free for
    the HUD.
    """

    def __init__(self):
        self.valid_pairs = None
        self.bg_pair = 0

    def init_colors(self, config: RenderConfig, palette):
        """Initialize curses color pairs.  Call once after curses.wrapper init."""
        self.valid_pairs, self.bg_pair = init_colors(
            config, palette.rgb_list(), resolve_color(config.bg_color))
        logger.debug("Color pairs: %s (bg pair %s)", self.valid_pairs, self.bg_pair)

    @staticmethod
    def canvas_size(stdscr):
        """Pixel size of the drawable area, or None when the window is too small."""
        th, tw = stdscr.getmaxyx()
        w = (tw - 1) * 2
        h = (th - 2) * 4
        if w <= 0 or h <= 0:
            return None
        return w, h

    def present(self, stdscr, canvas: Canvas, config: RenderConfig):
        """
        Output canvas cells to curses (erase + background + draw).

        Does NOT call stdscr.refresh(); the caller does that after the HUD.
        """
        th, tw = stdscr.getmaxyx()
        stdscr.erase()

        if config.use_color and self.bg_pair:
            try:
                stdscr.bkgd(' ', curses.color_pair(self.bg_pair))
            except curses.error:
                pass

        valid_pairs = self.valid_pairs or []
        use_color = config.use_color
        render_cell = render_cell_braille if config.use_braille else render_cell_ascii

        grid = canvas.grid
        c_grid = canvas.c_grid
        for y in range(min(th - 2, len(grid))):
            row_grid = grid[y]
            row_color = c_grid[y]
            for x in range(min(tw - 1, len(row_grid))):
                mask = row_grid[x]
                if not mask:
                    continue
                attr = curses.color_pair(0)
                if use_color and valid_pairs:
                    c_idx = row_color[x]
                    if c_idx < len(valid_pairs):
                        attr = curses.color_pair(valid_pairs[c_idx])
                try:
                    stdscr.addstr(y + 1, x, render_cell(mask), attr)
                except curses.error:
                    # Writing the bottom-right cell raises after the write
                    pass
