#
# PROJECT: isocube
# MODULE: isocube/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import curses
import logging
import time

from .canvas import Canvas
from .config import RenderConfig, SceneConfig
from .renderer import Renderer, fit_surface
from .scene import Scene
from .surface import Palette

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Host loop for the terminal: measures real dt, calls scene.update(dt)
    then scene.render(surface) once per frame, and draws a HUD line.
    The only key handled is 'q'.
    """

    def __init__(self, stdscr, scene_config: SceneConfig, render_config: RenderConfig,
                 scene_name='custom'):
        self.stdscr = stdscr
        self.running = True
        self.scene_name = scene_name

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        self.config = render_config
        self.scene = Scene(scene_config)

        # ── Palette + curses color init ─────────────────────────────────
        self.palette = Palette([scene_config.stroke_color, scene_config.fill_color])
        renderer = Renderer()
        renderer.init_colors(render_config, self.palette)
        self.renderer = renderer

        # ── Frame counter ───────────────────────────────────────────────
        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.monotonic()

    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1
        if key == ord('q'):
            self.running = False

    def draw_frame(self):
        size = self.renderer.canvas_size(self.stdscr)
        if size is None:
            self.stdscr.erase()
            return
        canvas = Canvas(*size)
        surface = fit_surface(canvas, self.scene, self.palette, self.config.margin)
        self.scene.render(surface)
        self.renderer.present(self.stdscr, canvas, self.config)

    def draw_hud(self, frame_ms):
        th, tw = self.stdscr.getmaxyx()
        cfg = self.scene.config
        modestr = (f"{'COL' if self.config.use_color else 'MON'} "
                   f"{'BRA' if self.config.use_braille else 'ASC'}")
        hdr = (f" {self.scene_name.upper()}"
               f" | {cfg.shape}/{cfg.policy.value}"
               f" | N:{len(self.scene.offsets())}"
               f" | T:{self.scene.state.anim_amt:.2f}"
               f" | FPS:{self.fps}"
               f" | {frame_ms:.1f}ms"
               f" | [{modestr}] ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(max(0, tw - 1), '='),
                               curses.color_pair(0) | curses.A_BOLD)
        except curses.error:
            pass

    def run(self):
        frame_time = 1.0 / self.config.fps if self.config.fps > 0 else 0.0
        last = time.monotonic()
        while self.running:
            start_time = time.monotonic()
            self.handle_input()

            self.scene.update(start_time - last)
            last = start_time
            self.draw_frame()

            self.frame_count += 1
            now = time.monotonic()
            if now - self.last_fps_time >= 1.0:
                self.fps = self.frame_count
                self.frame_count = 0
                self.last_fps_time = now
                logger.debug("fps=%d anim_amt=%.3f", self.fps, self.scene.state.anim_amt)

            self.draw_hud((now - start_time) * 1000)
            self.stdscr.refresh()

            spare = frame_time - (time.monotonic() - start_time)
            if spare > 0:
                time.sleep(spare)


def main(stdscr, scene_config, render_config, scene_name='custom'):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, scene_config, render_config, scene_name)
    app.run()
