#
# PROJECT: isocube
# MODULE: isocube/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import curses
import logging

logger = logging.getLogger(__name__)

NAMED_COLORS = {
    'black': (0, 0, 0),
    'white': (255, 255, 255),
    'gray': (128, 128, 128),
    'grey': (128, 128, 128),
    'red': (255, 0, 0),
    'green': (0, 128, 0),
    'blue': (0, 0, 255),
    'yellow': (255, 255, 0),
    'cyan': (0, 255, 255),
    'magenta': (255, 0, 255),
    'orange': (255, 165, 0),
}


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None


def resolve_color(style):
    """Named color or hex string to (r, g, b); None if unrecognised."""
    if style is None:
        return None
    named = NAMED_COLORS.get(str(style).strip().lower())
    if named is not None:
        return named
    return parse_hex_color(style)

# The 6x6x6 color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def _rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        best_i = 0
        best_d = abs(v - _CUBE_VALUES[0])
        for i in range(1, 6):
            d = abs(v - _CUBE_VALUES[i])
            if d < best_d:
                best_d = d
                best_i = i
        return best_i

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    # Grayscale ramp 232-255: 8, 18, ..., 238
    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx


def _rgb_to_nearest_ansi8(r, g, b):
    """Nearest basic ANSI color index (0-7), for 8-color terminals."""
    best_idx = 0
    best_dist = None
    for i, (ar, ag, ab) in enumerate(_ANSI8):
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if best_dist is None or d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx


def init_colors(config, palette_rgb, bg_rgb=None):
    """
    Safely initialize curses color pairs for a palette of (r, g, b) colors.
    Color mode cascade:
      1. True color  - can_change_color(): init_color() with exact RGB
      2. xterm-256   - 256+ colors: nearest xterm-256 index
      3. 8-color     - basic ANSI palette approximation
      4. Mono        - no color
    Returns a list of color pair ids (one per palette entry) and the bg pair id.
    """
    count = len(palette_rgb)
    if not config.use_color:
        return [0] * count, 0

    try:
        if not curses.has_colors():
            return [0] * count, 0

        curses.start_color()

        default_bg_idx = curses.COLOR_BLACK
        try:
            curses.use_default_colors()
            default_bg_idx = -1
        except Exception:
            logger.debug("Terminal has no default colors")

        if bg_rgb is None:
            bg_rgb = (0, 0, 0)

        num_colors = 8
        try:
            num_colors = curses.COLORS
        except Exception:
            pass

        can_redefine = False
        try:
            can_redefine = curses.can_change_color()
        except Exception:
            pass

        fg_slots = []
        bg_slot = -1

        if can_redefine and num_colors >= 256:
            logger.debug("Color mode: true color (%d slots)", count + 1)
            # Slots from 16 upward, leaving ANSI 0-15 untouched
            base_slot = 16
            for i, (r, g, b) in enumerate(palette_rgb):
                slot = base_slot + i
                try:
                    curses.init_color(slot, r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)
                    fg_slots.append(slot)
                except Exception:
                    fg_slots.append(_rgb_to_nearest_xterm(r, g, b))

            if bg_rgb == (0, 0, 0) and default_bg_idx == -1:
                bg_slot = -1
            else:
                bg_slot_num = base_slot + count
                try:
                    curses.init_color(bg_slot_num,
                                      bg_rgb[0] * 1000 // 255,
                                      bg_rgb[1] * 1000 // 255,
                                      bg_rgb[2] * 1000 // 255)
                    bg_slot = bg_slot_num
                except Exception:
                    bg_slot = _rgb_to_nearest_xterm(*bg_rgb)

        elif num_colors >= 256:
            logger.debug("Color mode: xterm-256")
            fg_slots = [_rgb_to_nearest_xterm(r, g, b) for r, g, b in palette_rgb]
            bg_slot = _rgb_to_nearest_xterm(*bg_rgb)
            if bg_rgb == (0, 0, 0) and default_bg_idx == -1:
                bg_slot = -1

        elif num_colors >= 8:
            logger.debug("Color mode: ANSI 8")
            fg_slots = [_rgb_to_nearest_ansi8(r, g, b) for r, g, b in palette_rgb]
            bg_slot = _rgb_to_nearest_ansi8(*bg_rgb)
            if bg_rgb == (0, 0, 0) and default_bg_idx == -1:
                bg_slot = -1
        else:
            return [0] * count, 0

        valid_pairs = []
        for i, fg in enumerate(fg_slots):
            pair_id = i + 1
            try:
                curses.init_pair(pair_id, fg, bg_slot)
                valid_pairs.append(pair_id)
            except Exception:
                valid_pairs.append(0)

        # Background pair for screen fill
        bg_pair = 0
        try:
            fg_for_bg = 7 if bg_slot != 7 else 0
            curses.init_pair(count + 1, fg_for_bg, bg_slot)
            bg_pair = count + 1
        except Exception:
            pass

        return valid_pairs, bg_pair

    except Exception:
        logger.debug("Color initialisation failed, falling back to mono", exc_info=True)
        return [0] * count, 0
