#
# PROJECT: isocube
# MODULE: isocube/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

class Canvas:
    """
    Pixel grid packed into 2x4 terminal cells.

    No depth buffer: callers draw back to front and later writes win,
    both for the dot bits and for the cell's color.
    """
    __slots__ = ['w', 'h', 'grid', 'c_grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        if w <= 0 or h <= 0:
            raise ValueError(f"Canvas size must be positive, got {w}x{h}")
        self.w, self.h = w, h
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]
        # Color grid stores palette index per-cell
        self.c_grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    def set_pixel(self, x, y, color_idx, on=True):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return

        cx, cy = x >> 1, y >> 2
        # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
        bit = 1 << ((y & 3) + (x & 1) * 4)
        if on:
            self.grid[cy][cx] |= bit
            self.c_grid[cy][cx] = color_idx
        else:
            self.grid[cy][cx] &= ~bit

    def get_pixel(self, x, y) -> bool:
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return False
        return bool(self.grid[y >> 2][x >> 1] & (1 << ((y & 3) + (x & 1) * 4)))

    def clear(self):
        for row in self.grid:
            row[:] = [0] * len(row)
        for row in self.c_grid:
            row[:] = [0] * len(row)

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0])

    def to_lines(self, use_braille=True):
        """Render the whole canvas as text, one string per cell row."""
        render = render_cell_braille if use_braille else render_cell_ascii
        return [''.join(render(mask) for mask in row).rstrip() for row in self.grid]


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '

    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
