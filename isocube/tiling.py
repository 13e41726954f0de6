#
# PROJECT: isocube
# MODULE: isocube/tiling.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import enum
import math


class HexOrientation(enum.Enum):
    """
    POINTY: width = sqrt(3) * side, height = 2 * side; odd rows interlock.
    FLAT:   width = 2 * side, height = sqrt(3) * side; odd columns interlock.
    """
    POINTY = 'pointy'
    FLAT = 'flat'

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown hex orientation '{value}'") from None


class HexLayout:
    """
    Maps integer (row, col) grid cells to world-space offsets on a
    hexagonal packing. Stateless; offsets are recomputed on demand.
    """
    __slots__ = ('side', 'orientation', 'sparse')

    def __init__(self, side: float, orientation=HexOrientation.POINTY, sparse: bool = False):
        if not math.isfinite(side) or side <= 0:
            raise ValueError(f"hex side must be positive, got {side!r}")
        self.side = float(side)
        self.orientation = HexOrientation.parse(orientation)
        self.sparse = sparse

    def __repr__(self):
        return (f"HexLayout(side={self.side}, orientation={self.orientation.value}, "
                f"sparse={self.sparse})")

    @property
    def width(self) -> float:
        if self.orientation is HexOrientation.POINTY:
            return math.sqrt(3) * self.side
        return 2.0 * self.side

    @property
    def height(self) -> float:
        if self.orientation is HexOrientation.POINTY:
            return 2.0 * self.side
        return math.sqrt(3) * self.side

    def grid_offset(self, row: int, col: int):
        """World (x, y) of a cell's centre."""
        w, h = self.width, self.height
        if self.orientation is HexOrientation.POINTY:
            x = col * w + (row % 2) * (w / 2.0)
            y = row * h * 0.75
        else:
            x = col * w * 0.75
            y = row * h + (col % 2) * (h / 2.0)
        return (x, y)

    def is_masked(self, row: int, col: int) -> bool:
        """Sparse pattern: every third cell on odd rows is left empty."""
        return self.sparse and row % 2 == 1 and col % 3 == 0

    def cells(self, radius_rows: int, radius_cols: int):
        """Yield unmasked (row, col) pairs over [-r, r], row major."""
        if radius_rows < 0 or radius_cols < 0:
            raise ValueError("grid radius must be non-negative")
        for row in range(-radius_rows, radius_rows + 1):
            for col in range(-radius_cols, radius_cols + 1):
                if not self.is_masked(row, col):
                    yield (row, col)


def grid_offset(row: int, col: int, side: float, orientation=HexOrientation.POINTY):
    """Convenience wrapper around HexLayout.grid_offset."""
    return HexLayout(side, orientation).grid_offset(row, col)
