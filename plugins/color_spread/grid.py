"""
Grid - Liveness and Colour Buffers for the Spreading Process

Two index-aligned numpy buffers of the same (height, width) shape:
- alive:  bool, True where a cell is live
- colors: uint8 RGB per cell, meaningful only where alive is True

The outermost ring is a permanent border. Seeding and spreading only
ever touch the interior [1, height-2] x [1, width-2], so a Moore
neighbourhood lookup from an interior cell never leaves the buffers.

Cells never die: once alive a cell stays alive, so the grid only grows.
"""

import numpy as np

from .colors import random_color, shift_color


# Moore neighbourhood offsets in row-major order (centre excluded)
MOORE_OFFSETS = [
    (dy, dx)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if (dy, dx) != (0, 0)
]


class GridConfigError(ValueError):
    """Grid constructed with parameters that leave no usable interior."""


class Grid:
    """Live/dead cells with an RGB colour per cell."""

    def __init__(self, width, height, colorshift=4, spread_chance=0.5):
        """
        Args:
            width: Columns including the 1-cell border (>= 3)
            height: Rows including the 1-cell border (>= 3)
            colorshift: Max per-channel perturbation when a cell spreads
            spread_chance: Probability in [0, 1] that a spread attempt commits
        """
        if width < 3 or height < 3:
            raise GridConfigError(
                f"Grid must be at least 3x3 to have an interior, got {width}x{height}")
        if not 0 <= colorshift <= 255:
            raise GridConfigError(f"colorshift must be in [0, 255], got {colorshift}")
        if not 0.0 <= spread_chance <= 1.0:
            raise GridConfigError(
                f"spread_chance must be in [0, 1], got {spread_chance}")

        self.width = int(width)
        self.height = int(height)
        self.colorshift = int(colorshift)
        self.spread_chance = float(spread_chance)

        self.alive = np.zeros((self.height, self.width), dtype=bool)
        self.colors = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def __repr__(self):
        return (f"Grid({self.width}x{self.height}, alive={self.alive_count}, "
                f"colorshift={self.colorshift}, spread_chance={self.spread_chance})")

    # --- Bounds ---

    def _check_bounds(self, y, x):
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(
                f"Cell ({y}, {x}) outside {self.height}x{self.width} grid")

    def _check_interior(self, y, x):
        if not (1 <= y <= self.height - 2 and 1 <= x <= self.width - 2):
            raise IndexError(
                f"Cell ({y}, {x}) is not in the interior of a "
                f"{self.height}x{self.width} grid")

    def in_interior(self, y, x):
        return 1 <= y <= self.height - 2 and 1 <= x <= self.width - 2

    def interior_coords(self):
        """All interior (y, x) pairs, row-major (top-to-bottom, left-to-right)."""
        return [(y, x)
                for y in range(1, self.height - 1)
                for x in range(1, self.width - 1)]

    # --- Cell access ---

    def is_alive(self, y, x):
        self._check_bounds(y, x)
        return bool(self.alive[y, x])

    def color_at(self, y, x):
        """Return the (r, g, b) tuple stored at (y, x)."""
        self._check_bounds(y, x)
        r, g, b = self.colors[y, x]
        return (int(r), int(g), int(b))

    def place_cell(self, y, x, color):
        """Make (y, x) alive with the given colour."""
        self._check_bounds(y, x)
        if len(color) != 3 or not all(0 <= c <= 255 for c in color):
            raise ValueError(f"Colour must be three channels in [0, 255], got {color}")
        self.alive[y, x] = True
        self.colors[y, x] = color

    # --- Seeding ---

    def spawn_random_orphan(self, rng):
        """Place a randomly coloured cell at a uniformly random interior position.

        Landing on a cell that is already alive just recolours it.

        Returns:
            The (y, x) the orphan was placed at
        """
        x = int(rng.integers(1, self.width - 1))
        y = int(rng.integers(1, self.height - 1))
        self.place_cell(y, x, random_color(rng))
        return (y, x)

    def spawn_orphans(self, count, rng):
        """Spawn ``count`` orphans. Returns the list of positions used."""
        return [self.spawn_random_orphan(rng) for _ in range(count)]

    # --- Spreading ---

    def dead_neighbors(self, y, x):
        """Dead cells in the Moore neighbourhood of interior cell (y, x).

        Border cells are never targets. Returned as a list of (y, x) in
        row-major order so that a seeded generator always picks the same
        neighbour.
        """
        self._check_interior(y, x)
        alive = self.alive
        return [(y + dy, x + dx)
                for dy, dx in MOORE_OFFSETS
                if not alive[y + dy, x + dx] and self.in_interior(y + dy, x + dx)]

    def attempt_spread(self, y, x, rng):
        """Give the live cell at (y, x) one chance to spread.

        The target neighbour is picked before the spread_chance draw, so
        a rejected attempt still consumes the choice.

        Returns:
            The (y, x) of the newly live cell, or None if nothing spread
        """
        self._check_interior(y, x)
        if not self.alive[y, x]:
            return None
        dead = self.dead_neighbors(y, x)
        if not dead:
            return None

        ny, nx = dead[int(rng.integers(0, len(dead)))]
        if rng.random() < self.spread_chance:
            child = shift_color(self.color_at(y, x), self.colorshift, rng)
            self.place_cell(ny, nx, child)
            return (ny, nx)
        return None

    def has_frontier(self):
        """True if any live interior cell still has a dead neighbour."""
        dead = ~self.alive
        dead[0, :] = dead[-1, :] = False
        dead[:, 0] = dead[:, -1] = False
        live = self.alive[1:-1, 1:-1]
        dead_around = np.zeros_like(live)
        h, w = self.height, self.width
        for dy, dx in MOORE_OFFSETS:
            dead_around |= dead[1 + dy:h - 1 + dy, 1 + dx:w - 1 + dx]
        return bool((live & dead_around).any())

    # --- State ---

    @property
    def alive_count(self):
        return int(self.alive.sum())

    @property
    def interior_size(self):
        return (self.width - 2) * (self.height - 2)

    @property
    def dead_interior_count(self):
        return self.interior_size - int(self.alive[1:-1, 1:-1].sum())

    def is_complete(self):
        """Every interior cell is alive."""
        return bool(self.alive[1:-1, 1:-1].all())

    def clear(self):
        self.alive[:] = False
        self.colors[:] = 0

    def copy(self):
        other = Grid(self.width, self.height, self.colorshift, self.spread_chance)
        other.alive = self.alive.copy()
        other.colors = self.colors.copy()
        return other

    @property
    def stats(self):
        """Return current grid statistics."""
        alive = self.interior_size - self.dead_interior_count
        return {
            "width": self.width,
            "height": self.height,
            "alive": alive,
            "dead_interior": self.dead_interior_count,
            "alive_pct": alive / self.interior_size * 100,
        }
