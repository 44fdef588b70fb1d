"""
Terminal Rendering

Draws the grid interior with 24-bit ANSI colour, one block character per
cell. Dead cells keep their zeroed colour and show up black.
"""

import sys


LIVE_CELL_CHAR = "█"  # full block
RESET = "\x1b[0m"
CLEAR = "\x1b[2J\x1b[H"


def _fg(r, g, b):
    return f"\x1b[38;2;{r};{g};{b}m"


def render_terminal(grid, cell_char=LIVE_CELL_CHAR):
    """Return the interior of the grid as an ANSI truecolor string."""
    lines = []
    colors = grid.colors
    for y in range(1, grid.height - 1):
        row = []
        for x in range(1, grid.width - 1):
            r, g, b = colors[y, x]
            row.append(_fg(r, g, b) + cell_char)
        lines.append("".join(row) + RESET)
    return "\n".join(lines)


def clear_screen(stream=None):
    stream = stream or sys.stdout
    stream.write(CLEAR)
    stream.flush()


def show(grid, stream=None, cell_char=LIVE_CELL_CHAR):
    """Print the grid to the terminal."""
    stream = stream or sys.stdout
    stream.write(render_terminal(grid, cell_char) + "\n")
    stream.flush()


class TerminalAnimator:
    """Frame callback for animated runs: clear the screen and redraw."""

    def __init__(self, stream=None, cell_char=LIVE_CELL_CHAR, show_status=True):
        self.stream = stream or sys.stdout
        self.cell_char = cell_char
        self.show_status = show_status
        self.frames = 0

    def __call__(self, grid, sim):
        clear_screen(self.stream)
        show(grid, self.stream, self.cell_char)
        if self.show_status:
            stats = grid.stats
            self.stream.write(
                f"sweep {sim.sweeps}  alive {stats['alive']}  "
                f"({stats['alive_pct']:.1f}%)\n")
            self.stream.flush()
        self.frames += 1
