"""
Simulation Driver - Sweeps the Grid Until It Stops Growing

Each sweep walks the interior in row-major order and gives every live
cell one spread attempt. Updates are applied in place, so a cell that
comes alive early in a sweep can spread again later in the same sweep.

The run ends after the first sweep that commits no spreads. That covers
a complete grid, a stalled one, and spread_chance zero. With a low
spread_chance a quiet sweep can also end a run that still had room to
grow; stats["frontier"] reports that case.

Two modes share the exact same update code:
- BACKGROUND: sweeps back to back, nothing observed in between
- ANIMATED:   calls on_frame before every sweep and sleeps frametime

Usage:
    rng = np.random.default_rng(7)
    grid = Grid(32, 16)
    grid.spawn_orphans(1, rng)
    sim = Simulation(grid, rng)
    sim.run()
    print(sim.outcome, sim.sweeps)
"""

import enum
import time


class RunMode(enum.Enum):
    BACKGROUND = "background"
    ANIMATED = "animated"


class SimState(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class Outcome(enum.Enum):
    COMPLETE = "complete"  # every interior cell alive
    STUCK = "stuck"        # terminated with dead cells left


class Simulation:
    """Owns a grid and the random generator for the length of a run."""

    def __init__(self, grid, rng, frametime=0.0, on_frame=None, sleep=time.sleep):
        """
        Args:
            grid: Seeded Grid to mutate in place
            rng: numpy Generator, the only source of randomness
            frametime: Seconds to pause between sweeps in ANIMATED mode
            on_frame: Callable(grid, sim) invoked to display a frame
            sleep: Pause function (swappable for tests)
        """
        self.grid = grid
        self.rng = rng
        self.frametime = frametime
        self.on_frame = on_frame
        self._sleep = sleep
        self._coords = grid.interior_coords()

        self.state = SimState.RUNNING
        self.outcome = None
        self.sweeps = 0
        self.spreads = 0
        self.elapsed = 0.0

    def sweep(self):
        """One full pass over the interior. Returns the number of spreads."""
        grid = self.grid
        alive = grid.alive
        committed = 0
        for y, x in self._coords:
            if alive[y, x] and grid.attempt_spread(y, x, self.rng) is not None:
                committed += 1
        self.sweeps += 1
        self.spreads += committed
        return committed

    def step(self):
        """Run one sweep and update the state machine. Returns spreads committed."""
        if self.state is SimState.TERMINATED:
            return 0
        committed = self.sweep()
        if committed == 0:
            self._terminate()
        return committed

    def _terminate(self):
        self.state = SimState.TERMINATED
        self.outcome = Outcome.COMPLETE if self.grid.is_complete() else Outcome.STUCK

    def run(self, mode=RunMode.BACKGROUND, max_sweeps=None):
        """Sweep until terminated (or max_sweeps reached). Returns the grid."""
        animated = mode is RunMode.ANIMATED
        start = time.perf_counter()
        while self.state is SimState.RUNNING:
            if max_sweeps is not None and self.sweeps >= max_sweeps:
                break
            if animated:
                self._show()
                if self.frametime > 0:
                    self._sleep(self.frametime)
            self.step()
        if animated:
            self._show()
        self.elapsed += time.perf_counter() - start
        return self.grid

    def _show(self):
        if self.on_frame is not None:
            self.on_frame(self.grid, self)

    @property
    def stats(self):
        stats = dict(self.grid.stats)
        stats.update({
            "sweeps": self.sweeps,
            "spreads": self.spreads,
            "state": self.state.value,
            "outcome": self.outcome.value if self.outcome else None,
            "frontier": self.grid.has_frontier(),
        })
        return stats


def run(grid, rng, mode=RunMode.BACKGROUND, frametime=0.0, on_frame=None):
    """Run a seeded grid to termination and return it."""
    return Simulation(grid, rng, frametime=frametime, on_frame=on_frame).run(mode)
