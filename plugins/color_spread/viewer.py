"""
Interactive Pygame Viewer for the Spread Simulation

Opens a window and advances the simulation one sweep per frame at the
configured framerate, using the same Simulation.step as the terminal and
background runs. The window stays open on the finished image.

Controls:
  SPACE       Pause / Resume
  R           Reseed (fresh grid, same settings)
  S           Save screenshot (PNG of the colour buffer)
  H           Toggle HUD overlay
  Q / ESC     Quit
"""

import os
import time
import pygame

from .grid import Grid
from .simulation import Simulation, SimState
from .export import save_image


class Viewer:

    def __init__(self, settings, rng, window_w=900, window_h=450):
        self.settings = settings
        self.rng = rng
        self.canvas_w = window_w
        self.canvas_h = window_h
        self.running = True
        self.paused = False
        self.show_hud = True
        self.sim = None
        self._reseed()

    def _reseed(self):
        s = self.settings
        if self.sim is None:
            grid = Grid(s.width, s.height, s.colorshift, s.spread_chance)
        else:
            grid = self.sim.grid
            grid.clear()
        grid.spawn_orphans(s.starting_live_cells, self.rng)
        self.sim = Simulation(grid, self.rng)

    def _render_frame(self):
        """Colour buffer -> pygame surface (surfarray wants x-major)."""
        return pygame.surfarray.make_surface(self.sim.grid.colors.swapaxes(0, 1).copy())

    def _draw_hud(self, screen, font):
        if not self.show_hud:
            return
        stats = self.sim.stats
        line = (f"sweep {stats['sweeps']}   alive {stats['alive']} "
                f"({stats['alive_pct']:.1f}%)")
        if self.sim.state is SimState.TERMINATED:
            line += f"   [{stats['outcome'].upper()}]"
        elif self.paused:
            line = "[PAUSED]  " + line

        bg_surface = pygame.Surface((self.canvas_w, 24), pygame.SRCALPHA)
        bg_surface.fill((0, 0, 0, 140))
        screen.blit(bg_surface, (0, 0))
        screen.blit(font.render(line, True, (210, 215, 225)), (10, 6))

    def _save_screenshot(self):
        screenshots_dir = os.path.join(os.getcwd(), "screenshots")
        os.makedirs(screenshots_dir, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        path = os.path.join(screenshots_dir, f"spread_{timestamp}.png")
        save_image(self.sim.grid, path)
        print(f"Screenshot saved: {path}")

    def run(self):
        """Main viewer loop. Returns the grid shown when the window closed."""
        pygame.init()
        screen = pygame.display.set_mode((self.canvas_w, self.canvas_h), pygame.RESIZABLE)
        pygame.display.set_caption("Color Spread")
        clock = pygame.time.Clock()
        font = pygame.font.SysFont("menlo", 13)

        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.canvas_w, self.canvas_h = event.w, event.h
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event)

            if not self.paused:
                self.sim.step()

            scaled = pygame.transform.scale(self._render_frame(), (self.canvas_w, self.canvas_h))
            screen.blit(scaled, (0, 0))
            self._draw_hud(screen, font)
            pygame.display.flip()
            clock.tick(self.settings.framerate)

        pygame.quit()
        return self.sim.grid

    def _handle_keydown(self, event):
        key = event.key
        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False
        elif key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_r:
            self._reseed()
        elif key == pygame.K_s:
            self._save_screenshot()
        elif key == pygame.K_h:
            self.show_hud = not self.show_hud
