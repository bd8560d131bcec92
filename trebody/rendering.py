"""pygame viewer drawing the projected trajectories as a live 2-D trace."""

import logging
from collections import deque

import numpy as np
import pygame
import pygame.gfxdraw

from . import constants as C
from .analysis import EnergyMonitor
from .utils import distance_to_display, time_to_display

logger = logging.getLogger(__name__)


class TraceRenderer:
    """Project body positions onto a square chart spanning ``±view_extent``."""

    def __init__(self, view_extent, size=(C.WIDTH, C.HEIGHT), max_trail_length=C.DEFAULT_TRAIL_LENGTH):
        self.view_extent = float(view_extent)
        self.size = size
        self.max_trail_length = max(C.MIN_TRAIL_LENGTH, min(int(max_trail_length), C.MAX_TRAIL_LENGTH))
        self.trails = []

    def world_to_screen(self, x, y):
        """Map metres to pixels; +y points up on screen."""
        width, height = self.size
        sx = width / 2 + (x / self.view_extent) * (width / 2)
        sy = height / 2 - (y / self.view_extent) * (height / 2)
        return np.array([sx, sy])

    def update_trails(self, bodies):
        while len(self.trails) < len(bodies):
            self.trails.append(deque(maxlen=self.max_trail_length))
        for trail, body in zip(self.trails, bodies):
            point = self.world_to_screen(body.position.x, body.position.y)
            if np.all(np.isfinite(point)):
                trail.append(point)

    def clear_trails(self):
        for trail in self.trails:
            trail.clear()

    def draw(self, screen, bodies, simulation_time=0.0, energy_drift=None):
        screen.fill(C.BLACK)
        self._draw_axes(screen)
        for i, body in enumerate(bodies):
            color = C.BODY_COLORS[i % len(C.BODY_COLORS)]
            trail = self.trails[i] if i < len(self.trails) else ()
            for run in self._trail_runs(screen, trail):
                pygame.draw.aalines(screen, color, False, run)
            sx, sy = self.world_to_screen(body.position.x, body.position.y)
            # gfxdraw takes 16-bit coordinates; bodies off the chart get no marker
            if self._on_surface(screen, sx, sy):
                pygame.gfxdraw.filled_circle(screen, int(sx), int(sy), C.BODY_RADIUS_PIXELS, color)
        self._draw_labels(screen, bodies, simulation_time, energy_drift)

    @staticmethod
    def _on_surface(screen, sx, sy, margin=0):
        width, height = screen.get_size()
        return -margin <= sx < width + margin and -margin <= sy < height + margin

    def _trail_runs(self, screen, trail):
        """Split a trail into runs of points near the surface.

        Points more than one surface size away are dropped, which breaks
        the line where a body leaves the chart.
        """
        margin = max(screen.get_size())
        runs, run = [], []
        for px, py in trail:
            if self._on_surface(screen, px, py, margin):
                run.append((int(px), int(py)))
                continue
            if len(run) > 1:
                runs.append(run)
            run = []
        if len(run) > 1:
            runs.append(run)
        return runs

    def _draw_axes(self, screen):
        width, height = screen.get_size()
        pygame.draw.line(screen, C.DARK_GRAY, (0, height // 2), (width, height // 2), 1)
        pygame.draw.line(screen, C.DARK_GRAY, (width // 2, 0), (width // 2, height), 1)

    def _draw_labels(self, screen, bodies, simulation_time, energy_drift):
        font = pygame.font.Font(None, 18)
        screen.blit(font.render(C.TITLE, True, C.WHITE), (10, 8))
        for i, body in enumerate(bodies):
            color = C.BODY_COLORS[i % len(C.BODY_COLORS)]
            label = body.name or f"Body {i + 1}"
            screen.blit(font.render(label, True, color), (10, 28 + 16 * i))
        info = f"t = {time_to_display(simulation_time)}   extent = ±{distance_to_display(self.view_extent)}"
        if energy_drift is not None:
            info += f"   energy drift: {energy_drift:.3e} %"
        screen.blit(font.render(info, True, C.GRAY), (10, screen.get_height() - 20))


class Viewer:
    """Interactive window running a :class:`~trebody.simulation.Simulation`.

    ``q``/``Esc`` or closing the window quits, ``Space`` pauses and ``r``
    restores the initial conditions.
    """

    def __init__(self, simulation, init_pygame: bool = True):
        self.simulation = simulation
        self.renderer = TraceRenderer(simulation.config.view_extent)
        self.monitor = EnergyMonitor()
        self.monitor.set_initial_energy(simulation.bodies, simulation.config.g_constant)
        self.paused = False
        self.running = False

        if init_pygame:
            pygame.init()
            self.screen = pygame.display.set_mode(self.renderer.size)
            pygame.display.set_caption(C.TITLE)
            self.clock = pygame.time.Clock()
        else:
            self.screen = None
            self.clock = None

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_q, pygame.K_ESCAPE):
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_r:
                    self.reset()

    def reset(self) -> None:
        self.simulation.reset()
        self.renderer.clear_trails()
        self.monitor.set_initial_energy(self.simulation.bodies, self.simulation.config.g_constant)

    def update(self) -> None:
        if self.paused:
            return
        self.simulation.run_frame()
        self.renderer.update_trails(self.simulation.bodies)
        self.monitor.update(self.simulation.bodies, self.simulation.config.g_constant)

    def draw(self) -> None:
        if self.screen is None:
            return
        drift = self.monitor.history[-1] if self.monitor.history else None
        self.renderer.draw(self.screen, self.simulation.bodies, self.simulation.simulation_time, drift)
        pygame.display.flip()

    def run(self, max_frames=None) -> int:
        """Main loop. Returns the number of frames drawn."""
        if self.screen is None or self.clock is None:
            raise RuntimeError("Viewer cannot run without pygame initialized")
        self.running = True
        frames = 0
        try:
            while self.running:
                self.clock.tick(C.FPS_LIMIT)
                self.handle_events()
                if not self.running:
                    break
                self.update()
                self.draw()
                frames += 1
                if max_frames is not None and frames >= max_frames:
                    break
        finally:
            logger.info("Viewer closed after %d frames", frames)
            pygame.quit()
        return frames


def run_viewer(simulation, max_frames=None) -> int:
    return Viewer(simulation).run(max_frames=max_frames)
