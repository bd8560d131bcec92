import os

import numpy as np
import pygame
import pytest

from trebody.physics import Body
from trebody.rendering import TraceRenderer, Viewer
from trebody.simulation import Simulation
from trebody import constants as C


@pytest.fixture
def dummy_display(monkeypatch):
    monkeypatch.setitem(os.environ, "SDL_VIDEODRIVER", "dummy")
    monkeypatch.setitem(os.environ, "SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


def test_world_to_screen_maps_extent_to_edges():
    r = TraceRenderer(100.0, size=(200, 400))
    assert np.allclose(r.world_to_screen(0.0, 0.0), [100.0, 200.0])
    assert np.allclose(r.world_to_screen(100.0, 100.0), [200.0, 0.0])
    assert np.allclose(r.world_to_screen(-100.0, -100.0), [0.0, 400.0])


def test_trail_length_is_clamped():
    assert TraceRenderer(1.0, max_trail_length=1).max_trail_length == C.MIN_TRAIL_LENGTH
    assert TraceRenderer(1.0, max_trail_length=10**9).max_trail_length == C.MAX_TRAIL_LENGTH


def test_update_trails_skips_non_finite_points():
    r = TraceRenderer(10.0, max_trail_length=C.MIN_TRAIL_LENGTH)
    bodies = [Body(1.0, [1.0, 2.0]), Body(1.0, [float("nan"), 0.0]), Body(1.0, [0.0, 0.0])]
    for _ in range(C.MIN_TRAIL_LENGTH + 5):
        r.update_trails(bodies)
    assert len(r.trails) == 3
    assert len(r.trails[0]) == C.MIN_TRAIL_LENGTH
    assert len(r.trails[1]) == 0
    r.clear_trails()
    assert all(len(t) == 0 for t in r.trails)


def test_draw_on_surface(dummy_display):
    pygame.init()
    sim = Simulation.from_preset("TreBody", ticks_per_frame=10)
    r = TraceRenderer(sim.config.view_extent)
    surface = pygame.Surface(r.size)
    for _ in range(3):
        sim.run_frame()
        r.update_trails(sim.bodies)
    r.draw(surface, sim.bodies, sim.simulation_time, energy_drift=0.0)
    sx, sy = r.world_to_screen(sim.bodies[1].position.x, sim.bodies[1].position.y)
    assert tuple(surface.get_at((int(sx), int(sy))))[:3] == C.GREEN


def test_viewer_without_pygame_cannot_run():
    viewer = Viewer(Simulation.from_preset("TreBody"), init_pygame=False)
    viewer.draw()
    with pytest.raises(RuntimeError):
        viewer.run()


def test_viewer_quits_on_q(dummy_display, monkeypatch):
    sim = Simulation.from_preset("Unit triangle", ticks_per_frame=1)
    viewer = Viewer(sim)
    events = [[], [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)]]
    monkeypatch.setattr(pygame.event, "get", lambda: events.pop(0) if events else [])
    frames = viewer.run(max_frames=100)
    assert frames == 1
    assert sim.tick_count == 1


def test_viewer_pause_and_reset(dummy_display, monkeypatch):
    sim = Simulation.from_preset("Unit triangle", ticks_per_frame=2)
    viewer = Viewer(sim, init_pygame=False)
    monkeypatch.setattr(
        pygame.event,
        "get",
        lambda: [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)],
    )
    viewer.handle_events()
    viewer.update()
    assert viewer.paused
    assert sim.tick_count == 0

    viewer.paused = False
    viewer.update()
    assert sim.tick_count == 2
    assert len(viewer.monitor.history) == 1
    viewer.reset()
    assert sim.tick_count == 0
    assert all(len(t) == 0 for t in viewer.renderer.trails)


def test_draw_body_far_outside_chart(dummy_display):
    pygame.init()
    r = TraceRenderer(100.0, size=(200, 200))
    bodies = [Body(1.0, [1.0e6, 0.0]), Body(1.0, [0.0, -1.0e6]), Body(1.0, [0.0, 0.0])]
    r.update_trails(bodies)
    r.update_trails(bodies)
    surface = pygame.Surface(r.size)
    r.draw(surface, bodies)
    assert tuple(surface.get_at((100, 100)))[:3] == C.RED


def test_trail_runs_break_where_body_leaves_chart(dummy_display):
    r = TraceRenderer(1.0, size=(100, 100))
    surface = pygame.Surface(r.size)
    trail = [(10.0, 10.0), (20.0, 20.0), (1e9, 50.0), (float("nan"), 0.0), (30.0, 30.0), (40.0, 40.0), (50.0, 50.0)]
    runs = r._trail_runs(surface, trail)
    assert runs == [[(10, 10), (20, 20)], [(30, 30), (40, 40), (50, 50)]]


def test_collinear_preset_draws_after_ejection(dummy_display):
    pygame.init()
    sim = Simulation.from_preset("Collinear", backend="numba")
    r = TraceRenderer(sim.config.view_extent)
    surface = pygame.Surface(r.size)
    for _ in range(200):
        sim.run_frame()
        r.update_trails(sim.bodies)
        r.draw(surface, sim.bodies, sim.simulation_time)
    assert sim.tick_count == 200 * sim.config.ticks_per_frame


def test_viewer_quits_pygame_when_frame_fails(dummy_display, monkeypatch):
    viewer = Viewer(Simulation.from_preset("Unit triangle", ticks_per_frame=1))
    calls = []
    original_quit = pygame.quit
    monkeypatch.setattr(pygame.event, "get", lambda: [])
    monkeypatch.setattr(pygame, "quit", lambda: calls.append(True) or original_quit())

    def fail():
        raise OverflowError("bad frame")

    monkeypatch.setattr(viewer, "update", fail)
    with pytest.raises(OverflowError):
        viewer.run(max_frames=5)
    assert calls == [True]
