"""Three-body simulation driver."""

import logging

import numpy as np

from .config import SimulationConfig
from .integrators import euler_tick_arrays
from .jit import euler_ticks_jit
from .physics import Body, advance_tick
from .presets import build_bodies, get_preset
from .vector import Vector3

logger = logging.getLogger(__name__)


class Simulation:
    """Owns three bodies and advances them tick by tick.

    The configured backend only changes how the ticks are computed:
    ``"vector"`` steps the :class:`Body` objects directly, ``"numpy"`` and
    ``"numba"`` run the same two-phase Euler tick on arrays and write the
    result back into the bodies.
    """

    def __init__(self, bodies, config: SimulationConfig | None = None, name: str | None = None):
        bodies = list(bodies)
        if len(bodies) != 3:
            raise ValueError(f"A simulation needs exactly 3 bodies, got {len(bodies)}")
        self.bodies = bodies
        self.config = config if config is not None else SimulationConfig()
        self.name = name
        self.simulation_time = 0.0
        self.tick_count = 0
        self._initial = [
            (b.mass, b.position, b.velocity, b.acceleration, b.name) for b in bodies
        ]
        logger.info(
            "Simulation %s: backend=%s dt=%g G=%g",
            name or "<custom>",
            self.config.backend,
            self.config.time_step,
            self.config.g_constant,
        )

    @classmethod
    def from_preset(cls, preset_name: str, **overrides) -> "Simulation":
        """Create a simulation from :data:`~trebody.presets.PRESETS`.

        Keyword overrides (``time_step``, ``backend``...) replace the
        preset's defaults; ``None`` values are ignored.
        """
        config = SimulationConfig.from_preset(get_preset(preset_name), **overrides)
        bodies = build_bodies(preset_name, config.distance_scale, config.mass_scale)
        return cls(bodies, config, name=preset_name)

    # ------------------------------------------------------------------
    def tick(self) -> None:
        """Advance all bodies by one time step."""
        self.run(1)

    def run(self, ticks: int) -> None:
        """Advance ``ticks`` ticks with the configured backend."""
        if ticks <= 0:
            return
        dt = self.config.time_step
        g_const = self.config.g_constant
        backend = self.config.backend

        if backend == "vector":
            for _ in range(ticks):
                advance_tick(self.bodies, dt, g_const)
        else:
            positions, velocities, masses = self._arrays()
            if backend == "numba":
                positions, velocities, acc = euler_ticks_jit(
                    positions, velocities, masses, g_const, dt, ticks
                )
            else:
                for _ in range(ticks):
                    positions, velocities, acc = euler_tick_arrays(
                        positions, velocities, masses, dt, g_const
                    )
            self._write_back(positions, velocities, acc)

        self.tick_count += ticks
        self.simulation_time += ticks * dt
        logger.debug("Advanced %d ticks (total %d)", ticks, self.tick_count)

    def run_frame(self) -> None:
        """Advance the number of ticks rendered per frame."""
        self.run(self.config.ticks_per_frame)

    def reset(self) -> None:
        """Restore the initial conditions."""
        self.bodies = [
            Body(mass, pos, vel, acc, name=name) for mass, pos, vel, acc, name in self._initial
        ]
        self.simulation_time = 0.0
        self.tick_count = 0
        logger.info("Simulation %s reset", self.name or "<custom>")

    # ------------------------------------------------------------------
    def positions(self) -> list[tuple[float, float, float]]:
        return [tuple(b.position) for b in self.bodies]

    def projected_positions(self) -> list[tuple[float, float]]:
        """Positions projected onto the x-y plane."""
        return [(b.position.x, b.position.y) for b in self.bodies]

    def _arrays(self):
        positions = np.array([b.position.as_array() for b in self.bodies], dtype=np.float64)
        velocities = np.array([b.velocity.as_array() for b in self.bodies], dtype=np.float64)
        masses = np.array([b.mass for b in self.bodies], dtype=np.float64)
        return positions, velocities, masses

    def _write_back(self, positions, velocities, accelerations):
        for body, p, v, a in zip(self.bodies, positions, velocities, accelerations):
            body.position = Vector3.from_iterable(p)
            body.velocity = Vector3.from_iterable(v)
            body.acceleration = Vector3.from_iterable(a)
