from collections import deque

import numpy as np

from . import constants as C


def system_energy(bodies, g_constant=C.G_REAL):
    """Return total kinetic, potential and mechanical energy."""
    kinetic = 0.0
    potential = 0.0
    for b in bodies:
        v = b.velocity.as_array()
        kinetic += 0.5 * b.mass * float(np.dot(v, v))
    for i, bi in enumerate(bodies):
        for bj in bodies[i + 1:]:
            r = bj.position.subtract(bi.position).magnitude()
            if r == 0:
                continue
            potential -= g_constant * bi.mass * bj.mass / r
    return kinetic, potential, kinetic + potential


def total_momentum(bodies) -> np.ndarray:
    p = np.zeros(3, dtype=np.float64)
    for b in bodies:
        p += b.mass * b.velocity.as_array()
    return p


def center_of_mass(bodies):
    """Return the centre of mass position and velocity, or ``(None, None)``."""
    total_mass = 0.0
    weighted_pos_sum = np.zeros(3, dtype=np.float64)
    weighted_vel_sum = np.zeros(3, dtype=np.float64)
    for b in bodies:
        if b.mass <= 0:
            continue
        total_mass += b.mass
        weighted_pos_sum += b.position.as_array() * b.mass
        weighted_vel_sum += b.velocity.as_array() * b.mass
    if total_mass == 0:
        return None, None
    return weighted_pos_sum / total_mass, weighted_vel_sum / total_mass


class EnergyMonitor:
    """Track relative drift of the total energy, in percent."""

    def __init__(self, max_points=C.ENERGY_HISTORY_POINTS):
        self.history = deque(maxlen=max_points)
        self.initial_energy = None

    def set_initial_energy(self, bodies, g_constant=C.G_REAL):
        _, _, self.initial_energy = system_energy(bodies, g_constant)
        self.history.clear()

    def update(self, bodies, g_constant=C.G_REAL):
        if self.initial_energy is None or abs(self.initial_energy) < 1e-300:
            return None
        _, _, current_energy = system_energy(bodies, g_constant)
        drift = (current_energy - self.initial_energy) / abs(self.initial_energy) * 100
        self.history.append(drift)
        return drift
