"""numba compiled batch integration.

The renderer runs thousands of ticks between frames; looping over
:class:`~trebody.physics.Body` objects in Python for that is slow, so the
batch kernel below does the same two-phase Euler tick on plain arrays.
``error_model="numpy"`` keeps IEEE division semantics (``inf``/``nan``)
for coincident bodies instead of raising ``ZeroDivisionError``.
"""

import numba as nb
import numpy as np


@nb.njit(error_model="numpy")
def euler_ticks_jit(positions, velocities, masses, g_const, time_step, ticks):
    pos = positions.copy()
    vel = velocities.copy()
    n = len(masses)
    acc = np.zeros((n, 3), dtype=np.float64)
    for _ in range(ticks):
        for i in range(n):
            ax = 0.0
            ay = 0.0
            az = 0.0
            for j in range(n):
                if i == j:
                    continue
                dx = pos[i, 0] - pos[j, 0]
                dy = pos[i, 1] - pos[j, 1]
                dz = pos[i, 2] - pos[j, 2]
                dist = np.sqrt(dx * dx + dy * dy + dz * dz)
                k = -g_const * masses[j]
                dist3 = dist * dist * dist
                ax += dx * k / dist3
                ay += dy * k / dist3
                az += dz * k / dist3
            acc[i, 0] = ax
            acc[i, 1] = ay
            acc[i, 2] = az
        for i in range(n):
            for c in range(3):
                pos[i, c] = pos[i, c] + vel[i, c] * time_step
                vel[i, c] = vel[i, c] + acc[i, c] * time_step
    return pos, vel, acc
