import numpy as np

from . import constants as C


def compute_accelerations(
    positions: np.ndarray,
    masses: np.ndarray,
    g_constant: float = C.G_REAL,
) -> np.ndarray:
    """Return the gravitational acceleration of every body.

    Parameters
    ----------
    positions : ndarray, shape (n, 3)
        Positions in metres, all taken from the same instant.
    masses : ndarray, shape (n,)
        Masses in kilograms.

    The force law is evaluated pair by pair in the same order as
    :meth:`trebody.physics.Body.gravitational_pull`, so both paths agree
    to rounding. Coincident bodies give ``nan``/``inf`` without warnings.
    """
    positions = np.asarray(positions, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)
    n = len(masses)
    acc = np.zeros((n, 3), dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(n):
            for j in range(n):
                if i == j:
                    continue
                d = positions[i] - positions[j]
                dist = np.sqrt(d[0] * d[0] + d[1] * d[1] + d[2] * d[2])
                acc[i] += d * (-g_constant * masses[j]) / (dist * dist * dist)
    return acc


def euler_step_arrays(positions, velocities, accelerations, dt) -> tuple[np.ndarray, np.ndarray]:
    """Explicit Euler update; positions advance with the pre-step velocity."""
    with np.errstate(over="ignore", invalid="ignore"):
        pos_new = positions + velocities * dt
        vel_new = velocities + accelerations * dt
    return pos_new, vel_new


def euler_tick_arrays(positions, velocities, masses, dt, g_constant=C.G_REAL):
    """One full tick on arrays: accelerations from the snapshot, then step.

    Returns ``(new_positions, new_velocities, accelerations)``.
    """
    acc = compute_accelerations(positions, masses, g_constant)
    pos_new, vel_new = euler_step_arrays(positions, velocities, acc, dt)
    return pos_new, vel_new, acc
