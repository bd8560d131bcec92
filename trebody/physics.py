"""Point-mass bodies and the explicit Euler tick.

A tick runs in two phases. Every body first recomputes its acceleration
from a read-only :class:`BodyState` snapshot of the other two, then every
body advances position and velocity. Interleaving the phases (stepping a
body before its neighbours have read its position) gives different
trajectories.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

from .constants import G_REAL
from .vector import Vector3


class BodyState(NamedTuple):
    """Immutable view of a body at the start of a tick."""

    position: Vector3
    velocity: Vector3
    mass: float


class Body:
    """A point mass advanced by explicit Euler integration."""

    def __init__(self, mass, position, velocity=None, acceleration=None, name: Optional[str] = None):
        """Create a body.

        Parameters
        ----------
        mass : float
            Mass in kilograms. Not validated; non-positive values simply
            produce unphysical trajectories.
        position : Vector3 or array-like
            Initial position in metres. Fewer than three components are
            padded with zeros.
        velocity : Vector3 or array-like, optional
            Initial velocity in m/s, zero when omitted.
        acceleration : Vector3 or array-like, optional
            Starting acceleration; overwritten on the first tick.
        name : str, optional
            Label used by the viewer and reports.
        """
        self.mass = float(mass)
        self.position = Vector3.from_iterable(position)
        self.velocity = Vector3.zero() if velocity is None else Vector3.from_iterable(velocity)
        self.acceleration = (
            Vector3.zero() if acceleration is None else Vector3.from_iterable(acceleration)
        )
        self.name = name

    def __repr__(self):
        return (
            f"Body(mass={self.mass}, position=({self.position}), "
            f"velocity=({self.velocity}), name={self.name!r})"
        )

    @staticmethod
    def from_scaled(mass, position, velocity=None, distance_scale=1.0, mass_scale=1.0, name=None):
        """Create a :class:`Body` from dimensionless coordinates.

        ``position`` is multiplied by ``distance_scale`` and ``mass`` by
        ``mass_scale``; ``velocity`` is taken as m/s.
        """
        pos = Vector3.from_iterable(position).scale(distance_scale)
        return Body(float(mass) * mass_scale, pos, velocity, name=name)

    def snapshot(self) -> BodyState:
        return BodyState(self.position, self.velocity, self.mass)

    def gravitational_pull(self, other, g_constant: float = G_REAL) -> Vector3:
        """Acceleration contributed by ``other``: ``-G m (r - r_o) / |r - r_o|^3``.

        Coincident positions divide by zero and give ``nan``/``inf``.
        """
        separation = self.position.subtract(other.position)
        distance = separation.magnitude()
        return separation.scale(-g_constant * other.mass).divide(distance * distance * distance)

    def recompute_acceleration(self, other1, other2, g_constant: float = G_REAL) -> None:
        """Replace the acceleration with the pull of ``other1`` plus ``other2``.

        ``other1`` and ``other2`` only need ``position`` and ``mass``; pass
        :class:`BodyState` snapshots so none of them has moved this tick.
        """
        self.acceleration = self.gravitational_pull(other1, g_constant).add(
            self.gravitational_pull(other2, g_constant)
        )

    def step(self, time_step: float) -> None:
        """Advance one explicit Euler step using the pre-step velocity."""
        velocity = self.velocity
        self.position = self.position.add(velocity.scale(time_step))
        self.velocity = velocity.add(self.acceleration.scale(time_step))


def advance_tick(bodies: Sequence[Body], time_step: float, g_constant: float = G_REAL) -> None:
    """Advance three bodies by one tick.

    Accelerations for all bodies are computed from the same snapshot
    before any body is stepped.
    """
    first, second, third = bodies
    s1, s2, s3 = first.snapshot(), second.snapshot(), third.snapshot()
    first.recompute_acceleration(s2, s3, g_constant)
    second.recompute_acceleration(s3, s1, g_constant)
    third.recompute_acceleration(s1, s2, g_constant)
    for body in bodies:
        body.step(time_step)
