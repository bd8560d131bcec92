"""Immutable three component vector used by the physics core."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Vector3:
    """A 3-D vector of double precision floats.

    Every operation returns a new instance. Arithmetic follows IEEE-754:
    dividing by zero or overflowing produces ``inf``/``nan`` components
    instead of raising, so degenerate input propagates through the
    simulation rather than aborting it.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_iterable(cls, values) -> "Vector3":
        """Build a vector from array-like input, padding missing axes with zero."""
        if isinstance(values, Vector3):
            return values
        v = np.asarray(values, dtype=float).reshape(-1)
        if v.size < 3:
            v = np.pad(v, (0, 3 - v.size))
        return cls(float(v[0]), float(v[1]), float(v[2]))

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, c: float) -> "Vector3":
        return Vector3(self.x * c, self.y * c, self.z * c)

    def divide(self, c: float) -> "Vector3":
        """Divide every component by ``c``.

        ``c == 0`` yields ``±inf`` (or ``nan`` for a zero component) as
        float64 division would; Python's own ``/`` raises in that case.
        """
        if c == 0.0:
            with np.errstate(divide="ignore", invalid="ignore"):
                q = np.array([self.x, self.y, self.z], dtype=np.float64) / np.float64(c)
            return Vector3(float(q[0]), float(q[1]), float(q[2]))
        return Vector3(self.x / c, self.y / c, self.z / c)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    __add__ = add
    __sub__ = subtract
    __mul__ = scale
    __rmul__ = scale
    __truediv__ = divide
    __abs__ = magnitude

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.z}"
