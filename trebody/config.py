"""Simulation configuration."""

from dataclasses import dataclass, fields, replace as _replace

from . import constants as C


@dataclass(frozen=True)
class SimulationConfig:
    """Numerical and display parameters of a run.

    The gravitational constant and the unit scales are explicit fields so
    that SI and dimensionless runs are both just configurations.
    """

    g_constant: float = C.G_REAL
    time_step: float = C.TIME_STEP_BASE
    ticks_per_frame: int = C.TICKS_PER_FRAME
    distance_scale: float = C.DISTANCE_SCALE
    mass_scale: float = C.MASS_SCALE
    view_extent: float = C.VIEW_EXTENT
    backend: str = C.DEFAULT_BACKEND

    def __post_init__(self):
        if self.backend not in C.BACKENDS:
            raise ValueError(
                f"Unknown backend '{self.backend}', expected one of {', '.join(C.BACKENDS)}"
            )
        if self.ticks_per_frame < 0:
            raise ValueError("ticks_per_frame must not be negative")

    @classmethod
    def from_preset(cls, preset: dict, **overrides) -> "SimulationConfig":
        """Build a config from a preset definition's defaults plus overrides."""
        names = {f.name for f in fields(cls)}
        values = {k: v for k, v in preset.items() if k in names}
        return cls(**values).replace(**overrides)

    def replace(self, **overrides) -> "SimulationConfig":
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return _replace(self, **changes) if changes else self
