"""Three-body gravity simulation."""

from importlib.metadata import PackageNotFoundError, version

from .vector import Vector3
from .physics import Body, BodyState, advance_tick
from .integrators import compute_accelerations, euler_step_arrays
from .analysis import system_energy, total_momentum, center_of_mass
from .config import SimulationConfig
from .presets import PRESETS, build_bodies
from .simulation import Simulation
from .constants import G_REAL, DISTANCE_SCALE, MASS_SCALE

try:
    __version__ = version("trebody")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "Vector3",
    "Body",
    "BodyState",
    "advance_tick",
    "compute_accelerations",
    "euler_step_arrays",
    "system_energy",
    "total_momentum",
    "center_of_mass",
    "SimulationConfig",
    "PRESETS",
    "build_bodies",
    "Simulation",
    "G_REAL",
    "DISTANCE_SCALE",
    "MASS_SCALE",
    "__version__",
]
