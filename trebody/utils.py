"""Human readable formatting for the viewer HUD and headless reports."""

import math

from . import constants as C

_TIME_UNITS = (
    (31536000.0, "years"),
    (86400.0, "days"),
    (3600.0, "hrs"),
    (60.0, "min"),
)


def mass_to_display(mass_kg: float) -> str:
    if mass_kg == 0:
        return "0 kg"
    if abs(mass_kg) >= 0.01 * C.SOLAR_MASS:
        return f"{mass_kg/C.SOLAR_MASS:.3f} M☉"
    if abs(mass_kg) >= 0.1 * C.EARTH_MASS:
        return f"{mass_kg/C.EARTH_MASS:.2f} M⊕"
    return f"{mass_kg:.3e} kg"


def distance_to_display(dist_meters: float) -> str:
    if not math.isfinite(dist_meters):
        return str(dist_meters)
    if dist_meters == 0:
        return "0 m"
    if abs(dist_meters) >= 0.01 * C.AU:
        return f"{dist_meters/C.AU:.3f} AU"
    if abs(dist_meters) >= 1e3:
        return f"{dist_meters/1e3:.2f} km"
    return f"{dist_meters:.3g} m"


def time_to_display(seconds: float) -> str:
    if seconds < 0:
        return "N/A"
    for size, unit in _TIME_UNITS:
        if seconds >= size:
            return f"{seconds/size:.1f} {unit}"
    return f"{seconds:.1f} sec"


def position_to_display(position) -> str:
    """Format the projected ``(x, y)`` of a vector."""
    return f"({distance_to_display(position.x)}, {distance_to_display(position.y)})"


def energy_to_display(joules: float) -> str:
    return f"{joules:.4e} J"
