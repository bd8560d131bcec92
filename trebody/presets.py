"""Named initial conditions.

Positions and masses are dimensionless and multiplied by the preset's
``distance_scale`` and ``mass_scale``; velocities are in m/s.
"""

from . import constants as C
from .physics import Body

PRESETS = {
    "TreBody": {
        "distance_scale": C.DISTANCE_SCALE,
        "mass_scale": C.MASS_SCALE,
        "time_step": C.TIME_STEP_BASE,
        "ticks_per_frame": C.TICKS_PER_FRAME,
        "view_extent": C.VIEW_EXTENT,
        "bodies": [
            {"name": "Body 1", "mass": 1.0, "pos": [0.0, 350.0, 0.0]},
            {"name": "Body 2", "mass": 1.0, "pos": [350.0, 100.0, 0.0]},
            {"name": "Body 3", "mass": 1.0, "pos": [-350.0, 200.0, 0.0]},
        ],
    },
    "Unit triangle": {
        "distance_scale": 1.0,
        "mass_scale": 1.0,
        "time_step": 100.0,
        "ticks_per_frame": 1000,
        "view_extent": 50.0,
        "bodies": [
            {"name": "Body 1", "mass": 1.0, "pos": [20.0, 0.0, -33.0]},
            {"name": "Body 2", "mass": 1.0, "pos": [-20.0, 0.0, 15.0]},
            {"name": "Body 3", "mass": 1.0, "pos": [0.0, 20.0, 0.0]},
        ],
    },
    "Collinear": {
        "distance_scale": C.DISTANCE_SCALE,
        "mass_scale": C.MASS_SCALE,
        "time_step": C.TIME_STEP_BASE,
        "ticks_per_frame": C.TICKS_PER_FRAME,
        "view_extent": C.VIEW_EXTENT,
        "bodies": [
            {"name": "Heavy", "mass": 2.0, "pos": [-300.0, 0.0, 0.0], "vel": [0.0, 4.0, 0.0]},
            {"name": "Middle", "mass": 1.0, "pos": [0.0, 0.0, 0.0]},
            {"name": "Light", "mass": 0.5, "pos": [450.0, 0.0, 0.0], "vel": [0.0, -6.0, 0.0]},
        ],
    },
}


def get_preset(name: str) -> dict:
    if name not in PRESETS:
        raise KeyError(f"Preset '{name}' not found")
    return PRESETS[name]


def build_bodies(name: str, distance_scale=None, mass_scale=None) -> list[Body]:
    """Instantiate the bodies of a preset.

    ``distance_scale``/``mass_scale`` default to the preset's own scales.
    """
    preset = get_preset(name)
    if distance_scale is None:
        distance_scale = preset["distance_scale"]
    if mass_scale is None:
        mass_scale = preset["mass_scale"]
    return [
        Body.from_scaled(
            cfg["mass"],
            cfg["pos"],
            cfg.get("vel"),
            distance_scale=distance_scale,
            mass_scale=mass_scale,
            name=cfg.get("name"),
        )
        for cfg in preset["bodies"]
    ]
