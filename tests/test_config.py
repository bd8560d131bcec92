import dataclasses

import pytest

from trebody import constants as C
from trebody.config import SimulationConfig
from trebody.presets import PRESETS


def test_defaults_match_reference_scenario():
    cfg = SimulationConfig()
    assert cfg.g_constant == 6.674e-11
    assert cfg.time_step == 500.0
    assert cfg.ticks_per_frame == 10000
    assert cfg.distance_scale == 1e10
    assert cfg.mass_scale == 1e30
    assert cfg.backend == C.DEFAULT_BACKEND


def test_unknown_backend_rejected():
    with pytest.raises(ValueError):
        SimulationConfig(backend="cuda")
    with pytest.raises(ValueError):
        SimulationConfig().replace(backend="cuda")


def test_negative_ticks_per_frame_rejected():
    with pytest.raises(ValueError):
        SimulationConfig(ticks_per_frame=-1)


def test_replace_ignores_none():
    cfg = SimulationConfig()
    assert cfg.replace(time_step=None) is cfg
    changed = cfg.replace(time_step=100.0, g_constant=None)
    assert changed.time_step == 100.0
    assert changed.g_constant == cfg.g_constant


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SimulationConfig().time_step = 1.0


def test_from_preset_ignores_body_definitions():
    cfg = SimulationConfig.from_preset(PRESETS["Unit triangle"], backend="numpy")
    assert cfg.distance_scale == 1.0
    assert cfg.mass_scale == 1.0
    assert cfg.time_step == 100.0
    assert cfg.view_extent == 50.0
    assert cfg.backend == "numpy"
