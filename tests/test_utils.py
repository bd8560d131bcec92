from trebody import constants as C
from trebody.utils import (
    distance_to_display,
    energy_to_display,
    mass_to_display,
    position_to_display,
    time_to_display,
)
from trebody.vector import Vector3


def test_mass_to_display_ranges():
    assert mass_to_display(0) == "0 kg"
    assert mass_to_display(C.SOLAR_MASS) == "1.000 M☉"
    assert mass_to_display(0.5 * C.EARTH_MASS) == "0.50 M⊕"
    assert mass_to_display(50) == "5.000e+01 kg"


def test_distance_to_display_ranges():
    assert distance_to_display(0) == "0 m"
    assert distance_to_display(C.AU) == "1.000 AU"
    assert distance_to_display(-C.AU) == "-1.000 AU"
    assert distance_to_display(2000) == "2.00 km"
    assert distance_to_display(50) == "50 m"
    assert distance_to_display(float("inf")) == "inf"


def test_time_to_display_ranges():
    assert time_to_display(-1) == "N/A"
    assert time_to_display(0) == "0.0 sec"
    assert time_to_display(2 * 31536000) == "2.0 years"
    assert time_to_display(2 * 86400) == "2.0 days"
    assert time_to_display(7200) == "2.0 hrs"
    assert time_to_display(120) == "2.0 min"
    assert time_to_display(5) == "5.0 sec"


def test_position_and_energy():
    assert position_to_display(Vector3(C.AU, 0.0, 7.0)) == "(1.000 AU, 0 m)"
    assert energy_to_display(-1.5e33) == "-1.5000e+33 J"
