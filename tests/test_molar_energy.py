import pytest

from isqunits import length, mass, molar_energy
from isqunits.core import Dimension, Quantity, prefix
from isqunits.mass import MASS
from isqunits.molar_energy import MOLAR_ENERGY

SECOND = Quantity(1.0, Dimension(time=1))
MOLE = Quantity(1.0, Dimension(amount_of_substance=1))
JOULE = Quantity(1.0, Dimension(length=2, mass=1, time=-2))
WATT = Quantity(1.0, Dimension(length=2, mass=1, time=-3))


def _base_expression(mass_quantity):
    meter = length.new(1.0, "meter")
    return mass_quantity * meter * meter / (SECOND * SECOND * MOLE)


def test_dimension_from_base_quantities():
    expr = _base_expression(mass.new(1.0, "kilogram"))
    assert expr.dimension == MOLAR_ENERGY.dimension


def test_dimension_from_energy_per_mole():
    assert (JOULE / MOLE).dimension == MOLAR_ENERGY.dimension


def test_base_unit():
    expected = _base_expression(mass.new(1.0, "kilogram"))
    got = molar_energy.new(1.0, "kilogram_square_meter_per_second_squared_mole")
    assert got.approx_eq(expected)


@pytest.mark.parametrize(
    "unit, prefix_name",
    [
        ("yottajoule_per_mole", "yotta"),
        ("zettajoule_per_mole", "zetta"),
        ("exajoule_per_mole", "exa"),
        ("petajoule_per_mole", "peta"),
        ("terajoule_per_mole", "tera"),
        ("gigajoule_per_mole", "giga"),
        ("megajoule_per_mole", "mega"),
        ("kilojoule_per_mole", "kilo"),
        ("hectojoule_per_mole", "hecto"),
        ("decajoule_per_mole", "deca"),
        ("joule_per_mole", "none"),
        ("decijoule_per_mole", "deci"),
        ("centijoule_per_mole", "centi"),
        ("millijoule_per_mole", "milli"),
        ("microjoule_per_mole", "micro"),
        ("nanojoule_per_mole", "nano"),
        ("picojoule_per_mole", "pico"),
        ("femtojoule_per_mole", "femto"),
        ("attojoule_per_mole", "atto"),
        ("zeptojoule_per_mole", "zepto"),
        ("yoctojoule_per_mole", "yocto"),
    ],
)
def test_joule_units(unit, prefix_name):
    expected = prefix(prefix_name) * JOULE / MOLE
    assert molar_energy.new(1.0, unit).approx_eq(expected)


@pytest.mark.parametrize(
    "unit, watts",
    [
        ("petawatt_hour_per_mole", 1e15),
        ("terawatt_hour_per_mole", 1e12),
        ("gigawatt_hour_per_mole", 1e9),
        ("megawatt_hour_per_mole", 1e6),
        ("kilowatt_hour_per_mole", 1e3),
        ("hectowatt_hour_per_mole", 1e2),
        ("decawatt_hour_per_mole", 1e1),
        ("watt_hour_per_mole", 1.0),
        ("milliwatt_hour_per_mole", 1e-3),
        ("microwatt_hour_per_mole", 1e-6),
    ],
)
def test_watt_hour_units(unit, watts):
    hour = 3600.0 * SECOND
    expected = watts * WATT * hour / MOLE
    assert molar_energy.new(1.0, unit).approx_eq(expected)


@pytest.mark.parametrize(
    "unit, joules",
    [
        ("btu_it_per_mole", 1055.056),
        ("btu_per_mole", 1054.350),
        ("calorie_per_mole", 4.184),
        ("calorie_it_per_mole", 4.1868),
        ("kilocalorie_per_mole", 4184.0),
        ("erg_per_mole", 1.0e-7),
        ("ton_tnt_per_mole", 4.184e9),
        ("watt_second_per_mole", 1.0),
    ],
)
def test_other_units_in_joules_per_mole(unit, joules):
    assert molar_energy.new(1.0, unit).get("joule_per_mole") == pytest.approx(joules)


def test_unit_count_and_order():
    names = [unit.name for unit in molar_energy.units()]
    assert len(names) == 54
    assert names[0] == "kilogram_square_meter_per_second_squared_mole"
    assert names[-1] == "watt_second_per_mole"


def test_find_by_abbreviation():
    assert MOLAR_ENERGY.find("kJ/mol").name == "kilojoule_per_mole"


def test_unknown_unit():
    with pytest.raises(KeyError):
        molar_energy.new(1.0, "joule_per_kelvin")


def test_unit_of_other_dimension_rejected():
    with pytest.raises(TypeError):
        molar_energy.new(1.0, MASS.unit("kilogram"))