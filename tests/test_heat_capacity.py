import pytest

from isqunits import heat_capacity as hc
from isqunits import length, mass
from isqunits.core import Dimension, Quantity, prefix

ENERGY = Dimension(length=2, mass=1, time=-2)
SECOND = Quantity(1.0, Dimension(time=1))
KELVIN = Quantity(1.0, Dimension(thermodynamic_temperature=1))

PREFIXES = [
    "yotta", "zetta", "exa", "peta", "tera", "giga", "mega", "kilo", "hecto", "deca",
    "none", "deci", "centi", "milli", "micro", "nano", "pico", "femto", "atto", "zepto",
    "yocto",
]


def _spelled(name):
    return "" if name == "none" else name


def _base_expression(mass_unit):
    return (
        mass.new(1.0, mass_unit)
        * length.new(1.0, "meter")
        * length.new(1.0, "meter")
        / (SECOND * SECOND * KELVIN)
    )


def test_check_dimension():
    result = _base_expression("kilogram")
    assert result.dimension == hc.HEAT_CAPACITY.dimension
    assert result.approx_eq(hc.new(1.0, "joule_per_kelvin"))


@pytest.mark.parametrize("name", PREFIXES)
def test_base_units(name):
    gram = f"{_spelled(name)}gram"
    unit = f"{gram}_square_meter_per_second_squared_kelvin"
    assert hc.new(1.0, unit).approx_eq(_base_expression(gram))


@pytest.mark.parametrize("name", PREFIXES)
def test_energy_per_kelvin_units(name):
    unit = f"{_spelled(name)}joule_per_kelvin"
    energy = Quantity(prefix(name), ENERGY)
    assert hc.new(1.0, unit).approx_eq(energy / KELVIN)


@pytest.mark.parametrize(
    "celsius, kelvin",
    [
        ("kilojoule_per_degree_celsius", "kilojoule_per_kelvin"),
        ("joule_per_degree_celsius", "joule_per_kelvin"),
        ("millijoule_per_degree_celsius", "millijoule_per_kelvin"),
    ],
)
def test_degree_celsius_units_match_kelvin(celsius, kelvin):
    assert hc.new(1.0, celsius).approx_eq(hc.new(1.0, kelvin))


def test_btu_factors():
    assert hc.new(1.0, "btu_per_degree_fahrenheit").get("joule_per_kelvin") == pytest.approx(
        1897.830
    )
    assert hc.new(1.0, "btu_it_per_degree_fahrenheit").get("joule_per_kelvin") == pytest.approx(
        1899.1008
    )


def test_unit_count_and_order():
    all_units = hc.units()
    assert len(all_units) == 47
    assert all_units[0].name == "yottagram_square_meter_per_second_squared_kelvin"
    assert all_units[21].name == "yottajoule_per_kelvin"
    assert all_units[-1].name == "btu_it_per_degree_fahrenheit"


def test_abbreviations():
    assert hc.HEAT_CAPACITY.find("J/K").name == "joule_per_kelvin"
    assert hc.HEAT_CAPACITY.find("dag · m²/(s² · K)").name == (
        "decagram_square_meter_per_second_squared_kelvin"
    )
    assert hc.HEAT_CAPACITY.find("daJ/K").name == "decajoule_per_kelvin"
    assert hc.HEAT_CAPACITY.unit("microjoule_per_kelvin").abbreviation == "µJ/K"


def test_round_trip():
    value = hc.new(2.5, "kilojoule_per_kelvin")
    assert value.get("joule_per_kelvin") == pytest.approx(2500.0)
    assert value.get("kilojoule_per_kelvin") == pytest.approx(2.5)


def test_unknown_unit():
    with pytest.raises(KeyError):
        hc.new(1.0, "watt")


def test_mass_unit_rejected():
    with pytest.raises(TypeError):
        hc.new(1.0, mass.MASS.unit("kilogram"))