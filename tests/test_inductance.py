import pytest

from isqunits import inductance
from isqunits.core import Dimension, Quantity, prefix
from isqunits.inductance import INDUCTANCE

VOLTAGE = Dimension(length=2, mass=1, time=-3, electric_current=-1)
SECOND = Quantity(1.0, Dimension(time=1))
AMPERE = Quantity(1.0, Dimension(electric_current=1))


def _volts(prefix_name):
    return Quantity(prefix(prefix_name), VOLTAGE)


def test_check_dimension():
    result = _volts("none") * SECOND / AMPERE
    assert result.dimension == INDUCTANCE.dimension
    assert result.approx_eq(inductance.new(1.0, "henry"))


CASES = [
    ("yotta", "yottahenry"),
    ("zetta", "zettahenry"),
    ("exa", "exahenry"),
    ("peta", "petahenry"),
    ("tera", "terahenry"),
    ("giga", "gigahenry"),
    ("mega", "megahenry"),
    ("kilo", "kilohenry"),
    ("hecto", "hectohenry"),
    ("deca", "decahenry"),
    ("none", "henry"),
    ("deci", "decihenry"),
    ("centi", "centihenry"),
    ("milli", "millihenry"),
    ("micro", "microhenry"),
    ("nano", "nanohenry"),
    ("pico", "picohenry"),
    ("femto", "femtohenry"),
    ("atto", "attohenry"),
    ("zepto", "zeptohenry"),
    ("yocto", "yoctohenry"),
]


@pytest.mark.parametrize("prefix_name, unit", CASES)
def test_check_units(prefix_name, unit):
    expected = _volts(prefix_name) * SECOND / AMPERE
    assert inductance.new(1.0, unit).approx_eq(expected)


def test_cgs_units():
    assert inductance.new(1.0, "abhenry").get("henry") == pytest.approx(1.0e-9)
    assert inductance.new(1.0, "stathenry").get("henry") == pytest.approx(
        8.987_552_917_115_481e11
    )


def test_find_by_abbreviation():
    assert INDUCTANCE.find("µH").name == "microhenry"


def test_round_trip():
    value = inductance.new(3.0, "millihenry")
    assert value.get("microhenry") == pytest.approx(3000.0)


def test_wrong_dimension_is_rejected():
    with pytest.raises(TypeError):
        inductance.new(1.0, "henry").approx_eq(_volts("none"))