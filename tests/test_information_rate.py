import pytest

from isqunits import information, information_rate
from isqunits.core import Dimension, Kind, Quantity
from isqunits.information_rate import INFORMATION_RATE

ONE_SECOND = Quantity(1.0, Dimension(time=1))

PAIRS = [
    ("yobibit", "yobibit_per_second"),
    ("yottabit", "yottabit_per_second"),
    ("zebibit", "zebibit_per_second"),
    ("zettabit", "zettabit_per_second"),
    ("exbibit", "exbibit_per_second"),
    ("exabit", "exabit_per_second"),
    ("pebibit", "pebibit_per_second"),
    ("petabit", "petabit_per_second"),
    ("tebibit", "tebibit_per_second"),
    ("terabit", "terabit_per_second"),
    ("gibibit", "gibibit_per_second"),
    ("gigabit", "gigabit_per_second"),
    ("mebibit", "mebibit_per_second"),
    ("megabit", "megabit_per_second"),
    ("kibibit", "kibibit_per_second"),
    ("kilobit", "kilobit_per_second"),
    ("bit", "bit_per_second"),
    ("yobibyte", "yobibyte_per_second"),
    ("yottabyte", "yottabyte_per_second"),
    ("zebibyte", "zebibyte_per_second"),
    ("zettabyte", "zettabyte_per_second"),
    ("exbibyte", "exbibyte_per_second"),
    ("exabyte", "exabyte_per_second"),
    ("pebibyte", "pebibyte_per_second"),
    ("petabyte", "petabyte_per_second"),
    ("tebibyte", "tebibyte_per_second"),
    ("terabyte", "terabyte_per_second"),
    ("gibibyte", "gibibyte_per_second"),
    ("gigabyte", "gigabyte_per_second"),
    ("mebibyte", "mebibyte_per_second"),
    ("megabyte", "megabyte_per_second"),
    ("kibibyte", "kibibyte_per_second"),
    ("kilobyte", "kilobyte_per_second"),
    ("byte", "byte_per_second"),
    ("octet", "octet_per_second"),
]


@pytest.mark.parametrize("info_unit, rate_unit", PAIRS)
def test_units(info_unit, rate_unit):
    expected = information_rate.new(1.0, rate_unit)
    actual = (information.new(1.0, info_unit) / ONE_SECOND).into(INFORMATION_RATE)
    assert expected.approx_eq(actual)


def test_dimension_and_kind():
    rate = (information.new(1.0, "byte") / ONE_SECOND).into(INFORMATION_RATE)
    assert rate.dimension == Dimension(time=-1)
    assert rate.kind is Kind.INFORMATION


def test_quotient_needs_conversion_before_comparison():
    quotient = information.new(1.0, "byte") / ONE_SECOND
    with pytest.raises(TypeError):
        information_rate.new(1.0, "byte_per_second").approx_eq(quotient)


@pytest.mark.parametrize("unit", [u.name for u in INFORMATION_RATE.units()])
def test_round_trip(unit):
    assert information_rate.new(2.5, unit).get(unit) == pytest.approx(2.5)


def test_find_by_abbreviation():
    assert INFORMATION_RATE.find("Mib/s").name == "mebibit_per_second"
    assert INFORMATION_RATE.find("kB/s").name == "kilobyte_per_second"


def test_units_listed_in_order():
    names = [u.name for u in information_rate.units()]
    assert names[0] == "yobibit_per_second"
    assert names[-1] == "octet_per_second"
    assert len(names) == len(set(names))


def test_unknown_unit():
    with pytest.raises(KeyError):
        information_rate.new(1.0, "hertz")