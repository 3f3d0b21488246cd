import pytest

from isqunits import mass, mass_rate
from isqunits.core import Dimension, QuantityType, Unit

TIME = QuantityType(
    "Time",
    "time",
    Dimension(time=1),
    [
        Unit("second", 1.0, "s", "second", "seconds"),
        Unit("minute", 60.0, "min", "minute", "minutes"),
        Unit("hour", 3600.0, "h", "hour", "hours"),
        Unit("day", 86400.0, "d", "day", "days"),
    ],
)

CASES = [
    ("yottagram", "second", "yottagram_per_second"),
    ("zettagram", "second", "zettagram_per_second"),
    ("exagram", "second", "exagram_per_second"),
    ("petagram", "second", "petagram_per_second"),
    ("teragram", "second", "teragram_per_second"),
    ("gigagram", "second", "gigagram_per_second"),
    ("megagram", "second", "megagram_per_second"),
    ("kilogram", "second", "kilogram_per_second"),
    ("hectogram", "second", "hectogram_per_second"),
    ("decagram", "second", "decagram_per_second"),
    ("gram", "second", "gram_per_second"),
    ("decigram", "second", "decigram_per_second"),
    ("centigram", "second", "centigram_per_second"),
    ("milligram", "second", "milligram_per_second"),
    ("microgram", "second", "microgram_per_second"),
    ("nanogram", "second", "nanogram_per_second"),
    ("picogram", "second", "picogram_per_second"),
    ("femtogram", "second", "femtogram_per_second"),
    ("attogram", "second", "attogram_per_second"),
    ("zeptogram", "second", "zeptogram_per_second"),
    ("yoctogram", "second", "yoctogram_per_second"),
    ("kilogram", "minute", "kilogram_per_minute"),
    ("kilogram", "hour", "kilogram_per_hour"),
    ("kilogram", "day", "kilogram_per_day"),
    ("gram", "minute", "gram_per_minute"),
    ("gram", "hour", "gram_per_hour"),
    ("gram", "day", "gram_per_day"),
    ("carat", "second", "carat_per_second"),
    ("grain", "second", "grain_per_second"),
    ("hundredweight_long", "second", "hundredweight_long_per_second"),
    ("hundredweight_short", "second", "hundredweight_short_per_second"),
    ("ounce", "second", "ounce_per_second"),
    ("ounce_troy", "second", "ounce_troy_per_second"),
    ("pennyweight", "second", "pennyweight_per_second"),
    ("pound", "second", "pound_per_second"),
    ("pound", "minute", "pound_per_minute"),
    ("pound", "hour", "pound_per_hour"),
    ("pound", "day", "pound_per_day"),
    ("pound_troy", "second", "pound_troy_per_second"),
    ("slug", "second", "slug_per_second"),
    ("ton_assay", "second", "ton_assay_per_second"),
    ("ton_long", "second", "ton_long_per_second"),
    ("ton_short", "second", "ton_short_per_second"),
    ("ton_short", "hour", "ton_short_per_hour"),
    ("ton", "second", "ton_per_second"),
]


def test_check_dimension():
    result = mass.new(1.0, "kilogram") / TIME.new(1.0, "second")
    assert result.dimension == mass_rate.MASS_RATE.dimension


@pytest.mark.parametrize("mass_unit, time_unit, rate_unit", CASES)
def test_check_units(mass_unit, time_unit, rate_unit):
    expected = mass.new(1.0, mass_unit) / TIME.new(1.0, time_unit)
    assert mass_rate.new(1.0, rate_unit).approx_eq(expected)


def test_units_count_and_order():
    names = [unit.name for unit in mass_rate.units()]
    assert len(names) == 45
    assert names[7] == "kilogram_per_second"
    assert names[-1] == "ton_per_second"


def test_get_in_other_unit():
    value = mass_rate.new(1.0, "kilogram_per_second")
    assert value.get("gram_per_second") == pytest.approx(1000.0)
    assert value.get("kilogram_per_hour") == pytest.approx(3600.0)


def test_find_by_abbreviation():
    assert mass_rate.MASS_RATE.find("lb/h").name == "pound_per_hour"


def test_mass_unit_rejected():
    with pytest.raises(TypeError):
        mass_rate.new(1.0, mass.MASS.unit("kilogram"))


def test_unknown_unit_raises():
    with pytest.raises(KeyError):
        mass_rate.new(1.0, "stone_per_second")