"""Mass rate (base unit kilogram per second, kg · s⁻¹)."""

from .core import Dimension, QuantityType, Unit, prefix

_KILO = prefix("kilo")

MASS_RATE = QuantityType(
    "MassRate",
    "mass rate",
    Dimension(mass=1, time=-1),
    [
        Unit("yottagram_per_second", prefix("yotta") / _KILO, "Yg/s", "yottagram per second",
             "yottagrams per second"),
        Unit("zettagram_per_second", prefix("zetta") / _KILO, "Zg/s", "zettagram per second",
             "zettagrams per second"),
        Unit("exagram_per_second", prefix("exa") / _KILO, "Eg/s", "exagram per second",
             "exagrams per second"),
        Unit("petagram_per_second", prefix("peta") / _KILO, "Pg/s", "petagram per second",
             "petagrams per second"),
        Unit("teragram_per_second", prefix("tera") / _KILO, "Tg/s", "teragram per second",
             "teragrams per second"),
        Unit("gigagram_per_second", prefix("giga") / _KILO, "Gg/s", "gigagram per second",
             "gigagrams per second"),
        Unit("megagram_per_second", prefix("mega") / _KILO, "Mg/s", "megagram per second",
             "megagrams per second"),
        Unit("kilogram_per_second", prefix("kilo") / _KILO, "kg/s", "kilogram per second",
             "kilograms per second"),
        Unit("hectogram_per_second", prefix("hecto") / _KILO, "hg/s", "hectogram per second",
             "hectograms per second"),
        Unit("decagram_per_second", prefix("deca") / _KILO, "dag/s", "decagram per second",
             "decagrams per second"),
        Unit("gram_per_second", prefix("none") / _KILO, "g/s", "gram per second",
             "grams per second"),
        Unit("decigram_per_second", prefix("deci") / _KILO, "dg/s", "decigram per second",
             "decigrams per second"),
        Unit("centigram_per_second", prefix("centi") / _KILO, "cg/s", "centigram per second",
             "centigrams per second"),
        Unit("milligram_per_second", prefix("milli") / _KILO, "mg/s", "milligram per second",
             "milligrams per second"),
        Unit("microgram_per_second", prefix("micro") / _KILO, "µg/s", "microgram per second",
             "micrograms per second"),
        Unit("nanogram_per_second", prefix("nano") / _KILO, "ng/s", "nanogram per second",
             "nanograms per second"),
        Unit("picogram_per_second", prefix("pico") / _KILO, "pg/s", "picogram per second",
             "picograms per second"),
        Unit("femtogram_per_second", prefix("femto") / _KILO, "fg/s", "femtogram per second",
             "femtograms per second"),
        Unit("attogram_per_second", prefix("atto") / _KILO, "ag/s", "attogram per second",
             "attograms per second"),
        Unit("zeptogram_per_second", prefix("zepto") / _KILO, "zg/s", "zeptogram per second",
             "zeptograms per second"),
        Unit("yoctogram_per_second", prefix("yocto") / _KILO, "yg/s", "yoctogram per second",
             "yoctograms per second"),
        Unit("kilogram_per_minute", 1.666_666_666_666_666_6e-2, "kg/min", "kilogram per minute",
             "kilograms per minute"),
        Unit("kilogram_per_hour", 2.777_777_777_777_777_7e-4, "kg/h", "kilogram per hour",
             "kilograms per hour"),
        Unit("kilogram_per_day", 1.157_407_407_407_407_4e-5, "kg/d", "kilogram per day",
             "kilograms per day"),
        Unit("gram_per_minute", 1.666_666_666_666_666_6e-5, "g/min", "gram per minute",
             "grams per minute"),
        Unit("gram_per_hour", 2.777_777_777_777_777_7e-7, "g/h", "gram per hour",
             "grams per hour"),
        Unit("gram_per_day", 1.157_407_407_407_407_4e-8, "g/d", "gram per day", "grams per day"),
        Unit("carat_per_second", 2.0e-4, "ct/s", "carat per second", "carats per second"),
        Unit("grain_per_second", 6.479_891e-5, "gr/s", "grain per second", "grains per second"),
        Unit("hundredweight_long_per_second", 5.080_235e1, "cwt long/s",
             "hundredweight (long) per second", "hundredweight (long) per second"),
        Unit("hundredweight_short_per_second", 4.535_924e1, "cwt short/s",
             "hundredweight (short) per second", "hundredweight (short) per second"),
        Unit("ounce_per_second", 2.834_952e-2, "oz/s", "ounce per second", "ounces per second"),
        Unit("ounce_troy_per_second", 3.110_348e-2, "oz t/s", "troy ounce per second",
             "troy ounces per second"),
        Unit("pennyweight_per_second", 1.555_174e-3, "dwt/s", "pennyweight per second",
             "pennyweight per second"),
        Unit("pound_per_second", 4.535_924e-1, "lb/s", "pound per second", "pounds per second"),
        Unit("pound_per_minute", 7.559_873_333_333_333e-3, "lb/min", "pound per minute",
             "pounds per minute"),
        Unit("pound_per_hour", 1.259_978_888_888_888_8e-4, "lb/h", "pound per hour",
             "pounds per hour"),
        Unit("pound_per_day", 5.249_912_037_037_037_0e-6, "lb/d", "pound per day",
             "pounds per day"),
        Unit("pound_troy_per_second", 3.732_417e-1, "lb t/s", "troy pound per second",
             "troy pounds per second"),
        Unit("slug_per_second", 1.459_390e1, "slug/s", "slug per second", "slugs per second"),
        Unit("ton_assay_per_second", 2.916_667e-2, "AT/s", "assay ton per second",
             "assay tons per second"),
        Unit("ton_long_per_second", 1.016_047e3, "2240 lb/s", "long ton per second",
             "long tons per second"),
        Unit("ton_short_per_second", 9.071_847e2, "2000 lb/s", "short ton per second",
             "short tons per second"),
        Unit("ton_short_per_hour", 2.519_957_5e-1, "2000 lb/h", "short ton per hour",
             "short tons per hour"),
        # Metric ton per second.
        Unit("ton_per_second", 1.0e3, "t/s", "ton per second", "tons per second"),
    ],
)


def new(value, unit):
    """Create a mass rate from a value in the given unit."""
    return MASS_RATE.new(value, unit)


def units():
    """All mass rate units."""
    return MASS_RATE.units()