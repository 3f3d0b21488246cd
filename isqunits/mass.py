"""Mass (base unit kilogram, kg)."""

from .core import Dimension, QuantityType, Unit, prefix

_KILO = prefix("kilo")

MASS = QuantityType(
    "Mass",
    "mass",
    Dimension(mass=1),
    [
        Unit("yottagram", prefix("yotta") / _KILO, "Yg", "yottagram", "yottagrams"),
        Unit("zettagram", prefix("zetta") / _KILO, "Zg", "zettagram", "zettagrams"),
        Unit("exagram", prefix("exa") / _KILO, "Eg", "exagram", "exagrams"),
        Unit("petagram", prefix("peta") / _KILO, "Pg", "petagram", "petagrams"),
        Unit("teragram", prefix("tera") / _KILO, "Tg", "teragram", "teragrams"),
        Unit("gigagram", prefix("giga") / _KILO, "Gg", "gigagram", "gigagrams"),
        Unit("megagram", prefix("mega") / _KILO, "Mg", "megagram", "megagrams"),
        Unit("kilogram", prefix("kilo") / _KILO, "kg", "kilogram", "kilograms"),
        Unit("hectogram", prefix("hecto") / _KILO, "hg", "hectogram", "hectograms"),
        Unit("decagram", prefix("deca") / _KILO, "dag", "decagram", "decagrams"),
        Unit("gram", prefix("none") / _KILO, "g", "gram", "grams"),
        Unit("decigram", prefix("deci") / _KILO, "dg", "decigram", "decigrams"),
        Unit("centigram", prefix("centi") / _KILO, "cg", "centigram", "centigrams"),
        Unit("milligram", prefix("milli") / _KILO, "mg", "milligram", "milligrams"),
        Unit("microgram", prefix("micro") / _KILO, "µg", "microgram", "micrograms"),
        Unit("nanogram", prefix("nano") / _KILO, "ng", "nanogram", "nanograms"),
        Unit("picogram", prefix("pico") / _KILO, "pg", "picogram", "picograms"),
        Unit("femtogram", prefix("femto") / _KILO, "fg", "femtogram", "femtograms"),
        Unit("attogram", prefix("atto") / _KILO, "ag", "attogram", "attograms"),
        Unit("zeptogram", prefix("zepto") / _KILO, "zg", "zeptogram", "zeptograms"),
        Unit("yoctogram", prefix("yocto") / _KILO, "yg", "yoctogram", "yoctograms"),
        Unit("carat", 2.0e-4, "ct", "carat", "carats"),
        Unit("grain", 6.479_891e-5, "gr", "grain", "grains"),
        Unit("hundredweight_long", 5.080_235e1, "cwt long", "hundredweight (long)",
             "hundredweight (long)"),
        Unit("hundredweight_short", 4.535_924e1, "cwt short", "hundredweight (short)",
             "hundredweight (short)"),
        Unit("ounce", 2.834_952e-2, "oz", "ounce", "ounces"),
        Unit("ounce_troy", 3.110_348e-2, "oz t", "troy ounce", "troy ounces"),
        Unit("pennyweight", 1.555_174e-3, "dwt", "pennyweight", "pennyweight"),
        Unit("pound", 4.535_924e-1, "lb", "pound", "pounds"),
        Unit("pound_troy", 3.732_417e-1, "lb t", "troy pound", "troy pounds"),
        Unit("slug", 1.459_390e1, "slug", "slug", "slugs"),
        Unit("ton_assay", 2.916_667e-2, "AT", "assay ton", "assay tons"),
        Unit("ton_long", 1.016_047e3, "2240 lb", "long ton", "long tons"),
        Unit("ton_short", 9.071_847e2, "2000 lb", "short ton", "short tons"),
        # Metric ton.
        Unit("ton", 1.0e3, "t", "ton", "tons"),
    ],
)


def new(value, unit):
    """Create a mass from a value in the given unit."""
    return MASS.new(value, unit)


def units():
    """All mass units."""
    return MASS.units()