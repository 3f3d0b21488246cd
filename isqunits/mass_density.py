"""Mass density (base unit kilogram per cubic meter, kg · m⁻³)."""

from .core import Dimension, QuantityType, Unit, prefix

_KILO = prefix("kilo")

MASS_DENSITY = QuantityType(
    "MassDensity",
    "mass density",
    Dimension(length=-3, mass=1),
    [
        Unit("yottagram_per_cubic_meter", prefix("yotta") / _KILO, "Yg/m³",
             "yottagram per cubic meter", "yottagrams per cubic meter"),
        Unit("zettagram_per_cubic_meter", prefix("zetta") / _KILO, "Zg/m³",
             "zettagram per cubic meter", "zettagrams per cubic meter"),
        Unit("exagram_per_cubic_meter", prefix("exa") / _KILO, "Eg/m³",
             "exagram per cubic meter", "exagrams per cubic meter"),
        Unit("petagram_per_cubic_meter", prefix("peta") / _KILO, "Pg/m³",
             "petagram per cubic meter", "petagrams per cubic meter"),
        Unit("teragram_per_cubic_meter", prefix("tera") / _KILO, "Tg/m³",
             "teragram per cubic meter", "teragrams per cubic meter"),
        Unit("gigagram_per_cubic_meter", prefix("giga") / _KILO, "Gg/m³",
             "gigagram per cubic meter", "gigagrams per cubic meter"),
        Unit("megagram_per_cubic_meter", prefix("mega") / _KILO, "Mg/m³",
             "megagram per cubic meter", "megagrams per cubic meter"),
        Unit("kilogram_per_cubic_meter", prefix("kilo") / _KILO, "kg/m³",
             "kilogram per cubic meter", "kilograms per cubic meter"),
        Unit("hectogram_per_cubic_meter", prefix("hecto") / _KILO, "hg/m³",
             "hectogram per cubic meter", "hectograms per cubic meter"),
        Unit("decagram_per_cubic_meter", prefix("deca") / _KILO, "dag/m³",
             "decagram per cubic meter", "decagrams per cubic meter"),
        Unit("gram_per_cubic_meter", prefix("none") / _KILO, "g/m³",
             "gram per cubic meter", "grams per cubic meter"),
        Unit("decigram_per_cubic_meter", prefix("deci") / _KILO, "dg/m³",
             "decigram per cubic meter", "decigrams per cubic meter"),
        Unit("centigram_per_cubic_meter", prefix("centi") / _KILO, "cg/m³",
             "centigram per cubic meter", "centigrams per cubic meter"),
        Unit("milligram_per_cubic_meter", prefix("milli") / _KILO, "mg/m³",
             "milligram per cubic meter", "milligrams per cubic meter"),
        Unit("microgram_per_cubic_meter", prefix("micro") / _KILO, "µg/m³",
             "microgram per cubic meter", "micrograms per cubic meter"),
        Unit("nanogram_per_cubic_meter", prefix("nano") / _KILO, "ng/m³",
             "nanogram per cubic meter", "nanograms per cubic meter"),
        Unit("picogram_per_cubic_meter", prefix("pico") / _KILO, "pg/m³",
             "picogram per cubic meter", "picograms per cubic meter"),
        Unit("femtogram_per_cubic_meter", prefix("femto") / _KILO, "fg/m³",
             "femtogram per cubic meter", "femtograms per cubic meter"),
        Unit("attogram_per_cubic_meter", prefix("atto") / _KILO, "ag/m³",
             "attogram per cubic meter", "attograms per cubic meter"),
        Unit("zeptogram_per_cubic_meter", prefix("zepto") / _KILO, "zg/m³",
             "zeptogram per cubic meter", "zeptograms per cubic meter"),
        Unit("yoctogram_per_cubic_meter", prefix("yocto") / _KILO, "yg/m³",
             "yoctogram per cubic meter", "yoctograms per cubic meter"),
        Unit("carat_per_cubic_meter", 2.0e-4, "ct/m³", "carat per cubic meter",
             "carats per cubic meter"),
        Unit("grain_per_cubic_meter", 6.479_891e-5, "gr/m³", "grain per cubic meter",
             "grains per cubic meter"),
        Unit("hundredweight_long_per_cubic_meter", 5.080_235e1, "cwt long/m³",
             "hundredweight (long) per cubic meter", "hundredweight (long) per cubic meter"),
        Unit("hundredweight_short_per_cubic_meter", 4.535_924e1, "cwt short/m³",
             "hundredweight (short) per cubic meter", "hundredweight (short) per cubic meter"),
        Unit("ounce_per_cubic_meter", 2.834_952e-2, "oz/m³", "ounce per cubic meter",
             "ounces per cubic meter"),
        Unit("ounce_troy_per_cubic_meter", 3.110_348e-2, "oz t/m³",
             "troy ounce per cubic meter", "troy ounces per cubic meter"),
        Unit("pennyweight_per_cubic_meter", 1.555_174e-3, "dwt/m³",
             "pennyweight per cubic meter", "pennyweight per cubic meter"),
        Unit("pound_per_cubic_meter", 4.535_924e-1, "lb/m³", "pound per cubic meter",
             "pounds per cubic meter"),
        Unit("pound_troy_per_cubic_meter", 3.732_417e-1, "lb t/m³",
             "troy pound per cubic meter", "troy pounds per cubic meter"),
        Unit("slug_per_cubic_meter", 1.459_390e1, "slug/m³", "slug per cubic meter",
             "slugs per cubic meter"),
        Unit("ton_assay_per_cubic_meter", 2.916_667e-2, "AT/m³", "assay ton per cubic meter",
             "assay tons per cubic meter"),
        Unit("ton_long_per_cubic_meter", 1.016_047e3, "2240 lb/m³", "long ton per cubic meter",
             "long tons per cubic meter"),
        Unit("ton_short_per_cubic_meter", 9.071_847e2, "2000 lb/m³",
             "short ton per cubic meter", "short tons per cubic meter"),
        # Metric ton per cubic meter.
        Unit("ton_per_cubic_meter", 1.0e3, "t/m³", "ton per cubic meter",
             "tons per cubic meter"),
        Unit("grain_per_gallon", 1.711_806_006_849_452e-2, "gr/gal", "grain per gallon",
             "grains per gallon"),
        Unit("gram_per_cubic_centimeter", 1.0e3, "g/cm³", "gram per cubic centimeter",
             "grams per cubic centimeter"),
        Unit("ounce_per_cubic_inch", 1.729_994_275_971_406_5e3, "oz/in³",
             "ounce per cubic inch", "ounces per cubic inch"),
        Unit("ounce_per_gallon_imperial", 6.236_022_604_039_955e0, "oz/gal (UK)",
             "ounce per Imperial gallon", "ounces per Imperial gallon"),
        Unit("ounce_per_gallon", 7.489_150_454_428_738e0, "oz/gal", "ounce per gallon",
             "ounces per gallon"),
        Unit("pound_per_cubic_foot", 1.601_846_250_553_998_6e1, "lb/ft³",
             "pound per cubic foot", "pounds per cubic foot"),
        Unit("pound_per_cubic_inch", 2.767_991_329_744_322_5e4, "lb/in³",
             "pound per cubic inch", "pounds per cubic inch"),
        Unit("pound_per_cubic_yard", 5.932_764_278_928_825e-1, "lb/yd³",
             "pound per cubic yard", "pounds per cubic yard"),
        Unit("pound_per_gallon_imperial", 9.977_637_926_217_915e1, "lb/gal (UK)",
             "pound per Imperial gallon", "pounds per Imperial gallon"),
        Unit("pound_per_gallon", 1.198_264_284_046_228e2, "lb/gal", "pound per gallon",
             "pounds per gallon"),
        Unit("slug_per_cubic_foot", 5.153_786_526_396_827e2, "slug/ft³",
             "slug per cubic foot", "slugs per cubic foot"),
        Unit("ton_long_per_cubic_yard", 1.328_939_229_870_87e3, "2240 lb/yd³",
             "long ton per cubic yard", "long tons per cubic yard"),
        Unit("ton_short_per_cubic_yard", 1.186_552_724_990_710_2e3, "2000 lb/yd³",
             "short ton per cubic yard", "short tons per cubic yard"),
    ],
)


def new(value, unit):
    """Create a mass density from a value in the given unit."""
    return MASS_DENSITY.new(value, unit)


def units():
    """All mass density units."""
    return MASS_DENSITY.units()