"""Luminous intensity (base unit candela, cd)."""

from .core import Dimension, QuantityType, Unit, prefix

LUMINOUS_INTENSITY = QuantityType(
    "LuminousIntensity",
    "luminous intensity",
    Dimension(luminous_intensity=1),
    [
        Unit("yottacandela", prefix("yotta"), "Ycd", "yottacandela", "yottacandelas"),
        Unit("zettacandela", prefix("zetta"), "Zcd", "zettacandela", "zettacandelas"),
        Unit("exacandela", prefix("exa"), "Ecd", "exacandela", "exacandelas"),
        Unit("petacandela", prefix("peta"), "Pcd", "petacandela", "petacandelas"),
        Unit("teracandela", prefix("tera"), "Tcd", "teracandela", "teracandelas"),
        Unit("gigacandela", prefix("giga"), "Gcd", "gigacandela", "gigacandelas"),
        Unit("megacandela", prefix("mega"), "Mcd", "megacandela", "megacandelas"),
        Unit("kilocandela", prefix("kilo"), "kcd", "kilocandela", "kilocandelas"),
        Unit("hectocandela", prefix("hecto"), "hcd", "hectocandela", "hectocandelas"),
        Unit("decacandela", prefix("deca"), "dacd", "decacandela", "decacandelas"),
        Unit("candela", prefix("none"), "cd", "candela", "candelas"),
        Unit("decicandela", prefix("deci"), "dcd", "decicandela", "decicandelas"),
        Unit("centicandela", prefix("centi"), "ccd", "centicandela", "centicandelas"),
        Unit("millicandela", prefix("milli"), "mcd", "millicandela", "millicandelas"),
        Unit("microcandela", prefix("micro"), "µcd", "microcandela", "microcandelas"),
        Unit("nanocandela", prefix("nano"), "ncd", "nanocandela", "nanocandelas"),
        Unit("picocandela", prefix("pico"), "pcd", "picocandela", "picocandelas"),
        Unit("femtocandela", prefix("femto"), "fcd", "femtocandela", "femtocandelas"),
        Unit("attocandela", prefix("atto"), "acd", "attocandela", "attocandelas"),
        Unit("zeptocandela", prefix("zepto"), "zcd", "zeptocandela", "zeptocandelas"),
        Unit("yoctocandela", prefix("yocto"), "ycd", "yoctocandela", "yoctocandelas"),
    ],
)


def new(value, unit):
    """Create a luminous intensity from a value in the given unit."""
    return LUMINOUS_INTENSITY.new(value, unit)


def units():
    """All luminous intensity units."""
    return LUMINOUS_INTENSITY.units()