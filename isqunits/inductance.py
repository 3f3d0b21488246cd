"""Inductance (base unit henry, m² · kg · s⁻² · A⁻²)."""

from .core import Dimension, QuantityType, Unit, prefix

INDUCTANCE = QuantityType(
    "Inductance",
    "inductance",
    Dimension(length=2, mass=1, time=-2, electric_current=-2),
    [
        Unit("yottahenry", prefix("yotta"), "YH", "yottahenry", "yottahenries"),
        Unit("zettahenry", prefix("zetta"), "ZH", "zettahenry", "zettahenries"),
        Unit("exahenry", prefix("exa"), "EH", "exahenry", "exahenries"),
        Unit("petahenry", prefix("peta"), "PH", "petahenry", "petahenries"),
        Unit("terahenry", prefix("tera"), "TH", "terahenry", "terahenries"),
        Unit("gigahenry", prefix("giga"), "GH", "gigahenry", "gigahenries"),
        Unit("megahenry", prefix("mega"), "MH", "megahenry", "megahenries"),
        Unit("kilohenry", prefix("kilo"), "kH", "kilohenry", "kilohenries"),
        Unit("hectohenry", prefix("hecto"), "hH", "hectohenry", "hectohenries"),
        Unit("decahenry", prefix("deca"), "daH", "decahenry", "decahenries"),
        Unit("henry", prefix("none"), "H", "henry", "henries"),
        Unit("decihenry", prefix("deci"), "dH", "decihenry", "decihenries"),
        Unit("centihenry", prefix("centi"), "cH", "centihenry", "centihenries"),
        Unit("millihenry", prefix("milli"), "mH", "millihenry", "millihenries"),
        Unit("microhenry", prefix("micro"), "µH", "microhenry", "microhenries"),
        Unit("nanohenry", prefix("nano"), "nH", "nanohenry", "nanohenries"),
        Unit("picohenry", prefix("pico"), "pH", "picohenry", "picohenries"),
        Unit("femtohenry", prefix("femto"), "fH", "femtohenry", "femtohenries"),
        Unit("attohenry", prefix("atto"), "aH", "attohenry", "attohenries"),
        Unit("zeptohenry", prefix("zepto"), "zH", "zeptohenry", "zeptohenries"),
        Unit("yoctohenry", prefix("yocto"), "yH", "yoctohenry", "yoctohenries"),
        Unit("abhenry", 1.0e-9, "abH", "abhenry", "abhenries"),
        Unit("stathenry", 8.987_552_917_115_481e11, "statH", "stathenry", "stathenries"),
    ],
)


def new(value, unit):
    """Create an inductance from a value in the given unit."""
    return INDUCTANCE.new(value, unit)


def units():
    """All inductance units."""
    return INDUCTANCE.units()