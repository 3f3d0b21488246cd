"""Frequency (base unit hertz, s⁻¹)."""

from .core import Dimension, QuantityType, Unit, prefix

FREQUENCY = QuantityType(
    "Frequency",
    "frequency",
    Dimension(time=-1),
    [
        Unit("yottahertz", prefix("yotta"), "YHz", "yottahertz", "yottahertz"),
        Unit("zettahertz", prefix("zetta"), "ZHz", "zettahertz", "zettahertz"),
        Unit("exahertz", prefix("exa"), "EHz", "exahertz", "exahertz"),
        Unit("petahertz", prefix("peta"), "PHz", "petahertz", "petahertz"),
        Unit("terahertz", prefix("tera"), "THz", "terahertz", "terahertz"),
        Unit("gigahertz", prefix("giga"), "GHz", "gigahertz", "gigahertz"),
        Unit("megahertz", prefix("mega"), "MHz", "megahertz", "megahertz"),
        Unit("kilohertz", prefix("kilo"), "kHz", "kilohertz", "kilohertz"),
        Unit("hectohertz", prefix("hecto"), "hHz", "hectohertz", "hectohertz"),
        Unit("decahertz", prefix("deca"), "daHz", "decahertz", "decahertz"),
        # The hertz is one cycle per second.
        Unit("hertz", prefix("none"), "Hz", "hertz", "hertz"),
        Unit("decihertz", prefix("deci"), "dHz", "decihertz", "decihertz"),
        Unit("centihertz", prefix("centi"), "cHz", "centihertz", "centihertz"),
        Unit("millihertz", prefix("milli"), "mHz", "millihertz", "millihertz"),
        Unit("microhertz", prefix("micro"), "µHz", "microhertz", "microhertz"),
        Unit("nanohertz", prefix("nano"), "nHz", "nanohertz", "nanohertz"),
        Unit("picohertz", prefix("pico"), "pHz", "picohertz", "picohertz"),
        Unit("femtohertz", prefix("femto"), "fHz", "femtohertz", "femtohertz"),
        Unit("attohertz", prefix("atto"), "aHz", "attohertz", "attohertz"),
        Unit("zeptohertz", prefix("zepto"), "zHz", "zeptohertz", "zeptohertz"),
        Unit("yoctohertz", prefix("yocto"), "yHz", "yoctohertz", "yoctohertz"),
        Unit("cycle_per_day", 1.157_407_407_407_407_4e-5, "1/d", "cycle per day",
             "cycles per day"),
        Unit("cycle_per_hour", 2.777_777_777_777_777e-4, "1/h", "cycle per hour",
             "cycles per hour"),
        Unit("cycle_per_minute", 1.666_666_666_666_666_6e-2, "1/min", "cycle per minute",
             "cycles per minute"),
        Unit("cycle_per_shake", 1.0e8, "100 MHz", "cycle per shake", "cycles per shake"),
        Unit("cycle_per_year", 3.170_979_198_376_458e-8, "1/a", "cycle per year",
             "cycles per year"),
    ],
)


def new(value, unit):
    """Create a frequency from a value in the given unit."""
    return FREQUENCY.new(value, unit)


def units():
    """All frequency units."""
    return FREQUENCY.units()