"""Magnetic flux (base unit weber, m² · kg · s⁻² · A⁻¹)."""

from .core import Dimension, QuantityType, Unit, prefix

MAGNETIC_FLUX = QuantityType(
    "MagneticFlux",
    "magnetic flux",
    Dimension(length=2, mass=1, time=-2, electric_current=-1),
    [
        Unit("yottaweber", prefix("yotta"), "YWb", "yottaweber", "yottawebers"),
        Unit("zettaweber", prefix("zetta"), "ZWb", "zettaweber", "zettawebers"),
        Unit("exaweber", prefix("exa"), "EWb", "exaweber", "exawebers"),
        Unit("petaweber", prefix("peta"), "PWb", "petaweber", "petawebers"),
        Unit("teraweber", prefix("tera"), "TWb", "teraweber", "terawebers"),
        Unit("gigaweber", prefix("giga"), "GWb", "gigaweber", "gigawebers"),
        Unit("megaweber", prefix("mega"), "MWb", "megaweber", "megawebers"),
        Unit("kiloweber", prefix("kilo"), "kWb", "kiloweber", "kilowebers"),
        Unit("hectoweber", prefix("hecto"), "hWb", "hectoweber", "hectowebers"),
        Unit("decaweber", prefix("deca"), "daWb", "decaweber", "decawebers"),
        Unit("weber", prefix("none"), "Wb", "weber", "webers"),
        Unit("deciweber", prefix("deci"), "dWb", "deciweber", "deciwebers"),
        Unit("centiweber", prefix("centi"), "cWb", "centiweber", "centiwebers"),
        Unit("milliweber", prefix("milli"), "mWb", "milliweber", "milliwebers"),
        Unit("microweber", prefix("micro"), "µWb", "microweber", "microwebers"),
        Unit("nanoweber", prefix("nano"), "nWb", "nanoweber", "nanowebers"),
        Unit("picoweber", prefix("pico"), "pWb", "picoweber", "picowebers"),
        Unit("femtoweber", prefix("femto"), "fWb", "femtoweber", "femtowebers"),
        Unit("attoweber", prefix("atto"), "aWb", "attoweber", "attowebers"),
        Unit("zeptoweber", prefix("zepto"), "zWb", "zeptoweber", "zeptowebers"),
        Unit("yoctoweber", prefix("yocto"), "yWb", "yoctoweber", "yoctowebers"),
        Unit("maxwell", 1.0e-8, "Mx", "maxwell", "maxwells"),
    ],
)


def new(value, unit):
    """Create a magnetic flux from a value in the given unit."""
    return MAGNETIC_FLUX.new(value, unit)


def units():
    """All magnetic flux units."""
    return MAGNETIC_FLUX.units()