"""Jerk (base unit meter per second cubed, m · s⁻³)."""

from .core import Dimension, QuantityType, Unit, prefix

JERK = QuantityType(
    "Jerk",
    "jerk",
    Dimension(length=1, time=-3),
    [
        Unit("yottameter_per_second_cubed", prefix("yotta"), "Ym/s³",
             "yottameter per second cubed", "yottameters per second cubed"),
        Unit("zettameter_per_second_cubed", prefix("zetta"), "Zm/s³",
             "zettameter per second cubed", "zettameters per second cubed"),
        Unit("exameter_per_second_cubed", prefix("exa"), "Em/s³",
             "exameter per second cubed", "exameters per second cubed"),
        Unit("petameter_per_second_cubed", prefix("peta"), "Pm/s³",
             "petameter per second cubed", "petameters per second cubed"),
        Unit("terameter_per_second_cubed", prefix("tera"), "Tm/s³",
             "terameter per second cubed", "terameters per second cubed"),
        Unit("gigameter_per_second_cubed", prefix("giga"), "Gm/s³",
             "gigameter per second cubed", "gigameters per second cubed"),
        Unit("megameter_per_second_cubed", prefix("mega"), "Mm/s³",
             "megameter per second cubed", "megameters per second cubed"),
        Unit("kilometer_per_second_cubed", prefix("kilo"), "km/s³",
             "kilometer per second cubed", "kilometers per second cubed"),
        Unit("hectometer_per_second_cubed", prefix("hecto"), "hm/s³",
             "hectometer per second cubed", "hectometers per second cubed"),
        Unit("decameter_per_second_cubed", prefix("deca"), "dam/s³",
             "decameter per second cubed", "decameters per second cubed"),
        Unit("meter_per_second_cubed", prefix("none"), "m/s³",
             "meter per second cubed", "meters per second cubed"),
        Unit("decimeter_per_second_cubed", prefix("deci"), "dm/s³",
             "decimeter per second cubed", "decimeters per second cubed"),
        Unit("centimeter_per_second_cubed", prefix("centi"), "cm/s³",
             "centimeter per second cubed", "centimeters per second cubed"),
        Unit("millimeter_per_second_cubed", prefix("milli"), "mm/s³",
             "millimeter per second cubed", "millimeters per second cubed"),
        Unit("micrometer_per_second_cubed", prefix("micro"), "µm/s³",
             "micrometer per second cubed", "micrometers per second cubed"),
        Unit("nanometer_per_second_cubed", prefix("nano"), "nm/s³",
             "nanometer per second cubed", "nanometers per second cubed"),
        Unit("picometer_per_second_cubed", prefix("pico"), "pm/s³",
             "picometer per second cubed", "picometers per second cubed"),
        Unit("femtometer_per_second_cubed", prefix("femto"), "fm/s³",
             "femtometer per second cubed", "femtometers per second cubed"),
        Unit("attometer_per_second_cubed", prefix("atto"), "am/s³",
             "attometer per second cubed", "attometers per second cubed"),
        Unit("zeptometer_per_second_cubed", prefix("zepto"), "zm/s³",
             "zeptometer per second cubed", "zeptometers per second cubed"),
        Unit("yoctometer_per_second_cubed", prefix("yocto"), "ym/s³",
             "yoctometer per second cubed", "yoctometers per second cubed"),
        Unit("foot_per_second_cubed", 3.048e-1, "ft/s³", "foot per second cubed",
             "feet per second cubed"),
        Unit("inch_per_second_cubed", 2.54e-2, "in/s³", "inch per second cubed",
             "inches per second cubed"),
        Unit("kilometer_per_minute_cubed", 4.629_629_629_629_629e-3, "km/min³",
             "kilometer per minute cubed", "kilometers per minute cubed"),
    ],
)


def new(value, unit):
    """Create a jerk from a value in the given unit."""
    return JERK.new(value, unit)


def units():
    """All jerk units."""
    return JERK.units()