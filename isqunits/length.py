"""Length (base unit meter, m)."""

from .core import Dimension, QuantityType, Unit, prefix

LENGTH = QuantityType(
    "Length",
    "length",
    Dimension(length=1),
    [
        Unit("yottameter", prefix("yotta"), "Ym", "yottameter", "yottameters"),
        Unit("zettameter", prefix("zetta"), "Zm", "zettameter", "zettameters"),
        Unit("exameter", prefix("exa"), "Em", "exameter", "exameters"),
        Unit("petameter", prefix("peta"), "Pm", "petameter", "petameters"),
        Unit("terameter", prefix("tera"), "Tm", "terameter", "terameters"),
        Unit("gigameter", prefix("giga"), "Gm", "gigameter", "gigameters"),
        Unit("megameter", prefix("mega"), "Mm", "megameter", "megameters"),
        Unit("kilometer", prefix("kilo"), "km", "kilometer", "kilometers"),
        Unit("hectometer", prefix("hecto"), "hm", "hectometer", "hectometers"),
        Unit("decameter", prefix("deca"), "dam", "decameter", "decameters"),
        Unit("meter", prefix("none"), "m", "meter", "meters"),
        Unit("decimeter", prefix("deci"), "dm", "decimeter", "decimeters"),
        Unit("centimeter", prefix("centi"), "cm", "centimeter", "centimeters"),
        Unit("millimeter", prefix("milli"), "mm", "millimeter", "millimeters"),
        Unit("micrometer", prefix("micro"), "µm", "micrometer", "micrometers"),
        Unit("nanometer", prefix("nano"), "nm", "nanometer", "nanometers"),
        Unit("picometer", prefix("pico"), "pm", "picometer", "picometers"),
        Unit("femtometer", prefix("femto"), "fm", "femtometer", "femtometers"),
        Unit("attometer", prefix("atto"), "am", "attometer", "attometers"),
        Unit("zeptometer", prefix("zepto"), "zm", "zeptometer", "zeptometers"),
        Unit("yoctometer", prefix("yocto"), "ym", "yoctometer", "yoctometers"),
        Unit("angstrom", 1.0e-10, "Å", "ångström", "ångströms"),
        Unit("astronomical_unit", 1.495_979e11, "ua", "astronomical unit", "astronomical units"),
        Unit("chain", 2.011_684e1, "ch", "chain", "chains"),
        Unit("fathom", 1.828_804e0, "fathom", "fathom", "fathoms"),
        Unit("fermi", 1.0e-15, "fermi", "fermi", "fermis"),
        Unit("foot", 3.048e-1, "ft", "foot", "feet"),
        Unit("foot_survey", 3.048_006e-1, "ft (U.S. survey)", "foot (U.S. survey)",
             "feet (U.S. survey)"),
        Unit("inch", 2.54e-2, "in", "inch", "inches"),
        Unit("light_year", 9.460_73e15, "l. y.", "light year", "light years"),
        Unit("microinch", 2.54e-8, "μin", "microinch", "microinches"),
        Unit("micron", 1.0e-6, "μ", "micron", "microns"),
        Unit("mil", 2.54e-5, "0.001 in", "mil", "mils"),
        Unit("mile", 1.609_344e3, "mi", "mile", "miles"),
        Unit("mile_survey", 1.609_347e3, "mi (U.S. survey)", "mile (U.S. survey)",
             "miles (U.S. survey)"),
        Unit("nautical_mile", 1.852e3, "M", "nautical mile", "nautical miles"),
        Unit("parsec", 3.085_678e16, "pc", "parsec", "parsecs"),
        Unit("pica_computer", 4.233_333_333_333_333e-3, "1/6 in (computer)", "pica (computer)",
             "picas (computer)"),
        Unit("pica_printers", 4.217_518e-3, "1/6 in", "pica (printer's)", "picas (printer's)"),
        Unit("point_computer", 3.527_778e-4, "1/72 in (computer)", "point (computer)",
             "points (computer)"),
        Unit("point_printers", 3.514_598e-4, "1/72 in", "point (printer's)",
             "points (printer's)"),
        Unit("rod", 5.029_21e0, "rd", "rod", "rods"),
        Unit("yard", 9.144e-1, "yd", "yard", "yards"),
    ],
)


def new(value, unit):
    """Create a length from a value in the given unit."""
    return LENGTH.new(value, unit)


def units():
    """All length units."""
    return LENGTH.units()