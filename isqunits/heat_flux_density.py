"""Heat flux density (base unit watt per square meter, kg · s⁻³)."""

from .core import Dimension, QuantityType, Unit, prefix

_SI_PREFIXES = (
    ("yotta", "Y"),
    ("zetta", "Z"),
    ("exa", "E"),
    ("peta", "P"),
    ("tera", "T"),
    ("giga", "G"),
    ("mega", "M"),
    ("kilo", "k"),
    ("hecto", "h"),
    ("deca", "da"),
    ("none", ""),
    ("deci", "d"),
    ("centi", "c"),
    ("milli", "m"),
    ("micro", "µ"),
    ("nano", "n"),
    ("pico", "p"),
    ("femto", "f"),
    ("atto", "a"),
    ("zepto", "z"),
    ("yocto", "y"),
)


def _units():
    for name, symbol in _SI_PREFIXES:
        watt = f"{'' if name == 'none' else name}watt"
        yield Unit(
            f"{watt}_per_square_meter",
            prefix(name),
            f"{symbol}W/m²",
            f"{watt} per square meter",
            f"{watt}s per square meter",
        )


HEAT_FLUX_DENSITY = QuantityType(
    "HeatFluxDensity",
    "heat flux density",
    Dimension(mass=1, time=-3),
    list(_units()),
)


def new(value, unit):
    """Create a heat flux density from a value in the given unit."""
    return HEAT_FLUX_DENSITY.new(value, unit)


def units():
    """All heat flux density units."""
    return HEAT_FLUX_DENSITY.units()