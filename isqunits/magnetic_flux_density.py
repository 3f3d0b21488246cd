"""Magnetic flux density (base unit tesla, kg · s⁻² · A⁻¹)."""

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


def _tesla_units():
    for name, symbol in _SI_PREFIXES:
        tesla = f"{'' if name == 'none' else name}tesla"
        yield Unit(tesla, prefix(name), f"{symbol}T", tesla, f"{tesla}s")


MAGNETIC_FLUX_DENSITY = QuantityType(
    "MagneticFluxDensity",
    "magnetic flux density",
    Dimension(mass=1, time=-2, electric_current=-1),
    [
        *_tesla_units(),
        Unit("gamma", 1.0e-9, "γ", "gamma", "gammas"),
        Unit("gauss", 1.0e-4, "G", "gauss", "gauss"),
    ],
)


def new(value, unit):
    """Create a magnetic flux density from a value in the given unit."""
    return MAGNETIC_FLUX_DENSITY.new(value, unit)


def units():
    """All magnetic flux density units."""
    return MAGNETIC_FLUX_DENSITY.units()