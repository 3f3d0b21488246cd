"""Heat capacity (base unit joule per kelvin, kg · m² · s⁻² · K⁻¹).

Heat capacity relates to a change of temperature, so it belongs with temperature
intervals rather than with thermodynamic temperature. For the heat capacity of a
material rather than of an object, use specific heat capacity.
"""

from .core import Dimension, QuantityType, Unit, prefix

_KILO = prefix("kilo")

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


def _spelled(name):
    return "" if name == "none" else name


def _base_units():
    for name, symbol in _SI_PREFIXES:
        gram = f"{_spelled(name)}gram"
        yield Unit(
            f"{gram}_square_meter_per_second_squared_kelvin",
            prefix(name) / _KILO,
            f"{symbol}g · m²/(s² · K)",
            f"{gram} square meter per second squared kelvin",
            f"{gram} square meters per second squared kelvin",
        )


def _energy_units():
    for name, symbol in _SI_PREFIXES:
        joule = f"{_spelled(name)}joule"
        yield Unit(
            f"{joule}_per_kelvin",
            prefix(name),
            f"{symbol}J/K",
            f"{joule} per kelvin",
            f"{joule}s per kelvin",
        )


HEAT_CAPACITY = QuantityType(
    "HeatCapacity",
    "heat capacity",
    Dimension(length=2, mass=1, time=-2, thermodynamic_temperature=-1),
    [
        *_base_units(),
        *_energy_units(),
        Unit("kilojoule_per_degree_celsius", 1.0e3, "kJ/°C", "kilojoule per degree celsius",
             "kilojoules per degree celsius"),
        Unit("joule_per_degree_celsius", 1.0e0, "J/°C", "joule per degree celsius",
             "joules per degree celsius"),
        Unit("millijoule_per_degree_celsius", 1.0e-3, "mJ/°C", "millijoule per degree celsius",
             "millijoules per degree celsius"),
        Unit("btu_per_degree_fahrenheit", 1.897_830e3, "Btu/°F",
             "British thermal unit per degree Fahrenheit",
             "British thermal units per degree Fahrenheit"),
        Unit("btu_it_per_degree_fahrenheit", 1.899_100_8e3, "Btu (IT)/°F",
             "British thermal unit (IT) per degree Fahrenheit",
             "British thermal units (IT) per degree Fahrenheit"),
    ],
)


def new(value, unit):
    """Create a heat capacity from a value in the given unit."""
    return HEAT_CAPACITY.new(value, unit)


def units():
    """All heat capacity units."""
    return HEAT_CAPACITY.units()