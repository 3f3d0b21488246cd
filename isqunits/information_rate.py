"""Information rate (base unit byte per second, s⁻¹)."""

from .core import Dimension, Kind, QuantityType, Unit, prefix

_PREFIXES = (
    ("yobi", "Yi"),
    ("yotta", "Y"),
    ("zebi", "Zi"),
    ("zetta", "Z"),
    ("exbi", "Ei"),
    ("exa", "E"),
    ("pebi", "Pi"),
    ("peta", "P"),
    ("tebi", "Ti"),
    ("tera", "T"),
    ("gibi", "Gi"),
    ("giga", "G"),
    ("mebi", "Mi"),
    ("mega", "M"),
    ("kibi", "Ki"),
    ("kilo", "k"),
)


def _units(noun, symbol, factor):
    for name, prefix_symbol in _PREFIXES:
        yield Unit(
            f"{name}{noun}_per_second",
            factor(prefix(name)),
            f"{prefix_symbol}{symbol}/s",
            f"{name}{noun} per second",
            f"{name}{noun}s per second",
        )


def _bits():
    yield from _units("bit", "b", lambda p: p * prefix("none") / 8.0)
    yield Unit("bit_per_second", prefix("none") / 8.0, "b/s", "bit per second",
               "bits per second")


def _bytes():
    yield from _units("byte", "B", lambda p: p)
    yield Unit("byte_per_second", prefix("none"), "B/s", "byte per second",
               "bytes per second")


INFORMATION_RATE = QuantityType(
    "InformationRate",
    "information rate",
    Dimension(time=-1),
    [
        *_bits(),
        *_bytes(),
        Unit("octet_per_second", prefix("none"), "o/s", "octet per second",
             "octets per second"),
    ],
    kind=Kind.INFORMATION,
)


def new(value, unit):
    """Create an information rate from a value in the given unit."""
    return INFORMATION_RATE.new(value, unit)


def units():
    """All information rate units."""
    return INFORMATION_RATE.units()