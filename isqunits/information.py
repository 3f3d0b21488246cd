"""Information (dimensionless quantity).

The byte is the base unit rather than the bit. Units derived from the byte
therefore get exact conversion factors, and those units are used more often
than units derived from the bit.
"""

from .core import Dimension, Kind, QuantityType, Unit, prefix

_BIT = prefix("none") / 8.0

INFORMATION = QuantityType(
    "Information",
    "information",
    Dimension(),
    [
        # Base-2.
        Unit("yobibit", prefix("yobi") / 8.0, "Yib", "yobibit", "yobibits"),
        Unit("yottabit", prefix("yotta") / 8.0, "Yb", "yottabit", "yottabits"),
        Unit("zebibit", prefix("zebi") / 8.0, "Zib", "zebibit", "zebibits"),
        Unit("zettabit", prefix("zetta") / 8.0, "Zb", "zettabit", "zettabits"),
        Unit("exbibit", prefix("exbi") / 8.0, "Eib", "exbibit", "exbibits"),
        Unit("exabit", prefix("exa") / 8.0, "Eb", "exabit", "exabits"),
        Unit("pebibit", prefix("pebi") / 8.0, "Pib", "pebibit", "pebibits"),
        Unit("petabit", prefix("peta") / 8.0, "Pb", "petabit", "petabits"),
        Unit("tebibit", prefix("tebi") / 8.0, "Tib", "tibibit", "tibibits"),
        Unit("terabit", prefix("tera") / 8.0, "Tb", "terabit", "terabits"),
        Unit("gibibit", prefix("gibi") / 8.0, "Gib", "gibibit", "gibibits"),
        Unit("gigabit", prefix("giga") / 8.0, "Gb", "gigabit", "gigabits"),
        Unit("mebibit", prefix("mebi") / 8.0, "Mib", "mebibit", "mebibits"),
        Unit("megabit", prefix("mega") / 8.0, "Mb", "megabit", "megabits"),
        Unit("kibibit", prefix("kibi") / 8.0, "Kib", "kibibit", "kibibits"),
        Unit("kilobit", prefix("kilo") / 8.0, "kb", "kilobit", "kilobits"),
        Unit("bit", _BIT, "b", "bit", "bits"),
        Unit("yobibyte", prefix("yobi"), "YiB", "yobibyte", "yobibytes"),
        Unit("yottabyte", prefix("yotta"), "YB", "yottabyte", "yottabytes"),
        Unit("zebibyte", prefix("zebi"), "ZiB", "zebibyte", "zebibytes"),
        Unit("zettabyte", prefix("zetta"), "ZB", "zettabyte", "zettabytes"),
        Unit("exbibyte", prefix("exbi"), "EiB", "exbibyte", "exbibytes"),
        Unit("exabyte", prefix("exa"), "EB", "exabyte", "exabytes"),
        Unit("pebibyte", prefix("pebi"), "PiB", "pebibyte", "pebibytes"),
        Unit("petabyte", prefix("peta"), "PB", "petabyte", "petabytes"),
        Unit("tebibyte", prefix("tebi"), "TiB", "tibibyte", "tibibytes"),
        Unit("terabyte", prefix("tera"), "TB", "terabyte", "terabytes"),
        Unit("gibibyte", prefix("gibi"), "GiB", "gibibyte", "gibibytes"),
        Unit("gigabyte", prefix("giga"), "GB", "gigabyte", "gigabytes"),
        Unit("mebibyte", prefix("mebi"), "MiB", "mebibyte", "mebibytes"),
        Unit("megabyte", prefix("mega"), "MB", "megabyte", "megabytes"),
        Unit("kibibyte", prefix("kibi"), "KiB", "kibibyte", "kibibytes"),
        Unit("kilobyte", prefix("kilo"), "kB", "kilobyte", "kilobytes"),
        Unit("byte", prefix("none"), "B", "byte", "bytes"),
        Unit("octet", prefix("none"), "o", "octet", "octets"),
        Unit("nibble", prefix("none") / 2.0, "nibble", "nibble", "nibbles"),
        Unit("crumb", prefix("none") / 4.0, "crumb", "crumb", "crumbs"),
        Unit("shannon", _BIT, "Sh", "shannon", "shannons"),
        # Base-e: log2(e) bits.
        Unit("natural_unit_of_information", 1.442_695_040_888_963e0 * _BIT, "nat",
             "natural unit of uniformation", "natural units of information"),
        # Base-3: log2(3) bits.
        Unit("trit", 1.584_962_500_721_156e0 * _BIT, "trit", "trit", "trits"),
        # Base-10: log2(10) bits.
        Unit("hartley", 3.321_928_094_887_363e0 * _BIT, "Hart", "hartley", "hartleys"),
        Unit("deciban", 3.321_928_094_887_363e0 * prefix("deci") / 8.0, "deciban",
             "deciban", "decibans"),
    ],
    kind=Kind.INFORMATION,
)


def new(value, unit):
    """Create an amount of information from a value in the given unit."""
    return INFORMATION.new(value, unit)


def units():
    """All information units."""
    return INFORMATION.units()