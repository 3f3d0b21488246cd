"""Luminance (base unit candela per square meter, cd · m⁻²)."""

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


def _prefixed_units():
    for name, symbol in _SI_PREFIXES:
        candela = f"{'' if name == 'none' else name}candela"
        yield Unit(
            f"{candela}_per_square_meter",
            prefix(name),
            f"{symbol}cd/m²",
            f"{candela} per square meter",
            f"{candela}s per square meter",
        )


def _per_area(length, symbol, factor):
    return Unit(
        f"candela_per_square_{length}",
        factor,
        f"cd/{symbol}²",
        f"candela per square {length}",
        f"candelas per square {length}",
    )


LUMINANCE = QuantityType(
    "Luminance",
    "luminance",
    Dimension(length=-2, luminous_intensity=1),
    [
        *_prefixed_units(),
        _per_area("picometer", "pm", prefix("yotta")),
        _per_area("nanometer", "nm", prefix("exa")),
        _per_area("micrometer", "µm", prefix("tera")),
        _per_area("millimeter", "mm", prefix("mega")),
        _per_area("centimeter", "cm", 1.0e4),
        _per_area("kilometer", "km", prefix("micro")),
        _per_area("megameter", "Mm", prefix("pico")),
        _per_area("gigameter", "Gm", prefix("atto")),
        _per_area("terameter", "Tm", prefix("yocto")),
        _per_area("inch", "in", 1.550_003_100_006_200_2e3),
        _per_area("foot", "ft", 1.076_391_041_670_972_2e1),
        Unit("footlambert", 3.426_259_099_635_390_5e0, "fl", "footlambert", "footlamberts"),
        Unit("lambert", 3.183_098_861_837_906_7e3, "la", "lambert", "lamberts"),
        Unit("stilb", 1.0e4, "sb", "stilb", "stilbs"),
    ],
)


def new(value, unit):
    """Create a luminance from a value in the given unit."""
    return LUMINANCE.new(value, unit)


def units():
    """All luminance units."""
    return LUMINANCE.units()