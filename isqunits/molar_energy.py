"""Molar energy (base unit joule per mole, kg · m² · s⁻² · mol⁻¹)."""

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

_WATT_HOURS = (
    ("peta", "P", 3.6e18),
    ("tera", "T", 3.6e15),
    ("giga", "G", 3.6e12),
    ("mega", "M", 3.6e9),
    ("kilo", "k", 3.6e6),
    ("hecto", "h", 3.6e5),
    ("deca", "da", 3.6e4),
    ("none", "", 3.6e3),
    ("milli", "m", 3.6e0),
    ("micro", "µ", 3.6e-3),
)


def _joule_units():
    for name, symbol in _SI_PREFIXES:
        joule = f"{'' if name == 'none' else name}joule"
        yield Unit(
            f"{joule}_per_mole",
            prefix(name),
            f"{symbol}J/mol",
            f"{joule} per mole",
            f"{joule}s per mole",
        )


def _watt_hour_units():
    for name, symbol, factor in _WATT_HOURS:
        watt = f"{'' if name == 'none' else name}watt"
        yield Unit(
            f"{watt}_hour_per_mole",
            factor,
            f"{symbol}W · h/mol",
            f"{watt} hour per mole",
            f"{watt} hours per mole",
        )


MOLAR_ENERGY = QuantityType(
    "MolarEnergy",
    "molar energy",
    Dimension(length=2, mass=1, time=-2, amount_of_substance=-1),
    [
        Unit("kilogram_square_meter_per_second_squared_mole", prefix("kilo") / _KILO,
             "kg · m²/(s² · mol)", "kilogram square meter per second squared mole",
             "kilograms square meter per second squared mole"),
        *_joule_units(),
        *_watt_hour_units(),
        Unit("btu_it_per_mole", 1.055_056e3, "Btu (IT)/mol",
             "British thermal unit (IT) per mole", "British thermal units (IT) per mole"),
        Unit("btu_per_mole", 1.054_350e3, "Btu/mol", "British thermal unit per mole",
             "British thermal units per mole"),
        Unit("btu_39_per_mole", 1.059_67e3, "Btu₃₉/mol",
             "British thermal unit (39 °F) per mole", "British thermal units (39 °F) per mole"),
        Unit("btu_59_per_mole", 1.054_80e3, "Btu₅₉/mol",
             "British thermal unit (59 °F) per mole", "British thermal units (59 °F) per mole"),
        Unit("btu_60_per_mole", 1.054_68e3, "Btu₆₀/mol",
             "British thermal unit (60 °F) per mole", "British thermal units (60 °F) per mole"),
        Unit("calorie_it_per_mole", 4.186_8e0, "cal (IT)/mol", "calorie (IT) per mole",
             "calories (IT) per mole"),
        Unit("calorie_per_mole", 4.184e0, "cal/mol", "calorie per mole", "calories per mole"),
        Unit("calorie_15_per_mole", 4.185_80e0, "cal₁₅/mol", "calorie (15 °C) per mole",
             "calories (15 °C) per mole"),
        Unit("calorie_20_per_mole", 4.181_90e0, "cal₂₀/mol", "calorie (20 °C) per mole",
             "calories (20 °C) per mole"),
        Unit("calorie_it_nutrition_per_mole", 4.186_8e3, "Cal (IT)/mol",
             "Calorie (IT) per mole", "Calories (IT) per mole"),
        Unit("calorie_nutrition_per_mole", 4.184e3, "Cal/mol", "Calorie per mole",
             "Calories per mole"),
        Unit("electronvolt_per_mole", 1.602_177e-19, "eV/mol", "electronvolt per mole",
             "electronvolts per mole"),
        Unit("erg_per_mole", 1.0e-7, "erg/mol", "erg per mole", "ergs per mole"),
        Unit("foot_poundal_per_mole", 4.214_011e-2, "ft · pdl/mol", "foot poundal per mole",
             "foot poundals per mole"),
        Unit("foot_pound_force_per_mole", 1.355_818e0, "ft · lbf/mol",
             "foot pound-force per mole", "foot pounds-force per mole"),
        Unit("kilocalorie_it_per_mole", 4.186_8e3, "kcal (IT)/mol", "kilocalorie (IT) per mole",
             "kilocalories (IT) per mole"),
        Unit("kilocalorie_per_mole", 4.184e3, "kcal/mol", "kilocalorie per mole",
             "kilocalories per mole"),
        Unit("quad_per_mole", 1.055_056e18, "10¹⁵ Btu (IT)/mol", "quad per mole",
             "quads per mole"),
        Unit("therm_ec_per_mole", 1.055_06e8, "thm (EC)/mol", "therm (EC) per mole",
             "therms (EC) per mole"),
        Unit("therm_us_per_mole", 1.054_804e8, "thm/mol", "therm per mole", "therms per mole"),
        Unit("ton_tnt_per_mole", 4.184e9, "t of TNT/mol", "ton of TNT per mole",
             "tons of TNT per mole"),
        Unit("watt_second_per_mole", 1.0e0, "W · s/mol", "watt second per mole",
             "watt seconds per mole"),
    ],
)


def new(value, unit):
    """Create a molar energy from a value in the given unit."""
    return MOLAR_ENERGY.new(value, unit)


def units():
    """All molar energy units."""
    return MOLAR_ENERGY.units()