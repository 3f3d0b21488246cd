"""Dimension-checked physical quantities and units of the International System of Quantities."""

__version__ = "0.1.0"

__all__ = [
    "core",
    "frequency",
    "heat_capacity",
    "heat_flux_density",
    "inductance",
    "information",
    "information_rate",
    "jerk",
    "length",
    "luminance",
    "luminous_intensity",
    "magnetic_flux",
    "magnetic_flux_density",
    "mass",
    "mass_density",
    "mass_rate",
    "molar_energy",
]