"""Dimensions, units and quantities of the International System of Quantities."""

from __future__ import annotations

import enum
import math
from dataclasses import astuple, dataclass, field, replace
from functools import total_ordering
from numbers import Real
from typing import Iterable, Union


class Kind(enum.Enum):
    """Separates quantities that share a dimension but are not interchangeable."""

    DEFAULT = "default"
    ANGLE = "angle"
    SOLID_ANGLE = "solid angle"
    INFORMATION = "information"
    TEMPERATURE = "temperature"
    CONSTITUENT_CONCENTRATION = "constituent concentration"

    @property
    def additive(self) -> bool:
        """Whether quantities of this kind may be added, subtracted or negated."""
        return self is not Kind.TEMPERATURE


def _convertible(source: Kind, target: Kind) -> bool:
    if source is target:
        return True
    if Kind.TEMPERATURE in (source, target):
        return False
    return Kind.DEFAULT in (source, target)


_SUPERSCRIPTS = str.maketrans("-0123456789", "⁻⁰¹²³⁴⁵⁶⁷⁸⁹")
_SYMBOLS = ("L", "M", "T", "I", "Th", "N", "J")


@dataclass(frozen=True)
class Dimension:
    """Exponents of the seven ISQ base quantities."""

    length: int = 0
    mass: int = 0
    time: int = 0
    electric_current: int = 0
    thermodynamic_temperature: int = 0
    amount_of_substance: int = 0
    luminous_intensity: int = 0

    def __mul__(self, other: Dimension) -> Dimension:
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(*(a + b for a, b in zip(astuple(self), astuple(other))))

    def __truediv__(self, other: Dimension) -> Dimension:
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(*(a - b for a, b in zip(astuple(self), astuple(other))))

    def __pow__(self, exponent: int) -> Dimension:
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError("dimensions can only be raised to integer powers")
        return Dimension(*(a * exponent for a in astuple(self)))

    def is_dimensionless(self) -> bool:
        """True when every exponent is zero."""
        return not any(astuple(self))

    def __str__(self) -> str:
        parts = []
        for symbol, exponent in zip(_SYMBOLS, astuple(self)):
            if exponent == 1:
                parts.append(symbol)
            elif exponent:
                parts.append(symbol + str(exponent).translate(_SUPERSCRIPTS))
        return "".join(parts) or "1"


DIMENSIONLESS = Dimension()

_PREFIXES = {
    "yotta": 1.0e24,
    "zetta": 1.0e21,
    "exa": 1.0e18,
    "peta": 1.0e15,
    "tera": 1.0e12,
    "giga": 1.0e9,
    "mega": 1.0e6,
    "kilo": 1.0e3,
    "hecto": 1.0e2,
    "deca": 1.0e1,
    "none": 1.0,
    "deci": 1.0e-1,
    "centi": 1.0e-2,
    "milli": 1.0e-3,
    "micro": 1.0e-6,
    "nano": 1.0e-9,
    "pico": 1.0e-12,
    "femto": 1.0e-15,
    "atto": 1.0e-18,
    "zepto": 1.0e-21,
    "yocto": 1.0e-24,
    "kibi": float(1024),
    "mebi": float(1024**2),
    "gibi": float(1024**3),
    "tebi": float(1024**4),
    "pebi": float(1024**5),
    "exbi": float(1024**6),
    "zebi": float(1024**7),
    "yobi": float(1024**8),
}


def prefix(name: str) -> float:
    """Return the factor of a decimal or binary prefix; "none" is 1."""
    try:
        return _PREFIXES[name]
    except KeyError:
        raise ValueError(f"unknown prefix {name!r}") from None


@dataclass(frozen=True)
class Unit:
    """A unit: its factor is the size of one unit in the base unit."""

    name: str
    factor: float
    abbreviation: str
    singular: str
    plural: str
    dimension: Union[Dimension, None] = None
    kind: Union[Kind, None] = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.factor) or self.factor <= 0:
            raise ValueError(f"unit {self.name!r} needs a positive finite factor")


class QuantityType:
    """A named quantity, such as length, with its dimension, kind and units."""

    def __init__(
        self,
        name: str,
        description: str,
        dimension: Dimension,
        units: Iterable[Unit],
        kind: Kind = Kind.DEFAULT,
    ) -> None:
        self.name = name
        self.description = description
        self.dimension = dimension
        self.kind = kind
        self._units: dict[str, Unit] = {}
        for unit in units:
            if unit.name in self._units:
                raise ValueError(f"{name} already has a unit named {unit.name!r}")
            self._units[unit.name] = replace(unit, dimension=dimension, kind=kind)

    def __repr__(self) -> str:
        return f"QuantityType({self.name!r}, {str(self.dimension)!r}, {self.kind.name})"

    def new(self, value: float, unit: Union[Unit, str]) -> Quantity:
        """Create a quantity of this type from a value measured in `unit`."""
        resolved = self._resolve(unit)
        return Quantity(value * resolved.factor, self.dimension, self.kind, self)

    def unit(self, name: str) -> Unit:
        """Look a unit up by its name."""
        try:
            return self._units[name]
        except KeyError:
            raise KeyError(f"{self.name} has no unit named {name!r}") from None

    def find(self, abbreviation: str) -> Unit:
        """Look a unit up by its abbreviation."""
        for unit in self._units.values():
            if unit.abbreviation == abbreviation:
                return unit
        raise KeyError(f"{self.name} has no unit abbreviated {abbreviation!r}")

    def units(self) -> tuple[Unit, ...]:
        """All units, in the order they were defined."""
        return tuple(self._units.values())

    def _resolve(self, unit: Union[Unit, str]) -> Unit:
        if isinstance(unit, str):
            return self.unit(unit)
        if unit.dimension is not None and unit.dimension != self.dimension:
            raise TypeError(f"unit {unit.name!r} does not measure {self.description}")
        if unit.kind is not None and unit.kind is not self.kind:
            raise TypeError(f"unit {unit.name!r} is of another kind than {self.description}")
        return unit


@total_ordering
@dataclass(frozen=True)
class Quantity:
    """A value held in base units together with its dimension and kind."""

    value: float
    dimension: Dimension = DIMENSIONLESS
    kind: Kind = Kind.DEFAULT
    quantity_type: Union[QuantityType, None] = field(default=None, compare=False)

    def _check_compatible(self, other: Quantity, action: str) -> None:
        if self.dimension != other.dimension:
            raise TypeError(
                f"cannot {action} quantities of dimensions {self.dimension} and {other.dimension}"
            )
        if self.kind is not other.kind:
            raise TypeError(
                f"cannot {action} quantities of kinds {self.kind.name} and {other.kind.name}"
            )

    def _check_additive(self) -> None:
        if not self.kind.additive:
            raise TypeError(f"quantities of kind {self.kind.name} cannot be added or negated")

    def get(self, unit: Union[Unit, str]) -> float:
        """Return the value measured in `unit`."""
        if isinstance(unit, str):
            if self.quantity_type is None:
                raise ValueError(
                    "unit names need a quantity type; convert with into() first"
                )
            unit = self.quantity_type.unit(unit)
        if unit.dimension is not None and unit.dimension != self.dimension:
            raise TypeError(f"unit {unit.name!r} has dimension {unit.dimension}")
        if unit.kind is not None and unit.kind is not self.kind:
            raise TypeError(f"unit {unit.name!r} is of kind {unit.kind.name}")
        return self.value / unit.factor

    def into(self, quantity_type: QuantityType) -> Quantity:
        """Reinterpret as `quantity_type`, changing kind where that is allowed."""
        if quantity_type.dimension != self.dimension:
            raise TypeError(
                f"cannot convert dimension {self.dimension} into {quantity_type.dimension}"
            )
        if not _convertible(self.kind, quantity_type.kind):
            raise TypeError(
                f"cannot convert kind {self.kind.name} into {quantity_type.kind.name}"
            )
        return replace(self, kind=quantity_type.kind, quantity_type=quantity_type)

    def approx_eq(self, other: Quantity, rel_tol: float = 1e-9) -> bool:
        """Compare values within a relative tolerance."""
        self._check_compatible(other, "compare")
        return math.isclose(self.value, other.value, rel_tol=rel_tol)

    def __add__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_compatible(other, "add")
        self._check_additive()
        return replace(
            self,
            value=self.value + other.value,
            quantity_type=self.quantity_type or other.quantity_type,
        )

    def __sub__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_compatible(other, "subtract")
        self._check_additive()
        return replace(
            self,
            value=self.value - other.value,
            quantity_type=self.quantity_type or other.quantity_type,
        )

    def __neg__(self) -> Quantity:
        self._check_additive()
        return replace(self, value=-self.value)

    def __abs__(self) -> Quantity:
        return replace(self, value=abs(self.value))

    def __mul__(self, other: Union[Quantity, float]) -> Quantity:
        if isinstance(other, Quantity):
            return Quantity(self.value * other.value, self.dimension * other.dimension)
        if isinstance(other, Real):
            return replace(self, value=self.value * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Quantity:
        if isinstance(other, Real):
            return replace(self, value=other * self.value)
        return NotImplemented

    def __truediv__(self, other: Union[Quantity, float]) -> Quantity:
        if isinstance(other, Quantity):
            return Quantity(self.value / other.value, self.dimension / other.dimension)
        if isinstance(other, Real):
            return replace(self, value=self.value / other)
        return NotImplemented

    def __rtruediv__(self, other: float) -> Quantity:
        if isinstance(other, Real):
            return Quantity(other / self.value, DIMENSIONLESS / self.dimension)
        return NotImplemented

    def __lt__(self, other: Quantity) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_compatible(other, "compare")
        return self.value < other.value