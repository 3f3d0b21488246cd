# isqunits

Physical quantities that carry their dimension with their value. Dimensions
follow the International System of Quantities and its seven base quantities:
length, mass, time, electric current, thermodynamic temperature, amount of
substance and luminous intensity. When quantities are multiplied or divided,
the result has the combined dimension. Adding or subtracting quantities whose
dimensions or kinds differ raises `TypeError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Quantity modules

Each module defines one quantity type (for example `length.LENGTH`) and two
functions. `new(value, unit)` creates a quantity. `units()` returns every
unit in the order it was defined.

- `isqunits.length`
- `isqunits.mass`
- `isqunits.luminous_intensity`
- `isqunits.frequency`
- `isqunits.jerk`
- `isqunits.mass_rate`
- `isqunits.mass_density`
- `isqunits.inductance`
- `isqunits.magnetic_flux`
- `isqunits.magnetic_flux_density`
- `isqunits.heat_capacity`
- `isqunits.heat_flux_density`
- `isqunits.information`
- `isqunits.information_rate`
- `isqunits.luminance`
- `isqunits.molar_energy`

## Usage

```python
from isqunits import frequency, length, mass, mass_density

distance = length.new(3.0, "kilometer")
distance.get("meter")            # 3000.0
distance.get("mile")

weight = mass.new(2.0, "pound")
weight.get("kilogram")           # 0.9071848

# Units are given by name. To look a unit up by its abbreviation, use find().
inch = length.LENGTH.find("in")
length.new(12.0, inch).get("foot")   # about 1.0

# The result of arithmetic has the right dimension but no quantity type yet.
# into() attaches one, and after that unit names work again.
density = (weight / (distance * distance * distance)).into(mass_density.MASS_DENSITY)
density.get("kilogram_per_cubic_meter")

# The value attribute is always in base units.
period = 1 / frequency.new(50.0, "hertz")
period.value                     # 0.02 (seconds)
```

`Quantity.approx_eq(other, rel_tol=1e-9)` compares two quantities within a
relative tolerance. The ordering operators (`<`, `<=`, `>`, `>=`) raise
`TypeError` when the dimensions or kinds do not match. An unknown unit name
raises `KeyError`.

## Kinds

Some quantities share a dimension and are still kept apart by their `Kind`.
Information and information rate have kind `Kind.INFORMATION`. They cannot be
added to a plain dimensionless quantity or to a frequency. `Quantity.into`
changes the kind on purpose while keeping the dimension. A quantity can move
between `Kind.DEFAULT` and any other kind except `Kind.TEMPERATURE`.
Quantities of `Kind.TEMPERATURE` cannot be added, subtracted or negated.

## Building blocks

`isqunits.core` holds the pieces the quantity modules are made from:

- `Dimension`: the exponents of the base quantities, with `*`, `/` and `**`.
- `Kind`
- `Unit`: a name, a factor to the base unit, an abbreviation and singular and plural names.
- `QuantityType`: methods `new`, `unit`, `find` and `units`.
- `Quantity`
- `prefix(name)`: the factor of an SI or binary prefix, with `"none"` for 1.

## What the package does not cover

Only the quantities listed above have modules. Time, area, volume, energy,
power, temperature and other quantities have none. Products and quotients of
quantities still work, and the result always carries the right `Dimension`.
To name units for such a result, build a `QuantityType` with `Unit`s of your
own. The package does not parse or format quantities as text.