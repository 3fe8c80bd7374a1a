"""Closed unit catalog and the conversion table between its members.

Every unit name recognized by the library is a member of the [`Unit`][py_dimensional.catalog.Unit]
enumeration. Each unit belongs to exactly one physical [`Dimension`][py_dimensional.catalog.Dimension]
family and carries a linear factor relating it to the raw unit of that family
(meters, seconds, kilograms, radians).

Two units are convertible when they belong to the same family. Conversions are
purely multiplicative; there are no offset units in the catalog.

Examples:
    >>> Unit.is_valid('meters')
    True
    >>> conversion_table.are_convertible(Unit.Meters, 'inches')
    True
    >>> conversion_table.convert(1, 'inches', 'meters')
    0.0254
    >>> round(conversion_table.convert(1, 'meters', 'inches', exponent=2), 2)  # square meters -> square inches
    1550.0
    >>> Unit.Meters(3)
    <Quantity: 3 meters>
"""

from __future__ import annotations

from dataclasses import dataclass, fields, MISSING
from decimal import Decimal
from enum import Enum, IntEnum
from fractions import Fraction
from math import pi
from numbers import Integral, Rational
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Union, TYPE_CHECKING

from typing_extensions import Final

from py_dimensional.exceptions import InvalidUnitError, UnitConversionError
from py_dimensional.logger import logger

if TYPE_CHECKING:
    from py_dimensional.quantity import Quantity


class Dimension(IntEnum):
    """Physical dimension families."""

    Length = 1
    Time = 2
    Mass = 3
    Angle = 4


class Unit(str, Enum):
    """Enumeration of all recognized unit names.

    - Length: meters, inches, feet, yards, millimeters, centimeters, kilometers, miles
    - Time: seconds, milliseconds, minutes, hours
    - Mass: grams, kilograms, pounds, grains
    - Angle: radians, degrees

    Members compare and hash like their names, so ``Unit.Meters == 'meters'``.
    Each member can be used as a callable constructor for quantities:

    Examples:
        >>> width = Unit.Meters(3)
        >>> Unit.Seconds(10).unit
        UnitSignature({'seconds': 1})
    """

    Meters = 'meters'
    Inches = 'inches'
    Feet = 'feet'
    Yards = 'yards'
    Millimeters = 'millimeters'
    Centimeters = 'centimeters'
    Kilometers = 'kilometers'
    Miles = 'miles'

    Seconds = 'seconds'
    Milliseconds = 'milliseconds'
    Minutes = 'minutes'
    Hours = 'hours'

    Grams = 'grams'
    Kilograms = 'kilograms'
    Pounds = 'pounds'
    Grains = 'grains'

    Radians = 'radians'
    Degrees = 'degrees'

    @property
    def dimension(self) -> Dimension:
        """Dimension family of the unit."""
        return UnitPropsDict[self].dimension

    @property
    def factor(self) -> Fraction:
        """Multiplier converting a value in this unit to the family's raw unit."""
        return UnitPropsDict[self].factor

    @property
    def symbol(self) -> str:
        """Short symbol of the unit."""
        return UnitPropsDict[self].symbol

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __call__(self, value: Any) -> Quantity:
        """Create a quantity of this unit, e.g. ``Unit.Meters(3)``."""
        from py_dimensional.quantity import Quantity
        return Quantity(value, self)

    @classmethod
    def is_valid(cls, name: Any) -> bool:
        """Check whether `name` is a recognized unit name."""
        return isinstance(name, str) and name in cls._value2member_map_

    @classmethod
    def lookup(cls, name: Union[str, Unit]) -> Unit:
        """Return the catalog member for `name`.

        Raises:
            InvalidUnitError: If `name` is not a recognized unit name.
        """
        if isinstance(name, cls):
            return name
        if not cls.is_valid(name):
            raise InvalidUnitError(f"Invalid unit {name!r}")
        return cls(name)


class UnitProps(NamedTuple):
    """Catalog entry of a unit.

    Attributes:
        dimension: Dimension family the unit measures.
        factor: Exact linear factor to the raw unit of the family.
        symbol: Standard abbreviation (e.g., 'm', 'in').
    """

    dimension: Dimension
    factor: Fraction
    symbol: str


#: Mapping from Unit -> UnitProps. Raw units: meters, seconds, kilograms, radians.
UnitPropsDict: Mapping[Unit, UnitProps] = MappingProxyType({
    Unit.Meters: UnitProps(Dimension.Length, Fraction(1), 'm'),
    Unit.Inches: UnitProps(Dimension.Length, Fraction('0.0254'), 'in'),
    Unit.Feet: UnitProps(Dimension.Length, Fraction('0.3048'), 'ft'),
    Unit.Yards: UnitProps(Dimension.Length, Fraction('0.9144'), 'yd'),
    Unit.Millimeters: UnitProps(Dimension.Length, Fraction(1, 1_000), 'mm'),
    Unit.Centimeters: UnitProps(Dimension.Length, Fraction(1, 100), 'cm'),
    Unit.Kilometers: UnitProps(Dimension.Length, Fraction(1_000), 'km'),
    Unit.Miles: UnitProps(Dimension.Length, Fraction('1609.344'), 'mi'),

    Unit.Seconds: UnitProps(Dimension.Time, Fraction(1), 's'),
    Unit.Milliseconds: UnitProps(Dimension.Time, Fraction(1, 1_000), 'ms'),
    Unit.Minutes: UnitProps(Dimension.Time, Fraction(60), 'min'),
    Unit.Hours: UnitProps(Dimension.Time, Fraction(3_600), 'h'),

    Unit.Grams: UnitProps(Dimension.Mass, Fraction(1, 1_000), 'g'),
    Unit.Kilograms: UnitProps(Dimension.Mass, Fraction(1), 'kg'),
    Unit.Pounds: UnitProps(Dimension.Mass, Fraction('0.45359237'), 'lb'),
    Unit.Grains: UnitProps(Dimension.Mass, Fraction('0.00006479891'), 'gr'),

    Unit.Radians: UnitProps(Dimension.Angle, Fraction(1), 'rad'),
    # pi has no rational form; the float's exact value is used
    Unit.Degrees: UnitProps(Dimension.Angle, Fraction(pi) / 180, '°'),
})


def rescale(value: Any, factor: Fraction) -> Any:
    """Multiply `value` by an exact `factor` without leaving the value's numeric type.

    * `int` stays `int` when the product is whole, otherwise becomes `float`.
    * `Fraction` and other rationals stay exact.
    * `Decimal` is scaled by the factor's numerator and denominator.
    * Anything else (floats, numpy scalars and arrays) is scaled by `float(factor)`.

    >>> rescale(3, Fraction(1, 3)), rescale(1, Fraction(1, 4)), rescale(Decimal('1.5'), Fraction(12))
    (1, 0.25, Decimal('18.0'))
    """
    if isinstance(value, Decimal):
        return value * factor.numerator / factor.denominator
    if isinstance(value, Integral):
        result = value * factor
        return int(result) if result.denominator == 1 else float(result)
    if isinstance(value, Rational):
        return value * factor
    return value * float(factor)


class ConversionTable:
    """Read-only conversion table over a unit catalog.

    The table answers whether two unit names describe the same physical dimension
    and rescales raw values between them. For a unit raised to a power the
    linear factor is raised to the same power.
    """

    __slots__ = ('_catalog',)

    def __init__(self, catalog: Mapping[Unit, UnitProps]):
        self._catalog: Mapping[Unit, UnitProps] = MappingProxyType(dict(catalog))

    @property
    def catalog(self) -> Mapping[Unit, UnitProps]:
        """Recognized units and their properties."""
        return self._catalog

    def is_unit(self, name: Any) -> bool:
        """Check whether `name` is in the catalog."""
        return Unit.is_valid(name) and Unit(name) in self._catalog

    def props(self, name: Union[str, Unit]) -> UnitProps:
        """Catalog entry for `name`.

        Raises:
            InvalidUnitError: If `name` is not in the catalog.
        """
        unit = Unit.lookup(name)
        try:
            return self._catalog[unit]
        except KeyError:
            raise InvalidUnitError(f"Unit {name!r} has no conversion entry") from None

    def dimension_of(self, name: Union[str, Unit]) -> Dimension:
        return self.props(name).dimension

    def are_convertible(self, unit_a: Union[str, Unit], unit_b: Union[str, Unit]) -> bool:
        """True if both units belong to the same dimension family."""
        return self.props(unit_a).dimension == self.props(unit_b).dimension

    def factor(self, from_unit: Union[str, Unit], to_unit: Union[str, Unit], exponent: int = 1) -> Fraction:
        """Exact scale factor that converts a value in `from_unit`**`exponent` to `to_unit`**`exponent`.

        Raises:
            UnitConversionError: If the units are not in the same dimension family.
        """
        source = self.props(from_unit)
        target = self.props(to_unit)
        if source.dimension != target.dimension:
            raise UnitConversionError(f"Can't convert {from_unit} ({source.dimension.name}) "
                                      f"to {to_unit} ({target.dimension.name})")
        return (source.factor / target.factor) ** exponent

    def convert(self, value: Any, from_unit: Union[str, Unit], to_unit: Union[str, Unit], exponent: int = 1) -> Any:
        """Rescale a raw value from one unit to another.

        Args:
            value: Raw value expressed in `from_unit`.
            from_unit: Current unit name.
            to_unit: Desired unit name.
            exponent: Power both units are raised to. Defaults to 1.

        Returns:
            The raw value expressed in `to_unit`, scaled by `rescale`. Identical units return `value` untouched.

        Raises:
            UnitConversionError: If the units are not in the same dimension family.
        """
        factor = self.factor(from_unit, to_unit, exponent)
        if Unit.lookup(from_unit) == Unit.lookup(to_unit):
            return value
        return rescale(value, factor)


#: Process-wide conversion table over the full catalog.
conversion_table: Final[ConversionTable] = ConversionTable(UnitPropsDict)


class PreferredUnitsMeta(type):
    """Provide representation method for static dataclasses."""

    def __repr__(cls):
        return '\n'.join(f'{field} = {getattr(cls, field)!r}'
                         for field in getattr(cls, '__dataclass_fields__'))


@dataclass
class PreferredUnits(metaclass=PreferredUnitsMeta):
    """Default unit per dimension family.

    Used when a deferred expression is reduced without an explicit target: every
    dimension family of the expression's leaves is expressed in the preferred unit
    for that family.

    Default Configuration:
        * length: meters
        * time: seconds
        * mass: kilograms
        * angle: radians

    Examples:
        >>> PreferredUnits.length = Unit.Inches
        >>> PreferredUnits.set(length='feet', time=Unit.Minutes)
        >>> PreferredUnits.restore_defaults()
    """

    length: Unit = Unit.Meters
    time: Unit = Unit.Seconds
    mass: Unit = Unit.Kilograms
    angle: Unit = Unit.Radians

    @classmethod
    def restore_defaults(cls):
        """Reset all preferred units to their default values."""
        for f in fields(cls):
            if f.default is not MISSING:
                setattr(cls, f.name, f.default)

    @classmethod
    def for_dimension(cls, dimension: Dimension) -> Unit:
        """Preferred unit for a dimension family."""
        return getattr(cls, dimension.name.lower())

    @classmethod
    def set(cls, **kwargs: Union[Unit, str]):
        """Set preferred units from keyword arguments.

        Invalid attributes, names outside the catalog, and units of the wrong family
        are logged as warnings but do not raise exceptions.
        """
        for attribute, value in kwargs.items():
            if attribute not in cls.__dataclass_fields__:
                logger.warning(f"{attribute=} not found in preferred_units")
                continue
            if not (isinstance(value, Unit) or Unit.is_valid(value)):
                logger.warning(f"{value=} not a member of Unit")
                continue
            unit = Unit.lookup(value)
            if unit.dimension.name.lower() != attribute:
                logger.warning(f"{unit} is not a {attribute} unit")
                continue
            setattr(cls, attribute, unit)


__all__ = (
    'Dimension',
    'Unit',
    'UnitProps',
    'UnitPropsDict',
    'ConversionTable',
    'conversion_table',
    'PreferredUnits',
)
