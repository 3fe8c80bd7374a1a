"""Quantities: raw numeric values paired with an optional unit signature.

A [`Quantity`][py_dimensional.quantity.Quantity] wraps any value that supports ordinary
arithmetic (int, float, Fraction, Decimal, numpy scalars, ...) and tracks its
[`UnitSignature`][py_dimensional.signature.UnitSignature]. A quantity without a signature
behaves like a plain number.

Arithmetic rules:
    * ``+`` and ``-`` require identical signatures. Different signatures produce a deferred
      [`Addition`][py_dimensional.expression.Addition] or
      [`Subtraction`][py_dimensional.expression.Subtraction] instead of failing.
    * ``*`` and ``/`` compose signatures; units that cancel leave a unitless quantity.
    * ``**`` raises every exponent of the signature.
    * Zero operands short-circuit: ``0 + b`` is ``b`` unchanged, ``a * 0`` is the zero operand.
    * Operands other than numbers, quantities, expressions, lists and tuples are
      rejected with ``NotImplemented``, so Python raises the usual ``TypeError``.

Examples:
    >>> width = Quantity(3, 'meters')
    >>> width * Quantity(2, 'meters')
    <Quantity: 6 meters^2>
    >>> Quantity(6, ('meters', 2)) / Quantity(2, 'meters')
    <Quantity: 3.0 meters>
    >>> Quantity(1, 'meters') + Quantity(2, 'inches')
    <Addition: 1 meters + 2 inches>
    >>> Quantity(0, 'meters') == 0
    True
    >>> Quantity(3, 'meters').per_seconds
    <Quantity: 3 meters seconds^-1>
    >>> Quantity(1, 'feet').inches
    <Quantity: 12 inches>
"""

from __future__ import annotations

import numbers
import operator
from functools import partialmethod
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar, Union

from py_dimensional.catalog import Unit, conversion_table
from py_dimensional.exceptions import LiteralUnitsError, UnitConversionError, UnitTypeError
from py_dimensional.expression import Addition, Division, Operator, Subtraction
from py_dimensional.logger import logger
from py_dimensional.settings import LiteralPolicy, Settings
from py_dimensional.signature import SignatureLike, UnitSignature

__all__ = ('Quantity', 'is_zero', 'lift', 'unwrap', 'is_unit')

_ValueType = TypeVar('_ValueType')


def is_zero(value: Any) -> bool:
    """Fast zero test on a raw value.

    Used by the arithmetic shortcuts instead of full quantity equality, so it ignores
    units entirely. Values whose comparison with 0 has no single truth value (arrays with
    several elements) are never zero.
    """
    try:
        return bool(value == 0)
    except ValueError:
        return False


def _is_zero_operand(value: Any) -> bool:
    if isinstance(value, Operator):
        return False
    if isinstance(value, Quantity):
        return is_zero(value.value)
    return is_zero(value)


def _is_operand(value: Any) -> bool:
    return isinstance(value, (numbers.Number, list, tuple, Quantity, Operator))


class Quantity(Generic[_ValueType]):
    """A raw value with an optional unit signature.

    Args:
        value: Raw numeric value.
        unit: Units of the value: a unit name, a ``(name, exponent)`` pair, a mapping of
            names to exponents, a `UnitSignature`, or None for a unitless value.

    Raises:
        InvalidUnitError: If a unit name is not in the catalog.
        EmptyUnitsError: If `unit` has no non-zero exponent.
    """

    __slots__ = ('_value', '_unit')

    def __init__(self, value: _ValueType, unit: Optional[SignatureLike] = None):
        if isinstance(value, (Quantity, Operator)):
            raise TypeError(f"Can't wrap {type(value).__name__} in a Quantity")
        self._value: _ValueType = value
        self._unit: Optional[UnitSignature] = UnitSignature.coerce(unit)

    @property
    def value(self) -> _ValueType:
        """Raw value in the quantity's own units."""
        return self._value

    @property
    def unit(self) -> Optional[UnitSignature]:
        """Unit signature, or None for a unitless value."""
        return self._unit

    def __reduce__(self):
        return self.__class__, (self._value, self._unit)

    def __str__(self) -> str:
        if self._unit is None:
            return str(self._value)
        return f'{self._value} {self._unit}'

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}: {self}>'

    def __format__(self, format_spec: str) -> str:
        if self._unit is None:
            return format(self._value, format_spec)
        return f'{format(self._value, format_spec)} {self._unit}'

    def __bool__(self) -> bool:
        return bool(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __hash__(self) -> int:
        # zero of any unit equals the literal 0, so it has to hash like it
        if self._unit is None or is_zero(self._value):
            return hash(self._value)
        return hash((self._value, self._unit))

    def __getattr__(self, name: str) -> Any:
        if not name.startswith('_'):
            if name.startswith('is_') and Unit.is_valid(name[3:]):
                return self._unit is not None and self._unit.is_a(name[3:])
            if name.startswith('per_') and Unit.is_valid(name[4:]):
                return self.per(name[4:])
            if name.startswith('to_') and Unit.is_valid(name[3:]):
                return self.convert_to(name[3:])
            if Unit.is_valid(name):
                if self._unit is None:
                    return self.__class__(self._value, name)
                return self.convert_to(name)
        raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

    def coerce(self, other: Any) -> Tuple[Quantity, Quantity]:
        """Lift a raw value so `other <op> self` can be retried with both sides normalized.

        Returns:
            ``(lifted_other, self)``
        """
        if isinstance(other, Quantity):
            return other, self
        return self.__class__(other), self

    @classmethod
    def _lift(cls, other: Any) -> Union[Quantity, Operator]:
        if isinstance(other, (Quantity, Operator)):
            return other
        return cls(other)

    def _map(self, op: Callable[[Any, Any], Any], items: Union[list, tuple]) -> Union[list, tuple]:
        return type(items)(op(self, item) for item in items)

    # region Conversion
    def convert_to(self, units: SignatureLike) -> Quantity:
        """Convert to the desired units.

        Args:
            units: Target units.

        Returns:
            `self` if already in `units`, otherwise a new quantity with a rescaled value.

        Raises:
            UnitConversionError: If this quantity has no units or `units` describe other dimensions.
        """
        units = UnitSignature(units)
        if self._unit is None:
            raise UnitConversionError(f"Can't convert a unitless value to: {units}")
        if not self._unit.valid_conversion(units):
            raise UnitConversionError(f"Can't convert '{self._unit}' to: {units}")
        if self._unit == units:
            return self
        return self.__class__(self._unit.convert(self._value, units), units)

    to = convert_to
    __lshift__ = convert_to

    def get_in(self, units: SignatureLike) -> Any:
        """Raw value of this quantity expressed in `units`."""
        return self.convert_to(units).value

    __rshift__ = get_in

    def per(self, unit: Union[Unit, str], power: int = 1) -> Quantity:
        """Same value with the exponent of `unit` decremented by `power`.

        Examples:
            >>> Quantity(10, 'meters').per('seconds', 2)
            <Quantity: 10 meters seconds^-2>
        """
        if self._unit is None:
            return self.__class__(self._value, UnitSignature((unit, -power)))
        return self.__class__(self._value, self._unit.per(unit, power))
    # endregion Conversion

    # region Comparison
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Operator):
            return False
        if not isinstance(other, Quantity):
            if not isinstance(other, numbers.Number):
                return NotImplemented
            other = self.__class__(other)
        if self._unit == other._unit:
            return self._value == other._value
        if self._unit is None or other._unit is None:
            return is_zero(self._value) and is_zero(other._value)
        return False

    def _aligned_values(self, other: Quantity) -> Tuple[Any, Any]:
        if self._unit is None or other._unit is None or self._unit == other._unit:
            return self._value, other._value
        if not other._unit.valid_conversion(self._unit):
            raise UnitConversionError(f"Can't compare '{self._unit}' with '{other._unit}'")
        return self._value, other._unit.convert(other._value, self._unit)

    def compare(self, other: Any) -> Union[int, List[int]]:
        """Three-way comparison: -1, 0 or 1; a list for a list or tuple of values.

        Raises:
            UnitConversionError: If both sides have units of different dimensions.
        """
        if isinstance(other, (list, tuple)):
            return [self.compare(item) for item in other]
        if isinstance(other, Operator):
            raise UnitTypeError(f"Can't compare {self!r} with deferred {other!r}")
        lhs, rhs = self._aligned_values(self._lift(other))
        return (lhs > rhs) - (lhs < rhs)

    def _order(self, op: Callable[[Any, Any], bool], other: Any) -> Any:
        if isinstance(other, (list, tuple)):
            return [op(self, item) for item in other]
        if not isinstance(other, Quantity):
            if not isinstance(other, numbers.Number):
                return NotImplemented
            other = self.__class__(other)
        lhs, rhs = self._aligned_values(other)
        return op(lhs, rhs)

    __lt__ = partialmethod(_order, operator.lt)
    __le__ = partialmethod(_order, operator.le)
    __gt__ = partialmethod(_order, operator.gt)
    __ge__ = partialmethod(_order, operator.ge)
    # endregion Comparison

    # region Arithmetic
    def __pos__(self) -> Quantity:
        return self

    def __neg__(self) -> Quantity:
        return self.__class__(-self._value, self._unit)

    def __abs__(self) -> Quantity:
        return self.__class__(abs(self._value), self._unit)

    def _add_like(self, other: Quantity, op: Callable[[Any, Any], Any], deferred: type) -> Any:
        if self._unit is not None and other._unit is not None:
            if self._unit == other._unit:
                return self.__class__(op(self._value, other._value), self._unit)
            logger.debug(f"Deferring {deferred.__name__.lower()} of '{self._unit}' and '{other._unit}'")
            return deferred(self, other)
        if self._unit is None and other._unit is None:
            return self.__class__(op(self._value, other._value))
        if Settings.LITERAL_POLICY is LiteralPolicy.Adopt:
            unit = self._unit if self._unit is not None else other._unit
            return self.__class__(op(self._value, other._value), unit)
        raise LiteralUnitsError(f"Can't {op.__name__} a number with units and a literal: {self}, {other}")

    def __add__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        if isinstance(other, (list, tuple)):
            return self._map(operator.add, other)
        if is_zero(self._value):
            return other
        if _is_zero_operand(other):
            return self
        other = self._lift(other)
        if isinstance(other, Operator):
            return Addition(self) + other
        return self._add_like(other, operator.add, Addition)

    def __sub__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        if isinstance(other, (list, tuple)):
            return self._map(operator.sub, other)
        if _is_zero_operand(other):
            return self
        other = self._lift(other)
        if isinstance(other, Operator):
            return Subtraction(self) - other
        return self._add_like(other, operator.sub, Subtraction)

    def __mul__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        if isinstance(other, (list, tuple)):
            return self._map(operator.mul, other)
        if is_zero(self._value):
            return self
        if _is_zero_operand(other):
            return other
        other = self._lift(other)
        if isinstance(other, Operator):
            return other * self
        if self._unit is not None:
            unit = self._unit.compose(other._unit)
        else:
            unit = other._unit
        return self.__class__(self._value * other._value, unit)

    def __truediv__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        if isinstance(other, (list, tuple)):
            return self._map(operator.truediv, other)
        if is_zero(self._value):
            return self
        other = self._lift(other)
        if isinstance(other, Operator):
            return Division(self, other)
        if self._unit is not None:
            unit = self._unit / other._unit
        elif other._unit is not None:
            unit = other._unit.invert()
        else:
            unit = None
        return self.__class__(self._value / other._value, unit)

    def __pow__(self, power: Any) -> Quantity:
        if not isinstance(power, (numbers.Number, Quantity)):
            return NotImplemented
        if isinstance(power, Quantity):
            if power.unit is not None:
                raise UnitTypeError(f"Exponent must be unitless, got {power!r}")
            power = power.value
        unit = self._unit ** power if self._unit is not None else None
        return self.__class__(self._value ** power, unit)

    def __radd__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        if isinstance(other, (list, tuple)):
            return type(other)(item + self for item in other)
        lhs, rhs = self.coerce(other)
        return lhs + rhs

    def __rsub__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        if isinstance(other, (list, tuple)):
            return type(other)(item - self for item in other)
        lhs, rhs = self.coerce(other)
        return lhs - rhs

    def __rmul__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        if isinstance(other, (list, tuple)):
            return type(other)(item * self for item in other)
        lhs, rhs = self.coerce(other)
        return lhs * rhs

    def __rtruediv__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        if isinstance(other, (list, tuple)):
            return type(other)(item / self for item in other)
        lhs, rhs = self.coerce(other)
        return lhs / rhs

    def __rpow__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        lhs, rhs = self.coerce(other)
        return lhs ** rhs
    # endregion Arithmetic


def lift(value: Any, unit: Optional[SignatureLike] = None) -> Quantity:
    """Create a quantity from a raw value and an optional unit."""
    return Quantity(value, unit)


def unwrap(quantity: Quantity) -> Tuple[Any, Optional[UnitSignature]]:
    """Raw value and unit signature (or None) of a quantity."""
    return quantity.value, quantity.unit


def is_unit(name: Any) -> bool:
    """True if `name` is a recognized unit name."""
    return conversion_table.is_unit(name)
