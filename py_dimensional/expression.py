"""Deferred expressions over quantities whose units can't be combined yet.

Adding `3 meters` to `2 inches` can't produce a single quantity without choosing a unit
for the result. Instead of failing, [`Quantity`][py_dimensional.quantity.Quantity] builds an
[`Addition`][py_dimensional.expression.Addition] that keeps both operands. The expression can
take part in further arithmetic and is reduced to a single quantity once a target unit is
supplied.

Examples:
    >>> from py_dimensional import Unit
    >>> total = Unit.Meters(1) + Unit.Centimeters(50)
    >>> total
    <Addition: 1 meters + 50 centimeters>
    >>> total.convert_to('meters')
    <Quantity: 1.5 meters>
    >>> total.centimeters  # reduce via unit-named accessor
    <Quantity: 150 centimeters>
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import Any, Callable, ClassVar, Iterator, Optional, Tuple, TYPE_CHECKING

from py_dimensional.catalog import PreferredUnits, Unit
from py_dimensional.exceptions import UnitConversionError
from py_dimensional.logger import logger
from py_dimensional.settings import Settings
from py_dimensional.signature import SignatureLike, UnitSignature

if TYPE_CHECKING:
    from py_dimensional.quantity import Quantity

__all__ = ('Operator', 'Addition', 'Subtraction', 'Division')


def _lift(value: Any) -> Any:
    from py_dimensional.quantity import Quantity
    if isinstance(value, (Quantity, Operator)):
        return value
    return Quantity(value)


def _is_zero(value: Any) -> bool:
    from py_dimensional.quantity import Quantity, is_zero
    if isinstance(value, Operator):
        return False
    return is_zero(value.value if isinstance(value, Quantity) else value)


def _negatable(operand: Any) -> bool:
    """False if a `Division` appears anywhere in the operand's tree."""
    if isinstance(operand, Division):
        return False
    if isinstance(operand, Operator):
        return all(_negatable(item) for item in operand.operands)
    return True


class Operator:
    """Base class of deferred expressions.

    Holds an ordered, non-empty tuple of operands (quantities or nested expressions).
    Two expressions are equal only if they are of the same kind and hold the same operands
    in the same order.
    """

    __slots__ = ('_operands',)

    #: Joins operands in the textual form
    symbol: ClassVar[str] = ' '
    #: Combines reduced operands left to right
    operation: ClassVar[Callable[[Any, Any], Any]]

    def __init__(self, *operands: Any):
        if not operands:
            raise ValueError(f"Can't initialize {self.__class__.__name__} without arguments")
        self._operands: Tuple[Any, ...] = operands

    @property
    def operands(self) -> Tuple[Any, ...]:
        return self._operands

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operator):
            return NotImplemented
        return type(self) is type(other) and self._operands == other._operands

    def __hash__(self) -> int:
        return hash((type(self), self._operands))

    def __reduce__(self):
        return self.__class__, self._operands

    def __str__(self) -> str:
        return self.symbol.join(f'({operand})' if isinstance(operand, Operator) else str(operand)
                                for operand in self._operands)

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}: {self}>'

    def __getattr__(self, name: str) -> Any:
        if not name.startswith('_'):
            if Unit.is_valid(name):
                return self.convert_to(name)
            if name.startswith('to_') and Unit.is_valid(name[3:]):
                return self.convert_to(name[3:])
        raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

    def coerce(self, other: Any) -> Tuple[Any, Operator]:
        """Lift a raw number so `other <op> self` can be retried with both sides normalized."""
        return _lift(other), self

    # region Arithmetic
    def __pos__(self) -> Operator:
        return self

    def __neg__(self) -> Operator:
        return self.__class__(*(-operand for operand in self._operands))

    def __add__(self, other: Any) -> Any:
        if _is_zero(other):
            return self
        return Addition(self, _lift(other))

    def __sub__(self, other: Any) -> Any:
        if _is_zero(other):
            return self
        return Subtraction(self, _lift(other))

    def __mul__(self, other: Any) -> Operator:
        return self.__class__(*(operand * other for operand in self._operands))

    def __truediv__(self, other: Any) -> Operator:
        if isinstance(other, Operator):
            return Division(self, other)
        return self.__class__(*(operand / other for operand in self._operands))

    def __radd__(self, other: Any) -> Any:
        lhs, rhs = self.coerce(other)
        return lhs + rhs

    def __rsub__(self, other: Any) -> Any:
        lhs, rhs = self.coerce(other)
        return lhs - rhs

    def __rmul__(self, other: Any) -> Any:
        lhs, rhs = self.coerce(other)
        return lhs * rhs

    def __rtruediv__(self, other: Any) -> Any:
        lhs, rhs = self.coerce(other)
        return lhs / rhs

    def abs2(self) -> Operator:
        return self * self
    # endregion Arithmetic

    # region Reduction
    def leaves(self) -> Iterator[Any]:
        """Quantities at the bottom of the expression tree, depth first."""
        for operand in self._operands:
            if isinstance(operand, Operator):
                yield from operand.leaves()
            else:
                yield operand

    def preferred_units(self) -> UnitSignature:
        """Signature built from `PreferredUnits` for the dimensions of the first leaf with units.

        Raises:
            UnitConversionError: If no leaf has units.
        """
        for leaf in self.leaves():
            if leaf.unit is not None:
                return UnitSignature({PreferredUnits.for_dimension(dimension): power
                                      for dimension, power in leaf.unit.dimensionality().items()})
        raise UnitConversionError(f"Can't choose units for {self}: no operand has units")

    def _reduce_operand(self, operand: Any, units: UnitSignature) -> Any:
        return operand.convert_to(units)

    def convert_to(self, units: Optional[SignatureLike] = None) -> Quantity:
        """Reduce the expression to a single quantity.

        Every operand is converted to `units` and the results are combined according to
        the kind of expression.

        Args:
            units: Target units. Defaults to the preferred units for the expression's dimensions.

        Raises:
            UnitConversionError: If an operand can't be converted to `units`.
        """
        target = self.preferred_units() if units is None else UnitSignature(units)
        logger.debug(f"Reducing {self!r} to {target}")
        return reduce(self.operation, (self._reduce_operand(operand, target) for operand in self._operands))

    reduce = convert_to
    to = convert_to
    __lshift__ = convert_to
    # endregion Reduction


class Addition(Operator):
    """Deferred sum; operand order is irrelevant to the result."""

    __slots__ = ()
    symbol = ' + '
    operation = staticmethod(operator.add)

    def __add__(self, other: Any) -> Any:
        if _is_zero(other):
            return self
        other = _lift(other)
        if isinstance(other, Addition) and Settings.MERGE_DEFERRED:
            return Addition(*self._operands, *other.operands)
        return Addition(*self._operands, other)


class Subtraction(Operator):
    """Deferred difference, evaluated left to right."""

    __slots__ = ()
    symbol = ' - '
    operation = staticmethod(operator.sub)

    def __sub__(self, other: Any) -> Any:
        if _is_zero(other):
            return self
        if self == other:
            return _lift(0)
        other = _lift(other)
        # a - b - (c + d) == a - b - c - d
        if isinstance(other, Addition) and Settings.MERGE_DEFERRED:
            return Subtraction(*self._operands, *other.operands)
        # a - (b - c) == a - b + c, kept nested when c can't be negated
        if isinstance(other, Subtraction) and Settings.MERGE_DEFERRED:
            head, *tail = other.operands
            if all(_negatable(operand) for operand in tail):
                return Subtraction(*self._operands, head, *(-operand for operand in tail))
        return Subtraction(*self._operands, other)


class Division(Operator):
    """Deferred quotient, evaluated left to right: ``Division(a, b, c) == a / b / c``."""

    __slots__ = ()
    symbol = ' / '
    operation = staticmethod(operator.truediv)

    def __neg__(self) -> Operator:
        raise TypeError(f"bad operand type for unary -: '{self.__class__.__name__}'")

    def __mul__(self, other: Any) -> Operator:
        dividend, *divisors = self._operands
        return Division(dividend * other, *divisors)

    def __truediv__(self, other: Any) -> Operator:
        return Division(*self._operands, _lift(other))

    def _reduce_operand(self, operand: Any, units: UnitSignature) -> Any:
        # quantities of other dimensions keep their units and divide through
        if isinstance(operand, Operator):
            return operand.convert_to(units)
        if operand.unit is not None and operand.unit.valid_conversion(units):
            return operand.convert_to(units)
        return operand
