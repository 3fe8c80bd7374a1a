"""Unit signatures: products of catalog units raised to integer powers.

A [`UnitSignature`][py_dimensional.signature.UnitSignature] is an immutable mapping from
[`Unit`][py_dimensional.catalog.Unit] to a non-zero integer exponent. Signatures form a
multiplicative group: `compose` sums exponents, `invert` negates them. A signature is
never empty; a computation whose units cancel completely yields `None` ("no units").

Examples:
    >>> area = UnitSignature(('meters', 2))
    >>> area / UnitSignature('meters')
    UnitSignature({'meters': 1})
    >>> UnitSignature('meters').compose(UnitSignature('meters').invert()) is None
    True
    >>> str(UnitSignature({'meters': 1, 'seconds': -2}))
    'meters seconds^-2'
"""

from __future__ import annotations

import operator
from fractions import Fraction
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

from typing_extensions import TypeAlias

from py_dimensional.catalog import Dimension, Unit, conversion_table, rescale
from py_dimensional.exceptions import EmptyUnitsError, IncompatibleUnitsError, UnitConversionError

__all__ = ('UnitSignature', 'SignatureLike')

SignatureLike: TypeAlias = Union['UnitSignature', Unit, str, Tuple[Union[Unit, str], int], Mapping[Any, int]]


class UnitSignature(Mapping[Unit, int]):
    """Immutable mapping of unit to integer exponent.

    Args:
        units: A unit name (exponent 1), a ``(name, exponent)`` pair, or a full mapping.

    Raises:
        InvalidUnitError: If any name is not in the unit catalog.
        EmptyUnitsError: If no non-zero exponent remains.
        TypeError: If `units` has an unsupported type or an exponent is not an integer.
    """

    __slots__ = ('_exponents',)

    def __init__(self, units: SignatureLike):
        if isinstance(units, UnitSignature):
            items = units.items()
        elif isinstance(units, str):
            items = ((units, 1),)
        elif isinstance(units, tuple) and len(units) == 2:
            items = (units,)
        elif isinstance(units, Mapping):
            items = units.items()
        else:
            raise TypeError(f"Can't build units from {type(units).__name__}: {units!r}")

        exponents: Dict[Unit, int] = {}
        for name, power in items:
            unit = Unit.lookup(name)
            exponents[unit] = exponents.get(unit, 0) + operator.index(power)
        exponents = {unit: power for unit, power in exponents.items() if power != 0}
        if not exponents:
            raise EmptyUnitsError(f"Empty units: {units!r}")
        self._exponents: Mapping[Unit, int] = MappingProxyType(exponents)

    @classmethod
    def coerce(cls, units: Optional[SignatureLike]) -> Optional[UnitSignature]:
        """Return `units` as a signature; `None` stays `None`."""
        if units is None or isinstance(units, UnitSignature):
            return units
        return cls(units)

    @classmethod
    def _from_exponents(cls, exponents: Mapping[Unit, int]) -> Optional[UnitSignature]:
        # units that cancel out leave no signature at all
        if not any(exponents.values()):
            return None
        return cls(exponents)

    def __getitem__(self, unit: Union[Unit, str]) -> int:
        return self._exponents[unit]

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._exponents)

    def __len__(self) -> int:
        return len(self._exponents)

    def __hash__(self) -> int:
        return hash(frozenset(self._exponents.items()))

    def __reduce__(self):
        return self.__class__, (dict(self._exponents),)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({ {unit.value: power for unit, power in self._exponents.items()}!r})'

    def __str__(self) -> str:
        return ' '.join(unit.value if power == 1 else f'{unit.value}^{power}'
                        for unit, power in self._exponents.items())

    # region Group algebra
    def compose(self, other: Optional[UnitSignature]) -> Optional[UnitSignature]:
        """Multiply two signatures by summing exponents; returns `None` if every unit cancels."""
        if other is None:
            return self
        exponents = dict(self._exponents)
        for unit, power in other.items():
            exponents[unit] = exponents.get(unit, 0) + power
        return self._from_exponents(exponents)

    def invert(self) -> UnitSignature:
        """Signature with every exponent negated."""
        return self.__class__({unit: -power for unit, power in self._exponents.items()})

    def equals(self, other: Any) -> bool:
        """Exact equality: same units with the same exponents."""
        return self == other

    def __mul__(self, other: Optional[UnitSignature]) -> Optional[UnitSignature]:
        if other is not None and not isinstance(other, UnitSignature):
            return NotImplemented
        return self.compose(other)

    def __truediv__(self, other: Optional[UnitSignature]) -> Optional[UnitSignature]:
        if other is None:
            return self
        if not isinstance(other, UnitSignature):
            return NotImplemented
        return self.compose(other.invert())

    def __pow__(self, power: int) -> Optional[UnitSignature]:
        power = operator.index(power)
        return self._from_exponents({unit: exponent * power for unit, exponent in self._exponents.items()})

    def add(self, other: Optional[UnitSignature]) -> UnitSignature:
        """Signature of a sum; both operands must have identical signatures.

        Raises:
            IncompatibleUnitsError: If the signatures differ.
        """
        if self != other:
            raise IncompatibleUnitsError(f"Addition requires matching units: {self}, {other}")
        return self

    def subtract(self, other: Optional[UnitSignature]) -> UnitSignature:
        """Signature of a difference; both operands must have identical signatures.

        Raises:
            IncompatibleUnitsError: If the signatures differ.
        """
        if self != other:
            raise IncompatibleUnitsError(f"Subtraction requires matching units: {self}, {other}")
        return self

    __add__ = add
    __sub__ = subtract

    def per(self, unit: Union[Unit, str], power: int = 1) -> Optional[UnitSignature]:
        """Signature with the exponent of `unit` decremented by `power`, e.g. meters -> meters/second."""
        return self.compose(self.__class__((unit, power)).invert())
    # endregion Group algebra

    def is_a(self, unit: Union[Unit, str]) -> bool:
        """True if the signature is exactly `unit` to the first power."""
        return Unit.is_valid(unit) and dict(self._exponents) == {Unit.lookup(unit): 1}

    def dimensionality(self) -> Dict[Dimension, int]:
        """Total exponent per dimension family, e.g. ``{meters: 1, inches: 1}`` -> ``{Length: 2}``."""
        totals: Dict[Dimension, int] = {}
        for unit, power in self._exponents.items():
            dimension = conversion_table.dimension_of(unit)
            totals[dimension] = totals.get(dimension, 0) + power
        return {dimension: power for dimension, power in totals.items() if power != 0}

    def valid_conversion(self, other: Optional[SignatureLike]) -> bool:
        """True if values with this signature can be converted to `other`."""
        other = self.coerce(other)
        return other is not None and self.dimensionality() == other.dimensionality()

    def _raw_scale(self) -> Fraction:
        scale = Fraction(1)
        for unit, power in self._exponents.items():
            scale *= conversion_table.props(unit).factor ** power
        return scale

    def convert(self, value: Any, other: SignatureLike) -> Any:
        """Rescale a raw value expressed in this signature to `other`.

        Raises:
            UnitConversionError: If the signatures don't describe the same dimensions.
        """
        other = self.coerce(other)
        if not self.valid_conversion(other):
            raise UnitConversionError(f"Can't convert '{self}' to: {other}")
        if self == other:
            return value
        if len(self) == len(other) == 1:
            (source, power), = self.items()
            (target, _), = other.items()
            return conversion_table.convert(value, source, target, power)
        return rescale(value, self._raw_scale() / other._raw_scale())
