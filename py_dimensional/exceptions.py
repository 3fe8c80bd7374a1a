"""py_dimensional exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── TypeError
│   └── UnitTypeError
│       ├── UnitConversionError
│       ├── IncompatibleUnitsError
│       └── LiteralUnitsError
└── ValueError
    └── UnitValueError
        ├── InvalidUnitError
        └── EmptyUnitsError

Exception Types
---------------

- UnitTypeError: Base class for unit-related type errors.

- UnitConversionError: Raised when a value is converted between signatures that do not describe
  the same physical dimensions, when a unitless value is converted, or when quantities of different
  dimension families are ordered against each other.

- IncompatibleUnitsError: Raised by signature-level addition or subtraction of unequal signatures.
  `Quantity` never lets it escape from `+` or `-`; it builds a deferred expression instead.

- LiteralUnitsError: Raised when a quantity with units is added to (or subtracted from) a unitless
  literal while `Settings.literal_policy` is `reject`.

- UnitValueError: Base class for signature construction errors.

- InvalidUnitError: Raised when a unit name is not a member of the unit catalog.

- EmptyUnitsError: Raised when a signature would be left without any non-zero exponent.
"""

__all__ = (
    'UnitTypeError',
    'UnitConversionError',
    'IncompatibleUnitsError',
    'LiteralUnitsError',
    'UnitValueError',
    'InvalidUnitError',
    'EmptyUnitsError',
)


class UnitTypeError(TypeError):
    """Unit type error."""


class UnitConversionError(UnitTypeError):
    """Unit conversion error."""


class IncompatibleUnitsError(UnitTypeError):
    """Signatures don't match."""


class LiteralUnitsError(UnitTypeError):
    """Unit-bearing value mixed with a unitless literal."""


class UnitValueError(ValueError):
    """Unit value error."""


class InvalidUnitError(UnitValueError):
    """Unknown unit name."""


class EmptyUnitsError(UnitValueError):
    """Signature without units."""
