import pytest

from py_dimensional import (EmptyUnitsError, IncompatibleUnitsError, InvalidUnitError, LiteralUnitsError, Quantity,
                            UnitConversionError, UnitSignature, UnitTypeError, UnitValueError)


@pytest.mark.parametrize(
    "error, base",
    [
        (UnitConversionError, UnitTypeError),
        (IncompatibleUnitsError, UnitTypeError),
        (LiteralUnitsError, UnitTypeError),
        (UnitTypeError, TypeError),
        (InvalidUnitError, UnitValueError),
        (EmptyUnitsError, UnitValueError),
        (UnitValueError, ValueError),
    ],
    ids=lambda e: e.__name__
)
def test_hierarchy(error, base):
    assert issubclass(error, base)


def test_invalid_unit_message():
    with pytest.raises(InvalidUnitError, match="parsecs"):
        Quantity(1, 'parsecs')


def test_conversion_error_message():
    with pytest.raises(UnitConversionError, match="meters"):
        Quantity(1, 'meters').convert_to('seconds')


def test_literal_error_message():
    with pytest.raises(LiteralUnitsError, match="literal"):
        Quantity(1, 'meters') + 1


def test_empty_units_message():
    with pytest.raises(EmptyUnitsError, match="Empty units"):
        UnitSignature({'meters': 0})
