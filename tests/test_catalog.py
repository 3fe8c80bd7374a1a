from fractions import Fraction

import pytest

from py_dimensional import (ConversionTable, Dimension, InvalidUnitError, PreferredUnits, Quantity, Unit,
                            UnitConversionError, UnitPropsDict, conversion_table)


def back_n_forth_pytest(value, source, target):
    there = conversion_table.convert(value, source, target)
    back = conversion_table.convert(there, target, source)
    assert pytest.approx(back, abs=1e-9) == value


SAME_FAMILY_PAIRS = [
    (a, b) for a in Unit for b in Unit
    if a is not b and a.dimension == b.dimension
]


class TestUnitCatalog:

    @pytest.mark.parametrize("unit", list(Unit), ids=lambda u: u.value)
    def test_every_member_has_props(self, unit):
        assert unit in UnitPropsDict
        assert conversion_table.is_unit(unit.value)
        assert unit.factor > 0
        assert isinstance(unit.dimension, Dimension)

    def test_is_valid(self):
        assert Unit.is_valid('meters')
        assert Unit.is_valid(Unit.Grains)
        assert not Unit.is_valid('parsecs')
        assert not Unit.is_valid('Meters')
        assert not Unit.is_valid(3)
        assert not Unit.is_valid(None)

    def test_lookup(self):
        assert Unit.lookup('inches') is Unit.Inches
        assert Unit.lookup(Unit.Feet) is Unit.Feet
        with pytest.raises(InvalidUnitError):
            Unit.lookup('parsecs')

    def test_member_behaves_like_name(self):
        assert Unit.Meters == 'meters'
        assert str(Unit.Meters) == 'meters'
        assert repr(Unit.Meters) == 'meters'
        assert Unit.Meters.symbol == 'm'
        assert Unit.Degrees.dimension == Dimension.Angle

    def test_member_constructs_quantity(self):
        width = Unit.Meters(3)
        assert isinstance(width, Quantity)
        assert width.value == 3
        assert width.unit.is_a('meters')


class TestConversionTable:

    @pytest.mark.parametrize(
        "unit_a, unit_b, expected",
        [
            ('meters', 'inches', True),
            (Unit.Miles, 'kilometers', True),
            ('hours', 'milliseconds', True),
            ('grains', Unit.Pounds, True),
            ('degrees', 'radians', True),
            ('meters', 'seconds', False),
            ('pounds', 'feet', False),
            ('radians', 'seconds', False),
        ]
    )
    def test_are_convertible(self, unit_a, unit_b, expected):
        assert conversion_table.are_convertible(unit_a, unit_b) is expected

    def test_unknown_unit(self):
        assert not conversion_table.is_unit('parsecs')
        with pytest.raises(InvalidUnitError):
            conversion_table.props('parsecs')
        with pytest.raises(InvalidUnitError):
            conversion_table.are_convertible('meters', 'parsecs')

    def test_partial_catalog(self):
        table = ConversionTable({Unit.Meters: UnitPropsDict[Unit.Meters]})
        assert table.is_unit('meters')
        assert not table.is_unit('inches')
        with pytest.raises(InvalidUnitError):
            table.props('inches')

    def test_dimension_of(self):
        assert conversion_table.dimension_of('feet') == Dimension.Length
        assert conversion_table.dimension_of(Unit.Minutes) == Dimension.Time
        assert conversion_table.dimension_of('grams') == Dimension.Mass

    @pytest.mark.parametrize(
        "value, source, target, expected",
        [
            (1, 'inches', 'meters', 0.0254),
            (1, 'feet', 'inches', 12),
            (3, 'feet', 'yards', 1),
            (1, 'miles', 'feet', 5280),
            (2.5, 'kilometers', 'meters', 2500),
            (1, 'hours', 'minutes', 60),
            (1500, 'milliseconds', 'seconds', 1.5),
            (1, 'pounds', 'grains', 7000),
            (1, 'kilograms', 'grams', 1000),
            (90, 'degrees', 'radians', 1.5707963267948966),
        ],
    )
    def test_convert(self, value, source, target, expected):
        assert conversion_table.convert(value, source, target) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "value, source, target, exponent, expected",
        [
            (1, 'feet', 'inches', 2, 144),
            (1, 'meters', 'centimeters', 3, 1_000_000),
            (1, 'hours', 'seconds', -1, 1 / 3600),
        ],
        ids=["square", "cube", "per"]
    )
    def test_convert_with_exponent(self, value, source, target, exponent, expected):
        assert conversion_table.convert(value, source, target, exponent) == pytest.approx(expected)

    def test_identical_units_keep_value(self):
        value = Fraction(1, 3)
        assert conversion_table.convert(value, 'meters', Unit.Meters) is value

    @pytest.mark.parametrize("source, target", SAME_FAMILY_PAIRS, ids=lambda u: u.value)
    def test_back_n_forth(self, source, target):
        back_n_forth_pytest(3, source, target)

    @pytest.mark.parametrize(
        "source, target",
        [('meters', 'seconds'), ('pounds', 'inches'), ('degrees', 'hours')]
    )
    def test_convert_across_families(self, source, target):
        with pytest.raises(UnitConversionError):
            conversion_table.convert(1, source, target)
        with pytest.raises(UnitConversionError):
            conversion_table.factor(source, target)

    def test_factor(self):
        assert conversion_table.factor('hours', 'seconds') == 3600
        assert conversion_table.factor('meters', 'meters') == 1


class TestPreferredUnits:

    def test_defaults(self):
        assert PreferredUnits.length == Unit.Meters
        assert PreferredUnits.time == Unit.Seconds
        assert PreferredUnits.mass == Unit.Kilograms
        assert PreferredUnits.angle == Unit.Radians

    def test_set_and_restore(self):
        PreferredUnits.set(length='feet', time=Unit.Minutes)
        assert PreferredUnits.length == Unit.Feet
        assert PreferredUnits.time == Unit.Minutes
        PreferredUnits.restore_defaults()
        assert PreferredUnits.length == Unit.Meters
        assert PreferredUnits.time == Unit.Seconds

    def test_for_dimension(self):
        PreferredUnits.set(mass='pounds')
        assert PreferredUnits.for_dimension(Dimension.Mass) == Unit.Pounds
        assert PreferredUnits.for_dimension(Dimension.Angle) == Unit.Radians

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({'distance': 'meters'}, "not found in preferred_units"),
            ({'length': 'parsecs'}, "not a member of Unit"),
            ({'length': 'seconds'}, "is not a length unit"),
        ],
        ids=["unknown_attribute", "unknown_unit", "wrong_family"]
    )
    def test_set_invalid_warns(self, kwargs, message, caplog):
        PreferredUnits.set(**kwargs)
        assert PreferredUnits.length == Unit.Meters
        assert message in caplog.text

    def test_repr(self):
        text = repr(PreferredUnits)
        assert 'length = meters' in text
        assert 'angle = radians' in text
