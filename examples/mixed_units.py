from py_dimensional import *

# deferred sum of lengths in different units
board = Unit.Feet(8) + Unit.Inches(6)
print(repr(board))
print(f"{board.centimeters:.1f}")

# unit cancellation
area = Unit.Meters(3) * Unit.Meters(2)
print(area, '/', Unit.Meters(2), '=', area / Unit.Meters(2))
print(Unit.Meters(6) / Unit.Meters(2))

# compound units through accessors
speed = Quantity(90).kilometers.per_hours
print(speed, '=', f"{speed.convert_to({'meters': 1, 'seconds': -1}):.2f}")

# comparison converts the right operand into the left operand's units
print(Unit.Feet(3) < Unit.Meters(1), Unit.Miles(1).compare(Unit.Kilometers(1)))

# a unitless literal is rejected unless the literal policy adopts units
try:
    Unit.Meters(1) + 2
except LiteralUnitsError as error:
    print(error)

Settings.set(literal_policy='adopt')
print(Unit.Meters(1) + 2)
Settings.restore_defaults()

# deferred expressions reduce lazily
rate = Division(board, Unit.Seconds(4))
print(repr(rate), '->', rate.reduce())
