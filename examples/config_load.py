from py_dimensional import (basicConfig, PreferredUnits, Quantity, loadMetricUnits)

import importlib.resources

config_file = importlib.resources.files('py_dimensional').joinpath('assets/.pydim-imperial.toml')
basicConfig(str(config_file))

print("Imperial:")
print(PreferredUnits)

total = Quantity(1, 'meters') + Quantity(30, 'centimeters')
print(f"{total} = {total.reduce():.4f}")

print()

loadMetricUnits()

print("Metric:")
print(PreferredUnits)
print(f"{total} = {total.reduce():.4f}")
