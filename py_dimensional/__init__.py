"""Dimension-aware arithmetic on plain numeric values."""

import importlib.metadata

__version__ = importlib.metadata.version("py_dimensional")

# Standard library imports
import importlib.resources
import os
import sys

# Third-party imports
from typing_extensions import Dict, Optional, Union

# Local imports
from .logger import logger as log
from .catalog import Unit, PreferredUnits
from .settings import Settings

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load configuration from a .pydim.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pydim.toml or pydim.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_pydim_toml(start_dir: str = os.getcwd()) -> Optional[str]:
        """Search for the config file starting from the specified directory and walking up.

        Returns:
            The absolute path to the config file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir)
        while True:
            pydim_paths = [
                os.path.join(current_dir, '.pydim.toml'),
                os.path.join(current_dir, 'pydim.toml'),
            ]
            for pydim_path in pydim_paths:
                if os.path.exists(pydim_path):
                    return os.path.abspath(pydim_path)

            parent_dir = os.path.dirname(current_dir)
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        if (filepath := find_pydim_toml()) is None:
            filepath = find_pydim_toml(os.path.dirname(__file__))

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

            if _pydim := _config.get('pydim'):
                preferred_units = _pydim.get('preferred_units')
                settings = _pydim.get('settings')
                if preferred_units:
                    PreferredUnits.set(**preferred_units)
                if settings:
                    Settings.set(**settings)
                if not (preferred_units or settings) and not suppress_warnings:
                    log.warning("Config has no `pydim.preferred_units` or `pydim.settings` section")
            else:
                if not suppress_warnings:
                    log.warning("Config has no `pydim` section")

    log.debug("PreferredUnits and Settings load success")


def _basic_config(filename: Optional[str] = None,
                  preferred_units: Optional[Dict[str, Union[Unit, str]]] = None,
                  settings: Optional[Dict[str, Union[str, bool]]] = None,
                  suppress_warnings: bool = False) -> None:
    """Load preferred units and settings from file or mappings.

    Args:
        filename: Configuration file path
        preferred_units: Dictionary of preferred units
        settings: Dictionary of `Settings` switches
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and mappings are provided
    """
    if filename and (preferred_units or settings):
        raise ValueError("Can't use preferred_units or settings and config file at same time")
    if preferred_units or settings:
        PreferredUnits.set(**(preferred_units or {}))
        Settings.set(**(settings or {}))
    else:
        _load_config(filename, suppress_warnings)


def _resolve_resource_path(path: str) -> str:
    """Resolve a resource path relative to the package."""
    return str(importlib.resources.files('py_dimensional').joinpath(path))


def _load_imperial_units() -> None:
    """Load imperial unit preferences."""
    _basic_config(_resolve_resource_path('assets/.pydim-imperial.toml'), suppress_warnings=True)


def _load_metric_units() -> None:
    """Load metric unit preferences."""
    _basic_config(_resolve_resource_path('assets/.pydim-metric.toml'), suppress_warnings=True)


loadImperialUnits = _load_imperial_units
loadMetricUnits = _load_metric_units

basicConfig = _basic_config

basicConfig()


from .catalog import Dimension, UnitProps, UnitPropsDict, ConversionTable, conversion_table
from .exceptions import (UnitTypeError, UnitConversionError, IncompatibleUnitsError, LiteralUnitsError,
                         UnitValueError, InvalidUnitError, EmptyUnitsError)
from .logger import logger, enable_file_logging, disable_file_logging
from .settings import LiteralPolicy
from .signature import UnitSignature
from .quantity import Quantity, is_zero, lift, unwrap, is_unit
from .expression import Operator, Addition, Subtraction, Division

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__",
    # Skip imported modules
    "tomllib", "sys", "os", "importlib",
    # Skip private/internal symbols
    "_load_config", "_basic_config", "_resolve_resource_path",
    "_load_imperial_units", "_load_metric_units",
    # Skip typing helpers and submodules
    "Dict", "Optional", "Union", "log",
    "catalog", "exceptions", "expression", "quantity", "settings", "signature",
}
# Build __all__ from the module's global namespace
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
