import logging

import pytest

from py_dimensional import PreferredUnits, Settings
from py_dimensional.logger import logger

logger.setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def restore_global_state():
    """PreferredUnits and Settings are process-wide; reset them around every test."""
    PreferredUnits.restore_defaults()
    Settings.restore_defaults()
    yield
    PreferredUnits.restore_defaults()
    Settings.restore_defaults()
