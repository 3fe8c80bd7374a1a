"""Library logger for py_dimensional.

All modules log through the single `py_dim` logger defined here:

    - DEBUG: a sum or difference of quantities in different units is deferred into an
      [`Addition`][py_dimensional.expression.Addition] or
      [`Subtraction`][py_dimensional.expression.Subtraction], and a deferred expression is
      reduced to target units.
    - WARNING: a config file or a `PreferredUnits.set` / `Settings.set` call names a key,
      unit or value the library doesn't know. The bad entry is skipped.

The console handler is installed at INFO, so the deferral trail stays quiet until the level
is lowered with `logger.setLevel(logging.DEBUG)` or a debug file is opened with
`enable_file_logging`.

Examples:
    ```python
    import logging
    from py_dimensional import Quantity
    from py_dimensional.logger import logger, enable_file_logging, disable_file_logging

    enable_file_logging("units_debug.log")
    logger.setLevel(logging.DEBUG)
    (Quantity(1, 'meters') + Quantity(2, 'inches')).convert_to('meters')
    disable_file_logging()
    ```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
console_handler.setLevel(logging.DEBUG)  # filtering happens on the logger

logger: logging.Logger = logging.getLogger('py_dim')
logger.addHandler(console_handler)
logger.setLevel(logging.INFO)

#: Active debug file handler, None until `enable_file_logging`
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "debug.log") -> None:
    """Append every record of the `py_dim` logger to `filename`.

    Records carry a timestamp and the emitting module. Only one file is open at a time:
    enabling again closes the previous file first.

    Args:
        filename: Log file path. Defaults to "debug.log".
    """
    global file_handler
    if file_handler is not None:
        disable_file_logging()

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(module)s:%(message)s"))
    logger.addHandler(file_handler)


def disable_file_logging() -> None:
    """Detach and close the debug file, if one is open."""
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
