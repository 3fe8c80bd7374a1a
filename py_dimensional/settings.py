"""Global settings of the py_dimensional library"""
from enum import Enum
from typing import Union

from py_dimensional.logger import logger

__all__ = ('Settings', 'LiteralPolicy')


class LiteralPolicy(str, Enum):
    """How `+` and `-` treat a unitless literal next to a quantity with units."""

    #: raise LiteralUnitsError
    Reject = 'reject'
    #: the literal takes the units of the other operand
    Adopt = 'adopt'


class Settings:  # pylint: disable=too-few-public-methods
    """Global settings class of the py_dimensional library"""

    LITERAL_POLICY: LiteralPolicy = LiteralPolicy.Reject
    MERGE_DEFERRED: bool = True

    @classmethod
    def restore_defaults(cls):
        cls.LITERAL_POLICY = LiteralPolicy.Reject
        cls.MERGE_DEFERRED = True

    @classmethod
    def set(cls, **kwargs: Union[str, bool, LiteralPolicy]):
        """Set switches from keyword arguments (`literal_policy`, `merge_deferred`).

        Unknown switches and invalid values are logged as warnings.
        """
        for attribute, value in kwargs.items():
            if attribute == 'literal_policy':
                try:
                    cls.LITERAL_POLICY = LiteralPolicy(value)
                except ValueError:
                    logger.warning(f"{value=} is not a literal policy, expected one of "
                                   f"{[policy.value for policy in LiteralPolicy]}")
            elif attribute == 'merge_deferred':
                if isinstance(value, bool):
                    cls.MERGE_DEFERRED = value
                else:
                    logger.warning(f"merge_deferred expects a bool, got {value=}")
            else:
                logger.warning(f"{attribute=} not found in settings")
