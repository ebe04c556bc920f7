"""Domain exceptions."""

from mrocollect.domain.exceptions.base import CollectWarning, MroCollectError
from mrocollect.domain.exceptions.composition import RoleCompositionError
from mrocollect.domain.exceptions.config import (
    CollectConfigError,
    DuplicateOptionError,
    InvalidNameError,
    InvalidOptionValueError,
    InvalidTargetError,
    OddOptionsError,
    UnknownOptionError,
)

__all__ = [
    "MroCollectError",
    "CollectWarning",
    "CollectConfigError",
    "InvalidNameError",
    "OddOptionsError",
    "UnknownOptionError",
    "DuplicateOptionError",
    "InvalidOptionValueError",
    "InvalidTargetError",
    "RoleCompositionError",
]
