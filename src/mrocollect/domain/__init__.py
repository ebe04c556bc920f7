"""mrocollect domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, types, collections.abc
"""

from mrocollect.domain.exceptions import (
    CollectConfigError,
    CollectWarning,
    DuplicateOptionError,
    InvalidNameError,
    InvalidOptionValueError,
    InvalidTargetError,
    MroCollectError,
    OddOptionsError,
    RoleCompositionError,
    UnknownOptionError,
)
from mrocollect.domain.model import (
    CallMode,
    CollectConfig,
    MethodOrder,
    ProviderRef,
    Source,
)
from mrocollect.domain.ports import OperationTable, TypeGraph

__all__ = [
    # Exceptions
    "MroCollectError",
    "CollectConfigError",
    "InvalidNameError",
    "OddOptionsError",
    "UnknownOptionError",
    "DuplicateOptionError",
    "InvalidOptionValueError",
    "InvalidTargetError",
    "RoleCompositionError",
    "CollectWarning",
    # Enums
    "Source",
    "MethodOrder",
    "CallMode",
    # Value objects
    "CollectConfig",
    "ProviderRef",
    # Ports
    "OperationTable",
    "TypeGraph",
]
