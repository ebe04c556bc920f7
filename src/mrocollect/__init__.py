"""mrocollect - collect same-named method results across bases and roles."""

__version__ = "0.1.0"

from mrocollect.application.collect_method import CollectMethod
from mrocollect.application.reporters.console import CollectPlanReporter, ReporterConfig
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
from mrocollect.domain.model import CallMode, CollectConfig, MethodOrder, ProviderRef, Source
from mrocollect.infrastructure.roles import Role, compose, with_roles
from mrocollect.presentation.api.dsl import Collector, collect, collecting

__all__ = [
    "CallMode",
    "CollectConfig",
    "CollectConfigError",
    "CollectMethod",
    "CollectPlanReporter",
    "CollectWarning",
    "Collector",
    "DuplicateOptionError",
    "InvalidNameError",
    "InvalidOptionValueError",
    "InvalidTargetError",
    "MethodOrder",
    "MroCollectError",
    "OddOptionsError",
    "ProviderRef",
    "ReporterConfig",
    "Role",
    "RoleCompositionError",
    "Source",
    "UnknownOptionError",
    "__version__",
    "collect",
    "collecting",
    "compose",
    "with_roles",
]
