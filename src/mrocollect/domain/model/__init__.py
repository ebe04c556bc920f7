"""Domain model: configuration, enumerations and provider references."""

from mrocollect.domain.model.config import (
    RELOCATED_PREFIX,
    CollectConfig,
    identity_aggregator,
    relocated_name,
)
from mrocollect.domain.model.enums import CallMode, MethodOrder, Source
from mrocollect.domain.model.provider_ref import ProviderRef

__all__ = [
    "RELOCATED_PREFIX",
    "CallMode",
    "CollectConfig",
    "MethodOrder",
    "ProviderRef",
    "Source",
    "identity_aggregator",
    "relocated_name",
]
