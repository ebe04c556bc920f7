"""Application layer: declaration pipeline and call-time engine."""

from mrocollect.application.collect_method import CollectMethod
from mrocollect.application.config_resolver import resolve_config
from mrocollect.application.conflict_resolver import ConflictResolver
from mrocollect.application.installer import Installer
from mrocollect.application.invoker import CollectionInvoker, capture
from mrocollect.application.provider_locator import ProviderLocator

__all__ = [
    "CollectMethod",
    "CollectionInvoker",
    "ConflictResolver",
    "Installer",
    "ProviderLocator",
    "capture",
    "resolve_config",
]
