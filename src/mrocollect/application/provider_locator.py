"""Provider location: which operations a derived operation calls, in order."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mrocollect.application.collect_method import CollectMethod
from mrocollect.domain.model.enums import MethodOrder, Source
from mrocollect.domain.model.provider_ref import ProviderRef

if TYPE_CHECKING:
    from mrocollect.domain.model.config import CollectConfig
    from mrocollect.domain.ports.type_graph import TypeGraph

logger = logging.getLogger(__name__)


class ProviderLocator:
    """Computes the ordered provider list for one declaration.

    Stateless - no state between locate() calls. Every call re-reads
    the type graph, so roles composed after declaration are picked up.

    Ordering rules:
        - Buckets are concatenated in config.sources order
        - BASES and CAPABILITIES are reversed for MethodOrder.REVERSE
        - SELF is a singleton and never reordered
    """

    def __init__(self, graph: TypeGraph) -> None:
        """Initialize locator.

        Args:
            graph: Type graph to query

        Raises:
            TypeError: If graph is None
        """
        if graph is None:
            raise TypeError("graph must not be None")
        self._graph = graph

    def locate(self, cls: type, config: CollectConfig) -> tuple[ProviderRef, ...]:
        """Locate providers for config on cls.

        Args:
            cls: Declaring class
            config: Resolved declaration

        Returns:
            Ordered providers (may be empty)
        """
        providers: list[ProviderRef] = []

        for source in config.sources:
            bucket = self._bucket(cls, config, source)
            if source is not Source.SELF and config.order is MethodOrder.REVERSE:
                bucket = bucket[::-1]
            providers.extend(bucket)

        logger.debug(
            "located %d provider(s) for %s.%s", len(providers), cls.__qualname__, config.name
        )
        return tuple(providers)

    def _bucket(self, cls: type, config: CollectConfig, source: Source) -> tuple[ProviderRef, ...]:
        match source:
            case Source.SELF:
                return self._self_provider(cls, config)
            case Source.BASES:
                return self._base_providers(cls, config)
            case Source.CAPABILITIES:
                return self._capability_providers(cls, config)

    def _self_provider(self, cls: type, config: CollectConfig) -> tuple[ProviderRef, ...]:
        """Provider relocated by an earlier declaration, if any."""
        table = self._graph.operations(cls)
        name = config.relocated_provider

        if not table.has_operation(name):
            return ()

        operation = table.get_operation(name)
        if isinstance(operation, CollectMethod):
            return ()
        return (ProviderRef(source=Source.SELF, owner=cls, name=name, operation=operation),)

    def _base_providers(self, cls: type, config: CollectConfig) -> tuple[ProviderRef, ...]:
        """Ancestors defining provider, most-derived first."""
        refs: list[ProviderRef] = []

        for base in self._graph.linearized_ancestors(cls)[1:]:
            table = self._graph.operations(base)
            if not table.has_operation(config.provider):
                continue
            refs.append(
                ProviderRef(
                    source=Source.BASES,
                    owner=base,
                    name=config.provider,
                    operation=table.get_operation(config.provider),
                )
            )
            if not config.recurse_bases:
                # closest override only
                break

        return tuple(refs)

    def _capability_providers(self, cls: type, config: CollectConfig) -> tuple[ProviderRef, ...]:
        """Composed roles defining provider, in composition order."""
        refs: list[ProviderRef] = []

        for unit in self._graph.composed_capability_units(cls):
            table = self._graph.operations(unit)
            if table.has_operation(config.provider):
                refs.append(
                    ProviderRef(
                        source=Source.CAPABILITIES,
                        owner=unit,
                        name=config.provider,
                        operation=table.get_operation(config.provider),
                    )
                )

        return tuple(refs)
