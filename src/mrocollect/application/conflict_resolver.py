"""Relocation of a class-local provider shadowed by a derived operation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mrocollect.application.collect_method import CollectMethod
from mrocollect.domain.model.config import relocated_name
from mrocollect.domain.model.enums import Source
from mrocollect.domain.model.provider_ref import ProviderRef

if TYPE_CHECKING:
    from mrocollect.domain.ports.type_graph import TypeGraph

logger = logging.getLogger(__name__)


class ConflictResolver:
    """Moves a user-written provider out of the derived operation's way.

    collect("items") on a class that defines items() itself would
    overwrite it. The original is moved to _collect_items and keeps
    participating as the SELF provider.

    Idempotent: a second declaration finds a CollectMethod under the
    name (nothing to move) and reuses the earlier relocation.
    """

    def __init__(self, graph: TypeGraph) -> None:
        """Initialize resolver.

        Args:
            graph: Type graph giving access to operation tables

        Raises:
            TypeError: If graph is None
        """
        if graph is None:
            raise TypeError("graph must not be None")
        self._graph = graph

    def prepare(self, cls: type, name: str, provider: str) -> ProviderRef | None:
        """Relocate cls.<provider> if the derived operation would shadow it.

        Must be the last mutating step before installation.

        Args:
            cls: Declaring class
            name: Derived operation name
            provider: Provider operation name

        Returns:
            Reference to the relocated provider, or None if there is none
        """
        table = self._graph.operations(cls)
        target = relocated_name(provider)

        if name == provider and table.has_operation(provider):
            existing = table.get_operation(provider)
            if not isinstance(existing, CollectMethod):
                if table.has_operation(target):
                    logger.debug(
                        "%s.%s already relocated; replacing with redefinition",
                        cls.__qualname__,
                        provider,
                    )
                table.add_operation(target, table.remove_operation(provider))
                logger.debug("relocated %s.%s to %s", cls.__qualname__, provider, target)

        if not table.has_operation(target):
            return None
        return ProviderRef(
            source=Source.SELF,
            owner=cls,
            name=target,
            operation=table.get_operation(target),
        )
