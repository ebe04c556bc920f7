"""Binding of derived operations onto the declaring class."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mrocollect.application.collect_method import CollectMethod

if TYPE_CHECKING:
    from mrocollect.application.invoker import CollectionInvoker
    from mrocollect.domain.model.config import CollectConfig
    from mrocollect.domain.ports.type_graph import TypeGraph

logger = logging.getLogger(__name__)


class Installer:
    """Installs a CollectMethod in the declaring class's own table.

    Last declaration wins: a previous CollectMethod under the same name
    is replaced outright.
    """

    def __init__(self, graph: TypeGraph) -> None:
        """Initialize installer.

        Args:
            graph: Type graph giving access to operation tables

        Raises:
            TypeError: If graph is None
        """
        if graph is None:
            raise TypeError("graph must not be None")
        self._graph = graph

    def install(self, cls: type, config: CollectConfig, invoker: CollectionInvoker) -> CollectMethod:
        """Bind invoker as cls.<config.name>.

        Args:
            cls: Declaring class
            config: Resolved declaration
            invoker: Call-time body

        Returns:
            The installed CollectMethod
        """
        table = self._graph.operations(cls)

        if table.has_operation(config.name) and isinstance(table.get_operation(config.name), CollectMethod):
            logger.debug("displacing previous collect method %s.%s", cls.__qualname__, config.name)

        method = CollectMethod(owner=cls, config=config, invoker=invoker)
        table.add_operation(config.name, method)
        logger.debug("installed %r", method)
        return method
