"""Declaration API.

Entry point for installing derived operations.

Example:
    class Fruit(Role):
        def items(self):
            return ("apple", "orange")

    @collecting("items", order="reverse")
    @with_roles(Fruit)
    class Basket(Base):
        def items(self):
            return ("basket",)

    Basket().items()  # ("basket", ...bases..., "apple", "orange")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mrocollect.application.collect_method import CollectMethod
from mrocollect.application.config_resolver import resolve_config
from mrocollect.application.conflict_resolver import ConflictResolver
from mrocollect.application.installer import Installer
from mrocollect.application.invoker import CollectionInvoker
from mrocollect.application.provider_locator import ProviderLocator
from mrocollect.domain.exceptions import InvalidTargetError
from mrocollect.infrastructure.python_graph import PythonTypeGraph
from mrocollect.infrastructure.roles import is_role

if TYPE_CHECKING:
    from collections.abc import Callable

    from mrocollect.domain.ports.type_graph import TypeGraph


class Collector:
    """Declaration pipeline bound to one type graph.

    resolve config → relocate shadowed provider → install.
    Nothing on the target is mutated until the config is valid.

    Attributes:
        _graph: Type graph used at declaration and call time
    """

    def __init__(self, graph: TypeGraph | None = None) -> None:
        """Initialize collector.

        Args:
            graph: Type graph. Uses PythonTypeGraph if None.
        """
        self._graph = graph or PythonTypeGraph()
        self._locator = ProviderLocator(self._graph)
        self._conflicts = ConflictResolver(self._graph)
        self._installer = Installer(self._graph)

    @property
    def graph(self) -> TypeGraph:
        """Type graph used by this collector."""
        return self._graph

    def collect(self, target: type, name: str, *args: object, **options: object) -> CollectMethod:
        """Install derived operation name on target.

        Args:
            target: Declaring class
            name: Derived operation name
            *args: Aggregator callable, or flat key/value option pairs
            **options: Keyword options

        Returns:
            Installed CollectMethod

        Raises:
            InvalidTargetError: If target is not a class, or is a role
            CollectConfigError: If the declaration is invalid
        """
        if not isinstance(target, type):
            raise InvalidTargetError(target, "target must be a class")
        if is_role(target):
            raise InvalidTargetError(target, "roles cannot declare collect methods")

        config = resolve_config(name, *args, **options)
        self._conflicts.prepare(target, config.name, config.provider)
        invoker = CollectionInvoker(owner=target, config=config, locator=self._locator)
        return self._installer.install(target, config, invoker)


_default = Collector()


def collect(target: type, name: str, *args: object, **options: object) -> CollectMethod:
    """Install derived operation name on target (default type graph).

    Options (aliases in parentheses):
        aggregator (collector): (target, *items) → result. Default: tuple.
        provider: Provider name to search. Default: name.
        sources (from): "self" | "bases" (superclasses) |
            "capabilities" (roles), or a list of them.
        order (method_order): "forward" (standard, top_down) |
            "reverse" (bottom_up).
        recurse_bases (superclass_recurse): False = closest base only.
        call_mode (context): "multi" (list) | "single" (scalar).

    Example:
        collect(Basket, "items")
        collect(Basket, "count", lambda self, *items: len(items), provider="items")
        collect(Basket, "itemz", "provider", "items", "order", "reverse")
    """
    return _default.collect(target, name, *args, **options)


def collecting[T: type](name: str, *args: object, **options: object) -> Callable[[T], T]:
    """Class decorator form of collect().

    Example:
        @collecting("items", sources=["self", "roles"])
        class Basket:
            ...
    """

    def decorate(target: T) -> T:
        collect(target, name, *args, **options)
        return target

    return decorate
