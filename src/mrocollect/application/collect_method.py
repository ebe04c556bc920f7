"""Installed derived operation.

An instance of CollectMethod on a class is the tag meaning "installed by
collect()". Later declarations use it to tell their own previous work
apart from user-written methods.
"""

from __future__ import annotations

from types import MethodType
from typing import TYPE_CHECKING

from mrocollect.application.reporters.console import CollectPlanReporter

if TYPE_CHECKING:
    from mrocollect.application.invoker import CollectionInvoker
    from mrocollect.application.reporters.console import ReporterConfig
    from mrocollect.domain.model.config import CollectConfig
    from mrocollect.domain.model.provider_ref import ProviderRef


class CollectMethod:
    """Descriptor binding a CollectionInvoker as a method.

    Instance access returns a bound method; class access returns the
    descriptor itself, callable as Klass.name(instance, *args).

    Attributes:
        owner: Declaring class
        config: Declaration it was built from
    """

    def __init__(self, owner: type, config: CollectConfig, invoker: CollectionInvoker) -> None:
        """Initialize installed operation.

        Args:
            owner: Declaring class
            config: Resolved declaration
            invoker: Call-time body

        Raises:
            TypeError: If owner is not a class or invoker is not callable
        """
        if not isinstance(owner, type):
            raise TypeError(f"owner must be a class, got {owner!r}")
        if not callable(invoker):
            raise TypeError(f"invoker must be callable, got {invoker!r}")

        self.owner = owner
        self.config = config
        self._invoker = invoker
        self.__name__ = config.name
        self.__qualname__ = f"{owner.__qualname__}.{config.name}"
        self.__doc__ = f"Collect {config.provider!r} results ({config})."

    def __get__(self, instance: object, owner: type | None = None) -> object:
        if instance is None:
            return self
        return MethodType(self, instance)

    def __call__(self, instance: object, /, *args: object, **kwargs: object) -> object:
        return self._invoker(instance, *args, **kwargs)

    def plan(self) -> tuple[ProviderRef, ...]:
        """Providers the next call would invoke, in order."""
        return self._invoker.plan()

    def explain(self, config: ReporterConfig | None = None) -> str:
        """Render plan() as a rich table string."""
        return CollectPlanReporter(config).report(self)

    def __repr__(self) -> str:
        return f"<CollectMethod {self.__qualname__}: {self.config}>"
