"""Call-time body of a derived operation: locate, invoke, aggregate."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator
from typing import TYPE_CHECKING

from mrocollect.domain.exceptions import CollectWarning
from mrocollect.domain.model.enums import CallMode

if TYPE_CHECKING:
    from mrocollect.application.provider_locator import ProviderLocator
    from mrocollect.domain.model.config import CollectConfig
    from mrocollect.domain.model.provider_ref import ProviderRef

logger = logging.getLogger(__name__)


def capture(result: object, mode: CallMode) -> tuple[object, ...]:
    """Turn one provider return value into collected items.

    SINGLE: exactly one item, the value unchanged (None included).
    MULTI: None → no items; tuple, list or iterator → its items;
    anything else (str, bytes, dict, set, ...) → one item.
    """
    if mode is CallMode.SINGLE:
        return (result,)
    if result is None:
        return ()
    if isinstance(result, (tuple, list, Iterator)):
        return tuple(result)
    return (result,)


class CollectionInvoker:
    """Runs every located provider and feeds the aggregator.

    Holds only immutable declaration data; safe to call reentrantly and
    from several threads at once. Nothing is cached between calls.
    Provider exceptions propagate unchanged.
    """

    def __init__(self, owner: type, config: CollectConfig, locator: ProviderLocator) -> None:
        """Initialize invoker.

        Args:
            owner: Declaring class (the graph walk starts here)
            config: Resolved declaration
            locator: Provider locator

        Raises:
            TypeError: If owner is not a class or locator is None
        """
        if not isinstance(owner, type):
            raise TypeError(f"owner must be a class, got {owner!r}")
        if locator is None:
            raise TypeError("locator must not be None")

        self._owner = owner
        self._config = config
        self._locator = locator

    def plan(self) -> tuple[ProviderRef, ...]:
        """Locate providers afresh."""
        return self._locator.locate(self._owner, self._config)

    def __call__(self, instance: object, /, *args: object, **kwargs: object) -> object:
        """Invoke providers with (instance, *args, **kwargs), then aggregate.

        Returns:
            aggregator(instance, *items)
        """
        providers = self.plan()

        if not providers:
            warnings.warn(
                f"no methods found to collect for {self._owner.__qualname__}.{self._config.name} "
                f"(provider {self._config.provider!r})",
                CollectWarning,
                stacklevel=3,
            )

        items: list[object] = []
        for provider in providers:
            items.extend(capture(provider.invoke(instance, *args, **kwargs), self._config.call_mode))

        return self._config.aggregator(instance, *items)
