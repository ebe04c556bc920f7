"""Resolved configuration of one collect() declaration."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from mrocollect.domain.model.enums import DEFAULT_SOURCES, CallMode, MethodOrder, Source

# Reserved prefix for a relocated class-local provider.
RELOCATED_PREFIX = "_collect_"


def identity_aggregator(_target: object, *items: object) -> tuple[object, ...]:
    """Default aggregator: pass collected items through as a tuple."""
    return items


def relocated_name(provider: str) -> str:
    """Private name a class-local provider is moved to."""
    return f"{RELOCATED_PREFIX}{provider}"


@dataclass(frozen=True, slots=True)
class CollectConfig:
    """Immutable configuration for one derived operation.

    Immutable value object with FAIL-FIRST validation.
    Built by resolve_config(); literals are already canonical here.

    Attributes:
        name: Derived operation name (installed on the target)
        provider: Provider operation name searched for. "" = same as name.
        sources: Ordered source buckets (repeats allowed)
        order: Traversal order inside BASES/CAPABILITIES buckets
        recurse_bases: False = only the closest defining base is used
        call_mode: How each provider's return value is captured
        aggregator: (target, *items) → result
    """

    name: str
    provider: str = ""
    sources: tuple[Source, ...] = DEFAULT_SOURCES
    order: MethodOrder = MethodOrder.FORWARD
    recurse_bases: bool = True
    call_mode: CallMode = CallMode.MULTI
    aggregator: Callable[..., object] = field(default=identity_aggregator)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.name, str) or not self.name.isidentifier():
            raise ValueError(f"name must be an identifier, got {self.name!r}")

        if not self.provider:
            # frozen: bypass __setattr__ to apply the default
            object.__setattr__(self, "provider", self.name)
        elif not self.provider.isidentifier():
            raise ValueError(f"provider must be an identifier, got {self.provider!r}")

        if not self.sources:
            raise ValueError("sources must not be empty")

        for source in self.sources:
            if not isinstance(source, Source):
                raise TypeError(f"sources must contain Source members, got {source!r}")

        if not isinstance(self.order, MethodOrder):
            raise TypeError(f"order must be MethodOrder, got {self.order!r}")

        if not isinstance(self.call_mode, CallMode):
            raise TypeError(f"call_mode must be CallMode, got {self.call_mode!r}")

        if not isinstance(self.recurse_bases, bool):
            raise TypeError(f"recurse_bases must be bool, got {self.recurse_bases!r}")

        if not callable(self.aggregator):
            raise TypeError(f"aggregator must be callable, got {self.aggregator!r}")

    @property
    def relocated_provider(self) -> str:
        """Reserved name for a relocated class-local provider."""
        return relocated_name(self.provider)

    def __str__(self) -> str:
        """Format as name <- provider [sources] order/mode."""
        sources = ",".join(s.name.lower() for s in self.sources)
        return (
            f"{self.name} <- {self.provider} [{sources}] "
            f"{self.order.name.lower()}/{self.call_mode.name.lower()}"
            f"{'' if self.recurse_bases else ' closest-base'}"
        )
