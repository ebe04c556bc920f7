"""Resolved provider reference."""

from __future__ import annotations

from dataclasses import dataclass

from mrocollect.domain.model.enums import Source


@dataclass(frozen=True, slots=True)
class ProviderRef:
    """One provider operation found on one owner.

    Ephemeral: recomputed on every derived-operation call, never cached.

    Attributes:
        source: Bucket the provider was found in
        owner: Class or role holding the operation in its own __dict__
        name: Attribute name under which it was found
        operation: Raw attribute (function, staticmethod, classmethod, ...)
    """

    source: Source
    owner: type
    name: str
    operation: object

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.owner, type):
            raise TypeError(f"owner must be a class, got {self.owner!r}")
        if not self.name:
            raise ValueError("name must not be empty")

    def bind(self, instance: object) -> object:
        """Bind operation to instance through the descriptor protocol."""
        getter = getattr(type(self.operation), "__get__", None)
        if getter is None:
            return self.operation
        return getter(self.operation, instance, type(instance))

    def invoke(self, instance: object, /, *args: object, **kwargs: object) -> object:
        """Call operation on instance with arguments forwarded unchanged.

        Exceptions raised by the operation propagate as-is.
        """
        return self.bind(instance)(*args, **kwargs)  # type: ignore[operator]

    @property
    def qualified_name(self) -> str:
        """Format as Owner.name."""
        return f"{self.owner.__qualname__}.{self.name}"

    def __str__(self) -> str:
        """Format as source:Owner.name."""
        return f"{self.source.name.lower()}:{self.qualified_name}"
