"""Type graph port: host type system introspection.

The locator, conflict resolver and installer are written against these
Protocols only. Infrastructure provides the adapter for Python classes.
"""

from __future__ import annotations

from typing import Protocol


class OperationTable(Protocol):
    """Own (non-inherited) operations of one class or role.

    An operation counts as "own" only if the owner itself defines it.
    Names copied in by role composition belong to the role, not here.
    """

    @property
    def owner(self) -> type:
        """Class or role this table describes."""
        ...

    def has_operation(self, name: str) -> bool:
        """Check if owner defines name itself."""
        ...

    def get_operation(self, name: str) -> object:
        """Get raw operation.

        Raises:
            KeyError: If owner does not define name
        """
        ...

    def add_operation(self, name: str, body: object) -> None:
        """Bind body under name on owner. Replaces any existing binding."""
        ...

    def remove_operation(self, name: str) -> object:
        """Unbind name from owner and return what was bound.

        Raises:
            KeyError: If owner does not define name
        """
        ...


class TypeGraph(Protocol):
    """Contract for ancestry and capability-unit queries.

    Implementations must be deterministic: the same class structure
    always yields the same sequences in the same order.
    """

    def linearized_ancestors(self, cls: type) -> tuple[type, ...]:
        """Get linearization, most-derived first, cls itself at position 0."""
        ...

    def composed_capability_units(self, cls: type) -> tuple[type, ...]:
        """Get roles composed by cls, transitively.

        Flattened, synthetic groupings excluded, deduplicated by identity,
        in stable declared order.
        """
        ...

    def operations(self, owner: type) -> OperationTable:
        """Get operation table for class or role."""
        ...
