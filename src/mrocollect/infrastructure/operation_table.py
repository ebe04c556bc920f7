"""Operation table adapter over a class's own __dict__."""

from __future__ import annotations

from dataclasses import dataclass

from mrocollect.infrastructure.roles import composed_names, forget_composed


@dataclass(frozen=True, slots=True)
class ClassOperationTable:
    """Own operations of one class or role.

    Reads owner.__dict__ directly: inherited attributes are never seen,
    and names copied in by role composition are attributed to the role.

    Attributes:
        owner: Class or role described
    """

    owner: type

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.owner, type):
            raise TypeError(f"owner must be a class, got {self.owner!r}")

    def has_operation(self, name: str) -> bool:
        """Check if owner defines name itself. O(1)."""
        return name in self.owner.__dict__ and name not in composed_names(self.owner)

    def get_operation(self, name: str) -> object:
        """Get raw attribute (descriptor unbound).

        Raises:
            KeyError: If owner does not define name
        """
        if not self.has_operation(name):
            raise KeyError(f"{self.owner.__qualname__} does not define {name!r}")
        return self.owner.__dict__[name]

    def add_operation(self, name: str, body: object) -> None:
        """Bind body under name. A role-copied binding is taken over."""
        setattr(self.owner, name, body)
        forget_composed(self.owner, name)

    def remove_operation(self, name: str) -> object:
        """Unbind name and return the raw attribute.

        Raises:
            KeyError: If owner does not define name
        """
        body = self.get_operation(name)
        delattr(self.owner, name)
        return body
