"""TypeGraph adapter for Python classes."""

from __future__ import annotations

from mrocollect.infrastructure.operation_table import ClassOperationTable
from mrocollect.infrastructure.roles import direct_roles, flatten_roles


class PythonTypeGraph:
    """Linearization via __mro__, capability units via composed roles.

    Stateless - no state between calls. Every query reads the live
    class objects, so composition after declaration is observed.
    """

    def linearized_ancestors(self, cls: type) -> tuple[type, ...]:
        """Get cls.__mro__ without the implicit object root.

        Args:
            cls: Class to linearize

        Returns:
            Tuple starting with cls itself, most-derived first
        """
        return tuple(klass for klass in cls.__mro__ if klass is not object)

    def composed_capability_units(self, cls: type) -> tuple[type, ...]:
        """Get all roles composed by cls or any of its ancestors.

        Ancestors are visited in MRO order; within one class, roles in
        composition order, each followed by the roles it composes.
        CompositeRole groupings are flattened away.

        Args:
            cls: Class to inspect

        Returns:
            Tuple of roles, deduplicated by identity
        """
        seen: set[type] = set()
        units: list[type] = []
        for klass in self.linearized_ancestors(cls):
            units.extend(flatten_roles(direct_roles(klass), seen))
        return tuple(units)

    def operations(self, owner: type) -> ClassOperationTable:
        """Get operation table for class or role."""
        return ClassOperationTable(owner=owner)
