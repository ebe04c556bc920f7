"""Infrastructure: adapters binding the engine to real Python classes."""

from mrocollect.infrastructure.operation_table import ClassOperationTable
from mrocollect.infrastructure.python_graph import PythonTypeGraph
from mrocollect.infrastructure.roles import CompositeRole, Role, compose, with_roles

__all__ = [
    "ClassOperationTable",
    "CompositeRole",
    "PythonTypeGraph",
    "Role",
    "compose",
    "with_roles",
]
