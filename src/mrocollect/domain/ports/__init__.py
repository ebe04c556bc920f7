"""Domain ports (interfaces/protocols)."""

from mrocollect.domain.ports.type_graph import OperationTable, TypeGraph

__all__ = [
    "OperationTable",
    "TypeGraph",
]
