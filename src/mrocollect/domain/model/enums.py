"""Domain enumerations and their accepted declaration literals."""

from collections.abc import Mapping
from enum import Enum, auto
from types import MappingProxyType


class Source(Enum):
    """Where providers are searched."""

    SELF = auto()  # relocated or own provider of declaring class
    BASES = auto()  # MRO ancestors, declaring class excluded
    CAPABILITIES = auto()  # composed roles, transitively


class MethodOrder(Enum):
    """Traversal order inside BASES and CAPABILITIES buckets."""

    FORWARD = auto()  # most-derived / first-declared first
    REVERSE = auto()  # base-most / last-declared first


class CallMode(Enum):
    """How a provider's return value becomes collected items."""

    MULTI = auto()  # sequences spread, None dropped
    SINGLE = auto()  # return value is exactly one item


# Literal → member. Exact, case-sensitive match.
SOURCE_LITERALS: Mapping[str, Source] = MappingProxyType(
    {
        "self": Source.SELF,
        "bases": Source.BASES,
        "superclasses": Source.BASES,
        "capabilities": Source.CAPABILITIES,
        "roles": Source.CAPABILITIES,
    }
)

ORDER_LITERALS: Mapping[str, MethodOrder] = MappingProxyType(
    {
        "forward": MethodOrder.FORWARD,
        "standard": MethodOrder.FORWARD,
        "top_down": MethodOrder.FORWARD,
        "reverse": MethodOrder.REVERSE,
        "bottom_up": MethodOrder.REVERSE,
    }
)

CALL_MODE_LITERALS: Mapping[str, CallMode] = MappingProxyType(
    {
        "multi": CallMode.MULTI,
        "list": CallMode.MULTI,
        "single": CallMode.SINGLE,
        "scalar": CallMode.SINGLE,
    }
)

DEFAULT_SOURCES: tuple[Source, ...] = (Source.SELF, Source.BASES, Source.CAPABILITIES)
