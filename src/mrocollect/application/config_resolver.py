"""Declaration parsing: raw collect() arguments → CollectConfig.

Two call shapes:
    collect(cls, "items", aggregator_fn)                  # shorthand
    collect(cls, "items", "order", "reverse", ...)        # key/value pairs
    collect(cls, "items", order="reverse", ...)           # keywords

Pure: validates everything before anything is installed.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from mrocollect.domain.exceptions import (
    DuplicateOptionError,
    InvalidNameError,
    InvalidOptionValueError,
    OddOptionsError,
    UnknownOptionError,
)
from mrocollect.domain.model.config import CollectConfig
from mrocollect.domain.model.enums import (
    CALL_MODE_LITERALS,
    ORDER_LITERALS,
    SOURCE_LITERALS,
    CallMode,
    MethodOrder,
    Source,
)

if TYPE_CHECKING:
    from enum import Enum

logger = logging.getLogger(__name__)

# Accepted key → canonical CollectConfig field.
OPTION_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "aggregator": "aggregator",
        "collector": "aggregator",
        "provider": "provider",
        "sources": "sources",
        "from": "sources",
        "order": "order",
        "method_order": "order",
        "recurse_bases": "recurse_bases",
        "superclass_recurse": "recurse_bases",
        "call_mode": "call_mode",
        "context": "call_mode",
    }
)


def resolve_config(name: object, *args: object, **options: object) -> CollectConfig:
    """Parse and validate one collect() declaration.

    Args:
        name: Derived operation name
        *args: Either a single aggregator callable, or flat key/value pairs
        **options: Keyword options (merged with positional pairs)

    Returns:
        Validated CollectConfig with defaults applied

    Raises:
        InvalidNameError: If name (or provider) is not an identifier
        OddOptionsError: If positional options are not key/value pairs
        UnknownOptionError: If an option key is not recognized
        DuplicateOptionError: If an option is given twice
        InvalidOptionValueError: If an option value is invalid
    """
    derived = _validate_name("name", name)

    if len(args) == 1 and callable(args[0]):
        pairs: list[tuple[object, object]] = [("aggregator", args[0])]
    else:
        if len(args) % 2:
            raise OddOptionsError(derived, len(args))
        pairs = [(args[i], args[i + 1]) for i in range(0, len(args), 2)]
    raw = _canonicalize_keys([*pairs, *options.items()])

    fields: dict[str, object] = {}
    if "provider" in raw:
        fields["provider"] = _validate_name("provider", raw["provider"])
    if "sources" in raw:
        fields["sources"] = _parse_sources(raw["sources"])
    if "order" in raw:
        fields["order"] = _parse_literal("order", raw["order"], MethodOrder, ORDER_LITERALS)
    if "call_mode" in raw:
        fields["call_mode"] = _parse_literal("call_mode", raw["call_mode"], CallMode, CALL_MODE_LITERALS)
    if "recurse_bases" in raw:
        fields["recurse_bases"] = _parse_bool("recurse_bases", raw["recurse_bases"])
    if "aggregator" in raw:
        fields["aggregator"] = _parse_aggregator(raw["aggregator"])

    config = CollectConfig(name=derived, **fields)  # type: ignore[arg-type]
    logger.debug("resolved collect config: %s", config)
    return config


def _validate_name(role: str, value: object) -> str:
    if not isinstance(value, str) or not value.isidentifier():
        raise InvalidNameError(role, value)
    return value


def _canonicalize_keys(pairs: list[tuple[object, object]]) -> dict[str, object]:
    """Map every key (alias included) to its canonical field, once."""
    raw: dict[str, object] = {}
    for key, value in pairs:
        if not isinstance(key, str) or key not in OPTION_KEYS:
            raise UnknownOptionError(key)
        canonical = OPTION_KEYS[key]
        if canonical in raw:
            raise DuplicateOptionError(canonical)
        raw[canonical] = value
    return raw


def _parse_literal[E: Enum](
    option: str,
    value: object,
    enum: type[E],
    literals: Mapping[str, E],
) -> E:
    if isinstance(value, enum):
        return value
    if isinstance(value, str) and value in literals:
        return literals[value]
    raise InvalidOptionValueError(option, value, f"expected one of {sorted(literals)}")


def _parse_sources(value: object) -> tuple[Source, ...]:
    """Normalize a single literal or a sequence of literals."""
    items = (value,) if isinstance(value, (str, Source)) else value
    if not isinstance(items, (list, tuple)):
        raise InvalidOptionValueError("sources", value, "expected a literal or a list/tuple of literals")
    if not items:
        raise InvalidOptionValueError("sources", value, "must not be empty")
    return tuple(_parse_literal("sources", item, Source, SOURCE_LITERALS) for item in items)


def _parse_bool(option: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise InvalidOptionValueError(option, value, "expected bool")
    return value


def _parse_aggregator(value: object) -> Callable[..., object]:
    """Check callable and arity: must accept the target positionally."""
    if not callable(value):
        raise InvalidOptionValueError("aggregator", value, "expected a callable")

    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        # builtins without introspectable signature: accept as-is
        return value

    try:
        signature.bind_partial(None)
    except TypeError:
        raise InvalidOptionValueError(
            "aggregator", value, f"must accept the target positionally, signature is {signature}"
        ) from None
    return value
