"""Role (capability unit) composition for plain Python classes.

Roles are orthogonal to inheritance: they never appear in __mro__.
Composition is recorded on the target's own __dict__:

    __roles__                 Direct role entries, in composition order.
                              A multi-role compose() call is recorded as
                              one synthetic CompositeRole entry.
    __composed_operations__   Name -> object copied onto the target from
                              roles. While the target still holds that
                              object, the name belongs to the role that
                              supplied it, not to the target.

Example:
    class Fruit(Role):
        def items(self):
            return ("apple", "orange")

    @with_roles(Fruit)
    class Basket:
        pass

    Basket().items()  # ("apple", "orange")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from mrocollect.domain.exceptions import RoleCompositionError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, Mapping

logger = logging.getLogger(__name__)

ROLES_ATTR = "__roles__"
COMPOSED_ATTR = "__composed_operations__"


class Role:
    """Marker base for capability units.

    Subclass it and define methods. Roles are composed, never instantiated.
    """

    def __new__(cls, *args: object, **kwargs: object) -> Role:
        """Reject instantiation."""
        raise TypeError(f"role {cls.__qualname__} cannot be instantiated")


@dataclass(frozen=True, slots=True, eq=False)
class CompositeRole:
    """Synthetic grouping of roles composed in a single call.

    Never reported as a capability unit itself; only its members are.

    Attributes:
        roles: Member roles in declared order
    """

    roles: tuple[type[Role], ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.roles) < 2:
            raise ValueError(f"composite requires at least 2 roles, got {len(self.roles)}")

    def __str__(self) -> str:
        """Format as Role1|Role2|..."""
        return "|".join(r.__qualname__ for r in self.roles)


type RoleEntry = type[Role] | CompositeRole


def is_role(obj: object) -> bool:
    """Check if obj is a concrete role class."""
    return isinstance(obj, type) and issubclass(obj, Role) and obj is not Role


def direct_roles(owner: type) -> tuple[RoleEntry, ...]:
    """Role entries composed directly into owner (not inherited)."""
    return owner.__dict__.get(ROLES_ATTR, ())


def composed_operations(owner: type) -> Mapping[str, object]:
    """Objects copied onto owner by role composition, by name (may be stale)."""
    return owner.__dict__.get(COMPOSED_ATTR, MappingProxyType({}))


def composed_names(owner: type) -> frozenset[str]:
    """Names whose binding on owner is still the role-copied object.

    A name rebound on owner after composition belongs to owner again.
    """
    copied = composed_operations(owner)
    return frozenset(
        name for name, body in copied.items() if name in owner.__dict__ and owner.__dict__[name] is body
    )


def forget_composed(owner: type, name: str) -> None:
    """Drop the role-copied record for name, if any."""
    copied = composed_operations(owner)
    if name in copied:
        remaining = {key: body for key, body in copied.items() if key != name}
        setattr(owner, COMPOSED_ATTR, MappingProxyType(remaining))


def own_operation_names(owner: type) -> tuple[str, ...]:
    """Non-dunder names owner defines itself, in definition order."""
    copied = composed_names(owner)
    return tuple(
        name
        for name in owner.__dict__
        if not (name.startswith("__") and name.endswith("__")) and name not in copied
    )


def flatten_roles(entries: Iterable[RoleEntry], seen: set[type]) -> Iterator[type[Role]]:
    """Walk role entries pre-order: role, then the roles it composes.

    CompositeRole groupings are descended into but not yielded.
    Roles already in seen are skipped (dedup by identity); seen is updated.
    """
    for entry in entries:
        if isinstance(entry, CompositeRole):
            yield from flatten_roles(entry.roles, seen)
            continue
        if entry in seen:
            continue
        seen.add(entry)
        yield entry
        yield from flatten_roles(direct_roles(entry), seen)


def compose[T: type](target: T, *roles: type[Role]) -> T:
    """Compose roles into a class or another role.

    May be called after collect(): derived operations re-walk the role
    graph on every call.

    Methods each role supplies (its own and those of its sub-roles) are
    copied onto target unless target already defines the name. The first
    role to supply a name wins.

    Args:
        target: Class or role receiving the roles
        *roles: Roles to compose, in order

    Returns:
        target (for decorator use)

    Raises:
        RoleCompositionError: If target is not a class, no roles given,
            an argument is not a role, or composition would be cyclic
    """
    if not isinstance(target, type):
        raise RoleCompositionError(target, "target must be a class")
    if not roles:
        raise RoleCompositionError(target, "at least one role required")

    for role in roles:
        if not is_role(role):
            raise RoleCompositionError(target, f"{role!r} is not a Role subclass")
        if role is target or target in flatten_roles((role,), set()):
            raise RoleCompositionError(target, f"{role.__qualname__} would compose itself")

    entry: RoleEntry = roles[0] if len(roles) == 1 else CompositeRole(roles=tuple(roles))
    setattr(target, ROLES_ATTR, (*direct_roles(target), entry))

    copied = dict(composed_operations(target))
    for role in flatten_roles((entry,), set()):
        for name in own_operation_names(role):
            if name in target.__dict__:
                continue
            body = role.__dict__[name]
            setattr(target, name, body)
            copied[name] = body
    setattr(target, COMPOSED_ATTR, MappingProxyType(copied))

    label = str(entry) if isinstance(entry, CompositeRole) else entry.__qualname__
    logger.debug("composed %s into %s", label, target.__qualname__)
    return target


def with_roles[T: type](*roles: type[Role]) -> Callable[[T], T]:
    """Class decorator form of compose().

    Example:
        @with_roles(Fruit, Melon)
        class Basket:
            ...
    """

    def decorate(target: T) -> T:
        return compose(target, *roles)

    return decorate
