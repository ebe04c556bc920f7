"""Role composition exceptions."""

from mrocollect.domain.exceptions.base import MroCollectError


class RoleCompositionError(MroCollectError, TypeError):
    """Role cannot be composed into target.

    Inherits TypeError for semantic correctness (wrong kind of object).

    Attributes:
        target: Composition target
        reason: Why composition was rejected
    """

    def __init__(self, target: object, reason: str) -> None:
        """Initialize with target and reason."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.target = target
        self.reason = reason
        name = getattr(target, "__qualname__", repr(target))
        super().__init__(f"cannot compose into {name}: {reason}")
