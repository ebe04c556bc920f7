"""Declaration (configuration) exceptions.

Raised synchronously by collect() before the target class is touched.
"""

from __future__ import annotations

from mrocollect.domain.exceptions.base import MroCollectError


class CollectConfigError(MroCollectError, ValueError):
    """Invalid collect() declaration.

    Inherits ValueError for semantic correctness (bad declaration value).
    Base for all declaration errors.
    """


class InvalidNameError(CollectConfigError, TypeError):
    """Derived or provider name is not a non-empty identifier.

    Attributes:
        role: Which name was invalid ("name" or "provider")
        value: Offending value
    """

    def __init__(self, role: str, value: object) -> None:
        """Initialize with name role and offending value."""
        if not role:
            raise ValueError("role must not be empty")

        self.role = role
        self.value = value
        super().__init__(f"{role} must be a non-empty identifier string, got {value!r}")


class OddOptionsError(CollectConfigError):
    """Positional option list is not made of key/value pairs.

    Attributes:
        name: Derived operation name
        count: Number of positional option items received
    """

    def __init__(self, name: str, count: int) -> None:
        """Initialize with derived name and item count."""
        self.name = name
        self.count = count
        super().__init__(
            f"incorrect number of arguments passed to collect {name!r}: "
            f"expected key/value pairs, got {count} item(s)"
        )


class UnknownOptionError(CollectConfigError):
    """Option key not recognized.

    Attributes:
        option: Offending key
    """

    def __init__(self, option: object) -> None:
        """Initialize with offending key."""
        self.option = option
        super().__init__(f"unknown collect option: {option!r}")


class DuplicateOptionError(CollectConfigError):
    """Same option supplied twice (directly or through an alias).

    Attributes:
        option: Canonical option key
    """

    def __init__(self, option: str) -> None:
        """Initialize with canonical key."""
        if not option:
            raise ValueError("option must not be empty")

        self.option = option
        super().__init__(f"collect option {option!r} given more than once")


class InvalidOptionValueError(CollectConfigError):
    """Option value outside its accepted set.

    Attributes:
        option: Canonical option key
        value: Offending value
        reason: Why value is invalid
    """

    def __init__(self, option: str, value: object, reason: str) -> None:
        """Initialize with key, value and reason."""
        if not option:
            raise ValueError("option must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.option = option
        self.value = value
        self.reason = reason
        super().__init__(f"bad {option!r} value {value!r}: {reason}")


class InvalidTargetError(CollectConfigError, TypeError):
    """collect() target is not a plain class.

    Attributes:
        target: Offending target
        reason: Why target is rejected
    """

    def __init__(self, target: object, reason: str) -> None:
        """Initialize with target and reason."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.target = target
        self.reason = reason
        super().__init__(f"cannot collect on {target!r}: {reason}")
