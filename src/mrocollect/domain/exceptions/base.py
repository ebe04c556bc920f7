"""Base exceptions for mrocollect domain."""


class MroCollectError(Exception):
    """Root exception for all mrocollect errors.

    All domain exceptions inherit from this.
    Allows catching all mrocollect-specific errors.
    """


class CollectWarning(UserWarning):
    """Non-fatal resolution diagnostic.

    Emitted through the warnings module when a derived operation
    locates no providers. Execution continues.
    """
