"""Errors raised by store adapters.

These are infrastructure failures, not placement rule violations: they are
deliberately kept outside the `DomainError` hierarchy.
"""


class StoreError(Exception):
    """Base class for storage-related errors."""


class StoreUnavailableError(StoreError):
    """Raised when the backing store cannot be reached or fails unexpectedly."""


class CageVersionConflictError(StoreError):
    """Raised when a cage changed between being read and being written.

    Attributes:
        label (str): The cage whose write lost the compare-and-swap.
        expected (int): The version the writer read.
        actual (int | None): The version found at write time, if known.
    """

    def __init__(self, label: str, expected: int, actual: int | None = None) -> None:
        super().__init__(
            f"Cage ({label}) version conflict: expected={expected}, actual={actual}"
        )
        self.label = label
        self.expected = expected
        self.actual = actual
