"""
Exceptions signalling that a `Bag` was used in breach of its contract.

These describe programming bugs (e.g. removing something that was never added), not conditions
that callers are expected to recover from. They derive from `AssertionError` for that reason, but
are always raised explicitly so that they are not stripped out when running with `python -O`.
"""


class ContractViolation(AssertionError):
    """Base class for all precondition failures raised by `multibag`."""


class InvalidOccurrenceCount(ContractViolation):
    """Raised when `add` or `remove` is asked to handle a non-positive number of occurrences."""


class InvalidRemoval(ContractViolation):
    """Raised when removing an absent element, or more occurrences than the bag holds."""


class OutOfBoundsCursor(ContractViolation):
    """Raised when dereferencing a cursor outside of `[start_index, end_index)`."""
