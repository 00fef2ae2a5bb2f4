"""Errors raised by the reward evaluator.

The API layer maps them onto HTTP responses: ValidationFailure -> 422,
NotFound -> 404, StorageFailure -> 500.
"""


class RewardTrackerError(Exception):
    """Base class for ledger errors."""


class ValidationFailure(RewardTrackerError):
    """Input is malformed or out of range."""


class NotFound(RewardTrackerError):
    """The requested row does not exist."""


class StorageFailure(RewardTrackerError):
    """The database rejected or failed the operation."""
