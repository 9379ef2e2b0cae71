"""Domain exceptions raised by the finance tracker services."""


class FinanceTrackerError(Exception):
    """Base class for all finance tracker errors."""


class ValidationError(FinanceTrackerError, ValueError):
    """An entry or user breaks a business rule. The message says which."""


class PreconditionError(FinanceTrackerError, ValueError):
    """The caller passed a record without the identifier the operation needs."""


class RecordNotFoundError(FinanceTrackerError, LookupError):
    """A referenced entry or user does not exist in the store."""
