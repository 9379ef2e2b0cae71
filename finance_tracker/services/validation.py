"""
Entry validation.

validate_entry() stops at the first broken rule. The rules are
checked in a fixed order, so the same entry always produces the
same message.
"""

from decimal import Decimal

from finance_tracker.exceptions import ValidationError
from finance_tracker.models.records import Entry


MIN_MONTH, MAX_MONTH = 1, 12

# Four decimal digits
MIN_YEAR, MAX_YEAR = 1000, 9999

# Matches the scale of entries.amount
AMOUNT_DECIMAL_PLACES = 2


def validate_entry(entry: Entry) -> None:
    """
    Raise ValidationError if the entry cannot be persisted.

    Order: description, month, year, owner, amount, kind.
    id, registered_on and status are not checked here; the
    service assigns or requires them depending on the operation.
    """
    if entry.description is None or not entry.description.strip():
        raise ValidationError("invalid description")

    if entry.month is None or not MIN_MONTH <= entry.month <= MAX_MONTH:
        raise ValidationError("invalid month")

    if entry.year is None or not MIN_YEAR <= entry.year <= MAX_YEAR:
        raise ValidationError("invalid year")

    if entry.owner is None or entry.owner.id is None:
        raise ValidationError("missing user")

    if entry.amount is None or not _is_storable_amount(entry.amount):
        raise ValidationError("invalid amount")

    if entry.kind is None:
        raise ValidationError("missing entry type")


def _is_storable_amount(amount) -> bool:
    """Positive, and no more decimal places than the column keeps."""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    if not amount.is_finite() or amount <= 0:
        return False
    return amount.normalize().as_tuple().exponent >= -AMOUNT_DECIMAL_PLACES
