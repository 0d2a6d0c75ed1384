"""Consistency checks for computed splits."""
import logging
from decimal import InvalidOperation
from typing import Optional, Sequence

from easysplit.schemas import ExpenseSplit, SplitType, ValidationResult
from easysplit.services.money import TOLERANCE, ZERO, to_decimal

logger = logging.getLogger(__name__)


def validate_splits(
    splits: Optional[Sequence[ExpenseSplit]],
    total_amount,
    split_type,
) -> ValidationResult:
    """Collect every applicable error in one pass; never raises."""
    result = ValidationResult()

    if not splits:
        result.is_valid = False
        result.errors.append("At least one participant must be included in the split")
        return result

    entries = [s for s in splits if isinstance(s, ExpenseSplit)]
    if len(entries) != len(splits):
        result.errors.append("Every split must name a participant and an amount")

    try:
        total = to_decimal(total_amount)
    except (TypeError, ValueError, InvalidOperation):
        total = None
    if total is not None and not total.is_finite():
        total = None
    if total is None:
        result.errors.append(f"Expense total is not a number ({total_amount!r})")

    result.total_split_amount = sum((s.amount for s in entries), ZERO)

    if total is not None and abs(result.total_split_amount - total) > TOLERANCE:
        result.errors.append(
            f"Split amounts ({result.total_split_amount}) don't match expense total ({total})"
        )

    if split_type == SplitType.PERCENTAGE:
        total_pct = sum((s.percentage or ZERO for s in entries), ZERO)
        if abs(total_pct - 100) > TOLERANCE:
            result.errors.append(f"Percentages must add up to 100% (currently {total_pct}%)")

    if any(s.amount < 0 for s in entries):
        result.errors.append("Split amounts cannot be negative")

    result.is_valid = not result.errors
    if not result.is_valid:
        logger.debug("Split validation failed: %s", result.errors)
    return result
