"""Turn one expense total into per-participant shares."""
from decimal import Decimal
from typing import Optional, Sequence

from easysplit.schemas import ExpenseSplit, Participant, SplitType
from easysplit.services.money import ZERO, round_money, to_decimal


class UnknownSplitTypeError(ValueError):
    def __init__(self, split_type):
        super().__init__(f"Unknown split type: {split_type}")
        self.split_type = split_type


def _lookup(table: Optional[dict], participant_id: str) -> Decimal:
    if not table:
        return ZERO
    value = table.get(participant_id)
    return to_decimal(value) if value is not None else ZERO


def compute_splits(
    total_amount,
    participants: Sequence[Participant],
    split_type,
    rule_params: Optional[dict] = None,
) -> list[ExpenseSplit]:
    """
    total_amount: positive expense total.
    rule_params: {"amounts": {id: amount}} for fixed, {"percentages": {id: pct}} for percentage.
    Each share is rounded to cents on its own; the remainder is not redistributed,
    so an equal split can drift from the total by up to 0.01 * (n - 1).
    Fixed amounts and percentages are taken as given, checking them is validate_splits' job.
    """
    try:
        kind = SplitType(split_type)
    except ValueError:
        raise UnknownSplitTypeError(split_type) from None

    total = to_decimal(total_amount)
    params = rule_params or {}
    splits: list[ExpenseSplit] = []

    if kind is SplitType.EQUAL:
        share = round_money(total / len(participants))
        for p in participants:
            splits.append(ExpenseSplit(participant_id=p.id, amount=share, type=kind))

    elif kind is SplitType.FIXED:
        amounts = params.get("amounts")
        for p in participants:
            splits.append(ExpenseSplit(
                participant_id=p.id,
                amount=round_money(_lookup(amounts, p.id)),
                type=kind,
            ))

    else:
        percentages = params.get("percentages")
        for p in participants:
            pct = _lookup(percentages, p.id)
            splits.append(ExpenseSplit(
                participant_id=p.id,
                amount=round_money(total * pct / 100),
                percentage=pct,
                type=kind,
            ))

    return splits
