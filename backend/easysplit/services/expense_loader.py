"""Normalize stored expense records to the canonical Expense shape."""
from collections.abc import Mapping
from typing import Iterable

from easysplit.schemas import Expense, LegacyExpense, Participant, StoredExpense
from easysplit.services.split_calculator import compute_splits


def normalize_expense(record: StoredExpense) -> Expense:
    """
    Legacy records carry split_between instead of splits. They are always split
    equally among those ids, whatever their split_type says.
    """
    if isinstance(record, Expense):
        return record
    paid_by = [record.paid_by] if isinstance(record.paid_by, str) else record.paid_by
    consumers = [Participant(id=pid, name=pid, group_id=record.group_id) for pid in record.split_between]
    data = record.model_dump(exclude={"paid_by", "split_between", "split_type"})
    return Expense(
        **data,
        paid_by=paid_by,
        splits=compute_splits(record.amount, consumers, "equal"),
    )


def load_expense(record: Mapping) -> Expense:
    """Parse a raw record (camelCase or snake_case keys) from storage."""
    if "splits" in record and record["splits"] is not None:
        return Expense.model_validate(record)
    return normalize_expense(LegacyExpense.model_validate(record))


def load_expenses(records: Iterable) -> list[Expense]:
    out = []
    for r in records:
        if isinstance(r, (Expense, LegacyExpense)):
            out.append(normalize_expense(r))
        else:
            out.append(load_expense(r))
    return out
