"""Settlements: who owes whom for a group snapshot, and group analytics."""
from fastapi import APIRouter, HTTPException

from easysplit import config
from easysplit.schemas import (
    BalanceItem, ExpenseStats, GroupSnapshot, SettlementSummary, StatsRequest,
)
from easysplit.services.balance_calculator import summarize_balances
from easysplit.services.debt_optimizer import ORDERS, optimize_debts
from easysplit.services.expense_loader import load_expenses
from easysplit.services.stats import calculate_expense_stats

router = APIRouter(prefix="/settlements", tags=["settlements"])


@router.post("/group", response_model=SettlementSummary)
def get_settlements(data: GroupSnapshot):
    order = data.order or config.DEBT_ORDER
    if order not in ORDERS:
        raise HTTPException(status_code=400, detail=f"Invalid order. Must be one of: {', '.join(ORDERS)}")
    apply_settlements = config.APPLY_SETTLEMENTS if data.apply_settlements is None else data.apply_settlements

    expenses = load_expenses(data.expenses)
    currency = expenses[0].currency if expenses else (data.currency or config.DEFAULT_CURRENCY)
    report = summarize_balances(
        expenses,
        data.participants,
        data.settlements if apply_settlements else None,
    )
    return SettlementSummary(
        balances=[BalanceItem(participant_id=pid, balance=bal) for pid, bal in report.balances.items()],
        debts=optimize_debts(report.balances, currency, order=order),
        unknown_participant_ids=report.unknown_participant_ids,
        settled=report.settled,
        currency=currency,
    )


@router.post("/stats", response_model=ExpenseStats)
def get_stats(data: StatsRequest):
    return calculate_expense_stats(load_expenses(data.expenses), data.participants)
