"""Group analytics: totals, categories, who paid what, monthly trend."""
from decimal import Decimal
from typing import Sequence

from easysplit.schemas import Expense, ExpenseStats, Participant, ParticipantContribution
from easysplit.services.money import ZERO, round_money


def calculate_expense_stats(expenses: Sequence[Expense], participants: Sequence[Participant]) -> ExpenseStats:
    stats = ExpenseStats(total_expenses=len(expenses))
    if not expenses:
        return stats

    total = sum((e.amount for e in expenses), ZERO)
    stats.total_amount = total
    stats.average_expense = total / len(expenses)

    categories: dict[str, Decimal] = {}
    months: dict[str, Decimal] = {}
    for e in expenses:
        cat = e.category or "Other"
        categories[cat] = categories.get(cat, ZERO) + e.amount
        if e.date is not None:
            key = e.date.strftime("%Y-%m")
            months[key] = months.get(key, ZERO) + e.amount
    stats.category_breakdown = categories
    stats.monthly_trends = months

    # Payers outside the roster are not reported.
    contributions = {p.id: ParticipantContribution(name=p.name) for p in participants}
    for e in expenses:
        share = e.amount / len(e.paid_by)
        for pid in e.paid_by:
            c = contributions.get(pid)
            if c is None:
                continue
            c.total_paid += share
            c.expense_count += 1
    for c in contributions.values():
        c.total_paid = round_money(c.total_paid)
    stats.participant_contributions = contributions
    return stats
