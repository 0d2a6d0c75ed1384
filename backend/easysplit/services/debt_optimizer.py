"""Turn net balances into the fewest debtor-to-creditor payments."""
import logging
from collections.abc import Mapping
from typing import Optional, Sequence

from easysplit.schemas import Debt, Expense, Participant, Settlement
from easysplit.services.balance_calculator import compute_balances
from easysplit.services.money import TOLERANCE, round_money, to_decimal

logger = logging.getLogger(__name__)

ORDERS = ("insertion", "id")


def optimize_debts(balances, fallback_currency: str, order: str = "insertion") -> list[Debt]:
    """
    balances: participant_id -> net balance (positive = is owed money, negative = owes money).
    Returns at most len(creditors) + len(debtors) - 1 transfers.

    Balances within 0.01 of zero count as settled. With order="insertion" the
    pairing follows the balance map's order, so equal maps built in a different
    order can pair differently. order="id" sorts both sides by participant id.
    """
    if not isinstance(balances, Mapping):
        logger.warning("optimize_debts: balances is not a mapping (%r)", type(balances).__name__)
        return []
    if order not in ORDERS:
        raise ValueError(f"Unknown debt order: {order}")

    creditors = []  # [participant_id, remaining]
    debtors = []
    for pid, bal in balances.items():
        bal = to_decimal(bal)
        if bal > TOLERANCE:
            creditors.append([pid, bal])
        elif bal < -TOLERANCE:
            debtors.append([pid, -bal])
    if order == "id":
        creditors.sort(key=lambda x: x[0])
        debtors.sort(key=lambda x: x[0])

    out: list[Debt] = []
    i, j = 0, 0
    while i < len(creditors) and j < len(debtors):
        creditor, debtor = creditors[i], debtors[j]
        settle = min(creditor[1], debtor[1])
        if settle > TOLERANCE:
            out.append(Debt(
                from_id=debtor[0],
                to_id=creditor[0],
                amount=round_money(settle),
                currency=fallback_currency,
            ))
        creditor[1] -= settle
        debtor[1] -= settle
        if creditor[1] < TOLERANCE:
            i += 1
        if debtor[1] < TOLERANCE:
            j += 1
    return out


def calculate_debts(
    expenses: Sequence[Expense],
    participants: Sequence[Participant],
    settlements: Optional[Sequence[Settlement]] = None,
    fallback_currency: str = "PKR",
    order: str = "insertion",
) -> list[Debt]:
    """Balances then optimization; currency comes from the first expense."""
    if not isinstance(expenses, (list, tuple)) or not isinstance(participants, (list, tuple)):
        logger.warning("calculate_debts: expenses or participants is not a sequence")
        return []
    currency = expenses[0].currency if expenses else fallback_currency
    balances = compute_balances(expenses, participants, settlements)
    return optimize_debts(balances, currency, order=order)
