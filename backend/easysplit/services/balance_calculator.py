"""Net balance per participant from a group's expenses."""
import logging
from decimal import Decimal
from typing import Optional, Sequence

from easysplit.schemas import BalanceReport, Expense, Participant, Settlement
from easysplit.services.money import TOLERANCE, ZERO

logger = logging.getLogger(__name__)


def _well_formed(expenses, participants, settlements) -> bool:
    if not isinstance(expenses, (list, tuple)):
        logger.warning("compute_balances: expenses is not a sequence (%r)", type(expenses).__name__)
        return False
    if not isinstance(participants, (list, tuple)):
        logger.warning("compute_balances: participants is not a sequence (%r)", type(participants).__name__)
        return False
    if settlements is not None and not isinstance(settlements, (list, tuple)):
        logger.warning("compute_balances: settlements is not a sequence (%r)", type(settlements).__name__)
        return False
    return True


def compute_balances(
    expenses: Sequence[Expense],
    participants: Sequence[Participant],
    settlements: Optional[Sequence[Settlement]] = None,
) -> dict[str, Decimal]:
    """
    participant_id -> net balance (positive = is owed money, negative = owes money).

    Every roster participant appears, even with no activity. Ids used by expenses
    but missing from the roster are still tracked. Each payer is credited an equal
    part of the amount, whatever the consumption split. Settlements, when given,
    count as payments from from_id to to_id. Nothing is re-rounded here.
    Malformed inputs give an empty map.
    """
    balances: dict[str, Decimal] = {}
    if not _well_formed(expenses, participants, settlements):
        return balances

    for p in participants:
        if p is not None and p.id:
            balances[p.id] = ZERO

    for e in expenses:
        paid_share = e.amount / len(e.paid_by)
        for pid in e.paid_by:
            balances[pid] = balances.get(pid, ZERO) + paid_share
        for s in e.splits:
            balances[s.participant_id] = balances.get(s.participant_id, ZERO) - s.amount

    for s in settlements or ():
        balances[s.from_id] = balances.get(s.from_id, ZERO) + s.amount
        balances[s.to_id] = balances.get(s.to_id, ZERO) - s.amount

    return balances


def summarize_balances(
    expenses: Sequence[Expense],
    participants: Sequence[Participant],
    settlements: Optional[Sequence[Settlement]] = None,
) -> BalanceReport:
    """Balances plus the diagnostics the bare map cannot carry."""
    if not _well_formed(expenses, participants, settlements):
        return BalanceReport(input_ok=False)

    balances = compute_balances(expenses, participants, settlements)
    roster = {p.id for p in participants if p is not None}
    return BalanceReport(
        balances=balances,
        unknown_participant_ids=[pid for pid in balances if pid not in roster],
        drift=sum(balances.values(), ZERO),
        settled=all(abs(b) <= TOLERANCE for b in balances.values()),
    )
