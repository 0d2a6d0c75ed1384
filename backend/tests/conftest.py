import pytest
from fastapi.testclient import TestClient

from easysplit.main import app
from easysplit.schemas import Expense, ExpenseSplit, Participant


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def people():
    return [Participant(id=pid, name=pid, group_id="g1") for pid in ("A", "B", "C", "D")]


@pytest.fixture
def make_expense():
    counter = {"n": 0}

    def _make(amount, paid_by, shares, currency="PKR", **extra):
        counter["n"] += 1
        return Expense(
            id=f"e{counter['n']}",
            group_id="g1",
            amount=amount,
            currency=currency,
            paid_by=paid_by,
            splits=[ExpenseSplit(participant_id=pid, amount=amt) for pid, amt in shares.items()],
            **extra,
        )
    return _make
