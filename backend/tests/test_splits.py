from decimal import Decimal

import pytest

from easysplit.schemas import ExpenseSplit, Participant, SplitType
from easysplit.services.split_calculator import UnknownSplitTypeError, compute_splits
from easysplit.services.split_validator import validate_splits


def _trio():
    return [Participant(id=pid, name=pid) for pid in ("P1", "P2", "P3")]


def test_equal_split(people):
    splits = compute_splits(1000, people, "equal")
    assert [s.amount for s in splits] == [Decimal("250.00")] * 4
    assert all(s.type == SplitType.EQUAL for s in splits)
    assert [s.participant_id for s in splits] == ["A", "B", "C", "D"]


def test_equal_split_keeps_rounding_drift():
    people = [Participant(id=str(i), name=str(i)) for i in range(7)]
    splits = compute_splits(100, people, "equal")
    assert splits[0].amount == Decimal("14.29")
    total = sum(s.amount for s in splits)
    assert total == Decimal("100.03")
    assert abs(total - 100) <= Decimal("0.01") * (len(people) - 1)


def test_equal_split_rounds_half_up():
    people = [Participant(id="x", name="x"), Participant(id="y", name="y")]
    splits = compute_splits(Decimal("0.05"), people, "equal")
    assert [s.amount for s in splits] == [Decimal("0.03"), Decimal("0.03")]


def test_percentage_split():
    splits = compute_splits(100, _trio(), "percentage", {"percentages": {"P1": 50, "P2": 25, "P3": 25}})
    assert [s.amount for s in splits] == [Decimal("50.00"), Decimal("25.00"), Decimal("25.00")]
    assert [s.percentage for s in splits] == [50, 25, 25]
    result = validate_splits(splits, 100, "percentage")
    assert result.is_valid
    assert result.errors == []


def test_percentage_kept_unrounded():
    splits = compute_splits(10, _trio(), "percentage", {"percentages": {"P1": 33.335, "P2": 33.335, "P3": 33.33}})
    assert splits[0].percentage == Decimal("33.335")
    assert splits[0].amount == Decimal("3.33")


def test_fixed_split_missing_amount_defaults_to_zero():
    splits = compute_splits(100, _trio(), "fixed", {"amounts": {"P1": 40, "P2": 40}})
    assert [s.amount for s in splits] == [Decimal("40.00"), Decimal("40.00"), Decimal("0.00")]
    result = validate_splits(splits, 100, "fixed")
    assert not result.is_valid
    assert len(result.errors) == 1
    assert "80.00" in result.errors[0] and "100" in result.errors[0]


def test_fixed_split_without_params():
    splits = compute_splits(50, _trio(), "fixed")
    assert all(s.amount == 0 for s in splits)


def test_unknown_split_type():
    with pytest.raises(UnknownSplitTypeError) as exc:
        compute_splits(100, _trio(), "shares")
    assert "shares" in str(exc.value)


def test_validate_empty_splits():
    result = validate_splits([], 100, "equal")
    assert not result.is_valid
    assert result.errors == ["At least one participant must be included in the split"]


def test_validate_collects_all_errors():
    splits = [
        ExpenseSplit(participant_id="a", amount=Decimal("-10"), percentage=Decimal("-10"), type="percentage"),
        ExpenseSplit(participant_id="b", amount=Decimal("50"), percentage=Decimal("50"), type="percentage"),
    ]
    result = validate_splits(splits, 100, "percentage")
    assert not result.is_valid
    assert len(result.errors) == 3
    assert result.total_split_amount == Decimal("40")


def test_validate_within_tolerance():
    splits = [
        ExpenseSplit(participant_id="a", amount=Decimal("33.33")),
        ExpenseSplit(participant_id="b", amount=Decimal("33.33")),
        ExpenseSplit(participant_id="c", amount=Decimal("33.33")),
    ]
    assert validate_splits(splits, 100, "equal").is_valid


def test_api_create_splits(client):
    res = client.post("/api/splits", json={
        "totalAmount": 100,
        "participants": [{"id": "P1", "name": "One"}, {"id": "P2", "name": "Two"}],
        "splitType": "percentage",
        "percentages": {"P1": 60, "P2": 40},
    })
    assert res.status_code == 200
    data = res.json()
    assert [s["amount"] for s in data["splits"]] == [60.0, 40.0]
    assert data["splits"][0]["participantId"] == "P1"
    assert data["validation"]["isValid"] is True


def test_api_create_splits_reports_mismatch(client):
    res = client.post("/api/splits", json={
        "totalAmount": 100,
        "participants": [{"id": "P1", "name": "One"}, {"id": "P2", "name": "Two"}],
        "splitType": "fixed",
        "amounts": {"P1": 30},
    })
    assert res.status_code == 200
    assert res.json()["validation"]["isValid"] is False


def test_api_unknown_split_type(client):
    res = client.post("/api/splits", json={
        "totalAmount": 100,
        "participants": [{"id": "P1", "name": "One"}],
        "splitType": "weird",
    })
    assert res.status_code == 400
    assert "weird" in res.json()["detail"]


def test_api_validate(client):
    res = client.post("/api/splits/validate", json={
        "splits": [{"participantId": "a", "amount": 10}],
        "totalAmount": 20,
        "splitType": "fixed",
    })
    assert res.status_code == 200
    data = res.json()
    assert data["isValid"] is False
    assert data["totalSplitAmount"] == 10.0


def test_validate_bad_total_does_not_raise():
    splits = [ExpenseSplit(participant_id="a", amount=10)]
    for total in (None, "ten", "NaN"):
        result = validate_splits(splits, total, "fixed")
        assert not result.is_valid
        assert result.errors == [f"Expense total is not a number ({total!r})"]
        assert result.total_split_amount == 10


def test_validate_skips_broken_entries():
    splits = [ExpenseSplit(participant_id="a", amount=10), None]
    result = validate_splits(splits, 10, "fixed")
    assert not result.is_valid
    assert result.errors == ["Every split must name a participant and an amount"]
