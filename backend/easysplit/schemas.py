"""Pydantic schemas for engine records and request/response bodies."""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

# Decimal inside the engine, plain JSON number on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ----- Constants -----
class SplitType(str, Enum):
    EQUAL = "equal"
    FIXED = "fixed"
    PERCENTAGE = "percentage"


EXPENSE_CATEGORIES = [
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Entertainment",
    "Bills & Utilities",
    "Travel",
    "Healthcare",
    "Education",
    "Groceries",
    "Other",
]

CURRENCIES = {
    "PKR": "Pakistani Rupee",
    "USD": "US Dollar",
    "EUR": "Euro",
    "GBP": "British Pound",
    "INR": "Indian Rupee",
    "JPY": "Japanese Yen",
    "CNY": "Chinese Yuan",
}


# ----- Participant -----
class Participant(CamelModel):
    id: str
    name: str
    group_id: Optional[str] = None


# ----- Expense -----
class ExpenseSplit(CamelModel):
    participant_id: str
    amount: Money
    percentage: Optional[Money] = None
    type: SplitType = SplitType.EQUAL


class ExpenseBase(CamelModel):
    id: str
    group_id: Optional[str] = None
    amount: Money = Field(gt=0)
    currency: str = "PKR"
    date: Optional[datetime] = None
    category: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None


class Expense(ExpenseBase):
    paid_by: list[str] = Field(min_length=1)
    splits: list[ExpenseSplit]

    @field_validator("paid_by", mode="before")
    @classmethod
    def _payers_as_list(cls, v):
        return [v] if isinstance(v, str) else v

    @field_validator("paid_by")
    @classmethod
    def _dedupe_payers(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))


class LegacyExpense(ExpenseBase):
    """Older stored shape: an equal split over ``split_between``."""

    paid_by: Union[str, Annotated[list[str], Field(min_length=1)]]
    split_between: list[str] = Field(min_length=1)
    split_type: Optional[str] = None


StoredExpense = Union[Expense, LegacyExpense]


# ----- Settlement -----
class Settlement(CamelModel):
    id: Optional[str] = None
    group_id: Optional[str] = None
    from_id: str
    to_id: str
    amount: Money = Field(gt=0)
    currency: str = "PKR"
    settled_at: Optional[datetime] = None
    notes: Optional[str] = None


class Debt(CamelModel):
    from_id: str
    to_id: str
    amount: Money
    currency: str


# ----- Results -----
class ValidationResult(CamelModel):
    is_valid: bool = True
    errors: list[str] = []
    total_split_amount: Money = Decimal("0")


class BalanceReport(CamelModel):
    balances: dict[str, Money] = {}
    input_ok: bool = True
    unknown_participant_ids: list[str] = []
    drift: Money = Decimal("0")
    settled: bool = True


class ParticipantContribution(CamelModel):
    name: str
    total_paid: Money = Decimal("0")
    expense_count: int = 0


class ExpenseStats(CamelModel):
    total_expenses: int = 0
    total_amount: Money = Decimal("0")
    average_expense: Money = Decimal("0")
    category_breakdown: dict[str, Money] = {}
    participant_contributions: dict[str, ParticipantContribution] = {}
    monthly_trends: dict[str, Money] = {}


# ----- Requests / responses -----
class SplitRequest(CamelModel):
    total_amount: Money = Field(gt=0)
    participants: list[Participant] = Field(min_length=1)
    split_type: str = "equal"
    amounts: Optional[dict[str, Money]] = None
    percentages: Optional[dict[str, Money]] = None


class SplitResponse(CamelModel):
    splits: list[ExpenseSplit]
    validation: ValidationResult


class ValidateRequest(CamelModel):
    splits: list[ExpenseSplit] = []
    total_amount: Money
    split_type: str = "equal"


class GroupSnapshot(CamelModel):
    participants: list[Participant] = []
    expenses: list[StoredExpense] = []
    settlements: list[Settlement] = []
    currency: Optional[str] = None
    apply_settlements: Optional[bool] = None
    order: Optional[str] = None


class StatsRequest(CamelModel):
    participants: list[Participant] = []
    expenses: list[StoredExpense] = []


class BalanceItem(CamelModel):
    participant_id: str
    balance: Money


class SettlementSummary(CamelModel):
    balances: list[BalanceItem]
    debts: list[Debt]
    unknown_participant_ids: list[str] = []
    settled: bool
    currency: str
