from decimal import Decimal
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from hearthway.core.config import settings


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SplitType(str, Enum):
    EVEN = "EVEN"
    PERCENT = "PERCENT"
    SHARES = "SHARES"


class GroupType(str, Enum):
    PROJECT = "PROJECT"
    TRIP = "TRIP"


class ExpenseStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    REIMBURSED = "REIMBURSED"
    PARTIALLY_PAID = "PARTIALLY_PAID"


class GroupMember(CamelModel):
    id: str
    user_id: str | None = None
    display_name: str
    email: str | None = None


class ExpenseParticipant(CamelModel):
    id: str | None = None
    expense_id: str | None = None
    member_id: str
    # EVEN: ignored, PERCENT: percentage points, SHARES: relative weight
    share_amount: Decimal | None = None


class ExpenseLineItem(CamelModel):
    id: str | None = None
    description: str | None = None
    category: str | None = None
    quantity: Decimal = Decimal("1")
    unit_amount: Decimal | None = None
    total_amount: Decimal


class ExpensePayment(CamelModel):
    id: str | None = None
    expense_id: str | None = None
    payer_id: str
    amount: Decimal
    currency: str | None = None
    notes: str | None = None
    receipt_url: str | None = None
    paid_at: str | None = None


class Expense(CamelModel):
    id: str
    group_id: str | None = None
    name: str = "Expense"
    amount: Decimal
    currency: str = Field(default_factory=lambda: settings.DEFAULT_CURRENCY)
    split_type: SplitType = SplitType.EVEN
    status: ExpenseStatus | None = None
    participants: List[ExpenseParticipant] = []
    line_items: List[ExpenseLineItem] = []
    payments: List[ExpensePayment] = []
    # computed by the backend, never used for arithmetic here
    participant_costs: Dict[str, Decimal] | None = None

    @field_validator("participants", "line_items", "payments", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v

    @field_validator("currency", mode="before")
    @classmethod
    def default_currency(cls, v):
        return (v or settings.DEFAULT_CURRENCY).upper()


class Group(CamelModel):
    id: str
    name: str
    type: GroupType = GroupType.PROJECT
    members: List[GroupMember] = []
    expenses: List[Expense] = []

    @field_validator("members", "expenses", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v
