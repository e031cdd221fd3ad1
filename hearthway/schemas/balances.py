from decimal import Decimal
from typing import Dict, List

from pydantic import Field

from hearthway.core.config import settings
from hearthway.core.errors import BalanceWarning
from hearthway.schemas.group import CamelModel, ExpenseStatus, ExpenseParticipant, SplitType


class WarningOut(CamelModel):
    kind: str
    message: str
    expense_id: str | None = None
    member_id: str | None = None

    @classmethod
    def from_warning(cls, w: BalanceWarning) -> "WarningOut":
        return cls(kind=w.kind, message=w.message, expense_id=w.expense_id, member_id=w.member_id)


class ShareRequest(CamelModel):
    amount: Decimal
    currency: str = Field(default_factory=lambda: settings.DEFAULT_CURRENCY)
    split_type: SplitType = SplitType.EVEN
    participants: List[ExpenseParticipant] = []


class SplitResult(CamelModel):
    shares: Dict[str, Decimal]
    warnings: List[WarningOut] = []


class MemberTotals(CamelModel):
    member_id: str
    cost_share: Decimal
    amount_paid: Decimal
    owed_portion: Decimal
    net: Decimal


class AggregateResult(CamelModel):
    currency: str
    total_cost: Decimal
    total_paid: Decimal
    unpaid_total: Decimal
    per_member: Dict[str, MemberTotals]
    warnings: List[WarningOut] = []


class ExpenseOutstanding(CamelModel):
    expense_id: str
    amount: Decimal
    paid: Decimal
    outstanding: Decimal
    payment_status: ExpenseStatus


class Transfer(CamelModel):
    from_id: str
    from_name: str | None = None
    to_id: str
    to_name: str | None = None
    amount: Decimal


class BalanceEntry(CamelModel):
    member_id: str
    display_name: str
    amount: Decimal
    display: str


class NetBalanceEntry(BalanceEntry):
    paid: str
    owed: str


class FormattedBalances(CamelModel):
    currency: str
    total_cost: str
    total_paid: str
    unpaid_total: str
    costs: List[BalanceEntry]
    payments: List[BalanceEntry]
    balances: List[NetBalanceEntry]
    excludes_unpaid: bool
    warnings: List[WarningOut] = []


class GroupBalancesOut(CamelModel):
    balances: FormattedBalances
    settlements: List[Transfer]


class ExpenseRow(CamelModel):
    id: str
    name: str
    display_amount: Decimal
    display: str
    currency: str
    status: ExpenseStatus | None = None
    split_label: str
    split_detail: str
