import logging
from decimal import Decimal
from typing import Dict, List

from hearthway.core.config import settings
from hearthway.core.errors import BalanceWarning, CurrencyMismatchWarning, SplitPolicyWarning, ValidationError
from hearthway.core.utils import allocate, from_minor, simplify_debts, to_minor
from hearthway.schemas.balances import AggregateResult, ExpenseOutstanding, MemberTotals, Transfer, WarningOut
from hearthway.schemas.group import Expense, ExpenseStatus, Group, GroupMember
from hearthway.services.split_services import split_units

logger = logging.getLogger(__name__)


def _warn(warnings: List[BalanceWarning], w: BalanceWarning):
    logger.warning(w.message)
    warnings.append(w)


def aggregate(group: Group, currency: str | None = None) -> AggregateResult:
    """
    Fold a group's expenses into per-member cost, paid and net totals.

    Net balances only count expenses with at least one payment: each such
    expense's payments are spread over its participants in proportion to
    their cost shares. Everything is summed in minor units of the group
    currency, so the owed portions always add up to what was paid.
    """
    if currency is None:
        currency = group.expenses[0].currency if group.expenses else settings.DEFAULT_CURRENCY

    member_ids = [m.id for m in group.members]
    known = set(member_ids)

    cost = {mid: 0 for mid in member_ids}
    paid = {mid: 0 for mid in member_ids}
    owed = {mid: 0 for mid in member_ids}

    total_cost = 0
    total_paid = 0
    unpaid_total = 0
    warnings: List[BalanceWarning] = []

    for expense in group.expenses:
        if expense.amount < 0:
            raise ValidationError("Expense amount cannot be negative", expense.id)

        if expense.currency != currency:
            _warn(warnings, CurrencyMismatchWarning(
                f"Expense in {expense.currency} summed as {currency} without conversion",
                expense_id=expense.id,
            ))

        amount = to_minor(expense.amount, currency)

        participants = []
        for p in expense.participants:
            if p.member_id not in known:
                _warn(warnings, SplitPolicyWarning(
                    f"Participant {p.member_id} is not a member of the group",
                    expense_id=expense.id,
                    member_id=p.member_id,
                ))
                continue
            participants.append(p)

        units, split_warnings = split_units(amount, expense.split_type, participants, expense.id)
        warnings.extend(split_warnings)

        for p, u in zip(participants, units):
            cost[p.member_id] += u
        total_cost += amount

        expense_paid = 0
        for payment in expense.payments:
            if payment.amount < 0:
                raise ValidationError("Payment amount cannot be negative", expense.id)

            payment_units = to_minor(payment.amount, currency)
            expense_paid += payment_units

            if payment.payer_id not in known:
                _warn(warnings, SplitPolicyWarning(
                    f"Payer {payment.payer_id} is not a member of the group",
                    expense_id=expense.id,
                    member_id=payment.payer_id,
                ))
                continue
            paid[payment.payer_id] += payment_units

        total_paid += expense_paid
        unpaid_total += max(amount - expense_paid, 0)

        # unpaid expenses stay out of net balances
        if not expense.payments:
            continue

        if not participants:
            _warn(warnings, SplitPolicyWarning(
                "Payments recorded on an expense with no participants are owed by no one",
                expense_id=expense.id,
            ))
            continue

        # a zero-amount expense has no cost shares to weigh payments by
        weights = [Decimal(u) for u in units] if amount else [Decimal(1)] * len(participants)

        owed_units = allocate(expense_paid, weights)
        for p, u in zip(participants, owed_units):
            owed[p.member_id] += u

    logger.debug("Aggregated %d expenses for group %s", len(group.expenses), group.id)

    per_member = {
        mid: MemberTotals(
            member_id=mid,
            cost_share=from_minor(cost[mid], currency),
            amount_paid=from_minor(paid[mid], currency),
            owed_portion=from_minor(owed[mid], currency),
            net=from_minor(paid[mid] - owed[mid], currency),
        )
        for mid in member_ids
    }

    return AggregateResult(
        currency=currency,
        total_cost=from_minor(total_cost, currency),
        total_paid=from_minor(total_paid, currency),
        unpaid_total=from_minor(unpaid_total, currency),
        per_member=per_member,
        warnings=[WarningOut.from_warning(w) for w in warnings],
    )


def aggregate_by_currency(group: Group) -> Dict[str, AggregateResult]:
    by_currency: Dict[str, List[Expense]] = {}
    for expense in group.expenses:
        by_currency.setdefault(expense.currency, []).append(expense)

    return {
        currency: aggregate(group.model_copy(update={"expenses": expenses}), currency)
        for currency, expenses in by_currency.items()
    }


def expense_outstanding(expense: Expense) -> ExpenseOutstanding:
    if expense.amount < 0:
        raise ValidationError("Expense amount cannot be negative", expense.id)

    amount = to_minor(expense.amount, expense.currency)
    paid = 0
    for payment in expense.payments:
        if payment.amount < 0:
            raise ValidationError("Payment amount cannot be negative", expense.id)
        paid += to_minor(payment.amount, expense.currency)

    if paid <= 0:
        status = ExpenseStatus.PENDING
    elif paid >= amount:
        status = ExpenseStatus.PAID
    else:
        status = ExpenseStatus.PARTIALLY_PAID

    return ExpenseOutstanding(
        expense_id=expense.id,
        amount=from_minor(amount, expense.currency),
        paid=from_minor(paid, expense.currency),
        outstanding=from_minor(max(amount - paid, 0), expense.currency),
        payment_status=status,
    )


def settle_up(result: AggregateResult, members: List[GroupMember] | None = None) -> List[Transfer]:
    net = {
        mid: to_minor(totals.net, result.currency)
        for mid, totals in result.per_member.items()
    }

    transfers = simplify_debts(net)

    names = {m.id: m.display_name for m in members or []}

    return [
        Transfer(
            from_id=f,
            from_name=names.get(f),
            to_id=t,
            to_name=names.get(t),
            amount=from_minor(a, result.currency),
        )
        for f, t, a in transfers
    ]
