import logging
from decimal import Decimal
from typing import Dict, List

from hearthway.core.utils import from_minor, qround, to_minor
from hearthway.schemas.balances import AggregateResult, BalanceEntry, ExpenseRow, FormattedBalances, NetBalanceEntry
from hearthway.schemas.group import Group, GroupMember, SplitType
from hearthway.services.split_services import resolve_shares

logger = logging.getLogger(__name__)

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "KRW": "₩",
    "CAD": "CA$",
    "AUD": "A$",
    "MXN": "MX$",
    "CNY": "CN¥",
}

SPLIT_LABELS = {
    SplitType.EVEN: "Even",
    SplitType.PERCENT: "Percentage",
    SplitType.SHARES: "Shares",
}


def format_currency(value: Decimal, currency: str) -> str:
    """Two fraction digits, grouped thousands, e.g. -$1,234.50 or CHF 12.00."""
    value = qround(Decimal(value))
    code = (currency or "").upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def _names(members: List[GroupMember]) -> Dict[str, str]:
    return {m.id: m.display_name for m in members}


def _ranked(amounts: Dict[str, Decimal]) -> List[str]:
    # sorted() is stable, ties keep member order
    return sorted(amounts, key=lambda mid: amounts[mid], reverse=True)


def format_balances(result: AggregateResult, currency: str, members: List[GroupMember]) -> FormattedBalances:
    names = _names(members)

    def entry(mid: str, amount: Decimal) -> BalanceEntry:
        return BalanceEntry(
            member_id=mid,
            display_name=names.get(mid, mid),
            amount=amount,
            display=format_currency(amount, currency),
        )

    totals = result.per_member

    costs = {mid: t.cost_share for mid, t in totals.items() if t.cost_share != 0}
    paid = {mid: t.amount_paid for mid, t in totals.items() if t.amount_paid != 0}
    nets = {
        mid: t.net
        for mid, t in totals.items()
        if t.amount_paid != 0 or t.owed_portion != 0
    }

    balances = [
        NetBalanceEntry(
            **entry(mid, nets[mid]).model_dump(),
            paid=format_currency(totals[mid].amount_paid, currency),
            owed=format_currency(totals[mid].owed_portion, currency),
        )
        for mid in _ranked(nets)
    ]

    return FormattedBalances(
        currency=currency,
        total_cost=format_currency(result.total_cost, currency),
        total_paid=format_currency(result.total_paid, currency),
        unpaid_total=format_currency(result.unpaid_total, currency),
        costs=[entry(mid, costs[mid]) for mid in _ranked(costs)],
        payments=[entry(mid, paid[mid]) for mid in _ranked(paid)],
        balances=balances,
        excludes_unpaid=result.total_paid != result.total_cost,
        warnings=result.warnings,
    )


def _split_detail(expense, names: Dict[str, str]) -> str:
    parts = []
    for p in expense.participants:
        name = names.get(p.member_id, p.member_id)
        share = "—" if p.share_amount is None else f"{p.share_amount.normalize():f}"
        if expense.split_type == SplitType.PERCENT:
            parts.append(f"{name} ({share}%)")
        elif expense.split_type == SplitType.SHARES:
            parts.append(f"{name} ({share})")
        else:
            parts.append(name)
    return ", ".join(parts)


def expense_rows(group: Group, participant_id: str | None = None) -> List[ExpenseRow]:
    """
    Expense table rows. With a participant filter only that member's
    expenses are listed and the amount shown is their resolved share.
    """
    names = _names(group.members)
    rows = []

    for expense in group.expenses:
        if participant_id is not None:
            if participant_id not in {p.member_id for p in expense.participants}:
                continue
            split = resolve_shares(
                expense.amount, expense.split_type, expense.participants, expense.currency, expense.id
            )
            amount = split.shares[participant_id]
        else:
            amount = from_minor(to_minor(expense.amount, expense.currency), expense.currency)

        rows.append(ExpenseRow(
            id=expense.id,
            name=expense.name or "Expense",
            display_amount=amount,
            display=format_currency(amount, expense.currency),
            currency=expense.currency,
            status=expense.status,
            split_label=SPLIT_LABELS[expense.split_type],
            split_detail=_split_detail(expense, names),
        ))

    logger.debug("Built %d expense rows for group %s", len(rows), group.id)
    return rows
