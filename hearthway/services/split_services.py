import logging
from decimal import Decimal
from typing import List, Sequence, Tuple

from hearthway.core.errors import BalanceWarning, SplitPolicyWarning, ValidationError
from hearthway.core.utils import allocate, from_minor, to_minor
from hearthway.schemas.balances import SplitResult, WarningOut
from hearthway.schemas.group import ExpenseParticipant, SplitType

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


def split_units(
    total: int,
    split_type: SplitType,
    participants: Sequence[ExpenseParticipant],
    expense_id: str | None = None,
) -> Tuple[List[int], List[BalanceWarning]]:
    """
    Split `total` minor units over `participants`, one slot per participant
    in list order. Returns the slots and any non-fatal warnings.
    """
    warnings: List[BalanceWarning] = []

    if total < 0:
        raise ValidationError("Expense amount cannot be negative", expense_id)

    if not participants:
        return [], warnings

    split_type = SplitType(split_type)

    if split_type == SplitType.EVEN:
        base, rem = divmod(total, len(participants))
        return [base + (1 if i < rem else 0) for i in range(len(participants))], warnings

    values = [p.share_amount for p in participants]

    if split_type == SplitType.SHARES:
        for p, v in zip(participants, values):
            if v is None or v <= 0:
                raise ValidationError(
                    f"Share weight for member {p.member_id} must be positive", expense_id
                )
        return allocate(total, values), warnings

    # PERCENT
    values = [Decimal("0") if v is None else v for v in values]
    for p, v in zip(participants, values):
        if v < 0:
            raise ValidationError(
                f"Percentage for member {p.member_id} cannot be negative", expense_id
            )

    declared = sum(values, Decimal("0"))
    if declared == 0:
        raise ValidationError("Percentages sum to zero", expense_id)

    if declared != HUNDRED:
        w = SplitPolicyWarning(
            f"Percentages sum to {declared}, not 100; shares were scaled proportionally",
            expense_id=expense_id,
        )
        logger.warning(w.message)
        warnings.append(w)

    return allocate(total, values), warnings


def resolve_shares(
    amount: Decimal,
    split_type: SplitType,
    participants: Sequence[ExpenseParticipant],
    currency: str = "USD",
    expense_id: str | None = None,
) -> SplitResult:
    if amount < 0:
        raise ValidationError("Expense amount cannot be negative", expense_id)

    total = to_minor(amount, currency)
    units, warnings = split_units(total, split_type, participants, expense_id)

    shares = {}
    for p, u in zip(participants, units):
        shares[p.member_id] = shares.get(p.member_id, 0) + u

    return SplitResult(
        shares={mid: from_minor(u, currency) for mid, u in shares.items()},
        warnings=[WarningOut.from_warning(w) for w in warnings],
    )
