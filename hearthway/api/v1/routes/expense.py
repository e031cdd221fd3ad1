from typing import List

from fastapi import APIRouter, Query

from hearthway.core.dependencies import could_not_compute
from hearthway.core.errors import ValidationError
from hearthway.schemas.balances import ExpenseOutstanding, ExpenseRow, ShareRequest, SplitResult
from hearthway.schemas.group import Expense, Group
from hearthway.services.balance_services import expense_outstanding
from hearthway.services.format_services import expense_rows
from hearthway.services.split_services import resolve_shares

router = APIRouter()


@router.post("/resolve-shares", response_model=SplitResult)
async def shares(data: ShareRequest):
    try:
        return resolve_shares(data.amount, data.split_type, data.participants, data.currency)
    except ValidationError as e:
        raise could_not_compute(e)


@router.post("/outstanding", response_model=ExpenseOutstanding)
async def outstanding(expense: Expense):
    try:
        return expense_outstanding(expense)
    except ValidationError as e:
        raise could_not_compute(e)


@router.post("/rows", response_model=List[ExpenseRow])
async def rows(
    group: Group,
    participant_id: str | None = Query(default=None, alias="participantId"),
):
    try:
        return expense_rows(group, participant_id)
    except ValidationError as e:
        raise could_not_compute(e)
