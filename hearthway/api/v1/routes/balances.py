from typing import Dict, List

from fastapi import APIRouter

from hearthway.core.dependencies import could_not_compute
from hearthway.core.errors import ValidationError
from hearthway.schemas.balances import AggregateResult, GroupBalancesOut, Transfer
from hearthway.schemas.group import Group
from hearthway.services.balance_services import aggregate, aggregate_by_currency, settle_up
from hearthway.services.format_services import format_balances

router = APIRouter()


@router.post("/compute", response_model=GroupBalancesOut)
async def compute_balances(group: Group):
    try:
        result = aggregate(group)
    except ValidationError as e:
        raise could_not_compute(e)

    return GroupBalancesOut(
        balances=format_balances(result, result.currency, group.members),
        settlements=settle_up(result, group.members),
    )


@router.post("/aggregate", response_model=AggregateResult)
async def aggregate_balances(group: Group):
    try:
        return aggregate(group)
    except ValidationError as e:
        raise could_not_compute(e)


@router.post("/by-currency", response_model=Dict[str, AggregateResult])
async def balances_by_currency(group: Group):
    try:
        return aggregate_by_currency(group)
    except ValidationError as e:
        raise could_not_compute(e)


@router.post("/settlements", response_model=List[Transfer])
async def simplified_balances(group: Group):
    try:
        result = aggregate(group)
    except ValidationError as e:
        raise could_not_compute(e)

    return settle_up(result, group.members)
