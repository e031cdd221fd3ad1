from decimal import Decimal, ROUND_HALF_UP, getcontext
from typing import Dict, List, Sequence, Tuple
from collections import deque

getcontext().prec = 28
CENTS = Decimal("0.01")

# ISO 4217 exponents that differ from the usual two decimals
CURRENCY_EXPONENTS = {
    "BIF": 0, "CLP": 0, "DJF": 0, "GNF": 0, "ISK": 0, "JPY": 0, "KMF": 0,
    "KRW": 0, "PYG": 0, "RWF": 0, "UGX": 0, "VND": 0, "VUV": 0, "XAF": 0,
    "XOF": 0, "XPF": 0,
    "BHD": 3, "IQD": 3, "JOD": 3, "KWD": 3, "LYD": 3, "OMR": 3, "TND": 3,
}


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def minor_exponent(currency: str) -> int:
    return CURRENCY_EXPONENTS.get((currency or "").upper(), 2)


def quantum(currency: str) -> Decimal:
    return Decimal(1).scaleb(-minor_exponent(currency))


def to_minor(amount: Decimal, currency: str) -> int:
    """Round half up to the currency's minor unit and return integer units."""
    q = quantum(currency)
    return int(Decimal(amount).quantize(q, rounding=ROUND_HALF_UP) / q)


def from_minor(units: int, currency: str) -> Decimal:
    return (Decimal(units) * quantum(currency)).quantize(quantum(currency))


def allocate(total: int, weights: Sequence[Decimal]) -> List[int]:
    """
    Split `total` minor units proportionally to `weights`.

    Each slot is rounded half up. Any surplus is taken back one unit at a
    time from slots that were rounded up, any shortfall added to slots
    that were rounded down, both walking from the end of the list. Every
    slot stays within one unit of its exact value and never drops below
    zero, and the result always sums to `total`.
    """
    if not weights:
        return []

    denominator = sum(weights, Decimal("0"))
    if denominator == 0:
        return [0] * len(weights)

    exact = [Decimal(total) * w / denominator for w in weights]
    units = [int(x.quantize(Decimal("1"), rounding=ROUND_HALF_UP)) for x in exact]

    diff = total - sum(units)
    for i in reversed(range(len(units))):
        if diff == 0:
            break
        if diff < 0 and units[i] > exact[i]:
            units[i] -= 1
            diff += 1
        elif diff > 0 and units[i] < exact[i]:
            units[i] += 1
            diff -= 1

    return units


def simplify_debts(net_map: Dict[str, int]) -> List[Tuple[str, str, int]]:
    """
    Greedy payback plan: the largest debtor pays the largest creditor
    until one side is square. Equal balances keep the order of `net_map`.
    Returns (debtor, creditor, units) tuples.
    """
    order = {uid: i for i, uid in enumerate(net_map)}

    creditors = [[uid, bal] for uid, bal in net_map.items() if bal > 0]
    debtors = [[uid, -bal] for uid, bal in net_map.items() if bal < 0]

    creditors.sort(key=lambda x: (-x[1], order[x[0]]))
    debtors.sort(key=lambda x: (-x[1], order[x[0]]))

    creditors = deque(creditors)
    debtors = deque(debtors)

    transfers: List[Tuple[str, str, int]] = []

    while creditors and debtors:
        cred = creditors[0]
        debt = debtors[0]

        pay_amt = min(cred[1], debt[1])
        transfers.append((debt[0], cred[0], pay_amt))

        cred[1] -= pay_amt
        debt[1] -= pay_amt

        if cred[1] == 0:
            creditors.popleft()
        if debt[1] == 0:
            debtors.popleft()

    return transfers
