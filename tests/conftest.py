import pytest

from hearthway.schemas.group import Group


@pytest.fixture
def members():
    """Three members of a trip."""
    return [
        {"id": "A", "userId": "u1", "displayName": "Alex"},
        {"id": "B", "userId": None, "displayName": "Maya"},
        {"id": "C", "userId": None, "displayName": "Sam"},
    ]


@pytest.fixture
def make_group(members):
    """Build a Group snapshot from API-shaped expense dicts."""

    def _make(expenses, group_members=None):
        return Group.model_validate({
            "id": "g1",
            "name": "Barcelona weekend",
            "type": "TRIP",
            "members": members if group_members is None else group_members,
            "expenses": expenses,
        })

    return _make


def expense(id, amount, participants, split_type="EVEN", payments=None, currency="USD", **extra):
    """API-shaped expense dict; participants are member ids or (id, share) pairs."""
    parts = []
    for p in participants:
        if isinstance(p, tuple):
            parts.append({"memberId": p[0], "shareAmount": p[1]})
        else:
            parts.append({"memberId": p})

    return {
        "id": id,
        "name": extra.pop("name", f"Expense {id}"),
        "amount": amount,
        "currency": currency,
        "splitType": split_type,
        "participants": parts,
        "payments": [
            {"payerId": payer, "amount": amt} for payer, amt in (payments or [])
        ],
        **extra,
    }


@pytest.fixture
def build_expense():
    return expense
