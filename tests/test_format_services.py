from decimal import Decimal

import pytest

from hearthway.services.balance_services import aggregate
from hearthway.services.format_services import expense_rows, format_balances, format_currency


@pytest.mark.parametrize(
    "value, currency, expected",
    [
        ("1234.5", "USD", "$1,234.50"),
        ("-30", "USD", "-$30.00"),
        ("0", "EUR", "€0.00"),
        ("12", "CHF", "CHF 12.00"),
        ("1000", "JPY", "¥1,000.00"),
        ("0.005", "GBP", "£0.01"),
    ],
)
def test_format_currency(value, currency, expected):
    assert format_currency(Decimal(value), currency) == expected


def test_entries_sorted_descending_ties_in_member_order(make_group, build_expense):
    group = make_group([
        build_expense("e1", "30.00", ["C", "B", "A"], payments=[("C", "30.00")]),
    ])
    result = aggregate(group)

    out = format_balances(result, result.currency, group.members)

    assert [e.member_id for e in out.costs] == ["A", "B", "C"]
    assert [e.display for e in out.costs] == ["$10.00"] * 3
    assert [(e.display_name, e.display) for e in out.payments] == [("Sam", "$30.00")]
    assert [(e.member_id, e.display) for e in out.balances] == [
        ("C", "$20.00"),
        ("A", "-$10.00"),
        ("B", "-$10.00"),
    ]
    assert out.balances[0].paid == "$30.00"
    assert out.balances[0].owed == "$10.00"
    assert out.excludes_unpaid is False


def test_unpaid_expenses_flagged(make_group, build_expense):
    group = make_group([
        build_expense("e1", "30.00", ["A", "B"], payments=[("A", "30.00")]),
        build_expense("e2", "12.00", ["A", "B"]),
    ])
    result = aggregate(group)

    out = format_balances(result, result.currency, group.members)

    assert out.excludes_unpaid is True
    assert out.total_cost == "$42.00"
    assert out.total_paid == "$30.00"
    assert out.unpaid_total == "$12.00"
    assert [e.member_id for e in out.costs] == ["A", "B"]


def test_missing_directory_entry_falls_back_to_id(make_group, build_expense):
    group = make_group([build_expense("e1", "8.00", ["A", "B"], payments=[("B", "8.00")])])
    result = aggregate(group)

    out = format_balances(result, "EUR", group.members[:1])

    assert [(e.display_name, e.display) for e in out.balances] == [("B", "€4.00"), ("Alex", "-€4.00")]


def test_warnings_passed_through(make_group, build_expense):
    group = make_group([build_expense("e1", "8.00", ["A", "ghost"])])
    result = aggregate(group)

    out = format_balances(result, result.currency, group.members)

    assert [w.member_id for w in out.warnings] == ["ghost"]


def test_expense_rows(make_group, build_expense):
    group = make_group([
        build_expense("e1", "50.00", [("A", 60), ("B", 40)], "PERCENT", name="Tapas night", status="PAID"),
        build_expense("e2", "9.00", [("B", 1), ("C", "2.5")], "SHARES"),
        build_expense("e3", "10.01", ["A", "C"]),
    ])

    rows = expense_rows(group)

    assert [r.split_label for r in rows] == ["Percentage", "Shares", "Even"]
    assert rows[0].name == "Tapas night"
    assert rows[0].display == "$50.00"
    assert rows[0].status == "PAID"
    assert rows[0].split_detail == "Alex (60%), Maya (40%)"
    assert rows[1].split_detail == "Maya (1), Sam (2.5)"
    assert rows[2].split_detail == "Alex, Sam"


def test_expense_rows_filtered_by_participant(make_group, build_expense):
    group = make_group([
        build_expense("e1", "50.00", [("A", 60), ("B", 40)], "PERCENT"),
        build_expense("e2", "9.00", [("B", 1), ("C", 2)], "SHARES"),
        build_expense("e3", "10.01", ["A", "C"]),
    ])

    rows = expense_rows(group, participant_id="A")

    assert [(r.id, r.display_amount) for r in rows] == [
        ("e1", Decimal("30.00")),
        ("e3", Decimal("5.01")),
    ]
