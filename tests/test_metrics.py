"""Tests for pure ledger metric functions."""

import pytest
from datetime import date
from decimal import Decimal

from tax_copilot.config import LedgerConfig
from tax_copilot.ledger import compliance_score, monthly_rollup, summarize
from tax_copilot.ledger.metrics import month_label
from tax_copilot.ledger.seed import shift_month
from tax_copilot.models.transaction import TransactionType


class TestSummarize:
    """Tests for aggregate figures."""

    def test_empty_ledger(self):
        summary = summarize([], LedgerConfig())
        assert summary.total_sales == Decimal("0")
        assert summary.tax_payable == Decimal("0")
        assert summary.requires_registration is False
        assert summary.transaction_count == 0

    def test_custom_threshold(self, make_transaction):
        """Test the threshold comes from the config it is given."""
        config = LedgerConfig(registration_threshold=Decimal("500"))
        summary = summarize([make_transaction(amount="501")], config)
        assert summary.requires_registration is True
        assert summary.registration_threshold == Decimal("500")


class TestMonthlyRollup:
    """Tests for the month-by-month chart data."""

    def test_income_and_expense_per_month(self, make_transaction):
        transactions = [
            make_transaction(TransactionType.SALE, "100", on=date(2024, 1, 3)),
            make_transaction(TransactionType.SALE, "50", on=date(2024, 1, 20)),
            make_transaction(TransactionType.EXPENSE, "30", on=date(2024, 1, 25)),
            make_transaction(TransactionType.EXPENSE, "70", on=date(2024, 2, 1)),
        ]

        buckets = monthly_rollup(transactions)

        assert [(b.key, b.income, b.expense) for b in buckets] == [
            ("2024-01", Decimal("150"), Decimal("30")),
            ("2024-02", Decimal("0"), Decimal("70")),
        ]

    def test_keeps_at_most_six_most_recent_buckets(self, make_transaction):
        """Test older months are dropped once there are more than six."""
        transactions = [
            make_transaction(on=date(2023, month, 1)) for month in range(1, 9)
        ]

        buckets = monthly_rollup(transactions)

        assert len(buckets) == 6
        assert [b.key for b in buckets] == [f"2023-{m:02d}" for m in range(3, 9)]

    def test_order_of_first_appearance(self, make_transaction):
        """Test a back-dated entry opens its bucket where it was first seen."""
        transactions = [
            make_transaction(on=date(2024, 3, 1)),
            make_transaction(on=date(2024, 1, 1)),
            make_transaction(on=date(2024, 3, 9)),
        ]

        buckets = monthly_rollup(transactions)

        assert [b.key for b in buckets] == ["2024-03", "2024-01"]

    def test_same_month_different_year_are_separate(self, make_transaction):
        transactions = [
            make_transaction(on=date(2023, 5, 1)),
            make_transaction(on=date(2024, 5, 1)),
        ]
        buckets = monthly_rollup(transactions)
        assert [(b.key, b.label) for b in buckets] == [("2023-05", "May"), ("2024-05", "May")]

    def test_custom_bucket_limit(self, make_transaction):
        transactions = [make_transaction(on=date(2024, m, 1)) for m in range(1, 5)]
        assert [b.key for b in monthly_rollup(transactions, max_months=2)] == [
            "2024-03",
            "2024-04",
        ]


class TestComplianceScore:
    """Tests for the day-of-month compliance heuristic."""

    @pytest.mark.parametrize(
        "day, expected",
        [(1, 95), (10, 95), (11, 90), (20, 90), (21, 85), (31, 85)],
    )
    def test_score_by_day(self, day, expected):
        assert compliance_score(date(2024, 1, day)) == expected


class TestShiftMonth:
    """Tests for seed date arithmetic."""

    def test_crosses_year_boundary(self):
        assert shift_month(date(2024, 1, 15), -2, 5) == date(2023, 11, 5)

    def test_same_month(self):
        assert shift_month(date(2024, 6, 30), 0, 3) == date(2024, 6, 3)


class TestMonthLabel:
    """Tests for chart month labels."""

    def test_english_abbreviations(self):
        assert [month_label(m) for m in range(1, 13)] == [
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ]

    def test_ignores_process_locale(self, monkeypatch):
        """Test labels do not come from the calendar module's locale-aware names."""
        import calendar

        monkeypatch.setattr(calendar, "month_abbr", ["", "janv."] + [""] * 11)
        assert month_label(1) == "Jan"
