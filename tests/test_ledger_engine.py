"""Tests for the ledger engine: lifecycle, mutations, metrics and persistence."""

import pytest
from datetime import date
from decimal import Decimal

from pydantic import ValidationError

from tax_copilot.config import LedgerConfig
from tax_copilot.ledger import InvalidAmountError, LedgerEngine, parse_amount
from tax_copilot.models.transaction import SupplyCategory, TransactionType
from tax_copilot.services.storage import (
    DEFAULT_TRANSACTIONS_KEY,
    TransactionSnapshotStore,
)

from tests.helpers import FIXED_TODAY, FailingStorage, RecordingActivityLogger


def reload(storage) -> LedgerEngine:
    """A fresh engine over the same storage, as after a page reload."""
    return LedgerEngine(TransactionSnapshotStore(storage), clock=lambda: FIXED_TODAY)


class TestInitialization:
    """Tests for loading and seeding the ledger."""

    def test_seeds_six_transactions_when_nothing_stored(self, engine):
        """Test the demo seed is used on first start."""
        assert len(engine) == 6
        assert [t.id for t in engine.transactions] == ["1", "2", "3", "4", "5", "6"]

    def test_seed_is_relative_to_today(self, engine):
        """Test seed dates span the current and two previous months."""
        dates = [t.date for t in engine.transactions]
        assert dates == [
            date(2024, 1, 5),
            date(2024, 1, 12),
            date(2024, 2, 8),
            date(2024, 2, 20),
            date(2024, 3, 3),
            date(2024, 3, 10),
        ]

    def test_seed_tax_amounts(self, engine):
        """Test seed GST amounts follow the rate table."""
        taxes = [t.tax_amount for t in engine.transactions]
        assert taxes == [
            Decimal("27000"),
            Decimal("8100"),
            Decimal("33600"),
            Decimal("3840"),
            Decimal("35100"),
            Decimal("5040"),
        ]

    def test_loads_stored_ledger_instead_of_seed(self, storage, make_transaction):
        """Test a stored snapshot wins over the seed."""
        stored = [make_transaction(amount="500")]
        TransactionSnapshotStore(storage).save(stored)

        engine = reload(storage)

        assert engine.transactions == stored

    def test_empty_stored_ledger_is_respected(self, empty_engine):
        """Test that a stored empty list is not replaced by the seed."""
        assert len(empty_engine) == 0

    @pytest.mark.parametrize("raw", ["not json", "{\"a\": 1}", "[{\"id\": \"x\"}]"])
    def test_malformed_snapshot_falls_back_to_seed(self, storage, raw):
        """Test that a corrupt snapshot is treated as absent."""
        storage.set_item(DEFAULT_TRANSACTIONS_KEY, raw)

        engine = reload(storage)

        assert len(engine) == 6

    def test_unreadable_storage_falls_back_to_seed(self):
        """Test that a failing backend does not crash startup."""
        engine = LedgerEngine(
            TransactionSnapshotStore(FailingStorage()),
            clock=lambda: FIXED_TODAY,
        )
        assert len(engine) == 6

    def test_stored_tax_amount_is_never_recomputed(self, storage, make_transaction):
        """Test that loading keeps historical GST even if rates differ."""
        TransactionSnapshotStore(storage).save([make_transaction(amount="1000")])

        engine = LedgerEngine(
            TransactionSnapshotStore(storage),
            config=LedgerConfig(gst_rates={
                SupplyCategory.GOODS: Decimal("0.28"),
                SupplyCategory.SERVICE: Decimal("0.05"),
            }),
            clock=lambda: FIXED_TODAY,
        )

        assert engine.transactions[0].tax_amount == Decimal("180")


class TestAdd:
    """Tests for recording transactions."""

    @pytest.mark.parametrize(
        "category, amount, expected_tax",
        [
            (SupplyCategory.GOODS, "150000", Decimal("27000")),
            (SupplyCategory.SERVICE, "280000", Decimal("33600")),
            (SupplyCategory.GOODS, "0.1", Decimal("0.018")),
        ],
    )
    def test_tax_amount_is_amount_times_rate(self, empty_engine, category, amount, expected_tax):
        """Test GST is computed at insertion from the rate table."""
        transaction = empty_engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.SALE,
            amount=amount,
            category=category,
        )
        assert transaction.tax_amount == expected_tax
        assert transaction.tax_amount == transaction.amount * LedgerConfig().rate_for(category)

    def test_add_appends_exactly_one_entry(self, engine):
        """Test the ledger grows by one entry carrying the new ID."""
        before = len(engine)

        transaction = engine.add(
            date=FIXED_TODAY,
            kind="expense",
            amount=2500,
            category="service",
            taxpayer_id="29abcde1234f1z5",
        )

        assert len(engine) == before + 1
        assert [t.id for t in engine.transactions].count(transaction.id) == 1
        assert engine.transactions[-1] == transaction
        assert engine.get(transaction.id) == transaction
        assert transaction.taxpayer_id == "29ABCDE1234F1Z5"

    def test_float_amount_keeps_its_decimal_value(self, empty_engine):
        """Test floats are converted through their string form."""
        transaction = empty_engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.SALE,
            amount=1234.56,
            category=SupplyCategory.GOODS,
        )
        assert transaction.amount == Decimal("1234.56")

    def test_add_is_persisted(self, storage, engine):
        """Test a new transaction survives a reload."""
        transaction = engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.SALE,
            amount="999",
            category=SupplyCategory.GOODS,
        )

        assert reload(storage).get(transaction.id) == transaction
        assert engine.last_save_ok is True

    def test_ids_are_unique(self, empty_engine):
        """Test that every added transaction gets a distinct ID."""
        ids = {
            empty_engine.add(
                date=FIXED_TODAY,
                kind=TransactionType.SALE,
                amount=1,
                category=SupplyCategory.GOODS,
            ).id
            for _ in range(50)
        }
        assert len(ids) == 50

    @pytest.mark.parametrize(
        "amount",
        [0, -1, "0", "-250", float("nan"), float("inf"), Decimal("NaN"), "abc", "", None, True],
    )
    def test_invalid_amount_leaves_ledger_unchanged(self, engine, amount):
        """Test rejected amounts signal InvalidAmountError and change nothing."""
        before = engine.transactions
        summary_before = engine.summary()

        with pytest.raises(InvalidAmountError):
            engine.add(
                date=FIXED_TODAY,
                kind=TransactionType.SALE,
                amount=amount,
                category=SupplyCategory.GOODS,
            )

        assert engine.transactions == before
        assert engine.summary() == summary_before

    def test_invalid_amount_is_a_value_error(self, engine):
        """Test callers catching ValueError also catch InvalidAmountError."""
        with pytest.raises(ValueError):
            engine.add(
                date=FIXED_TODAY,
                kind=TransactionType.SALE,
                amount=-5,
                category=SupplyCategory.GOODS,
            )

    def test_over_long_taxpayer_id_is_rejected(self, engine):
        """Test malformed fields other than amount also leave the ledger alone."""
        before = len(engine)
        with pytest.raises(ValidationError):
            engine.add(
                date=FIXED_TODAY,
                kind=TransactionType.SALE,
                amount=100,
                category=SupplyCategory.GOODS,
                taxpayer_id="X" * 20,
            )
        assert len(engine) == before


class TestParseAmount:
    """Tests for amount parsing."""

    def test_accepts_grouped_string(self):
        """Test thousands separators in typed input."""
        assert parse_amount("1,50,000") == Decimal("150000")

    def test_accepts_decimal(self):
        assert parse_amount(Decimal("12.50")) == Decimal("12.50")


class TestDelete:
    """Tests for removing transactions."""

    def test_delete_existing(self, storage, engine):
        """Test deleting removes exactly that transaction everywhere."""
        before = len(engine)

        assert engine.delete("3") is True

        assert len(engine) == before - 1
        assert engine.get("3") is None
        assert "3" not in [t.id for t in reload(storage).transactions]

    def test_delete_absent_is_noop(self, engine):
        """Test deleting an unknown ID is not an error."""
        before = engine.transactions

        assert engine.delete("does-not-exist") is False

        assert engine.transactions == before


class TestReset:
    """Tests for restoring demo data."""

    def test_reset_restores_six_seed_transactions(self, storage, engine):
        """Test reset discards everything and reseeds."""
        engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.SALE,
            amount=100,
            category=SupplyCategory.GOODS,
        )
        engine.delete("1")

        result = engine.reset()

        assert len(result) == 6
        assert [t.id for t in engine.transactions] == ["1", "2", "3", "4", "5", "6"]
        assert len(reload(storage)) == 6

    def test_reset_uses_current_date(self, storage):
        """Test the seed moves with the clock."""
        today = {"value": FIXED_TODAY}
        engine = LedgerEngine(TransactionSnapshotStore(storage), clock=lambda: today["value"])

        today["value"] = date(2025, 1, 20)
        engine.reset()

        assert engine.transactions[0].date == date(2024, 11, 5)
        assert engine.transactions[-1].date == date(2025, 1, 10)

    def test_reset_reissues_deleted_seed_ids(self, engine):
        """Test a seed id removed before a reset comes back with the seed."""
        engine.delete("3")
        assert engine.get("3") is None

        engine.reset()

        assert engine.get("3").amount == Decimal("280000")


class TestMetrics:
    """Tests for aggregate figures exposed by the engine."""

    def test_worked_example(self, empty_engine):
        """Test one goods sale and one goods expense."""
        empty_engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.SALE,
            amount=150000,
            category=SupplyCategory.GOODS,
        )
        empty_engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.EXPENSE,
            amount=45000,
            category=SupplyCategory.GOODS,
        )

        summary = empty_engine.summary()

        assert summary.total_sales == Decimal("150000")
        assert summary.total_expenses == Decimal("45000")
        assert summary.net_income == Decimal("105000")
        assert summary.output_tax == Decimal("27000")
        assert summary.input_tax == Decimal("8100")
        assert summary.tax_payable == Decimal("18900")
        assert summary.requires_registration is False
        assert summary.transaction_count == 2

    def test_seed_summary(self, engine):
        """Test the figures a new user sees first."""
        summary = engine.summary()
        assert summary.total_sales == Decimal("625000")
        assert summary.total_expenses == Decimal("105000")
        assert summary.tax_payable == Decimal("78720")

    def test_tax_payable_is_floored_at_zero(self, empty_engine):
        """Test excess input credit does not produce a negative liability."""
        empty_engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.SALE,
            amount=1000,
            category=SupplyCategory.SERVICE,
        )
        empty_engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.EXPENSE,
            amount=50000,
            category=SupplyCategory.GOODS,
        )

        summary = empty_engine.summary()

        assert summary.output_tax < summary.input_tax
        assert summary.tax_payable == Decimal("0")
        assert summary.net_income == Decimal("-49000")

    def test_registration_threshold_is_strict(self, empty_engine):
        """Test sales of exactly ₹20 Lakh do not require registration."""
        empty_engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.SALE,
            amount=2000000,
            category=SupplyCategory.GOODS,
        )
        assert empty_engine.summary().requires_registration is False

        empty_engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.SALE,
            amount=1,
            category=SupplyCategory.GOODS,
        )
        assert empty_engine.summary().requires_registration is True

    def test_expenses_do_not_count_toward_threshold(self, empty_engine):
        empty_engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.EXPENSE,
            amount=5000000,
            category=SupplyCategory.GOODS,
        )
        assert empty_engine.summary().requires_registration is False

    def test_metrics_follow_mutations(self, engine):
        """Test nothing is cached between reads."""
        before = engine.summary().total_sales
        engine.delete("1")
        assert engine.summary().total_sales == before - Decimal("150000")

    def test_monthly_rollup_for_seed(self, engine):
        """Test the seed produces three monthly buckets."""
        buckets = engine.monthly_rollup()
        assert [(b.key, b.label) for b in buckets] == [
            ("2024-01", "Jan"),
            ("2024-02", "Feb"),
            ("2024-03", "Mar"),
        ]
        assert buckets[0].income == Decimal("150000")
        assert buckets[0].expense == Decimal("45000")

    def test_compliance_score_uses_clock(self, engine):
        """Test the score depends on today's day of month (15th)."""
        assert engine.compliance_score() == 90

    def test_transactions_by_date_newest_first(self, engine):
        dates = [t.date for t in engine.transactions_by_date]
        assert dates == sorted(dates, reverse=True)


class TestPersistenceFailures:
    """Tests for degraded storage."""

    def test_failed_write_keeps_in_memory_change(self):
        """Test a write failure neither raises nor rolls back."""
        engine = LedgerEngine(
            TransactionSnapshotStore(FailingStorage()),
            clock=lambda: FIXED_TODAY,
        )

        transaction = engine.add(
            date=FIXED_TODAY,
            kind=TransactionType.SALE,
            amount=100,
            category=SupplyCategory.GOODS,
        )

        assert engine.get(transaction.id) == transaction
        assert engine.last_save_ok is False


class TestExport:
    """Tests for CSV export through the engine."""

    def test_export_filename_and_rows(self, engine):
        filename, content = engine.export_csv()

        lines = content.splitlines()
        assert filename == "ps15_transactions_2024-03-15.csv"
        assert lines[0] == "Date,Type,Amount,Category,GSTIN,GST Amount"
        assert lines[1] == "2024-01-05,sale,150000,goods,,27000"
        assert len(lines) == 7

    def test_export_custom_prefix(self, engine):
        filename, _ = engine.export_csv("my_shop")
        assert filename == "my_shop_2024-03-15.csv"

    def test_build_export_does_not_record_an_export(self, storage):
        """Test rendering the CSV for a download button logs nothing."""
        activity = RecordingActivityLogger()
        engine = LedgerEngine(
            TransactionSnapshotStore(storage),
            clock=lambda: FIXED_TODAY,
            activity_logger=activity,
        )

        filename, content = engine.build_export()

        assert filename == "ps15_transactions_2024-03-15.csv"
        assert content.startswith("Date,Type,Amount,Category,GSTIN,GST Amount\n")
        assert activity.exports == []

        engine.export_csv()
        assert activity.exports == [(filename, 6)]

    def test_record_export_logs_row_count(self, storage):
        activity = RecordingActivityLogger()
        engine = LedgerEngine(
            TransactionSnapshotStore(storage),
            clock=lambda: FIXED_TODAY,
            activity_logger=activity,
        )
        engine.delete("6")

        engine.record_export("shop.csv")

        assert activity.exports == [("shop.csv", 5)]
