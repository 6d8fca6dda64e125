"""
Tests for the dispatch ledger.
"""

from extensible_systems.ledger import LEDGER_COLUMNS, DispatchLedger


class TestDispatchLedger:

    def test_record_assigns_sequence(self):
        ledger = DispatchLedger()
        first = ledger.record("PaymentProcessor", "PayPal (a)", "pay", amount=10.0)
        second = ledger.record("PaymentProcessor", "PayPal (a)", "refund", amount=5.0)
        assert (first.sequence, second.sequence) == (0, 1)
        assert len(ledger) == 2

    def test_for_operation(self):
        ledger = DispatchLedger()
        ledger.record("PaymentProcessor", "A", "pay", amount=1.0, success=False)
        ledger.record("NotificationManager", "SMS", "send", recipient="bob")
        assert [e.strategy for e in ledger.for_operation("send")] == ["SMS"]
        assert ledger.for_operation("refund") == []

    def test_events_is_copy(self):
        ledger = DispatchLedger()
        ledger.record("M", "S", "send")
        ledger.events.clear()
        assert len(ledger) == 1

    def test_clear(self):
        ledger = DispatchLedger()
        ledger.record("M", "S", "send")
        ledger.clear()
        assert len(ledger) == 0

    def test_to_dataframe(self):
        ledger = DispatchLedger()
        ledger.record("PaymentProcessor", "Bitcoin (w)", "pay", amount=100.0, success=False)
        ledger.record("NotificationManager", "Email", "send", recipient="bob")

        df = ledger.to_dataframe()

        assert list(df.columns) == LEDGER_COLUMNS
        assert len(df) == 2
        assert df.loc[0, "success"] == False  # noqa: E712
        assert df.loc[1, "recipient"] == "bob"

    def test_empty_dataframe_keeps_columns(self):
        df = DispatchLedger().to_dataframe()
        assert df.empty
        assert list(df.columns) == LEDGER_COLUMNS
