"""
Tests for PaymentProcessor ordering, refund policy and growth.
"""

import io

import pytest

from extensible_systems.ledger import DispatchLedger
from extensible_systems.payments import (
    BitcoinPayment,
    CreditCardPayment,
    PaymentMethod,
    PaymentProcessor,
    PayPalPayment,
)


class RecordingPayment(PaymentMethod):
    """Payment method that logs every contract call into a shared list."""

    type_tag = "Recording"

    def __init__(self, name, calls, balance=0.0):
        super().__init__(balance=balance, stream=io.StringIO())
        self.name = name
        self.calls = calls

    @property
    def identifier(self):
        return self.name

    def pay(self, amount):
        result = super().pay(amount)
        self.calls.append((self.name, "pay", amount, result))
        return result

    def refund(self, amount):
        result = super().refund(amount)
        self.calls.append((self.name, "refund", amount, result))
        return result


@pytest.fixture
def calls():
    return []


class TestProcessPayments:

    def test_pays_in_registration_order(self, calls):
        processor = PaymentProcessor()
        for name in ["A", "B", "C"]:
            processor.add_method(RecordingPayment(name, calls, balance=1000.0))

        processor.process_payments(10.0)

        pays = [name for name, op, _, _ in calls if op == "pay"]
        assert pays == ["A", "B", "C"]

    def test_refund_half_only_after_successful_pay(self, calls):
        processor = PaymentProcessor()
        processor.add_method(RecordingPayment("rich", calls, balance=100.0))
        processor.add_method(RecordingPayment("poor", calls, balance=1.0))
        processor.add_method(RecordingPayment("exact", calls, balance=20.0))

        processor.process_payments(20.0)

        assert calls == [
            ("rich", "pay", 20.0, True),
            ("rich", "refund", 10.0, True),
            ("poor", "pay", 20.0, False),
            ("exact", "pay", 20.0, True),
            ("exact", "refund", 10.0, True),
        ]

    def test_empty_processor_is_noop(self, capsys):
        PaymentProcessor().process_payments(100.0)
        assert capsys.readouterr().out == ""

    def test_returns_nothing(self, calls):
        processor = PaymentProcessor()
        processor.add_method(RecordingPayment("A", calls, balance=5.0))
        assert processor.process_payments(1.0) is None

    def test_duplicate_registration_is_charged_twice(self, calls):
        method = RecordingPayment("A", calls, balance=100.0)
        processor = PaymentProcessor()
        processor.add_method(method)
        processor.add_method(method)

        processor.process_payments(40.0)

        assert len([c for c in calls if c[1] == "pay"]) == 2
        # 100 - 40 + 20 - 40 + 20
        assert method.balance == pytest.approx(60.0)


class TestRegistration:

    def test_grows_past_initial_capacity(self, calls):
        processor = PaymentProcessor(initial_capacity=3)
        methods = [RecordingPayment(str(i), calls, balance=1.0) for i in range(10)]
        for method in methods:
            processor.add_method(method)

        assert len(processor) == 10
        assert processor.capacity == 12
        assert processor.methods == methods

        processor.process_payments(1.0)
        assert [c[0] for c in calls if c[1] == "pay"] == [str(i) for i in range(10)]

    def test_methods_returns_copy(self, calls):
        processor = PaymentProcessor()
        processor.add_method(RecordingPayment("A", calls))
        processor.methods.clear()
        assert len(processor) == 1


class TestLedger:

    def test_records_pay_and_refund(self):
        ledger = DispatchLedger()
        processor = PaymentProcessor(ledger=ledger)
        processor.add_method(PayPalPayment("a@b.c", balance=50.0, stream=io.StringIO()))
        processor.add_method(PayPalPayment("d@e.f", balance=5.0, stream=io.StringIO()))

        processor.process_payments(30.0)

        assert [(e.strategy, e.operation, e.amount, e.success) for e in ledger.events] == [
            ("PayPal (a@b.c)", "pay", 30.0, True),
            ("PayPal (a@b.c)", "refund", 15.0, True),
            ("PayPal (d@e.f)", "pay", 30.0, False),
        ]
        assert {e.manager for e in ledger.events} == {"PaymentProcessor"}


class TestScenario:
    """Classic demonstration: card and PayPal succeed, Bitcoin wallet declines."""

    def test_end_to_end(self, capsys):
        card = CreditCardPayment("Alice", "4111 1111 1111 1234", balance=500.0)
        paypal = PayPalPayment("alice@example.com", balance=200.0)
        bitcoin = BitcoinPayment("wallet-1", balance=0.10)

        processor = PaymentProcessor()
        processor.add_method(card)
        processor.add_method(paypal)
        processor.add_method(bitcoin)
        processor.process_payments(100.0)

        assert card.balance == pytest.approx(450.0)
        assert paypal.balance == pytest.approx(150.0)
        assert bitcoin.balance == pytest.approx(0.10)
        assert capsys.readouterr().out.splitlines() == [
            "CreditCard (Alice) : paid 100.00, remaining 400.00",
            "CreditCard (Alice) : refunded 50.00, balance 450.00",
            "PayPal (alice@example.com) : paid 100.00, remaining 100.00",
            "PayPal (alice@example.com) : refunded 50.00, balance 150.00",
            "Bitcoin (wallet-1) : insufficient funds",
        ]
