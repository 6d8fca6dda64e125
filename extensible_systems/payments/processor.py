"""
PaymentProcessor: charges every registered payment method in turn.

The processor only talks to the PaymentMethod contract, so new payment
methods plug in without changes here.
"""

import logging
from typing import List, Optional

from ..ledger import DispatchLedger
from ..registry import DEFAULT_CAPACITY, StrategyRegistry
from .base import PaymentMethod

logger = logging.getLogger(__name__)


class PaymentProcessor:
    """
    Manager holding payment methods in registration order.

    ``process_payments`` charges each method and, when the charge succeeds,
    refunds half of it right away. Results are only observable through the
    methods' own status lines (and the ledger, if one is attached).
    """

    def __init__(
        self,
        initial_capacity: int = DEFAULT_CAPACITY,
        ledger: Optional[DispatchLedger] = None,
    ):
        self._methods: StrategyRegistry[PaymentMethod] = StrategyRegistry(initial_capacity)
        self.ledger = ledger

    def add_method(self, method: PaymentMethod) -> None:
        """Register a payment method. Duplicates are allowed."""
        self._methods.append(method)
        logger.debug("Registered payment method %s (%d total)", method.get_name(), len(self._methods))

    def process_payments(self, amount: float) -> None:
        """
        Charge ``amount`` on every method in registration order.

        A method whose ``pay`` returns True is immediately refunded
        ``amount / 2``; a method that declines gets no refund call.
        """
        logger.debug("Processing %s across %d payment methods", amount, len(self._methods))
        for method in self._methods:
            name = method.get_name()
            paid = method.pay(amount)
            self._record(name, "pay", amount, paid)
            if not paid:
                logger.info("Payment declined by %s: insufficient funds", name)
                continue
            refund_amount = amount / 2
            refunded = method.refund(refund_amount)
            self._record(name, "refund", refund_amount, refunded)

    def _record(self, name: str, operation: str, amount: float, success: bool) -> None:
        if self.ledger is not None:
            self.ledger.record(
                manager=type(self).__name__,
                strategy=name,
                operation=operation,
                amount=amount,
                success=success,
            )

    @property
    def methods(self) -> List[PaymentMethod]:
        """Registered methods in registration order."""
        return self._methods.snapshot()

    @property
    def capacity(self) -> int:
        return self._methods.capacity

    def __len__(self) -> int:
        return len(self._methods)
