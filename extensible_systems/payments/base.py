"""
Payment method contract.

Every payment strategy implements this interface so the PaymentProcessor can
drive it without knowing its concrete type. A new payment method only needs
a subclass; the processor does not change.
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class PaymentMethod(ABC):
    """
    Abstract base class for payment strategies.

    Subclasses set ``type_tag`` and implement ``identifier``. Balance
    arithmetic and the status lines are shared; amounts are trusted as given
    (zero or negative values are not rejected).
    """

    type_tag: str = "Payment"
    amount_precision: int = 2

    def __init__(self, balance: float = 0.0, stream: Optional[TextIO] = None):
        """
        Initialize payment method.

        Args:
            balance: Initial balance
            stream: Where status lines are written (stdout if None)
        """
        self._balance = float(balance)
        self._stream = stream

    @property
    @abstractmethod
    def identifier(self) -> str:
        """Identifying attribute shown in status lines (holder, email, wallet)."""
        pass

    @property
    def balance(self) -> float:
        return self._balance

    def pay(self, amount: float) -> bool:
        """
        Debit ``amount`` if the balance covers it.

        Args:
            amount: Amount to charge

        Returns:
            True if the balance was debited, False on insufficient funds
            (balance unchanged)
        """
        if amount <= self._balance:
            self._balance -= amount
            self._emit(
                f"{self.get_name()} : paid {self._format(amount)}, "
                f"remaining {self._format(self._balance)}"
            )
            return True

        self._emit(f"{self.get_name()} : insufficient funds")
        return False

    def refund(self, amount: float) -> bool:
        """Credit ``amount`` unconditionally. Always returns True."""
        self._balance += amount
        self._emit(
            f"{self.get_name()} : refunded {self._format(amount)}, "
            f"balance {self._format(self._balance)}"
        )
        return True

    def get_name(self) -> str:
        """Type tag and identifier, e.g. ``CreditCard (Alice)``."""
        return f"{self.type_tag} ({self.identifier})"

    def _format(self, value: float) -> str:
        return f"{value:.{self.amount_precision}f}"

    def _emit(self, line: str) -> None:
        # stdout is looked up at emit time so redirection (and capsys) applies
        print(line, file=self._stream or sys.stdout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier!r}, balance={self._balance!r})"
