"""
Concrete payment strategies and the factory used by the demo config.
"""

from typing import Dict, Optional, TextIO, Type

from ..errors import UnknownStrategyError
from .base import PaymentMethod


class CreditCardPayment(PaymentMethod):
    """Card payment identified by the card holder's name."""

    type_tag = "CreditCard"

    def __init__(
        self,
        card_holder: str,
        card_number: str,
        balance: float = 0.0,
        stream: Optional[TextIO] = None,
    ):
        super().__init__(balance=balance, stream=stream)
        self._card_holder = card_holder
        self._card_number = str(card_number)

    @property
    def identifier(self) -> str:
        return self._card_holder

    @property
    def card_holder(self) -> str:
        return self._card_holder

    @property
    def masked_number(self) -> str:
        """Card number with everything but the last four digits hidden."""
        digits = self._card_number.replace(" ", "")
        return "**** **** **** " + digits[-4:]


class PayPalPayment(PaymentMethod):
    """PayPal account identified by its email."""

    type_tag = "PayPal"

    def __init__(self, email: str, balance: float = 0.0, stream: Optional[TextIO] = None):
        super().__init__(balance=balance, stream=stream)
        self._email = email

    @property
    def identifier(self) -> str:
        return self._email

    @property
    def email(self) -> str:
        return self._email


class BitcoinPayment(PaymentMethod):
    """Bitcoin wallet. Amounts are shown with 4 decimals."""

    type_tag = "Bitcoin"
    amount_precision = 4

    def __init__(
        self,
        wallet_address: str,
        balance: float = 0.0,
        stream: Optional[TextIO] = None,
    ):
        super().__init__(balance=balance, stream=stream)
        self._wallet_address = wallet_address

    @property
    def identifier(self) -> str:
        return self._wallet_address

    @property
    def wallet_address(self) -> str:
        return self._wallet_address


# Config key -> class. Add new payment methods here.
PAYMENT_METHODS: Dict[str, Type[PaymentMethod]] = {
    "credit_card": CreditCardPayment,
    "paypal": PayPalPayment,
    "bitcoin": BitcoinPayment,
}


def create_payment_method(kind: str, **fields) -> PaymentMethod:
    """
    Build a payment method from its config key.

    Args:
        kind: Key in PAYMENT_METHODS (case-insensitive)
        **fields: Constructor arguments for the selected class

    Returns:
        New PaymentMethod instance

    Raises:
        UnknownStrategyError: If kind is not registered
    """
    key = (kind or "").strip().lower()
    if key not in PAYMENT_METHODS:
        raise UnknownStrategyError(
            f"Unknown payment method: {kind}. Available: {list(PAYMENT_METHODS.keys())}"
        )
    return PAYMENT_METHODS[key](**fields)
