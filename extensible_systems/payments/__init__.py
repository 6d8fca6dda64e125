"""
Extensible payment system.

PaymentProcessor drives any number of PaymentMethod strategies through a
common contract.
"""

from .base import PaymentMethod
from .methods import (
    BitcoinPayment,
    CreditCardPayment,
    PayPalPayment,
    PAYMENT_METHODS,
    create_payment_method,
)
from .processor import PaymentProcessor

__all__ = [
    "PaymentMethod",
    "CreditCardPayment",
    "PayPalPayment",
    "BitcoinPayment",
    "PAYMENT_METHODS",
    "create_payment_method",
    "PaymentProcessor",
]
