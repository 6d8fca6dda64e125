"""
Extensible payment and notification systems.

Two small Strategy-pattern exercises sharing one mechanism: a manager that
holds strategies in a growable registry and dispatches to them through their
contract only.
"""

from .errors import ConfigError, ExtensibleSystemsError, UnknownStrategyError
from .ledger import DispatchEvent, DispatchLedger
from .notifications import (
    EmailNotification,
    Notification,
    NotificationManager,
    Priority,
    PushNotification,
    SMSNotification,
)
from .payments import (
    BitcoinPayment,
    CreditCardPayment,
    PaymentMethod,
    PaymentProcessor,
    PayPalPayment,
)
from .registry import StrategyRegistry

__version__ = "0.1.0"

__all__ = [
    # Payments
    "PaymentMethod",
    "CreditCardPayment",
    "PayPalPayment",
    "BitcoinPayment",
    "PaymentProcessor",
    # Notifications
    "Notification",
    "Priority",
    "EmailNotification",
    "SMSNotification",
    "PushNotification",
    "NotificationManager",
    # Shared
    "StrategyRegistry",
    "DispatchEvent",
    "DispatchLedger",
    "ExtensibleSystemsError",
    "ConfigError",
    "UnknownStrategyError",
]
