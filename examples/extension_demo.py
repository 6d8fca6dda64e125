"""
Demonstration of extending both systems without touching the managers.

Adds a gift-card payment method and a Slack notification channel, registers
them next to the built-in strategies and runs both managers.
"""

from typing import Optional, TextIO

from extensible_systems import (
    CreditCardPayment,
    EmailNotification,
    Notification,
    NotificationManager,
    PaymentMethod,
    PaymentProcessor,
    Priority,
    PushNotification,
)


class GiftCardPayment(PaymentMethod):
    """Prepaid gift card identified by its code."""

    type_tag = "GiftCard"

    def __init__(self, code: str, balance: float = 0.0, stream: Optional[TextIO] = None):
        super().__init__(balance=balance, stream=stream)
        self.code = code

    @property
    def identifier(self) -> str:
        return self.code


class SlackNotification(Notification):
    """Message posted to a Slack channel. Same priority as SMS."""

    type_tag = "Slack"
    default_priority = Priority.HIGH

    def __init__(self, workspace: str, priority: Optional[int] = None, stream: Optional[TextIO] = None):
        super().__init__(priority=priority, stream=stream)
        self.workspace = workspace

    def format_message(self, recipient: str, message: str) -> str:
        return f"[Slack] Workspace: {self.workspace} Channel: {recipient} — {message}"


def build_demo(stream: Optional[TextIO] = None):
    """Return a processor and a manager mixing built-in and custom strategies."""
    processor = PaymentProcessor()
    processor.add_method(CreditCardPayment("Alice Martin", "4111111111111234", balance=80.0, stream=stream))
    processor.add_method(GiftCardPayment("GIFT-2024", balance=60.0, stream=stream))

    manager = NotificationManager()
    manager.add_channel(PushNotification("com.example.shop", stream=stream))
    manager.add_channel(EmailNotification("noreply@shop.example.com", stream=stream))
    manager.add_channel(SlackNotification("shop-team", stream=stream))

    return processor, manager


def main(stream: Optional[TextIO] = None):
    """Run extension demo."""
    print("=" * 80, file=stream)
    print("Extension Demo", file=stream)
    print("=" * 80, file=stream)

    processor, manager = build_demo(stream)
    processor.process_payments(50.0)
    manager.broadcast("#orders", "New order received")


if __name__ == "__main__":
    main()
