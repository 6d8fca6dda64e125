"""
Concrete notification channels and the factory used by the demo config.
"""

from typing import Dict, Optional, TextIO, Type

from ..errors import UnknownStrategyError
from .base import Notification, Priority


class EmailNotification(Notification):
    """Email sent from a fixed address. Normal priority."""

    type_tag = "Email"
    default_priority = Priority.NORMAL

    def __init__(
        self,
        from_address: str,
        priority: Optional[int] = None,
        stream: Optional[TextIO] = None,
    ):
        super().__init__(priority=priority, stream=stream)
        self.from_address = from_address

    def format_message(self, recipient: str, message: str) -> str:
        return f"[Email] From: {self.from_address} To: {recipient} — {message}"


class SMSNotification(Notification):
    """Text message sent from a phone number. High priority."""

    type_tag = "SMS"
    default_priority = Priority.HIGH

    def __init__(
        self,
        phone_number: str,
        priority: Optional[int] = None,
        stream: Optional[TextIO] = None,
    ):
        super().__init__(priority=priority, stream=stream)
        self.phone_number = phone_number

    def format_message(self, recipient: str, message: str) -> str:
        return f"[SMS] From: {self.phone_number} To: {recipient} — {message}"


class PushNotification(Notification):
    """Push notification from a mobile app. Low priority."""

    type_tag = "Push"
    default_priority = Priority.LOW

    def __init__(
        self,
        app_id: str,
        priority: Optional[int] = None,
        stream: Optional[TextIO] = None,
    ):
        super().__init__(priority=priority, stream=stream)
        self.app_id = app_id

    def format_message(self, recipient: str, message: str) -> str:
        return f"[Push] App: {self.app_id} User: {recipient} — {message}"


# Config key -> class. Add new channels here.
NOTIFICATION_CHANNELS: Dict[str, Type[Notification]] = {
    "email": EmailNotification,
    "sms": SMSNotification,
    "push": PushNotification,
}


def create_notification(kind: str, **fields) -> Notification:
    """
    Build a notification channel from its config key.

    Raises:
        UnknownStrategyError: If kind is not registered
    """
    key = (kind or "").strip().lower()
    if key not in NOTIFICATION_CHANNELS:
        raise UnknownStrategyError(
            f"Unknown notification channel: {kind}. "
            f"Available: {list(NOTIFICATION_CHANNELS.keys())}"
        )
    return NOTIFICATION_CHANNELS[key](**fields)
