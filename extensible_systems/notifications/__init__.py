"""
Extensible notification system.

NotificationManager broadcasts through any number of Notification channels,
ordered by priority.
"""

from .base import Notification, Priority
from .channels import (
    EmailNotification,
    NOTIFICATION_CHANNELS,
    PushNotification,
    SMSNotification,
    create_notification,
)
from .manager import NotificationManager

__all__ = [
    "Notification",
    "Priority",
    "EmailNotification",
    "SMSNotification",
    "PushNotification",
    "NOTIFICATION_CHANNELS",
    "create_notification",
    "NotificationManager",
]
