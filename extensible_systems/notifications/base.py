"""
Notification channel contract.

Each channel knows how to format and "send" a message (a status line on the
output stream) and reports a priority the NotificationManager sorts on.
"""

import sys
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Optional, TextIO


class Priority(IntEnum):
    """Dispatch priority. Higher values are sent first."""
    LOW = 0
    NORMAL = 1
    HIGH = 2


class Notification(ABC):
    """
    Abstract base class for notification channels.

    Subclasses set ``type_tag`` and ``default_priority`` and implement
    ``format_message``. A priority passed to the constructor overrides the
    class default for that instance.
    """

    type_tag: str = "Notification"
    default_priority: Priority = Priority.NORMAL

    def __init__(self, priority: Optional[int] = None, stream: Optional[TextIO] = None):
        """
        Initialize channel.

        Args:
            priority: Per-instance priority (0, 1 or 2); class default if None
            stream: Where sent lines are written (stdout if None)

        Raises:
            ValueError: If priority is not a valid Priority value
        """
        self._priority = Priority(self.default_priority if priority is None else priority)
        self._stream = stream

    @abstractmethod
    def format_message(self, recipient: str, message: str) -> str:
        """Build the line emitted for one delivery."""
        pass

    def send(self, recipient: str, message: str) -> None:
        """Emit the formatted line. Never fails and does not validate recipient."""
        print(self.format_message(recipient, message), file=self._stream or sys.stdout)

    def get_priority(self) -> int:
        return int(self._priority)

    def get_type(self) -> str:
        return self.type_tag

    def __repr__(self) -> str:
        return f"{type(self).__name__}(priority={self._priority.name})"
