"""
NotificationManager: broadcasts a message on every registered channel,
highest priority first.
"""

import logging
from typing import List, Optional

from ..ledger import DispatchLedger
from ..registry import DEFAULT_CAPACITY, StrategyRegistry
from .base import Notification

logger = logging.getLogger(__name__)


class NotificationManager:
    """
    Manager holding notification channels in registration order.

    Broadcasting sorts a copy of the registry, so registration order is kept
    as-is no matter how many broadcasts run.
    """

    def __init__(
        self,
        initial_capacity: int = DEFAULT_CAPACITY,
        ledger: Optional[DispatchLedger] = None,
    ):
        self._channels: StrategyRegistry[Notification] = StrategyRegistry(initial_capacity)
        self.ledger = ledger

    def add_channel(self, channel: Notification) -> None:
        """Register a channel. Duplicates are allowed."""
        self._channels.append(channel)
        logger.debug("Registered %s channel (%d total)", channel.get_type(), len(self._channels))

    def dispatch_order(self) -> List[Notification]:
        """
        Channels in the order ``broadcast`` sends to them.

        Priority descending; equal priorities keep registration order
        (``sorted`` is stable).
        """
        return sorted(self._channels.snapshot(), key=lambda c: c.get_priority(), reverse=True)

    def broadcast(self, recipient: str, message: str) -> None:
        """Send ``message`` to ``recipient`` on every channel in dispatch order."""
        ordered = self.dispatch_order()
        logger.debug(
            "Broadcasting to %s via %s",
            recipient,
            [channel.get_type() for channel in ordered],
        )
        for channel in ordered:
            channel.send(recipient, message)
            if self.ledger is not None:
                self.ledger.record(
                    manager=type(self).__name__,
                    strategy=channel.get_type(),
                    operation="send",
                    recipient=recipient,
                )

    @property
    def channels(self) -> List[Notification]:
        """Registered channels in registration order."""
        return self._channels.snapshot()

    @property
    def capacity(self) -> int:
        return self._channels.capacity

    def __len__(self) -> int:
        return len(self._channels)
