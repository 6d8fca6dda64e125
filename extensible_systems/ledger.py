"""
Audit trail of strategy calls made by the managers.

A ledger is optional. When attached to a manager it records every ``pay``,
``refund`` and ``send`` the manager issues, in call order, without changing
what the manager returns.
"""

from dataclasses import dataclass, asdict
from typing import List, Optional

import pandas as pd


LEDGER_COLUMNS = [
    "sequence",
    "manager",
    "strategy",
    "operation",
    "amount",
    "recipient",
    "success",
]


@dataclass(frozen=True)
class DispatchEvent:
    """One strategy call issued by a manager."""
    sequence: int
    manager: str
    strategy: str
    operation: str  # "pay", "refund" or "send"
    amount: Optional[float] = None
    recipient: Optional[str] = None
    success: bool = True


class DispatchLedger:
    """Append-only list of DispatchEvent records."""

    def __init__(self):
        self._events: List[DispatchEvent] = []

    def record(
        self,
        manager: str,
        strategy: str,
        operation: str,
        amount: Optional[float] = None,
        recipient: Optional[str] = None,
        success: bool = True,
    ) -> DispatchEvent:
        """
        Append an event and return it.

        Args:
            manager: Name of the manager class issuing the call
            strategy: Display name of the strategy that was called
            operation: Contract operation invoked
            amount: Amount passed to pay/refund, if any
            recipient: Recipient passed to send, if any
            success: Result reported by the strategy

        Returns:
            The recorded DispatchEvent
        """
        event = DispatchEvent(
            sequence=len(self._events),
            manager=manager,
            strategy=strategy,
            operation=operation,
            amount=amount,
            recipient=recipient,
            success=success,
        )
        self._events.append(event)
        return event

    @property
    def events(self) -> List[DispatchEvent]:
        """Copy of the recorded events in call order."""
        return list(self._events)

    def for_operation(self, operation: str) -> List[DispatchEvent]:
        """Events whose operation matches ``operation``."""
        return [e for e in self._events if e.operation == operation]

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert to DataFrame, one row per event.

        Columns are always LEDGER_COLUMNS, even for an empty ledger.
        """
        rows = [asdict(event) for event in self._events]
        return pd.DataFrame(rows, columns=LEDGER_COLUMNS)
