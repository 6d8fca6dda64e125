"""
Growable registry of strategy instances.

Both managers keep their strategies here. Storage is a fixed block of slots
that doubles when a registration would overflow it, so ``capacity`` always
reflects the physical size and ``len()`` the number of registered items.
"""

import logging
from typing import Generic, Iterator, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 3


class StrategyRegistry(Generic[T]):
    """
    Ordered collection with capacity-doubling growth.

    Registration order is iteration order. Capacity never shrinks and the
    same instance may be registered more than once.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY):
        """
        Initialize an empty registry.

        Args:
            initial_capacity: Number of slots allocated up front (>= 1)

        Raises:
            ValueError: If initial_capacity is smaller than 1
        """
        if initial_capacity < 1:
            raise ValueError(
                f"initial_capacity must be at least 1, got {initial_capacity}"
            )
        self._slots: List[Optional[T]] = [None] * initial_capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        """Physical number of slots."""
        return len(self._slots)

    def append(self, item: T) -> None:
        """Register ``item`` at the end, doubling capacity if full."""
        if self._count == len(self._slots):
            self._grow()
        self._slots[self._count] = item
        self._count += 1

    def _grow(self) -> None:
        new_capacity = len(self._slots) * 2
        logger.debug("Registry full at %d, growing to %d", len(self._slots), new_capacity)
        self._slots.extend([None] * (new_capacity - len(self._slots)))

    def snapshot(self) -> List[T]:
        """Return a new list of the registered items in registration order."""
        return list(self._slots[: self._count])

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for index in range(self._count):
            yield self._slots[index]

    def __getitem__(self, index: int) -> T:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("registry index out of range")
        return self._slots[index]

    def __repr__(self) -> str:
        return f"StrategyRegistry(count={self._count}, capacity={self.capacity})"
