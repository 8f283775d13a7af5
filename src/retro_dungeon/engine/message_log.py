from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterator, List

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 5


class MessageLog:
    """Bounded, oldest-first list of player-facing messages.

    Once ``capacity`` messages are held, each new one evicts the oldest.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._messages: Deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, message: str) -> None:
        self._messages.append(message)
        logger.info(message)

    def messages(self) -> List[str]:
        return list(self._messages)

    def clear(self) -> None:
        logger.debug("Clearing message log (count=%d)", len(self._messages))
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._messages))
