"""Shared outbound message queue of one browser run."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterable

from dbrowser.types import Message


class MessageQueue:
    """FIFO of messages waiting to be routed, shared by all sessions of a run."""

    def __init__(self) -> None:
        self._items: deque[Message] = deque()
        self._lock = threading.Lock()

    def push(self, message: Message) -> None:
        with self._lock:
            self._items.append(message)

    def extend(self, messages: Iterable[Message]) -> None:
        with self._lock:
            self._items.extend(messages)

    def pop(self) -> Message | None:
        with self._lock:
            if not self._items:
                return None
            return self._items.popleft()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __bool__(self) -> bool:
        return len(self) > 0
