"""Per-session action state shared by engine callbacks and the menu loop."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from dbrowser.types import STATE_EXIT, Action, Message


class RWLock:
    """Writer-preferring reader/writer lock.

    Critical sections must not await or block on I/O.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


@dataclass(frozen=True)
class MenuSnapshot:
    context_id: int
    actions: tuple[Action, ...]

    @property
    def finished(self) -> bool:
        return self.context_id == STATE_EXIT or not self.actions


class ActionState:
    """Context id, active actions and pending outbound messages of one debot."""

    def __init__(self) -> None:
        self.lock = RWLock()
        self._context_id = 0
        self._actions: list[Action] = []
        self._outbound: deque[Message] = deque()

    @property
    def context_id(self) -> int:
        with self.lock.read():
            return self._context_id

    @property
    def actions(self) -> list[Action]:
        with self.lock.read():
            return list(self._actions)

    def switch(self, context_id: int) -> None:
        with self.lock.write():
            self._context_id = context_id
            if context_id == STATE_EXIT:
                return
            self._actions = []

    def add_action(self, action: Action) -> int:
        """Append an action and return its 1-based menu position."""
        with self.lock.write():
            self._actions.append(action)
            return len(self._actions)

    def enqueue(self, message: Message) -> None:
        with self.lock.write():
            self._outbound.append(message)

    def take_outbound(self) -> list[Message]:
        with self.lock.write():
            messages = list(self._outbound)
            self._outbound.clear()
            return messages

    def snapshot(self) -> MenuSnapshot:
        with self.lock.read():
            return MenuSnapshot(context_id=self._context_id, actions=tuple(self._actions))
