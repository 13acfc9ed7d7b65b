"""Lazily created debot sessions keyed by address."""

from __future__ import annotations

import json
from dataclasses import dataclass

from loguru import logger

from dbrowser.bus import MessageQueue
from dbrowser.callbacks import BrowserCallbacks, InvokeHandler
from dbrowser.engine import Engine
from dbrowser.env import BrowserEnv
from dbrowser.envelope import normalize_address
from dbrowser.errors import SessionInitError
from dbrowser.types import Abi


@dataclass
class DebotSession:
    """Runtime state for one debot."""

    address: str
    abi: Abi
    engine: Engine
    callbacks: BrowserCallbacks

    def drain_into(self, queue: MessageQueue) -> int:
        """Move messages the engine produced so far to the shared queue."""
        messages = self.callbacks.state.take_outbound()
        queue.extend(messages)
        return len(messages)


def load_abi(abi_json: str) -> Abi:
    try:
        abi = json.loads(abi_json)
    except (TypeError, ValueError) as exc:
        raise SessionInitError(f"failed to load debot ABI: {exc!s}") from exc
    if not isinstance(abi, dict):
        raise SessionInitError("failed to load debot ABI: not a JSON object")
    return abi


class SessionRegistry:
    """Map of instantiated debots. New debots are created by messages and invokes."""

    def __init__(self, env: BrowserEnv, queue: MessageQueue, invoke: InvokeHandler) -> None:
        self._env = env
        self._queue = queue
        self._invoke = invoke
        self._sessions: dict[str, DebotSession] = {}

    def get(self, address: str) -> DebotSession | None:
        return self._sessions.get(normalize_address(address))

    def __contains__(self, address: str) -> bool:
        return self.get(address) is not None

    def __len__(self) -> int:
        return len(self._sessions)

    def drain_outbound(self, queue: MessageQueue) -> int:
        """Move pending messages of every session, in creation order, to the shared queue."""
        return sum(session.drain_into(queue) for session in list(self._sessions.values()))

    async def get_or_create(self, address: str, *, start: bool = False) -> DebotSession:
        address = normalize_address(address)
        existing = self._sessions.get(address)
        if existing is not None:
            return existing

        callbacks = BrowserCallbacks(self._env.terminal, self._invoke, self._env.credentials)
        try:
            engine = self._env.engine_factory(address, callbacks)
            abi_json = await engine.start() if start else await engine.fetch()
        except SessionInitError:
            raise
        except Exception as exc:
            # Engines are an external boundary with non-uniform exceptions.
            mode = "start" if start else "fetch"
            raise SessionInitError(f"failed to {mode} debot {address}: {exc!s}") from exc

        session = DebotSession(address=address, abi=load_abi(abi_json), engine=engine, callbacks=callbacks)
        queued = session.drain_into(self._queue)
        self._sessions[address] = session
        logger.info("session.created address={} start={} queued={}", address, start, queued)
        return session
