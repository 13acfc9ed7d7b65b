"""Message routing and the interactive action loop of one debot run."""

from __future__ import annotations

import asyncio
from contextvars import ContextVar

from loguru import logger

from dbrowser.bus import MessageQueue
from dbrowser.env import BrowserEnv
from dbrowser.envelope import envelope_from_parsed, split_address
from dbrowser.errors import EngineError, ExecutionError, RoutingError
from dbrowser.sessions import DebotSession, SessionRegistry
from dbrowser.types import Action, Envelope, Message

SHUTDOWN_MESSAGE = "Debot Browser shutdown"

_debot_context: ContextVar[str] = ContextVar("debot")


def current_debot() -> str:
    """Get the address of the debot whose run is active in this context."""
    return _debot_context.get("-")


class Router:
    """Drains the shared queue to a fixed point, then asks the operator for the next action."""

    def __init__(self, env: BrowserEnv) -> None:
        self._env = env
        self.queue = MessageQueue()
        self.sessions = SessionRegistry(env, self.queue, invoke=self._invoke)

    async def run(self, address: str) -> None:
        token = _debot_context.set(address)
        try:
            root = await self.sessions.get_or_create(address, start=True)
            while True:
                await self.drain()
                action = await self.select_action(root)
                if action is None:
                    break
                await self._execute(root, action)
            self._env.terminal.print(SHUTDOWN_MESSAGE)
        finally:
            _debot_context.reset(token)

    async def drain(self) -> None:
        while True:
            message = self.queue.pop()
            if message is None:
                # Pick up messages enqueued outside send/execute_action, e.g. around a nested invoke.
                if not self.sessions.drain_outbound(self.queue):
                    return
                continue
            await self.route(message)

    async def route(self, message: Message) -> None:
        envelope = await self._parse(message)
        workchain, account_id = split_address(envelope.dst)
        if workchain == self._env.settings.interface_workchain:
            await self.call_interface(envelope, account_id)
        else:
            await self.call_debot(envelope)

    async def call_interface(self, envelope: Envelope, interface_id: str) -> None:
        debot = self.sessions.get(envelope.src)
        if debot is None:
            raise RoutingError(f"interface call from unknown debot {envelope.src}")
        result = await self._env.interfaces.try_execute(envelope.payload, interface_id)
        if result is None:
            logger.debug("router.drop_interface_call id={} src={}", interface_id, envelope.src)
            return

        func_id, return_args = result
        logger.debug("router.interface_response func_id={} args={}", func_id, return_args)
        try:
            response = await self._env.codec.encode_response(
                debot.abi,
                envelope.src,
                func_id or None,
                return_args,
            )
        except Exception as exc:
            raise ExecutionError(f"failed to encode interface response: {exc!s}") from exc
        await self._send(debot, response)

    async def call_debot(self, envelope: Envelope) -> None:
        debot = await self.sessions.get_or_create(envelope.dst, start=False)
        await self._send(debot, envelope.payload)

    async def select_action(self, debot: DebotSession) -> Action | None:
        menu = debot.callbacks.state.snapshot()
        if menu.finished:
            logger.debug("router.no_more_actions context={}", menu.context_id)
            return None
        index = await asyncio.to_thread(self._env.terminal.select_index, len(menu.actions))
        return menu.actions[index - 1]

    async def _send(self, debot: DebotSession, message: Message) -> None:
        try:
            await debot.engine.send(message)
        except Exception as exc:
            # A debot failing to react to a message must not stop the other debots.
            logger.warning("router.send_failed address={} error={}", debot.address, exc)
            self._env.terminal.print(f"Debot error: {exc}")
        finally:
            debot.drain_into(self.queue)

    async def _execute(self, debot: DebotSession, action: Action) -> None:
        try:
            await debot.engine.execute_action(action)
        except EngineError:
            raise
        except Exception as exc:
            raise EngineError(f"action {action.name or action.desc!r} failed: {exc!s}") from exc
        finally:
            debot.drain_into(self.queue)

    async def _parse(self, message: Message) -> Envelope:
        try:
            parsed = await self._env.codec.parse(message)
        except Exception as exc:
            raise RoutingError(f"failed to parse message: {exc!s}") from exc
        return envelope_from_parsed(message, parsed)

    async def _invoke(self, address: str) -> None:
        await run_browser(address, self._env)


async def run_browser(address: str, env: BrowserEnv) -> None:
    """Run one debot with its own queue and sessions until it has no more actions."""

    logger.info("browser.run address={}", address)
    await Router(env).run(address)
