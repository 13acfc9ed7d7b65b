"""Engine notification handlers bridging debot events into action state."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

from loguru import logger

from dbrowser.engine import CredentialProvider
from dbrowser.errors import CredentialError
from dbrowser.state import ActionState
from dbrowser.terminal import Terminal
from dbrowser.types import Action, Message

InvokeHandler: TypeAlias = Callable[[str], Awaitable[None]]


class BrowserCallbacks:
    """Callbacks the engine of one debot calls while it makes progress."""

    def __init__(
        self,
        terminal: Terminal,
        invoke: InvokeHandler,
        credentials: CredentialProvider | None = None,
    ) -> None:
        self.state = ActionState()
        self._terminal = terminal
        self._invoke = invoke
        self._credentials = credentials

    async def log(self, message: str) -> None:
        """Debot asks browser to print message to user."""
        self._terminal.print(message)

    async def switch(self, context_id: int) -> None:
        """Debot is switched to another context."""
        logger.debug("callbacks.switch context={}", context_id)
        self.state.switch(context_id)

    async def switch_completed(self) -> None:
        logger.debug("callbacks.switch_completed")

    async def show_action(self, action: Action) -> None:
        """Debot asks browser to show user an action from the context."""
        position = self.state.add_action(action)
        self._terminal.print(f"{position}) {action.desc}")

    async def input(self, prompt: str) -> str:
        """Debot engine asks user to enter argument for an action."""
        return await asyncio.to_thread(self._terminal.input, prompt)

    async def get_signing_box(self) -> Any:
        """Debot engine requests keys to sign something."""
        if self._credentials is None:
            raise CredentialError("no credential provider configured")
        try:
            return await self._credentials.acquire()
        except CredentialError:
            raise
        except Exception as exc:
            raise CredentialError(f"failed to acquire signing keys: {exc!s}") from exc

    async def invoke_debot(self, address: str, action: Action) -> None:
        """Debot asks to run action of another debot."""
        logger.debug("callbacks.invoke_debot address={} action={}", address, action.name)
        self._terminal.print(f"Invoking debot {address}")
        await self._invoke(address)

    async def send(self, message: Message) -> None:
        self.state.enqueue(message)
