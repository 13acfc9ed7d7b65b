"""Contracts of the external collaborators the browser drives."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from dbrowser.types import Abi, Action, InterfaceCall, Message

if TYPE_CHECKING:
    from dbrowser.callbacks import BrowserCallbacks


class Engine(Protocol):
    """Execution engine of one debot."""

    async def start(self) -> str:
        """Discover the debot on-chain, run its start routine and return its ABI json."""
        ...

    async def fetch(self) -> str:
        """Load the debot without running its start routine and return its ABI json."""
        ...

    async def send(self, message: Message) -> None: ...

    async def execute_action(self, action: Action) -> None: ...


class EngineFactory(Protocol):
    def __call__(self, address: str, callbacks: BrowserCallbacks) -> Engine: ...


class MessageCodec(Protocol):
    """Envelope decoding and encoding supplied by the network client."""

    async def parse(self, message: Message) -> Any:
        """Decode a message into a mapping or object with ``dst`` and ``src`` fields."""
        ...

    async def decode_call(self, message: Message) -> InterfaceCall: ...

    async def encode_response(
        self,
        abi: Abi,
        address: str,
        func_id: int | None,
        return_args: dict[str, Any],
    ) -> Message:
        """Encode an internal message to ``address``; no function call when ``func_id`` is None."""
        ...


class CredentialProvider(Protocol):
    async def acquire(self) -> Any:
        """Return an opaque signing handle or raise ``CredentialError``."""
        ...
