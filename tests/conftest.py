from __future__ import annotations

import io
import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from dbrowser.callbacks import BrowserCallbacks
from dbrowser.config import Settings
from dbrowser.env import BrowserEnv
from dbrowser.hookspecs import hookimpl
from dbrowser.interfaces import EchoInterface, InterfaceRegistry, TerminalInterface
from dbrowser.terminal import Terminal
from dbrowser.types import Action, InterfaceCall

ROOT = "0:" + "a" * 64
OTHER = "0:" + "b" * 64
THIRD = "0:" + "c" * 64
ABI_JSON = json.dumps({"ABI version": 2, "functions": []})

Hook = Callable[..., Awaitable[None]]


def make_message(dst: str, src: str, body: Any = None) -> str:
    return json.dumps({"dst": dst, "src": src, "body": body})


def body_of(message: str) -> Any:
    return json.loads(message)["body"]


class FakeCodec:
    """Messages are JSON documents carrying dst, src and a body."""

    def __init__(self) -> None:
        self.responses: list[tuple[str, int | None, dict[str, Any]]] = []

    async def parse(self, message: str) -> dict[str, Any]:
        return json.loads(message)

    async def decode_call(self, message: str) -> InterfaceCall:
        body = json.loads(message)["body"]
        return InterfaceCall(function=body["function"], args=body.get("args", {}))

    async def encode_response(
        self,
        abi: dict[str, Any],
        address: str,
        func_id: int | None,
        return_args: dict[str, Any],
    ) -> str:
        self.responses.append((address, func_id, return_args))
        return make_message(address, "-31:" + "0" * 64, {"func_id": func_id, "args": return_args})


@dataclass
class DebotScript:
    abi: str = ABI_JSON
    on_start: Hook | None = None
    on_fetch: Hook | None = None
    on_send: Hook | None = None
    on_action: Hook | None = None
    send_error: Exception | None = None


class FakeEngine:
    def __init__(self, address: str, callbacks: BrowserCallbacks, script: DebotScript, network: FakeNetwork) -> None:
        self.address = address
        self.callbacks = callbacks
        self.script = script
        self.network = network
        self.started = False
        self.fetched = False
        self.sent: list[str] = []
        self.executed: list[Action] = []

    async def start(self) -> str:
        self.started = True
        if self.script.on_start is not None:
            await self.script.on_start(self.callbacks)
        return self.script.abi

    async def fetch(self) -> str:
        self.fetched = True
        if self.script.on_fetch is not None:
            await self.script.on_fetch(self.callbacks)
        return self.script.abi

    async def send(self, message: str) -> None:
        self.sent.append(message)
        self.network.received.append((self.address, body_of(message)))
        if self.script.send_error is not None:
            raise self.script.send_error
        if self.script.on_send is not None:
            await self.script.on_send(self.callbacks, message)

    async def execute_action(self, action: Action) -> None:
        self.executed.append(action)
        if self.script.on_action is not None:
            await self.script.on_action(self.callbacks, action)


@dataclass
class FakeNetwork:
    scripts: dict[str, DebotScript] = field(default_factory=dict)
    engines: list[FakeEngine] = field(default_factory=list)
    received: list[tuple[str, Any]] = field(default_factory=list)

    def factory(self, address: str, callbacks: BrowserCallbacks) -> FakeEngine:
        script = self.scripts.get(address)
        if script is None:
            raise LookupError(f"account {address} not found")
        engine = FakeEngine(address, callbacks, script, self)
        self.engines.append(engine)
        return engine

    def engine(self, address: str) -> FakeEngine:
        matches = [engine for engine in self.engines if engine.address == address]
        assert len(matches) == 1
        return matches[0]


def scripted_terminal(lines: str = "") -> Terminal:
    return Terminal(reader=io.StringIO(lines), writer=io.StringIO())


def output_of(terminal: Terminal) -> str:
    return terminal.writer.getvalue()  # type: ignore[attr-defined]


def make_env(network: FakeNetwork, lines: str = "", *, credentials: Any = None) -> BrowserEnv:
    terminal = scripted_terminal(lines)
    codec = FakeCodec()
    interfaces = InterfaceRegistry(codec)
    interfaces.register(EchoInterface())
    interfaces.register(TerminalInterface(terminal))
    return BrowserEnv(
        settings=Settings(),
        terminal=terminal,
        engine_factory=network.factory,
        codec=codec,
        interfaces=interfaces,
        credentials=credentials,
    )


@pytest.fixture
def network() -> FakeNetwork:
    return FakeNetwork()


class NetworkPlugin:
    def __init__(self, network: FakeNetwork) -> None:
        self.network = network
        self.codec = FakeCodec()

    @hookimpl
    def provide_engine_factory(self, settings: Settings):
        return self.network.factory

    @hookimpl
    def provide_codec(self, settings: Settings):
        return self.codec
