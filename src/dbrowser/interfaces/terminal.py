"""Terminal interface: lets a debot print and read text directly."""

from __future__ import annotations

import asyncio
from typing import Any

from dbrowser.terminal import Terminal

from .base import Interface

TERMINAL_ID = "8796536366ee21852db56dccb60bc564598b618c865fc50c8b1ab740bba128e3"


class TerminalInterface(Interface):
    id = TERMINAL_ID
    name = "terminal"

    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal

    async def print(self, message: str) -> dict[str, Any]:
        self._terminal.print(message)
        return {}

    async def inputStr(self, prompt: str, multiline: bool = False) -> dict[str, Any]:  # noqa: N802
        read = self._terminal.input_lines if multiline else self._terminal.input
        value = await asyncio.to_thread(read, prompt)
        return {"value": value}

    async def inputInt(self, prompt: str) -> dict[str, Any]:  # noqa: N802
        value = await asyncio.to_thread(self._read_int, prompt)
        return {"value": value}

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self._terminal.input(prompt)
            try:
                return int(raw, 10)
            except ValueError:
                self._terminal.print("Invalid number. Try again.")
