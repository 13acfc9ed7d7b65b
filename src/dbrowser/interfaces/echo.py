"""Echo interface, mostly useful to check that a debot can reach the browser."""

from __future__ import annotations

from typing import Any

from .base import Interface

ECHO_ID = "f6927c0d4bdb69e1b52d27f018d156ff04152f00558042ff674f0fec32e4369d"


class EchoInterface(Interface):
    id = ECHO_ID
    name = "echo"

    async def echo(self, request: Any) -> dict[str, Any]:
        return {"response": request}
