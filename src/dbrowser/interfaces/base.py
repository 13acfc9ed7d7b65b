"""Base class for interface implementations."""

from __future__ import annotations

import inspect
from typing import Any, TypeAlias

from dbrowser.errors import ExecutionError

InterfaceResult: TypeAlias = tuple[int, dict[str, Any]]


class Interface:
    """An interface exposes its functions as coroutine methods.

    Each method receives the decoded call arguments (without ``answerId``) as
    keyword arguments and returns the values to send back to the debot.
    """

    id: str = ""
    name: str = ""

    async def call(self, function: str, args: dict[str, Any]) -> InterfaceResult:
        handler = self._handler(function)
        kwargs = dict(args)
        answer_id = _answer_id(kwargs.pop("answerId", 0))
        try:
            inspect.signature(handler).bind(**kwargs)
        except TypeError as exc:
            raise ExecutionError(f"{self.name}.{function}: bad arguments: {exc!s}") from exc
        result = await handler(**kwargs)
        return answer_id, result or {}

    def _handler(self, function: str) -> Any:
        if function.startswith("_") or function in {"call", "id", "name"}:
            raise ExecutionError(f"{self.name}: unknown function {function!r}")
        handler = getattr(self, function, None)
        if handler is None or not inspect.iscoroutinefunction(handler):
            raise ExecutionError(f"{self.name}: unknown function {function!r}")
        return handler


def _answer_id(raw: Any) -> int:
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw), 0)
    except ValueError as exc:
        raise ExecutionError(f"invalid answerId: {raw!r}") from exc
