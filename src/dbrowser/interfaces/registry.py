"""Registry of interfaces supported by this browser."""

from __future__ import annotations

import time

from loguru import logger

from dbrowser.engine import MessageCodec
from dbrowser.errors import ExecutionError
from dbrowser.types import Message

from .base import Interface, InterfaceResult


class InterfaceRegistry:
    """Interfaces keyed by their hex id."""

    def __init__(self, codec: MessageCodec) -> None:
        self._codec = codec
        self._interfaces: dict[str, Interface] = {}

    def register(self, interface: Interface) -> None:
        key = interface.id.lower()
        if not key:
            raise ValueError(f"interface {interface.name!r} has no id")
        self._interfaces[key] = interface

    def has(self, interface_id: str) -> bool:
        return interface_id.lower() in self._interfaces

    def get(self, interface_id: str) -> Interface | None:
        return self._interfaces.get(interface_id.lower())

    def ids(self) -> list[str]:
        return sorted(self._interfaces)

    async def try_execute(self, message: Message, interface_id: str) -> InterfaceResult | None:
        """Execute an interface call, or return None if the interface is not supported."""

        interface = self.get(interface_id)
        if interface is None:
            return None
        try:
            call = await self._codec.decode_call(message)
        except Exception as exc:
            # Codec is supplied by a plugin; normalize its failures.
            raise ExecutionError(f"failed to decode {interface.name} call: {exc!s}") from exc

        logger.info("interface.call.start name={} function={}", interface.name, call.function)
        start = time.monotonic()
        try:
            result = await interface.call(call.function, call.args)
        except ExecutionError:
            logger.warning("interface.call.failed name={} function={}", interface.name, call.function)
            raise
        except Exception as exc:
            logger.opt(exception=True).warning("interface.call.failed name={} function={}", interface.name, call.function)
            raise ExecutionError(f"{interface.name}.{call.function} failed: {exc!s}") from exc
        logger.info(
            "interface.call.end name={} duration={:.3f}ms",
            interface.name,
            (time.monotonic() - start) * 1000,
        )
        return result
