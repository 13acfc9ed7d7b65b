"""Local interfaces debots can call through the reserved workchain."""

from .base import Interface
from .echo import ECHO_ID, EchoInterface
from .registry import InterfaceRegistry
from .terminal import TERMINAL_ID, TerminalInterface

__all__ = [
    "ECHO_ID",
    "TERMINAL_ID",
    "EchoInterface",
    "Interface",
    "InterfaceRegistry",
    "TerminalInterface",
]
