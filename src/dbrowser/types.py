"""Framework-neutral data types shared by the browser components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

Message: TypeAlias = str
Abi: TypeAlias = dict[str, Any]

STATE_EXIT = 255
DEBOT_WC = -31


@dataclass(frozen=True)
class Action:
    """One action a debot offers in its current context.

    Only ``desc`` is shown to the operator, the rest is interpreted by the engine.
    """

    desc: str
    name: str = ""
    action_type: int = 0
    to: int = 0
    attrs: str = ""
    misc: str = ""


@dataclass(frozen=True)
class Envelope:
    """A decoded message: raw payload plus its routing addresses."""

    payload: Message
    dst: str
    src: str


@dataclass(frozen=True)
class InterfaceCall:
    """An interface call decoded from a message body."""

    function: str
    args: dict[str, Any] = field(default_factory=dict)
