"""Collaborators shared by every router run of one process."""

from __future__ import annotations

from dataclasses import dataclass

from dbrowser.config import Settings
from dbrowser.engine import CredentialProvider, EngineFactory, MessageCodec
from dbrowser.interfaces import InterfaceRegistry
from dbrowser.terminal import Terminal


@dataclass(frozen=True)
class BrowserEnv:
    settings: Settings
    terminal: Terminal
    engine_factory: EngineFactory
    codec: MessageCodec
    interfaces: InterfaceRegistry
    credentials: CredentialProvider | None = None
