"""Pluggy hook namespace and browser hook specifications."""

from __future__ import annotations

import pluggy

from dbrowser.config import Settings
from dbrowser.engine import CredentialProvider, EngineFactory, MessageCodec
from dbrowser.interfaces import InterfaceRegistry
from dbrowser.terminal import Terminal

DBROWSER_HOOK_NAMESPACE = "dbrowser"
hookspec = pluggy.HookspecMarker(DBROWSER_HOOK_NAMESPACE)
hookimpl = pluggy.HookimplMarker(DBROWSER_HOOK_NAMESPACE)


class DBrowserHookSpecs:
    """Hook contract for browser extensions."""

    @hookspec(firstresult=True)
    def provide_engine_factory(self, settings: Settings) -> EngineFactory | None:
        """Provide the factory creating one debot engine per address."""

    @hookspec(firstresult=True)
    def provide_codec(self, settings: Settings) -> MessageCodec | None:
        """Provide message parsing and interface call encoding."""

    @hookspec(firstresult=True)
    def provide_credential_provider(self, settings: Settings, terminal: Terminal) -> CredentialProvider | None:
        """Provide signing credentials for debots."""

    @hookspec
    def register_interfaces(self, registry: InterfaceRegistry, settings: Settings, terminal: Terminal) -> None:
        """Register local interfaces debots may call."""

    @hookspec
    def on_error(self, stage: str, error: Exception) -> None:
        """Observe plugin errors from any stage."""
