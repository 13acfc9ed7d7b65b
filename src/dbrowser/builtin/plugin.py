"""Builtin hook implementations: standard interfaces and key-file signing."""

from __future__ import annotations

from dbrowser.config import Settings
from dbrowser.credentials import KeyFileCredentialProvider
from dbrowser.hookspecs import hookimpl
from dbrowser.interfaces import EchoInterface, InterfaceRegistry, TerminalInterface
from dbrowser.terminal import Terminal


class BuiltinPlugin:
    @hookimpl
    def register_interfaces(self, registry: InterfaceRegistry, terminal: Terminal) -> None:
        registry.register(EchoInterface())
        registry.register(TerminalInterface(terminal))

    @hookimpl(trylast=True)
    def provide_credential_provider(self, settings: Settings, terminal: Terminal) -> KeyFileCredentialProvider:
        return KeyFileCredentialProvider(terminal, settings.keys_path)


plugin = BuiltinPlugin()
