"""Hook-first assembly of the browser environment."""

from __future__ import annotations

from typing import Any, cast

import pluggy
from loguru import logger

from dbrowser.builtin.plugin import plugin as builtin_plugin
from dbrowser.config import Settings
from dbrowser.engine import CredentialProvider, EngineFactory, MessageCodec
from dbrowser.env import BrowserEnv
from dbrowser.errors import ConfigurationError
from dbrowser.hook_runtime import HookRuntime
from dbrowser.hookspecs import DBROWSER_HOOK_NAMESPACE, DBrowserHookSpecs
from dbrowser.interfaces import InterfaceRegistry
from dbrowser.terminal import Terminal

ENTRY_POINT_GROUP = "dbrowser"
ENGINE_NOT_CONFIGURED_ERROR = "No debot engine available. Install a plugin providing 'provide_engine_factory'."
CODEC_NOT_CONFIGURED_ERROR = "No message codec available. Install a plugin providing 'provide_codec'."


class BrowserFramework:
    """Collects plugins and builds the collaborators every router run shares."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._plugin_manager = pluggy.PluginManager(DBROWSER_HOOK_NAMESPACE)
        self._plugin_manager.add_hookspecs(DBrowserHookSpecs)
        self._hook_runtime = HookRuntime(self._plugin_manager)
        self._failed_plugins: dict[str, str] = {}

    @property
    def failed_plugins(self) -> dict[str, str]:
        return dict(self._failed_plugins)

    def register(self, plugin: Any, *, name: str | None = None) -> None:
        self._plugin_manager.register(plugin, name=name)

    def load_plugins(self) -> None:
        """Register the builtin plugin and every installed entry point plugin."""

        self._failed_plugins = {}
        if not self._plugin_manager.is_registered(builtin_plugin):
            self._plugin_manager.register(builtin_plugin, name="builtin")
        try:
            loaded = self._plugin_manager.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        except Exception as exc:  # pragma: no cover - depends on installed distributions
            self._failed_plugins[ENTRY_POINT_GROUP] = str(exc)
            logger.opt(exception=True).warning("plugin.load_failed group={}", ENTRY_POINT_GROUP)
            return
        logger.debug("plugin.loaded count={}", loaded)

    def build_env(self, terminal: Terminal) -> BrowserEnv:
        engine_factory = self._hook_runtime.call_first("provide_engine_factory", settings=self.settings)
        if not callable(engine_factory):
            raise ConfigurationError(ENGINE_NOT_CONFIGURED_ERROR)
        codec = self._hook_runtime.call_first("provide_codec", settings=self.settings)
        if not self._is_codec_like(codec):
            raise ConfigurationError(CODEC_NOT_CONFIGURED_ERROR)

        codec = cast(MessageCodec, codec)
        interfaces = InterfaceRegistry(codec)
        self._hook_runtime.call_many("register_interfaces", registry=interfaces, settings=self.settings, terminal=terminal)
        credentials = self._hook_runtime.call_first(
            "provide_credential_provider",
            settings=self.settings,
            terminal=terminal,
        )
        return BrowserEnv(
            settings=self.settings,
            terminal=terminal,
            engine_factory=cast(EngineFactory, engine_factory),
            codec=codec,
            interfaces=interfaces,
            credentials=cast(CredentialProvider | None, credentials),
        )

    def hook_report(self) -> dict[str, list[str]]:
        """Return hook implementation summary for diagnostics."""

        return self._hook_runtime.hook_report()

    @staticmethod
    def _is_codec_like(candidate: Any) -> bool:
        if candidate is None:
            return False
        required = ("parse", "decode_call", "encode_response")
        return all(callable(getattr(candidate, name, None)) for name in required)
