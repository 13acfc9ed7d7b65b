"""Hook execution runtime with per-plugin fault isolation."""

from __future__ import annotations

import inspect
from typing import Any

import pluggy
from loguru import logger


class HookRuntime:
    """Safe wrapper around pluggy hook execution."""

    def __init__(self, plugin_manager: pluggy.PluginManager) -> None:
        self._plugin_manager = plugin_manager

    def call_first(self, hook_name: str, **kwargs: Any) -> Any:
        """Run hook implementations in precedence order and return first non-None value."""

        for impl in self._iter_hookimpls(hook_name):
            value = self._invoke_impl(hook_name=hook_name, impl=impl, call_kwargs=self._kwargs_for_impl(impl, kwargs))
            if value is _SKIP_VALUE:
                continue
            if value is not None:
                return value
        return None

    def call_many(self, hook_name: str, **kwargs: Any) -> list[Any]:
        """Run all implementations and collect successful return values."""

        results: list[Any] = []
        for impl in self._iter_hookimpls(hook_name):
            value = self._invoke_impl(hook_name=hook_name, impl=impl, call_kwargs=self._kwargs_for_impl(impl, kwargs))
            if value is _SKIP_VALUE:
                continue
            results.append(value)
        return results

    def notify_error(self, *, stage: str, error: Exception) -> None:
        """Call on_error hooks, swallowing observer failures."""

        for impl in self._iter_hookimpls("on_error"):
            call_kwargs = self._kwargs_for_impl(impl, {"stage": stage, "error": error})
            try:
                impl.function(**call_kwargs)
            except Exception:
                logger.opt(exception=True).warning(
                    "hook.on_error_failed stage={} plugin={}",
                    stage,
                    impl.plugin_name or "<unknown>",
                )

    def hook_report(self) -> dict[str, list[str]]:
        """Build a hook->plugins mapping for diagnostics."""

        report: dict[str, list[str]] = {}
        for hook_name, hook_caller in sorted(self._plugin_manager.hook.__dict__.items()):
            if hook_name.startswith("_") or not hasattr(hook_caller, "get_hookimpls"):
                continue
            plugin_names = [impl.plugin_name for impl in hook_caller.get_hookimpls()]
            if plugin_names:
                report[hook_name] = plugin_names
        return report

    def _invoke_impl(self, *, hook_name: str, impl: Any, call_kwargs: dict[str, Any]) -> Any:
        stage = f"{hook_name}:{impl.plugin_name or '<unknown>'}"
        try:
            value = impl.function(**call_kwargs)
        except Exception as error:
            logger.opt(exception=True).warning("hook.failed stage={}", stage)
            self.notify_error(stage=stage, error=error)
            return _SKIP_VALUE
        if inspect.isawaitable(value):
            if inspect.iscoroutine(value):
                value.close()
            logger.warning("hook.async_not_supported stage={}", stage)
            return _SKIP_VALUE
        return value

    def _iter_hookimpls(self, hook_name: str) -> list[Any]:
        hook = getattr(self._plugin_manager.hook, hook_name, None)
        if hook is None or not hasattr(hook, "get_hookimpls"):
            return []
        return list(reversed(hook.get_hookimpls()))

    @staticmethod
    def _kwargs_for_impl(impl: Any, kwargs: dict[str, Any]) -> dict[str, Any]:
        return {name: kwargs[name] for name in impl.argnames if name in kwargs}


_SKIP_VALUE = object()
