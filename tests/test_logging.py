from __future__ import annotations

from typing import Any

import pytest

from dbrowser import logging_utils


@pytest.fixture
def sink_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr(logging_utils, "_CONFIGURED", None)
    monkeypatch.setattr(logging_utils.logger, "remove", lambda *args: None)
    monkeypatch.setattr(logging_utils.logger, "configure", lambda **kwargs: None)
    monkeypatch.setattr(logging_utils.logger, "add", lambda sink, **kwargs: calls.append(kwargs) or 1)
    return calls


def test_same_profile_and_level_configures_once(sink_calls: list[dict[str, Any]]) -> None:
    logging_utils.configure_logging(profile="default", level="info")
    logging_utils.configure_logging(profile="default", level="INFO")

    assert [call["level"] for call in sink_calls] == ["INFO"]


def test_changed_level_reconfigures(sink_calls: list[dict[str, Any]]) -> None:
    logging_utils.configure_logging(profile="default", level="INFO")
    logging_utils.configure_logging(profile="default", level="DEBUG")

    assert [call["level"] for call in sink_calls] == ["INFO", "DEBUG"]


def test_changed_profile_reconfigures(sink_calls: list[dict[str, Any]]) -> None:
    logging_utils.configure_logging(profile="default", level="INFO")
    logging_utils.configure_logging(profile="chat", level="INFO")

    assert [call["format"] for call in sink_calls] == [
        logging_utils._PROFILE_FORMATS["default"],
        logging_utils._PROFILE_FORMATS["chat"],
    ]
