from __future__ import annotations

import pytest
from conftest import output_of, scripted_terminal

from dbrowser.callbacks import BrowserCallbacks
from dbrowser.credentials import KeyPair
from dbrowser.errors import CredentialError
from dbrowser.types import STATE_EXIT, Action


async def _no_invoke(address: str) -> None:
    raise AssertionError(f"unexpected invoke of {address}")


def _callbacks(lines: str = "", credentials=None) -> BrowserCallbacks:
    return BrowserCallbacks(scripted_terminal(lines), _no_invoke, credentials)


@pytest.mark.asyncio
async def test_show_action_prints_one_based_positions() -> None:
    callbacks = _callbacks()

    await callbacks.switch(1)
    await callbacks.show_action(Action(desc="Transfer"))
    await callbacks.show_action(Action(desc="Balance"))

    assert output_of(callbacks._terminal) == "1) Transfer\n2) Balance\n"
    assert [action.desc for action in callbacks.state.actions] == ["Transfer", "Balance"]


@pytest.mark.asyncio
async def test_switch_restarts_numbering() -> None:
    callbacks = _callbacks()
    await callbacks.show_action(Action(desc="old"))

    await callbacks.switch(3)
    await callbacks.show_action(Action(desc="new"))

    assert output_of(callbacks._terminal).splitlines() == ["1) old", "1) new"]


@pytest.mark.asyncio
async def test_switch_to_exit_does_not_clear() -> None:
    callbacks = _callbacks()
    await callbacks.show_action(Action(desc="kept"))

    await callbacks.switch(STATE_EXIT)
    await callbacks.switch_completed()

    assert callbacks.state.context_id == STATE_EXIT
    assert len(callbacks.state.actions) == 1


@pytest.mark.asyncio
async def test_log_prints_without_state_change() -> None:
    callbacks = _callbacks()

    await callbacks.log("hello")

    assert output_of(callbacks._terminal) == "hello\n"
    assert callbacks.state.actions == []


@pytest.mark.asyncio
async def test_input_skips_blank_lines() -> None:
    callbacks = _callbacks("\n   \n 42 \n")

    value = await callbacks.input("Amount")

    assert value == "42"
    assert output_of(callbacks._terminal) == "Amount > " * 3


@pytest.mark.asyncio
async def test_send_enqueues_outbound() -> None:
    callbacks = _callbacks()

    await callbacks.send("m1")
    await callbacks.send("m2")

    assert callbacks.state.take_outbound() == ["m1", "m2"]


@pytest.mark.asyncio
async def test_get_signing_box_without_provider_fails() -> None:
    with pytest.raises(CredentialError):
        await _callbacks().get_signing_box()


@pytest.mark.asyncio
async def test_get_signing_box_wraps_provider_failures() -> None:
    class _Broken:
        async def acquire(self):
            raise OSError("device unplugged")

    with pytest.raises(CredentialError, match="device unplugged"):
        await _callbacks(credentials=_Broken()).get_signing_box()


@pytest.mark.asyncio
async def test_get_signing_box_returns_provider_handle() -> None:
    keys = KeyPair(public="1" * 64, secret="2" * 64)

    class _Provider:
        async def acquire(self):
            return keys

    assert await _callbacks(credentials=_Provider()).get_signing_box() is keys


@pytest.mark.asyncio
async def test_invoke_debot_announces_and_delegates() -> None:
    invoked: list[str] = []

    async def invoke(address: str) -> None:
        invoked.append(address)

    terminal = scripted_terminal()
    callbacks = BrowserCallbacks(terminal, invoke)

    await callbacks.invoke_debot("0:" + "f" * 64, Action(desc="run", name="run"))

    assert invoked == ["0:" + "f" * 64]
    assert output_of(terminal) == f"Invoking debot 0:{'f' * 64}\n"
