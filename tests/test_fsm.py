# (c) Copyright IBM Corp. 2025

import asyncio
import logging
from typing import TYPE_CHECKING, Generator, List

import pytest
from mock import AsyncMock

from lcu_auth.credentials import Credentials
from lcu_auth.errors import CertificateLoadError, ClientNotFoundError
from lcu_auth.fsm import DEFAULT_POLL_INTERVAL, TheMachine

if TYPE_CHECKING:
    from pytest import LogCaptureFixture
    from pytest_mock import MockerFixture

CREDENTIALS = Credentials(port=56789, password="abc-123", pid=4321)


class TestTheMachine:
    @pytest.fixture(autouse=True)
    def _resource(
        self, caplog: "LogCaptureFixture"
    ) -> Generator[None, None, None]:
        caplog.set_level(logging.DEBUG, logger="lcu_auth")
        self.states: List[str] = []
        yield
        caplog.clear()

    def track(self, machine: TheMachine) -> None:
        machine.fsm.onchangestate = lambda e: self.states.append(e.dst)

    def test_defaults(self) -> None:
        machine = TheMachine(AsyncMock())
        assert machine.current == "idle"
        assert machine.await_connection is False
        assert machine.poll_interval == DEFAULT_POLL_INTERVAL == 2.5
        assert machine.attempts == 0

    def test_success(self, loop: asyncio.AbstractEventLoop) -> None:
        attempt = AsyncMock(return_value=CREDENTIALS)
        machine = TheMachine(attempt)
        self.track(machine)

        assert loop.run_until_complete(machine.run()) is CREDENTIALS
        assert self.states == ["attempting", "succeeded"]
        assert machine.attempts == 1

    def test_immediate_failure(self, loop: asyncio.AbstractEventLoop) -> None:
        attempt = AsyncMock(side_effect=ClientNotFoundError())
        machine = TheMachine(attempt, poll_interval=0.01)
        self.track(machine)

        with pytest.raises(ClientNotFoundError):
            loop.run_until_complete(machine.run())
        assert self.states == ["attempting", "failed"]
        assert attempt.await_count == 1

    def test_await_mode_loops(
        self, loop: asyncio.AbstractEventLoop, caplog: "LogCaptureFixture"
    ) -> None:
        attempt = AsyncMock(
            side_effect=[ClientNotFoundError(), ClientNotFoundError(), CREDENTIALS]
        )
        machine = TheMachine(attempt, await_connection=True, poll_interval=0.01)
        self.track(machine)

        assert loop.run_until_complete(machine.run()) is CREDENTIALS
        assert self.states == [
            "attempting",
            "waiting",
            "attempting",
            "waiting",
            "attempting",
            "succeeded",
        ]
        assert machine.attempts == 3

        info = [r for r in caplog.records if r.levelno == logging.INFO]
        assert len(info) == 1
        assert "Will retry periodically" in info[0].getMessage()
        assert "League Client not found. Retrying in 0.01s" in caplog.messages

    def test_await_mode_sleeps_poll_interval(
        self, loop: asyncio.AbstractEventLoop, mocker: "MockerFixture"
    ) -> None:
        sleep = mocker.patch("lcu_auth.fsm.asyncio.sleep", AsyncMock())
        attempt = AsyncMock(side_effect=[ClientNotFoundError(), CREDENTIALS])
        machine = TheMachine(attempt, await_connection=True, poll_interval=7)

        loop.run_until_complete(machine.run())
        sleep.assert_awaited_once_with(7)

    def test_fatal_error_aborts_await_mode(self, loop: asyncio.AbstractEventLoop) -> None:
        attempt = AsyncMock(
            side_effect=[ClientNotFoundError(), CertificateLoadError("riotgames.pem")]
        )
        machine = TheMachine(attempt, await_connection=True, poll_interval=0.01)
        self.track(machine)

        with pytest.raises(CertificateLoadError):
            loop.run_until_complete(machine.run())
        assert self.states[-1] == "aborted"
        assert attempt.await_count == 2

    def test_cancel_while_waiting(self, loop: asyncio.AbstractEventLoop) -> None:
        attempt = AsyncMock(side_effect=ClientNotFoundError())
        machine = TheMachine(attempt, await_connection=True, poll_interval=10)

        async def scenario() -> None:
            task = asyncio.ensure_future(machine.run())
            await asyncio.sleep(0.05)
            assert machine.current == "waiting"
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        loop.run_until_complete(scenario())
        assert machine.current == "aborted"
        assert attempt.await_count == 1

    def test_cancel_while_attempting(self, loop: asyncio.AbstractEventLoop) -> None:
        async def hang() -> Credentials:
            await asyncio.sleep(10)
            return CREDENTIALS

        machine = TheMachine(hang, await_connection=True)

        async def scenario() -> None:
            task = asyncio.ensure_future(machine.run())
            await asyncio.sleep(0.05)
            assert machine.current == "attempting"
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        loop.run_until_complete(scenario())
        assert machine.current == "aborted"
