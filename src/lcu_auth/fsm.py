# (c) Copyright IBM Corp. 2025

import asyncio
from typing import Any, Awaitable, Callable

from fysom import Fysom

from lcu_auth.credentials import Credentials
from lcu_auth.errors import ClientNotFoundError
from lcu_auth.log import logger

# Seconds between two attempts when awaiting a connection
DEFAULT_POLL_INTERVAL = 2.5


class TheMachine:
    """
    Drives the attempts of a single authentication call.

    idle -> attempting -> succeeded
                       -> failed                (immediate mode)
                       -> waiting -> attempting (await mode)

    Any state may move to aborted when the call is cancelled or an attempt
    raises something other than ClientNotFoundError.
    """

    def __init__(
        self,
        attempt: Callable[[], Awaitable[Credentials]],
        await_connection: bool = False,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        self.attempt = attempt
        self.await_connection = await_connection
        self.poll_interval = poll_interval
        self.attempts = 0
        self.warned_periodic = False

        self.fsm = Fysom(
            {
                "initial": "idle",
                "events": [
                    ("attempt", ["idle", "waiting"], "attempting"),
                    ("succeed", "attempting", "succeeded"),
                    ("fail", "attempting", "failed"),
                    ("wait", "attempting", "waiting"),
                    ("abort", "*", "aborted"),
                ],
                "callbacks": {
                    "onchangestate": self.print_state_change,
                    "onattempt": self.on_attempt,
                    "onwaiting": self.on_waiting,
                    "onaborted": self.on_aborted,
                },
            }
        )

    @staticmethod
    def print_state_change(e: Any) -> None:
        logger.debug(f"FSM event: {e.event}, src: {e.src}, dst: {e.dst}")

    @property
    def current(self) -> str:
        return self.fsm.current

    def on_attempt(self, _: Any) -> None:
        self.attempts += 1
        logger.debug(f"Looking for a League Client (attempt {self.attempts})")

    def on_waiting(self, e: Any) -> None:
        if self.warned_periodic is False:
            logger.info(
                "League Client couldn't be found. Will retry periodically..."
            )
            self.warned_periodic = True
        else:
            logger.debug(f"League Client not found. Retrying in {e.interval}s")

    def on_aborted(self, e: Any) -> None:
        logger.debug(f"Authentication aborted while {e.src}")

    async def run(self) -> Credentials:
        """
        Runs attempts until one succeeds.  In immediate mode the first
        ClientNotFoundError is raised, in await mode it schedules another
        attempt after poll_interval seconds.

        Cancelling the task awaiting run() stops the loop, wherever it is.
        """
        try:
            while True:
                self.fsm.attempt()
                try:
                    credentials = await self.attempt()
                except ClientNotFoundError:
                    if not self.await_connection:
                        self.fsm.fail()
                        raise
                    self.fsm.wait(interval=self.poll_interval)
                    await asyncio.sleep(self.poll_interval)
                else:
                    self.fsm.succeed()
                    return credentials
        except (asyncio.CancelledError, Exception):
            if self.fsm.current != "failed":
                self.fsm.abort()
            raise
