# (c) Copyright IBM Corp. 2025

import asyncio
import os
from typing import Generator

import pytest

CLIENT_OUTPUT = (
    '"C:/Riot Games/League of Legends/LeagueClientUx.exe" '
    '"--riotclient-auth-token=yUSiPoTxRt0FQXDnlFbC_g" "--riotclient-app-port=53751" '
    '"--app-name=LeagueClient" "--remoting-auth-token=abc-123" '
    '"--app-port=56789" "--install-directory=C:/Riot Games/League of Legends/" '
    '"--app-pid=4321" "--log-dir=LeagueClient Logs"\n'
)


@pytest.fixture(autouse=True)
def clean_environment() -> Generator[None, None, None]:
    """Keeps LCU_AUTH_* variables of the host and of other tests out of each test."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("LCU_AUTH_")}
    for k in saved:
        os.environ.pop(k)
    yield
    for k in [k for k in os.environ if k.startswith("LCU_AUTH_")]:
        os.environ.pop(k)
    os.environ.update(saved)


@pytest.fixture
def loop() -> Generator[asyncio.AbstractEventLoop, None, None]:
    """New event loop for every test"""
    event_loop = asyncio.new_event_loop()
    yield event_loop
    event_loop.close()
