# (c) Copyright IBM Corp. 2025

"""
Options for locating the League Client.

Settings are applied in increasing order of priority:
defaults < YAML file (LCU_AUTH_CONFIG_PATH) < environment variables < keyword arguments
"""

import os
from typing import Any, Dict, Optional

from lcu_auth.errors import CertificateLoadError
from lcu_auth.fsm import DEFAULT_POLL_INTERVAL
from lcu_auth.log import logger
from lcu_auth.platforms import DEFAULT_PROCESS_NAME
from lcu_auth.util.config import (
    get_authentication_config_from_yaml,
    is_truthy,
    parse_poll_interval,
)


class AuthenticationOptions(object):
    """
    await_connection - do not return before a League Client has been found
    poll_interval - seconds between two lookups, only used with await_connection
    certificate - Riot Games' root certificate (contents of the .pem), wins over the bundled one
    unsafe - do not attach the bundled certificate; None (unset) behaves as True
    process_name - name of the client process, without extension
    """

    def __init__(self, **kwds: Any) -> None:
        self.await_connection = False
        self.poll_interval = DEFAULT_POLL_INTERVAL
        self.certificate: Optional[str] = None
        self.unsafe: Optional[bool] = None
        self.process_name = DEFAULT_PROCESS_NAME

        self.set_from_yaml(get_authentication_config_from_yaml())
        self.set_from_env()

        unknown = set(kwds) - set(self.__dict__)
        if unknown:
            raise TypeError(f"Unknown authentication options: {', '.join(sorted(unknown))}")

        if "poll_interval" in kwds:
            interval = parse_poll_interval(kwds["poll_interval"])
            if interval is None:
                raise ValueError(
                    f"poll_interval must be a positive number of seconds, got {kwds['poll_interval']!r}"
                )
            kwds["poll_interval"] = interval

        if "await_connection" in kwds:
            kwds["await_connection"] = is_truthy(kwds["await_connection"])

        # None keeps unsafe unset
        if kwds.get("unsafe") is not None:
            kwds["unsafe"] = is_truthy(kwds["unsafe"])

        self.__dict__.update(kwds)

    def set_from_yaml(self, data: Dict[str, Any]) -> None:
        if "await_connection" in data:
            self.await_connection = is_truthy(data["await_connection"])

        if "poll_interval" in data:
            self.set_poll_interval(data["poll_interval"], "configuration file")

        if "unsafe" in data:
            self.unsafe = is_truthy(data["unsafe"])

        if data.get("process_name"):
            self.process_name = str(data["process_name"])

        if data.get("certificate_path"):
            self.certificate = read_certificate(data["certificate_path"])

    def set_from_env(self) -> None:
        if "LCU_AUTH_AWAIT_CONNECTION" in os.environ:
            self.await_connection = is_truthy(os.environ["LCU_AUTH_AWAIT_CONNECTION"])

        if "LCU_AUTH_POLL_INTERVAL" in os.environ:
            self.set_poll_interval(
                os.environ["LCU_AUTH_POLL_INTERVAL"], "LCU_AUTH_POLL_INTERVAL"
            )

        if "LCU_AUTH_UNSAFE" in os.environ:
            self.unsafe = is_truthy(os.environ["LCU_AUTH_UNSAFE"])

        if os.environ.get("LCU_AUTH_PROCESS_NAME"):
            self.process_name = os.environ["LCU_AUTH_PROCESS_NAME"]

        if os.environ.get("LCU_AUTH_CERTIFICATE_PATH"):
            self.certificate = read_certificate(os.environ["LCU_AUTH_CERTIFICATE_PATH"])

    def set_poll_interval(self, value: Any, source: str) -> None:
        interval = parse_poll_interval(value)
        if interval is None:
            logger.warning(
                f"Invalid poll interval from {source}: {value!r}. Using {self.poll_interval}s"
            )
            return
        self.poll_interval = interval


def read_certificate(path: str) -> str:
    """
    Reads a PEM file.

    @param path: path to the certificate
    @return: the certificate contents
    @raise CertificateLoadError: if the file cannot be read
    """
    try:
        with open(path, "r", encoding="utf-8") as pem:
            return pem.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise CertificateLoadError(path) from exc
