# (c) Copyright IBM Corp. 2025

import ssl
from typing import Any

import requests
import urllib3
from requests.adapters import HTTPAdapter

from lcu_auth.credentials import Credentials
from lcu_auth.log import logger


class CertificateAdapter(HTTPAdapter):
    """Verifies the LCU API against a single PEM certificate held in memory."""

    def __init__(self, certificate: str, **kwds: Any) -> None:
        self.ssl_context = ssl.create_default_context(cadata=certificate)
        # The API is only reachable on the loopback address, the certificate pins it
        self.ssl_context.check_hostname = False
        super().__init__(**kwds)

    def init_poolmanager(self, *args: Any, **kwds: Any) -> None:
        kwds["ssl_context"] = self.ssl_context
        kwds["assert_hostname"] = False
        super().init_poolmanager(*args, **kwds)


def create_session(credentials: Credentials) -> requests.Session:
    """
    Prepares a requests Session for the LCU API described by credentials.
    No request is sent.

    Requests are verified against credentials.certificate when present and
    are not verified at all otherwise.  The API root is stored as base_url.

    @param credentials: Credentials, as returned by authenticate()
    @return: requests.Session
    """
    session = requests.Session()
    session.auth = credentials.auth
    session.headers["Accept"] = "application/json"
    session.base_url = credentials.base_url

    if credentials.certificate:
        session.mount(credentials.base_url, CertificateAdapter(credentials.certificate))
    else:
        logger.debug("No certificate given, LCU API requests will not be verified")
        session.verify = False
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    return session
