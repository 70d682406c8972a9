# (c) Copyright IBM Corp. 2025

"""
Locates a running League Client and retrieves the credentials of its LCU API.

    from lcu_auth import authenticate

    credentials = await authenticate(await_connection=True)
"""

from lcu_auth.authentication import authenticate, authenticate_sync
from lcu_auth.credentials import Credentials
from lcu_auth.errors import (
    CertificateLoadError,
    ClientNotFoundError,
    InvalidPlatformError,
    LCUAuthError,
)
from lcu_auth.options import AuthenticationOptions
from lcu_auth.platforms import Platform
from lcu_auth.version import VERSION

__version__ = VERSION

__all__ = [
    "AuthenticationOptions",
    "CertificateLoadError",
    "ClientNotFoundError",
    "Credentials",
    "InvalidPlatformError",
    "LCUAuthError",
    "Platform",
    "authenticate",
    "authenticate_sync",
]
