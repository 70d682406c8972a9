# (c) Copyright IBM Corp. 2025

import sys


class LCUAuthError(Exception):
    """Base class for every error raised while locating a League Client."""

    pass


class InvalidPlatformError(LCUAuthError):
    """
    Indicates that the application does not run on an environment that the
    League Client supports.  The Client runs on windows, linux or darwin.
    """

    def __init__(self, platform: str = sys.platform) -> None:
        super().__init__(
            f"process runs on platform client does not support: {platform}"
        )
        self.platform = platform


class ClientNotFoundError(LCUAuthError):
    """
    Indicates that the League Client could not be found.

    Raised both when no client process is running and when the process listing
    output could not be parsed.  Callers are not meant to tell the two apart.
    """

    def __init__(self, message: str = "league client process could not be located") -> None:
        super().__init__(message)


class CertificateLoadError(LCUAuthError):
    """Raised when the bundled Riot Games root certificate cannot be read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"could not load certificate from {path}")
        self.path = path
