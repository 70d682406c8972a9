# (c) Copyright IBM Corp. 2025

"""
Process listing commands for the platforms the League Client runs on.

Every supported platform maps to exactly one shell command that prints the
full command line of each process whose name matches the target client.
"""

import re
import sys
from enum import Enum
from typing import Dict, Optional

from lcu_auth.errors import InvalidPlatformError

DEFAULT_PROCESS_NAME = "LeagueClientUx"


class Platform(Enum):
    WINDOWS = "win32"
    LINUX = "linux"
    DARWIN = "darwin"


PROCESS_LIST_COMMANDS: Dict[Platform, str] = {
    Platform.WINDOWS: "WMIC PROCESS WHERE name='{name}.exe' GET CommandLine",
    Platform.LINUX: "ps x -o args | grep '{name}'",
    Platform.DARWIN: "ps x -o args | grep '{name}'",
}

# The name ends up inside a shell command
regexp_process_name = re.compile(r"[\w.-]+")


def get_platform(identity: Optional[str] = None) -> Platform:
    """
    Resolves a platform identity, as found in sys.platform, to a supported Platform.

    @param identity: the identity to resolve, defaults to sys.platform
    @return: Platform
    @raise InvalidPlatformError: if the League Client does not run on this platform
    """
    if identity is None:
        identity = sys.platform

    # Python < 3.3 reported "linux2" and "linux3"
    if identity.startswith("linux"):
        return Platform.LINUX

    try:
        return Platform(identity)
    except ValueError:
        raise InvalidPlatformError(identity) from None


def get_process_list_command(
    platform: Platform, process_name: str = DEFAULT_PROCESS_NAME
) -> str:
    """
    Returns the command listing every process named process_name together
    with its arguments.

    @param platform: the platform the command runs on
    @param process_name: executable name without extension, e.g. LeagueClientUx
    @return: the shell command
    """
    if not regexp_process_name.fullmatch(process_name):
        raise ValueError(f"Invalid process name: {process_name!r}")

    return PROCESS_LIST_COMMANDS[platform].format(name=process_name)
