# (c) Copyright IBM Corp. 2025

"""
This module provides "python -m lcu_auth" functionality: it locates a running
League Client and prints the credentials of its LCU API as JSON.

    python -m lcu_auth --wait --timeout 60
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from lcu_auth.authentication import authenticate_sync
from lcu_auth.errors import (
    CertificateLoadError,
    ClientNotFoundError,
    InvalidPlatformError,
)
from lcu_auth.log import logger
from lcu_auth.options import AuthenticationOptions, read_certificate
from lcu_auth.util import to_json
from lcu_auth.version import VERSION

EXIT_NOT_FOUND = 1
EXIT_FATAL = 2


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="python -m lcu_auth",
        description="Print the LCU API credentials of a running League Client",
    )
    parser.add_argument("--version", action="version", version=f"lcu_auth {VERSION}")
    parser.add_argument("--wait", action="store_true", help="Wait until a League Client is running")
    parser.add_argument("--poll-interval", type=float, default=None, help="Seconds between two lookups (default: 2.5)")
    parser.add_argument("--timeout", type=float, default=None, help="Give up waiting after this many seconds")
    parser.add_argument("--safe", action="store_true", help="Attach the bundled Riot Games certificate")
    parser.add_argument("--certificate", type=str, default=None, help="Path to a certificate to attach instead")
    parser.add_argument("--process-name", type=str, default=None, help="Client process name (default: LeagueClientUx)")
    parser.add_argument("--debug", action="store_true", help="Log debug output to stderr")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    if args.debug:
        logger.setLevel(logging.DEBUG)

    kwds = {}
    if args.wait:
        kwds["await_connection"] = True
    if args.poll_interval is not None:
        kwds["poll_interval"] = args.poll_interval
    if args.safe:
        kwds["unsafe"] = False
    if args.process_name:
        kwds["process_name"] = args.process_name

    try:
        if args.certificate:
            kwds["certificate"] = read_certificate(args.certificate)
        options = AuthenticationOptions(**kwds)
        credentials = authenticate_sync(options, timeout=args.timeout)
    except (ValueError, InvalidPlatformError, CertificateLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FATAL
    except ClientNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except asyncio.TimeoutError:
        print(f"error: no League Client found within {args.timeout}s", file=sys.stderr)
        return EXIT_NOT_FOUND

    print(to_json(credentials))
    return 0


if __name__ == "__main__":
    sys.exit(main())
