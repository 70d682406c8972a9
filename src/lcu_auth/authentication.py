# (c) Copyright IBM Corp. 2025

"""
Locates a running League Client and retrieves the credentials of the LCU API
from the command line of the LeagueClientUx process.
"""

import asyncio
import os
import re
import subprocess
from dataclasses import replace
from typing import Any, Optional

from lcu_auth.credentials import Credentials
from lcu_auth.errors import ClientNotFoundError
from lcu_auth.fsm import TheMachine
from lcu_auth.log import logger
from lcu_auth.options import AuthenticationOptions, read_certificate
from lcu_auth.platforms import get_platform, get_process_list_command

regexp_port = re.compile(r"--app-port=([0-9]+)")
regexp_password = re.compile(r"--remoting-auth-token=([\w-]+)")
regexp_pid = re.compile(r"--app-pid=([0-9]+)")

# Riot Games' self-signed root certificate, shipped inside the package
DEFAULT_CERTIFICATE_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "riotgames.pem"
)


async def run_command(command: str) -> str:
    """
    Runs a shell command and returns its standard output.

    The child process never outlives the call: if the awaiting task is
    cancelled, it is killed and reaped before the cancellation propagates.

    @raise subprocess.CalledProcessError: if the command exits with a non-zero status
    @raise OSError: if the command cannot be started
    """
    proc = await asyncio.create_subprocess_shell(
        command,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.DEVNULL,
    )
    try:
        stdout, _ = await proc.communicate()
    finally:
        if proc.returncode is None:
            try:
                proc.kill()
            except ProcessLookupError:
                pass
            await proc.wait()

    if proc.returncode != 0:
        raise subprocess.CalledProcessError(proc.returncode, command, output=stdout)

    return stdout.decode("utf-8", errors="replace")


def extract_credentials(output: str, certificate: Optional[str] = None) -> Credentials:
    """
    Extracts port, password and pid from a process listing.

    @param output: the output of the process listing command
    @param certificate: certificate to attach to the credentials, if any
    @raise ClientNotFoundError: unless all three values are present
    """
    port = regexp_port.search(output)
    password = regexp_password.search(output)
    pid = regexp_pid.search(output)

    if port is None or password is None or pid is None:
        raise ClientNotFoundError()

    return Credentials(
        port=int(port.group(1)),
        password=password.group(1),
        pid=int(pid.group(1)),
        certificate=certificate,
    )


def resolve_certificate(
    certificate: Optional[str] = None,
    unsafe: Optional[bool] = None,
    path: Optional[str] = None,
) -> Optional[str]:
    """
    Picks the certificate attached to the credentials.

    A given certificate always wins.  Otherwise unsafe, which is the default
    when unset, means no certificate and safe means the bundled one.

    @raise CertificateLoadError: if the bundled certificate cannot be read
    """
    if certificate:
        return certificate

    if unsafe or unsafe is None:
        return None

    return read_certificate(path or DEFAULT_CERTIFICATE_PATH)


async def try_authenticate(
    command: str,
    certificate: Optional[str] = None,
    unsafe: Optional[bool] = None,
) -> Credentials:
    """
    Makes a single attempt at locating the League Client.

    A failing command and unparsable output are both reported as
    ClientNotFoundError.  A CertificateLoadError is not.
    """
    try:
        output = await run_command(command)
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug(f"Process listing failed: {exc}")
        raise ClientNotFoundError() from exc

    credentials = extract_credentials(output)
    return replace(credentials, certificate=resolve_certificate(certificate, unsafe))


async def authenticate(
    options: Optional[AuthenticationOptions] = None, **kwds: Any
) -> Credentials:
    """
    Locates a League Client and retrieves the credentials for the LCU API
    from the found process.

    Without await_connection a single attempt is made and ClientNotFoundError
    is raised if no client is running.  With await_connection the coroutine
    only returns once a client has been found; cancel the task (or wrap it in
    asyncio.wait_for) to give up.

    @param options: AuthenticationOptions, built from kwds when not given
    @raise InvalidPlatformError: if not running on windows/linux/darwin
    @raise ClientNotFoundError: if no client is running, immediate mode only
    @raise CertificateLoadError: if the bundled certificate is required but cannot be read
    """
    if options is None:
        options = AuthenticationOptions(**kwds)
    elif kwds:
        raise TypeError("Pass either an AuthenticationOptions or keyword arguments, not both")

    # Checked once, before any attempt is made
    platform = get_platform()
    command = get_process_list_command(platform, options.process_name)
    certificate = options.certificate
    unsafe = options.unsafe

    logger.debug(f"Platform: {platform.name}, process listing command: {command}")

    machine = TheMachine(
        lambda: try_authenticate(command, certificate, unsafe),
        await_connection=options.await_connection,
        poll_interval=options.poll_interval,
    )
    credentials = await machine.run()

    logger.debug(
        f"Found League Client. PID: {credentials.pid}, port: {credentials.port}"
    )
    return credentials


def authenticate_sync(
    options: Optional[AuthenticationOptions] = None,
    timeout: Optional[float] = None,
    **kwds: Any,
) -> Credentials:
    """
    Blocking variant of authenticate() for code without an event loop.

    @param timeout: seconds to wait at most, None waits forever
    @raise asyncio.TimeoutError: when the timeout elapses first
    """
    return asyncio.run(asyncio.wait_for(authenticate(options, **kwds), timeout))
