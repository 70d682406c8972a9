# (c) Copyright IBM Corp. 2025

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

# The LCU API always authenticates this user
LCU_USERNAME = "riot"


@dataclass(frozen=True)
class Credentials:
    port: int  # the port the LCU API is listening on
    password: str = field(repr=False)  # the remoting auth token of the LCU API
    pid: int  # the process id of the LeagueClientUx process
    # Riot Games' root certificate (contents of the .pem), None means unsafe
    certificate: Optional[str] = field(default=None, repr=False)

    @property
    def auth(self) -> Tuple[str, str]:
        return (LCU_USERNAME, self.password)

    @property
    def base_url(self) -> str:
        return f"https://127.0.0.1:{self.port}"

    def to_dict(self) -> Dict[str, Any]:
        kvs = dict()
        kvs["port"] = self.port
        kvs["password"] = self.password
        kvs["pid"] = self.pid
        kvs["certificate"] = self.certificate
        return kvs
