"""
Collects server details to attach to an outbound error report.

Each lookup degrades to a sentinel instead of failing: server details are
descriptive metadata and must never stop an error from being reported.
"""

import logging
import os
import socket
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Optional

from ..application.domain import SettingsProvider

from .api_models import Load, Memory, ServerDetails, Stats

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"
ENVIRONMENT_SETTING = "honeybadger.environment"
_HOSTNAME_ENV_VARS = ("HOSTNAME", "COMPUTERNAME")
_TIME_FORMAT = "%Y-%m-%dT%H:%MZ"
_MEMINFO_PATH = Path("/proc/meminfo")


def reverse_dns() -> str:
    """Resolves the local machine's name through DNS."""
    return socket.gethostbyaddr(socket.gethostname())[0]


def hostname(
    settings: SettingsProvider,
    resolver: Callable[[], str] = reverse_dns,
) -> str:
    """
    Finds the hostname of the system reporting the error.

    Tries HOSTNAME, then COMPUTERNAME, then reverse DNS.

    Returns:
        The hostname, or "unknown" if every source failed.
    """
    for name in _HOSTNAME_ENV_VARS:
        host = settings.env(name)
        if host:
            return host

    try:
        return resolver()
    except OSError as e:
        logger.warning(
            f"Unable to find hostname: {e}",
            extra={"event": "hostname_lookup_failed", "error": str(e)},
        )
        return UNKNOWN


def project_root() -> str:
    """Returns the canonical directory the process was started in."""
    try:
        return str(Path.cwd().resolve())
    except OSError as e:
        logger.warning(f"Can't get runtime root path: {e}")
        return UNKNOWN


def runtime_identity() -> str:
    """Describes the running process as ``<pid>@<host>``."""
    return f"{os.getpid()}@{socket.gethostname()}"


def parse_pid(identity: str) -> Optional[int]:
    """
    Extracts the process id from a ``<pid>@<host>`` identity.

    Returns:
        The pid, or None if the part before '@' is empty, missing or not
        an integer.
    """
    index = identity.find("@")
    if index < 1:
        return None

    try:
        return int(identity[:index])
    except ValueError:
        return None


def pid() -> Optional[int]:
    return parse_pid(runtime_identity())


def time(now: Optional[datetime] = None) -> str:
    """Returns the current UTC time to the minute, e.g. 2024-01-31T09:05Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime(_TIME_FORMAT)


def _read_meminfo(path: Path) -> Dict[str, float]:
    """Reads /proc/meminfo into a mapping of field name to megabytes."""
    values = {}
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            name, _, rest = line.partition(":")
            fields = rest.split()
            if fields and fields[0].isdigit():
                values[name.strip()] = int(fields[0]) / 1024
    return values


def memory(path: Path = _MEMINFO_PATH) -> Optional[Memory]:
    try:
        info = _read_meminfo(path)
    except OSError:
        return None

    if "MemTotal" not in info:
        return None

    free = info.get("MemFree", 0.0)
    buffers = info.get("Buffers", 0.0)
    cached = info.get("Cached", 0.0)
    return Memory(
        total=info["MemTotal"],
        free=free,
        buffers=buffers,
        cached=cached,
        free_total=free + buffers + cached,
    )


def load() -> Optional[Load]:
    try:
        one, five, fifteen = os.getloadavg()
    except (AttributeError, OSError):
        # Not available on Windows.
        return None
    return Load(one=one, five=five, fifteen=fifteen)


def collect_stats(meminfo_path: Path = _MEMINFO_PATH) -> Stats:
    return Stats(mem=memory(meminfo_path), load=load())


class ServerContextCollector:
    """Builds a ServerDetails snapshot of the running process."""

    def __init__(
        self,
        settings: SettingsProvider,
        environment_name: Optional[str] = None,
    ):
        self.settings = settings
        self.environment_name = environment_name

    def collect(self) -> ServerDetails:
        environment_name = self.environment_name or self.settings.setting(
            ENVIRONMENT_SETTING
        )
        return ServerDetails(
            environment_name=environment_name,
            hostname=hostname(self.settings),
            project_root=project_root(),
            pid=pid(),
            time=time(),
            stats=collect_stats(),
        )
