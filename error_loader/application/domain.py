"""
This module defines the core domain models and ports for the error loader.

These classes represent the technology-agnostic pieces the retrieval
workflow operates on: where a fault lives in the Honeybadger API, and the
capabilities (settings, location lookup, payload fetch, decoding) the
workflow needs from the outside world.
"""

import dataclasses
import uuid
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Tuple, TypeVar, Union
from urllib.parse import urlsplit

from .exceptions import InvalidArgumentError, MalformedRedirectError

FaultIdentifier = Union[uuid.UUID, str]
ReportT = TypeVar("ReportT")

_DETAILS_PATH = "/v1/projects/{}/faults/{}/notices/{}/"
_MIN_PATH_SEGMENTS = 6


def coerce_fault_id(fault_id: Optional[FaultIdentifier]) -> uuid.UUID:
    """Normalizes a caller-supplied fault identifier to a UUID.

    Raises:
        InvalidArgumentError: If the id is missing or not a valid UUID.
    """
    if fault_id is None:
        raise InvalidArgumentError("Null id not accepted")
    if isinstance(fault_id, uuid.UUID):
        return fault_id
    try:
        return uuid.UUID(str(fault_id))
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid fault id: {fault_id!r}") from e


# --- Domain Models ---

@dataclasses.dataclass(frozen=True)
class FaultDetailLocation:
    """
    The address of one notice in the Honeybadger read API.

    Built from the redirect returned by the public notice lookup, which
    carries the project, fault and notice ids but points at the web UI
    rather than the API.
    """

    scheme: str
    host: str
    port: Optional[int]
    project_id: str
    fault_id: str
    notice_id: str

    @property
    def url(self) -> str:
        port = f":{self.port}" if self.port and self.port > 0 else ""
        path = _DETAILS_PATH.format(
            self.project_id, self.fault_id, self.notice_id
        )
        return f"{self.scheme}://{self.host}{port}{path}"

    @classmethod
    def from_redirect(
        cls, redirect_uri: Optional[str]
    ) -> Optional["FaultDetailLocation"]:
        """
        Derives the API location from a redirect target.

        The lookup redirects to ``/projects/{project}/faults/{fault}/{notice}``,
        so splitting on ``/`` puts the project id at index 2, the fault id
        at index 4 and the notice id at index 5. When the path carries a
        ``faults`` segment somewhere else (a versioned or prefixed path),
        the ids are read around it instead: project before it, fault after
        it, notice last.

        Args:
            redirect_uri: The value of the Location header, or None.

        Returns:
            The derived location, or None when there was no redirect.

        Raises:
            MalformedRedirectError: If the path has fewer than six segments
                                    or no notice id follows the fault id.
        """
        if redirect_uri is None:
            return None

        parts = urlsplit(redirect_uri)
        segments = parts.path.split("/")
        if len(segments) < _MIN_PATH_SEGMENTS:
            raise MalformedRedirectError(
                f"Redirect path {parts.path!r} has {len(segments)} segments, "
                f"expected at least {_MIN_PATH_SEGMENTS}"
            )

        project_id, fault_id, notice_id = _extract_ids(segments)
        if not notice_id:
            raise MalformedRedirectError(
                f"Redirect path {parts.path!r} has no notice id"
            )

        try:
            port = parts.port
        except ValueError as e:
            raise MalformedRedirectError(
                f"Redirect {redirect_uri!r} has an invalid port"
            ) from e

        return cls(
            scheme=parts.scheme,
            host=parts.hostname or "",
            port=port,
            project_id=project_id,
            fault_id=fault_id,
            notice_id=notice_id,
        )


def _extract_ids(segments: List[str]) -> Tuple[str, str, str]:
    """Picks the project, fault and notice ids out of path segments."""
    anchor = segments.index("faults", 2) if "faults" in segments[2:] else -1
    if anchor in (-1, 3) or anchor + 1 >= len(segments):
        return segments[2], segments[4], segments[5]

    trailing = [s for s in segments[anchor + 2:] if s]
    notice_id = trailing[-1] if trailing else ""
    return segments[anchor - 1], segments[anchor + 1], notice_id


# --- Ports (Interfaces) ---

class SettingsProvider(ABC):
    """A port for ambient configuration: environment and settings files."""

    @abstractmethod
    def env(self, name: str) -> Optional[str]:
        """Returns an environment variable, or None if it is not set."""
        pass

    @abstractmethod
    def setting(self, name: str, default: Any = None) -> Any:
        """Returns a dotted configuration setting, or the default."""
        pass


class FaultLocator(ABC):
    """A port for discovering where a fault lives in the read API."""

    @abstractmethod
    async def resolve(
        self, fault_id: FaultIdentifier
    ) -> Optional[FaultDetailLocation]:
        """Resolves a fault id, returning None if the fault is unknown."""
        pass


class FaultSource(ABC):
    """A port for fetching the raw JSON of a fault."""

    @abstractmethod
    async def fetch(
        self,
        fault_id: FaultIdentifier,
        location: Optional[FaultDetailLocation] = None,
    ) -> str:
        """Fetches the JSON document describing a fault."""
        pass

    @abstractmethod
    def check_credentials(self):
        """
        Verifies that a read credential is available.
        Raises ConfigurationError otherwise.
        """
        pass


class ReportDecoder(ABC, Generic[ReportT]):
    """A port for turning raw fault JSON into a report object."""

    @abstractmethod
    def reconcile(self, raw: str) -> ReportT:
        """Reshapes and deserializes a raw fault document."""
        pass
