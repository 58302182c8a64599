"""HTTP implementation of the FaultLocator port."""

from typing import Optional

import httpx

from ..application.domain import (
    FaultDetailLocation,
    FaultIdentifier,
    FaultLocator,
    coerce_fault_id,
)

from .base_client import BaseClient


class HttpFaultLocator(BaseClient, FaultLocator):
    """
    Finds a fault's read API location by probing the public notice lookup.

    The lookup answers with a redirect to the fault's page in the web UI.
    The redirect is never followed: its Location header already carries
    the project, fault and notice ids needed to build the API URL.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        lookup_base_url: str,
        timeout: float,
    ):
        """Initializes the locator adapter."""
        super().__init__(client, timeout)
        self.lookup_base_url = lookup_base_url

    async def _probe_location(self, lookup_uri: str) -> Optional[str]:
        """Issues a HEAD request and returns the absolute redirect target."""
        try:
            async with self.client.stream(
                "HEAD",
                lookup_uri,
                follow_redirects=False,
                timeout=self.timeout,
            ) as response:
                location = response.headers.get("Location")
                if location is None:
                    return None
                return str(response.url.join(location))
        except httpx.TransportError as e:
            raise self._network_error("Fault location lookup", e) from e

    async def resolve(
        self, fault_id: FaultIdentifier
    ) -> Optional[FaultDetailLocation]:
        """
        Resolves a fault id to its location in the read API.

        Args:
            fault_id: The UUID of the reported error.

        Returns:
            The fault's API location, or None if the lookup did not
            redirect (the fault does not exist or is not indexed yet).

        Raises:
            InvalidArgumentError: If the id is missing or malformed.
            NetworkError: If the HEAD request cannot complete.
            MalformedRedirectError: If the redirect path is too short.
        """

        fault_id = coerce_fault_id(fault_id)
        lookup_uri = f"{self.lookup_base_url}{fault_id}"

        self.logger.debug(f"Querying for error location: {lookup_uri}")
        redirect_uri = await self._probe_location(lookup_uri)

        if redirect_uri is None:
            self.logger.info(f"Lookup for {fault_id} returned no location.")
            return None

        return FaultDetailLocation.from_redirect(redirect_uri)
