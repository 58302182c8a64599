"""HTTP implementation of the FaultSource port."""

from typing import Optional

import httpx

from ..application.domain import (
    FaultDetailLocation,
    FaultIdentifier,
    FaultSource,
    SettingsProvider,
    coerce_fault_id,
)

from .base_client import BaseClient
from .config_provider import resolve_read_api_key


class HttpFaultFetcher(BaseClient, FaultSource):
    """Fetches a fault's JSON from the Honeybadger read API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: SettingsProvider,
        base_url: str,
        timeout: float,
    ):
        """Initializes the fetcher adapter."""
        super().__init__(client, timeout)
        self.settings = settings
        self.base_url = base_url.rstrip("/")

    def check_credentials(self) -> str:
        """Returns the read API key, raising ConfigurationError if unset."""
        return resolve_read_api_key(self.settings)

    def _details_url(
        self,
        fault_id: FaultIdentifier,
        location: Optional[FaultDetailLocation],
    ) -> str:
        if location is not None:
            return location.url
        return f"{self.base_url}/{fault_id}/"

    async def fetch(
        self,
        fault_id: FaultIdentifier,
        location: Optional[FaultDetailLocation] = None,
    ) -> str:
        """
        Fetches the raw JSON describing a fault.

        The body is returned as-is whatever the status code; a failed
        lookup's error document fails later, when it is reconciled.

        Args:
            fault_id: The UUID of the reported error.
            location: The API location found by the locator. Without it
                      the fault is requested by id from the service URL.

        Returns:
            The response body text.

        Raises:
            ConfigurationError: If no read API key is configured.
            InvalidArgumentError: If the id is missing or malformed.
            NetworkError: If the GET request cannot complete.
        """

        api_key = self.check_credentials()
        fault_id = coerce_fault_id(fault_id)
        url = self._details_url(fault_id, location)

        # The token goes in the query string, so only the bare URL is logged.
        self.logger.debug(f"Querying for error details: {url}")
        try:
            response = await self.client.get(
                url,
                params={"auth_token": api_key},
                headers={"Accept": "application/json"},
                timeout=self.timeout,
                follow_redirects=True,
            )
        except httpx.TransportError as e:
            raise self._network_error("Fault details request", e) from e

        if response.is_error:
            self.logger.warning(
                f"Fault details request for {fault_id} returned "
                f"HTTP {response.status_code}."
            )

        return response.text
