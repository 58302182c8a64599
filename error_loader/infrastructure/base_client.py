"""Base class for async HTTP clients."""

import logging

import httpx

from ..application.exceptions import NetworkError


class BaseClient:
    """A base client that holds an async client and a timeout."""

    def __init__(self, client: httpx.AsyncClient, timeout: float):
        """
        Initializes the base client.

        Args:
            client: An instance of httpx.AsyncClient.
            timeout: Connect/read timeout in seconds for each request.
        """

        self.client = client
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    def _network_error(self, action: str, error: httpx.HTTPError) -> NetworkError:
        """Builds the NetworkError raised when a request cannot complete."""
        self.logger.error(f"{action} failed: {type(error).__name__}: {error}")
        return NetworkError(f"{action} failed: {error}")
