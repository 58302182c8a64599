"""
The core application service for loading reported errors.

ErrorLoaderService composes the three steps of the retrieval workflow:
resolve the fault's API location, fetch its JSON, and reconcile that JSON
into a report object. It holds no state of its own beyond its ports.
"""

import logging
from typing import Generic, Optional

from .domain import (
    FaultIdentifier,
    FaultLocator,
    FaultSource,
    ReportDecoder,
    ReportT,
    coerce_fault_id,
)


class ErrorLoaderService(Generic[ReportT]):
    """Loads a fault's details into a readable object structure."""

    def __init__(
        self,
        locator: FaultLocator,
        source: FaultSource,
        decoder: ReportDecoder[ReportT],
    ):
        """Initializes the service with its ports."""
        self.logger = logging.getLogger(self.__class__.__name__)
        self.locator = locator
        self.source = source
        self.decoder = decoder

    async def find_error_details(
        self, fault_id: Optional[FaultIdentifier]
    ) -> Optional[ReportT]:
        """
        Finds and loads the details of a previously reported fault.

        The read credential is checked first so that a misconfiguration is
        reported before any network call is made.

        Args:
            fault_id: The UUID Honeybadger assigned to the reported error.

        Returns:
            The reconciled report, or None if the fault could not be found.

        Raises:
            InvalidArgumentError: If the id is missing or malformed.
            ConfigurationError: If no read API key is configured.
            NetworkError: If either HTTP call fails.
            MalformedResponseError: If the redirect or the JSON is malformed.
        """
        fault_id = coerce_fault_id(fault_id)
        self.source.check_credentials()

        location = await self.locator.resolve(fault_id)
        if location is None:
            self.logger.info(f"No fault found for id {fault_id}.")
            return None

        raw_json = await self.source.fetch(fault_id, location)
        report = self.decoder.reconcile(raw_json)

        self.logger.info(f"Loaded details for fault {fault_id}.")
        return report
