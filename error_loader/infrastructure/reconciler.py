"""
Reconciles fault JSON returned by the read API with the ReportedError model.
"""

import json
import logging

from pydantic import ValidationError

from ..application.domain import ReportDecoder
from ..application.exceptions import MalformedResponseError
from ..application.patches import attach_cgi_data

from .api_models import ReportedError


class FaultSchemaReconciler(ReportDecoder[ReportedError]):
    """Parses, patches and validates a fault document."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def reconcile(self, raw: str) -> ReportedError:
        """
        Turns raw fault JSON into a ReportedError.

        Args:
            raw: The response body returned by the read API.

        Returns:
            A new ReportedError with ``request.cgi_data`` filled in from the
            document's ``web_environment``.

        Raises:
            MalformedResponseError: If the body is not JSON, lacks the
                                    expected objects, or does not fit the
                                    report model.
        """

        try:
            tree = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise MalformedResponseError(
                f"Fault details are not valid JSON: {e}"
            ) from e

        attach_cgi_data(tree)

        try:
            return ReportedError.model_validate(tree)
        except ValidationError as e:
            self.logger.error(
                f"Fault details failed validation with {e.error_count()} errors."
            )
            raise MalformedResponseError(
                f"Fault details do not match the report model: {e}"
            ) from e
