"""
Structural patches applied to fault JSON before deserialization.

The Honeybadger API is not symmetric: a notice is submitted with its web
server environment under ``request.cgi_data`` but is returned with it under
a top-level ``web_environment`` key. Patching the generic JSON tree lets one
report model serve both directions.
"""

import copy
from typing import Any, Dict

from .exceptions import MalformedResponseError

WEB_ENVIRONMENT_KEY = "web_environment"
REQUEST_KEY = "request"
CGI_DATA_KEY = "cgi_data"


def _require_object(tree: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = tree.get(key)
    if not isinstance(value, dict):
        found = "missing" if value is None else type(value).__name__
        raise MalformedResponseError(
            f"Expected '{key}' to be an object in fault JSON, got {found}"
        )
    return value


def attach_cgi_data(tree: Dict[str, Any]) -> Dict[str, Any]:
    """
    Copies ``web_environment`` into ``request.cgi_data``.

    The tree is modified in place and returned. The original
    ``web_environment`` key is left alone, and an existing ``cgi_data`` is
    overwritten, so applying the patch twice gives the same result.

    Args:
        tree: The decoded JSON object of a retrieved fault.

    Returns:
        The same tree, patched.

    Raises:
        MalformedResponseError: If ``web_environment`` or ``request`` is
                                missing or is not an object.
    """
    if not isinstance(tree, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(tree).__name__}"
        )

    web_environment = _require_object(tree, WEB_ENVIRONMENT_KEY)
    request = _require_object(tree, REQUEST_KEY)
    request[CGI_DATA_KEY] = copy.deepcopy(web_environment)
    return tree
