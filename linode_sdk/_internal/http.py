"""HTTP transport for the Linode API.

The API is a single endpoint driven by query parameters, so the transport
only ever issues one GET per call and hands back the raw body. Status codes
are returned for error reporting but never interpreted here.
"""

from collections.abc import Mapping
from typing import Any

import httpx

from linode_sdk._version import __version__

USER_AGENT = f"linode-sdk/{__version__}"


def get_body(url: str, query: Mapping[str, Any], *, timeout: float) -> tuple[int, str]:
    """Send one GET request to ``url`` with ``query`` as parameters.

    A fresh httpx.Client is opened and closed around the request; no
    connection is kept between calls.

    Args:
        url: Full endpoint URL.
        query: Query parameters, sent as-is.
        timeout: Transport timeout in seconds.

    Returns:
        The HTTP status code and the decoded response body.

    Raises:
        httpx.TransportError: If the request cannot be completed.
    """
    with httpx.Client(timeout=timeout, headers={"User-Agent": USER_AGENT}) as client:
        response = client.get(url, params=dict(query))
        return response.status_code, response.text
