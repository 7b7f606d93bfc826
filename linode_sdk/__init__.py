"""Linode SDK for Python.

This SDK provides access to the Linode RPC API (``api_action`` style).

Public API:
    LinodeClient - Top-level client holding the API key and operation groups
    ResponseObject - Read-only, field-accessible view of response data

Internal (not for direct use):
    _internal.dispatch - Request dispatch engine
"""

from linode_sdk._version import __version__
from linode_sdk.client import LinodeClient
from linode_sdk.exceptions import (
    LinodeAPIError,
    LinodeConfigError,
    LinodeError,
    LinodeResponseError,
    LinodeValidationError,
)
from linode_sdk.models import ResponseObject, wrap

__all__ = [
    "__version__",
    "LinodeClient",
    "LinodeError",
    "LinodeAPIError",
    "LinodeConfigError",
    "LinodeResponseError",
    "LinodeValidationError",
    "ResponseObject",
    "wrap",
]
