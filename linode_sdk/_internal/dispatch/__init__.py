"""Request dispatch engine for the Linode SDK.

WARNING: This is an internal module used by LinodeClient.
Do not call directly from user code.
"""

from linode_sdk._internal.dispatch.client import (
    API_ACTION_PARAM,
    API_KEY_PARAM,
    RESERVED_PARAMS,
    RequestDispatcher,
)
from linode_sdk._internal.dispatch.redaction import REDACTED_VALUE, redact_query

__all__ = [
    "RequestDispatcher",
    "API_KEY_PARAM",
    "API_ACTION_PARAM",
    "RESERVED_PARAMS",
    "REDACTED_VALUE",
    "redact_query",
]
