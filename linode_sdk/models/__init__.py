"""Public models for the Linode SDK."""

from linode_sdk.models.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, LinodeConfig
from linode_sdk.models.envelope import ResponseEnvelope
from linode_sdk.models.response import ResponseObject, wrap

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT",
    "LinodeConfig",
    "ResponseEnvelope",
    "ResponseObject",
    "wrap",
]
