"""Request dispatcher for the Linode RPC API."""

import json
import sys
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from linode_sdk._internal.dispatch.redaction import redact_query
from linode_sdk._internal.http import get_body
from linode_sdk.exceptions import (
    LinodeAPIError,
    LinodeResponseError,
    LinodeValidationError,
)
from linode_sdk.models.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from linode_sdk.models.envelope import ResponseEnvelope
from linode_sdk.models.response import wrap

API_KEY_PARAM = "api_key"
API_ACTION_PARAM = "api_action"
RESERVED_PARAMS: frozenset[str] = frozenset({API_KEY_PARAM, API_ACTION_PARAM})


class RequestDispatcher:
    """Sends named operations to the API and maps the response DATA.

    Each call to `send` makes exactly one GET request. The API key and the
    operation name are always taken from the dispatcher, never from the
    caller's parameters. A non-empty ERRORARRAY raises LinodeAPIError.
    Transport errors from httpx propagate unchanged.
    """

    def __init__(
        self,
        *,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            api_key: The API key sent with every request.
            api_url: The URL of the API endpoint.
            timeout: Transport timeout in seconds.
            debug: Enable debug logging to stderr.
        """
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = timeout
        self._debug = debug

    @property
    def api_key(self) -> str:
        """The API key sent with every request."""
        return self._api_key

    @property
    def api_url(self) -> str:
        """The endpoint every request is sent to."""
        return self._api_url

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[linode-sdk] {message}", file=sys.stderr)

    def build_query(self, action: str, params: Mapping[str, Any]) -> dict[str, Any]:
        """Build the outgoing query for ``action``.

        The caller's mapping is copied, any reserved key is dropped
        (case-insensitively), and then ``api_key`` and ``api_action`` are set
        from the dispatcher. Reserved keys therefore always carry our values.
        """
        query = {
            key: value
            for key, value in params.items()
            if str(key).lower() not in RESERVED_PARAMS
        }
        query[API_KEY_PARAM] = self._api_key
        query[API_ACTION_PARAM] = action
        return query

    def send(self, action: str, params: Mapping[str, Any]) -> Any:
        """Call operation ``action`` with ``params`` and return the mapped DATA.

        Args:
            action: Operation name (e.g., 'test.echo', 'avail.datacenters').
            params: Operation parameters. Required, may be empty.

        Returns:
            The response DATA mapped through `wrap`: a ResponseObject for an
            object, a list for an array, or the scalar itself.

        Raises:
            LinodeValidationError: If ``action`` is empty or ``params`` is not
                a mapping.
            LinodeResponseError: If the body is not a valid JSON envelope.
            LinodeAPIError: If the envelope's ERRORARRAY is non-empty.
            httpx.TransportError: If the request itself fails.
        """
        if not isinstance(action, str) or not action:
            raise LinodeValidationError("action must be a non-empty string")
        if not isinstance(params, Mapping):
            raise LinodeValidationError(
                f"params must be a mapping, got {type(params).__name__}"
            )

        query = self.build_query(action, params)
        self._log_debug(f"Sending {action} to {self._api_url}: {redact_query(query)}")

        status_code, body = self._get(query)
        envelope = self._parse(body, status_code=status_code)

        if envelope.failed:
            raise LinodeAPIError.from_errors(
                envelope.errors,
                action=envelope.action or action,
                status_code=status_code,
            )

        self._log_debug(f"Received {envelope.action or action} (status {status_code})")
        return wrap(envelope.data)

    def _get(self, query: dict[str, Any]) -> tuple[int, str]:
        """Perform the GET request and return the status code and raw body."""
        return get_body(self._api_url, query, timeout=self._timeout)

    def _parse(self, body: str, *, status_code: int | None = None) -> ResponseEnvelope:
        """Parse and validate the JSON envelope."""
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            raise LinodeResponseError(f"Response is not valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise LinodeResponseError(
                f"Response must be a JSON object, got {type(payload).__name__}"
            )

        try:
            return ResponseEnvelope.model_validate(payload)
        except ValidationError as e:
            raise LinodeResponseError(
                f"Malformed response envelope (status {status_code}): {e}"
            ) from e
