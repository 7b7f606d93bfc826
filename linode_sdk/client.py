"""User-facing client for the Linode API.

Example usage:
    from linode_sdk import LinodeClient

    client = LinodeClient(api_key="your-api-key")

    # Operations are grouped by namespace
    result = client.test().echo(foo="bar")
    result.foo  # "bar"

    for dc in client.avail().datacenters():
        print(dc.datacenterid, dc.location)

    # Or send any operation directly
    client.send_request("avail.linodeplans", {"PlanID": 1})
"""

import os
import threading
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import ValidationError

from linode_sdk._internal.dispatch import RequestDispatcher
from linode_sdk.exceptions import LinodeConfigError
from linode_sdk.groups import ApiGroup, AvailGroup, OperationGroup, TestGroup, UserGroup
from linode_sdk.models.config import DEFAULT_TIMEOUT, LinodeConfig

GroupT = TypeVar("GroupT", bound=OperationGroup)


class LinodeClient:
    """Top-level client for the Linode API.

    Holds the immutable configuration and hands out operation groups. Each
    group is created on first access and the same instance is returned for
    the lifetime of the client. Creation is guarded by a lock, so a client
    shared across threads still builds each group exactly once.

    Use `LinodeClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_url: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: The API key sent with every request. Required.
            api_url: The URL of the API endpoint. Defaults to the public API.
            timeout: Transport timeout in seconds.
            debug: Enable debug logging to stderr.

        Raises:
            LinodeConfigError: If no API key is given or the settings are invalid.
        """
        if not api_key:
            raise LinodeConfigError("An API key is required")

        settings: dict[str, Any] = {"api_key": api_key, "timeout": timeout, "debug": debug}
        if api_url is not None:
            settings["api_url"] = api_url
        try:
            self._config = LinodeConfig(**settings)
        except ValidationError as e:
            raise LinodeConfigError(f"Invalid client configuration: {e}") from e

        self._dispatcher = RequestDispatcher(
            api_key=self._config.api_key,
            api_url=self._config.api_url,
            timeout=self._config.timeout,
            debug=self._config.debug,
        )
        self._groups: dict[str, OperationGroup] = {}
        self._groups_lock = threading.Lock()

    @classmethod
    def from_env(cls) -> "LinodeClient":
        """Create a client from environment variables.

        Required environment variables:
            LINODE_API_KEY: The API key.

        Optional environment variables:
            LINODE_API_URL: The API endpoint URL.
            LINODE_TIMEOUT_MS: Request timeout in milliseconds.
            LINODE_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured LinodeClient.

        Raises:
            LinodeConfigError: If LINODE_API_KEY is not set.
            ValueError: If LINODE_TIMEOUT_MS is not a valid integer.
        """
        api_key = os.environ.get("LINODE_API_KEY")
        if not api_key:
            raise LinodeConfigError("LINODE_API_KEY is not set")

        api_url = os.environ.get("LINODE_API_URL") or None
        debug = os.environ.get("LINODE_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("LINODE_TIMEOUT_MS", str(int(DEFAULT_TIMEOUT * 1000))))

        return cls(api_key, api_url, timeout=timeout_ms / 1000, debug=debug)

    @property
    def config(self) -> LinodeConfig:
        """The immutable configuration this client was created with."""
        return self._config

    @property
    def api_key(self) -> str:
        """The API key provided at creation time."""
        return self._config.api_key

    @property
    def api_url(self) -> str:
        """The API URL provided at creation time, or the public API URL."""
        return self._config.api_url

    def send_request(self, action: str, params: Mapping[str, Any]) -> Any:
        """Send operation ``action`` with ``params``.

        See `RequestDispatcher.send` for the returned value and errors.
        """
        return self._dispatcher.send(action, params)

    def _group(self, group_cls: type[GroupT]) -> GroupT:
        """Return the cached group instance, creating it on first access."""
        group = self._groups.get(group_cls.namespace)
        if group is None:
            with self._groups_lock:
                group = self._groups.get(group_cls.namespace)
                if group is None:
                    group = group_cls(self._dispatcher)
                    self._groups[group_cls.namespace] = group
        return group  # type: ignore[return-value]

    # =========================================================================
    # Operation Groups
    # =========================================================================

    def test(self) -> TestGroup:
        """Diagnostic operations (``test.*``)."""
        return self._group(TestGroup)

    def avail(self) -> AvailGroup:
        """Availability listings (``avail.*``)."""
        return self._group(AvailGroup)

    def user(self) -> UserGroup:
        """Account operations (``user.*``)."""
        return self._group(UserGroup)

    def api(self) -> ApiGroup:
        """API introspection (``api.*``)."""
        return self._group(ApiGroup)
