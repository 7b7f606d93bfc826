"""Operation groups: namespaces of related remote operations.

Each group is reached through a no-argument accessor on LinodeClient
(``client.test()``, ``client.avail()``, ...) and sends its operations as
``<namespace>.<method>`` through the owning client's RequestDispatcher.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from linode_sdk._internal.dispatch import RequestDispatcher


class OperationGroup:
    """Base class for operation groups."""

    namespace: str = ""

    def __init__(self, dispatcher: "RequestDispatcher") -> None:
        self._dispatcher = dispatcher

    @property
    def api_key(self) -> str:
        """The API key of the owning client."""
        return self._dispatcher.api_key

    def _call(self, method: str, params: Mapping[str, Any] | None = None) -> Any:
        """Send ``<namespace>.<method>`` with ``params`` through the dispatcher."""
        return self._dispatcher.send(f"{self.namespace}.{method}", params or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(namespace={self.namespace!r})"


class TestGroup(OperationGroup):
    """Diagnostic operations (``test.*``)."""

    namespace = "test"

    def echo(self, **params: Any) -> Any:
        """Echo ``params`` back as the response DATA."""
        return self._call("echo", params)


class AvailGroup(OperationGroup):
    """Availability listings (``avail.*``)."""

    namespace = "avail"

    def datacenters(self) -> Any:
        """List available datacenters."""
        return self._call("datacenters")

    def distributions(self, **params: Any) -> Any:
        """List distributions, optionally filtered by ``DistributionID``."""
        return self._call("distributions", params)

    def kernels(self, **params: Any) -> Any:
        """List kernels, optionally filtered by ``isXen`` / ``isKVM``."""
        return self._call("kernels", params)

    def linodeplans(self, **params: Any) -> Any:
        """List plans, optionally filtered by ``PlanID``."""
        return self._call("linodeplans", params)

    def stackscripts(self, **params: Any) -> Any:
        return self._call("stackscripts", params)

    def nodebalancers(self) -> Any:
        return self._call("nodebalancers")


class UserGroup(OperationGroup):
    """Account operations (``user.*``)."""

    namespace = "user"

    def getapikey(self, **params: Any) -> Any:
        """Exchange ``username`` / ``password`` for an API key."""
        return self._call("getapikey", params)


class ApiGroup(OperationGroup):
    """API introspection (``api.*``)."""

    namespace = "api"

    def spec(self) -> Any:
        """Return the machine-readable description of every API method."""
        return self._call("spec")
