from typing import Callable, Protocol

from .models import UpgradeClusterSpec


class ClusterControl(Protocol):
    """Control surface of a test cluster driven through an upgrade chain."""

    @property
    def name(self) -> str:
        ...

    def http_socket_uris(self) -> list[str]:
        """Current `host:port` HTTP endpoints of every node."""
        ...

    async def start(self) -> None:
        """Provision every node on the old version."""
        ...

    async def full_restart(self) -> None:
        """Stop every node, then start them again on the same version."""
        ...

    async def go_to_next_version(self) -> None:
        """Roll each node, one at a time, to the next configured version."""
        ...

    async def stop(self) -> None:
        ...


ClusterFactory = Callable[[UpgradeClusterSpec], ClusterControl]
