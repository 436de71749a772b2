"""Registry mapping network ids to plugin instances."""

from collections.abc import Iterable

from ._AbstractNetwork import _AbstractNetwork
from .AmazonNetwork import AmazonNetwork


class NetworkRegistry:
    """Ordered collection of network plugins keyed by ``network_id``."""

    def __init__(self, networks: Iterable[_AbstractNetwork] = ()):
        self._networks: dict[str, _AbstractNetwork] = {}
        for network in networks:
            self.register(network)

    def register(self, network: _AbstractNetwork) -> None:
        if network.network_id in self._networks:
            raise ValueError(f"Network already registered: {network.network_id}")
        self._networks[network.network_id] = network

    def get(self, network_id: str | None) -> _AbstractNetwork | None:
        if network_id is None:
            return None
        return self._networks.get(network_id)

    def detect(self, url: str) -> str | None:
        """Return the id of the first network whose detect() accepts the URL."""
        for network_id, network in self._networks.items():
            if network.detect(url):
                return network_id
        return None


def default_registry() -> NetworkRegistry:
    """Registry holding the built-in networks."""
    return NetworkRegistry([AmazonNetwork()])
