"""Convert detected affiliate links to their canonical tagged form."""

from collections.abc import Iterable

from ..config.AfflinkConfig import AfflinkConfig
from ..network.NetworkOptions import NetworkOptions
from ..network.NetworkRegistry import NetworkRegistry, default_registry
from .ConversionResult import ConversionResult
from .LinkOccurrence import LinkOccurrence


class LinkConverter:
    def __init__(self, config: AfflinkConfig, networks: NetworkRegistry | None = None):
        self.config = config
        self.networks = networks if networks is not None else default_registry()

    def convert(self, occurrence: LinkOccurrence) -> ConversionResult | None:
        """None when the occurrence has no network, or its network is unknown or disabled."""
        network = self.networks.get(occurrence.network_id)
        if network is None or not self.config.is_network_enabled(network.network_id):
            return None

        settings = self.config.network(network.network_id)

        converted = network.convert(
            occurrence.url,
            NetworkOptions(tag=settings.tag or None, clean_params=settings.clean_params),
        )
        return ConversionResult(
            original=occurrence.url,
            converted=converted,
            network=occurrence.network_id,
            tag=settings.tag or None,
        )

    def convert_all(self, occurrences: Iterable[LinkOccurrence]) -> list[ConversionResult]:
        return [result for result in map(self.convert, occurrences) if result is not None]
