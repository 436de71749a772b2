"""Slug assignment engine.

Derives one unique, stable slug per distinct URL across a whole corpus.
Assignment is a single ordered pass: the first occurrence of a URL decides
its display text, and collisions are resolved in encounter order, so the
same occurrence list always yields the same table.
"""

from collections.abc import Iterable

from ...utils.clock_token import clock_token
from ...utils.logger import get_logger
from ...utils.normalize_slug import normalize_slug
from ...utils.url_parts import first_path_segment, host_label, is_http_url
from ..config.AfflinkConfig import AfflinkConfig
from ..network.NetworkOptions import NetworkOptions
from ..network.NetworkRegistry import NetworkRegistry, default_registry
from .AffiliateLink import AffiliateLink
from .LinkOccurrence import LinkOccurrence

logger = get_logger("link.slugs")


class SlugAssigner:
    def __init__(self, config: AfflinkConfig, networks: NetworkRegistry | None = None):
        self.config = config
        self.networks = networks if networks is not None else default_registry()

    def assign(self, occurrences: Iterable[LinkOccurrence]) -> dict[str, AffiliateLink]:
        """Map every distinct HTTP(S) URL to an AffiliateLink with a unique slug.

        The returned dict iterates in first-encounter order. Non-HTTP(S)
        occurrences are ignored; repeated URLs keep their first record.
        """
        assigned: dict[str, AffiliateLink] = {}
        used_slugs: set[str] = set()

        for occurrence in occurrences:
            url = occurrence.url
            if not is_http_url(url) or url in assigned:
                continue

            slug = self.resolve_slug(self.base_slug(occurrence), url, used_slugs)
            used_slugs.add(slug)

            canonical_url, converted = self.canonicalize(occurrence)
            assigned[url] = AffiliateLink(
                slug=slug,
                display_name=occurrence.display_text or url,
                canonical_url=canonical_url,
                is_affiliate=occurrence.is_affiliate,
                network_id=occurrence.network_id,
                is_converted=converted,
            )

        logger.debug("Assigned %d slugs", len(assigned))
        return assigned

    def base_slug(self, occurrence: LinkOccurrence) -> str:
        """Preferred slug before collision resolution."""
        network = self.networks.get(occurrence.network_id)
        if network is not None:
            return network.generate_slug(occurrence.url, occurrence.display_text)

        text = occurrence.display_text
        if text and text != occurrence.url:
            slug = normalize_slug(text)
            if slug:
                return slug

        label = host_label(occurrence.url)
        if label:
            slug = normalize_slug(f"{label}-{first_path_segment(occurrence.url)}")
            if slug:
                return slug

        return f"link-{clock_token()}"

    @staticmethod
    def resolve_slug(base: str, url: str, used_slugs: set[str]) -> str:
        """First free slug among ``base``, ``base-<host label>``, ``base-2``, ``base-3``, ...

        Does not reserve the result; callers add it to ``used_slugs``.
        """
        if base not in used_slugs:
            return base

        label = host_label(url)
        if label:
            candidate = f"{base}-{label}"
            if candidate not in used_slugs:
                return candidate

        counter = 2
        while f"{base}-{counter}" in used_slugs:
            counter += 1
        return f"{base}-{counter}"

    def canonicalize(self, occurrence: LinkOccurrence) -> tuple[str, bool]:
        """Return (canonical URL, converted flag).

        Conversion happens only for a known network that is enabled in config;
        detection alone leaves the URL untouched.
        """
        network = self.networks.get(occurrence.network_id)
        if network is None or not self.config.is_network_enabled(network.network_id):
            return occurrence.url, False

        settings = self.config.network(network.network_id)
        options = NetworkOptions(tag=settings.tag or None, clean_params=settings.clean_params)
        return network.convert(occurrence.url, options), True
