"""Abstract base class for affiliate network plugins."""

from abc import ABC, abstractmethod

from .NetworkOptions import NetworkOptions


class _AbstractNetwork(ABC):
    """Classification, canonicalization and slug hinting for one network.

    Implementations must not raise from any method for malformed URLs.
    """

    network_id: str

    @abstractmethod
    def detect(self, url: str) -> bool:
        """Return True if the URL belongs to this network."""

    @abstractmethod
    def convert(self, url: str, options: NetworkOptions) -> str:
        """Return the canonical, tag-bearing form of the URL."""

    @abstractmethod
    def extract_product_id(self, url: str) -> str | None:
        """Return a stable per-product identifier, or None when the URL has none."""

    @abstractmethod
    def generate_slug(self, url: str, display_text: str) -> str:
        """Return a base slug for the URL."""
