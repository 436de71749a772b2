"""Affiliate network classifier plugins."""

from ._AbstractNetwork import _AbstractNetwork
from .AmazonNetwork import AmazonNetwork
from .NetworkOptions import NetworkOptions
from .NetworkRegistry import NetworkRegistry, default_registry

__all__ = [
    "AmazonNetwork",
    "NetworkOptions",
    "NetworkRegistry",
    "_AbstractNetwork",
    "default_registry",
]
