"""Options passed to a network's convert()."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NetworkOptions:
    tag: str | None = None
    clean_params: bool = True
