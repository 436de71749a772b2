from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ConversionResult:
    original: str
    converted: str
    network: str
    tag: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
