"""Store configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ._json._Data import _Data as _JsonData
from ._mongo._Data import _Data as _MongoData
from ._mongomock._Data import _Data as _MongomockData
from ._rest._Data import _Data as _RestData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "rest": _RestData,
    "json": _JsonData,
    "mongo": _MongoData,
    "mongomock": _MongomockData,
}


class StoreConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Store backend type")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"store config must be a dict, got {type(values).__name__}")
        store_type = values.get("type")
        if not store_type:
            raise ValueError("store.type is required")
        config_data_class = _BACKEND_REGISTRY.get(store_type)
        if not config_data_class:
            raise ValueError(f"Unknown store type: {store_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data", {})
        if isinstance(data, BaseModel):
            data = data.model_dump()
        if not isinstance(data, dict):
            raise ValueError("store.data must be a dict")
        # Allow empty dict - backend config classes can have defaults
        return {**values, "data": config_data_class(**data)}

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
