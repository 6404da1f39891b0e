"""Base model for domain entities"""

from pydantic import BaseModel as PydanticBaseModel, ConfigDict


class BaseModel(PydanticBaseModel):
    """Common configuration for all domain entities"""

    model_config = ConfigDict(validate_assignment=True)


class FrozenModel(BaseModel):
    """Base for entities that are immutable once created"""

    model_config = ConfigDict(frozen=True)
