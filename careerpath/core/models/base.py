"""Base Pydantic schema shared by careerpath models."""

from pydantic import BaseModel, ConfigDict


class CareerBaseModel(BaseModel):
    """Base Pydantic model for all schemas with common configuration."""

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Use enum values instead of enum members
        use_enum_values=True,
        str_strip_whitespace=True,
    )


class FrozenModel(CareerBaseModel):
    """Immutable value record. Updates go through ``model_copy``/re-validation."""

    model_config = ConfigDict(frozen=True)
