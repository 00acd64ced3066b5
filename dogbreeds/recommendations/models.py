from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

_CRITERIA_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def _require_number(value: Any) -> Any:
    # pydantic would otherwise coerce "10" and True into floats
    if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
        raise PydanticCustomError("number_type", "Input should be a number")
    return value


class CompatibilityCriteria(BaseModel):
    model_config = _CRITERIA_CONFIG

    children: StrictBool | None = None
    other_dogs: StrictBool | None = None
    cats: StrictBool | None = None


class WeightRangeCriteria(BaseModel):
    model_config = _CRITERIA_CONFIG

    min: float
    max: float
    unit: Literal["lbs", "kgs"] = "lbs"

    @field_validator("min", "max", mode="before")
    @classmethod
    def bounds_are_numbers(cls, value: Any) -> Any:
        return _require_number(value)


class RecommendationCriteria(BaseModel):
    """
    Sparse recommendation preferences.

    Every field is optional and ``None`` means "no constraint"; a supplied
    ``False`` compatibility flag is a real constraint.
    """

    model_config = _CRITERIA_CONFIG

    size: str | None = Field(default=None, description="small / medium / large")
    energy_level: str | None = Field(default=None, description="low / medium / high")
    trainability: str | None = Field(default=None, description="low / moderate / high")
    shedding: str | None = Field(default=None, description="minimal / moderate / heavy")
    grooming_needs: str | None = Field(default=None, description="low / moderate / high")
    origin: str | None = None
    compatibility: CompatibilityCriteria | None = None
    weight_range: WeightRangeCriteria | None = None
    min_lifespan: float | None = Field(default=None, description="Minimum average lifespan in years")

    @field_validator("min_lifespan", mode="before")
    @classmethod
    def min_lifespan_is_number(cls, value: Any) -> Any:
        return _require_number(value)
