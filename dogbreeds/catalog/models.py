from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class WeightRange(BaseModel):
    model_config = _RECORD_CONFIG

    min: float
    max: float


class WeightInfo(BaseModel):
    model_config = _RECORD_CONFIG

    lbs: WeightRange | None = Field(default=None, validation_alias=AliasChoices("lbs", "pounds"))
    kgs: WeightRange | None = Field(default=None, validation_alias=AliasChoices("kgs", "kilograms"))

    def for_unit(self, unit: str) -> WeightRange | None:
        """Return the range stored under a canonical unit key (``lbs``/``kgs``)."""
        return self.kgs if unit == "kgs" else self.lbs


class Compatibility(BaseModel):
    model_config = _RECORD_CONFIG

    children: bool | None = None
    other_dogs: bool | None = None
    cats: bool | None = None


class Breed(BaseModel):
    model_config = _RECORD_CONFIG

    name: str
    alternate_names: dict[str, str] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("names", "alternateNames", "alternate_names"),
    )
    origin: str | None = None
    size: str | None = None
    energy_level: str | None = None
    trainability: str | None = None
    shedding: str | None = None
    grooming_needs: str | None = None
    temperament: tuple[str, ...] = ()
    lifespan: str | int | None = None
    compatibility: Compatibility | None = None
    weight: WeightInfo | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Breed name must be a non-empty string")
        return value

    def display_name(self, lang: str = "en") -> str:
        """Name used for matching in ``lang``; English falls back to ``name``."""
        if lang != "en" and self.alternate_names.get(lang):
            return self.alternate_names[lang]
        return self.name


class CatalogMetadata(BaseModel):
    breed_count: int
    origins: list[str]
    sizes: list[str]
    energy_levels: list[str]
    trainability_levels: list[str]
    shedding_levels: list[str]
    grooming_needs_levels: list[str]
    temperaments: list[str]
