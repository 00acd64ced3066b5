from __future__ import annotations


class DogBreedsError(Exception):
    """Base class for every error raised by the package."""


class NonEmptyStringError(DogBreedsError, TypeError):
    """A required string argument was missing, not a string, or blank."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"{field_name} cannot be empty. Please provide a non-empty string.")
        self.field_name = field_name


class BreedValidationError(DogBreedsError, ValueError):
    """A value of the right type was rejected by a domain rule."""


class BreedNotFoundError(DogBreedsError, LookupError):
    def __init__(self, query: str) -> None:
        super().__init__(f'Breed "{query}" not found')
        self.query = query


class CatalogError(DogBreedsError, RuntimeError):
    """Catalog data could not be turned into breed records."""
