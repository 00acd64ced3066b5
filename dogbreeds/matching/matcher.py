from __future__ import annotations

from typing import Sequence

from ..catalog.models import Breed
from ..validation import validate_non_empty_string, validate_string
from .normalizer import contains_either, normalize


def find_breed(
    breeds: Sequence[Breed],
    query: str,
    fuzzy: bool = True,
    lang: str = "en",
    label: str = "Breed name",
) -> Breed | None:
    """
    Return the first breed in catalog order whose name matches ``query``.

    With ``fuzzy`` a match is bidirectional containment of the normalized
    names, otherwise normalized equality. For ``lang`` other than English the
    breed's alternate name in that language is used when it has one.
    """
    validate_non_empty_string(query, label)
    validate_string(lang, "Language")
    target = normalize(query)

    for breed in breeds:
        name = normalize(breed.display_name(lang))
        if fuzzy:
            if contains_either(name, target):
                return breed
        elif name == target:
            return breed
    return None
