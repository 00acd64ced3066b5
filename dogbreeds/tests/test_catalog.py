from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from dogbreeds.catalog import data_store
from dogbreeds.catalog.config import BUNDLED_CATALOG_PATH, CatalogConfig
from dogbreeds.catalog.data_store import build_catalog, clear_catalog_cache, get_catalog, load_catalog
from dogbreeds.catalog.lifespan import parse_lifespan_average
from dogbreeds.engine import BreedEngine
from dogbreeds.errors import CatalogError
from dogbreeds.tests.sample_catalog import make_engine, names


class TestBuildCatalog:
    def test_bare_names_become_records(self):
        breeds = build_catalog(["Beagle", {"name": "Boxer", "size": "large"}])
        assert names(breeds) == ["Beagle", "Boxer"]
        assert breeds[0].size is None
        assert breeds[0].temperament == ()
        assert breeds[1].size == "large"

    def test_returns_tuple(self):
        assert isinstance(build_catalog(["Beagle"]), tuple)

    def test_alias_keys(self):
        (breed,) = build_catalog([
            {
                "name": "Boxer",
                "alternateNames": {"de": "Deutscher Boxer"},
                "energyLevel": "high",
                "groomingNeeds": "low",
                "compatibility": {"otherDogs": True},
                "weight": {"pounds": {"min": 50, "max": 80}, "kilograms": {"min": 23, "max": 36}},
            }
        ])
        assert breed.alternate_names == {"de": "Deutscher Boxer"}
        assert breed.energy_level == "high"
        assert breed.grooming_needs == "low"
        assert breed.compatibility.other_dogs is True
        assert breed.weight.for_unit("lbs").max == 80
        assert breed.weight.for_unit("kgs").min == 23

    @pytest.mark.parametrize("raw", [{"name": "Beagle"}, "Beagle", None])
    def test_top_level_must_be_a_list(self, raw):
        with pytest.raises(CatalogError):
            build_catalog(raw)

    @pytest.mark.parametrize("entry", [42, {"name": "   "}, {"origin": "Nowhere"}, {"name": "X", "lifespan": []}])
    def test_invalid_entries(self, entry):
        with pytest.raises(CatalogError):
            build_catalog([entry])

    def test_records_are_frozen(self):
        (breed,) = build_catalog(["Beagle"])
        with pytest.raises(ValidationError):
            breed.name = "Harrier"


class TestLoadCatalog:
    def test_load_from_file(self, tmp_path: Path):
        path = tmp_path / "dogs.json"
        path.write_text(json.dumps(["Beagle", {"name": "Pug", "origin": "China"}]), encoding="utf-8")
        breeds = load_catalog(path)
        assert names(breeds) == ["Beagle", "Pug"]

    def test_get_catalog_caches_first_load(self, tmp_path: Path):
        first = tmp_path / "first.json"
        second = tmp_path / "second.json"
        first.write_text(json.dumps(["Beagle"]), encoding="utf-8")
        second.write_text(json.dumps(["Pug"]), encoding="utf-8")

        clear_catalog_cache()
        try:
            loaded = get_catalog(CatalogConfig(data_path=first))
            assert get_catalog(CatalogConfig(data_path=second)) is loaded
            assert names(loaded) == ["Beagle"]
        finally:
            clear_catalog_cache()
        assert data_store._catalog is None

    def test_bundled_catalog(self):
        engine = BreedEngine(load_catalog(BUNDLED_CATALOG_PATH))
        assert len(engine) > 20
        assert engine.get_breed("Labrador").name == "Labrador Retriever"
        assert [b.name for b in engine.search("daschund", 3)] == ["Dachshund"]
        assert engine.get_breed("Dackel", lang="de").name == "Dachshund"
        assert all(b.weight.lbs is not None for b in engine.recommend({"weightRange": {"min": 10, "max": 20}}))


class TestLifespan:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("10-12 years", 11.0),
            ("12-15 years", 13.5),
            ("10 – 12", 11.0),
            ("12", 12.0),
            (14, 14.0),
            ("unknown", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parse_average(self, raw, expected):
        assert parse_lifespan_average(raw) == expected


def test_metadata():
    meta = make_engine().metadata()
    assert meta.breed_count == 9
    assert meta.sizes == ["large", "medium", "small"]
    assert meta.shedding_levels == ["heavy", "minimal", "moderate"]
    assert "Germany, France" in meta.origins
    assert "Alert" in meta.temperaments
    assert meta.temperaments == sorted(meta.temperaments)
