from __future__ import annotations

import pytest

from dogbreeds.errors import BreedValidationError, NonEmptyStringError
from dogbreeds.tests.sample_catalog import make_engine, names

engine = make_engine()


class TestCountryFilter:
    def test_partial_country_in_multi_country_origin(self):
        assert names(engine.by_country("Germany")) == ["German Shepherd", "Dachshund", "Poodle"]

    def test_region_inside_parentheses(self):
        assert names(engine.by_country("england")) == ["Labrador Retriever", "Bulldog"]

    def test_query_containing_origin(self):
        assert names(engine.by_country("Mexico City")) == ["Chihuahua"]

    def test_blank_country(self):
        with pytest.raises(NonEmptyStringError) as exc_info:
            engine.by_country("  ")
        assert exc_info.value.field_name == "Country"


class TestScalarFilters:
    def test_size_is_case_insensitive(self):
        assert names(engine.by_size("SMALL")) == ["Dachshund", "French Bulldog", "Chihuahua", "Basenji"]

    def test_size_has_no_fuzzy_tolerance(self):
        assert engine.by_size("smal") == []

    def test_energy_level(self):
        assert names(engine.by_energy_level("high")) == [
            "Labrador Retriever",
            "German Shepherd",
            "Poodle",
            "Basenji",
        ]

    def test_trainability(self):
        assert names(engine.by_trainability(" Low ")) == ["Dachshund", "Bulldog", "Basenji"]

    def test_shedding(self):
        assert names(engine.by_shedding("minimal")) == ["Poodle", "Basenji"]

    def test_grooming_needs(self):
        assert names(engine.by_grooming_needs("high")) == ["Poodle"]

    def test_temperament_matches_any_trait(self):
        assert names(engine.by_temperament("alert")) == [
            "French Bulldog",
            "Poodle",
            "Chihuahua",
            "Basenji",
        ]

    def test_records_without_value_are_excluded(self):
        for breeds in (engine.by_size("small"), engine.by_temperament("friendly")):
            assert "Beagle" not in names(breeds)

    @pytest.mark.parametrize(
        "method,label",
        [
            ("by_size", "Size"),
            ("by_temperament", "Temperament trait"),
            ("by_energy_level", "Energy level"),
            ("by_trainability", "Trainability level"),
            ("by_shedding", "Shedding level"),
            ("by_grooming_needs", "Grooming needs level"),
        ],
    )
    def test_blank_argument_names_the_field(self, method, label):
        with pytest.raises(NonEmptyStringError) as exc_info:
            getattr(engine, method)("")
        assert exc_info.value.field_name == label


class TestCompatibilityFilter:
    def test_good_with_cats(self):
        assert names(engine.by_compatibility("cats", True)) == [
            "Labrador Retriever",
            "French Bulldog",
            "Poodle",
        ]

    def test_false_is_a_real_constraint(self):
        # Breeds without compatibility data never match either value
        assert names(engine.by_compatibility("cats", False)) == [
            "German Shepherd",
            "Dachshund",
            "Bulldog",
            "Basenji",
        ]

    def test_camel_and_snake_case_keys(self):
        expected = ["German Shepherd", "Basenji"]
        assert names(engine.by_compatibility("otherDogs", False)) == expected
        assert names(engine.by_compatibility("other_dogs", False)) == expected

    def test_unknown_key(self):
        with pytest.raises(BreedValidationError):
            engine.by_compatibility("birds", True)

    def test_non_boolean_value(self):
        with pytest.raises(TypeError):
            engine.by_compatibility("cats", "yes")


class TestWeightRangeFilter:
    def test_inclusive_overlap_in_pounds(self):
        # German Shepherd starts at exactly 50 lbs
        assert names(engine.by_weight_range(30, 50)) == ["German Shepherd", "Dachshund", "Poodle"]

    def test_bounds_are_sorted(self):
        assert engine.by_weight_range(50, 30, "lbs") == engine.by_weight_range(30, 50, "lbs")

    def test_upper_boundary_touch(self):
        assert names(engine.by_weight_range(80, 100)) == ["Labrador Retriever", "German Shepherd"]

    @pytest.mark.parametrize("unit", ["kg", "kgs", "KG", " Kilograms ", "kilogram", "kilo", "kilos"])
    def test_kilogram_aliases(self, unit):
        assert names(engine.by_weight_range(20, 30, unit)) == [
            "Labrador Retriever",
            "German Shepherd",
            "Bulldog",
            "Poodle",
        ]

    @pytest.mark.parametrize("unit", ["lb", "lbs", "Pound", "pounds"])
    def test_pound_aliases(self, unit):
        assert engine.by_weight_range(30, 50, unit) == engine.by_weight_range(30, 50)

    def test_breeds_without_unit_data_are_excluded(self):
        # Bulldog only stores kilograms, Basenji and Beagle store no weight
        found = names(engine.by_weight_range(0, 1000, "lbs"))
        assert "Bulldog" not in found
        assert "Basenji" not in found
        assert "Beagle" not in found

    def test_unknown_unit(self):
        with pytest.raises(BreedValidationError):
            engine.by_weight_range(10, 20, "stone")

    def test_non_string_unit(self):
        with pytest.raises(TypeError):
            engine.by_weight_range(10, 20, 5)

    @pytest.mark.parametrize("bounds", [("10", 20), (10, None), (True, 20)])
    def test_non_numeric_bounds(self, bounds):
        with pytest.raises(TypeError):
            engine.by_weight_range(*bounds)
