from __future__ import annotations

from typing import Any

import pytest

from pycollate.config import CollateConfig, Presence
from pycollate.exceptions import EmptyPathError
from pycollate.search import nested_object_find, nested_object_search, preferential_key_search


def _discounts() -> dict[str, Any]:
    return {
        "ALL": {
            "ALL": "10%",
            "StationA": "15%",
            "StationB": "20%",
            "StationC": "25%",
        },
        "StationA": {
            "ALL": "30%",
            "StationB": "40%",
        },
        "StationB": {
            "ALL": "50%",
            "StationA": "60%",
        },
    }


def _fare_discounts() -> dict[str, Any]:
    return {
        "ALL": {"ALL": {"ALL": "10%"}},
        "StationA": {
            "ALL": {"ALL": "20%"},
            "StationB": {"ALL": "30%", "00700": "35%"},
        },
    }


def test_preferential_key_search_returns_values_in_key_order() -> None:
    animals = {
        "cat": {"name": "Kitty"},
        "cow": {"name": "MooMoo"},
        "dog": {"name": "Barky"},
        "fish": {"name": "Bloop"},
    }

    favourites = preferential_key_search(animals, "aardvark", "fish", "cow")

    assert favourites == [animals["fish"], animals["cow"]]


def test_preferential_key_search_total_miss() -> None:
    assert preferential_key_search({"a": 1}, "b", "c") == []
    assert preferential_key_search("not a mapping", "b") == []


def test_preferential_key_search_skips_falsy_values() -> None:
    table = {"zero": 0, "empty": "", "none": None, "false": False, "one": 1, "nested": {}}

    assert preferential_key_search(table, "zero", "empty", "none", "false", "one", "nested") == [1, {}]


def test_preferential_key_search_strict_keeps_falsy_values() -> None:
    table = {"zero": 0, "empty": "", "none": None}
    config = CollateConfig(presence=Presence.STRICT)

    assert preferential_key_search(table, "zero", "empty", "none", config=config) == [0, ""]


def test_nested_object_search_yields_in_preference_order() -> None:
    discounts = _discounts()

    assert list(nested_object_search(discounts, "ALL", "StationA", "StationB")) == ["40%", "30%", "20%", "10%"]
    assert list(nested_object_search(discounts, "ALL", "StationC", "StationB")) == ["20%", "10%"]
    assert list(nested_object_search(discounts, "ALL", "StationB", "StationC")) == ["50%", "25%", "10%"]
    assert list(nested_object_search(discounts, "ALL", "StationC", "StationD")) == ["10%"]


def test_nested_object_search_is_lazy_and_single_use() -> None:
    results = nested_object_search(_discounts(), "ALL", "StationA", "StationB")

    assert next(results) == "40%"
    assert list(results) == ["30%", "20%", "10%"]
    assert list(results) == []


def test_nested_object_search_no_match() -> None:
    assert list(nested_object_search({"x": {"y": 1}}, "ALL", "a", "b")) == []


def test_nested_object_search_stops_at_leaf_before_path_ends() -> None:
    assert list(nested_object_search(_discounts(), "ALL", "StationA", "StationB", "Extra")) == []


def test_nested_object_search_key_equal_to_fallback_visits_twice() -> None:
    assert list(nested_object_search({"ALL": "10%"}, "ALL", "ALL")) == ["10%", "10%"]


def test_nested_object_search_empty_path() -> None:
    with pytest.raises(EmptyPathError):
        nested_object_search(_discounts(), "ALL")

    allowed = CollateConfig(allow_empty_path=True)
    assert list(nested_object_search(_discounts(), "ALL", config=allowed)) == []


def test_nested_object_find_returns_best_match() -> None:
    discounts = _discounts()

    assert nested_object_find(discounts, "ALL", "StationA", "StationB") == "40%"
    assert nested_object_find(discounts, "ALL", "StationC", "StationB") == "20%"
    assert nested_object_find(discounts, "ALL", "StationB", "StationC") == "50%"
    assert nested_object_find(discounts, "ALL", "StationC", "StationD") == "10%"


def test_nested_object_find_three_levels() -> None:
    fares = _fare_discounts()

    assert nested_object_find(fares, "ALL", "StationA", "StationB", "00700") == "35%"
    assert nested_object_find(fares, "ALL", "StationA", "StationB", "00000") == "30%"
    assert nested_object_find(fares, "ALL", "StationA", "StationC", "00700") == "20%"
    assert nested_object_find(fares, "ALL", "StationZ", "StationB", "00700") == "10%"


def test_nested_object_find_does_not_backtrack() -> None:
    table = {
        "ALL": {"ALL": "10%"},
        "StationA": {"StationC": "40%"},
    }

    assert nested_object_find(table, "ALL", "StationA", "StationB") is None
    assert list(nested_object_search(table, "ALL", "StationA", "StationB")) == ["10%"]


def test_nested_object_find_empty_path() -> None:
    with pytest.raises(EmptyPathError):
        nested_object_find(_discounts(), "ALL")

    assert nested_object_find(_discounts(), "ALL", config=CollateConfig(allow_empty_path=True)) is None


def test_nested_search_through_lists_by_index() -> None:
    table = {"routes": [{"ALL": "5%"}, {"peak": "7%", "ALL": "6%"}]}

    assert list(nested_object_search(table, "ALL", "routes", 1, "peak")) == ["7%", "6%"]
    assert nested_object_find(table, "ALL", "routes", 0, "peak") == "5%"
