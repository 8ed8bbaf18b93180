import copy

import pytest

from rxform.utils.state_paths import get_in, parse_field_path, set_in


def test_parse_field_path():
    assert parse_field_path("stripInfo.purchasePrice") == ("stripInfo", "purchasePrice")
    assert parse_field_path("quantity") == ("quantity",)
    assert parse_field_path(("a", "b")) == ("a", "b")


@pytest.mark.parametrize("path", ["", "a..b", ".a", "a.", ()])
def test_parse_field_path_rejects_empty_segments(path):
    with pytest.raises(ValueError):
        parse_field_path(path)


def test_set_in_copies_only_the_touched_path():
    previous = {"a": {"b": {"c": "1"}, "x": {"y": "2"}}, "other": {}}
    snapshot = copy.deepcopy(previous)

    updated = set_in(previous, "a.b.c", "9")

    assert updated["a"]["b"]["c"] == "9"
    assert updated is not previous
    assert updated["a"] is not previous["a"]
    assert updated["a"]["b"] is not previous["a"]["b"]
    assert updated["a"]["x"] is previous["a"]["x"]
    assert updated["other"] is previous["other"]
    assert previous == snapshot


def test_set_in_top_level_key():
    previous = {"quantity": "1", "name": "Paracetamol"}
    updated = set_in(previous, "quantity", "5")
    assert updated == {"quantity": "5", "name": "Paracetamol"}
    assert previous["quantity"] == "1"


def test_set_in_creates_missing_levels():
    assert set_in({}, "stripInfo.purchasePrice", "1") == {"stripInfo": {"purchasePrice": "1"}}
    assert set_in(None, "a.b", "1") == {"a": {"b": "1"}}
    assert set_in({"a": None}, "a.b", "1") == {"a": {"b": "1"}}


def test_set_in_replaces_non_mapping_intermediate():
    assert set_in({"a": "x"}, "a.b", "1") == {"a": {"b": "1"}}


def test_get_in():
    state = {"stripInfo": {"stock": "12"}, "flat": "x"}
    assert get_in(state, "stripInfo.stock") == "12"
    assert get_in(state, "stripInfo.mrp", "") == ""
    assert get_in(state, "flat.deeper") is None
    assert get_in(state, "missing.key", 0) == 0
