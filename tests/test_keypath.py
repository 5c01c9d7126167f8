import pytest

from seview.keypath import get_path, set_path, split_path


def handler(event):
    return event


def test_get_path_reads_top_level_key():
    assert get_path({"tag": "div"}, ["tag"]) == "div"


def test_get_path_reads_nested_key():
    assert get_path({"attrs": {"onClick": handler}}, ["attrs", "onClick"]) is handler


def test_get_path_missing_key_is_none():
    assert get_path({"tag": "div"}, ["type"]) is None


def test_get_path_missing_intermediate_is_none():
    assert get_path({"tag": "div"}, ["type", "value"]) is None
    assert get_path(None, ["tag"]) is None


def test_get_path_indexes_lists_with_ints():
    node = {"children": ["a", {"tag": "b"}]}
    assert get_path(node, ["children", 1, "tag"]) == "b"
    assert get_path(node, ["children", 5]) is None
    assert get_path(node, ["children", "0"]) is None


def test_get_path_rejects_empty_path():
    with pytest.raises(ValueError):
        get_path({}, [])


def test_set_path_overwrites_value():
    assert set_path({"tag": "div"}, ["tag"], "span") == {"tag": "span"}


def test_set_path_replaces_none_leaf():
    assert set_path({"attrs": {"onClick": None}}, ["attrs", "onClick"], handler) == {
        "attrs": {"onClick": handler}
    }


def test_set_path_adds_new_key():
    assert set_path({"tag": "input"}, ["type"], "password") == {"tag": "input", "type": "password"}


def test_set_path_creates_intermediate_mappings():
    assert set_path({"tag": "input"}, ["attrs", "type"], "password") == {
        "tag": "input",
        "attrs": {"type": "password"},
    }


def test_set_path_merges_into_existing_mapping():
    root = {"tag": "input", "props": {"id": "test"}}
    result = set_path(root, ["props"], {"children": ["test"]})
    assert result is root
    assert root == {"tag": "input", "props": {"id": "test", "children": ["test"]}}


def test_set_path_merge_lets_new_keys_win():
    root = {"props": {"id": "old", "name": "keep"}}
    set_path(root, ["props"], {"id": "new"})
    assert root == {"props": {"id": "new", "name": "keep"}}


def test_set_path_non_mapping_value_replaces_mapping():
    assert set_path({"props": {"id": "x"}}, ["props"], "flat") == {"props": "flat"}


def test_set_path_rejects_empty_path():
    with pytest.raises(ValueError):
        set_path({}, [], 1)


def test_split_path():
    assert split_path("attrs.className") == ["attrs", "className"]
    assert split_path("tag") == ["tag"]


def test_set_path_through_non_mapping_names_the_path():
    with pytest.raises(TypeError, match="'attrs'"):
        set_path({"attrs": "flat"}, ["attrs", "id"], "x")
