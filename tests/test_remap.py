import pytest
from pydantic import ValidationError

from seview.models import RemapSpec
from seview.remap import remap_keys
from seview.transform import make_transformer


def test_identity_mapping_preserves_value():
    value = {"nested": [1, 2]}
    assert remap_keys({"a": "a"})({"a": value, "b": 2}) == {"a": value}


def test_non_mapping_passes_through():
    remap = remap_keys({"tag": "type"})
    assert remap("plain text") == "plain text"
    assert remap(["x"]) == ["x"]


def test_missing_and_none_values_are_omitted():
    remap = remap_keys({"tag": "type", "attrs": "props", "children": "props.children"})
    assert remap({"tag": "hr"}) == {"type": "hr"}
    assert remap({"tag": "hr", "attrs": None}) == {"type": "hr"}


def test_nested_destination_merges():
    remap = remap_keys({"tag": "type", "attrs": "props", "children": "props.children"})
    record = {"tag": "p", "attrs": {"id": "x"}, "children": ["hi"]}
    assert remap(record) == {"type": "p", "props": {"id": "x", "children": ["hi"]}}
    assert record["attrs"] == {"id": "x"}


def test_nested_source_path():
    remap = remap_keys({"attrs.className": "props.class", "tag": "name"})
    assert remap({"tag": "a", "attrs": {"className": "link", "href": "/"}}) == {
        "props": {"class": "link"},
        "name": "a",
    }


def test_remapper_as_transform():
    to_vnode = make_transformer(
        remap_keys({"tag": "nodeName", "attrs": "attributes", "children": "children"})
    )
    assert to_vnode(["ul.list", ["li", "one"], ["li", "two"]]) == {
        "nodeName": "ul",
        "attributes": {"class": "list"},
        "children": [{"nodeName": "li", "children": ["one"]}, {"nodeName": "li", "children": ["two"]}],
    }


def test_accepts_remap_spec_model():
    spec = RemapSpec(mappings={"tag": "type"})
    assert remap_keys(spec)({"tag": "b"}) == {"type": "b"}
    assert spec.pairs() == [(["tag"], ["type"])]


@pytest.mark.parametrize("mappings", [{"": "tag"}, {"tag": ""}, {"attrs..id": "id"}, {"tag": "props."}])
def test_invalid_paths_are_rejected(mappings):
    with pytest.raises(ValidationError):
        remap_keys(mappings)


def test_destination_under_a_scalar_raises_type_error():
    remap = remap_keys({"tag": "x", "attrs": "x.attrs"})
    with pytest.raises(TypeError, match="'x'"):
        remap({"tag": "p", "attrs": {"id": "a"}})
