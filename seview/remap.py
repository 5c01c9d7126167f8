"""Copy values between two key-path schemas."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Union

from .keypath import get_path, set_path
from .models import RemapSpec


def _detach(value: Any) -> Any:
    # Nested mappings are copied so later writes never reach the source record.
    if isinstance(value, Mapping):
        return {key: _detach(item) for key, item in value.items()}
    return value


def remap_keys(mapping_spec: Union[Mapping, RemapSpec]) -> Callable[[Any], Any]:
    """Return a transform copying ``from.path`` values to ``to.path`` in a new dict.

    >>> to_props = remap_keys({"tag": "type", "attrs": "props", "children": "props.children"})
    >>> to_props({"tag": "p", "attrs": {"id": "x"}, "children": ["hi"]})
    {'type': 'p', 'props': {'id': 'x', 'children': ['hi']}}

    Values that are missing or ``None`` are left out. Anything that is not a
    mapping, such as a text child, is returned as is, so the result can be
    handed straight to ``make_transformer``.
    """
    spec = mapping_spec if isinstance(mapping_spec, RemapSpec) else RemapSpec(mappings=dict(mapping_spec))
    pairs = spec.pairs()

    def remap(record: Any) -> Any:
        if not isinstance(record, Mapping):
            return record
        result: Dict[str, Any] = {}
        for source, dest in pairs:
            value = get_path(record, source)
            if value is not None:
                set_path(result, dest, _detach(value))
        return result

    return remap


__all__ = ["remap_keys"]
