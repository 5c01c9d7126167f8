"""Normalization of raw hyperscript nodes into node definitions.

A raw node is ``[selector_or_handle, attrs?, *children]``. The second
element is treated as attributes only when it is a mapping; otherwise it is
the first child argument. Children may be given one per argument or as a
single list, and lists of children may be nested arbitrarily deep.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Optional

from .keypath import get_path, set_path
from .selector import parse_selector
from .types_node import Child, NodeDefinition
from .values import ChildKind, classify, is_collection, is_mapping, materialize


def _raw_items(node: Any) -> List[Any]:
    if isinstance(node, (str, bytes, bytearray, Mapping)) or not isinstance(node, Iterable):
        raise TypeError(f"raw node must be a list of [tag, attrs?, *children], got {type(node).__name__}")
    items = materialize(node)
    if not items:
        raise ValueError("raw node is empty: a tag or selector is required at index 0")
    return items


def _class_names(value: Any) -> List[str]:
    if isinstance(value, str):
        return value.split()
    if isinstance(value, Mapping):
        return [str(name) for name, enabled in value.items() if enabled]
    return []


def _merge_attrs(result: NodeDefinition, explicit: Dict[str, Any], class_key: str) -> None:
    if class_key in explicit:
        added = _class_names(explicit.pop(class_key))
        if added:
            existing = get_path(result, ["attrs", class_key])
            names = [existing, *added] if existing else added
            set_path(result, ["attrs", class_key], " ".join(names))

    if explicit:
        result.setdefault("attrs", {}).update(explicit)


def _flatten(entries: List[Any], class_key: str, out: Optional[List[Child]] = None) -> List[Child]:
    if out is None:
        out = []
    for entry in entries:
        classified = classify(entry)
        if classified.kind is ChildKind.TEXT:
            out.append(classified.text)
        elif classified.kind is ChildKind.NODES:
            items = classified.items
            if not items:
                continue
            if is_collection(items[0]):
                _flatten(items, class_key, out)
            else:
                out.append(build_node_definition(items, class_key))
    return out


def _children_from_source(source: Any, class_key: str) -> List[Child]:
    classified = classify(source)
    if classified.kind is ChildKind.TEXT:
        return [classified.text]
    if classified.kind is ChildKind.NODES:
        items = classified.items
        # A list of child lists vs a single child node.
        siblings = items if items and is_collection(items[0]) else [items]
        return _flatten(siblings, class_key)
    return []


def build_node_definition(node: Any, class_key: str = "class") -> NodeDefinition:
    """Normalize a raw node into ``{tag, attrs?, children?}``.

    >>> build_node_definition(["button.btn", {"class": {"primary": True, "hidden": False}}, "Go"])
    {'tag': 'button', 'attrs': {'class': 'btn primary'}, 'children': ['Go']}

    The caller's attribute mapping is copied, never modified.
    """
    items = _raw_items(node)
    head = items[0]
    result: NodeDefinition = parse_selector(head, class_key) if isinstance(head, str) else {"tag": head}

    if len(items) > 1 and is_mapping(items[1]):
        _merge_attrs(result, dict(items[1]), class_key)
        source = items[2] if len(items) > 2 else None
        varargs_limit = 3
    else:
        source = items[1] if len(items) > 1 else None
        varargs_limit = 2

    if len(items) > varargs_limit:
        children = _flatten(items[varargs_limit - 1 :], class_key)
    else:
        children = _children_from_source(source, class_key)

    if children:
        result["children"] = children
    return result


__all__ = ["build_node_definition"]
