"""Reference transforms producing plain element descriptors.

Each adapter mirrors the element shape of a UI library (React, Preact,
Mithril) as JSON-friendly dicts, including the attribute renames those
libraries expect. They double as examples of what a real adapter passes to
``make_transformer``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from .transform import make_transformer
from .types_node import NodeDefinition
from .values import is_text_child

Attrs = Dict[str, Any]


def _hoist_inner_html(attrs: Attrs) -> Attrs:
    if attrs.get("innerHTML"):
        attrs["dangerouslySetInnerHTML"] = {"__html": attrs.pop("innerHTML")}
    return attrs


def react_props(attrs: Optional[Attrs]) -> Attrs:
    """``onInput`` becomes ``onChange``; ``innerHTML`` becomes ``dangerouslySetInnerHTML``."""
    props: Attrs = {}
    for key, value in (attrs or {}).items():
        props["onChange" if key == "onInput" else key] = value
    return _hoist_inner_html(props)


def react_element(node: Any) -> Any:
    if is_text_child(node):
        return node
    props = react_props(node.get("attrs"))
    children = node.get("children")
    if children:
        props["children"] = list(children)
    return {"type": node["tag"], "props": props}


def preact_element(node: Any) -> Any:
    if is_text_child(node):
        return node
    return {
        "nodeName": node["tag"],
        "attributes": _hoist_inner_html(dict(node.get("attrs") or {})),
        "children": list(node.get("children") or []),
    }


def mithril_attrs(attrs: Optional[Attrs]) -> Attrs:
    """Event handler names are lower-cased: ``onClick`` -> ``onclick``."""
    return {(key.lower() if key.startswith("on") else key): value for key, value in (attrs or {}).items()}


def mithril_element(node: Any) -> Any:
    if is_text_child(node):
        return {"tag": "#", "children": node}
    attrs = mithril_attrs(node.get("attrs"))
    inner_html = attrs.pop("innerHTML", None)
    if inner_html:
        # Trusted HTML replaces any other children.
        children = [{"tag": "<", "children": inner_html}]
    else:
        children = list(node.get("children") or [])
    return {"tag": node["tag"], "attrs": attrs, "children": children}


def node_definition(node: Any) -> Any:
    """Identity transform: returns normalized node definitions unchanged."""
    return node


to_react: Callable[[Any], Any] = make_transformer(react_element, class_key="className")
to_preact: Callable[[Any], Any] = make_transformer(preact_element)
to_mithril: Callable[[Any], Any] = make_transformer(mithril_element)

# Per-node element functions; wrap one with make_transformer to get a transformer.
ADAPTERS: Dict[str, Callable[[NodeDefinition], Any]] = {
    "node": node_definition,
    "react": react_element,
    "preact": preact_element,
    "mithril": mithril_element,
}

# Class key each adapter's library expects.
ADAPTER_CLASS_KEYS: Dict[str, str] = {
    "react": "className",
}


__all__ = [
    "ADAPTERS",
    "ADAPTER_CLASS_KEYS",
    "mithril_attrs",
    "mithril_element",
    "node_definition",
    "preact_element",
    "react_element",
    "react_props",
    "to_mithril",
    "to_preact",
    "to_react",
]
