"""Node definition type definitions."""

from __future__ import annotations

from typing import Any, Dict, List, Required, TypedDict, Union


class NodeDefinition(TypedDict, total=False):
    """Canonical ``{tag, attrs?, children?}`` record produced by normalization.

    ``tag`` is a tag name or an opaque handle such as a component class.
    ``attrs`` and ``children`` are only present when non-empty.
    """

    tag: Required[Any]
    attrs: Dict[str, Any]
    children: List["Child"]


Child = Union[str, NodeDefinition]
