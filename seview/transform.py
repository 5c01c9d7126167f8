"""Bottom-up application of a caller transform to normalized node trees."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, TypeVar, Union

from .models import TransformOptions
from .node_def import build_node_definition
from .types_node import NodeDefinition
from .values import is_text_child

R = TypeVar("R")

Transform = Callable[[Any], R]
OptionsLike = Union[TransformOptions, Mapping, None]


def _resolve_options(options: OptionsLike, overrides: dict) -> TransformOptions:
    if isinstance(options, TransformOptions):
        resolved = options
    else:
        resolved = TransformOptions.model_validate(dict(options or {}))
    if overrides:
        override = TransformOptions.model_validate(overrides)
        resolved = resolved.model_copy(update=override.model_dump(include=override.model_fields_set))
    return resolved


def transform_node_definition(transform: Transform, node: NodeDefinition) -> Any:
    """Rewrite ``node`` depth-first, children before their parent.

    Text children go straight to ``transform``; node children are rewritten
    recursively. ``transform`` then receives a copy of ``node`` whose
    ``children`` hold the transformed values, and its result is returned.
    """
    children = node.get("children")
    if children is None:
        return transform(dict(node))

    rewritten = []
    for child in children:
        if is_text_child(child):
            rewritten.append(transform(child))
        else:
            rewritten.append(transform_node_definition(transform, child))
    return transform({**node, "children": rewritten})


def make_transformer(
    transform: Transform,
    options: OptionsLike = None,
    **overrides: Any,
) -> Callable[[Any], Any]:
    """Build a function turning raw hyperscript nodes into ``transform`` output.

    ``options`` is a :class:`TransformOptions`, a mapping such as
    ``{"classKey": "className"}`` or ``None``; keyword ``overrides`` win.
    Options are validated here, so a bad ``class_key`` fails before any node
    is processed.
    """
    class_key = _resolve_options(options, overrides).class_key

    def apply(node: Any) -> Any:
        return transform_node_definition(transform, build_node_definition(node, class_key))

    return apply


seview = make_transformer


__all__ = ["make_transformer", "seview", "transform_node_definition"]
