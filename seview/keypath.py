"""Get/set helpers over nested mappings addressed by key paths."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, Hashable, List


def split_path(dotted: str) -> List[str]:
    """Split a dotted key path such as ``"attrs.className"``."""
    return dotted.split(".")


def _step(obj: Any, key: Hashable) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        if isinstance(key, int) and not isinstance(key, bool) and -len(obj) <= key < len(obj):
            return obj[key]
    return None


def get_path(root: Any, path: Sequence[Hashable]) -> Any:
    """Return the value found by following ``path`` from ``root``.

    ``None`` is returned as soon as a step lands on ``None`` or on something
    that cannot be indexed by the next key.
    """
    if not path:
        raise ValueError("key path must not be empty")
    current = root
    for key in path:
        if current is None:
            return None
        current = _step(current, key)
    return current


def set_path(root: MutableMapping, path: Sequence[Hashable], value: Any) -> MutableMapping:
    """Write ``value`` at ``path`` inside ``root`` and return ``root``.

    Missing intermediate mappings are created. When the final location
    already holds a mapping and ``value`` is one too, the keys of ``value``
    are merged into it instead of replacing it. A ``TypeError`` naming the
    path is raised when an intermediate step holds something other than a
    mapping.
    """
    if not path:
        raise ValueError("key path must not be empty")
    target = root
    for index, key in enumerate(path[:-1]):
        if target.get(key) is None:
            target[key] = {}
        target = target[key]
        if not isinstance(target, MutableMapping):
            walked = ".".join(str(part) for part in path[: index + 1])
            raise TypeError(f"cannot set {list(path)!r}: {walked!r} holds a {type(target).__name__}, not a mapping")

    last = path[-1]
    existing = target.get(last)
    if isinstance(existing, MutableMapping) and isinstance(value, Mapping):
        existing.update(value)
    else:
        target[last] = value
    return root


__all__ = ["get_path", "set_path", "split_path"]
