"""Classification of the loosely typed values found in hyperscript input.

Every value met while normalizing a raw node is run through :func:`classify`
once. The result says whether the value renders as text, whether it is a
collection of further node specs, or whether it contributes nothing.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, List, NamedTuple, Optional


class ChildKind(str, Enum):
    TEXT = "text"
    NODES = "nodes"
    EMPTY = "empty"


class Classified(NamedTuple):
    kind: ChildKind
    text: Optional[str] = None
    items: Optional[List[Any]] = None


EMPTY = Classified(ChildKind.EMPTY)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_text_child(child: Any) -> bool:
    """True for the text entries of a normalized ``children`` list."""
    return isinstance(child, str)


def is_collection(value: Any) -> bool:
    """True for lists, tuples and any other iterable that is not text or a mapping.

    Does not consume the value, so it is safe to call on generators.
    """
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Iterable)


def materialize(value: Any) -> List[Any]:
    if isinstance(value, list):
        return value
    return list(value)


def _number_text(value: numbers.Real) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def text_of(value: Any) -> Optional[str]:
    """Return the text a scalar child renders as, or ``None`` if it is dropped.

    >>> [text_of(v) for v in ("hi", "", 42, 0, True, False, None)]
    ['hi', None, '42', '0', 'true', None, None]
    """
    if isinstance(value, bool):
        return "true" if value else None
    if isinstance(value, str):
        return value or None
    if isinstance(value, numbers.Real):
        return _number_text(value)
    return None


def classify(value: Any) -> Classified:
    text = text_of(value)
    if text is not None:
        return Classified(ChildKind.TEXT, text=text)
    if is_collection(value):
        return Classified(ChildKind.NODES, items=materialize(value))
    return EMPTY


__all__ = [
    "ChildKind",
    "Classified",
    "classify",
    "is_collection",
    "is_mapping",
    "is_text_child",
    "materialize",
    "text_of",
]
