"""Parser for compact tag selectors such as ``input:password#duck.quack[required]``.

Grammar adapted from JSnoX (https://github.com/af/JSnoX).
"""

from __future__ import annotations

import re
from typing import List

from .keypath import set_path
from .types_node import NodeDefinition

DEFAULT_TAG = "div"
VARIANT_ATTR = "type"

# 'input', 'input:text'
_TAG_TYPE_RE = re.compile(r"^([A-Za-z0-9-]+)(?::([a-z]+))?")

# '#id', '.class', '@ref', '[name=value]', '[required]'
_PROPS_RE = re.compile(r"((?:#|\.|@)[\w-]+)|(\[.*?\])")

# '[name=value]' or '[required]'
_ATTR_RE = re.compile(r"\[([\w-]+)(?:=([^\]]+))?\]")


def parse_selector(selector: str, class_key: str = "class") -> NodeDefinition:
    """Return the tag and attributes encoded by ``selector``.

    >>> parse_selector("input:password#duck.quack.yellow[name=pwd][required]")
    {'tag': 'input', 'attrs': {'type': 'password', 'id': 'duck', 'name': 'pwd', 'required': True, 'class': 'quack yellow'}}

    Unrecognized input never raises: the tag falls back to ``div`` and
    tokens that do not match are skipped.
    """
    tag_match = _TAG_TYPE_RE.match(selector)
    result: NodeDefinition = {"tag": tag_match.group(1) if tag_match else DEFAULT_TAG}
    if tag_match and tag_match.group(2):
        result["attrs"] = {VARIANT_ATTR: tag_match.group(2)}

    classes: List[str] = []
    for token in _PROPS_RE.finditer(selector):
        prop, bracket = token.groups()
        if prop is not None:
            marker, name = prop[0], prop[1:]
            if marker == "#":
                set_path(result, ["attrs", "id"], name)
            elif marker == ".":
                classes.append(name)
            continue

        attr_match = _ATTR_RE.match(bracket)
        if attr_match is None:
            continue
        name, value = attr_match.groups()
        set_path(result, ["attrs", name], value if value is not None else True)

    if classes:
        set_path(result, ["attrs", class_key], " ".join(classes))
    return result


__all__ = ["DEFAULT_TAG", "VARIANT_ATTR", "parse_selector"]
