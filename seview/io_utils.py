"""Utility helpers for reading raw nodes and writing JSON output."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml

STDIN = "-"


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def read_data(source: str | Path) -> Any:
    """Load a JSON or YAML document; ``-`` reads YAML (or JSON) from stdin."""
    if str(source) == STDIN:
        return yaml.safe_load(sys.stdin.read())
    path = Path(source)
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def write_text_stable(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
