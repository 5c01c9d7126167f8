"""Command-line interface for seview."""

import argparse
import json
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

import yaml
from pydantic import ValidationError

from .adapters import ADAPTER_CLASS_KEYS, ADAPTERS
from .io_utils import STDIN, read_data, stable_json_dumps, warn, write_text_stable
from .models import RemapSpec, TransformOptions
from .remap import remap_keys
from .selector import parse_selector
from .transform import make_transformer


def _load(source: str, label: str) -> Any:
    try:
        return read_data(source)
    except FileNotFoundError as exc:
        raise SystemExit(f"{label} not found: {source}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Invalid {label} {source}: {exc}") from exc


def _load_remap(path: Path) -> RemapSpec:
    data = _load(str(path), "remap file") or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of 'from.path': 'to.path' entries.")
    try:
        return RemapSpec(mappings=data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid remap file {path}: {exc}") from exc


def _options(args: argparse.Namespace) -> TransformOptions:
    class_key = args.class_key
    expected = ADAPTER_CLASS_KEYS.get(args.adapter or "")
    if class_key is None:
        class_key = expected or "class"
    elif expected and class_key != expected:
        warn(f"Adapter '{args.adapter}' expects class key '{expected}', using '{class_key}'.")
    try:
        return TransformOptions(class_key=class_key)
    except ValidationError as exc:
        raise SystemExit(f"Invalid options: {exc}") from exc


def _emit(text: str, out: Optional[Path]) -> None:
    if out is None:
        print(text, end="")
        return
    write_text_stable(out, text)


def _handle_normalize(args: argparse.Namespace) -> None:
    raw = _load(args.input, "input")
    options = _options(args)

    transform: Callable[[Any], Any]
    if args.remap is not None:
        transform = remap_keys(_load_remap(args.remap))
    else:
        transform = ADAPTERS[args.adapter or "node"]

    try:
        result = make_transformer(transform, options)(raw)
    except (TypeError, ValueError) as exc:
        raise SystemExit(f"Cannot transform {args.input}: {exc}") from exc
    try:
        text = stable_json_dumps(result)
    except (TypeError, ValueError) as exc:
        raise SystemExit(f"Cannot serialize result for {args.input}: {exc}") from exc
    _emit(text, args.out)


def _handle_selector(args: argparse.Namespace) -> None:
    _emit(stable_json_dumps(parse_selector(args.selector, _options(args).class_key)), None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hyperscript to node-definition tooling.")
    subparsers = parser.add_subparsers(dest="command")

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Normalize a raw node read from JSON or YAML.",
        description="Normalize a raw [selector, attrs?, *children] node and print it as JSON.",
    )
    normalize_parser.add_argument("input", help=f"Path to a JSON/YAML file, or '{STDIN}' for stdin")
    normalize_parser.add_argument(
        "--class-key",
        dest="class_key",
        default=None,
        help="Attribute key carrying CSS classes (default: class, or the adapter's own key).",
    )
    shape = normalize_parser.add_mutually_exclusive_group()
    shape.add_argument(
        "--adapter",
        choices=sorted(ADAPTERS),
        default=None,
        help="Emit element descriptors in the shape of a UI library.",
    )
    shape.add_argument(
        "--remap",
        type=Path,
        default=None,
        help="YAML/JSON mapping of 'from.path' to 'to.path' applied to every node.",
    )
    normalize_parser.add_argument("--out", type=Path, default=None, help="Write output to this file")
    normalize_parser.set_defaults(func=_handle_normalize)

    selector_parser = subparsers.add_parser(
        "selector",
        help="Parse a tag selector.",
        description="Print the tag and attributes encoded by a selector string.",
    )
    selector_parser.add_argument("selector", help="Selector such as 'input:text#name.wide[required]'")
    selector_parser.add_argument("--class-key", dest="class_key", default=None)
    selector_parser.set_defaults(func=_handle_selector, adapter=None)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
