"""Command-line interface for html2hiccup."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml
from pydantic import ValidationError

from .dom_model import node_to_dict
from .html_parse import parse_html, select_root
from .io_utils import read_text, stable_json_dumps, warn, write_text
from .models import ConverterConfig
from .pipeline import convert_html


def _load_config(path: Optional[Path]) -> ConverterConfig:
    if path is None:
        return ConverterConfig()
    if not path.exists():
        raise SystemExit(f"Config file not found: {path}")
    data: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of options.")
    try:
        return ConverterConfig.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid config in {path}: {exc}") from exc


def _config_from_args(args: argparse.Namespace) -> ConverterConfig:
    config = _load_config(args.config)
    overrides: dict[str, bool] = {}
    if args.no_shorthand:
        overrides["use_shorthand"] = False
    if args.keep_frame:
        overrides["skip_document_frame"] = False
    if args.all_roots:
        overrides["all_roots"] = True
    return config.model_copy(update=overrides)


def _read_input(path: Optional[Path]) -> str:
    if path is not None and not path.exists():
        raise SystemExit(f"Input file not found: {path}")
    return read_text(path)


def _handle_convert(args: argparse.Namespace) -> None:
    config = _config_from_args(args)
    output = convert_html(_read_input(args.input), config)
    if not output:
        warn("[html2hiccup] no element found in input")
    write_text(args.output, output + "\n" if output else "")
    if args.output is not None:
        warn(f"[html2hiccup] wrote {args.output}")


def _handle_tree(args: argparse.Namespace) -> None:
    document = parse_html(_read_input(args.input))
    root = select_root(document, skip_document_frame=not args.keep_frame)
    if root is None:
        raise SystemExit("No element found in input.")
    write_text(args.output, stable_json_dumps(node_to_dict(root)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2hiccup",
        description="Convert HTML into Hiccup-style nested vector notation.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="html2hiccup 0.1.0",
        help="Show the html2hiccup version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert HTML to Hiccup notation.",
        description="Read HTML (stdin by default) and write Hiccup notation.",
    )
    convert_parser.add_argument("--in", dest="input", type=Path, help="Input HTML file (defaults to stdin).")
    convert_parser.add_argument("--out", dest="output", type=Path, help="Output file (defaults to stdout).")
    convert_parser.add_argument("--config", type=Path, help="YAML file with converter options.")
    convert_parser.add_argument(
        "--no-shorthand",
        dest="no_shorthand",
        action="store_true",
        help="Always keep class in the attribute map.",
    )
    convert_parser.add_argument(
        "--keep-frame",
        dest="keep_frame",
        action="store_true",
        help="Convert the <html> element instead of skipping to the body content.",
    )
    convert_parser.add_argument(
        "--all",
        dest="all_roots",
        action="store_true",
        help="Convert every top-level element, one per line.",
    )
    convert_parser.set_defaults(func=_handle_convert)

    tree_parser = subparsers.add_parser(
        "tree",
        help="Dump the parsed element tree as JSON.",
        description="Show the element tree the converter would receive.",
    )
    tree_parser.add_argument("--in", dest="input", type=Path, help="Input HTML file (defaults to stdin).")
    tree_parser.add_argument("--out", dest="output", type=Path, help="Output file (defaults to stdout).")
    tree_parser.add_argument(
        "--keep-frame",
        dest="keep_frame",
        action="store_true",
        help="Dump from the <html> element instead of the body content.",
    )
    tree_parser.set_defaults(func=_handle_tree)

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
