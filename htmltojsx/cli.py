"""Command-line interface for converting an HTML file to JSX."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import ConverterConfig, apply_overrides, load_config
from .converter import HtmlToJsx
from .io_utils import read_text, write_text

EXIT_NO_INPUT = 1
EXIT_READ_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_WRITE_ERROR = 4
EXIT_USAGE_ERROR = 5


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        raise SystemExit(EXIT_USAGE_ERROR)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="htmltojsx",
        description="Converts HTML to JSX for use with React.",
        epilog='Example: htmltojsx -c AwesomeComponent awesome.htm creates component "AwesomeComponent".',
    )
    parser.add_argument("file", nargs="?", type=Path, help="HTML file to convert")
    parser.add_argument(
        "-c",
        "--class-name",
        dest="class_name",
        default=None,
        help="Create a React component (wraps JSX in a React.createClass call) with this name",
    )
    parser.add_argument("--indent", default=None, help="Indentation unit (default: two spaces)")
    parser.add_argument(
        "--container-tag",
        dest="container_tag",
        default=None,
        help="Element wrapped around multiple top-level nodes (default: div)",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML file with converter options")
    parser.add_argument("--out", type=Path, default=None, help="Write JSX to this file instead of stdout")
    return parser


def _resolve_config(args: argparse.Namespace) -> ConverterConfig:
    overrides = {
        "create_scaffold": True if args.class_name else None,
        "scaffold_name": args.class_name,
        "indent_unit": args.indent,
        "container_tag": args.container_tag,
    }
    try:
        if args.config is not None:
            return load_config(args.config, **overrides)
        return apply_overrides(ConverterConfig(), **overrides)
    except ValidationError as exc:
        print(f"Invalid converter options: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_CONFIG_ERROR) from exc
    except SystemExit as exc:
        if isinstance(exc.code, str):
            print(exc.code, file=sys.stderr)
            raise SystemExit(EXIT_CONFIG_ERROR) from exc
        raise


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.file is None:
        print("Please provide a file name", file=sys.stderr)
        parser.print_help(sys.stderr)
        raise SystemExit(EXIT_NO_INPUT)

    config = _resolve_config(args)

    try:
        html = read_text(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_READ_ERROR) from exc

    output = HtmlToJsx(config).convert(html)

    if args.out is None:
        print(output)
        return
    try:
        write_text(args.out, output + "\n")
    except OSError as exc:
        print(f"Cannot write {args.out}: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_WRITE_ERROR) from exc


if __name__ == "__main__":
    main(sys.argv[1:])
