"""Command-line entry point: turn the classes used in a file into CSS."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from .compiler import parse_html_to_file, parse_string
from .warning import Warning


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="railwind", description="Generate CSS for the utility classes in a file."
    )
    parser.add_argument("input", help="an HTML file, or a file of classes")
    parser.add_argument(
        "-o", "--output", default="railwind.css", help="where to write the CSS"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and print any warnings."""
    args = _build_parser().parse_args(argv)
    source = Path(args.input)
    output = Path(args.output)

    warnings: list[Warning] = []
    if source.suffix == ".html":
        warnings = parse_html_to_file(source, output)
    elif source.suffix:
        css, warnings = parse_string(source.read_text(encoding="utf-8"))
        output.write_text(css, encoding="utf-8")

    for warning in warnings:
        print(warning)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())