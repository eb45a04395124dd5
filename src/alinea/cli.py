"""Command-line front end.

Usage:
    alinea page.html                  # print formatted page.html
    alinea --write a.html b.html      # format files in place
    alinea --check src/*.html         # exit 1 if any file would change
    cat page.html | alinea            # format stdin

Exit status: 0 on success, 1 when --check finds unformatted files, 2 on
parse or read errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from alinea import Formatter, __version__
from alinea.config import BracketPlacement, FormatConfig
from alinea.errors import AlineaError
from alinea.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alinea",
        description="Format HTML-like markup, aligning attributes under the first one.",
    )
    parser.add_argument("files", nargs="*", type=Path, help="Files to format (stdin if none)")
    parser.add_argument("--print-width", type=int, default=80, help="Target line length")
    parser.add_argument("--indent-width", type=int, default=2, help="Columns per nesting level")
    parser.add_argument(
        "--align-attributes",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Align attributes 2..N under the first attribute",
    )
    parser.add_argument(
        "--bracket-placement",
        choices=[p.value for p in BracketPlacement],
        default=BracketPlacement.ATTACHED.value,
        help="Where '>' or '/>' goes after aligned attributes",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--check", action="store_true", help="Report files that would change")
    mode.add_argument("--write", action="store_true", help="Rewrite files in place")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = FormatConfig.from_dict(
            {
                "print_width": args.print_width,
                "indent_width": args.indent_width,
                "align_attributes": args.align_attributes,
                "bracket_placement": args.bracket_placement,
            }
        )
    except AlineaError as exc:
        print(f"alinea: {exc}", file=sys.stderr)
        return 2
    formatter = Formatter(config)

    if not args.files:
        try:
            sys.stdout.write(formatter(sys.stdin.read(), source_file="<stdin>"))
        except AlineaError as exc:
            print(f"alinea: {exc}", file=sys.stderr)
            return 2
        return 0

    logger.debug("Formatting %d file(s) with %s", len(args.files), config)
    status = 0
    for path in args.files:
        try:
            source = path.read_text(encoding="utf-8")
            formatted = formatter(source, source_file=str(path))
        except (OSError, AlineaError) as exc:
            print(f"alinea: {exc}", file=sys.stderr)
            status = 2
            continue

        if args.check:
            if formatted != source:
                print(f"would reformat {path}", file=sys.stderr)
                status = max(status, 1)
        elif args.write:
            if formatted != source:
                path.write_text(formatted, encoding="utf-8")
                print(f"reformatted {path}", file=sys.stderr)
        else:
            sys.stdout.write(formatted)

    return status


if __name__ == "__main__":
    sys.exit(main())
