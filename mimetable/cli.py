"""Command line front-end for magic table lookups.

    mimetable resolve report.pdf archive.tar.gz
    mimetable extensions text/html
    mimetable list
"""

from __future__ import annotations

import argparse
import logging
import sys

from mimetable.config import get_settings
from mimetable.dependencies import get_magic_table
from mimetable.services.magic_table import MimeError, TableBuilder
from mimetable.services.resolver import MimeResolver

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mimetable",
        description="Look up MIME types and extensions in a magic table.",
    )
    parser.add_argument(
        "--magic",
        "-m",
        type=str,
        default=None,
        help="Path to an alternate magic table (default: configured or bundled table)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser("resolve", help="Print the MIME type of each file name")
    resolve.add_argument("names", nargs="+", metavar="NAME")
    resolve.add_argument(
        "--others",
        action="store_true",
        help="Also print the other extensions sharing the MIME type",
    )

    extensions = sub.add_parser("extensions", help="Print the extensions of a MIME type")
    extensions.add_argument("mime", metavar="MIME")

    sub.add_parser("list", help="Print every MIME type with its extensions")
    return parser


def _cmd_resolve(resolver: MimeResolver, args: argparse.Namespace) -> int:
    status = 0
    for name in args.names:
        try:
            resolved = resolver.resolve(name)
        except MimeError as exc:
            print(f"error: {exc}", file=sys.stderr)
            status = 1
            continue
        line = f"{name}\t{resolved.mime}"
        if args.others:
            line += "\t" + " ".join(resolver.other_extensions_for(resolved))
        print(line)
    return status


def _cmd_extensions(resolver: MimeResolver, args: argparse.Namespace) -> int:
    for ext in resolver.extensions_from_mime(args.mime):
        print(ext)
    return 0


def _cmd_list(resolver: MimeResolver, args: argparse.Namespace) -> int:
    for mime in resolver.known_mimes():
        print(f"{mime}\t{' '.join(resolver.extensions_from_mime(mime))}".rstrip("\t"))
    return 0


_COMMANDS = {
    "resolve": _cmd_resolve,
    "extensions": _cmd_extensions,
    "list": _cmd_list,
}


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    level = "DEBUG" if args.verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.magic:
            table = TableBuilder().build(args.magic)
        else:
            table = get_magic_table()
        resolver = MimeResolver(table)
        return _COMMANDS[args.command](resolver, args)
    except MimeError as exc:
        logger.debug("Lookup failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
