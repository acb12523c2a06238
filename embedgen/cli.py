"""
embedgen command line.

    embedgen embed -o gen/assets.h --dir assets --list logo.png font.ttf
    embedgen help
    embedgen version
"""

import argparse
import logging
import sys
from typing import List, Optional

from embedgen import __version__, job
from embedgen.config import settings
from embedgen.errors import EmbedError
from embedgen.gate import AlwaysDirty


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="embedgen", description=job.JOB_DESCRIPTION)
    sub = parser.add_subparsers(dest="command")

    embed = sub.add_parser("embed", help="generate a header from binary files")
    embed.add_argument("files", nargs="+", metavar="FILE", help="files to embed, relative to --dir")
    embed.add_argument("-o", "--out-header", required=True, metavar="HEADER", help="generated header path")
    embed.add_argument("--dir", default=None, help="base directory of the files")
    embed.add_argument("--prefix", default=None, help="symbol prefix (default: %s)" % settings.DEFAULT_PREFIX)
    embed.add_argument("--list", action="store_true", help="emit a sorted table of contents")
    embed.add_argument("--text", action="store_true", help="emit null-terminated char arrays")
    embed.add_argument("--no-const", action="store_true", help="omit the const qualifier")
    embed.add_argument("--force", action="store_true", help="regenerate even if the header is up to date")
    embed.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    sub.add_parser("help", help="describe the embedfiles job arguments")
    sub.add_parser("version", help="print the version")
    return parser


def _job_args(ns: argparse.Namespace) -> dict:
    args = {
        "files": ns.files,
        "outHeader": ns.out_header,
        "list": ns.list,
        "asText": ns.text,
        "asConst": not ns.no_const,
    }
    if ns.dir is not None:
        args["dir"] = ns.dir
    if ns.prefix is not None:
        args["prefix"] = ns.prefix
    return args


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)

    if ns.command == "version":
        print(f"embedgen {__version__}")
        return 0
    if ns.command == "help":
        print(job.help_text())
        return 0
    if ns.command != "embed":
        parser.print_help()
        return 1

    level = logging.DEBUG if ns.verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(message)s")

    try:
        job.run(_job_args(ns), oracle=AlwaysDirty() if ns.force else None)
    except EmbedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
