"""Command-line interface for the reader generator.

Usage:
    readergen generate [--manifest PATH] [--output PATH] [--dry-run]
    readergen render <Resource> [--zone]
    readergen list [--manifest PATH]
"""

import argparse
import logging
import sys

from readergen.cli.generate import cmd_generate, cmd_list, cmd_render


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readergen",
        description="Generate Go compute reader functions from templates",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # generate
    gen = sub.add_parser("generate", help="Write the generated Go file")
    gen.add_argument(
        "--manifest", default=None,
        help="Path to the resource manifest YAML (default: built-in list)",
    )
    gen.add_argument(
        "--output", default=None,
        help="Path to the generated Go file (default: reader_generated.go)",
    )
    gen.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    # render
    ren = sub.add_parser("render", help="Print one function to stdout")
    ren.add_argument("resource", help="Compute resource name, e.g. Instance")
    ren.add_argument(
        "--zone", action="store_true",
        help="Resource is listed per zone",
    )

    # list
    ls = sub.add_parser("list", help="Show the functions that would be generated")
    ls.add_argument(
        "--manifest", default=None,
        help="Path to the resource manifest YAML (default: built-in list)",
    )

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    dispatch = {
        "generate": cmd_generate,
        "render": cmd_render,
        "list": cmd_list,
    }

    handler = dispatch.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
