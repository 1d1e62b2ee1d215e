"""Generation CLI commands."""

import argparse
import sys

import yaml

from readergen.errors import TemplateExpansionError
from readergen.function import Function
from readergen.manifest import DEFAULT_FUNCTIONS, load_manifest
from readergen.paths import manifest_path, output_path


def _load_functions(args: argparse.Namespace) -> list[Function]:
    path = args.manifest or manifest_path()
    if path is None:
        return list(DEFAULT_FUNCTIONS)
    return load_manifest(path)


def cmd_generate(args: argparse.Namespace) -> int:
    from readergen.generator import write_source

    output = args.output or output_path()
    try:
        functions = _load_functions(args)
        result = write_source(functions, output, dry_run=args.dry_run)
    except (OSError, ValueError, yaml.YAMLError, TemplateExpansionError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print("Reader Generation Results")
    print("─" * 40)
    print(f"  File:      {result['path']}")
    print(f"  Functions: {result['functions']}")
    print(f"  Action:    {result['action']}")

    if result["dry_run"]:
        print("\n[DRY RUN] No files were modified.")

    return 0


def cmd_render(args: argparse.Namespace) -> int:
    fn = Function(resource=args.resource, zone=args.zone)
    try:
        text = fn.render()
    except TemplateExpansionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    try:
        functions = _load_functions(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"\n  {'Function':<35} {'Resource':<25} {'Scope':<8}")
    print(f"  {'─' * 68}")
    for fn in functions:
        scope = "zone" if fn.zone else "project"
        print(f"  {fn.name:<35} {fn.resource:<25} {scope:<8}")
    print(f"\n  {len(functions)} function(s)")
    return 0
