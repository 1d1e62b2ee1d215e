"""Default input and output locations.

Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    READERGEN_MANIFEST — resource manifest YAML (default: built-in list)
    READERGEN_OUTPUT — generated Go file (default: ./reader_generated.go)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_OUTPUT = "reader_generated.go"


def manifest_path() -> Path | None:
    """Return the manifest path, or None to use the built-in functions."""
    env = os.environ.get("READERGEN_MANIFEST")
    return Path(env) if env else None


def output_path() -> Path:
    """Return the path of the generated Go file."""
    return Path(os.environ.get("READERGEN_OUTPUT", _DEFAULT_OUTPUT))
