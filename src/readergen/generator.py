"""Assemble and write the generated Go file.

The generation process:
1. Render the package preamble once
2. Render each function in order, separated by a blank line
3. Compare with the existing file and write only when it changed

The full text is built in memory before anything is written, so a
failed expansion never leaves a partial file behind.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from readergen.function import Function
from readergen.registry import TemplateRegistry, default_registry

logger = logging.getLogger(__name__)


def generate_source(
    functions: Iterable[Function],
    registry: TemplateRegistry | None = None,
) -> str:
    """Return the preamble followed by every rendered function."""
    reg = registry or default_registry()
    buf = io.StringIO()
    reg.render_package(buf)
    for fn in functions:
        buf.write("\n")
        fn.execute(buf, reg)
    return buf.getvalue()


def write_source(
    functions: Iterable[Function],
    output: Path | str,
    registry: TemplateRegistry | None = None,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Generate the Go file at output.

    Returns:
        Dict with path, action (created, updated or unchanged), the number
        of functions rendered and the dry_run flag.
    """
    functions = list(functions)
    file_path = Path(output)
    source = generate_source(functions, registry)

    if not file_path.exists():
        action = "created"
    elif file_path.read_text() == source:
        action = "unchanged"
    else:
        action = "updated"

    if action != "unchanged" and not dry_run:
        file_path.write_text(source)
        logger.info("Wrote %d function(s) to %s", len(functions), file_path)

    return {
        "path": str(file_path),
        "action": action,
        "functions": len(functions),
        "dry_run": dry_run,
    }
