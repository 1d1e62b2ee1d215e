"""Exceptions raised while compiling and expanding templates."""

from __future__ import annotations

from typing import Any


class TemplateCompileError(RuntimeError):
    """A fixed template string failed to compile.

    Raised at startup only. The templates are constants, so this is a
    defect in the generator itself and is never caught.
    """


class TemplateExpansionError(Exception):
    """Expanding a function template failed for one descriptor.

    Output already written to the sink for that descriptor must be
    discarded.
    """

    def __init__(self, function: Any, cause: BaseException) -> None:
        self.function = function
        super().__init__(f"failed to execute with {function!r}: {cause}")
