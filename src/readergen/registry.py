"""Compiled template registry.

A registry owns the compiled package and function templates for the
lifetime of the process. It is read-only after construction and may be
shared between renders.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TextIO

from jinja2 import Environment, StrictUndefined, Template, TemplateSyntaxError

from readergen.errors import TemplateCompileError
from readergen.templates import (
    GLOBAL_FUNCTION_TEMPLATE,
    PACKAGE_TEMPLATE,
    ZONAL_FUNCTION_TEMPLATE,
)

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Holds the three compiled templates.

    Template strings can be overridden for tests; the defaults come from
    readergen.templates.
    """

    def __init__(
        self,
        package: str = PACKAGE_TEMPLATE,
        zonal: str = ZONAL_FUNCTION_TEMPLATE,
        global_: str = GLOBAL_FUNCTION_TEMPLATE,
    ) -> None:
        self._env = Environment(undefined=StrictUndefined, keep_trailing_newline=True)
        self.package = self._compile("package", package)
        self.zonal = self._compile("zonal", zonal)
        self.global_ = self._compile("global", global_)

    def _compile(self, name: str, source: str) -> Template:
        try:
            template = self._env.from_string(source)
        except TemplateSyntaxError as e:
            raise TemplateCompileError(
                f"failed to compile {name} template (line {e.lineno}): {e.message}"
            ) from e
        logger.debug("Compiled %s template", name)
        return template

    def function_template(self, zone: bool) -> Template:
        """Return the function template for zonal or global resources."""
        return self.zonal if zone else self.global_

    def render_package(self, sink: TextIO) -> None:
        """Write the package preamble to sink."""
        self.package.stream().dump(sink)


@lru_cache(maxsize=None)
def default_registry() -> TemplateRegistry:
    """Return the process-wide registry, compiling it on first use."""
    return TemplateRegistry()
