"""Function descriptor and renderer."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import TextIO

from jinja2 import TemplateError

from readergen.errors import TemplateExpansionError
from readergen.registry import TemplateRegistry, default_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Function:
    """Definition of one generated reader function.

    Attributes:
        resource: Compute API name of the entity, like Firewall or Instance.
            Used verbatim in Go identifiers; not validated.
        zone: Whether the resource is listed per zone rather than per project.
    """

    resource: str
    zone: bool = False

    @property
    def name(self) -> str:
        return f"List{self.resource}s"

    def execute(self, sink: TextIO, registry: TemplateRegistry | None = None) -> None:
        """Expand the function template for this descriptor into sink.

        Raises:
            TemplateExpansionError: If the template cannot be expanded. The
                sink may hold partial output in that case.
        """
        reg = registry or default_registry()
        template = reg.function_template(self.zone)
        try:
            template.stream(resource=self.resource, zone=self.zone).dump(sink)
        except TemplateError as e:
            raise TemplateExpansionError(self, e) from e
        logger.debug("Rendered %s (zone=%s)", self.name, self.zone)

    def render(self, registry: TemplateRegistry | None = None) -> str:
        """Return the expanded function as a string."""
        buf = io.StringIO()
        self.execute(buf, registry)
        return buf.getvalue()
