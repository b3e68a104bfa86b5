"""Registry of machine-readable layout formats.

Text renderings (table, diagram, summary) live in the formatters. The
formats registered here are the ones a renderer reads back, selectable with
``shelfie layout --format`` and written to disk by ``--output-formats``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from shelfie.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """A layout export format.

    Attributes:
        format_name: Name used on the command line, e.g. ``json``.
        file_extension: Extension of written files, without the dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    def export_string(self, output: LayoutOutput) -> str:
        """Render the layout in this format."""
        ...

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Write the rendered layout to ``path``."""
        ...


class ExporterRegistry:
    """Export formats by name, filled by ``@ExporterRegistry.register``."""

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(
        cls, format_name: str
    ) -> Callable[[type[Exporter]], type[Exporter]]:
        """Class decorator adding an exporter under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning("Replacing exporter for format %r", format_name)
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Exporter class for ``format_name``.

        Raises:
            KeyError: If the format is unknown; the message lists the
                known ones.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            known = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {known}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        """Registered format names, sorted."""
        return sorted(cls._exporters)
