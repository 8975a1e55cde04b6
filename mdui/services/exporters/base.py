from __future__ import annotations

from dataclasses import dataclass, field

from mdui.domain.errors import UnsupportedFormat
from mdui.domain.interfaces import IExporter, IExporterRegistry
from mdui.domain.models import ExportFormat


@dataclass
class ExporterRegistryInst(IExporterRegistry):
    """
    Instance-based exporter registry (no globals, no side-effects).
    Keeps registry local to the DI container for testability and clarity.
    """

    _reg: dict[str, IExporter] = field(default_factory=dict)

    def register(self, e: IExporter) -> None:
        self._reg[e.name] = e

    def get(self, name: str) -> IExporter:
        return self._reg[name]

    def all(self) -> list[IExporter]:
        return list(self._reg.values())

    def for_format(self, fmt: ExportFormat) -> IExporter:
        for exporter in self._reg.values():
            if exporter.format is fmt:
                return exporter
        raise UnsupportedFormat(f"No exporter registered for {fmt.label}")
