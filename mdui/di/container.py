from __future__ import annotations

from mdui.domain.interfaces import IDocumentStore, IFileService, IMarkdownRenderer
from mdui.services.browser_probe import BrowserProbe
from mdui.services.config.app_config import AppConfig, build_app_config
from mdui.services.conversion import HtmlConversionPipeline
from mdui.services.document_store import SqliteDocumentStore
from mdui.services.export_coordinator import ExportCoordinator
from mdui.services.exporters.base import ExporterRegistryInst
from mdui.services.exporters.html_exporter import HtmlExporter
from mdui.services.exporters.markdown_exporter import MarkdownExporter
from mdui.services.exporters.pdf_exporter import PdfExporter
from mdui.services.exporters.pdf_renderer import PdfRenderer
from mdui.services.file_service import FileService
from mdui.services.html_assembler import HtmlAssembler, resolve_diagram_runtime
from mdui.services.markdown_renderer import MarkdownRenderer
from mdui.services.ui.adapters import QtFileDialogService, QtMessageService
from mdui.services.ui.ports.dialogs import IFileDialogService
from mdui.services.ui.ports.messages import IMessageService
from mdui.services.ui.presenters.export_presenter import ExportPresenter, IExportView


class Container:
    """
    Lightweight DI container:
      - Wires default services from config if not provided
      - Registers the built-in exporters (md, html, pdf) in its own registry
      - Builds the coordinator and the dialog-driven export presenter
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        store: IDocumentStore | None = None,
        probe: BrowserProbe | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()

        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer()
        self.file_service: IFileService = files or FileService()
        self.document_store: IDocumentStore = store or SqliteDocumentStore(
            self.config.database_path()
        )
        self.probe = probe or BrowserProbe(override=self.config.browser_path())

        self.assembler = HtmlAssembler(resolve_diagram_runtime(self.config.diagram_script()))
        self.pipeline = HtmlConversionPipeline(self.renderer, self.assembler)
        self.pdf_renderer = PdfRenderer(self.probe, self.config.pdf_settings())

        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

        self.exporters = ExporterRegistryInst()
        self._register_builtin_exporters()

    # ---------- Internals ----------

    def _register_builtin_exporters(self) -> None:
        self.exporters.register(MarkdownExporter(self.file_service))
        self.exporters.register(HtmlExporter(self.pipeline, self.file_service))
        self.exporters.register(PdfExporter(self.pipeline, self.pdf_renderer, self.file_service))

    # ---------- Factories ----------

    def build_export_coordinator(self) -> ExportCoordinator:
        return ExportCoordinator(
            self.exporters, self.document_store, default_theme=self.config.theme()
        )

    def build_export_presenter(self, view: IExportView) -> ExportPresenter:
        return ExportPresenter(
            view=view,
            coordinator=self.build_export_coordinator(),
            messages=self.messages,
            dialogs=self.dialogs,
        )
