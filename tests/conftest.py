from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from playwright.sync_api import Error as PlaywrightError

from mdui.services.browser_probe import BrowserProbe
from mdui.services.conversion import HtmlConversionPipeline
from mdui.services.document_store import InMemoryDocumentStore
from mdui.services.export_coordinator import ExportCoordinator
from mdui.services.exporters.base import ExporterRegistryInst
from mdui.services.exporters.html_exporter import HtmlExporter
from mdui.services.exporters.markdown_exporter import MarkdownExporter
from mdui.services.exporters.pdf_exporter import PdfExporter
from mdui.services.exporters.pdf_renderer import PdfRenderer, PdfSettings
from mdui.services.file_service import FileService
from mdui.services.html_assembler import DiagramRuntime, HtmlAssembler
from mdui.services.markdown_renderer import MarkdownRenderer

RUNTIME_URL = "https://example.invalid/mermaid.min.js"


# --- Browser fakes ---


class FakeProbe(BrowserProbe):
    """Probe with a fixed answer; never touches the filesystem."""

    def __init__(self, path: Path | None) -> None:
        super().__init__(environ={})
        self._path = path
        self.calls = 0

    def find_browser(self) -> Path | None:
        self.calls += 1
        return self._path


@dataclass
class BrowserRecorder:
    """
    Stands in for the process table: tracks what the fake Playwright launched/closed.

    fail_at: one of "start", "launch", "new_page", "set_content", "wait", "pdf", "close"
    stop_fails: the driver errors while shutting down, on top of any fail_at step
    """

    fail_at: str | None = None
    error: BaseException | None = None
    stop_fails: bool = False
    started: bool = False
    stopped: bool = False
    launched: bool = False
    closed: bool = False
    launch_kwargs: dict[str, Any] = field(default_factory=dict)
    content_kwargs: dict[str, Any] = field(default_factory=dict)
    wait_kwargs: dict[str, Any] = field(default_factory=dict)
    pdf_kwargs: dict[str, Any] = field(default_factory=dict)
    html: str | None = None
    pdf_bytes: bytes = b"%PDF-1.7\n% fake\n"

    @property
    def browser_running(self) -> bool:
        return self.launched and not self.closed

    def maybe_fail(self, step: str) -> None:
        if self.fail_at == step:
            raise self.error or PlaywrightError(f"{step} exploded")


class _FakePage:
    def __init__(self, rec: BrowserRecorder) -> None:
        self._rec = rec

    def set_content(self, html: str, **kwargs: Any) -> None:
        self._rec.maybe_fail("set_content")
        self._rec.html = html
        self._rec.content_kwargs = kwargs

    def wait_for_function(self, expression: str, **kwargs: Any) -> None:
        self._rec.wait_kwargs = {"expression": expression, **kwargs}
        self._rec.maybe_fail("wait")

    def wait_for_timeout(self, timeout: float) -> None:
        self._rec.wait_kwargs["settle"] = timeout

    def pdf(self, **kwargs: Any) -> bytes:
        self._rec.maybe_fail("pdf")
        self._rec.pdf_kwargs = kwargs
        return self._rec.pdf_bytes


class _FakeBrowser:
    def __init__(self, rec: BrowserRecorder) -> None:
        self._rec = rec

    def new_page(self) -> _FakePage:
        self._rec.maybe_fail("new_page")
        return _FakePage(self._rec)

    def close(self) -> None:
        self._rec.closed = True
        self._rec.maybe_fail("close")


class _FakeChromium:
    def __init__(self, rec: BrowserRecorder) -> None:
        self._rec = rec

    def launch(self, **kwargs: Any) -> _FakeBrowser:
        self._rec.launch_kwargs = kwargs
        self._rec.maybe_fail("launch")
        self._rec.launched = True
        return _FakeBrowser(self._rec)


class _FakeManager:
    def __init__(self, rec: BrowserRecorder) -> None:
        self._rec = rec
        self.chromium = _FakeChromium(rec)

    def stop(self) -> None:
        self._rec.stopped = True
        if self._rec.stop_fails:
            raise PlaywrightError("stop exploded")


class _FakeSyncPlaywright:
    def __init__(self, rec: BrowserRecorder) -> None:
        self._rec = rec

    def start(self) -> _FakeManager:
        self._rec.maybe_fail("start")
        self._rec.started = True
        return _FakeManager(self._rec)


@pytest.fixture()
def fake_browser(monkeypatch) -> BrowserRecorder:
    rec = BrowserRecorder()
    monkeypatch.setattr(
        "mdui.services.exporters.pdf_renderer.sync_playwright",
        lambda: _FakeSyncPlaywright(rec),
        raising=True,
    )
    return rec


@pytest.fixture()
def browser_path(tmp_path: Path) -> Path:
    exe = tmp_path / "bin" / "chromium"
    exe.parent.mkdir(parents=True, exist_ok=True)
    exe.write_text("#!/bin/sh\n", encoding="utf-8")
    exe.chmod(0o755)
    return exe


# --- Pipeline fixtures ---


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture()
def assembler() -> HtmlAssembler:
    return HtmlAssembler(DiagramRuntime.remote(RUNTIME_URL))


@pytest.fixture()
def pipeline(renderer: MarkdownRenderer, assembler: HtmlAssembler) -> HtmlConversionPipeline:
    return HtmlConversionPipeline(renderer, assembler)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture()
def make_coordinator(pipeline, file_service, store):
    """Factory: a fully wired coordinator around the given probe."""

    def _make(probe: BrowserProbe) -> ExportCoordinator:
        registry = ExporterRegistryInst()
        registry.register(MarkdownExporter(file_service))
        registry.register(HtmlExporter(pipeline, file_service))
        pdf_renderer = PdfRenderer(probe, PdfSettings(render_timeout_ms=500, poll_interval_ms=10))
        registry.register(PdfExporter(pipeline, pdf_renderer, file_service))
        return ExportCoordinator(registry, store)

    return _make
