# mdui/services/exporters/pdf_renderer.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from mdui.domain.errors import (
    BrowserLaunchFailed,
    BrowserUnavailable,
    ExportError,
    NavigationFailed,
    PrintFailed,
)
from mdui.domain.models import RenderStage
from mdui.services.browser_probe import BrowserProbe
from mdui.utils.constants import DIAGRAMS_RENDERED_JS

logger = logging.getLogger(__name__)

# Playwright passes plain --headless; the explicit value selects the new headless mode.
LAUNCH_ARGS: tuple[str, ...] = ("--headless=new", "--disable-gpu", "--no-first-run")


@dataclass(frozen=True)
class PdfSettings:
    page_format: str = "A4"
    margin_mm: float = 12.7
    launch_timeout_ms: int = 30000
    load_timeout_ms: int = 30000
    render_timeout_ms: int = 15000
    poll_interval_ms: int = 100
    settle_ms: int = 0
    print_background: bool = True

    def margins(self) -> dict[str, str]:
        m = f"{self.margin_mm}mm"
        return {"top": m, "right": m, "bottom": m, "left": m}


class PdfRenderer:
    """
    Render an HTML document string to PDF bytes in a throwaway headless browser.

    Stages: IDLE -> LAUNCHING -> PAGE_LOADED -> AWAITING_DIAGRAM_RENDER -> PRINTING -> DONE.
    Any failure raises a typed ExportError tagged with the stage it happened in.
    One browser process per call; it is closed on every exit path, including
    cancellation, before the error propagates. No retries.
    """

    def __init__(self, probe: BrowserProbe, settings: PdfSettings | None = None) -> None:
        self._probe = probe
        self.settings = settings or PdfSettings()

    def is_available(self) -> bool:
        return self._probe.is_available()

    def find_executable(self) -> Path:
        executable = self._probe.find_browser()
        if executable is None:
            raise BrowserUnavailable(
                "No Chrome, Chromium or Edge installation found; PDF export needs one",
                stage=RenderStage.IDLE,
            )
        return executable

    def render(self, html: str) -> bytes:
        executable = self.find_executable()
        try:
            return self._render_with(executable, html)
        except ExportError as exc:
            stage = exc.stage.value if exc.stage else "unknown"
            logger.debug("PDF render: %s during %s", RenderStage.FAILED.value, stage)
            raise

    def _render_with(self, executable: Path, html: str) -> bytes:
        logger.debug("PDF render: %s (%s)", RenderStage.LAUNCHING.value, executable)
        try:
            manager = sync_playwright().start()
        except PlaywrightError as exc:
            raise BrowserLaunchFailed(
                f"Failed to start browser driver: {exc}", stage=RenderStage.LAUNCHING
            ) from exc

        try:
            try:
                browser = manager.chromium.launch(
                    executable_path=str(executable),
                    headless=True,
                    args=list(LAUNCH_ARGS),
                    timeout=self.settings.launch_timeout_ms,
                )
            except PlaywrightError as exc:
                raise BrowserLaunchFailed(
                    f"Failed to launch browser {executable}: {exc}",
                    stage=RenderStage.LAUNCHING,
                ) from exc

            try:
                data = self._print(browser, html)
            finally:
                _close_quietly(browser)
        finally:
            _stop_quietly(manager)

        logger.debug("PDF render: %s (%d bytes)", RenderStage.DONE.value, len(data))
        return data

    def _print(self, browser: Any, html: str) -> bytes:
        s = self.settings

        try:
            page = browser.new_page()
            page.set_content(html, wait_until="load", timeout=s.load_timeout_ms)
        except PlaywrightError as exc:
            raise NavigationFailed(
                f"Failed to load HTML into browser page: {exc}", stage=RenderStage.PAGE_LOADED
            ) from exc
        logger.debug("PDF render: %s", RenderStage.PAGE_LOADED.value)

        logger.debug("PDF render: %s", RenderStage.AWAITING_DIAGRAM_RENDER.value)
        try:
            page.wait_for_function(
                DIAGRAMS_RENDERED_JS, timeout=s.render_timeout_ms, polling=s.poll_interval_ms
            )
            if s.settle_ms > 0:
                page.wait_for_timeout(s.settle_ms)
        except PlaywrightTimeoutError as exc:
            raise PrintFailed(
                f"Timed out after {s.render_timeout_ms} ms waiting for diagrams to render",
                stage=RenderStage.AWAITING_DIAGRAM_RENDER,
            ) from exc
        except PlaywrightError as exc:
            raise PrintFailed(
                f"Page failed while rendering diagrams: {exc}",
                stage=RenderStage.AWAITING_DIAGRAM_RENDER,
            ) from exc

        logger.debug("PDF render: %s", RenderStage.PRINTING.value)
        try:
            return page.pdf(
                format=s.page_format,
                margin=s.margins(),
                print_background=s.print_background,
            )
        except PlaywrightError as exc:
            raise PrintFailed(
                f"Failed to print page to PDF: {exc}", stage=RenderStage.PRINTING
            ) from exc


def _close_quietly(browser: Any) -> None:
    # Runs inside `finally`: an error here must not mask the render failure.
    try:
        browser.close()
    except PlaywrightError as exc:
        logger.warning("Browser did not close cleanly: %s", exc)


def _stop_quietly(manager: Any) -> None:
    try:
        manager.stop()
    except PlaywrightError as exc:
        logger.warning("Browser driver did not stop cleanly: %s", exc)
