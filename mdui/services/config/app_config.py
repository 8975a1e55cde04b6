from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir

from mdui.domain.interfaces import IConfigService
from mdui.domain.models import Theme
from mdui.services.config.ini_config_service import IniConfigService
from mdui.services.exporters.pdf_renderer import PdfSettings
from mdui.utils.constants import APP_NAME, DATABASE_FILE

logger = logging.getLogger(__name__)


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # app_config.py -> mdui/services/config/app_config.py
    return Path(__file__).resolve().parents[3]


def _blank_to_none(value: str | None) -> str | None:
    value = (value or "").strip()
    return value or None


@dataclass(frozen=True)
class AppConfig:
    """
    Typed view over the INI settings the export pipeline reads.

      [export] theme, diagram_script
      [pdf]    browser_path, page_format, margin_mm, render_timeout_ms,
               poll_interval_ms, settle_ms, launch_timeout_ms, load_timeout_ms
      [storage] database
    """

    ini: IConfigService
    project_root: Path

    def theme(self) -> Theme:
        return Theme.parse(self.ini.get("export", "theme", "light"))

    def diagram_script(self) -> str | None:
        return _blank_to_none(self.ini.get("export", "diagram_script"))

    def browser_path(self) -> str | None:
        return _blank_to_none(self.ini.get("pdf", "browser_path"))

    def pdf_settings(self) -> PdfSettings:
        d = PdfSettings()
        return PdfSettings(
            page_format=_blank_to_none(self.ini.get("pdf", "page_format")) or d.page_format,
            margin_mm=self.ini.get_float("pdf", "margin_mm", d.margin_mm) or 0.0,
            launch_timeout_ms=self.ini.get_int("pdf", "launch_timeout_ms", d.launch_timeout_ms)
            or d.launch_timeout_ms,
            load_timeout_ms=self.ini.get_int("pdf", "load_timeout_ms", d.load_timeout_ms)
            or d.load_timeout_ms,
            render_timeout_ms=self.ini.get_int("pdf", "render_timeout_ms", d.render_timeout_ms)
            or d.render_timeout_ms,
            poll_interval_ms=self.ini.get_int("pdf", "poll_interval_ms", d.poll_interval_ms)
            or d.poll_interval_ms,
            settle_ms=max(self.ini.get_int("pdf", "settle_ms", d.settle_ms) or 0, 0),
            print_background=bool(
                self.ini.get_bool("pdf", "print_background", d.print_background)
            ),
        )

    def database_path(self) -> Path:
        configured = _blank_to_none(self.ini.get("storage", "database"))
        if configured:
            return Path(configured).expanduser()
        return Path(user_data_dir(APP_NAME)) / DATABASE_FILE


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    logger.info("Settings: %s", ini.loaded_from or "built-in defaults")
    return AppConfig(ini=ini, project_root=root)
