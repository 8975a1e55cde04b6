# tests/test_app_config.py
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from mdui.domain.models import Theme
from mdui.services.config.app_config import AppConfig, build_app_config
from mdui.services.config.ini_config_service import IniConfigService
from mdui.services.exporters.pdf_renderer import PdfSettings


# ------------------------------
# Helpers
# ------------------------------
def _write(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


@pytest.fixture(autouse=True)
def isolated_dirs(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "mdui.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / "usercfg"),
    )
    monkeypatch.setattr(
        "mdui.services.config.app_config.user_data_dir",
        lambda appname: str(tmp_path / "userdata"),
    )


def _config(tmp_path: Path, ini_text: str | None = None) -> AppConfig:
    explicit = None
    if ini_text is not None:
        explicit = tmp_path / "settings.ini"
        _write(explicit, ini_text)
    return build_app_config(explicit_ini=explicit, project_root=tmp_path / "empty-root")


# ------------------------------
# Defaults
# ------------------------------
def test_defaults_without_any_ini(tmp_path: Path):
    cfg = _config(tmp_path)

    assert cfg.theme() is Theme.LIGHT
    assert cfg.diagram_script() is None
    assert cfg.browser_path() is None
    assert cfg.pdf_settings() == PdfSettings()
    assert cfg.database_path() == tmp_path / "userdata" / "markdown-ui.db"
    assert cfg.ini.loaded_from is None


# ------------------------------
# Typed values
# ------------------------------
def test_export_section(tmp_path: Path):
    cfg = _config(
        tmp_path,
        "[export]\ntheme = dark\ndiagram_script = /opt/mermaid/mermaid.min.js\n",
    )
    assert cfg.theme() is Theme.DARK
    assert cfg.diagram_script() == "/opt/mermaid/mermaid.min.js"


def test_blank_values_mean_unset(tmp_path: Path):
    cfg = _config(
        tmp_path,
        "[export]\ndiagram_script =\n[pdf]\nbrowser_path =   \npage_format =\n[storage]\ndatabase =\n",
    )
    assert cfg.diagram_script() is None
    assert cfg.browser_path() is None
    assert cfg.pdf_settings().page_format == "A4"
    assert cfg.database_path().name == "markdown-ui.db"


def test_pdf_settings_from_ini(tmp_path: Path):
    cfg = _config(
        tmp_path,
        "[pdf]\n"
        "browser_path = /usr/bin/chromium\n"
        "page_format = Letter\n"
        "margin_mm = 10\n"
        "launch_timeout_ms = 5000\n"
        "load_timeout_ms = 6000\n"
        "render_timeout_ms = 7000\n"
        "poll_interval_ms = 50\n"
        "settle_ms = 200\n"
        "print_background = no\n",
    )
    assert cfg.browser_path() == "/usr/bin/chromium"
    assert cfg.pdf_settings() == PdfSettings(
        page_format="Letter",
        margin_mm=10.0,
        launch_timeout_ms=5000,
        load_timeout_ms=6000,
        render_timeout_ms=7000,
        poll_interval_ms=50,
        settle_ms=200,
        print_background=False,
    )


def test_invalid_numbers_fall_back_to_defaults(tmp_path: Path):
    cfg = _config(tmp_path, "[pdf]\nrender_timeout_ms = soon\nsettle_ms = -5\nmargin_mm = x\n")
    s = cfg.pdf_settings()
    assert s.render_timeout_ms == PdfSettings().render_timeout_ms
    assert s.settle_ms == 0
    assert s.margin_mm == PdfSettings().margin_mm


def test_database_path_configured(tmp_path: Path):
    cfg = _config(tmp_path, "[storage]\ndatabase = ~/notes/app.db\n")
    assert cfg.database_path() == Path("~/notes/app.db").expanduser()


# ------------------------------
# Diagnostics
# ------------------------------
def test_settings_source_is_logged(tmp_path: Path, caplog):
    with caplog.at_level(logging.INFO, logger="mdui.services.config.app_config"):
        cfg = _config(tmp_path, "[export]\ntheme = dark\n")
    assert cfg.ini.loaded_from == tmp_path / "settings.ini"
    assert f"Settings: {tmp_path / 'settings.ini'}" in caplog.text


def test_build_app_config_uses_project_default_file(tmp_path: Path):
    root = tmp_path / "repo"
    _write(root / "config" / "config.ini", "[export]\ntheme = dark\n")

    cfg = build_app_config(project_root=root)
    assert cfg.project_root == root
    assert isinstance(cfg.ini, IniConfigService)
    assert cfg.theme() is Theme.DARK
