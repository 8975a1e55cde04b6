from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Iterator, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_OVERRIDES: tuple[str, ...] = ("CHROME", "CHROME_PATH")

EXECUTABLE_NAMES: tuple[str, ...] = (
    "google-chrome",
    "google-chrome-stable",
    "chromium",
    "chromium-browser",
    "chrome",
    "microsoft-edge",
    "msedge",
)

_LINUX_PATHS: tuple[str, ...] = (
    "/usr/bin/google-chrome",
    "/usr/bin/google-chrome-stable",
    "/opt/google/chrome/chrome",
    "/usr/bin/chromium",
    "/usr/bin/chromium-browser",
    "/snap/bin/chromium",
    "/usr/bin/microsoft-edge",
)

_MAC_PATHS: tuple[str, ...] = (
    "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
    "/Applications/Chromium.app/Contents/MacOS/Chromium",
    "/Applications/Microsoft Edge.app/Contents/MacOS/Microsoft Edge",
)

_WINDOWS_SUFFIXES: tuple[str, ...] = (
    r"Google\Chrome\Application\chrome.exe",
    r"Chromium\Application\chrome.exe",
    r"Microsoft\Edge\Application\msedge.exe",
)


def platform_candidates(platform: str, environ: Mapping[str, str]) -> list[Path]:
    """Conventional install locations for Chromium-family browsers, most preferred first."""
    if platform.startswith("win"):
        roots = [
            environ.get(var)
            for var in ("PROGRAMFILES", "PROGRAMFILES(X86)", "LOCALAPPDATA")
        ]
        return [Path(root) / suffix for suffix in _WINDOWS_SUFFIXES for root in roots if root]
    if platform == "darwin":
        home = environ.get("HOME")
        paths = [Path(p) for p in _MAC_PATHS]
        if home:
            paths += [Path(home) / p.lstrip("/") for p in _MAC_PATHS]
        return paths
    return [Path(p) for p in _LINUX_PATHS]


def _is_executable(path: Path) -> bool:
    try:
        return path.is_file() and os.access(path, os.X_OK)
    except OSError:
        return False


class BrowserProbe:
    """
    Locates a Chrome/Chromium/Edge executable usable for headless PDF printing.

    Lookup order (first hit wins):
      1. Explicit override (constructor argument, then $CHROME / $CHROME_PATH)
      2. Platform-conventional install paths
      3. Executable names on PATH

    Absence is a normal answer: the probe returns None/False and never raises.
    """

    def __init__(
        self,
        override: str | Path | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> None:
        self._override = override
        self._environ = environ if environ is not None else os.environ
        self._platform = platform or sys.platform

    def is_available(self) -> bool:
        return self.find_browser() is not None

    def find_browser(self) -> Path | None:
        for candidate in self._override_candidates():
            if _is_executable(candidate):
                logger.debug("Browser override resolved to %s", candidate)
                return candidate
            logger.debug("Ignoring browser override %s: not an executable file", candidate)

        for candidate in platform_candidates(self._platform, self._environ):
            if _is_executable(candidate):
                logger.debug("Found browser at %s", candidate)
                return candidate

        for name in EXECUTABLE_NAMES:
            found = shutil.which(name)
            if found:
                logger.debug("Found browser %s on PATH at %s", name, found)
                return Path(found)
        return None

    def _override_candidates(self) -> Iterator[Path]:
        values = [self._override] + [self._environ.get(var) for var in ENV_OVERRIDES]
        for value in values:
            if not value or not str(value).strip():
                continue
            path = Path(str(value).strip()).expanduser()
            if not _is_executable(path) and path.name == str(value).strip():
                # bare executable name, e.g. CHROME=chromium
                found = shutil.which(path.name)
                if found:
                    path = Path(found)
            yield path
