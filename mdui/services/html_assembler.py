from __future__ import annotations

import html
import json
import logging
import re
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from mdui.domain.errors import ExtractionDefect
from mdui.domain.models import DiagramBlock, Theme
from mdui.services.diagram_extractor import run_prefix
from mdui.utils.constants import (
    CSS_DARK_VARS,
    CSS_DOCUMENT,
    CSS_LIGHT_VARS,
    DIAGRAM_BOOTSTRAP_JS,
    DIAGRAM_SOURCE_CLASS,
    HTML_TEMPLATE,
    MERMAID_CDN_URL,
)

logger = logging.getLogger(__name__)

LOCAL_RUNTIME_CANDIDATES: tuple[Path, ...] = (
    Path("/usr/share/javascript/mermaid/mermaid.min.js"),
    Path("/usr/share/nodejs/mermaid/dist/mermaid.min.js"),
)


@dataclass(frozen=True)
class DiagramRuntime:
    """Where the diagram runtime comes from: a script URL, or script text embedded inline."""

    src: str | None = None
    inline: str | None = None

    @classmethod
    def remote(cls, url: str = MERMAID_CDN_URL) -> DiagramRuntime:
        return cls(src=url)

    @classmethod
    def from_file(cls, path: Path) -> DiagramRuntime:
        # Embedded rather than linked: a page loaded from memory cannot fetch file:// URLs.
        return cls(inline=path.read_text(encoding="utf-8"))

    def script_tag(self) -> str:
        if self.inline is not None:
            body = self.inline.replace("</script", "<\\/script")
            return f"<script>{body}</script>"
        return f'<script src="{html.escape(self.src or MERMAID_CDN_URL)}"></script>'


def resolve_diagram_runtime(configured: str | None = None) -> DiagramRuntime:
    """
    Pick the diagram runtime.

    Order: configured URL or file, then well-known local installs, then the CDN build.
    """
    value = (configured or "").strip()
    if value:
        if "://" in value:
            return DiagramRuntime.remote(value)
        path = Path(value).expanduser()
        if path.is_file():
            return DiagramRuntime.from_file(path)
        logger.warning("Configured diagram runtime %s not found; falling back", path)

    for candidate in LOCAL_RUNTIME_CANDIDATES:
        if candidate.is_file():
            logger.debug("Using local diagram runtime %s", candidate)
            return DiagramRuntime.from_file(candidate)

    return DiagramRuntime.remote()


class HtmlAssembler:
    """Wraps an HTML fragment into a standalone document and restores diagram blocks."""

    def __init__(self, runtime: DiagramRuntime | None = None) -> None:
        self.runtime = runtime or DiagramRuntime.remote()

    def assemble(
        self,
        fragment: str,
        blocks: Sequence[DiagramBlock],
        *,
        theme: Theme = Theme.LIGHT,
        title: str = "Untitled",
    ) -> str:
        body = self.restore_diagrams(fragment, blocks)
        css = (CSS_DARK_VARS if theme is Theme.DARK else CSS_LIGHT_VARS) + CSS_DOCUMENT
        return HTML_TEMPLATE.format(
            theme=theme.value,
            title=html.escape(title),
            css=css,
            body=body,
            scripts=self._scripts(theme),
        )

    def restore_diagrams(self, fragment: str, blocks: Sequence[DiagramBlock]) -> str:
        if not blocks:
            return fragment

        by_token = {b.token: b for b in blocks}
        pattern = _marker_pattern(run_prefix(blocks[0].token))
        found = [m.group("a") or m.group("b") for m in pattern.finditer(fragment)]
        if Counter(found) != Counter(b.token for b in blocks):
            raise ExtractionDefect(
                f"Expected {len(by_token)} diagram placeholders, found {len(found)} "
                f"({len(set(found) & set(by_token))} matching)"
            )

        def _replace(m: re.Match[str]) -> str:
            block = by_token[m.group("a") or m.group("b")]
            return f'<pre class="{DIAGRAM_SOURCE_CLASS}">{html.escape(block.source, quote=False)}</pre>'

        return pattern.sub(_replace, fragment)

    def _scripts(self, theme: Theme) -> str:
        mermaid_theme = "dark" if theme is Theme.DARK else "default"
        return (
            f"<script>window.MDUI_DIAGRAM_THEME = {json.dumps(mermaid_theme)};</script>\n"
            f"{self.runtime.script_tag()}\n"
            f"<script>{DIAGRAM_BOOTSTRAP_JS}</script>"
        )


def _marker_pattern(prefix: str) -> re.Pattern[str]:
    token = re.escape(prefix) + r"\d+"
    # A marker the grammar wrapped in a paragraph is replaced together with its <p>.
    return re.compile(rf"<p>\s*<!--(?P<a>{token})-->\s*</p>|<!--(?P<b>{token})-->")
