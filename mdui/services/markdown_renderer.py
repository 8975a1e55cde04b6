# mdui/services/markdown_renderer.py
from __future__ import annotations

from typing import Any

import markdown

from mdui.domain.interfaces import IMarkdownRenderer

DEFAULT_EXTENSIONS: list[str] = [
    "extra",  # tables, fenced_code (language-* classes), footnotes, def/attr lists
    "sane_lists",
    "pymdownx.tilde",  # ~~strikethrough~~
    "pymdownx.tasklist",  # - [ ] / - [x]
    "pymdownx.magiclink",  # bare URL autolinks
    "mdui.services.markdown_extensions",  # two-space list nesting
]

DEFAULT_EXTENSION_CONFIGS: dict[str, dict[str, Any]] = {
    # GFM has no ~subscript~, only ~~strike~~
    "pymdownx.tilde": {"subscript": False},
    "pymdownx.tasklist": {"custom_checkbox": False, "clickable_checkbox": False},
}


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts Markdown to an HTML body fragment.

    The grammar is permissive: unknown constructs come out as literal text and raw
    inline/block HTML passes through unescaped. Diagram placeholders are plain HTML
    comments to this renderer and are emitted untouched.
    """

    def __init__(
        self,
        extensions: list[str] | None = None,
        extension_configs: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        self.extensions = list(extensions if extensions is not None else DEFAULT_EXTENSIONS)
        self.extension_configs = dict(
            extension_configs if extension_configs is not None else DEFAULT_EXTENSION_CONFIGS
        )

    def to_fragment(self, markdown_text: str) -> str:
        # markdown.markdown() builds a fresh parser per call; parser instances
        # keep state between conversions and must not be shared across exports.
        return markdown.markdown(
            markdown_text,
            extensions=self.extensions,
            extension_configs=self.extension_configs,
            output_format="html",
        )
