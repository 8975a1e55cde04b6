from __future__ import annotations

import logging

from mdui.domain.interfaces import IMarkdownRenderer
from mdui.domain.models import Theme
from mdui.services.diagram_extractor import extract_diagram_blocks
from mdui.services.html_assembler import HtmlAssembler
from mdui.utils.constants import DIAGRAM_LANGUAGE

logger = logging.getLogger(__name__)


class HtmlConversionPipeline:
    """Markdown source -> diagram extraction -> HTML fragment -> standalone HTML document."""

    def __init__(
        self,
        renderer: IMarkdownRenderer,
        assembler: HtmlAssembler,
        *,
        diagram_language: str = DIAGRAM_LANGUAGE,
    ) -> None:
        self.renderer = renderer
        self.assembler = assembler
        self.diagram_language = diagram_language

    def convert(
        self, markdown_text: str, *, title: str = "Untitled", theme: Theme = Theme.LIGHT
    ) -> str:
        extraction = extract_diagram_blocks(markdown_text, self.diagram_language)
        logger.debug("Extracted %d diagram block(s) from %r", len(extraction.blocks), title)
        fragment = self.renderer.to_fragment(extraction.markdown)
        return self.assembler.assemble(fragment, extraction.blocks, theme=theme, title=title)
