from __future__ import annotations

import re
import secrets
from bisect import bisect_right

from markdown.extensions.attr_list import get_attrs_and_remainder
from markdown.extensions.fenced_code import FencedBlockPreprocessor

from mdui.domain.models import DiagramBlock, ExtractionResult
from mdui.utils.constants import DIAGRAM_LANGUAGE

TOKEN_PREFIX = "mdui-diagram-"

# Fences pair exactly as the renderer's fenced_code preprocessor pairs them.
_FENCE_RE = FencedBlockPreprocessor.FENCED_BLOCK_RE
# Keeps line terminators attached so untouched lines are copied byte-for-byte.
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")
_TAB_LENGTH = 4


def _normalized(lines: list[str]) -> str:
    # Python-Markdown's whitespace normalisation, applied line by line so match
    # offsets map back onto the original lines.
    out = []
    for line in lines:
        text = line.rstrip("\r\n").expandtabs(_TAB_LENGTH)
        out.append("" if not text.strip(" ") else text)
    return "\n".join(out)


def _fence_language(m: re.Match) -> str | None:
    """Language of a fence match, or None when fenced_code would skip the match."""
    if m.group("attrs"):
        attrs, remainder = get_attrs_and_remainder(m.group("attrs"))
        if remainder:
            return None
        classes = [v for k, v in attrs if k == "."]
        return classes[0] if classes else ""
    return m.group("lang") or ""


def _inner_source(lines: list[str]) -> str:
    source = "".join(lines)
    for eol in ("\r\n", "\n", "\r"):
        if source.endswith(eol):
            return source[: -len(eol)]
    return source


def _new_nonce(text: str) -> str:
    # Regenerate until the run id is absent from the input, so no marker can
    # coincide with user-authored text.
    while True:
        nonce = secrets.token_hex(4)
        if nonce not in text:
            return nonce


def _fenced_spans(lines: list[str], language: str) -> list[tuple[int, int]]:
    """First and last line index of every ``language`` block, in encounter order."""
    text = _normalized(lines)
    starts = [0]
    for line in text.split("\n")[:-1]:
        starts.append(starts[-1] + len(line) + 1)

    spans = []
    index = 0
    while True:
        m = _FENCE_RE.search(text, index)
        if not m:
            return spans
        lang = _fence_language(m)
        if lang is None:
            index = m.end("attrs")
            continue
        index = m.end()
        if lang.lower() == language:
            first = bisect_right(starts, m.start()) - 1
            last = bisect_right(starts, m.end()) - 1
            spans.append((first, last))


def extract_diagram_blocks(
    markdown_text: str, language: str = DIAGRAM_LANGUAGE
) -> ExtractionResult:
    """
    Replace every fenced ``language`` block with a placeholder marker.

    A fence opens at column 0 and closes only at the identical delimiter string,
    the rule Python-Markdown's fenced_code applies when the text is rendered.
    Ordinary code fences are skipped whole, so a diagram fence inside one stays
    literal. Indented fences and unterminated fences are left as text.
    """
    lines = _LINE_RE.findall(markdown_text)
    spans = _fenced_spans(lines, language.lower())
    if not spans:
        return ExtractionResult(markdown=markdown_text, blocks=())

    nonce = _new_nonce(markdown_text)
    out: list[str] = []
    blocks: list[DiagramBlock] = []
    i = 0
    for first, last in spans:
        out.extend(lines[i:first])
        ordinal = len(blocks)
        block = DiagramBlock(
            token=f"{TOKEN_PREFIX}{nonce}-{ordinal}",
            source=_inner_source(lines[first + 1 : last]),
            ordinal=ordinal,
        )
        blocks.append(block)
        # Blank lines around the marker keep it a standalone raw HTML block.
        out.append(f"\n{block.marker}\n\n")
        i = last + 1
    out.extend(lines[i:])
    return ExtractionResult(markdown="".join(out), blocks=tuple(blocks))


def run_prefix(token: str) -> str:
    """Token without its ordinal, shared by every block of one extraction run."""
    return token.rsplit("-", 1)[0] + "-"
