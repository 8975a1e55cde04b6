# mdui/services/markdown_extensions.py
from __future__ import annotations

import re

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

_ITEM_RE = re.compile(r"^(?P<indent> *)(?P<marker>[*+-]|\d+\.)(?P<gap> +)(?P<rest>.*)$")
_HR_RE = re.compile(r"^ {0,3}([*_-])( *\1){2,} *$")


class ListNestingPreprocessor(Preprocessor):
    """
    Re-indents nested list content to the parser's tab length.

    GitHub-style Markdown nests a list under an item as soon as it lines up with the
    item's text (two spaces under ``- a``), while Python-Markdown wants a full tab
    stop. Each nested line is moved to ``tab_length`` per level, keeping whatever
    extra indentation it has past its item's text.
    """

    def run(self, lines: list[str]) -> list[str]:
        tab = self.md.tab_length
        # content column of each open item, outermost first
        open_items: list[int] = []
        after_blank = False
        out = []
        for line in lines:
            if not line.strip():
                out.append(line)
                after_blank = True
                continue

            indent = len(line) - len(line.lstrip(" "))
            level = len(open_items) - 1
            while level >= 0 and indent < open_items[level]:
                level -= 1

            m = _ITEM_RE.match(line)
            if m and not _HR_RE.match(line):
                parent_col = open_items[level] if level >= 0 else 0
                if indent - parent_col < tab:
                    new_indent = tab * (level + 1) if level >= 0 else indent
                    del open_items[level + 1 :]
                    open_items.append(indent + len(m.group("marker")) + len(m.group("gap")))
                    out.append(" " * new_indent + line[indent:])
                    after_blank = False
                    continue

            if level < 0:
                if after_blank:
                    open_items.clear()
                out.append(line)
            else:
                if after_blank:
                    del open_items[level + 1 :]
                out.append(" " * (tab * (level + 1) + indent - open_items[level]) + line[indent:])
            after_blank = False
        return out


class ListNestingExtension(Extension):
    def extendMarkdown(self, md):
        # after fenced_code (25) and html_block (20) have stashed their blocks
        md.preprocessors.register(ListNestingPreprocessor(md), "list_nesting", 15)


def makeExtension(**kwargs):
    return ListNestingExtension(**kwargs)
