"""App constants and utilities."""

from .constants import (
    APP_NAME,
    CSS_DARK_VARS,
    CSS_DOCUMENT,
    CSS_LIGHT_VARS,
    DATABASE_FILE,
    DIAGRAM_LANGUAGE,
    DIAGRAM_SOURCE_CLASS,
    HTML_TEMPLATE,
    MERMAID_CDN_URL,
)

__all__ = [
    "APP_NAME",
    "DATABASE_FILE",
    "CSS_LIGHT_VARS",
    "CSS_DARK_VARS",
    "CSS_DOCUMENT",
    "HTML_TEMPLATE",
    "DIAGRAM_LANGUAGE",
    "DIAGRAM_SOURCE_CLASS",
    "MERMAID_CDN_URL",
]
