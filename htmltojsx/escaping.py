"""Text and comment escaping for JSX children."""

from __future__ import annotations

import json
import re
from enum import Enum

BRACE_RE = re.compile(r"[{}]")
NEWLINE_INDENT_RE = re.compile(r"\n\s*")
PRE_WHITESPACE_RE = re.compile(r"( {2,}|\n|\t|\{|\})")

TEXT_ENTITIES = (
    ("&", "&amp;"),
    ("\u00a0", "&nbsp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


class TextContext(str, Enum):
    NORMAL = "normal"
    PREFORMATTED = "preformatted"
    SUPPRESSED = "suppressed"


def to_js_string(value: str) -> str:
    """Quote a value as a JavaScript string literal."""
    return json.dumps(value, ensure_ascii=False)


def escape_html_text(text: str) -> str:
    """Escape only the characters HTML text serialization escapes."""
    for char, entity in TEXT_ENTITIES:
        text = text.replace(char, entity)
    return text


def escape_text(
    raw: str,
    context: TextContext = TextContext.NORMAL,
    *,
    indent: str = "  ",
    depth: int = 0,
) -> str:
    """Escape a text node for output as JSX children.

    In normal text, braces become string expressions and every newline is
    re-indented to ``depth`` (plus the two levels a component scaffold adds).
    Preformatted text wraps newlines, tabs, braces and runs of two or more
    spaces in string expressions so JSX whitespace collapsing leaves them
    alone.
    """
    if context is TextContext.SUPPRESSED:
        return ""

    text = escape_html_text(raw)
    if context is TextContext.PREFORMATTED:
        text = text.replace("\r", "")
        return PRE_WHITESPACE_RE.sub(lambda match: "{" + to_js_string(match.group(0)) + "}", text)

    text = BRACE_RE.sub(lambda match: "{'" + match.group(0) + "'}", text)
    if "\n" in text:
        newline = "\n" + indent * (depth + 2)
        text = NEWLINE_INDENT_RE.sub(lambda _match: newline, text)
    return text


def escape_comment(raw: str) -> str:
    return "{/*" + raw.replace("*/", "* /") + "*/}"


__all__ = ["TextContext", "escape_comment", "escape_html_text", "escape_text", "to_js_string"]
