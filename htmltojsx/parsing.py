"""BeautifulSoup adapter producing the converter's document tree.

Parsing is delegated to ``html.parser`` through BeautifulSoup. The adapter
keeps attribute values as plain strings (no multi-valued ``class`` lists) and
folds bs4's string subclasses into the three node kinds the converter knows.
Doctypes, CDATA sections and processing instructions have no JSX form and are
skipped with a warning.
"""

from __future__ import annotations

import re
from typing import List

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4 import Comment as HtmlComment
from bs4.element import PageElement, PreformattedString

from .dom_model import Comment, Element, Node, Text, fragment
from .io_utils import warn

SCRIPT_RE = re.compile(r"<script([\s\S]*?)</script>", re.IGNORECASE)

# A newline directly after the start tag of these elements is not content.
LEADING_NEWLINE_TAGS = frozenset({"pre", "listing", "textarea"})


def clean_input(html: str) -> str:
    """Trim the markup and drop ``<script>`` blocks before they reach the parser."""
    return SCRIPT_RE.sub("", html.strip())


def _attributes_from_tag(tag: Tag) -> tuple[tuple[str, str], ...]:
    pairs: List[tuple[str, str]] = []
    for name, value in tag.attrs.items():
        if value is None:
            value = ""
        elif isinstance(value, list):
            value = " ".join(value)
        pairs.append((name, str(value)))
    return tuple(pairs)


def _convert_node(element: PageElement, drop_newline: bool) -> Node | None:
    if isinstance(element, Tag):
        children = _convert_children(element, drop_newline)
        if drop_newline and element.name in LEADING_NEWLINE_TAGS:
            children = _drop_leading_newline(children)
        return Element(
            tag=element.name,
            attributes=_attributes_from_tag(element),
            children=children,
        )
    if isinstance(element, HtmlComment):
        return Comment(str(element))
    if isinstance(element, PreformattedString):
        warn(f"[htmltojsx] skipping unrecognised node kind: {type(element).__name__}")
        return None
    if isinstance(element, NavigableString):
        return Text(str(element))
    warn(f"[htmltojsx] skipping unrecognised node kind: {type(element).__name__}")
    return None


def _convert_children(parent: Tag, drop_newline: bool) -> tuple[Node, ...]:
    children: List[Node] = []
    for child in parent.contents:
        node = _convert_node(child, drop_newline)
        if node is not None:
            children.append(node)
    return tuple(children)


def _drop_leading_newline(children: tuple[Node, ...]) -> tuple[Node, ...]:
    if not children or not isinstance(children[0], Text):
        return children
    first = children[0].content
    if not first.startswith("\n"):
        return children
    if first == "\n":
        return children[1:]
    return (Text(first[1:]),) + children[1:]


def parse_fragment(html: str, *, features: str = "html.parser") -> Element:
    """Parse an HTML fragment into an ``Element`` rooted at ``FRAGMENT_TAG``.

    ``features`` names the BeautifulSoup tree builder. The default
    ``html.parser`` builds the tree exactly as the tags are written: it applies
    no implied end tags, so ``<p>a<p>b`` yields nested paragraphs where a
    browser would produce siblings, and ``<html>``/``<body>`` are kept as
    written. Pass ``features="html5lib"`` (when that package is installed) to
    get browser tree construction instead.
    """
    soup = BeautifulSoup(html, features, multi_valued_attributes=None)
    # html5lib already drops the newline after <pre>, <listing> and <textarea>.
    drop_newline = soup.builder.NAME != "html5lib"
    return fragment(*_convert_children(soup, drop_newline))


__all__ = ["clean_input", "parse_fragment"]
