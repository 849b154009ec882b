"""Immutable document tree consumed by the JSX converter."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Tuple

FRAGMENT_TAG = "#document-fragment"

NON_WHITESPACE_RE = re.compile(r"\S")


@dataclass(frozen=True)
class Element:
    tag: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["Node", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Comment:
    content: str


Node = Element | Text | Comment


def is_whitespace(text: str) -> bool:
    """True when the text holds nothing but whitespace (or nothing at all)."""
    return NON_WHITESPACE_RE.search(text) is None


def text_content(node: Node) -> str:
    """Concatenate descendant text, skipping comments like DOM ``textContent``."""
    if isinstance(node, Text):
        return node.content
    if isinstance(node, Element):
        return "".join(text_content(child) for child in node.children)
    return ""


def fragment(*children: Node) -> Element:
    return Element(tag=FRAGMENT_TAG, children=tuple(children))
