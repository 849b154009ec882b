"""Depth-first HTML tree to JSX conversion.

The walker emits each element's opening tag, its children and its closing tag
into a buffer. Indentation depth and the text context (normal or inside a
``<pre>``) are passed down the recursion rather than stored on the converter,
so one ``HtmlToJsx`` instance can serve any number of conversions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from .assemble import SCAFFOLD_DEPTH, assemble_output
from .attributes import map_attribute, map_tag_name
from .config import ConverterConfig, apply_overrides
from .dom_model import Comment, Element, Node, Text, is_whitespace, text_content
from .escaping import TextContext, escape_comment, escape_text, to_js_string
from .io_utils import warn
from .mapping import DEFAULT_TABLES, AttributeTables
from .parsing import clean_input, parse_fragment

PRE_TAG = "pre"
TEXTAREA_TAG = "textarea"
STYLE_TAG = "style"
HOISTED_TAGS = frozenset({TEXTAREA_TAG, STYLE_TAG})


@dataclass
class ConversionState:
    """Output buffer for a single conversion."""

    config: ConverterConfig
    parts: List[str] = field(default_factory=list)

    def write(self, text: str) -> None:
        if text:
            self.parts.append(text)

    def trim_trailing(self, suffix: str) -> None:
        """Drop ``suffix`` from the end of the buffer if the buffer ends with it."""
        tail = ""
        while self.parts and len(tail) < len(suffix):
            tail = self.parts.pop() + tail
        if tail.endswith(suffix):
            tail = tail[: -len(suffix)]
        if tail:
            self.parts.append(tail)

    def getvalue(self) -> str:
        return "".join(self.parts)


def has_single_top_level(root: Element) -> bool:
    """True when the root holds one element and otherwise only blank text."""
    children = root.children
    if len(children) == 1 and isinstance(children[0], Element):
        return True
    found_element = False
    for child in children:
        if isinstance(child, Element):
            if found_element:
                return False
            found_element = True
        elif isinstance(child, Text) and not is_whitespace(child.content):
            return False
    return True


def is_self_closing(node: Element, tag_name: str) -> bool:
    return not node.children or tag_name in HOISTED_TAGS


class HtmlToJsx:
    """Convert HTML markup into JSX source text."""

    def __init__(
        self,
        config: ConverterConfig | None = None,
        tables: AttributeTables = DEFAULT_TABLES,
    ) -> None:
        self.config = config or ConverterConfig()
        self.tables = tables

    def convert(self, html: str) -> str:
        root = parse_fragment(f"\n{clean_input(html)}\n")
        return self.convert_tree(root)

    def convert_tree(self, root: Element) -> str:
        state = ConversionState(self.config)
        if has_single_top_level(root):
            # The single element is returned directly, no wrapper is visited.
            self._traverse(root, state, depth=0, context=TextContext.NORMAL)
        else:
            state.write(self.config.indent_unit * SCAFFOLD_DEPTH)
            wrapper = Element(tag=self.config.container_tag, children=root.children)
            self._visit(wrapper, state, depth=1, context=TextContext.NORMAL)
        return assemble_output(state.getvalue(), self.config)

    def _traverse(self, node: Element, state: ConversionState, depth: int, context: TextContext) -> None:
        for child in node.children:
            self._visit(child, state, depth + 1, context)

    def _visit(self, node: Node, state: ConversionState, depth: int, context: TextContext) -> None:
        if isinstance(node, Element):
            self._visit_element(node, state, depth, context)
        elif isinstance(node, Text):
            state.write(escape_text(node.content, context, indent=self.config.indent_unit, depth=depth))
        elif isinstance(node, Comment):
            state.write(escape_comment(node.content))
        else:
            warn(f"[htmltojsx] skipping unrecognised node kind: {type(node).__name__}")

    def _element_attributes(self, node: Element, tag_name: str) -> List[str]:
        attributes = [
            map_attribute(tag_name, name, value, self.tables) for name, value in node.attributes
        ]
        if tag_name == TEXTAREA_TAG:
            attributes.append(f"defaultValue={{{to_js_string(text_content(node))}}}")
        elif tag_name == STYLE_TAG:
            # Style sheets are full of braces; pass them through untouched.
            css = to_js_string(text_content(node))
            attributes.append(f"dangerouslySetInnerHTML={{{{__html: {css} }}}}")
        return attributes

    def _visit_element(self, node: Element, state: ConversionState, depth: int, context: TextContext) -> None:
        tag_name = map_tag_name(node.tag, self.tables)
        attributes = self._element_attributes(node, tag_name)
        self_closing = is_self_closing(node, tag_name)

        state.write(f"<{tag_name}")
        if attributes:
            state.write(" " + " ".join(attributes))
        if not self_closing:
            state.write(">")

        if tag_name not in HOISTED_TAGS:
            child_context = TextContext.PREFORMATTED if tag_name == PRE_TAG else context
            self._traverse(node, state, depth, child_context)

        state.trim_trailing(self.config.indent_unit)
        if self_closing:
            state.write(" />")
        else:
            state.write(f"</{tag_name}>")


def convert(html: str, config: ConverterConfig | None = None, **options: Any) -> str:
    """Convert ``html`` to JSX; keyword options are ``ConverterConfig`` field names."""
    if options:
        config = apply_overrides(config or ConverterConfig(), **options)
    return HtmlToJsx(config).convert(html)


__all__ = [
    "ConversionState",
    "HtmlToJsx",
    "convert",
    "has_single_top_level",
    "is_self_closing",
]
