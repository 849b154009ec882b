"""HTML to JSX conversion."""

from .config import ConverterConfig, load_config
from .converter import HtmlToJsx, convert
from .dom_model import Comment, Element, Node, Text
from .mapping import DEFAULT_TABLES, AttributeTables, build_attribute_tables
from .parsing import parse_fragment

__all__ = [
    "AttributeTables",
    "Comment",
    "ConverterConfig",
    "DEFAULT_TABLES",
    "Element",
    "HtmlToJsx",
    "Node",
    "Text",
    "build_attribute_tables",
    "convert",
    "load_config",
    "parse_fragment",
]
