"""Tag name and attribute conversion for JSX elements."""

from __future__ import annotations

import re

from .mapping import DEFAULT_TABLES, AttributeTables
from .styles import style_to_jsx

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def map_tag_name(raw: str, tables: AttributeTables = DEFAULT_TABLES) -> str:
    name = raw.lower()
    return tables.tag_names.get(name, name)


def is_numeric(value: str | None) -> bool:
    """True when ``value`` is a base-10 integer that round-trips unchanged.

    A leading ``+`` is allowed and kept, since ``{+3}`` is a valid JS expression.
    """
    if value is None or not INTEGER_RE.fullmatch(value):
        return False
    unsigned = value[1:] if value.startswith("+") else value
    return str(int(value)) == unsigned


def map_attribute_name(tag_name: str, name: str, tables: AttributeTables = DEFAULT_TABLES) -> str:
    element_table = tables.element_attributes.get(tag_name.lower())
    if element_table and name in element_table:
        return element_table[name]
    return tables.attributes.get(name, name)


def map_attribute(
    tag_name: str,
    name: str,
    value: str | None,
    tables: AttributeTables = DEFAULT_TABLES,
) -> str:
    """Render one HTML attribute as a JSX attribute token.

    Integers are emitted as expressions (``maxLength={2}``), other values as
    string literals with ``"`` written as ``&quot;``. Empty and value-less
    attributes collapse into a bare ``name``.
    """
    if name == "style":
        return f"style={{{style_to_jsx(value or '')}}}"

    jsx_name = map_attribute_name(tag_name, name, tables)
    if is_numeric(value):
        return f"{jsx_name}={{{value}}}"
    if value:
        escaped = value.replace('"', "&quot;")
        return f'{jsx_name}="{escaped}"'
    return jsx_name


__all__ = ["is_numeric", "map_attribute", "map_attribute_name", "map_tag_name"]
