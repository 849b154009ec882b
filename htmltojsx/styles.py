"""Inline ``style`` attribute parsing."""

from __future__ import annotations

import json
import re
from typing import Dict

HYPHEN_RE = re.compile(r"-(.)")


def hyphen_to_camel_case(text: str) -> str:
    return HYPHEN_RE.sub(lambda match: match.group(1).upper(), text)


def css_key_to_jsx(key: str) -> str:
    """Convert a CSS property name into a React style key.

    ``-ms-`` is the one vendor prefix React expects in lower case, so only its
    leading hyphen is dropped: ``-ms-transform`` becomes ``msTransform`` while
    ``-webkit-flex`` becomes ``WebkitFlex``. Custom properties keep their name.
    """
    if key.startswith("--"):
        return key
    if key.startswith("-ms-"):
        return hyphen_to_camel_case(key[1:])
    return hyphen_to_camel_case(key)


def parse_style_declarations(raw_style: str) -> Dict[str, str]:
    """Split a style attribute into ``property -> value`` pairs.

    Declarations without a colon are dropped. A repeated property keeps the
    last value seen.
    """
    declarations: Dict[str, str] = {}
    for candidate in raw_style.split(";"):
        declaration = candidate.strip()
        key, colon, value = declaration.partition(":")
        if not colon:
            continue
        key = key.strip().lower()
        if not key:
            continue
        declarations[key] = value.strip()
    return declarations


def style_to_jsx(raw_style: str) -> str:
    """Render a style attribute as a JSX object literal, e.g. ``{"color":"red"}``."""
    declarations = parse_style_declarations(raw_style)
    jsx_styles = {css_key_to_jsx(key): value for key, value in declarations.items()}
    return json.dumps(jsx_styles, ensure_ascii=False, separators=(",", ":"))


__all__ = ["css_key_to_jsx", "hyphen_to_camel_case", "parse_style_declarations", "style_to_jsx"]
