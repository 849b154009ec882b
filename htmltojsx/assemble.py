"""Final assembly of converter output, with or without a component scaffold."""

from __future__ import annotations

from jinja2 import Environment, StrictUndefined

from .config import ConverterConfig

# Lines of the traversal buffer carry this many indent units, the depth of the
# ``return (`` body inside the scaffold.
SCAFFOLD_DEPTH = 3

_ENV = Environment(
    autoescape=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)

SCAFFOLD_OPEN = _ENV.from_string(
    "{% if name %}var {{ name }} = {% endif %}React.createClass({\n"
    "{{ indent }}render: function() {\n"
    "{{ indent }}{{ indent }}return (\n"
)

SCAFFOLD_CLOSE = _ENV.from_string(
    "{{ indent }}{{ indent }});\n"
    "{{ indent }}}\n"
    "});"
)


def strip_scaffold_indent(text: str, indent: str) -> str:
    """Remove the scaffold's indentation from every continuation line."""
    return text.replace("\n" + indent * SCAFFOLD_DEPTH, "\n")


def assemble_output(body: str, config: ConverterConfig) -> str:
    if config.create_scaffold:
        context = {"name": config.scaffold_name, "indent": config.indent_unit}
        opened = SCAFFOLD_OPEN.render(context) + body
        return opened.rstrip() + "\n" + SCAFFOLD_CLOSE.render(context)
    return strip_scaffold_indent(body.strip(), config.indent_unit)


__all__ = ["SCAFFOLD_DEPTH", "assemble_output", "strip_scaffold_indent"]
