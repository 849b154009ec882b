from htmltojsx.assemble import assemble_output, strip_scaffold_indent
from htmltojsx.config import ConverterConfig


def test_strip_scaffold_indent_removes_three_units() -> None:
    assert strip_scaffold_indent("a\n      b\n    c\n        d", "  ") == "a\nb\n    c\n  d"


def test_plain_output_is_trimmed() -> None:
    body = "\n      <div>\n        <p />\n      </div>\n      "
    assert assemble_output(body, ConverterConfig()) == "<div>\n  <p />\n</div>"


def test_scaffold_uses_configured_indent() -> None:
    config = ConverterConfig(create_scaffold=True, scaffold_name="Card", indent_unit="\t")
    assert assemble_output("\t\t\t<p />\n", config) == (
        "var Card = React.createClass({\n"
        "\trender: function() {\n"
        "\t\treturn (\n"
        "\t\t\t<p />\n"
        "\t\t);\n"
        "\t}\n"
        "});"
    )


def test_scaffold_with_empty_body() -> None:
    config = ConverterConfig(create_scaffold=True)
    assert assemble_output("\n\n", config) == (
        "React.createClass({\n  render: function() {\n    return (\n    );\n  }\n});"
    )
