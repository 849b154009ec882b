from __future__ import annotations

import pytest

from htmltojsx.dom_model import FRAGMENT_TAG, Comment, Element, Text, is_whitespace, text_content
from htmltojsx.parsing import clean_input, parse_fragment


def test_parse_fragment_builds_tree() -> None:
    root = parse_fragment('<DIV class="a b" hidden>x<!-- note --></DIV>')
    assert root == Element(
        tag=FRAGMENT_TAG,
        children=(
            Element(
                tag="div",
                attributes=(("class", "a b"), ("hidden", "")),
                children=(Text("x"), Comment(" note ")),
            ),
        ),
    )


def test_entities_are_decoded() -> None:
    root = parse_fragment("<p>&lt;b&gt; &amp; &copy;</p>")
    assert text_content(root) == "<b> & ©"


def test_newline_after_pre_and_textarea_is_dropped() -> None:
    root = parse_fragment("<pre>\n\nx</pre><textarea>\n</textarea><div>\ny</div>")
    assert root.children == (
        Element("pre", children=(Text("\nx"),)),
        Element("textarea"),
        Element("div", children=(Text("\ny"),)),
    )


def test_html_parser_applies_no_implied_end_tags() -> None:
    root = parse_fragment("<p>a<p>b", features="html.parser")
    assert root.children == (
        Element("p", children=(Text("a"), Element("p", children=(Text("b"),)))),
    )


def test_processing_instruction_is_skipped(capsys: pytest.CaptureFixture[str]) -> None:
    root = parse_fragment("<?xml version='1.0'?><p>x</p>")
    assert root.children == (Element("p", children=(Text("x"),)),)
    assert "unrecognised node kind" in capsys.readouterr().err


def test_clean_input_removes_scripts() -> None:
    html = '  <p>a</p><SCRIPT type="text/javascript">\nalert(1)\n</SCRIPT><p>b</p>\n'
    assert clean_input(html) == "<p>a</p><p>b</p>"


def test_text_content_skips_comments() -> None:
    node = Element("div", children=(Text("a"), Comment("x"), Element("b", children=(Text("c"),))))
    assert text_content(node) == "ac"


def test_is_whitespace() -> None:
    assert is_whitespace("")
    assert is_whitespace(" \n\t")
    assert not is_whitespace(" x ")
