from htmltojsx.escaping import TextContext, escape_comment, escape_text, to_js_string


def test_structural_characters_are_escaped() -> None:
    assert escape_text("a < b & c > d") == "a &lt; b &amp; c &gt; d"
    assert escape_text("café ©") == "café ©"
    assert escape_text("a\u00a0b") == "a&nbsp;b"


def test_normal_text_wraps_braces() -> None:
    assert escape_text("{x}") == "{'{'}x{'}'}"


def test_normal_text_reindents_newlines() -> None:
    assert escape_text("a\n   b", indent="  ", depth=1) == "a\n      b"
    assert escape_text("a\n\n  b", indent="\t", depth=0) == "a\n\t\tb"


def test_preformatted_text_keeps_whitespace() -> None:
    escaped = escape_text("hello\nworld{foo}", TextContext.PREFORMATTED)
    assert escaped == 'hello{"\\n"}world{"{"}foo{"}"}'


def test_preformatted_runs() -> None:
    assert escape_text("a b", TextContext.PREFORMATTED) == "a b"
    assert escape_text("a   b", TextContext.PREFORMATTED) == 'a{"   "}b'
    assert escape_text("a\tb", TextContext.PREFORMATTED) == 'a{"\\t"}b'
    assert escape_text("a\r\nb", TextContext.PREFORMATTED) == 'a{"\\n"}b'
    assert escape_text("x < y", TextContext.PREFORMATTED) == "x &lt; y"


def test_preformatted_is_repeatable() -> None:
    raw = "  indented\n\tline {}"
    assert escape_text(raw, TextContext.PREFORMATTED) == escape_text(raw, TextContext.PREFORMATTED)


def test_suppressed_text_is_dropped() -> None:
    assert escape_text("anything <at> all", TextContext.SUPPRESSED) == ""


def test_comment() -> None:
    assert escape_comment(" hi ") == "{/* hi */}"
    assert escape_comment("a */ b */") == "{/*a * / b * /*/}"


def test_to_js_string() -> None:
    assert to_js_string('say "hi"\n') == '"say \\"hi\\"\\n"'
    assert to_js_string("é") == '"é"'
