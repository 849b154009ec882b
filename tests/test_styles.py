import pytest

from htmltojsx.styles import css_key_to_jsx, parse_style_declarations, style_to_jsx


def test_single_declaration() -> None:
    assert parse_style_declarations("color: red") == {"color": "red"}
    assert style_to_jsx("color: red") == '{"color":"red"}'


def test_reparsing_serialized_declaration_is_stable() -> None:
    first = parse_style_declarations("color: red")
    rebuilt = "; ".join(f"{key}: {value}" for key, value in first.items())
    assert parse_style_declarations(rebuilt) == first == {"color": "red"}


def test_last_duplicate_wins() -> None:
    assert parse_style_declarations("color:red;color:blue") == {"color": "blue"}
    assert style_to_jsx("margin: 0; color: red; margin: 1px") == '{"margin":"1px","color":"red"}'


def test_declaration_without_colon_is_dropped() -> None:
    assert parse_style_declarations("float") == {}
    assert parse_style_declarations("float; color: red;") == {"color": "red"}
    assert parse_style_declarations(": red") == {}


def test_keys_are_lowercased_values_verbatim() -> None:
    assert parse_style_declarations("  COLOR :  Red  ") == {"color": "Red"}
    assert parse_style_declarations("background: url(http://x/y.png)") == {
        "background": "url(http://x/y.png)"
    }


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("padding-left", "paddingLeft"),
        ("border-top-left-radius", "borderTopLeftRadius"),
        ("-ms-transform", "msTransform"),
        ("-moz-hyphens", "MozHyphens"),
        ("-webkit-flex", "WebkitFlex"),
        ("color", "color"),
        ("--main-color", "--main-color"),
    ],
)
def test_css_key_to_jsx(key: str, expected: str) -> None:
    assert css_key_to_jsx(key) == expected


def test_values_are_quoted_as_string_literals() -> None:
    assert style_to_jsx('font-family: "Roboto Slab"; width: 10px') == (
        '{"fontFamily":"\\"Roboto Slab\\"","width":"10px"}'
    )


def test_empty_style() -> None:
    assert style_to_jsx("") == "{}"
