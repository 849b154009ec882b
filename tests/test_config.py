from pathlib import Path

import pytest
from pydantic import ValidationError

from htmltojsx.config import ConverterConfig, apply_overrides, load_config


def test_defaults() -> None:
    config = ConverterConfig()
    assert config.create_scaffold is False
    assert config.scaffold_name is None
    assert config.indent_unit == "  "
    assert config.container_tag == "div"


def test_accepts_camel_case_aliases() -> None:
    config = ConverterConfig.model_validate(
        {
            "createScaffold": True,
            "scaffoldName": "Foo",
            "indentUnit": "    ",
            "containerTagForWrapping": "section",
        }
    )
    assert config.create_scaffold is True
    assert config.scaffold_name == "Foo"
    assert config.indent_unit == "    "
    assert config.container_tag == "section"


def test_rejects_empty_indent() -> None:
    with pytest.raises(ValidationError):
        ConverterConfig(indent_unit="")


def test_config_is_frozen() -> None:
    config = ConverterConfig()
    with pytest.raises(ValidationError):
        config.indent_unit = "\t"  # type: ignore[misc]


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "htmltojsx.yaml"
    path.write_text("createScaffold: true\nscaffoldName: Widget\nindentUnit: \"\\t\"\n", encoding="utf-8")

    config = load_config(path)
    assert config.create_scaffold is True
    assert config.scaffold_name == "Widget"
    assert config.indent_unit == "\t"


def test_overrides_win_over_file(tmp_path: Path) -> None:
    path = tmp_path / "htmltojsx.yaml"
    path.write_text("containerTagForWrapping: span\nscaffoldName: Widget\n", encoding="utf-8")

    config = load_config(path, container_tag="section", scaffold_name=None)
    assert config.container_tag == "section"
    assert config.scaffold_name == "Widget"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == ConverterConfig()


@pytest.mark.parametrize("content", ["- a\n- b\n", "indentUnit: ''\n", "key: [unclosed\n"])
def test_invalid_config_exits(tmp_path: Path, content: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SystemExit):
        load_config(path)


def test_missing_config_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        load_config(tmp_path / "missing.yaml")


def test_apply_overrides_validates() -> None:
    assert apply_overrides(ConverterConfig()) == ConverterConfig()
    with pytest.raises(ValidationError):
        apply_overrides(ConverterConfig(), container_tag="")
