"""Pydantic configuration for the HTML to JSX converter."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ConverterConfig(BaseModel):
    """Options accepted by ``HtmlToJsx``."""

    create_scaffold: bool = Field(
        False,
        alias="createScaffold",
        description="Wrap the JSX in a React component declaration.",
    )
    scaffold_name: Optional[str] = Field(
        None,
        alias="scaffoldName",
        description="Variable name the component is assigned to, if any.",
    )
    indent_unit: str = Field(
        "  ",
        alias="indentUnit",
        min_length=1,
        description="String used for one level of indentation.",
    )
    container_tag: str = Field(
        "div",
        alias="containerTagForWrapping",
        min_length=1,
        description="Element wrapped around multiple top-level nodes.",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


def load_config(path: Path, **overrides: Any) -> ConverterConfig:
    """Load a YAML config file; keyword overrides win over file values."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise SystemExit(f"Cannot read config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"Config {path} must contain a mapping of options.")

    try:
        config = ConverterConfig.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid config in {path}: {exc}") from exc
    return apply_overrides(config, **overrides)


def apply_overrides(config: ConverterConfig, **overrides: Any) -> ConverterConfig:
    """Return a validated copy of ``config`` with the non-None overrides applied."""
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    return ConverterConfig.model_validate({**config.model_dump(), **updates})


__all__ = ["ConverterConfig", "apply_overrides", "load_config"]
