"""Typed generator configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import ujson as json
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


class GeneratorConfig(BaseModel):
    """Options for a generation run."""

    name: str = Field(default="Foo", min_length=1)
    # Accepted for compatibility with the command line; nothing reads it.
    package: str = Field(default="main", alias="pkg")
    dialect: str = "cpp"
    infer_integers: bool = True
    indent: str = "\t"

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    @field_validator("indent")
    @classmethod
    def whitespace_indent(cls, value: str) -> str:
        if value and not value.isspace():
            raise ValueError("indent must consist of whitespace")
        return value


def load_generator_config(path: str | Path) -> GeneratorConfig:
    """Load a config from YAML or JSON."""
    path = Path(path)
    data: Any
    text = path.read_text()
    if path.suffix in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config {path}: expected a mapping")
    try:
        return GeneratorConfig(**data)
    except ValidationError as exc:
        raise ValueError(f"Invalid config {path}") from exc


def save_generator_config(config: GeneratorConfig, path: str | Path) -> None:
    """Persist a config as YAML or JSON based on file suffix."""
    path = Path(path)
    if path.suffix in {".yaml", ".yml"}:
        path.write_text(yaml.safe_dump(config.model_dump(mode="python"), sort_keys=False))
    else:
        path.write_text(json.dumps(config.model_dump(mode="python"), indent=2))
