"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from leypub.core.render import check_template


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "LEYPUB_"


class Settings(BaseModel):
    style:         Optional[str] = Field(default=None, description="Stylesheet used when a document sets none")
    output_dir:    str = Field(default=".", description="Destination directory for directory builds")
    source_suffix: str = Field(default=".ley", pattern=r"^\.\w+$", description="Suffix of Ley source files")
    index:         bool = Field(default=False, description="Write an index page after a directory build")
    index_name:    str = Field(default="index", min_length=1, description="File stem of the index page")
    keep_going:    bool = Field(default=False, description="Skip documents that fail to parse")
    template:      Optional[str] = Field(default=None, description="Path to an alternative page template")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then LEYPUB_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValueError as e:
        raise ValueError(f"Invalid settings: {e}") from e


def read_template(settings: Settings) -> Optional[str]:
    """Return the configured page template text, or None for the built-in one.

    Raises ValueError if the file is unreadable or has fields other than
    title, author, date, style and content (literal braces must be doubled).
    """
    if settings.template is None:
        return None
    try:
        template = Path(settings.template).read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Unable to read template {settings.template}: {e}") from e
    try:
        check_template(template)
    except ValueError as e:
        raise ValueError(f"{e} in {settings.template}") from e
    return template
