"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCCOMPARE_"


class Settings(BaseModel):
    app_name:         str = "doccompare"
    max_file_size_mb: int = Field(default=10, ge=1, description="Upload size limit per document")
    supported_types:  list[str] = Field(
        default=[".txt", ".md", ".docx", ".pdf"],
        description="Accepted file extensions (lowercase, with leading dot)",
    )
    pairing_policy:   str = Field(default="block", pattern="^(block|window)$", description="block or window")
    pairing_window:   int = Field(default=5, ge=1, description="Lookahead for the window pairing policy")
    log_level:        str = Field(default="WARNING", description="Root logging level for the CLI")

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOCCOMPARE_<FIELD> env vars, then non-None CLI overrides.

    List-valued fields read from the environment are comma-separated.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name, field in Settings.model_fields.items():
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = [v.strip() for v in val.split(",")] if field.annotation == list[str] else val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValueError as e:
        raise ValueError(f"Invalid settings: {e}") from e
