"""Extractor settings for looptomd.

Every class marker and numeric constant the extractor relies on lives here so
that exports produced by a newer Loop build can be handled by a YAML override
instead of a code change::

    # loop.yaml
    base_margin_px: 24
    indent_step_px: 24
    skip_class_prefixes: ["fui-", "ms-"]

    settings = load_settings("loop.yaml")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from looptomd.errors import ConfigError


class ExtractorSettings(BaseModel):
    """Markers and constants used to classify nodes of a Loop export."""

    model_config = {"extra": "forbid", "frozen": True}

    # ------------------------------------------------------------------
    # Content roots
    # ------------------------------------------------------------------
    page_frame_class: str = "scriptor-pageFrame"
    fallback_root_tag: str = "main"

    # ------------------------------------------------------------------
    # Skipped chrome
    # ------------------------------------------------------------------
    skip_class_prefixes: tuple[str, ...] = ("fui-",)  # Fluent UI components
    generated_class_marker: str = "___"               # atomic CSS class names
    skip_tags: tuple[str, ...] = ("svg",)

    # ------------------------------------------------------------------
    # Paragraph / title structure
    # ------------------------------------------------------------------
    text_run_class: str = "scriptor-textRun"
    inline_class: str = "scriptor-inline"
    paragraph_class: str = "scriptor-paragraph"
    min_title_length: int = Field(default=3, ge=0)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------
    list_item_class: str = "scriptor-listItem"
    bullet_marker_class: str = "scriptor-listItem-marker-bullet"
    checkbox_marker_class: str = "scriptor-listItem-marker-checkbox"
    checkbox_checked_class: str = "scriptor-listItem-marker-checkbox-checked"
    text_checkbox_marker_class: str = "scriptor-listItem-marker-text-checkbox"
    text_checkbox_checked_class: str = "scriptor-listItem-marker-text-checkbox-checked"

    base_margin_px: int = Field(default=27, ge=0)
    indent_step_px: int = Field(default=27, gt=0)
    indent_width: int = Field(default=2, ge=0)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------
    tree_builder: str = "lxml"

    @field_validator("skip_class_prefixes", "skip_tags", mode="before")
    @classmethod
    def coerce_sequence(cls, v: Any) -> Any:
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("skip_tags", mode="after")
    @classmethod
    def lower_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(tag.lower() for tag in v)


DEFAULT_SETTINGS = ExtractorSettings()


def load_settings(path: str | Path | None = None) -> ExtractorSettings:
    """Load settings from a YAML mapping, merged over the defaults.

    ``None`` returns :data:`DEFAULT_SETTINGS`.  An empty file is allowed.

    Raises:
        ConfigError: if the file is missing, is not valid YAML, is not a
            mapping, or contains unknown keys / out-of-range values.
    """
    if path is None:
        return DEFAULT_SETTINGS

    config_path = Path(path)
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in settings file {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {config_path} must contain a mapping")

    try:
        return ExtractorSettings(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {config_path}: {exc}") from exc
